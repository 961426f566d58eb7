"""
Model identifiers accepted by the gateway.

`ModelId` is a closed, string-valued enumeration: each member's value is the
literal model name the gateway routes on. Every member belongs to exactly one
`ProviderFamily`; the family decides which optional envelope fields the
gateway will honor, but nothing in this package enforces that pairing.

The Price Table in :mod:`onellm.base.pricing` must list every member.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class ProviderFamily(str, Enum):
    """Groups of models sharing one upstream wire-protocol shape."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    DEEPSEEK = "deepseek"
    GEMINI = "gemini"
    MISTRAL = "mistral"


class ModelId(str, Enum):
    """Supported model names (wire values)."""

    # OpenAI
    GPT_4_1 = "GPT-4.1"
    GPT_4_1_MINI = "GPT-4.1-Mini"
    GPT_4_1_NANO = "GPT-4.1-Nano"
    GPT_O3 = "GPT-o3"
    GPT_O4_MINI = "GPT-o4-mini"
    GPT_O3_PRO = "GPT-o3-pro"
    GPT_4O = "GPT-4o"
    GPT_4O_MINI = "GPT-4o-mini"
    GPT_O1 = "GPT-o1"
    GPT_O3_DEEP_RESEARCH = "GPT-o3-DeepResearch"
    GPT_O3_MINI = "GPT-o3-Mini"
    GPT_O1_MINI = "GPT-o1-Mini"

    # Anthropic
    CLAUDE_OPUS_4 = "Opus-4"
    CLAUDE_SONNET_4 = "Sonnet-4"
    CLAUDE_HAIKU_3_5 = "Haiku-3.5"
    CLAUDE_OPUS_3 = "Opus-3"
    CLAUDE_SONNET_3_7 = "Sonnet-3.7"
    CLAUDE_HAIKU_3 = "Haiku-3"

    # DeepSeek
    DEEPSEEK_R1 = "DeepSeek-Reasoner"
    DEEPSEEK_V3 = "DeepSeek-Chat"

    # Gemini
    GEMINI_2_5_FLASH_PREVIEW = "gemini-2.5-Flash-preview"
    GEMINI_2_5_PRO_PREVIEW = "gemini-2.5-Pro-preview"
    GEMINI_2_0_FLASH = "gemini-2.0-Flash"
    GEMINI_2_0_FLASH_LITE = "gemini-2.0-Flash-lite"
    GEMINI_1_5_FLASH = "gemini-1.5-Flash"
    GEMINI_1_5_FLASH_8B = "gemini-1.5-Flash-8B"
    GEMINI_1_5_PRO = "gemini-1.5-Pro"

    # Mistral
    MISTRAL_MEDIUM_3 = "Mistral-Medium-3"
    MAGISTRAL_MEDIUM = "Magistral-Medium"
    CODESTRAL = "Codestral"
    DEVSTRAL_MEDIUM = "Devstral-Medium"
    MISTRAL_LARGE = "Mistral-Large"
    PIXTRAL_LARGE = "Pixtral-Large"
    MINISTRAL_8B_2410 = "Ministral-8B-24.10"
    MINISTRAL_3B_2410 = "Ministral-3B-24.10"
    MISTRAL_SMALL_3_2 = "Mistral-Small-3.2"
    MAGISTRAL_SMALL = "Magistral-Small"
    DEVSTRAL_SMALL = "Devstral-Small"
    PIXTRAL_12B = "Pixtral-12B"
    MISTRAL_NEMO = "Mistral-NeMo"

    @property
    def family(self) -> ProviderFamily:
        """Return the provider family this model belongs to."""
        return _FAMILY_BY_MODEL[self]

    def __str__(self) -> str:
        return self.value


_FAMILY_MEMBERS: Tuple[Tuple[ProviderFamily, Tuple[ModelId, ...]], ...] = (
    (
        ProviderFamily.OPENAI,
        (
            ModelId.GPT_4_1,
            ModelId.GPT_4_1_MINI,
            ModelId.GPT_4_1_NANO,
            ModelId.GPT_O3,
            ModelId.GPT_O4_MINI,
            ModelId.GPT_O3_PRO,
            ModelId.GPT_4O,
            ModelId.GPT_4O_MINI,
            ModelId.GPT_O1,
            ModelId.GPT_O3_DEEP_RESEARCH,
            ModelId.GPT_O3_MINI,
            ModelId.GPT_O1_MINI,
        ),
    ),
    (
        ProviderFamily.ANTHROPIC,
        (
            ModelId.CLAUDE_OPUS_4,
            ModelId.CLAUDE_SONNET_4,
            ModelId.CLAUDE_HAIKU_3_5,
            ModelId.CLAUDE_OPUS_3,
            ModelId.CLAUDE_SONNET_3_7,
            ModelId.CLAUDE_HAIKU_3,
        ),
    ),
    (ProviderFamily.DEEPSEEK, (ModelId.DEEPSEEK_R1, ModelId.DEEPSEEK_V3)),
    (
        ProviderFamily.GEMINI,
        (
            ModelId.GEMINI_2_5_FLASH_PREVIEW,
            ModelId.GEMINI_2_5_PRO_PREVIEW,
            ModelId.GEMINI_2_0_FLASH,
            ModelId.GEMINI_2_0_FLASH_LITE,
            ModelId.GEMINI_1_5_FLASH,
            ModelId.GEMINI_1_5_FLASH_8B,
            ModelId.GEMINI_1_5_PRO,
        ),
    ),
    (
        ProviderFamily.MISTRAL,
        (
            ModelId.MISTRAL_MEDIUM_3,
            ModelId.MAGISTRAL_MEDIUM,
            ModelId.CODESTRAL,
            ModelId.DEVSTRAL_MEDIUM,
            ModelId.MISTRAL_LARGE,
            ModelId.PIXTRAL_LARGE,
            ModelId.MINISTRAL_8B_2410,
            ModelId.MINISTRAL_3B_2410,
            ModelId.MISTRAL_SMALL_3_2,
            ModelId.MAGISTRAL_SMALL,
            ModelId.DEVSTRAL_SMALL,
            ModelId.PIXTRAL_12B,
            ModelId.MISTRAL_NEMO,
        ),
    ),
)

_FAMILY_BY_MODEL: Dict[ModelId, ProviderFamily] = {
    model: family for family, members in _FAMILY_MEMBERS for model in members
}

if len(_FAMILY_BY_MODEL) != len(ModelId):  # pragma: no cover - guards edits to the lists above
    _missing = sorted(m.value for m in ModelId if m not in _FAMILY_BY_MODEL)
    raise RuntimeError(f"models without a provider family: {_missing}")


__all__ = [
    "ModelId",
    "ProviderFamily",
]
