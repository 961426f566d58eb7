"""Static model-to-unit-price table.

Prices are unsigned integers in the smallest currency unit per fixed unit of
usage; the scale is a caller convention and is not interpreted here. The
table is hand-curated, immutable after import and safe to read from any
thread.

The table and :class:`~onellm.base.models.ModelId` must stay in lockstep:
:func:`verify_price_table` runs at import time and refuses to load a table
with gaps, unknown keys or non-positive prices.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from .errors import UnknownModelError
from .models_parts.model_id import ModelId

MODEL_PRICES: Mapping[ModelId, int] = MappingProxyType(
    {
        # OpenAI
        ModelId.GPT_4_1: 1040,
        ModelId.GPT_4_1_MINI: 208,
        ModelId.GPT_4_1_NANO: 52,
        ModelId.GPT_O3: 1040,
        ModelId.GPT_O4_MINI: 572,
        ModelId.GPT_O3_PRO: 10400,
        ModelId.GPT_4O: 1300,
        ModelId.GPT_4O_MINI: 78,
        ModelId.GPT_O1: 7800,
        ModelId.GPT_O3_DEEP_RESEARCH: 5200,
        ModelId.GPT_O3_MINI: 572,
        ModelId.GPT_O1_MINI: 572,
        # Anthropic
        ModelId.CLAUDE_OPUS_4: 9360,
        ModelId.CLAUDE_SONNET_4: 1872,
        ModelId.CLAUDE_HAIKU_3_5: 499,
        ModelId.CLAUDE_OPUS_3: 9360,
        ModelId.CLAUDE_SONNET_3_7: 1872,
        ModelId.CLAUDE_HAIKU_3: 182,
        # DeepSeek
        ModelId.DEEPSEEK_R1: 142,
        ModelId.DEEPSEEK_V3: 242,
        # Gemini
        ModelId.GEMINI_2_5_FLASH_PREVIEW: 380,
        ModelId.GEMINI_2_5_PRO_PREVIEW: 1820,
        ModelId.GEMINI_2_0_FLASH: 52,
        ModelId.GEMINI_2_0_FLASH_LITE: 39,
        ModelId.GEMINI_1_5_FLASH: 78,
        ModelId.GEMINI_1_5_FLASH_8B: 39,
        ModelId.GEMINI_1_5_PRO: 1300,
        # Mistral
        ModelId.MISTRAL_MEDIUM_3: 2496,
        ModelId.MAGISTRAL_MEDIUM: 7280,
        ModelId.CODESTRAL: 1248,
        ModelId.DEVSTRAL_MEDIUM: 2496,
        ModelId.MISTRAL_LARGE: 8320,
        ModelId.PIXTRAL_LARGE: 8320,
        ModelId.MINISTRAL_8B_2410: 208,
        ModelId.MINISTRAL_3B_2410: 83,
        ModelId.MISTRAL_SMALL_3_2: 416,
        ModelId.MAGISTRAL_SMALL: 2080,
        ModelId.DEVSTRAL_SMALL: 416,
        ModelId.PIXTRAL_12B: 312,
        ModelId.MISTRAL_NEMO: 312,
    }
)


def verify_price_table(prices: Mapping[object, int] = MODEL_PRICES) -> None:
    """Check that ``prices`` covers exactly the ``ModelId`` members.

    Raises:
        RuntimeError: Listing missing members, unknown keys, or entries that
            are not positive integers.
    """
    expected = set(ModelId)
    keys = set(prices)
    missing = sorted(m.value for m in expected - keys)
    unknown = sorted(str(k) for k in keys - expected)
    bad = sorted(
        str(k) for k, v in prices.items() if isinstance(v, bool) or not isinstance(v, int) or v <= 0
    )
    problems = []
    if missing:
        problems.append(f"missing prices for {missing}")
    if unknown:
        problems.append(f"prices for unknown models {unknown}")
    if bad:
        problems.append(f"non-positive or non-integer prices for {bad}")
    if problems:
        raise RuntimeError("price table out of sync: " + "; ".join(problems))


def get_price(model: Union[ModelId, str]) -> int:
    """Return the unit price for ``model``.

    ``model`` may be a :class:`ModelId` or its wire string (``"GPT-o3-pro"``).

    Raises:
        UnknownModelError: The identifier has no Price Table entry. A missing
            price is never reported as zero.
    """
    try:
        key = model if isinstance(model, ModelId) else ModelId(model)
        return MODEL_PRICES[key]
    except (ValueError, KeyError) as e:
        raise UnknownModelError(message=f"no price for model {model!r}", model=str(model), raw=e) from e


verify_price_table()


__all__ = [
    "MODEL_PRICES",
    "get_price",
    "verify_price_table",
]
