"""
Gemini-style request controls.

`SafetySetting` and `GenerationConfig` are only meaningful to Gemini-like
providers. A `GenerationConfig` bundles the sampling controls those providers
take instead of the envelope's top-level ``temperature``/``top_p``/``top_k``
fields; once set, all of its keys are emitted.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SafetySetting(BaseModel):
    """A (category, threshold) pair, e.g. ``HARM_CATEGORY_HARASSMENT`` / ``BLOCK_NONE``."""

    model_config = ConfigDict(extra="forbid")

    category: str
    threshold: str


class GenerationConfig(BaseModel):
    """Sampling controls for Gemini-like providers."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    temperature: float = 1.0
    top_p: float = 1.0
    top_k: int = Field(default=0, ge=0)
    candidate_count: int = Field(default=1, ge=0)
    max_output_tokens: int = Field(default=0, ge=0)
    stop_sequences: List[str] = Field(default_factory=list)


__all__ = [
    "SafetySetting",
    "GenerationConfig",
]
