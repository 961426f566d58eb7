"""
Unified gateway response DTOs.

The gateway answers every request, whatever provider served it, with::

    {"code": <int>, "output": {"content": <str>, "role"?: <str>,
                               "usage"?: {...}, "finish_reason"?: <str>}}

Optional fields absent from the document decode to ``None`` (never to zero or
an empty string), so "the provider did not report it" stays distinct from a
reported zero. ``content`` is mandatory; a body without it is a decode
failure. A non-2xx ``code`` is ordinary data for the caller to interpret.

This module is pure structural decoding: no cost computation and no
finish-reason interpretation.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import DecodeError


class LlmUsage(BaseModel):
    """Token counts; each may be missing independently."""

    model_config = ConfigDict(extra="ignore")

    input_tokens: Optional[int] = Field(default=None, ge=0)
    output_tokens: Optional[int] = Field(default=None, ge=0)
    total_tokens: Optional[int] = Field(default=None, ge=0)


class LlmUnifiedResponse(BaseModel):
    """Provider-agnostic completion payload."""

    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    content: str
    usage: Optional[LlmUsage] = None
    finish_reason: Optional[str] = None


class APIResponse(BaseModel):
    """Gateway reply: a unified result code and the payload."""

    model_config = ConfigDict(extra="ignore")

    code: int = Field(..., ge=0)
    output: LlmUnifiedResponse

    @classmethod
    def from_json(cls, body: Union[bytes, bytearray, str]) -> "APIResponse":
        """Decode a raw response body.

        Raises:
            DecodeError: The body is not JSON, does not match the unified
                shape, or lacks ``output.content``. ``body`` is attached.
        """
        raw = body.encode("utf-8") if isinstance(body, str) else bytes(body)
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(message=f"failed to decode response: {_summarize(e)}", raw=e, body=raw) from e


def _summarize(exc: ValidationError) -> str:
    """Compact one-line description of the first few validation errors."""
    parts = []
    for err in exc.errors()[:3]:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


__all__ = [
    "APIResponse",
    "LlmUnifiedResponse",
    "LlmUsage",
]
