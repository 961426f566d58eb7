"""ResponseFormat DTO: the requested output shape (``"text"``, ``"json_object"``)."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResponseFormat(BaseModel):
    """Declaration of the desired output shape."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., min_length=1)


__all__ = ["ResponseFormat"]
