"""
Conversation turn DTOs.

Two shapes coexist because providers disagree on how a turn looks:

* `Message` (role + text content) for OpenAI-, Anthropic-, DeepSeek- and
  Mistral-like providers;
* `Content` (role + ordered text `Part` list) for Gemini-like providers.

Roles are free-form strings (``"user"``, ``"assistant"``, ``"system"``,
``"model"``...); the gateway interprets them. Sequence order is turn order
and is preserved verbatim on the wire.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single chat turn for message-style providers."""

    model_config = ConfigDict(extra="forbid")

    role: str
    content: str


class Part(BaseModel):
    """A text fragment of a Gemini-style turn."""

    model_config = ConfigDict(extra="forbid")

    text: str


class Content(BaseModel):
    """A Gemini-style turn: a role plus ordered text parts."""

    model_config = ConfigDict(extra="forbid")

    role: str
    parts: List[Part] = Field(default_factory=list)

    @classmethod
    def from_text(cls, role: str, *texts: str) -> "Content":
        """Build a turn from plain strings, one `Part` per string."""
        return cls(role=role, parts=[Part(text=t) for t in texts])


__all__ = [
    "Message",
    "Part",
    "Content",
]
