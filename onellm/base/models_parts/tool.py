"""
Callable-tool declarations.

The parameter schema is an opaque JSON document: it is neither validated nor
normalized here and reaches the wire exactly as supplied (including any
``None`` values nested inside it).
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Function(BaseModel):
    """Tool function declaration: name, description and parameter schema."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    description: str = ""
    parameters: Dict[str, Any] = Field(default_factory=dict)


class Tool(BaseModel):
    """A tool entry; ``type`` is ``"function"`` for every current provider."""

    model_config = ConfigDict(extra="forbid")

    type: str = "function"
    function: Function

    @classmethod
    def function_tool(cls, name: str, description: str = "", parameters: Dict[str, Any] | None = None) -> "Tool":
        """Shorthand for a ``type="function"`` tool."""
        return cls(function=Function(name=name, description=description, parameters=parameters or {}))


__all__ = [
    "Function",
    "Tool",
]
