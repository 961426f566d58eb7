"""
Normalized gateway error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every `GatewayError`. Values are
lowercase snake_case and are a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"
    TRANSIENT = "transient"
    SERIALIZATION = "serialization"
    DECODE = "decode"
    UNKNOWN_MODEL = "unknown_model"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
