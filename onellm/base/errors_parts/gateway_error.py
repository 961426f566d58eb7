"""
Structured gateway error exception types.

Every failure surfaced by the envelope, transport, decoding and pricing layers
is a `GatewayError` subclass carrying a normalized `ErrorCode`, so callers can
catch the whole family at once or a single kind precisely. None of them is
retried by this package.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class GatewayError(Exception):
    """Base structured error for gateway interactions.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        model: Optional model identifier associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    model: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        return f"{self.model or '-'} {self.code.value}: {self.message}"


@dataclass(eq=False)
class SerializationError(GatewayError):
    """The envelope could not be converted to its wire document."""

    code: ErrorCode = ErrorCode.SERIALIZATION


@dataclass(eq=False)
class AuthenticationError(GatewayError):
    """No usable credential was supplied or configured."""

    code: ErrorCode = ErrorCode.AUTH


@dataclass(eq=False)
class TransportError(GatewayError):
    """The network call could not complete.

    Attributes:
        sent: ``False`` when the request never left the client (DNS failure,
            refused connection, connect timeout). ``True`` when the request was
            written but no complete reply arrived; the gateway may have
            processed it.
    """

    code: ErrorCode = ErrorCode.TRANSIENT
    sent: bool = False


@dataclass(eq=False)
class DecodeError(GatewayError):
    """The response body is malformed or lacks the mandatory content field.

    The request may have been billed upstream even though the reply could not
    be parsed. ``body`` holds the raw bytes for diagnostics.
    """

    code: ErrorCode = ErrorCode.DECODE
    body: Optional[bytes] = None


@dataclass(eq=False)
class UnknownModelError(GatewayError, LookupError):
    """A price was requested for an identifier with no Price Table entry."""

    code: ErrorCode = ErrorCode.UNKNOWN_MODEL


__all__ = [
    "GatewayError",
    "SerializationError",
    "AuthenticationError",
    "TransportError",
    "DecodeError",
    "UnknownModelError",
]
