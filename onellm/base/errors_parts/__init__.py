"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `onellm.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .gateway_error import (
    AuthenticationError,
    DecodeError,
    GatewayError,
    SerializationError,
    TransportError,
    UnknownModelError,
)
from .classification import classify_exception, was_request_sent

__all__ = [
    "ErrorCode",
    "GatewayError",
    "SerializationError",
    "AuthenticationError",
    "TransportError",
    "DecodeError",
    "UnknownModelError",
    "classify_exception",
    "was_request_sent",
]
