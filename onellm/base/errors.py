"""Unified gateway error taxonomy public surface.

This module re-exports the implementations under
``onellm.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.gateway_error import (
    AuthenticationError,
    DecodeError,
    GatewayError,
    SerializationError,
    TransportError,
    UnknownModelError,
)
from .errors_parts.classification import classify_exception, was_request_sent

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
