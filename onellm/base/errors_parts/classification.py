"""
Error classification helpers mapping transport exceptions to ErrorCode values.

The default transport is ``httpx``; its exception hierarchy is mapped first,
followed by the builtin timeout/connection exceptions that custom transports
are likely to raise.
"""
from __future__ import annotations

import socket
from typing import Tuple, Type

import httpx

from .error_code import ErrorCode
from .gateway_error import GatewayError

# Order matters: subclasses before their bases.
_HTTPX_CODE_MAP: Tuple[Tuple[Type[BaseException], ErrorCode], ...] = (
    (httpx.TimeoutException, ErrorCode.TIMEOUT),
    (httpx.ConnectError, ErrorCode.UNAVAILABLE),
    (httpx.UnsupportedProtocol, ErrorCode.VALIDATION),
    (httpx.LocalProtocolError, ErrorCode.VALIDATION),
    (httpx.ProxyError, ErrorCode.UNAVAILABLE),
    (httpx.TransportError, ErrorCode.TRANSIENT),
)

# Failures raised before any request bytes reach the gateway.
_NOT_SENT: Tuple[Type[BaseException], ...] = (
    httpx.ConnectTimeout,
    httpx.PoolTimeout,
    httpx.ConnectError,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
    httpx.ProxyError,
    ConnectionRefusedError,
    socket.gaierror,
)


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. GatewayError passthrough.
        2. httpx exception classes.
        3. Builtin timeouts and connection errors.
        4. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, GatewayError):
        return exc.code
    for exc_type, code in _HTTPX_CODE_MAP:
        if isinstance(exc, exc_type):
            return code
    if isinstance(exc, TimeoutError):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (ConnectionRefusedError, socket.gaierror)):
        return ErrorCode.UNAVAILABLE
    if isinstance(exc, ConnectionError):
        return ErrorCode.TRANSIENT
    return ErrorCode.UNKNOWN


def was_request_sent(exc: BaseException) -> bool:
    """Return False only when ``exc`` proves the request never left the client.

    Anything not known to happen before the write is reported as sent, since
    the gateway may already have processed the request.
    """
    return not isinstance(exc, _NOT_SENT)


__all__ = [
    "classify_exception",
    "was_request_sent",
]
