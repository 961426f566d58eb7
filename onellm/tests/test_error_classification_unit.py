from __future__ import annotations

import socket

import httpx
import pytest

from onellm.base.errors import (
    AuthenticationError,
    DecodeError,
    ErrorCode,
    GatewayError,
    SerializationError,
    TransportError,
    UnknownModelError,
    classify_exception,
    was_request_sent,
)


def test_classify_gateway_error_passthrough():
    e = AuthenticationError(message="nope", model="GPT-4.1")
    assert classify_exception(e) is ErrorCode.AUTH


@pytest.mark.parametrize(
    "exc,code",
    [
        (httpx.ConnectTimeout("slow connect"), ErrorCode.TIMEOUT),
        (httpx.ReadTimeout("slow read"), ErrorCode.TIMEOUT),
        (httpx.PoolTimeout("pool"), ErrorCode.TIMEOUT),
        (httpx.ConnectError("refused"), ErrorCode.UNAVAILABLE),
        (httpx.ProxyError("proxy down"), ErrorCode.UNAVAILABLE),
        (httpx.UnsupportedProtocol("ftp"), ErrorCode.VALIDATION),
        (httpx.RemoteProtocolError("peer closed"), ErrorCode.TRANSIENT),
        (httpx.ReadError("reset"), ErrorCode.TRANSIENT),
        (TimeoutError(), ErrorCode.TIMEOUT),
        (ConnectionRefusedError(), ErrorCode.UNAVAILABLE),
        (socket.gaierror("no such host"), ErrorCode.UNAVAILABLE),
        (ConnectionResetError(), ErrorCode.TRANSIENT),
        (ValueError("random"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, code):
    assert classify_exception(exc) is code


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectTimeout("x"),
        httpx.ConnectError("x"),
        httpx.PoolTimeout("x"),
        httpx.UnsupportedProtocol("x"),
        ConnectionRefusedError(),
        socket.gaierror(),
    ],
)
def test_failures_before_write_are_not_sent(exc):
    assert was_request_sent(exc) is False


@pytest.mark.parametrize(
    "exc",
    [httpx.ReadTimeout("x"), httpx.WriteTimeout("x"), httpx.RemoteProtocolError("x"), RuntimeError("x")],
)
def test_ambiguous_failures_count_as_sent(exc):
    assert was_request_sent(exc) is True


def test_subclass_default_codes():
    assert SerializationError(message="m").code is ErrorCode.SERIALIZATION
    assert DecodeError(message="m").code is ErrorCode.DECODE
    assert TransportError(message="m").code is ErrorCode.TRANSIENT
    assert TransportError(message="m").sent is False
    assert UnknownModelError(message="m").code is ErrorCode.UNKNOWN_MODEL


def test_errors_are_exceptions_with_readable_str():
    err = TransportError(message="boom", code=ErrorCode.TIMEOUT, model="Sonnet-4", sent=True)
    assert isinstance(err, GatewayError)
    assert isinstance(err, Exception)
    assert str(err) == "Sonnet-4 timeout: boom"
    assert str(GatewayError(message="bare")) == "- unknown: bare"
    # usable in sets and as dict keys
    assert len({err, err}) == 1
