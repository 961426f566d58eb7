"""Blocking gateway call: serialize, POST once, decode.

Purpose:
    Implement the single transmission operation for a request envelope. The
    function is deliberately thin: it owns credential resolution, header
    construction, error normalization and structured logging, and delegates
    the wire work to a :class:`~onellm.base.http.Transport`.

Failure semantics (nothing is retried):
    - ``AuthenticationError``: no credential argument and no usable
      ``ONELLM_API_KEY``.
    - ``SerializationError``: the envelope cannot be converted to JSON.
    - ``TransportError``: the call did not complete; ``sent`` tells whether
      the request may have reached the gateway.
    - ``DecodeError``: the body is malformed or lacks ``output.content``.
    A decoded response with a non-2xx ``code`` is returned normally.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional

from ..base.errors import (
    AuthenticationError,
    GatewayError,
    TransportError,
    classify_exception,
    was_request_sent,
)
from ..base.http import HttpxTransport, Transport
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import APIInput, APIResponse, ProviderFamily
from ..base.models_parts.api_input import GEMINI_FIELDS
from ..config import GatewayConfig, get_gateway_config
from ..config.env import resolve_api_key

_logger = get_logger("onellm.gateway")


def build_headers(api_key: str) -> Dict[str, str]:
    """Headers required by the gateway on every request."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def _log_shape_mismatch(envelope: APIInput, ctx: LogContext) -> None:
    if envelope.model.family is ProviderFamily.GEMINI:
        return
    foreign = [name for name in GEMINI_FIELDS if getattr(envelope, name) is not None]
    if foreign:
        log_event(_logger, "envelope.shape_mismatch", ctx, level=logging.DEBUG, fields_ignored=foreign)


def send_request(
    envelope: APIInput,
    api_key: Optional[str] = None,
    *,
    transport: Optional[Transport] = None,
    config: Optional[GatewayConfig] = None,
) -> APIResponse:
    """Transmit ``envelope`` to the gateway and decode the unified reply.

    Parameters:
        envelope: The request to send. It is only read.
        api_key: Bearer credential. Falls back to ``ONELLM_API_KEY``.
        transport: POST implementation; defaults to :class:`HttpxTransport`.
        config: Gateway URL and timeout; defaults to
            :func:`get_gateway_config`.

    Returns:
        The decoded :class:`APIResponse`.
    """
    cfg = config or get_gateway_config()
    ctx = LogContext(model=envelope.model.value, endpoint=envelope.endpoint)

    key, _source = resolve_api_key(api_key)
    if not key:
        error = AuthenticationError(message="missing_api_key", model=envelope.model.value)
        log_event(_logger, "gateway.error", ctx, level=logging.ERROR, error_code=error.code.value, sent=False)
        raise error

    _log_shape_mismatch(envelope, ctx)
    body = envelope.to_json()
    log_event(
        _logger,
        "gateway.request",
        ctx,
        url=cfg.base_url,
        timeout_s=cfg.timeout_seconds,
        optional_fields=envelope.present_optional_fields(),
        body_bytes=len(body),
    )

    t0 = time.perf_counter()
    try:
        raw = (transport or HttpxTransport()).post(cfg.base_url, body, build_headers(key), cfg.timeout_seconds)
    except GatewayError:
        raise
    except Exception as e:
        code = classify_exception(e)
        sent = was_request_sent(e)
        log_event(_logger, "gateway.error", ctx, level=logging.ERROR, error_code=code.value, sent=sent, error=str(e))
        raise TransportError(
            message=f"request failed: {e}",
            code=code,
            model=envelope.model.value,
            raw=e,
            sent=sent,
        ) from e
    latency_ms = (time.perf_counter() - t0) * 1000.0

    try:
        response = APIResponse.from_json(raw)
    except GatewayError as e:
        e.model = envelope.model.value
        log_event(_logger, "gateway.error", ctx, level=logging.ERROR, error_code=e.code.value, sent=True, body_bytes=len(raw))
        raise

    usage = response.output.usage
    log_event(
        _logger,
        "gateway.response",
        ctx,
        code=response.code,
        latency_ms=round(latency_ms, 2),
        finish_reason=response.output.finish_reason,
        tokens=usage.model_dump(exclude_none=True) if usage else None,
    )
    return response


__all__ = ["send_request", "build_headers"]
