"""Unified configuration layer for the gateway client.

Goals
-----
* Centralize defaults (gateway URL, request timeout).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (``onellm.config.defaults``)
    2. Environment variables (``ONELLM_BASE_URL``, ``ONELLM_TIMEOUT_SECONDS``)
    3. In-code overrides passed to :func:`get_gateway_config`
* Provide a single call site returning an immutable ``GatewayConfig``.

Credentials are not part of ``GatewayConfig``; they are supplied per call or
resolved through :func:`onellm.config.env.resolve_api_key`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .defaults import GATEWAY_DEFAULT_TIMEOUT_SECONDS, GATEWAY_DEFAULT_URL
from .env import ENV_BASE_URL, ENV_TIMEOUT_SECONDS, is_placeholder, resolve_api_key


@dataclass(frozen=True)
class GatewayConfig:
    """Resolved gateway settings.

    Attributes:
        base_url: Absolute URL the envelope is POSTed to.
        timeout_seconds: Bound on the blocking call, covering connect and read.
    """

    base_url: str = GATEWAY_DEFAULT_URL
    timeout_seconds: float = GATEWAY_DEFAULT_TIMEOUT_SECONDS


def _parse_positive_float(raw: Any, default: float) -> float:
    """Return ``raw`` as a positive float, or ``default`` when unusable."""
    if raw is None or raw == "":
        return default
    try:
        val = float(raw)
    except (TypeError, ValueError):
        return default
    return val if val > 0 else default


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    base_url = os.getenv(ENV_BASE_URL)
    if base_url and not is_placeholder(base_url):
        out["base_url"] = base_url.strip()
    timeout = os.getenv(ENV_TIMEOUT_SECONDS)
    if timeout:
        out["timeout_seconds"] = timeout
    return out


def get_gateway_config(overrides: Optional[Dict[str, Any]] = None) -> GatewayConfig:
    """Return merged gateway configuration.

    Merge order (later wins): defaults -> env vars -> overrides. ``None``
    values in ``overrides`` are ignored. Invalid or non-positive timeouts
    fall back to the default.
    """
    cfg: Dict[str, Any] = {
        "base_url": GATEWAY_DEFAULT_URL,
        "timeout_seconds": GATEWAY_DEFAULT_TIMEOUT_SECONDS,
    }
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None and k in cfg}
    return GatewayConfig(
        base_url=str(cfg["base_url"]),
        timeout_seconds=_parse_positive_float(cfg["timeout_seconds"], GATEWAY_DEFAULT_TIMEOUT_SECONDS),
    )


__all__ = [
    "GatewayConfig",
    "get_gateway_config",
    "resolve_api_key",
]
