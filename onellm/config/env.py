"""onellm.config.env
=================

Environment variable names and helpers for gateway credentials and settings.

Purpose
-------
- Single source of truth for the environment variables read by onellm.
- Small helpers to resolve the gateway credential in a consistent way.

Failure Modes
-------------
- Helpers never raise on unset variables; they return ``None`` and let the
  caller decide (the send operation turns a missing key into an
  ``AuthenticationError``).
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

ENV_API_KEY = "ONELLM_API_KEY"  # pragma: allowlist secret - env var name, not a secret
ENV_BASE_URL = "ONELLM_BASE_URL"
ENV_TIMEOUT_SECONDS = "ONELLM_TIMEOUT_SECONDS"
ENV_LOG_LEVEL = "ONELLM_LOG_LEVEL"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def resolve_api_key(explicit: Optional[str] = None) -> Tuple[Optional[str], Optional[str]]:
    """Resolve the gateway credential.

    Parameters
    ----------
    explicit: Optional[str]
        Caller-supplied credential. Wins whenever it is non-empty.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, source)`` where ``source`` is ``"argument"`` or the
        environment variable name used. ``(None, None)`` when nothing usable
        is available; placeholder values in the environment are ignored.
    """
    if explicit:
        return explicit, "argument"
    val = os.environ.get(ENV_API_KEY)
    if val and not is_placeholder(val):
        return val, ENV_API_KEY
    return None, None


__all__ = [
    "ENV_API_KEY",
    "ENV_BASE_URL",
    "ENV_TIMEOUT_SECONDS",
    "ENV_LOG_LEVEL",
    "is_placeholder",
    "resolve_api_key",
]
