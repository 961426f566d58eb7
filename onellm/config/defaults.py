"""onellm.config.defaults
======================

Central place for the small, stable default values used across the onellm
package. Environment variables and explicit overrides take precedence (see
:func:`onellm.config.get_gateway_config`); these constants are the fallback.

Only plain constants live here so that every layer can import this module
without creating cycles.
"""

from __future__ import annotations

# ---- Gateway ----
# Fixed unified gateway endpoint receiving every envelope.
GATEWAY_DEFAULT_URL = "https://onellm.dev/api"
# Bound on the single blocking POST (seconds).
GATEWAY_DEFAULT_TIMEOUT_SECONDS = 30.0


# ---- Envelope defaults ----
DEFAULT_TEMPERATURE = 1.0
DEFAULT_TOP_P = 1.0
DEFAULT_STREAM = False


__all__ = [
    "GATEWAY_DEFAULT_URL",
    "GATEWAY_DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
    "DEFAULT_STREAM",
]
