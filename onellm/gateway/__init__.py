"""Gateway transmission layer."""

from .client import build_headers, send_request

__all__ = ["send_request", "build_headers"]
