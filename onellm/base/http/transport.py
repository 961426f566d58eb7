"""Transport boundary for the gateway call.

The gateway client needs exactly one capability from its environment: POST a
body with headers under a bounded timeout and hand back the raw response
bytes. :class:`Transport` states that contract; :class:`HttpxTransport` is
the default implementation on top of the pooled ``httpx`` clients.

Implementations must not retry and must not interpret the HTTP status: the
unified ``code`` inside the decoded body is the caller's success signal.
Network failures are raised as-is; the gateway client classifies them.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

import httpx

from .client import get_httpx_client


@runtime_checkable
class Transport(Protocol):
    """Minimal blocking POST capability consumed by the gateway client."""

    def post(self, url: str, body: bytes, headers: Mapping[str, str], timeout: float) -> bytes:
        """Send ``body`` to ``url`` and return the fully buffered response body."""
        ...


class HttpxTransport:
    """Default transport using a pooled ``httpx.Client``.

    Parameters:
        client: Optional explicit client (tests pass one built on
            ``httpx.MockTransport``). When omitted, a pooled client is taken
            from :func:`get_httpx_client` on each call.
        purpose: Pool discriminator for the shared client.
    """

    def __init__(self, client: Optional[httpx.Client] = None, *, purpose: str = "gateway") -> None:
        self._client = client
        self._purpose = purpose

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return get_httpx_client(None, purpose=self._purpose)

    def post(self, url: str, body: bytes, headers: Mapping[str, str], timeout: float) -> bytes:
        response = self._get_client().post(url, content=body, headers=dict(headers), timeout=timeout)
        return response.read()


__all__ = ["Transport", "HttpxTransport"]
