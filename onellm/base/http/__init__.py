"""HTTP utilities: pooled clients and the gateway transport boundary."""

from .client import close_all_clients, get_httpx_client
from .transport import HttpxTransport, Transport

__all__ = ["get_httpx_client", "close_all_clients", "Transport", "HttpxTransport"]
