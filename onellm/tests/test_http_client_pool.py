"""Unit tests for the shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose or base_url yields different instances.
- close_all_clients empties the pool.
"""
from __future__ import annotations

from onellm.base.http import close_all_clients, get_httpx_client


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://onellm.dev", purpose="gateway")
    c2 = get_httpx_client("https://onellm.dev", purpose="gateway")
    assert c1 is c2


def test_different_purpose_returns_different_instances():
    c1 = get_httpx_client("https://onellm.dev", purpose="gateway")
    c2 = get_httpx_client("https://onellm.dev", purpose="admin")
    assert c1 is not c2


def test_different_base_url_returns_different_instances():
    c1 = get_httpx_client("https://onellm.dev", purpose="gateway")
    c2 = get_httpx_client("https://staging.onellm.dev", purpose="gateway")
    assert c1 is not c2


def test_close_all_clients_closes_and_clears():
    c1 = get_httpx_client(None, purpose="gateway")
    close_all_clients()
    assert c1.is_closed
    c2 = get_httpx_client(None, purpose="gateway")
    assert c2 is not c1
    assert not c2.is_closed
