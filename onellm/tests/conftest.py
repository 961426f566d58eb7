"""Pytest configuration for the onellm test suite.

Isolates every test from the developer's ``ONELLM_*`` environment and
provides small builders plus a recording transport so no test touches the
network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional

import pytest

from onellm import APIInput, ModelId
from onellm.base.http import close_all_clients
from onellm.base.logging import BASE_LOGGER_NAME

_ENV_VARS = ("ONELLM_API_KEY", "ONELLM_BASE_URL", "ONELLM_TIMEOUT_SECONDS", "ONELLM_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_onellm_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove gateway settings inherited from the shell."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()


@pytest.fixture()
def gateway_logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route ``onellm`` records (which normally do not propagate) into caplog."""
    base = logging.getLogger(BASE_LOGGER_NAME)
    previous = base.propagate
    base.propagate = True
    caplog.set_level(logging.DEBUG, logger=BASE_LOGGER_NAME)
    try:
        yield caplog
    finally:
        base.propagate = previous


@pytest.fixture()
def chat_envelope() -> APIInput:
    """Envelope from the mandatory tier only."""
    return APIInput.create("chat", ModelId.GPT_4_1, [{"role": "user", "content": "hi"}], 16)


@dataclass
class RecordedCall:
    url: str
    body: bytes
    headers: Mapping[str, str]
    timeout: float


@dataclass
class RecordingTransport:
    """Transport double returning a canned body (or raising ``error``)."""

    response: bytes = b'{"code":200,"output":{"content":"hello"}}'
    error: Optional[BaseException] = None
    calls: List[RecordedCall] = field(default_factory=list)

    def post(self, url: str, body: bytes, headers: Mapping[str, str], timeout: float) -> bytes:
        self.calls.append(RecordedCall(url=url, body=body, headers=dict(headers), timeout=timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def recording_transport() -> RecordingTransport:
    return RecordingTransport()
