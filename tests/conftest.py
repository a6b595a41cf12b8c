"""Shared pytest fixtures for randomorg-client tests.

Provides a recording stub transport, a quiet configuration, and a client
wired to both, so no test ever touches the network.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from urllib.parse import parse_qs, urlsplit

import pytest

from randomorg_client.client import RandomOrgClient
from randomorg_client.config import RandomOrgConfig
from randomorg_client.exceptions import TransportError
from randomorg_client.transport import HttpResponse, Transport


class StubTransport(Transport):
    """Test double: answers ``/quota/`` with a fixed body and everything
    else from a queue, recording every requested URL.

    A queued ``Exception`` instance is raised instead of answered.
    """

    def __init__(self, quota_body: bytes = b"1000000\n") -> None:
        self.quota_body = quota_body
        self.bodies: deque[bytes | Exception] = deque()
        self.calls: list[str] = []
        self.closed = False

    def queue(self, *bodies: bytes | Exception) -> StubTransport:
        self.bodies.extend(bodies)
        return self

    def get(self, url: str) -> HttpResponse:
        self.calls.append(url)
        if urlsplit(url).path == "/quota/":
            return HttpResponse(status_code=200, body=self.quota_body)
        if not self.bodies:
            raise TransportError("no stubbed response left", url=url)
        body = self.bodies.popleft()
        if isinstance(body, Exception):
            raise body
        return HttpResponse(status_code=200, body=body)

    def close(self) -> None:
        self.closed = True

    @property
    def generation_calls(self) -> list[str]:
        return [url for url in self.calls if urlsplit(url).path != "/quota/"]

    @property
    def quota_calls(self) -> list[str]:
        return [url for url in self.calls if urlsplit(url).path == "/quota/"]


def query_of(url: str) -> dict[str, str]:
    """Return the single-valued query parameters of *url*."""
    return {key: values[0] for key, values in parse_qs(urlsplit(url).query).items()}


@pytest.fixture
def config() -> RandomOrgConfig:
    """Return a config isolated from .env files, with logging silenced."""
    return RandomOrgConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def stub() -> StubTransport:
    """Return a fresh StubTransport with ample quota."""
    return StubTransport()


@pytest.fixture
def client(config: RandomOrgConfig, stub: StubTransport) -> RandomOrgClient:
    """Return a client wired to the stub transport."""
    return RandomOrgClient(config, stub)


@pytest.fixture
def make_stub() -> Callable[..., StubTransport]:
    """Return the StubTransport class for tests that need custom quota bodies."""
    return StubTransport


@pytest.fixture
def parse_query() -> Callable[[str], dict[str, str]]:
    """Return a helper that extracts query parameters from a URL."""
    return query_of
