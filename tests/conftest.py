"""Shared test configuration."""

import os

# Must run before app.core.config is imported
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from typing import Callable  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from upstream_fakes import UPSTREAM_BASE_URL  # noqa: E402


@pytest.fixture
def make_upstream_client() -> Callable[..., httpx.Client]:
    """Return a factory for httpx clients backed by a request handler."""
    clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(
            transport=httpx.MockTransport(handler), base_url=UPSTREAM_BASE_URL
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
