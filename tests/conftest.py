"""
pytest configuration and shared fixtures for the trends client tests.

Key concern: tests must never reach the real upstream service.
Every client is built over an httpx.MockTransport backed by an
Upstream object that:
  1. Serves queued responses (or raises queued exceptions) in order.
  2. Records every outgoing request so tests can assert on URLs,
     query parameters, headers and call counts.
"""

import json
import os
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

# Keep developer .env / env vars from leaking debug mode into tests
os.environ.setdefault("GTRENDS_DEBUG", "false")

from gtrends.client import TrendsClient  # noqa: E402


class Upstream:
    """Scripted stand-in for the trends service."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: list = []

    def queue(self, *items) -> None:
        """Queue httpx.Response objects or exceptions, served first-in first-out."""
        self._queue.extend(items)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"unexpected request to {request.url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def calls(self) -> int:
        return len(self.requests)

    def query(self, index: int = -1) -> dict[str, str]:
        """Query string of a recorded request, one value per key."""
        parsed = parse_qs(urlsplit(str(self.requests[index].url)).query, keep_blank_values=True)
        return {k: v[0] for k, v in parsed.items()}

    def req_param(self, index: int = -1) -> dict:
        """Decoded JSON of the `req` query parameter."""
        return json.loads(self.query(index)["req"])


def guarded(payload, prefix: str = ")]}'") -> httpx.Response:
    """200 response whose JSON body carries the anti-XSSI prefix."""
    return httpx.Response(200, text=prefix + "\n" + json.dumps(payload))


@pytest.fixture()
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture()
async def client(upstream):
    """
    TrendsClient wired to the scripted upstream.

    Usage:
        async def test_something(client, upstream):
            upstream.queue(httpx.Response(200, text="..."))
            result = await client.search("golang")
    """
    http = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    async with TrendsClient(http, debug=False) as c:
        yield c
    await http.aclose()
