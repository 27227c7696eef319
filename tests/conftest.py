"""
Shared fixtures: a stub upstream price service, fake clocks and
deterministic generators.
"""
import random
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from stock_aggregator.api.client import StockPriceClient
from stock_aggregator.data.synthetic import SyntheticPriceGenerator


class UpstreamStub:
    """
    In-process stand-in for the evaluation stock API.

    Tests register ``(status, body, headers)`` per path; every request is
    recorded. ``str`` bodies go out as text, ``bytes`` bodies verbatim as
    JSON content, anything else JSON-encoded.
    """

    def __init__(self):
        self.routes: Dict[str, Tuple[int, Any, Dict[str, str]]] = {}
        self.requests: List[Dict[str, Any]] = []
        self.app = web.Application()
        self.app.router.add_route("GET", "/{tail:.*}", self.handle)

    def add(self, path: str, body: Any, status: int = 200, headers: Optional[Dict[str, str]] = None):
        self.routes[path] = (status, body, headers or {})

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append({
            "path": request.path,
            "query": dict(request.query),
            "headers": dict(request.headers),
        })
        status, body, headers = self.routes.get(request.path, (404, "not found", {}))
        if isinstance(body, bytes):
            return web.Response(
                body=body, status=status, headers=headers,
                content_type="application/json", charset="utf-8",
            )
        if isinstance(body, str):
            return web.Response(text=body, status=status, headers=headers)
        return web.json_response(body, status=status, headers=headers)


class FakeClock:
    """Epoch-millisecond clock advanced by hand."""

    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


@pytest_asyncio.fixture
async def upstream():
    stub = UpstreamStub()
    server = TestServer(stub.app)
    await server.start_server()
    stub.base_url = str(server.make_url("/evaluation-service"))
    yield stub
    await server.close()


@pytest_asyncio.fixture
async def client(upstream):
    c = StockPriceClient(host=upstream.base_url, token="test-token")
    yield c
    await c.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def generator():
    fixed_now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    return SyntheticPriceGenerator(rng=random.Random(42), clock=lambda: fixed_now)
