"""Shared fixtures and helpers for tests."""

import json
from typing import Any, Callable

import httpx
import pytest

from figma_data import FigmaClient, FigmaConfig, set_tool_bridge

FILE_KEY = "ABC123"
BASE_URL = "https://figma.test/v1"


class RecordingHandler:
    """httpx mock handler that answers from a route table and records requests."""

    def __init__(self, routes: dict[tuple[str, str], tuple[int, Any]]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"status": 404, "err": "Not found"})
        status_code, payload = route
        return httpx.Response(status_code, json=payload)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def json_body(self, index: int = 0) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def no_tool_bridge():
    """Every test starts without a host tool bridge."""
    set_tool_bridge(None)
    yield
    set_tool_bridge(None)


@pytest.fixture
def config() -> FigmaConfig:
    return FigmaConfig(token="figd_test", file_keys=FILE_KEY, api_base_url=BASE_URL)


@pytest.fixture
def make_client(config: FigmaConfig) -> Callable[..., tuple[FigmaClient, RecordingHandler]]:
    """Build a client whose HTTP calls go to a recording mock handler."""

    def _make(routes: dict[tuple[str, str], tuple[int, Any]], client_config: FigmaConfig | None = None):
        handler = RecordingHandler(routes)
        client = FigmaClient(client_config or config, http_transport=httpx.MockTransport(handler))
        return client, handler

    return _make
