"""Unit tests for transport selection and the REST transport."""

import logging
from typing import Any

import httpx
import pytest

from figma_data import (
    FigmaConfig,
    FigmaRequest,
    IntegratedTransport,
    MissingCredential,
    RemoteAPIError,
    RESTTransport,
    ToolCall,
    is_integrated_transport_available,
    select_transport,
    set_tool_bridge,
)


class FakeBridge:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        self.calls.append((name, arguments))
        return {}


REQUEST = FigmaRequest(
    "GET",
    "/files/ABC123/styles",
    ToolCall("mcp_Figma_list_styles", {"fileKey": "ABC123"}),
)


def test_integrated_transport_unavailable_without_bridge() -> None:
    assert is_integrated_transport_available() is False


def test_integrated_transport_available_with_bridge() -> None:
    set_tool_bridge(FakeBridge())
    assert is_integrated_transport_available() is True


def test_select_transport_defaults_to_rest(config: FigmaConfig) -> None:
    assert isinstance(select_transport(config), RESTTransport)


def test_select_transport_prefers_integrated_when_bridge_present(config: FigmaConfig) -> None:
    set_tool_bridge(FakeBridge())
    transport = select_transport(config)
    assert isinstance(transport, IntegratedTransport)
    assert isinstance(transport.fallback, RESTTransport)


@pytest.mark.asyncio
async def test_integrated_transport_falls_through_to_rest(config: FigmaConfig) -> None:
    bridge = FakeBridge()
    set_tool_bridge(bridge)
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"meta": {"styles": []}})

    transport = select_transport(config, http_transport=httpx.MockTransport(handler))
    result = await transport.send(REQUEST)

    assert result == {"meta": {"styles": []}}
    assert len(seen) == 1
    assert bridge.calls == []


@pytest.mark.asyncio
async def test_rest_transport_sends_token_header(config: FigmaConfig) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    transport = RESTTransport(config, http_transport=httpx.MockTransport(handler))
    await transport.send(REQUEST)

    assert seen[0].headers["X-Figma-Token"] == "figd_test"
    assert "Authorization" not in seen[0].headers
    assert str(seen[0].url) == "https://figma.test/v1/files/ABC123/styles"


@pytest.mark.asyncio
async def test_rest_transport_requires_token_before_io() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    transport = RESTTransport(FigmaConfig(token=None), http_transport=httpx.MockTransport(handler))
    with pytest.raises(MissingCredential):
        await transport.send(REQUEST)
    assert seen == []


@pytest.mark.asyncio
async def test_rest_transport_raises_remote_error_with_body_detail(config: FigmaConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"status": 403, "err": "Invalid token"})

    transport = RESTTransport(config, http_transport=httpx.MockTransport(handler))
    with pytest.raises(RemoteAPIError) as excinfo:
        await transport.send(REQUEST)

    assert excinfo.value.status_code == 403
    assert excinfo.value.status_text == "Forbidden"
    assert excinfo.value.detail == "Invalid token"
    assert str(excinfo.value) == "Figma API error: 403 Forbidden"


@pytest.mark.asyncio
async def test_rest_transport_ignores_unstructured_error_body(config: FigmaConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="<html>oops</html>")

    transport = RESTTransport(config, http_transport=httpx.MockTransport(handler))
    with pytest.raises(RemoteAPIError) as excinfo:
        await transport.send(REQUEST)
    assert excinfo.value.detail is None


@pytest.mark.asyncio
async def test_integrated_transport_logs_tool_and_fallback(
    config: FigmaConfig, caplog: pytest.LogCaptureFixture
) -> None:
    set_tool_bridge(FakeBridge())

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    transport = select_transport(config, http_transport=httpx.MockTransport(handler))
    with caplog.at_level(logging.INFO, logger="figma_data.transport"):
        await transport.send(REQUEST)

    assert "mcp_Figma_list_styles is available, falling back to rest transport" in caplog.text
