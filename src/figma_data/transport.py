"""Figma Data - Transports.

Requests can travel over the REST API or, when the client runs inside a host
that exposes Figma tools (an editor bridge), over an integrated tool call.
The integrated path is detected but not exercised yet: it always falls
through to REST.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Protocol

import httpx
from pydantic import ValidationError

from .errors import MissingCredential, RemoteAPIError
from .models import FigmaErrorBody

if TYPE_CHECKING:
    from .client import FigmaConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolCall:
    """Integrated tool equivalent of a REST request."""
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FigmaRequest:
    """One logical request, described for every transport."""
    method: str
    endpoint: str
    tool: ToolCall
    params: Optional[dict] = None
    json_data: Optional[dict] = None


class ToolBridge(Protocol):
    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        ...


# Registered by the host environment, if any
_bridge: Optional[ToolBridge] = None


def set_tool_bridge(bridge: Optional[ToolBridge]) -> None:
    """Register (or clear with ``None``) the host tool bridge."""
    global _bridge
    _bridge = bridge


def is_integrated_transport_available() -> bool:
    """Check whether the host exposes an integrated tool bridge."""
    return _bridge is not None


class FigmaTransport(ABC):
    name: str

    @abstractmethod
    async def send(self, request: FigmaRequest) -> dict:
        """Send a request and return the decoded JSON body."""


class RESTTransport(FigmaTransport):
    """Plain HTTPS calls against the Figma REST API."""

    name = "rest"

    def __init__(self, config: "FigmaConfig", http_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.http_transport = http_transport

    async def send(self, request: FigmaRequest) -> dict:
        """Make a request to Figma API.

        Args:
            request: Method, endpoint, query parameters and JSON body

        Returns:
            Response JSON as dict

        Raises:
            MissingCredential: No token configured (nothing is sent)
            RemoteAPIError: Figma answered with a non-2xx status
            httpx.HTTPError: The request never got a response
        """
        if not self.config.token:
            raise MissingCredential()

        url = f"{self.config.api_base_url.rstrip('/')}{request.endpoint}"
        logger.info("%s %s", request.method, url)

        async with httpx.AsyncClient(timeout=self.config.timeout, transport=self.http_transport) as client:
            response = await client.request(
                method=request.method,
                url=url,
                params=request.params,
                json=request.json_data,
                headers={"X-Figma-Token": self.config.token}
            )

            if not response.is_success:
                raise RemoteAPIError(
                    response.status_code,
                    response.reason_phrase,
                    detail=_error_detail(response),
                )

            return response.json()


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Pull ``err`` out of an error body when it has the documented shape."""
    try:
        return FigmaErrorBody.model_validate_json(response.content).err
    except ValidationError:
        return None


class IntegratedTransport(FigmaTransport):
    """Tool calls through the host bridge.

    Tool calls are not wired up yet, so every request is logged and handed
    to the REST fallback.
    """

    name = "integrated"

    def __init__(self, fallback: RESTTransport):
        self.fallback = fallback

    async def send(self, request: FigmaRequest) -> dict:
        logger.info(
            "Integrated tool %s is available, falling back to %s transport",
            request.tool.name,
            self.fallback.name,
        )
        return await self.fallback.send(request)


def select_transport(
    config: "FigmaConfig",
    http_transport: Optional[httpx.AsyncBaseTransport] = None
) -> FigmaTransport:
    """Pick the transport for the current environment."""
    rest = RESTTransport(config, http_transport=http_transport)
    if is_integrated_transport_available():
        return IntegratedTransport(rest)
    return rest
