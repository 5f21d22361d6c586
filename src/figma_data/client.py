"""Figma Data - Base Client.

Configuration and request plumbing shared by all resource methods.
"""
import functools
import logging
import os
from dataclasses import dataclass
from typing import Optional

import httpx

from .errors import FigmaError, RequestFailed
from .transport import FigmaRequest, FigmaTransport, ToolCall, select_transport

logger = logging.getLogger(__name__)


FIGMA_API_BASE = "https://api.figma.com/v1"


@dataclass(frozen=True)
class FigmaConfig:
    """Configuration for Figma API client."""
    token: Optional[str] = None
    # Presence flag only; the value is never split into separate keys
    file_keys: Optional[str] = None
    api_base_url: str = FIGMA_API_BASE
    # None waits for the response indefinitely
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "FigmaConfig":
        """Build configuration from FIGMA_* environment variables."""
        return cls(
            token=os.getenv("FIGMA_TOKEN") or None,
            file_keys=os.getenv("FIGMA_FILE_KEYS") or None,
            api_base_url=os.getenv("FIGMA_API_BASE_URL") or FIGMA_API_BASE,
        )


_config: Optional[FigmaConfig] = None


def get_config() -> FigmaConfig:
    """Get or create Figma configuration."""
    global _config
    if _config is None:
        _config = FigmaConfig.from_env()
    return _config


class FigmaClient:
    """Issues Figma requests over whichever transport the host offers.

    Args:
        config: Client configuration, defaults to the process configuration
        http_transport: httpx transport override (tests, proxies)
    """

    def __init__(
        self,
        config: Optional[FigmaConfig] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config or get_config()
        self.http_transport = http_transport

    @property
    def transport(self) -> FigmaTransport:
        # Re-evaluated per request; the host bridge may come and go
        return select_transport(self.config, http_transport=self.http_transport)

    async def request(self, request: FigmaRequest) -> dict:
        return await self.transport.send(request)

    async def get(self, endpoint: str, tool: ToolCall, params: Optional[dict] = None) -> dict:
        """GET request to Figma API."""
        return await self.request(FigmaRequest("GET", endpoint, tool, params=params))

    async def post(self, endpoint: str, json_data: dict, tool: ToolCall) -> dict:
        """POST request to Figma API."""
        return await self.request(FigmaRequest("POST", endpoint, tool, json_data=json_data))


def figma_operation(label: str):
    """Label every failure of the decorated coroutine with ``label``.

    Client errors keep their type and gain the label as a prefix; anything
    else (network errors, schema mismatches) is wrapped in ``RequestFailed``.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except FigmaError as e:
                e.operation = label
                logger.error("%s", e)
                raise
            except Exception as e:
                error = RequestFailed(e, operation=label)
                logger.error("%s", error)
                raise error from e
        return wrapper
    return decorator
