"""Figma Data - Environment status and input checks."""
from dataclasses import dataclass
from typing import Any, Optional

from .client import FigmaConfig, get_config
from .transport import is_integrated_transport_available


@dataclass(frozen=True)
class EnvironmentStatus:
    has_file_key: bool
    has_token: bool
    transport_available: bool
    api_base_url: str


def validate_file_key(value: Any) -> bool:
    """True if ``value`` is a non-empty string. Does not ask Figma."""
    return isinstance(value, str) and len(value) > 0


def get_environment_status(config: Optional[FigmaConfig] = None) -> EnvironmentStatus:
    """Report configuration and transport availability without any I/O."""
    config = config or get_config()
    return EnvironmentStatus(
        has_file_key=bool(config.file_keys),
        has_token=bool(config.token),
        transport_available=is_integrated_transport_available(),
        api_base_url=config.api_base_url,
    )
