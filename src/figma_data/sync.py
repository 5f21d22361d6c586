"""Figma Data - Design system sync.

Pulls components, variables, styles and component images for one file in a
single batch.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from .client import FigmaClient, FigmaConfig
from .components import list_components
from .errors import MissingConfiguration
from .files import get_component_images
from .models import Component, Style, VariableGroup
from .status import EnvironmentStatus, get_environment_status
from .styles import list_styles
from .variables import list_variables

logger = logging.getLogger(__name__)


@dataclass
class DesignSystemSnapshot:
    components: list[Component] = field(default_factory=list)
    variable_groups: list[VariableGroup] = field(default_factory=list)
    styles: list[Style] = field(default_factory=list)
    images: dict[str, Optional[str]] = field(default_factory=dict)


def check_figma_setup(config: Optional[FigmaConfig] = None) -> EnvironmentStatus:
    """Log the integration status and warn about missing settings."""
    status = get_environment_status(config)

    logger.info(
        "Figma integration status: file key %s, token %s, integrated transport %s, API base URL %s",
        "set" if status.has_file_key else "missing",
        "set" if status.has_token else "missing",
        "available" if status.transport_available else "unavailable (using REST)",
        status.api_base_url,
    )
    if not status.has_file_key:
        logger.warning("FIGMA_FILE_KEYS is not set. Please configure your .env file.")
    if not status.has_token:
        logger.warning("FIGMA_TOKEN is not set. REST API fallback will not work.")

    return status


async def sync_design_system(file_key: str, *, client: Optional[FigmaClient] = None) -> DesignSystemSnapshot:
    """Fetch everything the docs need from one Figma file.

    Components, variables and styles are requested concurrently; if any of
    them fails the whole sync fails and nothing is returned. Images are then
    rendered for the component keys.

    Args:
        file_key: The file key
        client: Client to use, defaults to one built from the environment

    Returns:
        Snapshot of the design system

    Raises:
        MissingConfiguration: FIGMA_FILE_KEYS is not configured
    """
    client = client or FigmaClient()
    logger.info("Starting design system sync for %s", file_key)

    status = check_figma_setup(client.config)
    if not status.has_file_key:
        raise MissingConfiguration("FIGMA_FILE_KEYS")

    try:
        components, variable_groups, styles = await asyncio.gather(
            list_components(file_key, client=client),
            list_variables(file_key, client=client),
            list_styles(file_key, client=client),
        )
        logger.info("Found %d components", len(components))
        logger.info("Found %d variable groups", len(variable_groups))
        logger.info("Found %d styles", len(styles))

        component_keys = [c.key for c in components]
        images = await get_component_images(file_key, component_keys, "svg", 2, client=client)
        logger.info("Generated %d component images", len(images))
    except Exception:
        logger.exception("Design system sync failed")
        raise

    logger.info("Design system sync completed")
    return DesignSystemSnapshot(
        components=components,
        variable_groups=variable_groups,
        styles=styles,
        images=images,
    )
