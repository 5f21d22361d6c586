"""Figma Data - Component Methods."""
from typing import Optional

from .client import FigmaClient, figma_operation
from .models import Component, ComponentsResponse
from .transport import ToolCall


@figma_operation("Failed to list components")
async def list_components(file_key: str, *, client: Optional[FigmaClient] = None) -> list[Component]:
    """Get published components in a file.

    Args:
        file_key: The file key
        client: Client to use, defaults to one built from the environment

    Returns:
        Components in the order Figma lists them
    """
    client = client or FigmaClient()
    data = await client.get(
        f"/files/{file_key}/components",
        tool=ToolCall("mcp_Figma_list_components", {"fileKey": file_key}),
    )
    return ComponentsResponse.model_validate(data).items()
