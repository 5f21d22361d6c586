"""Figma Data - Style Methods."""
from typing import Optional

from .client import FigmaClient, figma_operation
from .models import Style, StylesResponse
from .transport import ToolCall


@figma_operation("Failed to list styles")
async def list_styles(file_key: str, *, client: Optional[FigmaClient] = None) -> list[Style]:
    """Get styles in a file.

    Args:
        file_key: The file key
        client: Client to use, defaults to one built from the environment

    Returns:
        Fill, text, effect and grid styles
    """
    client = client or FigmaClient()
    data = await client.get(
        f"/files/{file_key}/styles",
        tool=ToolCall("mcp_Figma_list_styles", {"fileKey": file_key}),
    )
    return StylesResponse.model_validate(data).items()
