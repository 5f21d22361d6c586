"""Figma Data - File Methods.

Rendering nodes to images and reading the document tree.
"""
from typing import Literal, Optional, Sequence

from .client import FigmaClient, figma_operation
from .models import FigmaFile, ImagesResponse
from .transport import ToolCall

ImageFormat = Literal["svg", "png"]

IMAGE_FORMATS = ("svg", "png")


async def get_component_images(
    file_key: str,
    node_ids: Sequence[str],
    format: ImageFormat = "svg",
    scale: float = 2,
    *,
    client: Optional[FigmaClient] = None
) -> dict[str, Optional[str]]:
    """Render nodes of a Figma file to images.

    Args:
        file_key: The file key
        node_ids: Node IDs to render; may be empty
        format: Image format (svg or png)
        scale: Scale factor, must be positive
        client: Client to use, defaults to one built from the environment

    Returns:
        Dict with image URLs keyed by node ID; None where Figma could
        not render the node

    Raises:
        ValueError: Unsupported format or non-positive scale
    """
    if format not in IMAGE_FORMATS:
        raise ValueError(f"Unsupported image format: {format!r}")
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")
    return await _render_images(file_key, list(node_ids), format, scale, client=client)


@figma_operation("Failed to get component images")
async def _render_images(
    file_key: str,
    node_ids: list[str],
    format: str,
    scale: float,
    *,
    client: Optional[FigmaClient] = None
) -> dict[str, Optional[str]]:
    client = client or FigmaClient()
    tool = ToolCall(
        "mcp_Figma_get_screenshot",
        {"fileKey": file_key, "nodeIds": node_ids, "format": format, "scale": scale},
    )
    data = await client.post(
        f"/images/{file_key}",
        json_data={"ids": node_ids, "format": format, "scale": scale},
        tool=tool,
    )
    return ImagesResponse.model_validate(data).images


@figma_operation("Failed to get file")
async def get_file(
    file_key: str,
    depth: Optional[int] = None,
    *,
    client: Optional[FigmaClient] = None
) -> FigmaFile:
    """Get a Figma file by key.

    Args:
        file_key: The file key (from URL)
        depth: Depth of node tree to return
        client: Client to use, defaults to one built from the environment

    Returns:
        File document with its component and style maps
    """
    client = client or FigmaClient()
    params = {"depth": depth} if depth is not None else None
    arguments = {"fileKey": file_key}
    if depth is not None:
        arguments["depth"] = depth
    data = await client.get(
        f"/files/{file_key}",
        tool=ToolCall("get_figma_data", arguments),
        params=params,
    )
    return FigmaFile.model_validate(data)
