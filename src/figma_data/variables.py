"""Figma Data - Variable Methods.

Local variables come back already grouped by Figma; no grouping happens here.
"""
from typing import Optional

from .client import FigmaClient, figma_operation
from .models import VariableGroup, VariablesResponse
from .transport import ToolCall


@figma_operation("Failed to list variables")
async def list_variables(file_key: str, *, client: Optional[FigmaClient] = None) -> list[VariableGroup]:
    """Get local variable groups (design tokens) in a file.

    Args:
        file_key: The file key
        client: Client to use, defaults to one built from the environment

    Returns:
        Variable groups, each owning its variables
    """
    client = client or FigmaClient()
    data = await client.get(
        f"/files/{file_key}/variables/local",
        tool=ToolCall("mcp_Figma_get_variable_defs", {"fileKey": file_key}),
    )
    return VariablesResponse.model_validate(data).items()
