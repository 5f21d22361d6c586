"""Figma Data Client.

Reads design-system metadata (components, variables, styles, images) from
Figma for the documentation site.
"""

# Base client
from .client import (
    FIGMA_API_BASE,
    FigmaClient,
    FigmaConfig,
    figma_operation,
    get_config,
)

# Errors
from .errors import (
    FigmaError,
    MissingConfiguration,
    MissingCredential,
    RemoteAPIError,
    RequestFailed,
)

# Models
from .models import (
    Color,
    Component,
    DocumentationLink,
    FigmaErrorBody,
    FigmaFile,
    Node,
    Style,
    Variable,
    VariableGroup,
)

# Transports
from .transport import (
    FigmaRequest,
    FigmaTransport,
    IntegratedTransport,
    RESTTransport,
    ToolCall,
    is_integrated_transport_available,
    select_transport,
    set_tool_bridge,
)

# Resource methods
from .components import list_components
from .variables import list_variables
from .styles import list_styles
from .files import get_component_images, get_file

# Status and sync
from .status import EnvironmentStatus, get_environment_status, validate_file_key
from .sync import DesignSystemSnapshot, check_figma_setup, sync_design_system


__all__ = [
    # Client
    "FIGMA_API_BASE",
    "FigmaClient",
    "FigmaConfig",
    "figma_operation",
    "get_config",
    # Errors
    "FigmaError",
    "MissingConfiguration",
    "MissingCredential",
    "RemoteAPIError",
    "RequestFailed",
    # Models
    "Color",
    "Component",
    "DocumentationLink",
    "FigmaErrorBody",
    "FigmaFile",
    "Node",
    "Style",
    "Variable",
    "VariableGroup",
    # Transports
    "FigmaRequest",
    "FigmaTransport",
    "IntegratedTransport",
    "RESTTransport",
    "ToolCall",
    "is_integrated_transport_available",
    "select_transport",
    "set_tool_bridge",
    # Resources
    "list_components",
    "list_variables",
    "list_styles",
    "get_component_images",
    "get_file",
    # Status and sync
    "EnvironmentStatus",
    "get_environment_status",
    "validate_file_key",
    "DesignSystemSnapshot",
    "check_figma_setup",
    "sync_design_system",
]
