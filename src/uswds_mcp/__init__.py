"""uswds_mcp package initialization."""

from uswds_mcp.errors import ConfigurationError
from uswds_mcp.server import MCPServer, ToolResult
from uswds_mcp.tools import ToolDefinition, ToolParameters

__all__ = [
    "ConfigurationError",
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "ToolResult",
]
