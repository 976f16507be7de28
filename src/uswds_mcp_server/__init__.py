"""Model Context Protocol server for the U.S. Web Design System."""

from uswds_mcp_server.config import Settings, get_settings
from uswds_mcp_server.errors import MCPError, ServiceError, UpstreamError
from uswds_mcp_server.services import ServiceBag, build_services
from uswds_mcp_server.tools import ToolName, build_server, dispatch

__all__ = [
    "MCPError",
    "ServiceBag",
    "ServiceError",
    "Settings",
    "ToolName",
    "UpstreamError",
    "build_server",
    "build_services",
    "dispatch",
    "get_settings",
]
