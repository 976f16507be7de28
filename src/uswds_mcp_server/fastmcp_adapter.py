"""Adapters for exposing USWDS MCP tools via FastMCP."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import mcp.types
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from uswds_mcp.server import ToolResult as Envelope
from uswds_mcp.tools import ToolDefinition
from uswds_mcp_server.config import SERVER_NAME
from uswds_mcp_server.services import ServiceBag
from uswds_mcp_server.tools import build_tools, dispatch

INSTRUCTIONS = (
    "U.S. Web Design System reference: components, design tokens, icons, layout "
    "patterns, accessibility checks and code generation for React-USWDS, vanilla "
    "USWDS and USWDS Tailwind."
)


def to_tool_result(envelope: Envelope) -> ToolResult:
    """Translate a dispatcher envelope for FastMCP.

    Raises:
        ToolError: If the envelope is an error, so clients see ``isError`` with
            the same ``Error: ...`` text.
    """
    if envelope.is_error:
        raise ToolError(envelope.text)
    return ToolResult(content=[TextContent(type="text", text=envelope.text)])


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, services: ServiceBag) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            output_schema=None,
            tags=set(),
        )
        self._services = services

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call and translate the envelope for FastMCP."""
        return to_tool_result(await dispatch(self.name, arguments, self._services))


class UnregisteredToolMiddleware(Middleware):
    """Send calls for unregistered names through the dispatcher.

    FastMCP answers unknown names itself; routing them to :func:`dispatch`
    keeps the error text identical to every other transport.
    """

    def __init__(self, tool_names: Sequence[str], services: ServiceBag) -> None:
        self._tool_names = frozenset(tool_names)
        self._services = services

    async def on_call_tool(
        self,
        context: MiddlewareContext[mcp.types.CallToolRequestParams],
        call_next: Any,
    ) -> ToolResult:
        name = context.message.name
        if name in self._tool_names:
            return await call_next(context)
        arguments = context.message.arguments or {}
        return to_tool_result(await dispatch(name, arguments, self._services))


def to_fastmcp_tools(
    tool_definitions: Sequence[ToolDefinition], services: ServiceBag
) -> list[Tool]:
    """Wrap tool definitions as FastMCP tools bound to ``services``."""
    return [
        ToolDefinitionAdapter(definition, services) for definition in tool_definitions
    ]


def build_fastmcp_app(services: ServiceBag) -> tuple[FastMCP, list[ToolDefinition]]:
    """Create a FastMCP server instance with all USWDS tools registered."""
    app = FastMCP(name=SERVER_NAME, instructions=INSTRUCTIONS)
    tool_definitions = build_tools(services)
    for tool in to_fastmcp_tools(tool_definitions, services):
        app.add_tool(tool)
    app.add_middleware(
        UnregisteredToolMiddleware(
            [definition.name for definition in tool_definitions], services
        )
    )
    return app, tool_definitions
