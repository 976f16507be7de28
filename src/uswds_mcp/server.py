"""Tool registry and dispatcher shared by every transport.

The server keeps an ordered registry of :class:`~uswds_mcp.tools.ToolDefinition`
objects and turns a tool call into the MCP result envelope. It knows nothing about
stdio, HTTP or Lambda; transports only forward what :meth:`MCPServer.call_tool`
returns.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from uswds_mcp.errors import ConfigurationError
from uswds_mcp.tools import ToolDefinition, validate_descriptor

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class ToolResult:
    """Envelope returned for every tool call.

    Attributes:
        content: Text blocks sent back to the client.
        is_error: Whether the call failed.

    """

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        """Return the text of the first content block."""
        return self.content[0]["text"] if self.content else ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the envelope; ``isError`` is only present on failures.

        Returns:
            Wire representation of the result.

        """
        payload: dict[str, Any] = {"content": [dict(block) for block in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload


def text_result(result: Any) -> ToolResult:
    """Wrap a service result; strings pass through, anything else becomes JSON."""
    text = result if isinstance(result, str) else json.dumps(result, indent=2)
    return ToolResult(content=[{"type": "text", "text": text}])


def error_result(message: str) -> ToolResult:
    """Wrap a failure message in an error envelope."""
    return ToolResult(
        content=[{"type": "text", "text": f"{ERROR_PREFIX}{message}"}], is_error=True
    )


class MCPServer:
    """Ordered registry and dispatcher for MCP tools.

    The registry is filled once at startup. :meth:`call_tool` is the single place
    where tool failures are caught and normalized into error envelopes.
    """

    def __init__(self, tools: Iterable[ToolDefinition] = ()) -> None:
        """Initialize the registry, optionally with an initial set of tools."""
        self._tools: dict[str, ToolDefinition] = {}
        self.register_tools(*tools)

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ConfigurationError: If the tool is malformed or its name is taken.

        """
        validate_descriptor(tool)
        if tool.name in self._tools:
            raise ConfigurationError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List registered tool names in registration order."""
        return list(self._tools)

    def get_tool(self, name: str) -> ToolDefinition | None:
        """Return the tool registered under ``name``, if any."""
        return self._tools.get(name)

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the descriptors of every registered tool, in order."""
        return [tool.descriptor() for tool in self._tools.values()]

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their descriptors.

        """
        return {name: tool.descriptor() for name, tool in self._tools.items()}

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> ToolResult:
        """Execute a registered tool and wrap the outcome.

        Args:
            name: Name of the tool to execute.
            arguments: Raw arguments supplied by the caller.

        Returns:
            Success envelope holding the serialized result, or an error envelope.
            This method never raises for tool failures.

        """
        logger.info("Tool called: %s", name)
        logger.debug("Tool arguments: %s", arguments)

        tool = self._tools.get(name)
        if tool is None:
            logger.error("Tool execution failed: %s: unknown tool", name)
            return error_result(f"Unknown tool: {name}")

        try:
            params = tool.validate(arguments or {})
            result = await tool.handler(params)
            return text_result(result)
        except Exception as error:
            logger.error("Tool execution failed: %s: %r", name, error)
            return error_result(str(error))
