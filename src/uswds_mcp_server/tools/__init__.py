"""Tool registration helpers for the USWDS MCP server."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable

from uswds_mcp.errors import ConfigurationError
from uswds_mcp.server import MCPServer, ToolResult
from uswds_mcp.tools import ToolDefinition
from uswds_mcp_server.services import ServiceBag
from uswds_mcp_server.tools.components import (
    compare_components_tool,
    generate_component_code_tool,
    get_component_info_tool,
    list_components_tool,
    suggest_components_tool,
)
from uswds_mcp_server.tools.design import (
    check_color_contrast_tool,
    get_design_tokens_tool,
    search_icons_tool,
    suggest_layout_tool,
    validate_uswds_code_tool,
)
from uswds_mcp_server.tools.names import ToolName
from uswds_mcp_server.tools.tailwind import (
    get_tailwind_uswds_colors_tool,
    get_tailwind_uswds_component_tool,
    get_tailwind_uswds_getting_started_tool,
    get_tailwind_uswds_icons_tool,
    get_tailwind_uswds_javascript_tool,
    get_tailwind_uswds_typography_tool,
    search_tailwind_uswds_docs_tool,
)

ToolFactory = Callable[[ServiceBag], ToolDefinition]

TOOL_FACTORIES: dict[ToolName, ToolFactory] = {
    ToolName.LIST_COMPONENTS: list_components_tool,
    ToolName.GET_COMPONENT_INFO: get_component_info_tool,
    ToolName.GET_DESIGN_TOKENS: get_design_tokens_tool,
    ToolName.VALIDATE_USWDS_CODE: validate_uswds_code_tool,
    ToolName.CHECK_COLOR_CONTRAST: check_color_contrast_tool,
    ToolName.SEARCH_ICONS: search_icons_tool,
    ToolName.SUGGEST_LAYOUT: suggest_layout_tool,
    ToolName.SUGGEST_COMPONENTS: suggest_components_tool,
    ToolName.COMPARE_COMPONENTS: compare_components_tool,
    ToolName.GENERATE_COMPONENT_CODE: generate_component_code_tool,
    ToolName.GET_TAILWIND_USWDS_GETTING_STARTED: (
        get_tailwind_uswds_getting_started_tool
    ),
    ToolName.GET_TAILWIND_USWDS_COMPONENT: get_tailwind_uswds_component_tool,
    ToolName.GET_TAILWIND_USWDS_JAVASCRIPT: get_tailwind_uswds_javascript_tool,
    ToolName.GET_TAILWIND_USWDS_COLORS: get_tailwind_uswds_colors_tool,
    ToolName.GET_TAILWIND_USWDS_ICONS: get_tailwind_uswds_icons_tool,
    ToolName.GET_TAILWIND_USWDS_TYPOGRAPHY: get_tailwind_uswds_typography_tool,
    ToolName.SEARCH_TAILWIND_USWDS_DOCS: search_tailwind_uswds_docs_tool,
}


def check_handler_coverage(factories: dict[ToolName, ToolFactory]) -> None:
    """Require exactly one factory per tool name.

    Raises:
        ConfigurationError: If a name has no factory or a factory has no name.
    """
    missing = [name.value for name in ToolName if name not in factories]
    extra = [str(name) for name in factories if not isinstance(name, ToolName)]
    if missing or extra:
        raise ConfigurationError(
            f"Tool table out of sync; missing: {missing or 'none'}, "
            f"unexpected: {extra or 'none'}"
        )


check_handler_coverage(TOOL_FACTORIES)


def build_tools(services: ServiceBag) -> list[ToolDefinition]:
    """Instantiate all tool definitions in registry order."""
    tools = []
    for name in ToolName:
        tool = TOOL_FACTORIES[name](services)
        if tool.name != name.value:
            raise ConfigurationError(
                f"Factory for '{name.value}' produced tool '{tool.name}'"
            )
        tools.append(tool)
    return tools


@lru_cache(maxsize=32)
def build_server(services: ServiceBag) -> MCPServer:
    """Return the server for ``services``, built once per service bag."""
    return MCPServer(build_tools(services))


def tool_descriptors(services: ServiceBag) -> list[dict[str, Any]]:
    """Descriptors of every tool, as advertised by ``tools/list``."""
    return build_server(services).list_tools()


async def dispatch(
    name: str, arguments: dict[str, Any] | None, services: ServiceBag
) -> ToolResult:
    """Run one tool call against ``services`` and return its envelope.

    Never raises for tool failures; unknown names and handler exceptions come
    back as error envelopes.
    """
    return await build_server(services).call_tool(name, arguments)


__all__ = [
    "TOOL_FACTORIES",
    "ToolName",
    "build_server",
    "build_tools",
    "check_handler_coverage",
    "dispatch",
    "tool_descriptors",
]
