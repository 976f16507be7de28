"""Tools that read the USWDS Tailwind documentation site."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from uswds_mcp.tools import ToolDefinition, ToolParameters
from uswds_mcp_server.services import ServiceBag
from uswds_mcp_server.tools.common import NoParams
from uswds_mcp_server.tools.names import ToolName


class TailwindComponentParams(ToolParameters):
    """Parameters for get_tailwind_uswds_component."""

    component_name: str | None = Field(
        default=None, description="Component name; omit to list every component"
    )


class SearchDocsParams(ToolParameters):
    """Parameters for search_tailwind_uswds_docs."""

    query: str


def get_tailwind_uswds_getting_started_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_tailwind_uswds_getting_started tool."""

    async def handler(_: NoParams) -> dict[str, Any]:
        return await services.tailwind.get_getting_started()

    return ToolDefinition(
        name=ToolName.GET_TAILWIND_USWDS_GETTING_STARTED.value,
        description="Get Tailwind + USWDS getting started guide",
        parameters_model=NoParams,
        handler=handler,
    )


def get_tailwind_uswds_component_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_tailwind_uswds_component tool."""

    async def handler(params: TailwindComponentParams) -> dict[str, Any]:
        return await services.tailwind.get_component_docs(params.component_name)

    return ToolDefinition(
        name=ToolName.GET_TAILWIND_USWDS_COMPONENT.value,
        description="Get Tailwind + USWDS component documentation",
        parameters_model=TailwindComponentParams,
        handler=handler,
    )


def get_tailwind_uswds_javascript_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_tailwind_uswds_javascript tool."""

    async def handler(_: NoParams) -> dict[str, Any]:
        return await services.tailwind.get_javascript_docs()

    return ToolDefinition(
        name=ToolName.GET_TAILWIND_USWDS_JAVASCRIPT.value,
        description="Get Tailwind + USWDS JavaScript documentation",
        parameters_model=NoParams,
        handler=handler,
    )


def get_tailwind_uswds_colors_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_tailwind_uswds_colors tool."""

    async def handler(_: NoParams) -> dict[str, Any]:
        return await services.tailwind.get_colors_docs()

    return ToolDefinition(
        name=ToolName.GET_TAILWIND_USWDS_COLORS.value,
        description="Get Tailwind + USWDS color utilities",
        parameters_model=NoParams,
        handler=handler,
    )


def get_tailwind_uswds_icons_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_tailwind_uswds_icons tool."""

    async def handler(_: NoParams) -> dict[str, Any]:
        return await services.tailwind.get_icons_docs()

    return ToolDefinition(
        name=ToolName.GET_TAILWIND_USWDS_ICONS.value,
        description="Get Tailwind + USWDS icon documentation",
        parameters_model=NoParams,
        handler=handler,
    )


def get_tailwind_uswds_typography_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_tailwind_uswds_typography tool."""

    async def handler(_: NoParams) -> dict[str, Any]:
        return await services.tailwind.get_typography_docs()

    return ToolDefinition(
        name=ToolName.GET_TAILWIND_USWDS_TYPOGRAPHY.value,
        description="Get Tailwind + USWDS typography documentation",
        parameters_model=NoParams,
        handler=handler,
    )


def search_tailwind_uswds_docs_tool(services: ServiceBag) -> ToolDefinition:
    """Create the search_tailwind_uswds_docs tool."""

    async def handler(params: SearchDocsParams) -> dict[str, Any]:
        return await services.tailwind.search_docs(params.query)

    return ToolDefinition(
        name=ToolName.SEARCH_TAILWIND_USWDS_DOCS.value,
        description="Search Tailwind + USWDS documentation",
        parameters_model=SearchDocsParams,
        handler=handler,
    )
