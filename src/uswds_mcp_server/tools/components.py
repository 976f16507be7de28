"""Tools for browsing, choosing and generating USWDS components."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from uswds_mcp.tools import ToolDefinition, ToolParameters
from uswds_mcp_server.services import ServiceBag
from uswds_mcp_server.tools.common import FrameworkParams
from uswds_mcp_server.tools.names import ToolName


class ListComponentsParams(FrameworkParams):
    """Parameters for list_components."""

    category: Literal["all", "forms", "navigation", "layout", "content", "ui"] = (
        Field(
            default="all",
            description='Filter by category (e.g., "forms", "navigation", "all")',
        )
    )


class ComponentInfoParams(FrameworkParams):
    """Parameters for get_component_info."""

    component_name: str = Field(description="Component name")
    include_examples: bool = True


class SuggestComponentsParams(FrameworkParams):
    """Parameters for suggest_components."""

    use_case: str = Field(description="Use case description")


class CompareComponentsParams(FrameworkParams):
    """Parameters for compare_components."""

    components: list[str] = Field(description="Names of the two components to compare")


class GenerateCodeParams(ToolParameters):
    """Parameters for generate_component_code."""

    component_name: str = Field(description="Name of the component to generate")
    props: dict[str, Any] | None = Field(
        default=None, description="Component properties/configuration"
    )
    framework: Literal["html", "react", "tailwind"] | None = Field(
        default=None,
        description=(
            'Framework/syntax: "react" for React-USWDS, "html" for vanilla USWDS '
            'HTML, "tailwind" for Tailwind USWDS. Defaults to server configuration '
            "if not specified."
        ),
    )


def list_components_tool(services: ServiceBag) -> ToolDefinition:
    """Create the list_components tool."""

    async def handler(params: ListComponentsParams) -> dict[str, Any]:
        if params.framework == "tailwind":
            return await services.tailwind.list_components(params.category)
        return await services.component.list_components(
            params.category, params.framework
        )

    return ToolDefinition(
        name=ToolName.LIST_COMPONENTS.value,
        description=(
            "List all available USWDS components with descriptions. Supports "
            "React-USWDS, vanilla USWDS, and Tailwind USWDS."
        ),
        parameters_model=ListComponentsParams,
        handler=handler,
    )


def get_component_info_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_component_info tool."""

    async def handler(params: ComponentInfoParams) -> dict[str, Any]:
        if params.framework == "tailwind":
            return await services.tailwind.get_component_docs(params.component_name)
        return await services.component.get_component_info(
            params.component_name, params.include_examples, params.framework
        )

    return ToolDefinition(
        name=ToolName.GET_COMPONENT_INFO.value,
        description=(
            "Get detailed information about a specific USWDS component. Supports "
            "React-USWDS, vanilla USWDS, and Tailwind USWDS."
        ),
        parameters_model=ComponentInfoParams,
        handler=handler,
    )


def suggest_components_tool(services: ServiceBag) -> ToolDefinition:
    """Create the suggest_components tool."""

    async def handler(params: SuggestComponentsParams) -> dict[str, Any]:
        return await services.suggestion.suggest_components(
            params.use_case, params.framework
        )

    return ToolDefinition(
        name=ToolName.SUGGEST_COMPONENTS.value,
        description="Suggest components for a use case",
        parameters_model=SuggestComponentsParams,
        handler=handler,
    )


def compare_components_tool(services: ServiceBag) -> ToolDefinition:
    """Create the compare_components tool."""

    async def handler(params: CompareComponentsParams) -> dict[str, Any]:
        names = [*params.components, "", ""]
        return await services.comparison.compare_components(
            names[0], names[1], params.framework
        )

    return ToolDefinition(
        name=ToolName.COMPARE_COMPONENTS.value,
        description="Compare similar components",
        parameters_model=CompareComponentsParams,
        handler=handler,
    )


def generate_component_code_tool(services: ServiceBag) -> ToolDefinition:
    """Create the generate_component_code tool."""

    async def handler(params: GenerateCodeParams) -> dict[str, Any]:
        return await services.code_generator.generate_component(
            params.component_name, params.props, params.framework
        )

    return ToolDefinition(
        name=ToolName.GENERATE_COMPONENT_CODE.value,
        description=(
            "Generate component code for USWDS components. Supports React, "
            "vanilla HTML, and Tailwind CSS."
        ),
        parameters_model=GenerateCodeParams,
        handler=handler,
    )
