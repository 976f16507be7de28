"""Tools for design tokens, icons, layouts, contrast and code validation."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from uswds_mcp.tools import ToolDefinition, ToolParameters
from uswds_mcp_server.services import ServiceBag
from uswds_mcp_server.tools.common import FRAMEWORK_DESCRIPTION, Framework
from uswds_mcp_server.tools.names import ToolName


class DesignTokensParams(ToolParameters):
    """Parameters for get_design_tokens.

    ``category`` is a free string so unknown names reach the service, which
    answers with the list of valid categories.
    """

    category: str | None = Field(
        default="all",
        description='One of "all", "color", "spacing", "typography", "breakpoints"',
    )


class ValidateCodeParams(ToolParameters):
    """Parameters for validate_uswds_code."""

    code: str = Field(description="HTML/JSX code")
    framework: Literal["html", "react"] | None = None


class ColorContrastParams(ToolParameters):
    """Parameters for check_color_contrast."""

    foreground: str = Field(description="Foreground color")
    background: str = Field(description="Background color")


class SearchIconsParams(ToolParameters):
    """Parameters for search_icons."""

    query: str | None = Field(default=None, description="Search query")


class SuggestLayoutParams(ToolParameters):
    """Parameters for suggest_layout."""

    page_type: str = Field(description="Page type")
    framework: Framework | None = Field(default=None, description=FRAMEWORK_DESCRIPTION)


def get_design_tokens_tool(services: ServiceBag) -> ToolDefinition:
    """Create the get_design_tokens tool."""

    async def handler(params: DesignTokensParams) -> dict[str, Any]:
        return await services.tokens.get_tokens(params.category or "all")

    return ToolDefinition(
        name=ToolName.GET_DESIGN_TOKENS.value,
        description="Get USWDS design tokens",
        parameters_model=DesignTokensParams,
        handler=handler,
    )


def validate_uswds_code_tool(services: ServiceBag) -> ToolDefinition:
    """Create the validate_uswds_code tool."""

    async def handler(params: ValidateCodeParams) -> dict[str, Any]:
        return await services.validation.validate(
            params.code, is_react=params.framework == "react", check_accessibility=True
        )

    return ToolDefinition(
        name=ToolName.VALIDATE_USWDS_CODE.value,
        description="Validate HTML/JSX code for USWDS patterns",
        parameters_model=ValidateCodeParams,
        handler=handler,
    )


def check_color_contrast_tool(services: ServiceBag) -> ToolDefinition:
    """Create the check_color_contrast tool."""

    async def handler(params: ColorContrastParams) -> dict[str, Any]:
        return await services.contrast.check_contrast(
            params.foreground, params.background
        )

    return ToolDefinition(
        name=ToolName.CHECK_COLOR_CONTRAST.value,
        description="Check WCAG color contrast ratios",
        parameters_model=ColorContrastParams,
        handler=handler,
    )


def search_icons_tool(services: ServiceBag) -> ToolDefinition:
    """Create the search_icons tool."""

    async def handler(params: SearchIconsParams) -> dict[str, Any]:
        return await services.icons.get_icons(None, params.query)

    return ToolDefinition(
        name=ToolName.SEARCH_ICONS.value,
        description="Search USWDS icons",
        parameters_model=SearchIconsParams,
        handler=handler,
    )


def suggest_layout_tool(services: ServiceBag) -> ToolDefinition:
    """Create the suggest_layout tool."""

    async def handler(params: SuggestLayoutParams) -> dict[str, Any]:
        return await services.layout.suggest_layout(params.page_type, params.framework)

    return ToolDefinition(
        name=ToolName.SUGGEST_LAYOUT.value,
        description="Suggest USWDS layout patterns",
        parameters_model=SuggestLayoutParams,
        handler=handler,
    )
