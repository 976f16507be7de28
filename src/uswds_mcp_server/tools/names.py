"""Names of every tool the server exposes, in registry order."""

from __future__ import annotations

from enum import Enum


class ToolName(str, Enum):
    """Tool names advertised to clients."""

    LIST_COMPONENTS = "list_components"
    GET_COMPONENT_INFO = "get_component_info"
    GET_DESIGN_TOKENS = "get_design_tokens"
    VALIDATE_USWDS_CODE = "validate_uswds_code"
    CHECK_COLOR_CONTRAST = "check_color_contrast"
    SEARCH_ICONS = "search_icons"
    SUGGEST_LAYOUT = "suggest_layout"
    SUGGEST_COMPONENTS = "suggest_components"
    COMPARE_COMPONENTS = "compare_components"
    GENERATE_COMPONENT_CODE = "generate_component_code"
    GET_TAILWIND_USWDS_GETTING_STARTED = "get_tailwind_uswds_getting_started"
    GET_TAILWIND_USWDS_COMPONENT = "get_tailwind_uswds_component"
    GET_TAILWIND_USWDS_JAVASCRIPT = "get_tailwind_uswds_javascript"
    GET_TAILWIND_USWDS_COLORS = "get_tailwind_uswds_colors"
    GET_TAILWIND_USWDS_ICONS = "get_tailwind_uswds_icons"
    GET_TAILWIND_USWDS_TYPOGRAPHY = "get_tailwind_uswds_typography"
    SEARCH_TAILWIND_USWDS_DOCS = "search_tailwind_uswds_docs"
