"""Parameter building blocks shared by the tool modules."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from uswds_mcp.tools import ToolParameters

Framework = Literal["react", "vanilla", "tailwind"]

FRAMEWORK_DESCRIPTION = (
    'Component framework: "react" for React-USWDS, "vanilla" for standard USWDS '
    'HTML, "tailwind" for Tailwind USWDS. Defaults to server configuration if '
    "not specified."
)


class FrameworkParams(ToolParameters):
    """Parameters accepted by every framework-aware tool."""

    framework: Framework | None = Field(default=None, description=FRAMEWORK_DESCRIPTION)


class NoParams(ToolParameters):
    """Parameters for tools that take no arguments."""
