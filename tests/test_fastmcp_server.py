"""End-to-end coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import pytest
from fastmcp.client import Client

from uswds_mcp_server.fastmcp_adapter import build_fastmcp_app
from uswds_mcp_server.services import ServiceBag
from uswds_mcp_server.tools import ToolName


@pytest.mark.anyio()
async def test_fastmcp_server_supports_tool_discovery(services: ServiceBag) -> None:
    """The FastMCP server exposes every USWDS tool with its input schema."""
    app, definitions = build_fastmcp_app(services)

    async with Client(app) as client:
        tools = await client.list_tools()

    assert len(definitions) == len(ToolName)
    assert {tool.name for tool in tools} == {name.value for name in ToolName}
    contrast = next(tool for tool in tools if tool.name == "check_color_contrast")
    assert set(contrast.inputSchema["required"]) == {"foreground", "background"}


@pytest.mark.anyio()
async def test_fastmcp_returns_text_content(services: ServiceBag) -> None:
    """Successful calls return the JSON payload as text."""
    app, _ = build_fastmcp_app(services)

    async with Client(app) as client:
        result = await client.call_tool(
            "check_color_contrast", {"foreground": "#000", "background": "#fff"}
        )

    assert result.is_error is False
    payload = json.loads(result.content[0].text)
    assert payload["contrastRatio"] == 21.0


@pytest.mark.anyio()
async def test_fastmcp_reaches_tailwind_docs(services: ServiceBag) -> None:
    """Tailwind tools use the service bag the app was built with."""
    app, _ = build_fastmcp_app(services)

    async with Client(app) as client:
        result = await client.call_tool("get_tailwind_uswds_colors", {})

    assert json.loads(result.content[0].text)["title"] == "Colors"


@pytest.mark.anyio()
async def test_fastmcp_propagates_errors(services: ServiceBag) -> None:
    """Error envelopes surface as isError results with the same text."""
    app, _ = build_fastmcp_app(services)

    async with Client(app) as client:
        result = await client.call_tool(
            "check_color_contrast", {"foreground": "#000"}, raise_on_error=False
        )

    assert result.is_error is True
    assert result.content[0].text.startswith(
        "Error: Invalid parameters for tool 'check_color_contrast'"
    )


@pytest.mark.anyio()
async def test_fastmcp_unknown_tool_uses_dispatcher_text(services: ServiceBag) -> None:
    """Unregistered names get the dispatcher's error text, not FastMCP's."""
    app, _ = build_fastmcp_app(services)

    async with Client(app) as client:
        result = await client.call_tool("nonexistent_tool", {}, raise_on_error=False)

    assert result.is_error is True
    assert result.content[0].text == "Error: Unknown tool: nonexistent_tool"
