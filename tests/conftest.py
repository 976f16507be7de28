"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from uswds_mcp_server.config import Settings
from uswds_mcp_server.services import ServiceBag, TailwindUSWDSService, build_services

TAILWIND_BASE_URL = "https://docs.test"

_PAGE = """
<html>
  <head><title>{title} | USWDS Tailwind</title></head>
  <body>
    <nav><a href="/components/">All components</a></nav>
    <main>
      <h1>{title}</h1>
      <p>{intro}</p>
      <h2>Usage</h2>
      <p>Add the plugin to tailwind.config.js.</p>
      <h3>Options</h3>
      <p>Every option is optional.</p>
      <pre><code>npm install @uswds-tailwind/theme</code></pre>
    </main>
  </body>
</html>
"""

_COMPONENT_INDEX = """
<html>
  <body>
    <main>
      <h1>Components</h1>
      <ul>
        <li><a href="/components/accordion">Accordion</a></li>
        <li><a href="/components/button">Button</a></li>
        <li><a href="/components/button">Button</a></li>
        <li><a href="/components">Overview</a></li>
      </ul>
    </main>
  </body>
</html>
"""

TAILWIND_PAGES: dict[str, str] = {
    "/getting-started": _PAGE.format(
        title="Getting Started", intro="Install USWDS Tailwind with npm."
    ),
    "/javascript": _PAGE.format(
        title="JavaScript", intro="Interactive components use Alpine.js."
    ),
    "/colors": _PAGE.format(title="Colors", intro="Theme colors map to USWDS tokens."),
    "/icons": _PAGE.format(title="Icons", intro="Icons come from Material Symbols."),
    "/typography": _PAGE.format(
        title="Typography", intro="Public Sans is the default font family."
    ),
    "/components": _COMPONENT_INDEX,
    "/components/button": _PAGE.format(
        title="Button", intro="Buttons signal actions with usa-button styles."
    ),
}


class RecordingHandler:
    """httpx mock handler serving canned documentation pages."""

    def __init__(self, pages: dict[str, str]) -> None:
        self.pages = pages
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.pages.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, text=body)


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the event loop FastMCP requires."""
    return "asyncio"


@pytest.fixture()
def tailwind_handler() -> RecordingHandler:
    """Provide the handler behind the mocked documentation site."""
    return RecordingHandler(dict(TAILWIND_PAGES))


@pytest.fixture()
def tailwind_service(tailwind_handler: RecordingHandler) -> TailwindUSWDSService:
    """Provide a Tailwind docs service that never touches the network."""
    return TailwindUSWDSService(
        TAILWIND_BASE_URL, transport=httpx.MockTransport(tailwind_handler)
    )


@pytest.fixture()
def services(tailwind_service: TailwindUSWDSService) -> ServiceBag:
    """Provide a service bag defaulting to vanilla USWDS."""
    return build_services(use_react=False, tailwind=tailwind_service)


@pytest.fixture()
def react_services(tailwind_service: TailwindUSWDSService) -> ServiceBag:
    """Provide a service bag defaulting to React-USWDS."""
    return build_services(use_react=True, tailwind=tailwind_service)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Provide settings for the HTTP transport with a temporary cache dir."""
    return Settings(
        api_key="test-key-1234567890",
        environment="production",
        rate_limit_per_minute=5,
        rate_limit_per_day=50,
        cache_dir=str(tmp_path / "cache"),
        tailwind_docs_base_url=TAILWIND_BASE_URL,
    )


@pytest.fixture()
def make_event() -> Callable[..., dict[str, Any]]:
    """Build API Gateway style events."""

    def _make(
        body: Any = None,
        *,
        headers: dict[str, str] | None = None,
        path: str = "/mcp",
        method: str = "POST",
        api_key: str | None = "test-key-1234567890",
    ) -> dict[str, Any]:
        all_headers = {"content-type": "application/json", **(headers or {})}
        if api_key is not None:
            all_headers.setdefault("x-api-key", api_key)
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "headers": all_headers,
            "body": body,
            "requestContext": {
                "requestId": "req-1",
                "http": {"method": method, "path": path, "sourceIp": "127.0.0.1"},
            },
        }

    return _make