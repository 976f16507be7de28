"""Entry point for the USWDS MCP server."""

from __future__ import annotations

import argparse
import logging

from uswds_mcp_server.config import SERVER_NAME, SERVER_VERSION, get_settings
from uswds_mcp_server.fastmcp_adapter import build_fastmcp_app
from uswds_mcp_server.logging_setup import configure_logging
from uswds_mcp_server.services import build_services_from_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server."""
    parser = argparse.ArgumentParser(description="USWDS MCP server")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="Serve over stdio (default) or streamable HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="HTTP bind address.")
    parser.add_argument("--port", type=int, default=8000, help="HTTP port.")
    parser.add_argument("--path", default="/mcp", help="HTTP endpoint path.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Build the FastMCP app from the environment and serve it."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    app, tools = build_fastmcp_app(build_services_from_settings(settings))
    logger.info(
        "Starting %s %s with %d tools (%s mode, %s transport)",
        SERVER_NAME,
        SERVER_VERSION,
        len(tools),
        "react" if settings.use_react_components else "vanilla",
        args.transport,
    )

    if args.transport == "stdio":
        app.run(transport="stdio")
    else:
        app.run(transport="http", host=args.host, port=args.port, path=args.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
