"""Command-line interface for inspecting and calling USWDS tools locally."""

from __future__ import annotations

import argparse
import json
from typing import Any

import anyio

from uswds_mcp_server.config import get_settings
from uswds_mcp_server.logging_setup import configure_logging
from uswds_mcp_server.services import build_services_from_settings
from uswds_mcp_server.tools import build_server, dispatch


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Inspect and call USWDS MCP tools.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON.",
    )
    subparsers = parser.add_subparsers(dest="command")
    call = subparsers.add_parser("call", help="Call one tool and print its result.")
    call.add_argument("tool", help="Tool name, e.g. list_components.")
    call.add_argument(
        "--arguments",
        default="{}",
        help='Tool arguments as a JSON object, e.g. \'{"category": "forms"}\'.',
    )
    call.add_argument(
        "--framework-default",
        choices=("react", "vanilla"),
        help="Override USE_REACT_COMPONENTS for this call.",
    )
    return parser


def _parse_arguments(parser: argparse.ArgumentParser, raw: str) -> dict[str, Any]:
    try:
        arguments = json.loads(raw)
    except ValueError as error:
        parser.error(f"--arguments is not valid JSON: {error}")
    if not isinstance(arguments, dict):
        parser.error("--arguments must be a JSON object")
    return arguments


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if getattr(args, "framework_default", None):
        settings = settings.model_copy(
            update={"use_react_components": args.framework_default == "react"}
        )
    configure_logging(settings.log_level)
    services = build_services_from_settings(settings)

    if args.catalog:
        print(json.dumps(build_server(services).to_catalog(), indent=2))
        return 0

    if args.command == "call":
        arguments = _parse_arguments(parser, args.arguments)
        result = anyio.run(dispatch, args.tool, arguments, services)
        print(result.text)
        return 1 if result.is_error else 0

    print(json.dumps({"tools": build_server(services).available_tools()}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
