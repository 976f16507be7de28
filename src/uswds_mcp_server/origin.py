"""Origin header validation for browser requests to the HTTP transport."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from uswds_mcp_server.auth import get_header

ALLOWED_ORIGINS = frozenset(
    {
        "https://uswdsmcp.com",
        "https://www.uswdsmcp.com",
        "https://api.uswdsmcp.com",
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    }
)

STAGE_HOST_PATTERN = re.compile(r"^[a-z0-9-]+-api\.uswdsmcp\.com$")


@dataclass(frozen=True)
class OriginCheck:
    """Result of :func:`validate_origin`."""

    valid: bool
    error: str | None = None


def is_stage_origin(origin: str) -> bool:
    """Whether ``origin`` is a per-stage API host such as ``dev-api.uswdsmcp.com``."""
    try:
        hostname = urlsplit(origin).hostname
    except ValueError:
        return False
    return bool(hostname and STAGE_HOST_PATTERN.match(hostname))


def validate_origin(
    headers: Mapping[str, Any] | None, development: bool = False
) -> OriginCheck:
    """Accept requests without an Origin, from allowed origins, or in development.

    Requests without an Origin header come from non-browser clients, which
    authenticate with an API key.
    """
    origin = get_header(headers, "origin")
    if origin is None:
        return OriginCheck(valid=True)
    if origin in ALLOWED_ORIGINS or is_stage_origin(origin) or development:
        return OriginCheck(valid=True)
    return OriginCheck(
        valid=False,
        error=(
            f"Origin '{origin}' is not allowed. This server only accepts requests "
            "from authorized domains."
        ),
    )
