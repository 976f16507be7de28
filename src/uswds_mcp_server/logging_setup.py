"""Logging configuration.

All log output goes to standard error. The stdio transport owns standard output
for protocol messages, so nothing else may write there.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "info", stream: TextIO | None = None) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Case-insensitive level name; unknown names mean ``info``.
        stream: Destination stream, ``sys.stderr`` when omitted.
    """
    logging.basicConfig(
        level=_LEVELS.get(level.lower(), logging.INFO),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
