"""Errors raised while assembling the tool registry."""

from __future__ import annotations


class ConfigurationError(Exception):
    """A tool descriptor or dispatch table is malformed.

    These are build-time defects: they are raised while the registry is being
    constructed and are never converted into tool results.
    """
