"""Custom error types for USWDS domain services."""

from __future__ import annotations


class MCPError(Exception):
    """Domain error with a machine-readable type and optional details.

    ``str()`` is the human message that ends up in the ``Error: ...``
    envelope; ``error_type`` and ``details`` are for logs.
    """

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = details


class ServiceError(MCPError):
    """A service rejected its input."""

    def __init__(self, message: str, details: object | None = None) -> None:
        super().__init__("ServiceError", message, details)


class UpstreamError(MCPError):
    """A remote documentation source could not be reached or parsed."""

    def __init__(self, message: str, details: object | None = None) -> None:
        super().__init__("UpstreamError", message, details)
