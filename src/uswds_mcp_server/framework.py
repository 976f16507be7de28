"""Framework mode selection shared by the domain services.

Every framework-aware service carries a default chosen at construction time and
lets each call override it. The rule is the same everywhere: an explicit
``framework`` argument wins, otherwise the constructor default applies.
"""

from __future__ import annotations

from typing import Literal, get_args

from uswds_mcp_server.errors import ServiceError

FrameworkMode = Literal["react", "vanilla", "tailwind"]

FRAMEWORK_MODES: tuple[str, ...] = get_args(FrameworkMode)


def resolve_framework(framework: str | None, use_react: bool) -> FrameworkMode:
    """Return the effective framework for a call.

    Args:
        framework: Per-call override, or ``None`` to use the default.
        use_react: Constructor-level default; ``True`` means React.

    Raises:
        ServiceError: If the override is not a known framework mode.

    Returns:
        The framework mode the service should render.
    """

    if framework is None:
        return "react" if use_react else "vanilla"
    if framework not in FRAMEWORK_MODES:
        raise ServiceError(
            f"Unsupported framework '{framework}'. "
            f"Expected one of: {', '.join(FRAMEWORK_MODES)}"
        )
    return framework  # type: ignore[return-value]


class FrameworkAwareService:
    """Base class for services whose output depends on the framework mode."""

    def __init__(self, use_react: bool = False) -> None:
        self._use_react = use_react

    @property
    def use_react(self) -> bool:
        """Whether React is the default framework for this instance."""
        return self._use_react

    def resolve(self, framework: str | None) -> FrameworkMode:
        """Resolve ``framework`` against this instance's default."""
        return resolve_framework(framework, self._use_react)
