"""Domain services backing the USWDS tools."""

from __future__ import annotations

from dataclasses import dataclass

from uswds_mcp_server.config import Settings
from uswds_mcp_server.services.codegen import CodeGeneratorService
from uswds_mcp_server.services.comparison import ComparisonService
from uswds_mcp_server.services.components import ComponentService
from uswds_mcp_server.services.contrast import ColorContrastService
from uswds_mcp_server.services.icons import IconService
from uswds_mcp_server.services.layout import LayoutService
from uswds_mcp_server.services.suggestions import SuggestionService
from uswds_mcp_server.services.tailwind import TailwindUSWDSService
from uswds_mcp_server.services.tokens import DesignTokenService
from uswds_mcp_server.services.validation import ValidationService


@dataclass(frozen=True)
class ServiceBag:
    """One instance of every domain service, shared by all tool handlers."""

    component: ComponentService
    tokens: DesignTokenService
    validation: ValidationService
    contrast: ColorContrastService
    icons: IconService
    layout: LayoutService
    suggestion: SuggestionService
    comparison: ComparisonService
    code_generator: CodeGeneratorService
    tailwind: TailwindUSWDSService


def build_services(
    use_react: bool = False, tailwind: TailwindUSWDSService | None = None
) -> ServiceBag:
    """Construct the service bag.

    Args:
        use_react: Default framework for framework-aware services; ``True``
            selects React, otherwise vanilla USWDS.
        tailwind: Preconfigured Tailwind docs client, e.g. one with a mock
            transport. A default client is created when omitted.
    """
    return ServiceBag(
        component=ComponentService(use_react),
        tokens=DesignTokenService(),
        validation=ValidationService(),
        contrast=ColorContrastService(),
        icons=IconService(),
        layout=LayoutService(use_react),
        suggestion=SuggestionService(use_react),
        comparison=ComparisonService(use_react),
        code_generator=CodeGeneratorService(use_react),
        tailwind=tailwind or TailwindUSWDSService(),
    )



def build_services_from_settings(settings: Settings) -> ServiceBag:
    """Construct the service bag described by process settings."""
    tailwind = TailwindUSWDSService(
        settings.tailwind_docs_base_url,
        timeout=settings.http_timeout_seconds,
        cache_ttl=settings.cache_ttl_seconds,
    )
    return build_services(settings.use_react_components, tailwind)


__all__ = [
    "CodeGeneratorService",
    "ColorContrastService",
    "ComparisonService",
    "ComponentService",
    "DesignTokenService",
    "IconService",
    "LayoutService",
    "ServiceBag",
    "SuggestionService",
    "TailwindUSWDSService",
    "ValidationService",
    "build_services",
    "build_services_from_settings",
]
