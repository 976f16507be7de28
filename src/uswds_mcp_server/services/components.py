"""Component catalogue and documentation lookups."""

from __future__ import annotations

import copy
from typing import Any

from uswds_mcp_server.data.components import (
    REACT_CATALOG,
    REACT_COMPONENTS,
    TAILWIND_USWDS_URL,
    USWDS_CATALOG,
    USWDS_URL,
    CatalogEntry,
    component_slug,
)
from uswds_mcp_server.framework import FrameworkAwareService, FrameworkMode

_MODES: dict[FrameworkMode, str] = {
    "react": "react-uswds",
    "vanilla": "vanilla-uswds",
    "tailwind": "tailwind-uswds",
}


def _tailwind_entry(entry: CatalogEntry) -> CatalogEntry:
    slug = component_slug(entry["name"])
    return {**entry, "url": f"{TAILWIND_USWDS_URL}/components/{slug}"}


TAILWIND_CATALOG: tuple[CatalogEntry, ...] = tuple(
    _tailwind_entry(entry) for entry in USWDS_CATALOG
)

_CATALOGS: dict[FrameworkMode, tuple[CatalogEntry, ...]] = {
    "react": REACT_CATALOG,
    "vanilla": USWDS_CATALOG,
    "tailwind": TAILWIND_CATALOG,
}


def _categories(catalog: tuple[CatalogEntry, ...]) -> list[str]:
    return list(dict.fromkeys(entry["category"] for entry in catalog))


class ComponentService(FrameworkAwareService):
    """List components and describe them for React-USWDS, USWDS or Tailwind."""

    async def list_components(
        self, category: str = "all", framework: FrameworkMode | None = None
    ) -> dict[str, Any]:
        """List the catalogue for the effective framework.

        Args:
            category: ``"all"`` or a category such as ``"forms"``.
            framework: Per-call framework override.
        """
        mode = self.resolve(framework)
        catalog = _CATALOGS[mode]
        if category == "all":
            return {
                "mode": _MODES[mode],
                "total": len(catalog),
                "categories": _categories(catalog),
                "components": [dict(entry) for entry in catalog],
            }

        filtered = [entry for entry in catalog if entry["category"] == category]
        return {
            "mode": _MODES[mode],
            "category": category,
            "total": len(filtered),
            "components": [
                {
                    "name": entry["name"],
                    "description": entry["description"],
                    "url": entry["url"],
                }
                for entry in filtered
            ],
        }

    async def get_component_info(
        self,
        component_name: str,
        include_examples: bool = True,
        framework: FrameworkMode | None = None,
    ) -> dict[str, Any]:
        """Describe one component.

        React mode returns the full props/examples/accessibility record, or a
        ``not found`` payload listing the known names. Vanilla and Tailwind
        modes return class guidance and a documentation link.
        """
        mode = self.resolve(framework)
        if mode == "react":
            return self._react_info(component_name, include_examples)

        slug = component_slug(component_name)
        if mode == "vanilla":
            return {
                "mode": _MODES[mode],
                "name": component_name,
                "message": (
                    "For detailed vanilla USWDS documentation, visit the official docs"
                ),
                "url": f"{USWDS_URL}/components/{slug}/",
                "guidance": {
                    "classes": f'Use "usa-{slug}" as the base class',
                    "accessibility": (
                        "Refer to USWDS documentation for specific accessibility "
                        "requirements"
                    ),
                    "examples": (
                        "Visit the URL above for complete HTML examples"
                        if include_examples
                        else "Not included"
                    ),
                },
            }
        return {
            "mode": _MODES[mode],
            "name": component_name,
            "message": (
                "USWDS Tailwind components are built from Tailwind utility classes; "
                "see the component page for markup and configuration"
            ),
            "url": f"{TAILWIND_USWDS_URL}/components/{slug}",
            "guidance": {
                "classes": (
                    "Compose Tailwind utilities with the @uswds-tailwind theme "
                    "tokens (e.g. bg-primary, text-base-darkest)"
                ),
                "accessibility": (
                    "Keep the USWDS markup structure and ARIA attributes when "
                    "styling with utilities"
                ),
                "examples": (
                    "Use get_tailwind_uswds_component for the live documentation"
                    if include_examples
                    else "Not included"
                ),
            },
        }

    async def get_accessibility_guidance(
        self, component_name: str, framework: FrameworkMode | None = None
    ) -> dict[str, Any]:
        """Return WCAG AA guidance, component specific when the record has it."""
        mode = self.resolve(framework)
        record = REACT_COMPONENTS.get(component_name)
        guidelines = [
            "All interactive elements must be keyboard accessible",
            "Maintain 4.5:1 color contrast ratio for text",
            "Provide clear focus indicators",
            "Use semantic HTML elements",
            "Include appropriate ARIA labels and roles",
            "Ensure components work with screen readers",
        ]
        payload: dict[str, Any] = {
            "component": component_name,
            "mode": _MODES[mode],
            "wcagLevel": "AA",
            "guidelines": guidelines,
            "resources": [
                {
                    "title": "WCAG 2.1 Guidelines",
                    "url": "https://www.w3.org/WAI/WCAG21/quickref/",
                },
                {
                    "title": "USWDS Accessibility",
                    "url": f"{USWDS_URL}/documentation/accessibility/",
                },
            ],
        }
        if record is not None:
            payload["componentGuidance"] = copy.deepcopy(record["accessibility"])
        return payload

    def _react_info(self, name: str, include_examples: bool) -> dict[str, Any]:
        record = REACT_COMPONENTS.get(name)
        if record is None:
            return {
                "error": f'Component "{name}" not found',
                "mode": "react-uswds",
                "suggestion": f"Available components: {', '.join(REACT_COMPONENTS)}",
                "message": "Check component name spelling and capitalization",
            }
        info = copy.deepcopy(record)
        if not include_examples:
            info["examples"] = []
        return {"mode": "react-uswds", **info}
