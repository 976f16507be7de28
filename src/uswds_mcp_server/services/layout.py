"""Layout pattern lookups over the USWDS grid."""

from __future__ import annotations

import re
from typing import Any

from uswds_mcp_server.data.layouts import GRID_DOCS_URL, LAYOUT_PATTERNS, LayoutPattern
from uswds_mcp_server.framework import FrameworkAwareService, FrameworkMode

# The layout tables are keyed by code flavor rather than framework name.
LAYOUT_MODES: dict[FrameworkMode, str] = {
    "react": "react",
    "vanilla": "html",
    "tailwind": "tailwind",
}

BREAKPOINTS = {
    "mobile": "0px - 639px (grid-col-*)",
    "tablet": "640px - 1023px (tablet:grid-col-*)",
    "desktop": "1024px+ (desktop:grid-col-*)",
}

GRID_UTILITIES = {
    "gap": "grid-gap - Adds gutters between columns",
    "offset": "grid-offset-* - Offset columns",
    "flex": "flex-* utilities - For flexbox alignment",
    "sticky": "position-sticky - For sticky sidebars",
}

LAYOUT_TIPS = [
    "Use GridContainer to center and constrain content width",
    "Grid system is 12 columns by default",
    "Use responsive props for different breakpoints",
    "Add grid-gap for consistent spacing between columns",
    "Combine with utility classes for margins and padding",
]

COMMON_PATTERNS = [
    "single-column - For focused content",
    "sidebar-content - For documentation",
    "card-grid - For lists and catalogs",
    "dashboard - For data displays",
]


def normalize_layout_key(key: str) -> str:
    """``"Two Column"`` -> ``"two-column"``."""
    return re.sub(r"\s+", "-", key.strip().lower())


def matched_use_cases(pattern: LayoutPattern, use_case: str) -> list[str]:
    """Use cases of ``pattern`` that contain, or are contained in, ``use_case``."""
    needle = use_case.lower()
    return [
        case
        for case in pattern["useCase"]
        if needle in case.lower() or case.lower() in needle
    ]


class LayoutService(FrameworkAwareService):
    """Serve layout patterns as React, HTML or Tailwind code."""

    def _mode(self, framework: str | None) -> str:
        return LAYOUT_MODES[self.resolve(framework)]

    async def get_layouts(self, framework: str | None = None) -> dict[str, Any]:
        """Summaries of every layout pattern, without code."""
        layouts = [
            {
                "key": key,
                "name": pattern["name"],
                "description": pattern["description"],
                "useCase": pattern["useCase"],
                "responsive": pattern["responsive"],
            }
            for key, pattern in LAYOUT_PATTERNS.items()
        ]
        return {
            "total": len(layouts),
            "mode": self._mode(framework),
            "layouts": layouts,
            "gridDocs": GRID_DOCS_URL,
            "note": "All layouts are responsive and follow USWDS Grid system",
        }

    async def get_layout(
        self, layout_key: str, framework: str | None = None
    ) -> dict[str, Any]:
        """Return one layout with code in the resolved framework flavor.

        Keys are matched case-insensitively with whitespace treated as ``-``.
        """
        mode = self._mode(framework)
        pattern = LAYOUT_PATTERNS.get(normalize_layout_key(layout_key))
        if pattern is None:
            return {
                "error": f'Layout pattern "{layout_key}" not found',
                "suggestion": f"Available layouts: {', '.join(LAYOUT_PATTERNS)}",
                "hint": "Use suggest_layout to find a layout for your page type",
            }

        return {
            "name": pattern["name"],
            "description": pattern["description"],
            "useCase": pattern["useCase"],
            "responsive": pattern["responsive"],
            "code": pattern["code"][mode],  # type: ignore[literal-required]
            "mode": mode,
            "breakpoints": BREAKPOINTS,
            "gridUtilities": GRID_UTILITIES,
            "tips": LAYOUT_TIPS,
            "resources": [
                {"title": "USWDS Grid", "url": GRID_DOCS_URL},
                {
                    "title": "Responsive Design",
                    "url": f"{GRID_DOCS_URL}#responsive-classes",
                },
            ],
        }

    async def suggest_layout(
        self, use_case: str, framework: str | None = None
    ) -> dict[str, Any]:
        """Rank layouts by how many of their use cases match ``use_case``.

        The best match also carries its code so a single call is enough to
        start building the page.
        """
        mode = self._mode(framework)
        suggestions = []
        for key, pattern in LAYOUT_PATTERNS.items():
            matched = matched_use_cases(pattern, use_case)
            if matched:
                suggestions.append(
                    {
                        "key": key,
                        "name": pattern["name"],
                        "description": pattern["description"],
                        "relevance": len(matched),
                        "matchedUseCases": matched,
                    }
                )
        # Stable sort keeps table order between equally relevant layouts.
        suggestions.sort(key=lambda item: item["relevance"], reverse=True)

        if not suggestions:
            return {
                "useCase": use_case,
                "mode": mode,
                "message": "No exact matches found",
                "recommendation": (
                    "Try a page type such as 'documentation', 'dashboard' or "
                    "'landing page'"
                ),
                "commonPatterns": COMMON_PATTERNS,
            }

        best = LAYOUT_PATTERNS[suggestions[0]["key"]]
        return {
            "useCase": use_case,
            "mode": mode,
            "matches": len(suggestions),
            "suggestions": suggestions,
            "recommended": {
                "key": suggestions[0]["key"],
                "code": best["code"][mode],  # type: ignore[literal-required]
            },
            "gridDocs": GRID_DOCS_URL,
        }
