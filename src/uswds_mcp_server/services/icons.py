"""Icon browsing and search."""

from __future__ import annotations

from typing import Any

from uswds_mcp_server.data.icons import ICON_CATEGORIES, USWDS_ICONS, IconInfo

_SPRITE = "/assets/img/sprite.svg"


def _matches(icon: IconInfo, search: str) -> bool:
    return (
        search in icon["name"].lower()
        or any(search in keyword.lower() for keyword in icon["keywords"])
        or search in icon["usage"].lower()
    )


class IconService:
    """Browse the USWDS icon set by category or keyword."""

    async def get_icons(
        self, category: str | None = None, search: str | None = None
    ) -> dict[str, Any]:
        """List icons, optionally filtered, grouped by category.

        Args:
            category: Category key such as ``"alerts"``; ``None`` or ``"all"``
                keeps every category.
            search: Case-insensitive text matched against names, keywords and
                usage notes.
        """
        icons = list(USWDS_ICONS.values())
        if category and category != "all":
            icons = [icon for icon in icons if icon["category"] == category]
        if search:
            needle = search.lower()
            icons = [icon for icon in icons if _matches(icon, needle)]

        grouped: dict[str, Any] = {}
        for key, label in ICON_CATEGORIES.items():
            members = [icon for icon in icons if icon["category"] == key]
            if members:
                grouped[key] = {
                    "label": label,
                    "count": len(members),
                    "icons": [
                        {
                            "name": icon["name"],
                            "usage": icon["usage"],
                            "keywords": icon["keywords"],
                        }
                        for icon in members
                    ],
                }

        return {
            "total": len(icons),
            "categories": ICON_CATEGORIES,
            "filters": {"category": category or "all", "search": search or None},
            "icons": grouped,
            "usage": {
                "react": (
                    "import { Icon } from '@trussworks/react-uswds'\n\n"
                    "<Icon>icon_name</Icon>"
                ),
                "html": (
                    '<svg class="usa-icon" aria-hidden="true" role="img">'
                    '<use xlink:href="/path/to/sprite.svg#icon_name"></use></svg>'
                ),
            },
            "resources": [
                {
                    "title": "USWDS Icons",
                    "url": "https://designsystem.digital.gov/components/icon/",
                },
                {"title": "Material Icons", "url": "https://fonts.google.com/icons"},
            ],
        }

    async def get_icon_info(self, name: str) -> dict[str, Any]:
        """Return usage snippets and accessibility notes for one icon."""
        icon = USWDS_ICONS.get(name)
        if icon is None:
            needle = name.lower()
            similar = [
                candidate["name"]
                for candidate in USWDS_ICONS.values()
                if needle in candidate["name"]
                or any(needle in keyword for keyword in candidate["keywords"])
            ][:5]
            return {
                "error": f'Icon "{name}" not found',
                "suggestion": (
                    f"Did you mean: {', '.join(similar)}?"
                    if similar
                    else "Browse available icons with the search_icons tool"
                ),
                "availableIcons": len(USWDS_ICONS),
            }

        icon_name = icon["name"]
        return {
            "name": icon_name,
            "category": icon["category"],
            "categoryLabel": ICON_CATEGORIES.get(icon["category"]),
            "usage": icon["usage"],
            "keywords": icon["keywords"],
            "examples": {
                "react": {
                    "basic": (
                        "import { Icon } from '@trussworks/react-uswds'\n\n"
                        f"<Icon>{icon_name}</Icon>"
                    ),
                    "withSize": f'<Icon size="5">{icon_name}</Icon>',
                    "withLabel": (
                        f'<Icon aria-label="{icon["usage"]}">{icon_name}</Icon>'
                    ),
                    "inButton": (
                        f"<Button>\n  <Icon>{icon_name}</Icon>\n"
                        "  Button Text\n</Button>"
                    ),
                },
                "html": {
                    "basic": (
                        '<svg class="usa-icon" aria-hidden="true" role="img">\n'
                        f'  <use xlink:href="{_SPRITE}#{icon_name}"></use>\n</svg>'
                    ),
                    "withSize": (
                        '<svg class="usa-icon usa-icon--size-5" aria-hidden="true" '
                        'role="img">\n'
                        f'  <use xlink:href="{_SPRITE}#{icon_name}"></use>\n</svg>'
                    ),
                },
            },
            "accessibility": {
                "decorative": 'Use aria-hidden="true" for decorative icons',
                "meaningful": f'Use aria-label="{icon["usage"]}" for meaningful icons',
                "inButton": "Include visible text or aria-label on the button",
                "guidelines": [
                    "Icons should not be the only means of conveying information",
                    "Provide text alternatives for screen readers",
                    "Use appropriate aria-hidden or aria-label attributes",
                ],
            },
            "relatedIcons": [
                other["name"]
                for other in USWDS_ICONS.values()
                if other["category"] == icon["category"] and other["name"] != icon_name
            ][:5],
        }
