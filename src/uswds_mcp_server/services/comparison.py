"""Side-by-side comparison of React-USWDS components."""

from __future__ import annotations

from typing import Any

from uswds_mcp_server.data.components import REACT_COMPONENTS
from uswds_mcp_server.framework import FrameworkAwareService, FrameworkMode

MAX_UNIQUE_PROPS = 5

# Ordered pairs with hand-written guidance; any other pair falls back to the
# component descriptions.
_USAGE_GUIDANCE: dict[tuple[str, str], tuple[str, str]] = {
    ("Alert", "SiteAlert"): (
        "Use for contextual messages within page content",
        "Use for site-wide announcements at the top of the page",
    ),
    ("Select", "ComboBox"): (
        "Use for standard dropdown selections with predefined options",
        "Use when users need to search/filter a large list of options",
    ),
    ("TextInput", "Textarea"): (
        "Use for single-line text input",
        "Use for multi-line text input",
    ),
    ("Button", "ButtonGroup"): (
        "Use for single actions",
        "Use for multiple related actions",
    ),
}

_PAIR_RECOMMENDATIONS: dict[frozenset[str], str] = {
    frozenset({"Alert", "SiteAlert"}): (
        "Use Alert for inline messages within content. Use SiteAlert for important "
        "site-wide announcements."
    ),
    frozenset({"Select", "ComboBox"}): (
        "Use Select for short lists. Use ComboBox for long lists that need search "
        "functionality."
    ),
    frozenset({"TextInput", "Textarea"}): (
        "Use TextInput for single-line inputs. Use Textarea for multi-line content."
    ),
}


def _prop_names(component: dict[str, Any]) -> list[str]:
    return [prop["name"] for prop in component["props"]]


def shared_props(first: dict[str, Any], second: dict[str, Any]) -> list[str]:
    """Props of ``first`` that ``second`` also declares, in ``first``'s order."""
    other = set(_prop_names(second))
    return [name for name in _prop_names(first) if name in other]


def unique_props(first: dict[str, Any], second: dict[str, Any]) -> list[str]:
    """Up to five props of ``first`` that ``second`` lacks."""
    other = set(_prop_names(second))
    return [name for name in _prop_names(first) if name not in other][
        :MAX_UNIQUE_PROPS
    ]


def similar_components(name: str) -> str:
    """Suggest known component names that contain, or are contained in, ``name``."""
    needle = name.lower()
    similar = [
        key
        for key in REACT_COMPONENTS
        if key.lower() in needle or needle in key.lower()
    ]
    if similar:
        return f"Did you mean: {', '.join(similar)}?"
    return "No similar components found"


def component_not_found(name: str) -> dict[str, Any]:
    return {
        "error": f'Component "{name}" not found',
        "message": "Check the component name spelling",
        "suggestion": similar_components(name),
    }


class ComparisonService(FrameworkAwareService):
    """Explain how two React-USWDS components differ and when to use each."""

    async def compare_components(
        self,
        component1: str,
        component2: str,
        framework: FrameworkMode | None = None,
    ) -> dict[str, Any]:
        """Compare two components by name.

        Comparison is only available in React mode; vanilla and Tailwind modes
        return an explanatory payload instead.
        """
        mode = self.resolve(framework)
        if mode == "tailwind":
            return {
                "mode": "tailwind-uswds",
                "message": (
                    "Component comparison is not yet available for Tailwind USWDS"
                ),
                "suggestion": (
                    "Use get_tailwind_uswds_component to view individual components"
                ),
            }
        if mode == "vanilla":
            return {
                "mode": "vanilla-uswds",
                "message": "Component comparison is only available in React mode",
                "suggestion": 'Use framework="react" to compare React components',
            }

        first = REACT_COMPONENTS.get(component1)
        second = REACT_COMPONENTS.get(component2)
        if first is None and second is None:
            return {
                "error": "Neither component found",
                "message": (
                    f'"{component1}" and "{component2}" are not valid component names'
                ),
                "hint": "Use list_components to see available components",
            }
        if first is None:
            return component_not_found(component1)
        if second is None:
            return component_not_found(component2)

        return {
            "components": {
                component1: self._summary(first),
                component2: self._summary(second),
            },
            "similarities": self._similarities(first, second),
            "differences": self._differences(first, second, component1, component2),
            "props": {
                component1: {
                    "count": len(first["props"]),
                    "unique": unique_props(first, second),
                    "shared": shared_props(first, second),
                },
                component2: {
                    "count": len(second["props"]),
                    "unique": unique_props(second, first),
                    "shared": shared_props(second, first),
                },
            },
            "whenToUse": self._when_to_use(first, second, component1, component2),
            "recommendation": self._recommendation(
                first, second, component1, component2
            ),
        }

    @staticmethod
    def _summary(component: dict[str, Any]) -> dict[str, str]:
        return {
            "name": component["name"],
            "category": component["category"],
            "description": component["description"],
            "url": component["url"],
        }

    @staticmethod
    def _similarities(first: dict[str, Any], second: dict[str, Any]) -> list[str]:
        notes: list[str] = []
        if first["category"] == second["category"]:
            notes.append(f"Both are {first['category']} components")

        shared = shared_props(first, second)
        if shared:
            more = ", ..." if len(shared) > 3 else ""
            notes.append(
                f"Share {len(shared)} common props: {', '.join(shared[:3])}{more}"
            )

        desc1 = first["description"].lower()
        desc2 = second["description"].lower()

        def both(word: str) -> bool:
            return word in desc1 and word in desc2

        if both("form") or both("input"):
            notes.append("Both are form input components")
        if both("alert") or both("message"):
            notes.append("Both display messages or alerts")
        if both("navigat"):
            notes.append("Both are navigation components")

        return notes or ["Limited similarities - these are distinct components"]

    def _differences(
        self,
        first: dict[str, Any],
        second: dict[str, Any],
        name1: str,
        name2: str,
    ) -> dict[str, Any]:
        return {
            "category": (
                f"{name1} is {first['category']}, {name2} is {second['category']}"
                if first["category"] != second["category"]
                else None
            ),
            "propCount": (
                f"{name1} has {len(first['props'])} props, "
                f"{name2} has {len(second['props'])} props"
            ),
            "accessibility": self._compare_accessibility(first, second, name1, name2),
            "examples": (
                f"{name1} has {len(first['examples'])} examples, "
                f"{name2} has {len(second['examples'])} examples"
            ),
            "specializations": self._specializations(first, second, name1, name2),
        }

    @staticmethod
    def _compare_accessibility(
        first: dict[str, Any], second: dict[str, Any], name1: str, name2: str
    ) -> str:
        aria1 = len(first["accessibility"].get("ariaAttributes") or [])
        aria2 = len(second["accessibility"].get("ariaAttributes") or [])
        if aria1 > aria2:
            return f"{name1} has more ARIA attributes ({aria1} vs {aria2})"
        if aria2 > aria1:
            return f"{name2} has more ARIA attributes ({aria2} vs {aria1})"
        return "Both have similar accessibility requirements"

    @staticmethod
    def _specializations(
        first: dict[str, Any], second: dict[str, Any], name1: str, name2: str
    ) -> list[str]:
        specs: list[str] = []
        for topic in ("date", "file"):
            has1 = any(topic in name.lower() for name in _prop_names(first))
            has2 = any(topic in name.lower() for name in _prop_names(second))
            if has1 and not has2:
                specs.append(f"{name1} is specialized for {topic} handling")
            elif has2 and not has1:
                specs.append(f"{name2} is specialized for {topic} handling")
        return specs or ["No major specializations detected"]

    @staticmethod
    def _when_to_use(
        first: dict[str, Any], second: dict[str, Any], name1: str, name2: str
    ) -> dict[str, str]:
        guidance = _USAGE_GUIDANCE.get((name1, name2))
        if guidance is not None:
            return {name1: guidance[0], name2: guidance[1]}
        return {name1: first["description"], name2: second["description"]}

    @staticmethod
    def _recommendation(
        first: dict[str, Any], second: dict[str, Any], name1: str, name2: str
    ) -> str:
        if first["category"] != second["category"]:
            return (
                "These components serve different purposes. Choose based on your use "
                f"case: {name1} for {first['category']}, {name2} for "
                f"{second['category']}."
            )
        pair = _PAIR_RECOMMENDATIONS.get(frozenset({name1, name2}))
        if pair is not None:
            return pair
        return (
            f"Both are {first['category']} components. Review the props and examples "
            "to determine which fits your needs better."
        )
