"""Use-case driven component recommendations."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from uswds_mcp_server.data.components import REACT_COMPONENTS
from uswds_mcp_server.framework import FrameworkAwareService, FrameworkMode

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "to", "for", "of", "in", "on", "with", "is", "are",
        "be", "i", "need", "want", "how", "show", "display",
    }
)  # fmt: skip

MAX_SUGGESTIONS = 5
_RELEVANCE_ORDER = {"high": 3, "medium": 2, "low": 1}


@dataclass(frozen=True)
class _Rule:
    triggers: tuple[str, ...]
    applies: Callable[[str, str], bool]
    points: int
    reason: str


def _named(*names: str) -> Callable[[str, str], bool]:
    return lambda name, _category: name in names


def _in_category(category: str) -> Callable[[str, str], bool]:
    return lambda _name, component_category: component_category == category


# Each rule fires when the use case mentions any trigger and the component
# satisfies the predicate.
_RULES: tuple[_Rule, ...] = (
    _Rule(
        ("form", "input", "submit"),
        _in_category("forms"),
        2,
        "Form-related component",
    ),
    _Rule(
        ("navigate", "menu", "link"),
        _in_category("navigation"),
        2,
        "Navigation component",
    ),
    _Rule(
        ("message", "notify", "alert"),
        _named("Alert", "SiteAlert", "Banner"),
        3,
        "Displays messages or notifications",
    ),
    _Rule(
        ("button", "click", "action"),
        _named("Button", "ButtonGroup"),
        3,
        "Interactive button component",
    ),
)

_SPECIFIC_RULES: tuple[_Rule, ...] = (
    _Rule(("success",), _named("Alert"), 2, "Alert can show success messages"),
    _Rule(("password",), _named("TextInput"), 2, "TextInput supports password type"),
    _Rule(
        ("dropdown", "select", "choose"),
        _named("Select", "ComboBox"),
        3,
        "Dropdown selection component",
    ),
    _Rule(
        ("date", "calendar"),
        lambda name, _category: "Date" in name,
        3,
        "Date selection component",
    ),
    _Rule(("file", "upload"), _named("FileInput"), 3, "File upload component"),
    _Rule(("card", "preview"), _named("Card"), 2, "Card component for content display"),
    _Rule(("table", "data", "list"), _named("Table"), 2, "Table for structured data"),
)


def extract_keywords(text: str) -> list[str]:
    """Split a lower-cased use case into meaningful words."""
    words = (re.sub(r"[^\w]", "", word) for word in text.split())
    return [word for word in words if len(word) > 2 and word not in STOP_WORDS]


def _apply(
    rules: tuple[_Rule, ...], use_case: str, name: str, category: str
) -> Iterator[_Rule]:
    for rule in rules:
        if any(trigger in use_case for trigger in rule.triggers) and rule.applies(
            name, category
        ):
            yield rule


def score_component(
    use_case: str, keywords: list[str], name: str, description: str, category: str
) -> tuple[int, str]:
    """Score how well a component fits a lower-cased use case.

    Returns:
        The score and a ``"; "``-joined explanation.
    """
    score = 0
    reasons: list[str] = []

    if name.lower() in use_case:
        score += 3
        reasons.append(f'Matches component name "{name}"')

    for rule in _apply(_RULES, use_case, name, category):
        score += rule.points
        reasons.append(rule.reason)

    description = description.lower()
    for keyword in keywords:
        if keyword in description:
            score += 1
            if len(reasons) < 3:
                reasons.append(f'Description mentions "{keyword}"')

    for rule in _apply(_SPECIFIC_RULES, use_case, name, category):
        score += rule.points
        reasons.append(rule.reason)

    return score, "; ".join(reasons) if reasons else "General match"


def general_guidance(use_case: str) -> str:
    """Point at the USWDS documentation most relevant to a use case."""
    text = use_case.lower()
    if "form" in text or "input" in text:
        return (
            "For forms, use USWDS form components: text input, select, checkbox, "
            "radio, textarea. See https://designsystem.digital.gov/components/form/"
        )
    if "alert" in text or "message" in text:
        return (
            "For messages, use Alert component. See "
            "https://designsystem.digital.gov/components/alert/"
        )
    if "button" in text:
        return (
            "For buttons, use Button component. See "
            "https://designsystem.digital.gov/components/button/"
        )
    if "navigate" in text or "menu" in text:
        return (
            "For navigation, consider Header, SideNav, or Breadcrumb. See "
            "https://designsystem.digital.gov/components/"
        )
    return "Browse USWDS components at https://designsystem.digital.gov/components/"


class SuggestionService(FrameworkAwareService):
    """Recommend React-USWDS components for a described use case."""

    async def suggest_components(
        self, use_case: str, framework: FrameworkMode | None = None
    ) -> dict[str, Any]:
        """Rank components against ``use_case``.

        Only React mode ranks components. Tailwind and vanilla modes return
        general guidance and point at other tools.
        """
        mode = self.resolve(framework)
        if mode == "tailwind":
            return {
                "mode": "tailwind-uswds",
                "message": (
                    "Tailwind USWDS suggestions are limited. Use "
                    "search_tailwind_uswds_docs or get_tailwind_uswds_component for "
                    "specific components."
                ),
                "generalGuidance": general_guidance(use_case),
                "suggestedTools": [
                    "search_tailwind_uswds_docs",
                    "get_tailwind_uswds_component",
                    "get_tailwind_uswds_getting_started",
                ],
            }
        if mode == "vanilla":
            return {
                "error": "Component suggestions work best with React mode",
                "mode": "vanilla-uswds",
                "message": (
                    "Component suggestions work best with React-USWDS. Set "
                    "USE_REACT_COMPONENTS=true for detailed suggestions. For vanilla "
                    "USWDS, see general guidance below."
                ),
                "generalGuidance": general_guidance(use_case),
                "suggestedAction": (
                    'Use list_components with framework="vanilla" to browse all '
                    "available components"
                ),
            }

        text = use_case.lower()
        keywords = extract_keywords(text)
        ranked: list[dict[str, Any]] = []
        for name, component in REACT_COMPONENTS.items():
            score, reason = score_component(
                text,
                keywords,
                component["name"],
                component["description"],
                component["category"],
            )
            if score > 0:
                relevance = "high" if score >= 3 else "medium" if score >= 2 else "low"
                ranked.append(
                    {"component": name, "relevance": relevance, "reason": reason}
                )
        ranked.sort(key=lambda item: _RELEVANCE_ORDER[item["relevance"]], reverse=True)

        if not ranked:
            return {
                "useCase": use_case,
                "message": "No specific components match your use case",
                "suggestion": "Try rephrasing or browse components by category",
                "categories": ["forms", "navigation", "ui", "layout"],
                "hint": "Use list_components to browse all available components",
            }

        extra = len(ranked) - MAX_SUGGESTIONS
        return {
            "useCase": use_case,
            "mode": "react-uswds",
            "suggestions": [
                {
                    **item,
                    "documentation": (
                        f'Use get_component_info with "{item["component"]}" for '
                        "full details"
                    ),
                    "category": REACT_COMPONENTS[item["component"]]["category"],
                }
                for item in ranked[:MAX_SUGGESTIONS]
            ],
            "additionalOptions": (
                f"{extra} more components may be relevant" if extra > 0 else None
            ),
            "nextSteps": [
                "Use get_component_info to see props and examples",
                "Use generate_component_code to create working code",
                "Use compare_components to understand differences",
            ],
        }
