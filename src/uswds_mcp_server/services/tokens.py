"""Design token lookups."""

from __future__ import annotations

from typing import Any

from uswds_mcp_server.data.tokens import (
    DESIGN_TOKENS,
    DESIGN_TOKENS_URL,
    TOKEN_RECOMMENDATIONS,
)


class DesignTokenService:
    """Serve the USWDS color, spacing, typography and breakpoint tokens."""

    async def get_tokens(self, category: str = "all") -> dict[str, Any]:
        """Return every token table, or the one named by ``category``.

        An unknown category is reported in the payload (``error`` plus
        ``availableCategories``) rather than raised.
        """
        categories = list(DESIGN_TOKENS)
        if category == "all":
            return {
                "categories": categories,
                "tokens": DESIGN_TOKENS,
                "documentation": DESIGN_TOKENS_URL,
                "usage": (
                    "Design tokens ensure visual consistency and make theme changes "
                    "easier"
                ),
            }

        data = DESIGN_TOKENS.get(category)
        if data is None:
            return {
                "error": f'Category "{category}" not found',
                "availableCategories": categories,
            }
        return {
            "category": category,
            **data,
            "documentation": f"{DESIGN_TOKENS_URL}{category}/",
        }

    def get_token_recommendation(self, value: str) -> str | None:
        """Suggest the token that replaces a hard-coded value such as ``16px``."""
        return TOKEN_RECOMMENDATIONS.get(value.strip().lower())
