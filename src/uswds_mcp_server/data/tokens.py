"""USWDS design token tables, grouped by category."""

from __future__ import annotations

from typing import Any


def _color(value: str, description: str, on_white: str) -> dict[str, Any]:
    return {
        "value": value,
        "description": description,
        "wcagContrast": {"onWhite": on_white},
    }


def _spacing(value: str, rem: str, description: str) -> dict[str, str]:
    return {"value": value, "rem": rem, "description": description}


def _token(value: str, description: str) -> dict[str, str]:
    return {"value": value, "description": description}


DESIGN_TOKENS: dict[str, dict[str, Any]] = {
    "color": {
        "description": "USWDS color design tokens",
        "tokens": {
            # primary
            "primary": _color("#005ea2", "Primary brand color", "7.59:1"),
            "primary-darker": _color("#1a4480", "Darker primary", "11.37:1"),
            "primary-vivid": _color("#0050d8", "Vivid primary", "8.59:1"),
            # secondary
            "secondary": _color("#d83933", "Secondary brand color", "4.75:1"),
            "secondary-darker": _color("#b50909", "Darker secondary", "6.77:1"),
            "secondary-vivid": _color("#e41d3d", "Vivid secondary", "4.85:1"),
            # accent
            "accent-warm": _color("#fa9441", "Warm accent color", "2.93:1"),
            "accent-cool": _color("#00bde3", "Cool accent color", "2.65:1"),
            # base
            "base-darkest": _color("#1b1b1b", "Darkest base", "16.56:1"),
            "base-darker": _color("#454545", "Darker base", "11.98:1"),
            "base": _color("#71767a", "Base gray", "5.74:1"),
            "base-lighter": _color("#a9aeb1", "Lighter base", "3.00:1"),
            "base-lightest": _color("#dfe1e2", "Lightest base", "1.46:1"),
            # state
            "success": _color("#00a91c", "Success state", "4.55:1"),
            "warning": _color("#ffbe2e", "Warning state", "1.79:1"),
            "error": _color("#d54309", "Error state", "5.21:1"),
            "info": _color("#00bde3", "Info state", "2.65:1"),
            "ink": _color("#1b1b1b", "Primary text color", "16.56:1"),
        },
        "usage": {
            "classes": (
                'Use utility classes like "bg-primary", "text-primary", '
                '"border-primary"'
            ),
            "tokens": "In CSS: use var(--color-primary)",
            "accessibility": (
                "Ensure 4.5:1 contrast for normal text, 3:1 for large text (18pt+)"
            ),
        },
    },
    "spacing": {
        "description": "USWDS spacing design tokens (units system)",
        "tokens": {
            "05": _spacing("4px", "0.25rem", "Extra small spacing"),
            "1": _spacing("8px", "0.5rem", "Small spacing"),
            "105": _spacing("12px", "0.75rem", "Medium-small spacing"),
            "2": _spacing("16px", "1rem", "Base spacing unit"),
            "205": _spacing("20px", "1.25rem", "Medium spacing"),
            "3": _spacing("24px", "1.5rem", "Medium-large spacing"),
            "4": _spacing("32px", "2rem", "Large spacing"),
            "5": _spacing("40px", "2.5rem", "Extra large spacing"),
            "6": _spacing("48px", "3rem", "XXL spacing"),
            "7": _spacing("56px", "3.5rem", "XXXL spacing"),
            "8": _spacing("64px", "4rem", "Huge spacing"),
            "9": _spacing("72px", "4.5rem", "Extra huge spacing"),
        },
        "usage": {
            "classes": (
                'Use utility classes like "padding-2", "margin-top-3", "gap-205"'
            ),
            "tokens": "In CSS: use var(--spacing-2) or units(2)",
            "recommendation": (
                "Use the units system for consistent spacing throughout your "
                "application"
            ),
        },
    },
    "typography": {
        "description": "USWDS typography design tokens",
        "tokens": {
            # families
            "sans": _token(
                '"Source Sans Pro Web", "Helvetica Neue", Helvetica, Roboto, '
                "Arial, sans-serif",
                "Sans-serif family",
            ),
            "serif": _token(
                '"Merriweather Web", Georgia, Cambria, "Times New Roman", Times, '
                "serif",
                "Serif family",
            ),
            "mono": _token(
                '"Roboto Mono Web", "Bitstream Vera Sans Mono", "Consolas", '
                '"Courier", monospace',
                "Monospace family",
            ),
            # sizes
            "micro": _token("10px", "Micro text"),
            "xs": _token("12px", "Extra small text"),
            "sm": _token("13px", "Small text"),
            "md": _token("14px", "Medium text"),
            "base": _token("16px", "Base body text"),
            "lg": _token("18px", "Large text"),
            "xl": _token("20px", "Extra large text"),
            "2xl": _token("24px", "Heading size"),
            "3xl": _token("32px", "Large heading"),
            "4xl": _token("40px", "Display heading"),
            # weights
            "light": _token("300", "Light weight"),
            "normal": _token("400", "Normal weight"),
            "semibold": _token("600", "Semibold weight"),
            "bold": _token("700", "Bold weight"),
        },
        "usage": {
            "classes": (
                'Use utility classes like "font-sans-lg", "font-serif-2xl", '
                '"text-bold"'
            ),
            "tokens": (
                "In CSS: use var(--font-sans), var(--font-lg), "
                "var(--font-weight-bold)"
            ),
            "accessibility": (
                "Maintain adequate line height (1.5 minimum) and readable font "
                "sizes (16px+ for body)"
            ),
        },
    },
    "breakpoints": {
        "description": "USWDS responsive breakpoints",
        "tokens": {
            "mobile": _token("320px", "Mobile devices"),
            "mobile-lg": _token("480px", "Large mobile devices"),
            "tablet": _token("640px", "Tablet devices"),
            "tablet-lg": _token("880px", "Large tablets"),
            "desktop": _token("1024px", "Desktop screens"),
            "desktop-lg": _token("1200px", "Large desktops"),
            "widescreen": _token("1400px", "Widescreen displays"),
        },
        "usage": {
            "classes": (
                'Use responsive utilities like "tablet:display-flex", '
                '"desktop:grid-col-6"'
            ),
            "tokens": "In CSS: use @media (min-width: $theme-desktop)",
            "strategy": (
                "USWDS uses mobile-first approach - start with mobile and add "
                "breakpoints up"
            ),
        },
    },
}

# Hard-coded values mapped to the token that should replace them.
TOKEN_RECOMMENDATIONS: dict[str, str] = {
    "#005ea2": "primary",
    "#1a4480": "primary-darker",
    "#d83933": "secondary",
    "#1b1b1b": "base-darkest or ink",
    "#71767a": "base",
    "4px": "units-05 or spacing-05",
    "8px": "units-1 or spacing-1",
    "16px": "units-2 or spacing-2",
    "24px": "units-3 or spacing-3",
    "32px": "units-4 or spacing-4",
}

DESIGN_TOKENS_URL = "https://designsystem.digital.gov/design-tokens/"
