"""WCAG color contrast checks."""

from __future__ import annotations

import re
from typing import Any, NamedTuple

NAMED_COLORS: dict[str, str] = {
    "white": "#ffffff",
    "black": "#000000",
    "red": "#ff0000",
    "blue": "#0000ff",
    "green": "#008000",
    "yellow": "#ffff00",
    "gray": "#808080",
    "primary": "#005ea2",
    "secondary": "#d83933",
    "accent-cool": "#00bde3",
    "accent-warm": "#fa9441",
}

_RGB = re.compile(r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE)

# Rows are ordered strictest first; every level a ratio clears also clears the
# levels below it.
_LEVELS = (
    (7.0, "WCAG AAA (normal text)"),
    (4.5, "WCAG AA (normal text)"),
    (4.5, "WCAG AAA (large text)"),
    (3.0, "WCAG AA (large text)"),
)


class RGB(NamedTuple):
    """A color as 8-bit red, green and blue channels."""

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}


def parse_color(color: str) -> RGB | None:
    """Parse ``#rgb``, ``#rrggbb``, ``rgb(r, g, b)`` or a named color."""
    value = color.strip()
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) == 3:
            digits = "".join(char * 2 for char in digits)
        if len(digits) == 6:
            try:
                return RGB(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))
            except ValueError:
                return None

    match = _RGB.search(value)
    if match:
        return RGB(*(int(group) for group in match.groups()))

    named = NAMED_COLORS.get(value.lower())
    return parse_color(named) if named else None


def relative_luminance(rgb: RGB) -> float:
    """WCAG 2.x relative luminance of an sRGB color."""

    def channel(value: int) -> float:
        srgb = value / 255
        return srgb / 12.92 if srgb <= 0.03928 else ((srgb + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(rgb.r) + 0.7152 * channel(rgb.g) + 0.0722 * channel(rgb.b)


def contrast_ratio(first: RGB, second: RGB) -> float:
    """Contrast ratio between two colors, from 1.0 to 21.0."""
    lighter, darker = sorted(
        (relative_luminance(first), relative_luminance(second)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)


def is_large_text(
    font_size: float | None, font_weight: str | int | None = None
) -> bool:
    """Whether text qualifies as "large" under WCAG (18pt, or 14pt bold)."""
    if not font_size:
        return False
    if font_size >= 24:
        return True
    if font_size >= 18.66 and font_weight is not None:
        if isinstance(font_weight, int):
            return font_weight >= 700
        weight = str(font_weight).strip().lower()
        return weight == "bold" or (weight.isdigit() and int(weight) >= 700)
    return False


def _recommendation(ratio: float) -> str:
    if ratio < 3.0:
        return (
            "Contrast ratio is too low. Consider using darker/lighter colors or only "
            "for decorative elements."
        )
    if ratio < 4.5:
        return (
            "Use only for large text (18pt+ or 14pt+ bold). For normal text, "
            "increase contrast."
        )
    if ratio < 7.0:
        return (
            "Meets WCAG AA for all text sizes. Consider higher contrast for AAA "
            "compliance."
        )
    return "Excellent contrast! Meets WCAG AAA for all text sizes."


class ColorContrastService:
    """Evaluate foreground/background pairs against WCAG AA and AAA."""

    async def check_contrast(
        self,
        foreground: str,
        background: str,
        font_size: float | None = None,
        font_weight: str | int | None = None,
    ) -> dict[str, Any]:
        """Compute the contrast ratio and WCAG verdicts for two colors.

        Unparseable colors produce an ``error`` payload instead of raising.
        """
        fg = parse_color(foreground)
        bg = parse_color(background)
        if fg is None or bg is None:
            return {
                "error": "Invalid color format",
                "message": (
                    "Colors must be in hex (#RRGGBB), rgb(r,g,b), or named color "
                    "format"
                ),
                "examples": ["#FF0000", "rgb(255, 0, 0)", "red"],
            }

        ratio = contrast_ratio(fg, bg)
        passes = [label for threshold, label in _LEVELS if ratio >= threshold]
        fails = [label for threshold, label in _LEVELS if ratio < threshold]

        return {
            "foreground": self._describe(foreground, fg),
            "background": self._describe(background, bg),
            "contrastRatio": round(ratio, 2),
            "textSize": {
                "fontSize": font_size or "not specified",
                "fontWeight": font_weight or "normal",
                "category": (
                    "large text"
                    if is_large_text(font_size, font_weight)
                    else "normal text"
                ),
            },
            "wcag": {
                "aa": {"normalText": ratio >= 4.5, "largeText": ratio >= 3.0},
                "aaa": {"normalText": ratio >= 7.0, "largeText": ratio >= 4.5},
            },
            "passes": passes,
            "fails": fails,
            "recommendation": _recommendation(ratio),
            "resources": [
                {
                    "title": "WCAG Contrast Guidelines",
                    "url": "https://www.w3.org/WAI/WCAG21/Understanding/"
                    "contrast-minimum.html",
                },
                {
                    "title": "USWDS Color Tokens",
                    "url": "https://designsystem.digital.gov/design-tokens/color/",
                },
            ],
        }

    @staticmethod
    def _describe(raw: str, rgb: RGB) -> dict[str, Any]:
        return {
            "input": raw,
            "rgb": rgb.to_dict(),
            "hex": rgb.to_hex(),
            "luminance": relative_luminance(rgb),
        }
