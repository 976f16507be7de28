"""Static checks for USWDS markup and React-USWDS code."""

from __future__ import annotations

import re
from typing import Any, Literal, TypedDict

Severity = Literal["error", "warning", "info"]


class ValidationIssue(TypedDict, total=False):
    """One finding reported by :class:`ValidationService`."""

    severity: Severity
    message: str
    rule: str
    suggestion: str


_HEX_COLOR = re.compile(r"#[0-9a-f]{3,6}", re.IGNORECASE)
_PX_VALUE = re.compile(r"(?:padding|margin|gap|font-size):\s*\d+px", re.IGNORECASE)
_REACT_IMPORT = re.compile(
    r"import\s+{[^}]+}\s+from\s+['\"]@trussworks/react-uswds['\"]", re.IGNORECASE
)
_REACT_COMPONENT_NAMES = re.compile(
    r"(Button|Alert|TextInput|Label|FormGroup|Grid|Header|Footer|Card)", re.IGNORECASE
)
_SEMANTIC_ELEMENTS = re.compile(
    r"<(header|nav|main|article|section|aside|footer)", re.IGNORECASE
)


def _issue(
    severity: Severity, message: str, rule: str, suggestion: str
) -> ValidationIssue:
    return {
        "severity": severity,
        "message": message,
        "rule": rule,
        "suggestion": suggestion,
    }


class ValidationService:
    """Score a code snippet against USWDS conventions and WCAG basics."""

    async def validate(
        self, code: str, is_react: bool = False, check_accessibility: bool = True
    ) -> dict[str, Any]:
        """Validate ``code`` and return a scored report.

        Args:
            code: HTML or JSX source to inspect.
            is_react: Apply React-USWDS rules instead of vanilla class rules.
            check_accessibility: Include the WCAG-oriented checks.

        Returns:
            Report with ``valid``, ``mode``, ``score`` (0 to 10), ``issues``,
            ``summary`` and ``suggestions``.
        """
        issues: list[ValidationIssue] = []
        suggestions: list[str] = []

        if not is_react:
            self._check_uswds_classes(code, issues)
        if check_accessibility:
            self._check_accessibility(code, is_react, issues, suggestions)
        self._check_design_tokens(code, issues)
        if is_react:
            self._check_react_patterns(code, issues)
        self._check_best_practices(code, issues, suggestions)

        errors = sum(1 for issue in issues if issue["severity"] == "error")
        warnings = sum(1 for issue in issues if issue["severity"] == "warning")
        score = max(0.0, 10 - errors * 2 - warnings * 0.5)

        valid = errors == 0
        if valid:
            outcome = "checks passed" if not issues else "critical checks passed"
            summary = f"All {outcome} (Score: {score:.1f}/10)"
        else:
            summary = (
                f"Found {errors} error(s) and {warnings} warning(s) "
                f"(Score: {score:.1f}/10)"
            )

        return {
            "valid": valid,
            "mode": "react" if is_react else "vanilla",
            "score": round(score, 1),
            "issues": issues,
            "summary": summary,
            "suggestions": suggestions or ["No additional suggestions"],
        }

    def _check_uswds_classes(self, code: str, issues: list[ValidationIssue]) -> None:
        has_uswds_class = re.search(r'class(?:Name)?="[^"]*usa-', code) is not None
        if not has_uswds_class and "class" in code:
            issues.append(
                _issue(
                    "warning",
                    "No USWDS classes (usa- prefix) found",
                    "uswds-classes",
                    "Use USWDS utility classes like usa-button, usa-input, etc.",
                )
            )

        for match in re.findall(r'class="[^"]*usa-\w+--\w+', code):
            modifier = re.search(r"usa-(\w+?)--(\w+)", match)
            if modifier is None:
                continue
            base_class = f"usa-{modifier.group(1)}"
            if f"{base_class} " in match or f'{base_class}"' in match:
                continue
            issues.append(
                _issue(
                    "error",
                    f"BEM modifier used without base class: {base_class}",
                    "uswds-bem-pattern",
                    f'Include the base class: class="{base_class} '
                    f'{modifier.group(0)}"',
                )
            )

    def _check_accessibility(
        self,
        code: str,
        is_react: bool,
        issues: list[ValidationIssue],
        suggestions: list[str],
    ) -> None:
        if re.search(r"<button", code, re.IGNORECASE):
            if not re.search(r"<button[^>]+type=", code, re.IGNORECASE):
                issues.append(
                    _issue(
                        "warning",
                        "Button missing type attribute",
                        "wcag-button-type",
                        'Add type="button", type="submit", or type="reset"',
                    )
                )
            for button in re.findall(
                r"<button[^>]*>[^<]*</button>", code, re.IGNORECASE
            ):
                has_text = re.search(r"<button[^>]*>\s*\S[^<]*</button>", button)
                has_label = re.search(r"aria-label=", button, re.IGNORECASE)
                if not has_text and not has_label:
                    issues.append(
                        _issue(
                            "error",
                            "Button must have text content or aria-label",
                            "wcag-4.1.2-button-label",
                            "Add descriptive text or aria-label attribute",
                        )
                    )

        if re.search(r"<img", code, re.IGNORECASE) and not re.search(
            r"<img[^>]+alt=", code, re.IGNORECASE
        ):
            issues.append(
                _issue(
                    "error",
                    "Image missing alt attribute",
                    "wcag-1.1.1-alt-text",
                    'Add alt="" for decorative images or descriptive alt text for '
                    "informative images",
                )
            )

        for tag in re.findall(r"<input[^>]*>", code, re.IGNORECASE):
            id_match = re.search(r'id="([^"]*)"', tag, re.IGNORECASE)
            if id_match is None:
                continue
            input_id = id_match.group(1)
            escaped = re.escape(input_id)
            labelled = re.search(
                rf'<label[^>]+for="{escaped}"|htmlFor="{escaped}"', code
            )
            if labelled or re.search(r"aria-label", tag, re.IGNORECASE):
                continue
            label = (
                f'<Label htmlFor="{input_id}">Label text</Label>'
                if is_react
                else f'<label for="{input_id}">Label text</label>'
            )
            issues.append(
                _issue(
                    "error",
                    f'Input with id="{input_id}" missing associated label',
                    "wcag-3.3.2-label-input",
                    f"Add {label}",
                )
            )

        if _HEX_COLOR.search(code):
            suggestions.append(
                "Consider using USWDS design tokens instead of hard-coded hex colors "
                "for better accessibility"
            )

        div_count = len(re.findall(r"<div", code, re.IGNORECASE))
        if div_count > 3 and not _SEMANTIC_ELEMENTS.search(code):
            issues.append(
                _issue(
                    "info",
                    "Consider using semantic HTML5 elements",
                    "html5-semantics",
                    "Use <header>, <nav>, <main>, <article>, <section>, <footer> "
                    "instead of <div> where appropriate",
                )
            )

    def _check_design_tokens(self, code: str, issues: list[ValidationIssue]) -> None:
        hex_colors = _HEX_COLOR.findall(code)
        if hex_colors:
            issues.append(
                _issue(
                    "warning",
                    f"Found {len(hex_colors)} hard-coded hex color(s)",
                    "uswds-design-tokens-color",
                    'Use USWDS color tokens like "primary", "secondary", "base" '
                    "instead of hex values",
                )
            )
        if _PX_VALUE.search(code):
            issues.append(
                _issue(
                    "info",
                    "Found hard-coded pixel values in spacing/sizing",
                    "uswds-design-tokens-spacing",
                    "Consider using USWDS spacing tokens (units-1, units-2, etc.) "
                    "for consistency",
                )
            )

    def _check_react_patterns(self, code: str, issues: list[ValidationIssue]) -> None:
        if _REACT_COMPONENT_NAMES.search(code) and not _REACT_IMPORT.search(code):
            issues.append(
                _issue(
                    "warning",
                    "Using USWDS component names without import",
                    "react-uswds-import",
                    "Add: import { ComponentName } from '@trussworks/react-uswds'",
                )
            )
        if re.search(r"class=", code, re.IGNORECASE) and "className=" not in code:
            issues.append(
                _issue(
                    "error",
                    "Use className instead of class in React/JSX",
                    "react-jsx-classname",
                    "Replace class= with className=",
                )
            )
        if re.search(r"<label[^>]+for=", code, re.IGNORECASE) and not re.search(
            r"<label[^>]+htmlFor=", code, re.IGNORECASE
        ):
            issues.append(
                _issue(
                    "error",
                    "Use htmlFor instead of for in React/JSX labels",
                    "react-jsx-htmlfor",
                    "Replace for= with htmlFor=",
                )
            )

    def _check_best_practices(
        self, code: str, issues: list[ValidationIssue], suggestions: list[str]
    ) -> None:
        if re.search(r"style=", code, re.IGNORECASE):
            issues.append(
                _issue(
                    "info",
                    "Inline styles detected",
                    "best-practice-no-inline-styles",
                    "Use USWDS utility classes instead of inline styles when possible",
                )
            )
        if "!important" in code.lower():
            issues.append(
                _issue(
                    "info",
                    "Using !important may indicate specificity issues",
                    "best-practice-no-important",
                    "Avoid !important; use proper class specificity instead",
                )
            )
        if "display:" in code or "grid" in code or "flex" in code:
            suggestions.append(
                'Consider using USWDS responsive utilities like "tablet:display-flex" '
                'or "desktop:grid-col-6"'
            )
