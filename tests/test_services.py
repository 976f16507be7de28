"""Behavior of the static-data domain services."""

from __future__ import annotations

import pytest

from uswds_mcp_server.services import (
    CodeGeneratorService,
    ColorContrastService,
    DesignTokenService,
    IconService,
    ValidationService,
)
from uswds_mcp_server.services.codegen import build_props
from uswds_mcp_server.services.contrast import (
    RGB,
    contrast_ratio,
    is_large_text,
    parse_color,
)


class TestValidationService:
    """Scoring and rule coverage for code validation."""

    @pytest.mark.anyio()
    async def test_clean_markup_scores_ten(self) -> None:
        """Well-formed USWDS markup passes every check."""
        report = await ValidationService().validate(
            '<button type="button" class="usa-button">Save</button>'
        )

        assert report["valid"] is True
        assert report["score"] == 10
        assert report["mode"] == "vanilla"
        assert report["issues"] == []

    @pytest.mark.anyio()
    async def test_missing_alt_is_an_error(self) -> None:
        """Images without alt text fail validation."""
        report = await ValidationService().validate('<img src="seal.png">')

        assert report["valid"] is False
        rules = {issue["rule"] for issue in report["issues"]}
        assert "wcag-1.1.1-alt-text" in rules
        assert report["summary"].startswith("Found 1 error(s)")

    @pytest.mark.anyio()
    async def test_score_counts_errors_and_warnings(self) -> None:
        """Errors cost two points and warnings half a point."""
        report = await ValidationService().validate(
            '<div class="usa-alert--success" style="color: #ff0000">Done</div>'
        )

        errors = [i for i in report["issues"] if i["severity"] == "error"]
        warnings = [i for i in report["issues"] if i["severity"] == "warning"]
        assert len(errors) == 1
        assert len(warnings) == 1
        assert report["score"] == 7.5

    @pytest.mark.anyio()
    async def test_react_rules(self) -> None:
        """JSX must use className and import react-uswds components."""
        report = await ValidationService().validate(
            '<Button class="primary" type="button">Go</Button>', is_react=True
        )

        rules = {issue["rule"] for issue in report["issues"]}
        assert report["mode"] == "react"
        assert {"react-jsx-classname", "react-uswds-import"} <= rules

    @pytest.mark.anyio()
    async def test_unlabelled_input(self) -> None:
        """Inputs need a label pointing at their id."""
        service = ValidationService()

        missing = await service.validate('<input class="usa-input" id="email">')
        labelled = await service.validate(
            '<label class="usa-label" for="email">Email</label>'
            '<input class="usa-input" id="email">'
        )

        assert not missing["valid"]
        assert labelled["valid"]

    @pytest.mark.anyio()
    async def test_accessibility_checks_can_be_skipped(self) -> None:
        """check_accessibility=False drops the WCAG rules."""
        report = await ValidationService().validate(
            '<img src="seal.png">', check_accessibility=False
        )

        assert report["valid"] is True


class TestColorContrast:
    """WCAG arithmetic and payload shape."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("#fff", RGB(255, 255, 255)),
            ("#005EA2", RGB(0, 94, 162)),
            ("rgb(10, 20, 30)", RGB(10, 20, 30)),
            ("primary", RGB(0, 94, 162)),
            ("Black", RGB(0, 0, 0)),
            ("#12345", None),
            ("#gggggg", None),
            ("chartreuse-ish", None),
        ],
    )
    def test_parse_color(self, value: str, expected: RGB | None) -> None:
        """Hex, rgb() and named colors are understood."""
        assert parse_color(value) == expected

    def test_black_on_white_is_maximal(self) -> None:
        """Black on white is 21:1 regardless of order."""
        black, white = RGB(0, 0, 0), RGB(255, 255, 255)

        assert contrast_ratio(black, white) == pytest.approx(21.0)
        assert contrast_ratio(white, black) == pytest.approx(21.0)

    def test_large_text(self) -> None:
        """24px, or 18.66px bold, counts as large text."""
        assert is_large_text(24)
        assert is_large_text(19, "bold")
        assert is_large_text(19, 700)
        assert not is_large_text(19)
        assert not is_large_text(None)

    @pytest.mark.anyio()
    async def test_report(self) -> None:
        """Reports carry the ratio and every WCAG verdict."""
        report = await ColorContrastService().check_contrast("#000", "white")

        assert report["contrastRatio"] == 21.0
        assert report["wcag"]["aaa"]["normalText"] is True
        assert report["fails"] == []
        assert report["foreground"]["hex"] == "#000000"

    @pytest.mark.anyio()
    async def test_low_contrast(self) -> None:
        """Light gray on white fails normal text."""
        report = await ColorContrastService().check_contrast("#cccccc", "#ffffff")

        assert report["wcag"]["aa"]["normalText"] is False
        assert "WCAG AA (normal text)" in report["fails"]

    @pytest.mark.anyio()
    async def test_invalid_color_is_a_soft_error(self) -> None:
        """Unparseable colors are reported in the payload."""
        report = await ColorContrastService().check_contrast("nope", "#fff")

        assert report["error"] == "Invalid color format"
        assert report["examples"]


class TestDesignTokens:
    """Token tables and recommendations."""

    @pytest.mark.anyio()
    async def test_all_categories(self) -> None:
        """The default returns every table."""
        result = await DesignTokenService().get_tokens()

        assert result["categories"] == ["color", "spacing", "typography", "breakpoints"]
        assert set(result["tokens"]) == set(result["categories"])

    @pytest.mark.anyio()
    async def test_single_category(self) -> None:
        """A category returns its table and documentation link."""
        result = await DesignTokenService().get_tokens("spacing")

        assert result["category"] == "spacing"
        assert result["documentation"].endswith("/spacing/")

    def test_recommendation(self) -> None:
        """Hard-coded values map to tokens."""
        service = DesignTokenService()

        assert service.get_token_recommendation("#005EA2") == "primary"
        assert service.get_token_recommendation(" 16px ") == "units-2 or spacing-2"
        assert service.get_token_recommendation("13px") is None


class TestIcons:
    """Icon search and lookup."""

    @pytest.mark.anyio()
    async def test_search_matches_names_and_keywords(self) -> None:
        """Searching groups matches by category."""
        result = await IconService().get_icons(search="arrow")

        names = [
            icon["name"]
            for group in result["icons"].values()
            for icon in group["icons"]
        ]
        assert "arrow_back" in names
        assert result["total"] == len(names)
        assert result["filters"] == {"category": "all", "search": "arrow"}

    @pytest.mark.anyio()
    async def test_category_filter(self) -> None:
        """Category filters keep a single group."""
        result = await IconService().get_icons(category="alerts")

        assert list(result["icons"]) == ["alerts"]

    @pytest.mark.anyio()
    async def test_icon_info(self) -> None:
        """Known icons include usage snippets for both frameworks."""
        info = await IconService().get_icon_info("arrow_back")

        assert info["name"] == "arrow_back"
        assert "<Icon>arrow_back</Icon>" in info["examples"]["react"]["basic"]

    @pytest.mark.anyio()
    async def test_unknown_icon_suggests_similar(self) -> None:
        """Unknown names suggest close matches."""
        info = await IconService().get_icon_info("arrow")

        assert info["error"] == 'Icon "arrow" not found'
        assert "arrow_back" in info["suggestion"]


class TestCodeGenerator:
    """React code generation for components and forms."""

    @pytest.mark.anyio()
    async def test_labelled_input(self) -> None:
        """Form inputs are generated next to a Label."""
        result = await CodeGeneratorService(use_react=True).generate_component(
            "TextInput", {"id": "email", "label": "Email", "type": "email"}
        )

        code = result["generatedCode"]
        assert '<Label htmlFor="email">Email</Label>' in code
        assert 'type="email"' in code
        assert result["imports"] == (
            "import { TextInput, Label } from '@trussworks/react-uswds'"
        )

    @pytest.mark.anyio()
    async def test_example_used_without_requirements(self) -> None:
        """Without requirements the first documented example is returned."""
        service = CodeGeneratorService(use_react=True)

        result = await service.generate_component("Button")

        assert result["generatedCode"].strip()
        assert len(result["nextSteps"]) == 4

    @pytest.mark.anyio()
    async def test_unknown_component(self) -> None:
        """Unknown components point at list_components."""
        result = await CodeGeneratorService(use_react=True).generate_component("Nope")

        assert result["error"] == 'Component "Nope" not found'
        assert "list_components" in result["hint"]

    def test_props_only_include_declared_props(self) -> None:
        """Unknown keys and content keys are not rendered as attributes."""
        component = {
            "props": [{"name": "disabled"}, {"name": "size"}, {"name": "type"}]
        }

        rendered = build_props(
            component,
            {
                "disabled": True,
                "size": 3,
                "type": "submit",
                "children": "x",
                "bogus": "y",
            },
        )

        assert rendered == '\n      disabled\n      size={3}\n      type="submit"'

    @pytest.mark.anyio()
    async def test_form_generation(self) -> None:
        """Forms include one block per field plus validation state."""
        result = await CodeGeneratorService(use_react=True).generate_form(
            {
                "formName": "ContactForm",
                "fields": [
                    {
                        "name": "email",
                        "label": "Email",
                        "type": "email",
                        "required": True,
                    },
                    {"name": "topic", "type": "select", "options": ["Help", "Other"]},
                    {"name": "agree", "label": "I agree", "type": "checkbox"},
                ],
                "submitLabel": "Send",
            }
        )

        code = result["code"]
        assert result["fieldCount"] == 3
        assert "export default function ContactForm()" in code
        assert "useState" in code
        assert "newErrors.email = 'Email is required'" in code
        assert '<option value="Help">Help</option>' in code
        assert '<Button type="submit">Send</Button>' in code
        assert result["imports"] == (
            "import { Button, Checkbox, Form, FormGroup, Label, Select, TextInput } "
            "from '@trussworks/react-uswds'"
        )

    @pytest.mark.anyio()
    async def test_form_without_fields(self) -> None:
        """An empty field list returns an example specification."""
        result = await CodeGeneratorService(use_react=True).generate_form({})

        assert result["error"] == "No fields specified"
        assert result["example"]["fields"]

    @pytest.mark.anyio()
    async def test_form_vanilla(self) -> None:
        """Form generation needs React mode."""
        result = await CodeGeneratorService().generate_form({"fields": [{"name": "a"}]})

        assert result["error"] == "Form generation is only available in React mode"
        assert result["mode"] == "vanilla-uswds"
