"""Framework override semantics shared by the framework-aware services."""

from __future__ import annotations

import pytest

from uswds_mcp_server.errors import ServiceError
from uswds_mcp_server.framework import FRAMEWORK_MODES, resolve_framework
from uswds_mcp_server.services import (
    CodeGeneratorService,
    ComparisonService,
    ComponentService,
    LayoutService,
    SuggestionService,
)


@pytest.mark.parametrize(
    ("framework", "use_react", "expected"),
    [
        (None, False, "vanilla"),
        (None, True, "react"),
        ("react", False, "react"),
        ("vanilla", True, "vanilla"),
        ("tailwind", True, "tailwind"),
        ("tailwind", False, "tailwind"),
    ],
)
def test_explicit_framework_wins(
    framework: str | None, use_react: bool, expected: str
) -> None:
    """An explicit framework beats the constructor default."""
    assert resolve_framework(framework, use_react) == expected


def test_unknown_framework_is_rejected() -> None:
    """Unknown modes raise a service error listing the valid ones."""
    with pytest.raises(ServiceError, match="Unsupported framework 'svelte'"):
        resolve_framework("svelte", True)
    assert FRAMEWORK_MODES == ("react", "vanilla", "tailwind")


class TestComponentService:
    """Mode strings of the component catalogue."""

    @pytest.mark.anyio()
    @pytest.mark.parametrize(
        ("framework", "mode"),
        [
            ("react", "react-uswds"),
            ("vanilla", "vanilla-uswds"),
            ("tailwind", "tailwind-uswds"),
        ],
    )
    async def test_list_components_mode(self, framework: str, mode: str) -> None:
        """Every framework is a full content variant."""
        result = await ComponentService(use_react=False).list_components(
            framework=framework  # type: ignore[arg-type]
        )

        assert result["mode"] == mode
        assert result["total"] == len(result["components"]) > 0

    @pytest.mark.anyio()
    async def test_default_follows_constructor(self) -> None:
        """No override means the constructor default."""
        react = await ComponentService(use_react=True).list_components()
        vanilla = await ComponentService(use_react=False).list_components()

        assert react["mode"] == "react-uswds"
        assert vanilla["mode"] == "vanilla-uswds"

    @pytest.mark.anyio()
    async def test_category_filter(self) -> None:
        """Category filters narrow the listing."""
        result = await ComponentService(use_react=True).list_components("forms")

        assert result["category"] == "forms"
        assert {c["name"] for c in result["components"]} >= {"Button", "TextInput"}

    @pytest.mark.anyio()
    async def test_vanilla_info_points_at_uswds_docs(self) -> None:
        """Vanilla info returns class guidance and the USWDS page."""
        result = await ComponentService(use_react=True).get_component_info(
            "Date Picker", framework="vanilla"
        )

        assert result["mode"] == "vanilla-uswds"
        assert result["url"].endswith("/components/date-picker/")
        classes = result["guidance"]["classes"]
        assert classes == 'Use "usa-date-picker" as the base class'

    @pytest.mark.anyio()
    async def test_react_info_not_found(self) -> None:
        """Unknown React components list the known names."""
        result = await ComponentService(use_react=True).get_component_info("Widget")

        assert result["error"] == 'Component "Widget" not found'
        assert "Button" in result["suggestion"]

    @pytest.mark.anyio()
    async def test_react_info_is_a_copy(self) -> None:
        """Callers cannot mutate the shared component records."""
        service = ComponentService(use_react=True)
        first = await service.get_component_info("Button", include_examples=False)
        second = await service.get_component_info("Button")

        assert first["examples"] == []
        assert second["examples"]

    @pytest.mark.anyio()
    async def test_accessibility_guidance(self) -> None:
        """Known components carry component specific guidance."""
        result = await ComponentService().get_accessibility_guidance(
            "Button", framework="react"
        )

        assert result["mode"] == "react-uswds"
        assert result["wcagLevel"] == "AA"
        assert "componentGuidance" in result


class TestLayoutService:
    """The layout service labels modes react/html/tailwind."""

    @pytest.mark.anyio()
    @pytest.mark.parametrize(
        ("framework", "mode"),
        [("react", "react"), ("vanilla", "html"), ("tailwind", "tailwind")],
    )
    async def test_modes(self, framework: str, mode: str) -> None:
        """Each operation reports the layout mode string."""
        service = LayoutService(use_react=True)

        layouts = await service.get_layouts(framework)
        layout = await service.get_layout("single-column", framework)
        suggestion = await service.suggest_layout("documentation", framework)

        assert layouts["mode"] == layout["mode"] == suggestion["mode"] == mode

    @pytest.mark.anyio()
    async def test_code_matches_mode(self) -> None:
        """React code imports react-uswds; HTML code uses usa- classes."""
        service = LayoutService(use_react=False)

        react = await service.get_layout("Two Column", "react")
        html = await service.get_layout("two-column")

        assert "@trussworks/react-uswds" in react["code"]
        assert "grid-container" in html["code"]
        assert html["mode"] == "html"

    @pytest.mark.anyio()
    async def test_unknown_layout(self) -> None:
        """Unknown keys list the available layouts."""
        result = await LayoutService().get_layout("masonry")

        assert result["error"] == 'Layout pattern "masonry" not found'
        assert "single-column" in result["suggestion"]

    @pytest.mark.anyio()
    async def test_suggest_layout_ranks_matches(self) -> None:
        """Documentation pages suggest sidebar layouts, with code for the best."""
        result = await LayoutService().suggest_layout("documentation")

        keys = [item["key"] for item in result["suggestions"]]
        assert "sidebar-content" in keys
        assert result["recommended"]["key"] == keys[0]
        assert result["recommended"]["code"]

    @pytest.mark.anyio()
    async def test_suggest_layout_without_matches(self) -> None:
        """No match falls back to common patterns."""
        result = await LayoutService().suggest_layout("zzz")

        assert result["message"] == "No exact matches found"
        assert result["commonPatterns"]


class TestSuggestionService:
    """Only React mode ranks components."""

    @pytest.mark.anyio()
    async def test_react_override_ranks_components(self) -> None:
        """Explicit react beats a vanilla default."""
        result = await SuggestionService(use_react=False).suggest_components(
            "contact form with email", framework="react"
        )

        assert result["mode"] == "react-uswds"
        assert 0 < len(result["suggestions"]) <= 5

    @pytest.mark.anyio()
    async def test_vanilla_is_degraded(self) -> None:
        """Vanilla mode returns general guidance."""
        result = await SuggestionService(use_react=True).suggest_components(
            "contact form", framework="vanilla"
        )

        assert result["mode"] == "vanilla-uswds"
        assert "React" in result["message"]
        assert result["generalGuidance"]

    @pytest.mark.anyio()
    async def test_tailwind_is_degraded(self) -> None:
        """Tailwind mode points at the Tailwind documentation tools."""
        result = await SuggestionService().suggest_components(
            "contact form", framework="tailwind"
        )

        assert result["mode"] == "tailwind-uswds"
        assert "search_tailwind_uswds_docs" in result["suggestedTools"]


class TestComparisonService:
    """Only React mode compares components."""

    @pytest.mark.anyio()
    async def test_default_vanilla(self) -> None:
        """A vanilla default yields the degraded payload."""
        result = await ComparisonService(use_react=False).compare_components(
            "Button", "Link"
        )

        assert result["mode"] == "vanilla-uswds"
        assert "only available in React mode" in result["message"]

    @pytest.mark.anyio()
    async def test_tailwind(self) -> None:
        """Tailwind comparison is not available yet."""
        result = await ComparisonService(use_react=True).compare_components(
            "Button", "Link", framework="tailwind"
        )

        assert result["mode"] == "tailwind-uswds"
        assert "not yet available" in result["message"]

    @pytest.mark.anyio()
    async def test_react_override(self) -> None:
        """Explicit react compares even with a vanilla default."""
        result = await ComparisonService(use_react=False).compare_components(
            "Checkbox", "Radio", framework="react"
        )

        assert set(result["components"]) == {"Checkbox", "Radio"}

    @pytest.mark.anyio()
    async def test_neither_component_found(self) -> None:
        """Two unknown names are reported together."""
        result = await ComparisonService(use_react=True).compare_components("A", "B")

        assert result["error"] == "Neither component found"

    @pytest.mark.anyio()
    async def test_second_component_missing(self) -> None:
        result = await ComparisonService(use_react=True).compare_components(
            "Button", "Buttons"
        )

        assert result["error"] == 'Component "Buttons" not found'
        assert result["suggestion"] == "Did you mean: Button?"


class TestCodeGeneratorService:
    """Only React mode generates code."""

    @pytest.mark.anyio()
    async def test_vanilla_default(self) -> None:
        """A vanilla default explains how to enable React."""
        result = await CodeGeneratorService(use_react=False).generate_component(
            "Button"
        )

        assert result["mode"] == "vanilla-uswds"
        assert result["error"] == "Code generation is only available in React mode"

    @pytest.mark.anyio()
    async def test_tailwind(self) -> None:
        """Tailwind mode is degraded, not an error."""
        result = await CodeGeneratorService(use_react=True).generate_component(
            "Button", framework="tailwind"
        )

        assert result["mode"] == "tailwind-uswds"
        assert "error" not in result

    @pytest.mark.anyio()
    async def test_react_override(self) -> None:
        """Explicit react generates code with a vanilla default."""
        result = await CodeGeneratorService(use_react=False).generate_component(
            "Alert", framework="react"
        )

        assert result["component"] == "Alert"
        assert result["imports"] == (
            "import { Alert } from '@trussworks/react-uswds'"
        )
