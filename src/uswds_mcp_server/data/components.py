"""Component reference data for React-USWDS, vanilla USWDS and USWDS Tailwind.

Detailed React-USWDS records (props, examples, accessibility notes) live in
``react_components.json`` next to this module; the short catalogues used for
listing are defined inline.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, TypedDict

REACT_USWDS_URL = "https://trussworks.github.io/react-uswds"
USWDS_URL = "https://designsystem.digital.gov"
TAILWIND_USWDS_URL = "https://v2.uswds-tailwind.com"


class CatalogEntry(TypedDict):
    """Short listing entry for a component."""

    name: str
    category: str
    description: str
    url: str


def _load_react_components() -> tuple[dict[str, Any], dict[str, str]]:
    raw = (
        resources.files("uswds_mcp_server.data")
        .joinpath("react_components.json")
        .read_text(encoding="utf-8")
    )
    data = json.loads(raw)
    return data["components"], data["categories"]


REACT_COMPONENTS, COMPONENT_CATEGORIES = _load_react_components()


def _react(name: str, category: str, description: str, slug: str) -> CatalogEntry:
    return {
        "name": name,
        "category": category,
        "description": description,
        "url": f"{REACT_USWDS_URL}/?path=/docs/components-{slug}--docs",
    }


def _uswds(name: str, category: str, description: str, slug: str) -> CatalogEntry:
    return {
        "name": name,
        "category": category,
        "description": description,
        "url": f"{USWDS_URL}/components/{slug}/",
    }


REACT_CATALOG: tuple[CatalogEntry, ...] = (
    # forms
    _react("Button", "forms", "Clickable button element with various styles", "button"),
    _react("TextInput", "forms", "Single-line text input field", "text-input"),
    _react("Checkbox", "forms", "Checkbox input for multiple selections", "checkbox"),
    _react("Radio", "forms", "Radio button for single selection", "radio"),
    _react("Select", "forms", "Dropdown selection list", "select"),
    _react("Textarea", "forms", "Multi-line text input field", "textarea"),
    _react("DatePicker", "forms", "Date selection input", "date-picker"),
    _react(
        "DateRangePicker", "forms", "Date range selection input", "date-range-picker"
    ),
    _react("TimePicker", "forms", "Time selection input", "time-picker"),
    _react("ComboBox", "forms", "Combination of text input and dropdown", "combo-box"),
    _react("FileInput", "forms", "File upload input", "file-input"),
    _react("Label", "forms", "Form field label", "label"),
    _react("FormGroup", "forms", "Group related form fields", "form-group"),
    # navigation
    _react(
        "Header", "navigation", "Site header with branding and navigation", "header"
    ),
    _react("Footer", "navigation", "Site footer with links and information", "footer"),
    _react("Navigation", "navigation", "Primary navigation menu", "navigation"),
    _react("SideNav", "navigation", "Sidebar navigation menu", "side-navigation"),
    _react("Breadcrumb", "navigation", "Hierarchical navigation trail", "breadcrumb"),
    _react(
        "StepIndicator", "navigation", "Multi-step process indicator", "step-indicator"
    ),
    _react("Link", "navigation", "Styled anchor link", "link"),
    # ui
    _react("Alert", "ui", "Informational alert message", "alert"),
    _react("Modal", "ui", "Dialog overlay window", "modal"),
    _react("Accordion", "ui", "Expandable/collapsible content sections", "accordion"),
    _react("Banner", "ui", "Official government website banner", "banner"),
    _react("Card", "ui", "Content container card", "card"),
    _react("Tag", "ui", "Label or tag element", "tag"),
    _react("Tooltip", "ui", "Hover information popup", "tooltip"),
    _react("Table", "ui", "Data table", "table"),
    _react("Pagination", "ui", "Page navigation controls", "pagination"),
    _react("ProcessList", "ui", "Ordered process steps list", "process-list"),
    # layout
    _react("Grid", "layout", "Responsive grid system", "grid"),
    _react("GridContainer", "layout", "Grid container wrapper", "grid-container"),
)

USWDS_CATALOG: tuple[CatalogEntry, ...] = (
    # forms
    _uswds("Button", "forms", "Clickable button element", "button"),
    _uswds("Text input", "forms", "Single-line text input", "text-input"),
    _uswds("Checkbox", "forms", "Checkbox selection", "checkbox"),
    _uswds("Radio button", "forms", "Radio button selection", "radio-buttons"),
    _uswds("Select", "forms", "Dropdown menu", "select"),
    _uswds("Textarea", "forms", "Multi-line text input", "textarea"),
    _uswds("Date picker", "forms", "Date selection input", "date-picker"),
    _uswds("Date range picker", "forms", "Date range selection", "date-range-picker"),
    _uswds("Time picker", "forms", "Time selection input", "time-picker"),
    _uswds("Combo box", "forms", "Autocomplete dropdown", "combo-box"),
    _uswds("File input", "forms", "File upload", "file-input"),
    # navigation
    _uswds("Header", "navigation", "Site header", "header"),
    _uswds("Footer", "navigation", "Site footer", "footer"),
    _uswds("Navigation", "navigation", "Primary navigation", "navigation"),
    _uswds("Side navigation", "navigation", "Sidebar navigation", "side-navigation"),
    _uswds("Breadcrumb", "navigation", "Navigation breadcrumb", "breadcrumb"),
    _uswds("Step indicator", "navigation", "Process steps", "step-indicator"),
    # ui
    _uswds("Alert", "ui", "Alert notification", "alert"),
    _uswds("Modal", "ui", "Modal dialog", "modal"),
    _uswds("Accordion", "ui", "Expandable sections", "accordion"),
    _uswds("Banner", "ui", "Government banner", "banner"),
    _uswds("Card", "ui", "Content card", "card"),
    _uswds("Tag", "ui", "Tag label", "tag"),
    _uswds("Tooltip", "ui", "Tooltip popup", "tooltip"),
    _uswds("Table", "ui", "Data table", "table"),
)


def component_slug(name: str) -> str:
    """Turn a display name such as ``"Date picker"`` into ``"date-picker"``."""
    return "-".join(name.lower().split())
