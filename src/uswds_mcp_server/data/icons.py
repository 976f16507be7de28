"""USWDS icon reference data.

Icon names follow the USWDS sprite (https://designsystem.digital.gov/components/icon/).
"""

from __future__ import annotations

from typing import TypedDict


class IconInfo(TypedDict):
    """Reference entry for a single icon."""

    name: str
    category: str
    keywords: list[str]
    usage: str


def _icon(name: str, category: str, keywords: list[str], usage: str) -> IconInfo:
    return {"name": name, "category": category, "keywords": keywords, "usage": usage}


ICON_CATEGORIES: dict[str, str] = {
    "alerts": "Alerts & Messaging",
    "navigation": "Navigation",
    "actions": "Actions",
    "communication": "Communication",
    "content": "Content",
    "user": "User & Account",
    "location": "Location & Places",
    "datetime": "Date & Time",
    "display": "Visibility & Display",
    "status": "Status & Indicators",
}

_ICONS: tuple[IconInfo, ...] = (
    # Alerts & Messaging
    _icon(
        "check",
        "alerts",
        ["success", "confirm", "complete", "done", "valid"],
        "Indicate success, completion, or validation",
    ),
    _icon(
        "check_circle",
        "alerts",
        ["success", "confirm", "complete", "done", "valid"],
        "Success state or completed status with emphasis",
    ),
    _icon(
        "close",
        "alerts",
        ["cancel", "exit", "dismiss", "delete", "remove"],
        "Close dialogs, dismiss alerts, remove items",
    ),
    _icon(
        "error",
        "alerts",
        ["warning", "alert", "danger", "invalid"],
        "Indicate errors or validation failures",
    ),
    _icon(
        "warning",
        "alerts",
        ["alert", "caution", "attention"],
        "Show warnings or cautionary messages",
    ),
    _icon(
        "info",
        "alerts",
        ["information", "help", "about"],
        "Informational messages or help text",
    ),
    # Navigation
    _icon(
        "arrow_back",
        "navigation",
        ["back", "previous", "return", "left"],
        "Navigate to previous page or step",
    ),
    _icon(
        "arrow_forward",
        "navigation",
        ["next", "forward", "continue", "right"],
        "Navigate to next page or step",
    ),
    _icon(
        "arrow_upward",
        "navigation",
        ["up", "scroll", "top"],
        "Scroll to top or move upward",
    ),
    _icon(
        "arrow_downward",
        "navigation",
        ["down", "scroll", "bottom", "expand"],
        "Scroll down or expand content",
    ),
    _icon(
        "expand_more",
        "navigation",
        ["dropdown", "chevron", "more", "show"],
        "Expand dropdowns or show more content",
    ),
    _icon(
        "expand_less",
        "navigation",
        ["collapse", "chevron", "less", "hide"],
        "Collapse sections or hide content",
    ),
    _icon(
        "menu",
        "navigation",
        ["hamburger", "nav", "navigation", "sidebar"],
        "Toggle mobile navigation menu",
    ),
    _icon(
        "more_vert",
        "navigation",
        ["options", "menu", "actions", "kebab"],
        "Show more options or actions menu",
    ),
    _icon(
        "more_horiz",
        "navigation",
        ["options", "menu", "actions"],
        "Horizontal options menu",
    ),
    # Actions
    _icon(
        "add",
        "actions",
        ["plus", "create", "new"],
        "Add new items or create content",
    ),
    _icon(
        "add_circle",
        "actions",
        ["plus", "create", "new"],
        "Add action with emphasis",
    ),
    _icon(
        "remove",
        "actions",
        ["minus", "delete", "subtract"],
        "Remove items or reduce quantity",
    ),
    _icon(
        "edit",
        "actions",
        ["pencil", "modify", "change", "update"],
        "Edit or modify content",
    ),
    _icon(
        "delete",
        "actions",
        ["trash", "remove", "destroy"],
        "Delete or remove items permanently",
    ),
    _icon("save", "actions", ["disk", "store", "keep"], "Save changes or data"),
    _icon("search", "actions", ["find", "magnify", "look"], "Search functionality"),
    _icon(
        "refresh",
        "actions",
        ["reload", "sync", "update"],
        "Refresh or reload content",
    ),
    _icon(
        "settings",
        "actions",
        ["gear", "config", "preferences", "options"],
        "Access settings or configuration",
    ),
    _icon("share", "actions", ["send", "export", "forward"], "Share content or data"),
    _icon("print", "actions", ["printer", "output"], "Print document or page"),
    _icon("download", "actions", ["save", "export", "get"], "Download files or data"),
    _icon("upload", "actions", ["import", "attach", "send"], "Upload files or data"),
    _icon(
        "attach_file",
        "actions",
        ["clip", "file", "upload"],
        "Attach files to forms or messages",
    ),
    # Communication
    _icon(
        "mail",
        "communication",
        ["email", "envelope", "message"],
        "Email or messaging",
    ),
    _icon(
        "email",
        "communication",
        ["mail", "message", "contact"],
        "Email contact or messaging",
    ),
    _icon(
        "phone",
        "communication",
        ["call", "telephone", "contact"],
        "Phone contact or calling",
    ),
    _icon(
        "chat",
        "communication",
        ["message", "conversation", "talk"],
        "Chat or messaging feature",
    ),
    _icon(
        "forum",
        "communication",
        ["discussion", "comments", "conversation"],
        "Discussion forums or comments",
    ),
    # Content
    _icon(
        "description",
        "content",
        ["document", "file", "page", "text"],
        "Documents or text files",
    ),
    _icon(
        "folder",
        "content",
        ["directory", "files", "organize"],
        "Folders or file organization",
    ),
    _icon(
        "folder_open",
        "content",
        ["directory", "files", "opened"],
        "Open folder or active directory",
    ),
    _icon(
        "insert_drive_file",
        "content",
        ["file", "document", "upload"],
        "Generic file or document",
    ),
    _icon("picture_as_pdf", "content", ["pdf", "document", "file"], "PDF documents"),
    _icon("photo", "content", ["image", "picture", "gallery"], "Photos or images"),
    _icon(
        "videocam",
        "content",
        ["video", "camera", "record"],
        "Video content or recording",
    ),
    # User & Account
    _icon(
        "account_circle",
        "user",
        ["user", "profile", "avatar", "person"],
        "User profile or account",
    ),
    _icon(
        "person",
        "user",
        ["user", "profile", "account", "individual"],
        "Individual user or person",
    ),
    _icon(
        "people",
        "user",
        ["users", "group", "team", "multiple"],
        "Multiple users or team",
    ),
    _icon(
        "lock",
        "user",
        ["secure", "password", "private", "protected"],
        "Security or locked content",
    ),
    _icon(
        "lock_outline",
        "user",
        ["secure", "password", "private"],
        "Security or authentication",
    ),
    _icon(
        "verified_user",
        "user",
        ["verified", "secure", "authenticated"],
        "Verified or authenticated user",
    ),
    # Location & Places
    _icon(
        "location_on",
        "location",
        ["pin", "map", "place", "address"],
        "Location or address marker",
    ),
    _icon("place", "location", ["location", "map", "pin"], "Place or location"),
    _icon(
        "map",
        "location",
        ["location", "geography", "navigation"],
        "Maps or geographic navigation",
    ),
    _icon(
        "public",
        "location",
        ["world", "globe", "international"],
        "Global or public content",
    ),
    _icon(
        "home",
        "location",
        ["house", "main", "start"],
        "Home page or main navigation",
    ),
    _icon(
        "business",
        "location",
        ["building", "office", "company"],
        "Business or organization",
    ),
    # Date & Time
    _icon(
        "schedule",
        "datetime",
        ["time", "clock", "calendar"],
        "Schedule or time-related content",
    ),
    _icon(
        "event",
        "datetime",
        ["calendar", "date", "appointment"],
        "Events or calendar dates",
    ),
    _icon("today", "datetime", ["calendar", "current", "now"], "Current date or today"),
    _icon(
        "access_time",
        "datetime",
        ["clock", "time", "schedule"],
        "Time or scheduling",
    ),
    # Visibility & Display
    _icon(
        "visibility",
        "display",
        ["eye", "show", "view", "visible"],
        "Show content or make visible",
    ),
    _icon(
        "visibility_off",
        "display",
        ["eye", "hide", "hidden", "invisible"],
        "Hide content or make invisible",
    ),
    _icon(
        "zoom_in",
        "display",
        ["magnify", "enlarge", "increase"],
        "Zoom in or enlarge",
    ),
    _icon(
        "zoom_out",
        "display",
        ["reduce", "shrink", "decrease"],
        "Zoom out or reduce size",
    ),
    # Status & Indicators
    _icon(
        "star",
        "status",
        ["favorite", "rating", "important"],
        "Favorites or ratings",
    ),
    _icon(
        "star_outline",
        "status",
        ["favorite", "rating", "unfilled"],
        "Unfavorite or unrated",
    ),
    _icon("flag", "status", ["mark", "report", "bookmark"], "Flag or mark content"),
    _icon(
        "bookmark",
        "status",
        ["save", "mark", "favorite"],
        "Bookmark or save for later",
    ),
    _icon(
        "help",
        "status",
        ["question", "support", "info"],
        "Help or support information",
    ),
    _icon(
        "help_outline",
        "status",
        ["question", "support", "tooltip"],
        "Help tooltip or info",
    ),
)

USWDS_ICONS: dict[str, IconInfo] = {icon["name"]: icon for icon in _ICONS}
