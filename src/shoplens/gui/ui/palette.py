"""Shared geometry and colour constants for the catalogue widgets."""

from __future__ import annotations

# --- Row colours ------------------------------------------------------------
ROW_BACKGROUND_COLOR_HEX = "#ffffff"
ROW_BORDER_COLOR_HEX = "#eeeeee"
ROW_TITLE_COLOR_HEX = "#1b1b1b"
ROW_DESCRIPTION_COLOR_HEX = "#4a4a4a"
ROW_USER_COLOR_HEX = "#6e6e73"
ROW_PRICE_COLOR_HEX = "#1e73ff"

LIST_BACKGROUND_COLOR_HEX = "#f5f6f8"
ERROR_TEXT_COLOR_HEX = "#d70015"

# --- Row metrics ------------------------------------------------------------
# Rows sit at ``index * ROW_HEIGHT``; the visible card leaves ``ROW_VERTICAL_GAP``
# of that slot empty so neighbouring cards do not touch.
ROW_VERTICAL_GAP = 12
ROW_RADIUS = 8
ROW_PADDING = 12
ROW_TITLE_POINT_SIZE = 12
ROW_BUTTON_WIDTH = 72

# --- Thumbnails -------------------------------------------------------------
THUMBNAIL_SIZE = 96
THUMBNAIL_SPACING = 6
MAX_ROW_THUMBNAILS = 3
THUMBNAIL_PLACEHOLDER_COLOR_HEX = "#e8e9ec"

ROW_STYLESHEET = (
    f"#productRow {{ background: {ROW_BACKGROUND_COLOR_HEX};"
    f" border: 1px solid {ROW_BORDER_COLOR_HEX}; border-radius: {ROW_RADIUS}px; }}"
    f"#productTitle {{ color: {ROW_TITLE_COLOR_HEX}; font-weight: 600; }}"
    f"#productDescription {{ color: {ROW_DESCRIPTION_COLOR_HEX}; }}"
    f"#productUser {{ color: {ROW_USER_COLOR_HEX}; font-style: italic; }}"
    f"#productMeta {{ color: {ROW_PRICE_COLOR_HEX}; }}"
    f"#productThumbnail {{ background: {THUMBNAIL_PLACEHOLDER_COLOR_HEX}; border-radius: 4px; }}"
)

# --- Search bar -------------------------------------------------------------
SEARCH_BAR_MARGIN = (16, 16, 16, 8)
SEARCH_BAR_SPACING = 8
SEARCH_PLACEHOLDER = "Search products or sellers"
PENDING_TEXT = "Loading…"

# --- Page texts -------------------------------------------------------------
LOADING_TEXT = "Loading catalogue…"
EMPTY_TEXT = "No matching products."
ERROR_PREFIX = "Error: "


__all__ = [
    "ROW_BACKGROUND_COLOR_HEX",
    "ROW_BORDER_COLOR_HEX",
    "ROW_TITLE_COLOR_HEX",
    "ROW_DESCRIPTION_COLOR_HEX",
    "ROW_USER_COLOR_HEX",
    "ROW_PRICE_COLOR_HEX",
    "LIST_BACKGROUND_COLOR_HEX",
    "ERROR_TEXT_COLOR_HEX",
    "ROW_VERTICAL_GAP",
    "ROW_RADIUS",
    "ROW_PADDING",
    "ROW_TITLE_POINT_SIZE",
    "ROW_BUTTON_WIDTH",
    "THUMBNAIL_SIZE",
    "THUMBNAIL_SPACING",
    "MAX_ROW_THUMBNAILS",
    "THUMBNAIL_PLACEHOLDER_COLOR_HEX",
    "ROW_STYLESHEET",
    "SEARCH_BAR_MARGIN",
    "SEARCH_BAR_SPACING",
    "SEARCH_PLACEHOLDER",
    "PENDING_TEXT",
    "LOADING_TEXT",
    "EMPTY_TEXT",
    "ERROR_PREFIX",
]
