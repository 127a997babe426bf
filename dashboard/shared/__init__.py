"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import F1_RED, FALLBACK_TEAM_COLOR, NO_PHOTO_LABEL, PAGE_TITLE, SEARCH_PLACEHOLDER
from .formatters import DriverCard, describe_failure, driver_card, format_number, format_team_color

# --- Loader ---
from .state import empty_directory_message, ensure_loaded, get_loader

# --- UI components ---
from .cards import render_driver_card, show_driver_dialog

__all__ = [
    "DriverCard",
    "F1_RED",
    "FALLBACK_TEAM_COLOR",
    "NO_PHOTO_LABEL",
    "PAGE_TITLE",
    "SEARCH_PLACEHOLDER",
    "describe_failure",
    "driver_card",
    "empty_directory_message",
    "ensure_loaded",
    "format_number",
    "format_team_color",
    "get_loader",
    "render_driver_card",
    "show_driver_dialog",
]
