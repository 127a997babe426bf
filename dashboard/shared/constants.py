"""Shared constants for the F1 Grid dashboard."""

from __future__ import annotations

F1_RED = "#FF1801"

# Accent used when a team has no (or an invalid) colour
FALLBACK_TEAM_COLOR = "#333"

PAGE_TITLE = "F1 Grid 2024"
SEARCH_PLACEHOLDER = "Search driver or team..."
NO_PHOTO_LABEL = "No photo"
