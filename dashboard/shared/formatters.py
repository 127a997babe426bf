"""Formatting helpers for the F1 Grid dashboard (no Streamlit dependency)."""

from __future__ import annotations

import re
from typing import TypedDict

from f1grid import DriverRecord, FailureKind, flag_url

from .constants import FALLBACK_TEAM_COLOR

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{3,8}$")


class DriverCard(TypedDict):
    key: str
    number_label: str
    broadcast_name: str
    full_name: str
    team_name: str
    acronym: str
    accent: str
    headshot_url: str | None
    flag_url: str


def format_team_color(team_colour: str | None) -> str:
    """Return a hex color string with '#' prefix, defaulting to FALLBACK_TEAM_COLOR."""
    if team_colour:
        candidate = f"#{team_colour}"
        if _HEX_COLOR_RE.match(candidate):
            return candidate
    return FALLBACK_TEAM_COLOR


def format_number(driver_number: int) -> str:
    """Format a car number as '#44'."""
    return f"#{driver_number}"


def driver_card(driver: DriverRecord) -> DriverCard:
    """Collect the display fields for one driver's card and detail view."""
    return {
        "key": str(driver.driver_number),
        "number_label": format_number(driver.driver_number),
        "broadcast_name": driver.broadcast_name or driver.full_name or "",
        "full_name": driver.full_name or "",
        "team_name": driver.team_name or "",
        "acronym": driver.name_acronym or "",
        "accent": format_team_color(driver.team_colour),
        "headshot_url": driver.headshot_url or None,
        "flag_url": flag_url(driver.country_code),
    }


def describe_failure(kind: FailureKind, message: str) -> str:
    """Return the banner text shown when a load fails."""
    if kind is FailureKind.PARSE:
        return f"The drivers service sent data we could not read: {message}"
    return f"Could not reach the drivers service: {message}"
