"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

from f1grid.models.driver import DriverRecord

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1229,
    "name_acronym": "VER",
    "session_key": 9472,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_DRIVERS = [
    SAMPLE_DRIVER,
    {
        "broadcast_name": "C LECLERC",
        "country_code": "MON",
        "driver_number": 16,
        "full_name": "Charles LECLERC",
        "headshot_url": "https://example.com/lec.png",
        "name_acronym": "LEC",
        "session_key": 9472,
        "team_colour": "E8002D",
        "team_name": "Ferrari",
    },
    # Same driver again, as the endpoint returns one row per session entry
    {**SAMPLE_DRIVER, "broadcast_name": "M VERSTAPPEN (2)"},
    {
        "broadcast_name": "L NORRIS",
        "country_code": "GBR",
        "driver_number": 4,
        "full_name": "Lando NORRIS",
        "headshot_url": None,
        "name_acronym": "NOR",
        "session_key": 9472,
        "team_colour": "FF8000",
        "team_name": "McLaren",
    },
]


def _make_record(
    driver_number: int,
    team_name: str | None = "Ferrari",
    full_name: str | None = None,
    broadcast_name: str | None = None,
    country_code: str | None = "ITA",
    team_colour: str | None = "E8002D",
) -> DriverRecord:
    return DriverRecord(
        driver_number=driver_number,
        team_name=team_name,
        full_name=full_name or f"Driver {driver_number}",
        broadcast_name=broadcast_name,
        country_code=country_code,
        team_colour=team_colour,
    )


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def make_record():
    """Factory fixture for creating DriverRecord instances."""
    return _make_record


@pytest.fixture(autouse=True)
def api_log_dir(tmp_path):
    """Redirect the API log file to tmp_path and reset the cached logger."""
    import f1grid.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("f1grid.api")
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "api_calls.log")

    yield tmp_path / "logs"

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
