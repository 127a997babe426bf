"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from f1grid import DriverRecord

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_resource = lambda fn=None, **kw: fn if fn is not None else (lambda f: f)
_mock_st.dialog = lambda *a, **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Sample data fixtures ─────────────────────────────────────────────────────


@pytest.fixture
def hamilton() -> DriverRecord:
    return DriverRecord(
        driver_number=44,
        broadcast_name="L HAMILTON",
        full_name="Lewis HAMILTON",
        team_name="Mercedes",
        name_acronym="HAM",
        headshot_url="https://example.com/ham.png",
        team_colour="27F4D2",
        country_code="GBR",
    )


@pytest.fixture
def rookie() -> DriverRecord:
    """A driver with no headshot, colour or known country."""
    return DriverRecord(
        driver_number=50,
        full_name="Test DRIVER",
        team_name="Haas F1 Team",
        name_acronym="TST",
        country_code="XXX",
    )
