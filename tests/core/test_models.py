"""Tests for Pydantic model deserialization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from f1grid.models.driver import DriverRecord
from tests.conftest import SAMPLE_DRIVER


class TestDriverRecord:
    def test_parse(self) -> None:
        driver = DriverRecord.model_validate(SAMPLE_DRIVER)
        assert driver.driver_number == 1
        assert driver.full_name == "Max VERSTAPPEN"
        assert driver.team_name == "Red Bull Racing"
        assert driver.team_colour == "3671C6"
        assert driver.country_code == "NED"

    def test_optional_fields(self) -> None:
        driver = DriverRecord.model_validate({"driver_number": 44})
        assert driver.driver_number == 44
        assert driver.headshot_url is None
        assert driver.team_name is None

    def test_missing_driver_number(self) -> None:
        with pytest.raises(ValidationError):
            DriverRecord.model_validate({"full_name": "Nobody"})

    def test_ignores_unknown_fields(self) -> None:
        driver = DriverRecord.model_validate({**SAMPLE_DRIVER, "new_field": "x"})
        assert not hasattr(driver, "new_field")

    def test_frozen(self) -> None:
        driver = DriverRecord.model_validate(SAMPLE_DRIVER)
        with pytest.raises(ValidationError):
            driver.team_name = "Ferrari"  # type: ignore[misc]
