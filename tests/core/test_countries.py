"""Tests for the country code to flag mapping."""

from __future__ import annotations

import itertools
import string

import pytest

from f1grid.countries import COUNTRY_ISO2, FALLBACK_ISO2, country_to_iso2, flag_url


class TestCountryToIso2:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [("GBR", "gb"), ("NLD", "nl"), ("MCO", "mc"), ("DEU", "de"), ("USA", "us"), ("THA", "th")],
    )
    def test_known(self, code, expected):
        assert country_to_iso2(code) == expected

    def test_unknown_falls_back(self):
        assert country_to_iso2("NED") == FALLBACK_ISO2 == "un"

    def test_none_and_empty(self):
        assert country_to_iso2(None) == "un"
        assert country_to_iso2("") == "un"

    def test_lowercase_not_mapped(self):
        assert country_to_iso2("gbr") == "un"

    def test_total_over_three_letter_codes(self):
        for letters in itertools.product(string.ascii_uppercase, repeat=3):
            result = country_to_iso2("".join(letters))
            assert len(result) == 2

    def test_table_values_are_two_letters(self):
        assert all(len(v) == 2 and v.islower() for v in COUNTRY_ISO2.values())
        assert len(COUNTRY_ISO2) == 17


class TestFlagUrl:
    def test_known(self):
        assert flag_url("ITA") == "https://flagcdn.com/48x36/it.png"

    def test_unknown(self):
        assert flag_url("XYZ") == "https://flagcdn.com/48x36/un.png"
