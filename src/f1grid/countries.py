"""Country code to flag image mapping."""

from __future__ import annotations

FLAG_URL_TEMPLATE = "https://flagcdn.com/48x36/{code}.png"
FALLBACK_ISO2 = "un"

COUNTRY_ISO2: dict[str, str] = {
    "GBR": "gb",
    "ESP": "es",
    "MCO": "mc",
    "NLD": "nl",
    "MEX": "mx",
    "AUS": "au",
    "FIN": "fi",
    "FRA": "fr",
    "DEU": "de",
    "JPN": "jp",
    "CHN": "cn",
    "CAN": "ca",
    "THA": "th",
    "DNK": "dk",
    "USA": "us",
    "BRA": "br",
    "ITA": "it",
}


def country_to_iso2(country_code: str | None) -> str:
    """Return the two-letter flag code for a three-letter country code, or 'un'."""
    if not country_code:
        return FALLBACK_ISO2
    return COUNTRY_ISO2.get(country_code, FALLBACK_ISO2)


def flag_url(country_code: str | None) -> str:
    """Return the flag image URL for a three-letter country code."""
    return FLAG_URL_TEMPLATE.format(code=country_to_iso2(country_code))
