"""Holiday model shared by the sources, the cache and the window selector."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .errors import ParseError


@dataclass(frozen=True, slots=True)
class Holiday:
    """A single public holiday as published by the provider.

    Only ``date`` and ``name`` drive any logic; the remaining fields are
    carried through untouched so the cache can reproduce the provider's
    record exactly.
    """

    date: date                            # Calendar date of the holiday
    local_name: str                       # Name in the country's language
    name: str                             # English name
    country_code: str                     # ISO-3166 alpha-2 (e.g. "DE")

    # Pass-through fields – not interpreted anywhere.
    fixed: bool | None = None             # Same date every year
    is_global: bool | None = None         # Observed nationwide
    counties: tuple[str, ...] | None = None  # e.g. ("DE-BY",), None → national
    launch_year: int | None = None
    types: tuple[str, ...] | None = ()    # e.g. ("Public", "Bank")


# A HolidayYearSet is the provider's list for one (country, year), ascending.
HolidayYearSet = list[Holiday]

_REQUIRED_KEYS = ("date", "localName", "name", "countryCode")


def holiday_from_dict(raw: dict) -> Holiday:
    """Build a :class:`Holiday` from a provider-shaped JSON object.

    Raises :class:`ParseError` when *raw* is not an object, a required key is
    missing, or the date is not ``YYYY-MM-DD``.
    """
    if not isinstance(raw, dict):
        raise ParseError(f"Expected a holiday object, got {type(raw).__name__}")
    missing = [key for key in _REQUIRED_KEYS if raw.get(key) is None]
    if missing:
        raise ParseError(f"Holiday object is missing {', '.join(missing)}")
    try:
        day = date.fromisoformat(str(raw["date"]))
    except ValueError as exc:
        raise ParseError(f"Invalid holiday date {raw['date']!r}") from exc

    counties = raw.get("counties")
    types = raw.get("types")
    return Holiday(
        date=day,
        local_name=str(raw["localName"]),
        name=str(raw["name"]),
        country_code=str(raw["countryCode"]).upper(),
        fixed=raw.get("fixed"),
        is_global=raw.get("global"),
        counties=tuple(counties) if counties is not None else None,
        launch_year=raw.get("launchYear"),
        types=tuple(types) if types is not None else None,
    )


def holiday_to_dict(holiday: Holiday) -> dict:
    """Inverse of :func:`holiday_from_dict`."""
    return {
        "date": holiday.date.isoformat(),
        "localName": holiday.local_name,
        "name": holiday.name,
        "countryCode": holiday.country_code,
        "fixed": holiday.fixed,
        "global": holiday.is_global,
        "counties": list(holiday.counties) if holiday.counties is not None else None,
        "launchYear": holiday.launch_year,
        "types": list(holiday.types) if holiday.types is not None else None,
    }
