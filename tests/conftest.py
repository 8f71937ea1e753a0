"""Shared sample data and a fake source for the test-suite."""

from __future__ import annotations

from datetime import date

import pytest

from next_holidays.errors import UnsupportedCountry
from next_holidays.models import Holiday
from next_holidays.sources.base import BaseSource

SAMPLE_API_2026 = [
    {
        "date": "2026-01-01",
        "localName": "Neujahr",
        "name": "New Year's Day",
        "countryCode": "DE",
        "fixed": True,
        "global": True,
        "counties": None,
        "launchYear": 1967,
        "types": ["Public"],
    },
    {
        "date": "2026-01-06",
        "localName": "Heilige Drei Könige",
        "name": "Epiphany",
        "countryCode": "DE",
        "fixed": True,
        "global": False,
        "counties": ["DE-BW", "DE-BY", "DE-ST"],
        "launchYear": None,
        "types": ["Public"],
    },
    {
        "date": "2026-12-25",
        "localName": "Erster Weihnachtstag",
        "name": "Christmas Day",
        "countryCode": "DE",
        "fixed": True,
        "global": True,
        "counties": None,
        "launchYear": None,
        "types": ["Public"],
    },
]


def make_holiday(day: date, name: str, country_code: str = "DE") -> Holiday:
    return Holiday(
        date=day,
        local_name=name,
        name=name,
        country_code=country_code,
        types=("Public",),
    )


class FakeSource(BaseSource):
    """In-memory source that records every call."""

    def __init__(self, data: dict[int, list[Holiday]]) -> None:
        self.data = data
        self.calls: list[tuple[str, int]] = []

    @property
    def name(self) -> str:
        return "fake"

    def fetch(self, country_code, year):
        self.calls.append((country_code, year))
        if not self.data.get(year):
            raise UnsupportedCountry(f"No data for {country_code} in {year}")
        return list(self.data[year])


@pytest.fixture
def year_2026() -> list[Holiday]:
    return [
        make_holiday(date(2026, 1, 1), "New Year's Day"),
        make_holiday(date(2026, 4, 3), "Good Friday"),
        make_holiday(date(2026, 5, 1), "Labour Day"),
        make_holiday(date(2026, 10, 3), "German Unity Day"),
        make_holiday(date(2026, 12, 25), "Christmas Day"),
        make_holiday(date(2026, 12, 26), "St. Stephen's Day"),
        make_holiday(date(2026, 12, 31), "New Year's Eve"),
    ]


@pytest.fixture
def year_2027() -> list[Holiday]:
    return [
        make_holiday(date(2027, 1, 1), "New Year's Day"),
        make_holiday(date(2027, 1, 6), "Epiphany"),
        make_holiday(date(2027, 2, 14), "Valentine's Day"),
        make_holiday(date(2027, 3, 8), "Women's Day"),
        make_holiday(date(2027, 5, 1), "Labour Day"),
    ]
