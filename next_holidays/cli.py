"""Print the next public holidays for a country.

Usage: ``next-holidays DE``

Data comes from Nager.Date through a cache file.  How the window
is completed near the end of the year is chosen by the ``HOLIDAY_POLICY``
environment variable (default: ``fill``).
"""

from __future__ import annotations

import argparse
import os
import sys
from datetime import date
from pathlib import Path

from .errors import HolidayError, UnsupportedCountry
from .models import Holiday
from .selection import DEFAULT_POLICY, WINDOW_SIZE, get_policy, select_upcoming
from .sources import BaseSource, build_source
from .sources.cache import CACHE_FILE
from .sources.nager import NAGER_BASE

# ---------------------------------------------------------------------------
# Configuration constants
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT = 30              # Seconds per HTTP request

POLICY_ENV = "HOLIDAY_POLICY"
CACHE_FILE_ENV = "HOLIDAYS_CACHE_FILE"
API_BASE_ENV = "HOLIDAYS_API_BASE"
COUNTRY_CODES_FILE_ENV = "HOLIDAYS_COUNTRY_CODES_FILE"


# ---------------------------------------------------------------------------
# Country codes
# ---------------------------------------------------------------------------

def read_country_codes(path: str | Path) -> set[str]:
    """Return the upper-cased codes listed in *path*, one per line."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return {line.strip().upper() for line in lines if line.strip()}


def validate_country_code(code: str, allowed: set[str] | None = None) -> str:
    """Normalise *code* and raise :class:`UnsupportedCountry` if it is invalid."""
    code = code.strip().upper()
    if len(code) != 2 or not (code.isascii() and code.isalpha()):
        raise UnsupportedCountry(f"'{code}' is not a 2-letter country code.")
    if allowed is not None and code not in allowed:
        raise UnsupportedCountry(
            f"'{code}' is not a valid country code. "
            f"Valid country codes are: {', '.join(sorted(allowed))}"
        )
    return code


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def format_holiday(holiday: Holiday) -> str:
    counties = ", ".join(holiday.counties) if holiday.counties else "National"
    return (
        f"Date: {holiday.date.isoformat()}, Name: {holiday.name}, "
        f"Counties: {counties}, Types: {', '.join(holiday.types or ())}"
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="next-holidays",
        description=f"Show the next {WINDOW_SIZE} public holidays for a country.",
    )
    parser.add_argument("country", help="ISO-3166 alpha-2 country code, e.g. DE")
    return parser.parse_args(argv)


def main(
    argv: list[str] | None = None,
    *,
    today: date | None = None,
    source: BaseSource | None = None,
) -> int:
    args = _parse_args(argv)
    today = today or date.today()

    try:
        policy = get_policy(os.environ.get(POLICY_ENV, DEFAULT_POLICY))
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return 1

    try:
        codes_file = os.environ.get(COUNTRY_CODES_FILE_ENV)
        allowed = read_country_codes(codes_file) if codes_file else None
    except OSError as exc:
        print(f"Error: cannot read country codes file '{codes_file}': {exc}", file=sys.stderr)
        return 1

    if source is None:
        source = build_source(
            os.environ.get(CACHE_FILE_ENV, CACHE_FILE),
            base_url=os.environ.get(API_BASE_ENV, NAGER_BASE),
            timeout=REQUEST_TIMEOUT,
        )

    try:
        country = validate_country_code(args.country, allowed)
        current = source.fetch(country, today.year)
        upcoming = select_upcoming(
            today,
            current,
            lambda: source.fetch(country, today.year + 1),
            policy,
        )
    except HolidayError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        source.flush()

    if not upcoming:
        print(f"Error: no upcoming holidays found for {country}.", file=sys.stderr)
        return 1

    for holiday in upcoming:
        print(format_holiday(holiday))
    return 0


if __name__ == "__main__":
    sys.exit(main())
