"""Fetcher for the Nager.Date public holiday API.

Free, no auth.  Endpoint: ``https://date.nager.at/api/v3/PublicHolidays/{year}/{country}``
"""

from __future__ import annotations

import http.client
import json
import sys
import urllib.error
import urllib.request

from ..errors import NetworkError, ParseError, UnsupportedCountry
from ..models import HolidayYearSet, holiday_from_dict
from .base import BaseSource

NAGER_BASE = "https://date.nager.at/api/v3"

# HTTP status → message, for statuses that are not an unsupported country.
_HTTP_ERRORS: dict[int, str] = {
    400: "Bad Request",
    500: "Internal Server Error",
    503: "Service Unavailable",
}

# Statuses the API uses when it has no data for a country.
_NO_DATA_STATUSES = {204, 404}


class NagerDateSource(BaseSource):
    """Fetch public holidays from Nager.Date."""

    def __init__(self, base_url: str = NAGER_BASE, *, timeout: float = 30) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "nager"

    # ------------------------------------------------------------------ #
    # Public
    # ------------------------------------------------------------------ #

    def fetch(self, country_code: str, year: int) -> HolidayYearSet:
        url = f"{self.base_url}/PublicHolidays/{year}/{country_code}"
        print(f"[nager] GET {url}", file=sys.stderr)

        status, body = self._request(url, self.timeout)
        if status in _NO_DATA_STATUSES or not body.strip():
            raise UnsupportedCountry(
                f"No holiday data for country '{country_code}' in {year}."
            )

        try:
            data = json.loads(body)
        except ValueError as exc:
            raise ParseError(f"Response is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise ParseError(f"Unexpected response type: {type(data).__name__}")
        if not data:
            raise UnsupportedCountry(
                f"No holiday data for country '{country_code}' in {year}."
            )

        holidays = [holiday_from_dict(raw) for raw in data]
        for holiday in holidays:
            if holiday.date.year != year:
                raise ParseError(
                    f"Holiday '{holiday.name}' on {holiday.date} is outside {year}."
                )
        return holidays

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #

    @staticmethod
    def _request(url: str, timeout: float) -> tuple[int, bytes]:
        """Perform the GET and return ``(status, body)``.

        404 is returned as a status so the caller can report an unsupported
        country; every other failure becomes :class:`NetworkError`.
        """
        req = urllib.request.Request(url, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:  # noqa: S310
                return resp.status, resp.read()
        except urllib.error.HTTPError as exc:
            if exc.code in _NO_DATA_STATUSES:
                return exc.code, b""
            reason = _HTTP_ERRORS.get(exc.code, f"Unexpected HTTP status: {exc.code}")
            raise NetworkError(f"{reason} ({url})") from exc
        except urllib.error.URLError as exc:
            raise NetworkError(
                f"Unable to connect to the API: {exc.reason}. "
                "Please check your internet connection."
            ) from exc
        except TimeoutError as exc:
            raise NetworkError("Request timed out: please try again later.") from exc
        except http.client.HTTPException as exc:
            raise NetworkError(f"Incomplete or malformed response from the API: {exc!r}") from exc
        except OSError as exc:
            raise NetworkError(f"Unexpected error while contacting the API: {exc}") from exc
