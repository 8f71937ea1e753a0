"""Abstract base class for holiday sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import HolidayYearSet


class BaseSource(ABC):
    """Interface that every holiday source must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this source (e.g. ``'nager'``)."""

    @abstractmethod
    def fetch(self, country_code: str, year: int) -> HolidayYearSet:
        """Return every public holiday of *country_code* in *year*.

        Parameters
        ----------
        country_code:
            Upper-case ISO-3166 alpha-2 code (e.g. ``"DE"``).
        year:
            Four-digit calendar year.

        Holidays are returned in ascending date order.  Implementations raise
        :class:`~next_holidays.errors.NetworkError`,
        :class:`~next_holidays.errors.ParseError` or
        :class:`~next_holidays.errors.UnsupportedCountry`.
        """

    def flush(self) -> None:
        """Persist anything fetched so far.  Sources without state do nothing."""
