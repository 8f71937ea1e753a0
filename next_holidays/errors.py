"""Error hierarchy shared by the holiday sources and the CLI."""

from __future__ import annotations


class HolidayError(Exception):
    """Base class for every error raised by this package."""


class NetworkError(HolidayError):
    """The provider could not be reached or answered with a non-2xx status."""


class ParseError(HolidayError):
    """The provider's response could not be decoded into holidays."""


class UnsupportedCountry(HolidayError):
    """The country code is invalid or the provider has no data for it."""


class CacheError(HolidayError):
    """The cache file could not be read or written.  Never fatal."""
