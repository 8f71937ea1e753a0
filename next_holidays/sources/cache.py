"""On-disk cache in front of another holiday source.

The cache file is a flat mapping from a ``"CC:YYYY"`` key to that year's
holidays.  It is read at most once per :class:`CachedSource` and written at
most once, by :meth:`CachedSource.flush`, with only the entries used since it
was loaded.  Near year-end that is the current and the next year of one
country; any other run replaces them.  Caching is best effort, so read and
write failures are reported and otherwise ignored.
"""

from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path

from ..errors import CacheError, ParseError
from ..models import HolidayYearSet, holiday_from_dict, holiday_to_dict
from .base import BaseSource

CACHE_FILE = "holidays_cache.json"


def cache_key(country_code: str, year: int) -> str:
    return f"{country_code.upper()}:{year}"


def _key_year(key: str) -> int:
    country, sep, year = key.partition(":")
    if not sep or len(country) != 2 or not year.isdigit():
        raise CacheError(f"Invalid cache key {key!r}.")
    return int(year)


def read_cache(path: Path) -> dict[str, HolidayYearSet] | None:
    """Return the ``{key: holidays}`` mapping stored in *path*, or ``None`` if absent.

    Raises :class:`CacheError` if the file exists but cannot be used, including
    an entry that is empty or holds a date outside its keyed year.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise CacheError(f"Cannot read cache file '{path}': {exc}") from exc

    try:
        raw_entries = json.loads(content)["entries"]
        entries = {
            key: [holiday_from_dict(raw) for raw in raws]
            for key, raws in raw_entries.items()
        }
    except (ValueError, TypeError, KeyError, AttributeError, ParseError) as exc:
        raise CacheError(f"Cache file '{path}' is corrupt: {exc}") from exc

    for key, holidays in entries.items():
        year = _key_year(key)
        if not holidays:
            raise CacheError(f"Cache entry {key} is empty.")
        if any(h.date.year != year for h in holidays):
            raise CacheError(f"Cache entry {key} holds dates outside {year}.")
    return entries


def write_cache(
    path: Path, entries: dict[str, HolidayYearSet], *, fetched_on: date | None = None,
) -> None:
    """Overwrite *path* with *entries*.  Raises :class:`CacheError` on failure."""
    payload = {
        "fetched_on": (fetched_on or date.today()).isoformat(),
        "entries": {
            key: [holiday_to_dict(h) for h in holidays]
            for key, holidays in entries.items()
        },
    }
    try:
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as exc:
        raise CacheError(f"Cannot write cache file '{path}': {exc}") from exc


class CachedSource(BaseSource):
    """Serve a (country, year) from the cache file, else from *inner*.

    Fetched sets are kept in memory until :meth:`flush` persists them.
    """

    def __init__(self, inner: BaseSource, cache_path: str | Path = CACHE_FILE) -> None:
        self.inner = inner
        self.cache_path = Path(cache_path)
        self._entries: dict[str, HolidayYearSet] | None = None
        self._used: set[str] = set()
        self._dirty = False

    @property
    def name(self) -> str:
        return f"cached-{self.inner.name}"

    def _load(self) -> dict[str, HolidayYearSet]:
        if self._entries is None:
            try:
                self._entries = read_cache(self.cache_path) or {}
            except CacheError as exc:
                print(f"[cache] Warning: {exc} Ignoring cache.", file=sys.stderr)
                self._entries = {}
        return self._entries

    def fetch(self, country_code: str, year: int) -> HolidayYearSet:
        entries = self._load()
        key = cache_key(country_code, year)

        if key in entries:
            print(f"[cache] Using cached data for {key}.", file=sys.stderr)
            self._used.add(key)
            return list(entries[key])

        holidays = self.inner.fetch(country_code, year)
        entries[key] = holidays
        self._used.add(key)
        self._dirty = True
        return list(holidays)

    def flush(self) -> None:
        if not self._dirty or self._entries is None:
            return
        keep = {key: self._entries[key] for key in sorted(self._used)}
        try:
            write_cache(self.cache_path, keep)
        except CacheError as exc:
            print(f"[cache] Warning: {exc} Skipping cache update.", file=sys.stderr)
        else:
            print(f"[cache] Cache updated for {', '.join(keep)}.", file=sys.stderr)
        self._dirty = False
