"""Choose which upcoming holidays to display.

The policy only matters when fewer than :data:`WINDOW_SIZE` holidays remain in
the current year: ``fill`` tops the window up from next year's list,
``truncate`` shows what is left.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date

from .errors import UnsupportedCountry
from .models import Holiday, HolidayYearSet

WINDOW_SIZE = 5


class SelectionPolicy(ABC):
    """Decides what to show when the current year runs short."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name (e.g. ``'fill'``)."""

    @abstractmethod
    def complete(
        self,
        remainder: list[Holiday],
        fetch_next_year: Callable[[], HolidayYearSet],
        size: int,
    ) -> list[Holiday]:
        """Return the window given fewer than *size* remaining holidays."""


class FillFromNextYear(SelectionPolicy):
    """Pad the window with the first holidays of next year."""

    @property
    def name(self) -> str:
        return "fill"

    def complete(
        self,
        remainder: list[Holiday],
        fetch_next_year: Callable[[], HolidayYearSet],
        size: int,
    ) -> list[Holiday]:
        try:
            next_year = fetch_next_year()
        except UnsupportedCountry:
            return list(remainder)
        return _dedupe([*remainder, *next_year])[:size]


class TruncateOnly(SelectionPolicy):
    """Show only what is left of the current year."""

    @property
    def name(self) -> str:
        return "truncate"

    def complete(
        self,
        remainder: list[Holiday],
        fetch_next_year: Callable[[], HolidayYearSet],
        size: int,
    ) -> list[Holiday]:
        return list(remainder)


# Registry of available policies – add new ones here.
_POLICIES: dict[str, type[SelectionPolicy]] = {
    "fill": FillFromNextYear,
    "truncate": TruncateOnly,
}

DEFAULT_POLICY = "fill"


def get_policy(name: str) -> SelectionPolicy:
    """Return a policy instance by name.

    Raises ``KeyError`` if *name* is not registered.
    Available names: fill, truncate
    """
    try:
        cls = _POLICIES[name]
    except KeyError:
        available = ", ".join(sorted(_POLICIES))
        raise KeyError(
            f"Unknown selection policy '{name}'. Available: {available}"
        ) from None
    return cls()


def _dedupe(holidays: list[Holiday]) -> list[Holiday]:
    seen: set[tuple[date, str]] = set()
    unique: list[Holiday] = []
    for holiday in holidays:
        key = (holiday.date, holiday.name)
        if key not in seen:
            seen.add(key)
            unique.append(holiday)
    return unique


def select_upcoming(
    today: date,
    current_year_set: HolidayYearSet,
    fetch_next_year: Callable[[], HolidayYearSet],
    policy: SelectionPolicy | None = None,
    *,
    size: int = WINDOW_SIZE,
) -> list[Holiday]:
    """Return up to *size* holidays on or after *today*, in date order.

    *current_year_set* must already be sorted ascending.  *fetch_next_year* is
    only called when the policy needs it, so callers can pass a lazy fetch.
    """
    policy = policy or get_policy(DEFAULT_POLICY)
    remainder = _dedupe([h for h in current_year_set if h.date >= today])
    if len(remainder) >= size:
        return remainder[:size]
    return policy.complete(remainder, fetch_next_year, size)
