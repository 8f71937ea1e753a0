"""Holiday data sources."""

from __future__ import annotations

from pathlib import Path

from .base import BaseSource
from .cache import CACHE_FILE, CachedSource
from .nager import NAGER_BASE, NagerDateSource

__all__ = ["BaseSource", "CachedSource", "NagerDateSource", "build_source"]


def build_source(
    cache_path: str | Path = CACHE_FILE,
    *,
    base_url: str = NAGER_BASE,
    timeout: float = 30,
) -> BaseSource:
    """Return the default source: Nager.Date behind the cache file."""
    return CachedSource(NagerDateSource(base_url, timeout=timeout), cache_path)
