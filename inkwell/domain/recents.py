from __future__ import annotations

from typing import Iterable, List

MAX_RECENTS = 10


def bump_recent(recents: Iterable[str], path: str, limit: int = MAX_RECENTS) -> List[str]:
    """Return a new MRU list with ``path`` moved (or added) to the front.

    Existing occurrences are dropped first, so re-opening a file never
    duplicates it; the tail beyond ``limit`` is evicted silently.
    """
    bumped = [path]
    bumped.extend(p for p in recents if p != path)
    return bumped[: max(0, int(limit))]


def coerce_recents(data: object) -> List[str]:
    """Keep only string entries of a decoded payload; anything else yields []."""
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, str) and item]
