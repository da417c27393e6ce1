"""Single-cell in-memory cache for the news feed. No Redis needed.

There is exactly one entry, shared by every caller regardless of the query
parameters they send. A request for ``country=ng`` followed within the TTL by
one for ``country=us`` gets the ``ng`` payload back. This acts as a global
rate limit on the news provider and is kept as is.

The read -> check -> fetch -> write sequence spans an ``await``, so two
requests landing in the same stale window can both fetch upstream; the later
write wins. Each uvicorn worker has its own cell.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class CacheEntry:
    payload: Any
    captured_at: float


class NewsCache:
    def __init__(self, ttl_seconds: float = 60, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: CacheEntry | None = None

    def read(self) -> CacheEntry | None:
        return self._entry

    def write(self, payload: Any) -> CacheEntry:
        """Replace the entry wholesale. Timestamps never move backwards."""
        captured_at = self._clock()
        if self._entry is not None and captured_at < self._entry.captured_at:
            captured_at = self._entry.captured_at
        self._entry = CacheEntry(payload=payload, captured_at=captured_at)
        return self._entry

    @staticmethod
    def is_fresh(entry: CacheEntry | None, now: float, ttl: float) -> bool:
        return entry is not None and now - entry.captured_at < ttl

    def get_fresh(self) -> Any | None:
        """Return the cached payload if still within the TTL, else None."""
        entry = self.read()
        if self.is_fresh(entry, self._clock(), self.ttl_seconds):
            return entry.payload
        return None
