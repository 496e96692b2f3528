"""
Response cache for Cloudflare API results.

Entries are keyed by endpoint path only. An entry never expires on its
own; freshness is judged against the TTL of the call that looks it up,
and stale entries stay in place until the next cached write to the same
path replaces them.
"""

import logging
import time
from typing import Any, Callable, Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)


class CacheEntry(NamedTuple):
    """An unwrapped API result and the time it was stored."""

    result: Any
    stored_at: float


class ResponseCache:
    """Path-keyed, TTL-checked store of API results."""

    def __init__(self, clock: Callable[[], float] = time.time):
        """Initialize an empty cache; clock returns the current time in seconds."""
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def lookup(self, path: str) -> Optional[CacheEntry]:
        """Return the entry stored for path, fresh or not."""
        return self._entries.get(path)

    def is_expired(self, entry: CacheEntry, ttl_seconds: float) -> bool:
        """Check whether entry is older than ttl_seconds."""
        return entry.stored_at < self.clock() - ttl_seconds

    def store(self, path: str, result: Any, ttl_seconds: float) -> None:
        """
        Store result for path stamped with the current time.

        A ttl_seconds of zero or less means the result must not be cached;
        whatever is already stored for path is left as it is.
        """
        if ttl_seconds <= 0:
            return
        self._entries[path] = CacheEntry(result, self.clock())
        logger.debug(f"Cached result for {path}")

    def invalidate(self, path: str) -> bool:
        """Drop the entry for path. Returns True if one existed."""
        return self._entries.pop(path, None) is not None

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: str) -> bool:
        return path in self._entries
