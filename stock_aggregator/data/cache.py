"""
In-memory, time-boxed cache used by the data service.

Entries expire lazily: staleness is checked when an entry is read, and a
periodic sweep (``evict_expired``) purges whatever was never read again.
Meant to be used from a single asyncio event loop; no locking is done.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_MS = 60_000


def now_ms() -> int:
    """Wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    data: T
    timestamp: int  # epoch millis when stored


class TTLCache:
    """
    Dictionary of ``CacheEntry`` objects with a fixed time-to-live.

    Attributes:
        ttl_ms: Entry lifetime in milliseconds
        clock: Zero-arg callable returning epoch milliseconds
    """

    def __init__(self, ttl_ms: int = DEFAULT_TTL_MS, clock: Callable[[], int] = now_ms):
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be positive")
        self.ttl_ms = ttl_ms
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def is_valid(self, entry: CacheEntry) -> bool:
        return self.clock() - entry.timestamp < self.ttl_ms

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent or stale."""
        entry = self._entries.get(key)
        if entry is None or not self.is_valid(entry):
            return None
        return entry.data

    def set(self, key: str, data: Any) -> None:
        self._entries[key] = CacheEntry(data=data, timestamp=self.clock())

    def evict_expired(self) -> int:
        """Remove every stale entry. Returns the number removed."""
        stale = [key for key, entry in self._entries.items() if not self.is_valid(entry)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Evicted {len(stale)} expired cache entries")
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> List[str]:
        return list(self._entries.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
