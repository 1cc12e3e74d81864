import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple


class SiteCache:
    """
    Read-through TTL cache for resolved sites, keyed by normalized host.

    Only hits are stored. Entries expire passively; a tenant changing its
    domain or slug is picked up once the TTL has elapsed.
    """

    def __init__(self, ttl: float, *, max_entries: int = 10_000, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            if len(self._entries) >= self.max_entries and key not in self._entries:
                self._evict_expired()
                if len(self._entries) >= self.max_entries:
                    # Oldest insertion goes first; dicts keep insertion order.
                    self._entries.pop(next(iter(self._entries)))
            self._entries[key] = (self._clock() + self.ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_expired(self) -> None:
        now = self._clock()
        for key in [k for k, (expires_at, _) in self._entries.items() if expires_at <= now]:
            del self._entries[key]
