"""In-process read cache with a fixed time-to-live."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger

DEFAULT_TTL_SECONDS = 300.0

_MISSING = object()


@dataclass
class CacheEntry:
    payload: Any
    inserted_at: float


class TTLCache:
    """
    Key -> payload map whose entries expire ``ttl`` seconds after insertion.

    Expired entries are never returned, only overwritten. Invalidation is
    all-or-nothing through ``clear``. A lock guards every access so one
    instance can be shared between threads.
    """

    def __init__(self, ttl: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_key(operation: str, **params: Any) -> str:
        """Build a deterministic key from an operation name and its parameters."""
        parts = [operation] + [f"{name}={params[name]!r}" for name in sorted(params)]
        return "|".join(parts)

    def _is_fresh(self, entry: CacheEntry | None) -> bool:
        return entry is not None and self._clock() - entry.inserted_at < self.ttl

    def is_valid(self, key: str) -> bool:
        """True if ``key`` holds an entry younger than the TTL."""
        with self._lock:
            return self._is_fresh(self._entries.get(key))

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if self._is_fresh(entry):
                logger.debug("Cache hit: {}", key)
                return entry.payload
        logger.debug("Cache miss: {}", key)
        return default

    def lookup(self, key: str) -> tuple[bool, Any]:
        """Return ``(hit, payload)``; distinguishes a cached ``None`` from a miss."""
        value = self.get(key, _MISSING)
        if value is _MISSING:
            return False, None
        return True, value

    def set(self, key: str, payload: Any) -> None:
        """Store ``payload`` and drop any entries that have already expired."""
        with self._lock:
            now = self._clock()
            stale = [k for k, entry in self._entries.items() if now - entry.inserted_at >= self.ttl]
            for k in stale:
                del self._entries[k]
            self._entries[key] = CacheEntry(payload=payload, inserted_at=now)

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("Cache cleared ({} entries)", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
