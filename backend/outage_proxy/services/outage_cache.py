"""Key/value cache for the raw upstream outage body.

The orchestrator only needs get/put-with-TTL, so any store satisfying
``OutageCache`` can be injected (tests pass a fresh ``InMemoryOutageCache``).
Expiry is owned by the store.
"""

import logging
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class OutageCache(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        ...


class InMemoryOutageCache:
    """Process-local TTL store. Single get/put calls are atomic under the GIL;
    a read followed by a write is not coordinated."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}

    def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            logger.debug("Cache entry %s expired", key)
            return None
        return value

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            # max-age=0 means do not store
            self._entries.pop(key, None)
            return
        self._entries[key] = (value, self._clock() + ttl_seconds)

    def clear(self) -> None:
        self._entries.clear()


# Shared across requests in this process
_outage_cache = InMemoryOutageCache()


def get_outage_cache() -> OutageCache:
    """FastAPI dependency returning the process-wide cache."""
    return _outage_cache
