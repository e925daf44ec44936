"""Geocode result caches keyed by normalized address"""

import logging
import time
from collections import OrderedDict
from typing import Protocol

from services.cache import cache_delete_pattern, cache_get, cache_set

from .models import GeocodeResult

logger = logging.getLogger(__name__)

REDIS_KEY_PREFIX = "geocode:"


def normalize_address(address: str) -> str:
    """Cache key for an address: trimmed and lower-cased"""
    return address.strip().lower()


class GeocodeCache(Protocol):
    async def get(self, key: str) -> GeocodeResult | None: ...

    async def set(self, key: str, result: GeocodeResult) -> None: ...

    async def clear(self) -> None: ...


class MemoryGeocodeCache:
    """
    In-process cache.

    Unbounded and never expiring by default. With max_entries the least
    recently used entry is evicted; with ttl entries expire after that many
    seconds and are pruned on every write. When ttl is set, entries stay in
    store order, so max_entries evicts the oldest stored entry instead.
    """

    def __init__(self, max_entries: int | None = None, ttl: float | None = None):
        self.max_entries = max_entries or None
        self.ttl = ttl or None
        self._entries: OrderedDict[str, tuple[GeocodeResult, float]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> GeocodeResult | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        result, stored_at = entry
        if self._expired(stored_at, time.monotonic()):
            del self._entries[key]
            return None

        if self.ttl is None:
            self._entries.move_to_end(key)
        return result

    async def set(self, key: str, result: GeocodeResult) -> None:
        now = time.monotonic()
        self._entries[key] = (result, now)
        self._entries.move_to_end(key)
        self._prune_expired(now)
        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted geocode cache entry: {evicted}")

    async def clear(self) -> None:
        self._entries.clear()

    def _expired(self, stored_at: float, now: float) -> bool:
        return self.ttl is not None and now - stored_at > self.ttl

    def _prune_expired(self, now: float) -> None:
        # Store order means the oldest entries are at the front
        while self._entries:
            oldest, (_, stored_at) = next(iter(self._entries.items()))
            if not self._expired(stored_at, now):
                break
            del self._entries[oldest]
            logger.debug(f"Expired geocode cache entry: {oldest}")


class RedisGeocodeCache:
    """Cache shared between processes. A Redis outage reads as a miss."""

    def __init__(self, ttl: int | None = None, prefix: str = REDIS_KEY_PREFIX):
        self.ttl = ttl or None
        self.prefix = prefix

    async def get(self, key: str) -> GeocodeResult | None:
        cached = await cache_get(f"{self.prefix}{key}")
        if cached is None:
            return None
        try:
            return GeocodeResult.model_validate(cached)
        except ValueError as e:
            logger.warning(f"Ignoring invalid cached geocode for {key}: {e}")
            return None

    async def set(self, key: str, result: GeocodeResult) -> None:
        await cache_set(f"{self.prefix}{key}", result.model_dump(), ttl=self.ttl)

    async def clear(self) -> None:
        await cache_delete_pattern(f"{self.prefix}*")
