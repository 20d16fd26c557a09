"""
Query cache shared by every view.

Keys are tuples such as ("inventory",) for a collection and
("inventory", "inv1") for a single record. Invalidation never touches the
cached value: it marks matching entries stale and tells their listeners, who
decide whether to refetch.
"""
import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

QueryKey = Tuple[str, ...]
Listener = Callable[[QueryKey], None]


def make_key(module: str, identity: Optional[str] = None) -> QueryKey:
    return (module,) if identity is None else (module, identity)


def key_matches(prefix: QueryKey, key: QueryKey) -> bool:
    return key[:len(prefix)] == prefix


@dataclass
class CacheEntry:
    value: Any
    updated_at: float = field(default_factory=time.time)
    stale: bool = False


class QueryCache:
    def __init__(self):
        self._entries: Dict[QueryKey, CacheEntry] = {}
        self._listeners: Dict[QueryKey, List[Listener]] = {}
        # invalidated prefix -> sequence number of its latest invalidation
        self._invalidations: Dict[QueryKey, int] = {}
        self._sequence = 0
        self._inflight: Dict[QueryKey, asyncio.Future] = {}

    def get(self, key: QueryKey) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def set(self, key: QueryKey, value: Any, stale: bool = False) -> CacheEntry:
        entry = CacheEntry(value=value, stale=stale)
        self._entries[key] = entry
        return entry

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def invalidate(self, key: QueryKey) -> List[QueryKey]:
        """Mark `key` and every key under it stale; returns the affected keys."""
        self._sequence += 1
        self._invalidations[key] = self._sequence
        affected = [k for k in self._entries if key_matches(key, k)]
        for k in affected:
            self._entries[k].stale = True
        logger.info(f"Invalidated {len(affected)} cache entries under {key}")

        for listened_key, listeners in list(self._listeners.items()):
            if key_matches(key, listened_key):
                for listener in list(listeners):
                    listener(listened_key)
        return affected

    def subscribe(self, key: QueryKey, listener: Listener) -> Callable[[], None]:
        self._listeners.setdefault(key, []).append(listener)

        def unsubscribe():
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)
            if not listeners:
                self._listeners.pop(key, None)

        return unsubscribe

    def clear(self):
        self._entries.clear()

    def generation(self, key: QueryKey) -> int:
        """Sequence number of the latest invalidation that covered `key`"""
        return max((self._invalidations.get(key[:i], 0) for i in range(1, len(key) + 1)), default=0)

    # ------------------------------------------
    # in-flight fetches, shared by every query on a key
    # ------------------------------------------

    def inflight(self, key: QueryKey) -> Optional[asyncio.Future]:
        future = self._inflight.get(key)
        return future if future is not None and not future.done() else None

    def track(self, key: QueryKey, future: asyncio.Future) -> asyncio.Future:
        self._inflight[key] = future

        def forget(done: asyncio.Future):
            if self._inflight.get(key) is done:
                del self._inflight[key]

        future.add_done_callback(forget)
        return future
