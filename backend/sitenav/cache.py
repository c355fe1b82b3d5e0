# sitenav/cache.py
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, TypeVar

from cachetools import TTLCache

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class MenuCache:
    """
    Thread-safe get-or-compute store for resolved menus.

    Concurrent misses on the same key share one computation: the first
    caller builds the value while the others wait on that key's lock and
    then read what it stored. Misses on different keys never wait on
    each other.

    A failing computation stores nothing; the next caller retries.
    """

    def __init__(self, ttl: int = 300, maxsize: int = 1024) -> None:
        self._lock = threading.Lock()
        self._key_locks: Dict[str, threading.Lock] = {}
        self._store: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl)

    def init_app(self, app) -> None:
        self.configure(
            ttl=app.config.get("MENU_CACHE_TTL", 300),
            maxsize=app.config.get("MENU_CACHE_MAXSIZE", 1024),
        )
        app.extensions["menu_cache"] = self

    def configure(self, *, ttl: int, maxsize: int) -> None:
        """Replace the backing store. Drops every cached entry."""
        with self._lock:
            self._store = TTLCache(maxsize=maxsize, ttl=ttl)
            self._key_locks.clear()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._store.get(key, default)

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        with self._lock:
            value = self._store.get(key, _MISSING)
            if value is not _MISSING:
                logger.debug("menu cache hit: %s", key)
                return value
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Another thread may have finished the build while we waited
            with self._lock:
                value = self._store.get(key, _MISSING)
            if value is not _MISSING:
                logger.debug("menu cache hit after wait: %s", key)
                return value

            logger.debug("menu cache miss: %s", key)
            try:
                value = compute()
                with self._lock:
                    self._store[key] = value
            finally:
                with self._lock:
                    if self._key_locks.get(key) is key_lock:
                        del self._key_locks[key]

        return value

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self._key_locks.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
