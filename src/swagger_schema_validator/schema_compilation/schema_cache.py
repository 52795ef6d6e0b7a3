"""Process-wide store of compiled schema units."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import NamedTuple

from .compiled_schema import CompiledSchemaUnit


class CacheKey(NamedTuple):
    """Spec document identity handle plus definition pointer."""

    document_handle: int
    pointer: str


class SchemaCache:
    """Unbounded compiled-unit cache with per-key compile locks.

    Entries are never evicted. Compiling one key never blocks compilation of
    another; concurrent requests for the same key wait for a single compile.
    A factory that raises publishes nothing and releases the key lock.
    """

    def __init__(self) -> None:
        self._units: dict[CacheKey, CompiledSchemaUnit] = {}
        self._key_locks: dict[CacheKey, threading.Lock] = {}
        self._guard = threading.Lock()

    def get(self, key: CacheKey) -> CompiledSchemaUnit | None:
        """Return the published unit for a key, if any."""
        return self._units.get(key)

    def get_or_create(
        self, key: CacheKey, factory: Callable[[], CompiledSchemaUnit]
    ) -> CompiledSchemaUnit:
        """Return the unit for ``key``, running ``factory`` once if it is missing."""
        unit = self._units.get(key)
        if unit is not None:
            return unit
        with self._lock_for(key):
            unit = self._units.get(key)
            if unit is None:
                try:
                    unit = factory()
                except BaseException:
                    self._forget_lock(key)
                    raise
                with self._guard:
                    self._units[key] = unit
        return unit

    def __contains__(self, key: object) -> bool:
        return key in self._units

    def __len__(self) -> int:
        return len(self._units)

    def _forget_lock(self, key: CacheKey) -> None:
        with self._guard:
            self._key_locks.pop(key, None)

    def _lock_for(self, key: CacheKey) -> threading.Lock:
        with self._guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[key] = lock
            return lock
