"""Schema cache tests."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
from swagger_schema_validator.schema_compilation import CacheKey, SchemaCache


def test_get_or_create_runs_factory_once_per_key() -> None:
    cache = SchemaCache()
    calls: list[str] = []
    key = CacheKey(document_handle=1, pointer="/definitions/A")

    def factory() -> Any:
        calls.append("compiled")
        return object()

    first = cache.get_or_create(key, factory)
    second = cache.get_or_create(key, factory)

    assert first is second
    assert calls == ["compiled"]
    assert key in cache
    assert cache.get(key) is first
    assert len(cache) == 1


def test_keys_differ_by_document_handle() -> None:
    cache = SchemaCache()

    first = cache.get_or_create(CacheKey(1, "/definitions/A"), object)
    second = cache.get_or_create(CacheKey(2, "/definitions/A"), object)

    assert first is not second
    assert len(cache) == 2


def test_failed_factory_publishes_nothing() -> None:
    cache = SchemaCache()
    key = CacheKey(1, "/definitions/Broken")

    def failing_factory() -> Any:
        raise LookupError("cannot compile")

    with pytest.raises(LookupError):
        cache.get_or_create(key, failing_factory)

    assert key not in cache
    assert cache.get(key) is None
    assert cache.get_or_create(key, object) is not None


def test_failed_factory_releases_its_key_lock() -> None:
    cache = SchemaCache()

    def failing_factory() -> Any:
        raise LookupError("cannot compile")

    for index in range(3):
        with pytest.raises(LookupError):
            cache.get_or_create(CacheKey(index, "/definitions/Broken"), failing_factory)

    assert cache._key_locks == {}


def test_concurrent_requests_for_one_key_compile_once() -> None:
    cache = SchemaCache()
    key = CacheKey(1, "/definitions/A")
    calls: list[int] = []
    release = threading.Event()

    def slow_factory() -> Any:
        calls.append(1)
        release.wait(timeout=5)
        return object()

    with ThreadPoolExecutor(max_workers=8) as executor:
        futures = [executor.submit(cache.get_or_create, key, slow_factory) for _ in range(8)]
        release.set()
        units = {id(future.result()) for future in futures}

    assert calls == [1]
    assert len(units) == 1


def test_compiling_one_key_does_not_block_another() -> None:
    cache = SchemaCache()
    blocked_started = threading.Event()
    release = threading.Event()

    def blocked_factory() -> Any:
        blocked_started.set()
        release.wait(timeout=5)
        return object()

    with ThreadPoolExecutor(max_workers=2) as executor:
        blocked = executor.submit(
            cache.get_or_create, CacheKey(1, "/definitions/Slow"), blocked_factory
        )
        assert blocked_started.wait(timeout=5)
        quick = executor.submit(cache.get_or_create, CacheKey(1, "/definitions/Quick"), object)
        quick_unit = quick.result(timeout=5)
        assert not blocked.done()
        release.set()
        blocked.result(timeout=5)

    assert quick_unit is not None
    assert len(cache) == 2
