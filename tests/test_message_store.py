"""Unit tests for the locked in-memory message store."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from message_service.services import MessageStore


def test_create_then_get_returns_contents():
    store = MessageStore()

    assert store.create(1, "hi") is True
    assert store.get(1) == "hi"
    assert 1 in store
    assert len(store) == 1


def test_create_existing_id_keeps_original_contents():
    store = MessageStore()
    store.create(7, "first")

    assert store.create(7, "second") is False
    assert store.get(7) == "first"


def test_update_missing_id_does_not_create_entry():
    store = MessageStore()

    assert store.update(3, "ghost") is False
    assert store.get(3) is None
    assert 3 not in store
    assert len(store) == 0


def test_update_existing_id_replaces_contents():
    store = MessageStore()
    store.create(2, "old")

    assert store.update(2, "new") is True
    assert store.get(2) == "new"
    assert len(store) == 1


def test_get_unknown_id_returns_none():
    assert MessageStore().get(42) is None


def test_empty_contents_are_stored():
    store = MessageStore()

    assert store.create(0, "") is True
    assert store.get(0) == ""


def test_concurrent_creates_on_same_id_admit_exactly_one_writer():
    store = MessageStore()
    barrier = threading.Barrier(16)

    def attempt(worker: int) -> bool:
        barrier.wait()
        return store.create(99, f"worker-{worker}")

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(attempt, range(16)))

    assert results.count(True) == 1
    winner = results.index(True)
    assert store.get(99) == f"worker-{winner}"


def test_concurrent_creates_on_distinct_ids_all_succeed():
    store = MessageStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda i: store.create(i, str(i)), range(200)))

    assert all(results)
    assert len(store) == 200
    assert all(store.get(i) == str(i) for i in range(200))
