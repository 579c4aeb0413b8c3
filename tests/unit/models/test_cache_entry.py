"""Tests for the cache listener models."""

import pytest

from gradle_job_summary.models import CacheEntryListener, CacheListener


def test_entry_returns_existing_listener():
    listener = CacheListener()

    first = listener.entry("gradle-home")
    second = listener.entry("gradle-home")
    listener.entry("wrapper-zips")

    assert first is second
    assert [e.entry_name for e in listener.cache_entries] == ["gradle-home", "wrapper-zips"]


def test_mark_methods_record_activity():
    entry = CacheEntryListener("gradle-home")
    entry.mark_requested("key-1", ["key-"]).mark_restored("key-0", 2048)
    entry.mark_saved("key-1", 4096)

    assert entry.requested_key == "key-1"
    assert entry.requested_restore_keys == ["key-"]
    assert entry.restored_key == "key-0"
    assert entry.restored_size == 2048
    assert entry.saved_key == "key-1"
    assert entry.saved_size == 4096


def test_mark_already_exists_saves_with_zero_size():
    entry = CacheEntryListener("gradle-home").mark_already_exists("key-1")

    assert entry.saved_key == "key-1"
    assert entry.saved_size == 0


def test_requested_but_not_restored():
    entry = CacheEntryListener("gradle-home")
    assert not entry.was_requested_but_not_restored()

    entry.mark_requested("key-1")
    assert entry.was_requested_but_not_restored()

    entry.mark_restored("key-1", 10)
    assert not entry.was_requested_but_not_restored()


def test_fully_restored():
    listener = CacheListener()
    listener.entry("a").mark_requested("k").mark_restored("k", 1)
    assert listener.fully_restored

    listener.entry("b").mark_requested("k2")
    assert not listener.fully_restored


@pytest.mark.parametrize(
    "kwargs, status",
    [
        ({}, "enabled"),
        ({"cache_read_only": True}, "read-only"),
        ({"cache_write_only": True}, "write-only"),
        ({"cache_write_only": True, "cache_read_only": True}, "write-only"),
        ({"cache_disabled": True}, "disabled"),
        ({"cache_disabled": True, "cache_disabled_reason": "disabled on a pull request"}, "disabled on a pull request"),
        ({"cache_available": False, "cache_disabled": True}, "not available"),
    ],
)
def test_cache_status(kwargs, status):
    assert CacheListener(**kwargs).cache_status == status


def test_stringify_and_rehydrate_restore_state():
    listener = CacheListener(cache_read_only=True)
    listener.entry("gradle-home").mark_requested("key-1", ["key-"]).mark_not_restored("timeout")
    listener.entry("wrapper-zips").mark_already_exists("w-1")

    restored = CacheListener.rehydrate(listener.stringify())

    assert restored == listener


def test_rehydrate_reads_camel_case_state():
    state = (
        '{"cacheEntries": [{"entryName": "gradle-home", "requestedKey": "k",'
        ' "restoredKey": "k", "restoredSize": 42}], "cacheDisabled": true,'
        ' "cacheDisabledReason": "disabled"}'
    )

    listener = CacheListener.rehydrate(state)

    assert listener.cache_status == "disabled"
    assert listener.cache_entries[0].restored_size == 42
    assert listener.cache_entries[0].saved_key is None


def test_rehydrate_blank_state_gives_fresh_listener():
    assert CacheListener.rehydrate("  ") == CacheListener()
