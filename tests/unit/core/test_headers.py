"""Unit tests for HeaderStore."""

import pytest

from laakhay.http.core import HeaderStore


def test_add_inserts_and_overwrites():
    store = HeaderStore()
    store.add("Accept", "text/plain")
    store.add("Accept", "application/json")

    assert store.get("Accept") == "application/json"
    assert len(store) == 1


def test_remove_missing_header_is_noop():
    store = HeaderStore({"Accept": "*/*"})
    store.remove("X-Never-Added")  # Should not raise

    assert store.snapshot() == {"Accept": "*/*"}


def test_remove_existing_header():
    store = HeaderStore({"Accept": "*/*", "X-Trace": "1"})
    store.remove("X-Trace")

    assert "X-Trace" not in store
    assert "Accept" in store


def test_flatten_then_parse_recovers_mapping():
    headers = {"Accept": "application/json", "X-Request-Id": "42", "User-Agent": "ua/1"}
    flat = HeaderStore(headers).flatten()

    assert flat == ["Accept", "application/json", "X-Request-Id", "42", "User-Agent", "ua/1"]
    assert HeaderStore.from_flat(flat).snapshot() == headers


def test_flatten_empty_store():
    assert HeaderStore().flatten() == []


def test_from_flat_rejects_odd_length():
    with pytest.raises(ValueError, match="even length"):
        HeaderStore.from_flat(["Accept"])


def test_snapshot_applies_overrides_without_mutating():
    store = HeaderStore({"Accept": "*/*", "Content-Type": "application/json"})

    merged = store.snapshot({"Content-Type": "text/plain", "X-Once": "1"})

    assert merged == {"Accept": "*/*", "Content-Type": "text/plain", "X-Once": "1"}
    assert store.snapshot() == {"Accept": "*/*", "Content-Type": "application/json"}


def test_names_are_case_sensitive():
    store = HeaderStore()
    store.add("accept", "a")
    store.add("Accept", "b")

    assert list(store) == ["accept", "Accept"]
