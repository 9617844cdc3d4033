"""Tests for the token store adapters."""

from __future__ import annotations

import json
import logging

import pytest

from mixcore_sdk.ports import ITokenStore
from mixcore_sdk.token_store import FileTokenStore, InMemoryTokenStore


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path) -> ITokenStore:
    if request.param == "memory":
        return InMemoryTokenStore()
    return FileTokenStore(tmp_path / "tokens.json")


def test_satisfies_protocol(store):
    assert isinstance(store, ITokenStore)


def test_get_missing_is_none(store):
    assert store.get("mix_access_token") is None


def test_set_get_remove(store):
    store.set("mix_access_token", "abc")
    assert store.get("mix_access_token") == "abc"
    store.remove("mix_access_token")
    assert store.get("mix_access_token") is None


def test_remove_missing_is_noop(store):
    store.remove("nothing")
    assert store.get("nothing") is None


class TestFileTokenStore:
    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "tokens.json"
        FileTokenStore(path).set("k", "v")
        assert FileTokenStore(path).get("k") == "v"
        assert json.loads(path.read_text()) == {"k": "v"}

    def test_corrupt_file_reads_as_empty(self, tmp_path, caplog):
        path = tmp_path / "tokens.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="mixcore_sdk.token_store"):
            assert FileTokenStore(path).get("k") is None
        assert "not readable" in caplog.text

    def test_non_object_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "tokens.json"
        path.write_text("[1, 2]")
        assert FileTokenStore(path).get("k") is None

    def test_non_string_value_ignored(self, tmp_path):
        path = tmp_path / "tokens.json"
        path.write_text(json.dumps({"k": 42, "empty": ""}))
        store = FileTokenStore(path)
        assert store.get("k") is None
        assert store.get("empty") is None

    def test_corrupt_file_is_overwritten_on_set(self, tmp_path):
        path = tmp_path / "tokens.json"
        path.write_text("garbage")
        store = FileTokenStore(path)
        store.set("k", "v")
        assert store.get("k") == "v"
