"""Tests for the JSON key-value store adapter and its backends."""

import pytest

from fondation_cms.storage import (
    MemoryBackend,
    Storage,
    StorageQuotaExceeded,
    build_backend,
)


class TestStorageAdapter:
    """Typed get/set/remove over a raw backend."""

    def test_missing_key_returns_none(self, storage):
        """An uninitialized store answers None without raising."""
        assert storage.get_item("nonexistent_key") is None

    def test_set_then_get_roundtrips_json(self, storage, backend):
        """Values are stored as JSON text and decoded on read."""
        assert storage.set_item("page_x", {"id": "x", "title": {"fr": "É", "ar": "ع"}})

        assert storage.get_item("page_x") == {"id": "x", "title": {"fr": "É", "ar": "ع"}}
        assert '"É"' in backend.get("page_x")

    def test_flag_is_stored_as_true_literal(self, storage, backend):
        storage.set_item("dbInitialized", True)
        assert backend.get("dbInitialized") == "true"

    def test_malformed_json_is_treated_as_absent(self, storage, backend, caplog):
        """A decode failure is logged and read as None."""
        backend.set("broken", "{not json")

        assert storage.get_item("broken") is None
        assert "broken" in caplog.text

    def test_remove_item(self, storage):
        storage.set_item("news", [])
        assert storage.remove_item("news")
        assert storage.get_item("news") is None

    def test_unserializable_value_returns_false(self, storage):
        assert storage.set_item("bad", {"value": object()}) is False

    def test_keys_lists_backend_keys(self, storage):
        storage.set_item("page_a", {})
        storage.set_item("news", [])
        assert set(storage.keys()) == {"page_a", "news"}


class TestUnavailableStorage:
    """A store without a backend degrades instead of failing."""

    def test_reads_return_none(self):
        storage = Storage()
        assert not storage.available
        assert storage.get_item("page_home") is None
        assert storage.keys() == []

    def test_writes_return_false(self):
        storage = Storage()
        assert storage.set_item("page_home", {"id": "home"}) is False
        assert storage.remove_item("page_home") is False


class TestMemoryBackendQuota:
    """Quota failures surface as a failed write."""

    def test_backend_raises_over_quota(self):
        backend = MemoryBackend(quota=10)
        with pytest.raises(StorageQuotaExceeded):
            backend.set("key", "a value that is too long")

    def test_adapter_returns_false_over_quota(self):
        storage = Storage(MemoryBackend(quota=20))
        assert storage.set_item("k", "x" * 50) is False
        assert storage.get_item("k") is None

    def test_overwrite_does_not_double_count(self):
        backend = MemoryBackend(quota=10)
        backend.set("k", "12345")
        backend.set("k", "67890")
        assert backend.get("k") == "67890"


class TestBuildBackend:
    def test_known_names(self):
        assert isinstance(build_backend("memory"), MemoryBackend)
        assert build_backend("none") is None
        assert build_backend(None) is None

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError):
            build_backend("redis")
