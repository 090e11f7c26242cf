# fondation_cms/storage/backends.py
from __future__ import annotations

from typing import Dict, List, Optional, Protocol

from fondation_cms.extensions import db
from fondation_cms.utils.transaction import transactional


class StorageQuotaExceeded(Exception):
    """Raised by a backend when a write would exceed its capacity."""


class StorageBackend(Protocol):
    """
    Raw string key-value store.

    Backends deal in already-encoded strings; JSON handling lives in
    `Storage`. Any backend method may raise; callers are expected to
    contain the failure.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def keys(self) -> List[str]: ...


class MemoryBackend:
    """
    Process-local store.

    `quota` is a maximum number of characters (keys + values) held at
    once; `None` means unbounded.
    """

    def __init__(self, quota: Optional[int] = None, initial: Optional[Dict[str, str]] = None):
        self.quota = quota
        self._data: Dict[str, str] = dict(initial or {})

    def _size_with(self, key: str, value: str) -> int:
        size = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
        return size + len(key) + len(value)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota is not None and self._size_with(key, value) > self.quota:
            raise StorageQuotaExceeded(
                f"Setting '{key}' exceeds the storage quota of {self.quota} characters"
            )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()


class DatabaseBackend:
    """
    Store backed by the `storage_entries` table.

    Must be used inside a Flask application context.
    """

    def get(self, key: str) -> Optional[str]:
        from fondation_cms.models.storage_entry import StorageEntry

        entry = db.session.get(StorageEntry, key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        from fondation_cms.models.storage_entry import StorageEntry

        with transactional() as session:
            entry = session.get(StorageEntry, key)
            if entry is None:
                entry = StorageEntry()
                entry.key = key
                session.add(entry)
            entry.value = value

    def remove(self, key: str) -> None:
        from fondation_cms.models.storage_entry import StorageEntry

        with transactional() as session:
            entry = session.get(StorageEntry, key)
            if entry is not None:
                session.delete(entry)

    def keys(self) -> List[str]:
        from fondation_cms.models.storage_entry import StorageEntry

        rows = db.session.execute(
            db.select(StorageEntry.key).order_by(StorageEntry.created_at, StorageEntry.key)
        )
        return [row[0] for row in rows]
