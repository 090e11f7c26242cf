from .adapter import Storage
from .backends import DatabaseBackend, MemoryBackend, StorageBackend, StorageQuotaExceeded


def build_backend(name):
    """Backend for a STORAGE_BACKEND config value; None disables the store."""
    if name == "database":
        return DatabaseBackend()
    if name == "memory":
        return MemoryBackend()
    if name in (None, "", "none"):
        return None
    raise ValueError(f"Unknown storage backend: {name}")


__all__ = [
    "Storage",
    "StorageBackend",
    "MemoryBackend",
    "DatabaseBackend",
    "StorageQuotaExceeded",
    "build_backend",
]
