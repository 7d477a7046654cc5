"""Blob store factory.

Provides get_blob_store() / set_blob_store() to swap implementations:
- InMemoryBlobStore for development and testing
- FileBlobStore for a persistent local session
"""

from shared.blob_store.file_adapter import FileBlobStore
from shared.blob_store.memory_adapter import InMemoryBlobStore
from shared.blob_store.port import BlobStore
from shared.settings import settings

CATALOG_KEY = "catalog"
CART_KEY = "cart"

_current_store: BlobStore | None = None


def get_blob_store() -> BlobStore:
    """Return the current blob store, built from BLOB_STORE_ADAPTER on first use."""
    global _current_store
    if _current_store is None:
        adapter = settings.blob_store_adapter
        if adapter == "memory":
            _current_store = InMemoryBlobStore()
        elif adapter == "file":
            _current_store = FileBlobStore(settings.blob_store_dir)
        else:
            raise ValueError(f"Unknown blob store adapter: {adapter}")
    return _current_store


def set_blob_store(store: BlobStore) -> None:
    """Override the active blob store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_blob_store() -> None:
    """Reset to the configured default store."""
    global _current_store
    _current_store = None


__all__ = [
    "CART_KEY",
    "CATALOG_KEY",
    "BlobStore",
    "FileBlobStore",
    "InMemoryBlobStore",
    "get_blob_store",
    "reset_blob_store",
    "set_blob_store",
]
