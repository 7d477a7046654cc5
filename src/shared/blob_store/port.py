"""Blob store port (abstract interface).

The storefront persists whole snapshots under fixed keys. Adapters only need
get/set of opaque strings; encoding is the caller's concern.
"""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Abstract key-value blob store."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored payload, or None when the key was never written.

        Raises PersistenceError when the store cannot be read.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Durably store the payload, replacing any previous value.

        Raises PersistenceError when the write does not complete.
        """
        ...
