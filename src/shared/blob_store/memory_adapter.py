"""In-memory blob store for development and testing.

Can be configured at runtime to fail reads or writes, which is how tests
exercise the fallback-to-defaults and surfaced-write-failure paths.
"""

from shared.blob_store.port import BlobStore
from shared.errors import PersistenceError


class InMemoryBlobStore(BlobStore):
    """Blob store that keeps payloads in a dict and records every call."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_reads: bool = False
        self.fail_writes: bool = False
        self.failure_reason: str = "Storage quota exceeded"
        self.calls: list[dict] = []

    def configure(
        self,
        fail_reads: bool = False,
        fail_writes: bool = False,
        failure_reason: str = "Storage quota exceeded",
    ) -> None:
        """Configure store behavior at runtime."""
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.failure_reason = failure_reason

    def get(self, key: str) -> str | None:
        self.calls.append({"method": "get", "key": key})
        if self.fail_reads:
            raise PersistenceError(self.failure_reason, key=key)
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.calls.append({"method": "set", "key": key})
        if self.fail_writes:
            raise PersistenceError(self.failure_reason, key=key)
        self.data[key] = value

    def writes_for(self, key: str) -> int:
        """Number of set() calls made for a key."""
        return sum(1 for c in self.calls if c["method"] == "set" and c["key"] == key)

    def reset(self) -> None:
        """Clear payloads, recorded calls and failure switches."""
        self.data.clear()
        self.calls.clear()
        self.configure()
