"""File-backed blob store — one ``<key>.json`` file per key in a directory."""

import os
from pathlib import Path

import structlog

from shared.blob_store.port import BlobStore
from shared.errors import PersistenceError

logger = structlog.get_logger(__name__)


class FileBlobStore(BlobStore):
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Could not read {path}: {exc}", key=key) from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            # os.replace is atomic within one filesystem
            os.replace(tmp_path, path)
        except OSError as exc:
            raise PersistenceError(f"Could not write {path}: {exc}", key=key) from exc
        logger.debug("Snapshot written", key=key, path=str(path), size=len(value))
