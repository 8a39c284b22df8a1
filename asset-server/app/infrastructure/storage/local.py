"""Filesystem backed object store (one directory per container)."""

from __future__ import annotations

from pathlib import Path

from .base import ObjectStoreError, ObjectStoreUnavailableError


class LocalObjectStore:
    def __init__(self, root: Path, container_id: str) -> None:
        self.container_id = container_id
        self.root = root
        self._container_dir = (root / container_id).resolve()

    def _full_path(self, path: str) -> Path:
        full_path = (self._container_dir / path).resolve()
        if not full_path.is_relative_to(self._container_dir):
            raise ObjectStoreError(f"path escapes container {self.container_id}: {path}")
        return full_path

    def exists(self, path: str) -> bool:
        if not self.root.is_dir():
            raise ObjectStoreUnavailableError(f"storage root is not a directory: {self.root}")
        try:
            return self._full_path(path).is_file()
        except (OSError, ValueError):
            # names the filesystem cannot represent (NUL bytes, over-long segments)
            return False

    def fetch(self, path: str) -> bytes:
        try:
            return self._full_path(path).read_bytes()
        except (OSError, ValueError) as exc:
            raise ObjectStoreError(f"failed to read {self.container_id}/{path}: {exc}") from exc
