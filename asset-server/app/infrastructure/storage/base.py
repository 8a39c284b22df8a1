"""Object store abstractions shared by the storage backends."""

from __future__ import annotations

from typing import Protocol


class ObjectStoreError(RuntimeError):
    """Raised when the object store fails to answer a request."""


class ObjectStoreUnavailableError(ObjectStoreError):
    """Raised on connectivity, timeout or credential failures talking to the store."""


class ObjectStore(Protocol):
    """Read-only handle bound to a single container."""

    container_id: str

    def exists(self, path: str) -> bool:
        ...

    def fetch(self, path: str) -> bytes:
        ...
