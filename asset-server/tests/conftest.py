from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.infrastructure.storage import ObjectStoreRegistry
from app.interfaces.http.deps import get_asset_resolver
from app.main import create_app
from app.modules.assets import AssetResolver


class FakeObjectStore:
    """In-memory store recording every call as (operation, container, path)."""

    def __init__(
        self,
        container_id: str,
        objects: Dict[str, Dict[str, bytes]],
        calls: List[Tuple[str, str, str]],
        failures: Dict[Tuple[str, str], Exception],
    ) -> None:
        self.container_id = container_id
        self._objects = objects
        self._calls = calls
        self._failures = failures

    def _maybe_fail(self, operation: str, path: str) -> None:
        failure = self._failures.get((operation, path))
        if failure is not None:
            raise failure

    def exists(self, path: str) -> bool:
        self._calls.append(("exists", self.container_id, path))
        self._maybe_fail("exists", path)
        return path in self._objects.get(self.container_id, {})

    def fetch(self, path: str) -> bytes:
        self._calls.append(("fetch", self.container_id, path))
        self._maybe_fail("fetch", path)
        return self._objects[self.container_id][path]


class FakeBackend:
    def __init__(self) -> None:
        self.objects: Dict[str, Dict[str, bytes]] = {}
        self.calls: List[Tuple[str, str, str]] = []
        self.failures: Dict[Tuple[str, str], Exception] = {}

    def put(self, container_id: str, path: str, payload: bytes) -> None:
        self.objects.setdefault(container_id, {})[path] = payload

    def fail(self, operation: str, path: str, exc: Exception) -> None:
        self.failures[(operation, path)] = exc

    def store_for(self, container_id: str) -> FakeObjectStore:
        return FakeObjectStore(container_id, self.objects, self.calls, self.failures)

    def paths(self, operation: Optional[str] = None) -> List[str]:
        return [path for op, _, path in self.calls if operation is None or op == operation]


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def resolver(backend: FakeBackend) -> AssetResolver:
    return AssetResolver(ObjectStoreRegistry(backend.store_for))


@pytest.fixture
def client(resolver: AssetResolver, tmp_path) -> Iterator[TestClient]:
    settings = Settings(storage={"backend": "local", "local_root": tmp_path})
    app = create_app(settings)
    app.dependency_overrides[get_asset_resolver] = lambda: resolver
    with TestClient(app) as test_client:
        yield test_client
