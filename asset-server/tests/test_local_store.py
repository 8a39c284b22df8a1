from pathlib import Path

import pytest

from app.core.config import Settings
from app.core.container import ApplicationContainer
from app.infrastructure.storage import (
    LocalObjectStore,
    ObjectStoreError,
    ObjectStoreRegistry,
    ObjectStoreUnavailableError,
)


def _write(root: Path, relative: str, payload: bytes) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)


def test_exists_and_fetch(tmp_path):
    _write(tmp_path, "demo/Build/app.wasm", b"\x00asm")
    store = LocalObjectStore(tmp_path, "demo")

    assert store.exists("Build/app.wasm") is True
    assert store.exists("Build/app.data") is False
    assert store.exists("Build") is False
    assert store.fetch("Build/app.wasm") == b"\x00asm"


def test_missing_container_directory_is_absent(tmp_path):
    store = LocalObjectStore(tmp_path, "unknown")

    assert store.exists("app.wasm") is False


def test_missing_root_is_unavailable(tmp_path):
    store = LocalObjectStore(tmp_path / "not-mounted", "demo")

    with pytest.raises(ObjectStoreUnavailableError):
        store.exists("app.wasm")


def test_fetch_missing_file_is_store_error(tmp_path):
    (tmp_path / "demo").mkdir()
    store = LocalObjectStore(tmp_path, "demo")

    with pytest.raises(ObjectStoreError):
        store.fetch("gone.data")


def test_paths_cannot_escape_container(tmp_path):
    _write(tmp_path, "secret.txt", b"secret")
    (tmp_path / "demo").mkdir()
    store = LocalObjectStore(tmp_path, "demo")

    with pytest.raises(ObjectStoreError):
        store.exists("../secret.txt")


def test_registry_reuses_handles_per_container():
    created = []

    def factory(container_id):
        created.append(container_id)
        return LocalObjectStore(Path("."), container_id)

    registry = ObjectStoreRegistry(factory)

    first = registry.get("demo")
    assert registry.get("demo") is first
    assert registry.get("other") is not first
    assert created == ["demo", "other"]
    assert len(registry) == 2


def test_container_resolves_from_local_directory(tmp_path):
    payload = b"\x1f\x8b\x08\x00payload"
    _write(tmp_path, "demo/Build/app.framework.js.gz", payload)
    settings = Settings(storage={"backend": "local", "local_root": tmp_path})

    container = ApplicationContainer.from_settings(settings)
    asset = container.resolver.resolve("demo", "Build/app.framework.js")

    assert asset.payload == payload
    assert asset.physical_path == "Build/app.framework.js.gz"
    assert asset.content_type == "application/javascript"


@pytest.mark.parametrize("name", ["a\x00.wasm", "a" * 300 + ".wasm"])
def test_unrepresentable_names_are_absent(tmp_path, name):
    (tmp_path / "demo").mkdir()
    store = LocalObjectStore(tmp_path, "demo")

    assert store.exists(name) is False
    with pytest.raises(ObjectStoreError):
        store.fetch(name)
