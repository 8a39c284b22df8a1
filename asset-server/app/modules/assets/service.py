"""Asset resolver mapping logical asset paths to objects in the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.infrastructure.storage import (
    ObjectStore,
    ObjectStoreError,
    ObjectStoreRegistry,
    ObjectStoreUnavailableError,
)

from .exceptions import AssetNotFoundError, AssetReadError, StoreUnavailableError
from .models import AssetRequest, BuildFileStatus, Resolution, ResolvedAsset
from .rules import build_file_paths, compressed_path, content_type_for, decide, is_fallback_eligible

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssetResolver:
    registry: ObjectStoreRegistry

    def resolve(self, container_id: str, relative_path: str) -> ResolvedAsset:
        """Resolve and fetch the object serving ``container_id/relative_path``.

        At most two existence probes (plain, then ``.gz`` for eligible
        suffixes) followed by one full read of the winning object.
        """
        request = AssetRequest(container_id=container_id, relative_path=relative_path)
        store = self.registry.get(request.container_id)
        resolution = self._locate(store, request)
        payload = self._fetch(store, request, resolution)
        logger.debug(
            "Fetched %s/%s (%d bytes, compressed=%s)",
            request.container_id,
            resolution.physical_path,
            len(payload),
            resolution.is_compressed,
        )
        return ResolvedAsset(
            container_id=request.container_id,
            logical_path=request.relative_path,
            physical_path=resolution.physical_path,
            is_compressed=resolution.is_compressed,
            content_type=content_type_for(request.relative_path),
            payload=payload,
        )

    def locate(self, container_id: str, relative_path: str) -> Resolution:
        request = AssetRequest(container_id=container_id, relative_path=relative_path)
        return self._locate(self.registry.get(request.container_id), request)

    def inspect_build(self, container_id: str, build_id: str) -> list[BuildFileStatus]:
        """Report which object would serve each file of a Unity WebGL build."""
        statuses: list[BuildFileStatus] = []
        for logical_path in build_file_paths(build_id):
            try:
                resolution: Resolution | None = self.locate(container_id, logical_path)
            except AssetNotFoundError:
                resolution = None
            statuses.append(BuildFileStatus(logical_path=logical_path, resolution=resolution))
        return statuses

    def _locate(self, store: ObjectStore, request: AssetRequest) -> Resolution:
        logical_path = request.relative_path
        attempted = [logical_path]
        logger.debug("Probing %s/%s", request.container_id, logical_path)
        plain_exists = self._probe(store, request, logical_path)

        gz_exists = False
        if not plain_exists and is_fallback_eligible(logical_path):
            fallback = compressed_path(logical_path)
            attempted.append(fallback)
            logger.debug("Not found, trying %s/%s", request.container_id, fallback)
            gz_exists = self._probe(store, request, fallback)

        resolution = decide(logical_path, plain_exists, gz_exists)
        if resolution is None:
            logger.info(
                "Asset not found: %s/%s (tried %s)",
                request.container_id,
                logical_path,
                ", ".join(attempted),
            )
            raise AssetNotFoundError(request.container_id, logical_path, tuple(attempted))
        if resolution.is_compressed:
            logger.debug("Serving compressed object %s/%s", request.container_id, resolution.physical_path)
        return resolution

    @staticmethod
    def _probe(store: ObjectStore, request: AssetRequest, path: str) -> bool:
        try:
            return store.exists(path)
        except ObjectStoreError as exc:
            logger.error("Existence probe failed for %s/%s: %s", request.container_id, path, exc)
            raise StoreUnavailableError(
                str(exc),
                container_id=request.container_id,
                logical_path=request.relative_path,
            ) from exc

    @staticmethod
    def _fetch(store: ObjectStore, request: AssetRequest, resolution: Resolution) -> bytes:
        try:
            return store.fetch(resolution.physical_path)
        except ObjectStoreUnavailableError as exc:
            logger.error(
                "Object store unavailable while reading %s/%s: %s",
                request.container_id,
                resolution.physical_path,
                exc,
            )
            raise StoreUnavailableError(
                str(exc),
                container_id=request.container_id,
                logical_path=request.relative_path,
            ) from exc
        except ObjectStoreError as exc:
            logger.error("Failed to read %s/%s: %s", request.container_id, resolution.physical_path, exc)
            raise AssetReadError(
                str(exc),
                container_id=request.container_id,
                logical_path=request.relative_path,
            ) from exc


__all__ = ["AssetResolver"]
