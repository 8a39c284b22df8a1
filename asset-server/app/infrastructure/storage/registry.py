"""Per-container object store handles."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Dict

from app.core.config import Settings

from .base import ObjectStore
from .local import LocalObjectStore
from .s3 import S3ObjectStore, build_s3_client

logger = logging.getLogger(__name__)

StoreFactory = Callable[[str], ObjectStore]


class ObjectStoreRegistry:
    """Hands out one reusable store handle per container id.

    Handles are read-only and stateless, so concurrent requests share them
    without coordination; the lock only guards handle creation.
    """

    def __init__(self, factory: StoreFactory) -> None:
        self._factory = factory
        self._handles: Dict[str, ObjectStore] = {}
        self._lock = threading.Lock()

    def get(self, container_id: str) -> ObjectStore:
        handle = self._handles.get(container_id)
        if handle is not None:
            return handle
        with self._lock:
            handle = self._handles.get(container_id)
            if handle is None:
                handle = self._factory(container_id)
                self._handles[container_id] = handle
                logger.debug("Opened object store handle for container %s", container_id)
        return handle

    def __len__(self) -> int:
        return len(self._handles)


def build_object_store_registry(settings: Settings) -> ObjectStoreRegistry:
    storage = settings.storage
    if storage.backend == "s3":
        client = build_s3_client(storage.s3)
        prefix = storage.s3.key_prefix
        bucket_prefix = storage.s3.bucket_prefix

        def _s3_factory(container_id: str) -> ObjectStore:
            return S3ObjectStore(client, f"{bucket_prefix}{container_id}", container_id, prefix)

        logger.info("Using S3 object store (endpoint=%s)", storage.s3.endpoint_url or "aws")
        return ObjectStoreRegistry(_s3_factory)

    root = Path(storage.local_root).resolve()

    def _local_factory(container_id: str) -> ObjectStore:
        return LocalObjectStore(root, container_id)

    logger.info("Using local object store rooted at %s", root)
    return ObjectStoreRegistry(_local_factory)
