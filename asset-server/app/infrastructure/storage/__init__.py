"""Object store backends (local filesystem, S3-compatible)."""

from .base import ObjectStore, ObjectStoreError, ObjectStoreUnavailableError
from .local import LocalObjectStore
from .registry import ObjectStoreRegistry, build_object_store_registry
from .s3 import S3ObjectStore, build_s3_client

__all__ = [
    "ObjectStore",
    "ObjectStoreError",
    "ObjectStoreUnavailableError",
    "LocalObjectStore",
    "S3ObjectStore",
    "ObjectStoreRegistry",
    "build_object_store_registry",
    "build_s3_client",
]
