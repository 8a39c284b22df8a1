"""S3-compatible object store backend."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    IncompleteReadError,
    ResponseStreamingError,
)

from app.core.config import S3Settings

from .base import ObjectStoreError, ObjectStoreUnavailableError

_MISSING_CODES = {"404", "NoSuchKey", "NotFound", "NoSuchBucket"}
_ACCESS_CODES = {
    "403",
    "AccessDenied",
    "Forbidden",
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
    "ExpiredToken",
    "SlowDown",
    "ServiceUnavailable",
    "503",
}


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", ""))


def build_s3_client(settings: S3Settings) -> Any:
    config = Config(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"max_attempts": settings.max_attempts, "mode": "standard"},
        s3={"addressing_style": "path" if settings.path_style else "auto"},
    )
    return boto3.client(
        "s3",
        endpoint_url=settings.endpoint_url,
        region_name=settings.region,
        config=config,
    )


class S3ObjectStore:
    def __init__(self, client: Any, bucket: str, container_id: str, prefix: str = "") -> None:
        self.container_id = container_id
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        self._client = client

    def _key(self, path: str) -> str:
        relative = path.lstrip("/")
        if not self.prefix:
            return relative
        return f"{self.prefix}/{relative}"

    def exists(self, path: str) -> bool:
        key = self._key(path)
        try:
            self._client.head_object(Bucket=self.bucket, Key=key)
            return True
        except ClientError as exc:
            if _error_code(exc) in _MISSING_CODES:
                return False
            raise ObjectStoreUnavailableError(f"head s3://{self.bucket}/{key} failed: {exc}") from exc
        except BotoCoreError as exc:
            raise ObjectStoreUnavailableError(f"head s3://{self.bucket}/{key} failed: {exc}") from exc

    def fetch(self, path: str) -> bytes:
        key = self._key(path)
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=key)
            return response["Body"].read()
        except ClientError as exc:
            if _error_code(exc) in _ACCESS_CODES:
                raise ObjectStoreUnavailableError(f"get s3://{self.bucket}/{key} failed: {exc}") from exc
            raise ObjectStoreError(f"get s3://{self.bucket}/{key} failed: {exc}") from exc
        except (IncompleteReadError, ResponseStreamingError) as exc:
            raise ObjectStoreError(f"stream of s3://{self.bucket}/{key} broke: {exc}") from exc
        except BotoCoreError as exc:
            raise ObjectStoreUnavailableError(f"get s3://{self.bucket}/{key} failed: {exc}") from exc
