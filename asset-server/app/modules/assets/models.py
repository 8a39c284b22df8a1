"""Domain models for asset resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .exceptions import InvalidAssetRequestError

EXPECTED_FORMAT = "Expected URL format: <prefix>/<containerId>/<assetPath>"


@dataclass(frozen=True, slots=True)
class AssetRequest:
    container_id: str
    relative_path: str

    def __post_init__(self) -> None:
        if not self.container_id or "/" in self.container_id or self.container_id in {".", ".."}:
            raise InvalidAssetRequestError(
                f"Invalid container id: {self.container_id!r}",
                container_id=self.container_id,
                logical_path=self.relative_path,
            )
        segments = self.relative_path.split("/")
        if not self.relative_path or any(not segment for segment in segments):
            raise InvalidAssetRequestError(
                f"Asset path must not contain empty segments: {self.relative_path!r}",
                container_id=self.container_id,
                logical_path=self.relative_path,
            )
        if ".." in segments:
            raise InvalidAssetRequestError(
                f"Asset path must not contain '..': {self.relative_path!r}",
                container_id=self.container_id,
                logical_path=self.relative_path,
            )

    @classmethod
    def from_segments(cls, segments: Sequence[str]) -> "AssetRequest":
        if len(segments) < 2:
            raise InvalidAssetRequestError(EXPECTED_FORMAT)
        return cls(container_id=segments[0], relative_path="/".join(segments[1:]))

    @classmethod
    def from_path(cls, raw_path: str) -> "AssetRequest":
        """Build a request from the path below the API prefix (``demo/Build/app.wasm``)."""
        if not raw_path:
            raise InvalidAssetRequestError(EXPECTED_FORMAT)
        return cls.from_segments(raw_path.split("/"))


@dataclass(frozen=True, slots=True)
class Resolution:
    physical_path: str
    is_compressed: bool


@dataclass(frozen=True, slots=True)
class ResolvedAsset:
    container_id: str
    logical_path: str
    physical_path: str
    is_compressed: bool
    content_type: str
    payload: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.payload)


@dataclass(frozen=True, slots=True)
class BuildFileStatus:
    logical_path: str
    resolution: Optional[Resolution]

    @property
    def found(self) -> bool:
        return self.resolution is not None
