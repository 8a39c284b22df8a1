"""Asset resolution specific exceptions."""

from __future__ import annotations


class AssetError(Exception):
    """Base class for asset resolution errors."""

    def __init__(self, message: str, *, container_id: str | None = None, logical_path: str | None = None) -> None:
        super().__init__(message)
        self.container_id = container_id
        self.logical_path = logical_path


class InvalidAssetRequestError(AssetError):
    """Raised when the container id or asset path is malformed."""


class AssetNotFoundError(AssetError):
    """Raised when neither the plain nor the compressed object exists."""

    def __init__(self, container_id: str, logical_path: str, attempted: tuple[str, ...]) -> None:
        super().__init__(
            f"Asset not found: {logical_path} (tried {', '.join(attempted)})",
            container_id=container_id,
            logical_path=logical_path,
        )
        self.attempted = attempted


class StoreUnavailableError(AssetError):
    """Raised when the object store cannot be reached; callers may retry."""


class AssetReadError(AssetError):
    """Raised when the object exists but its content could not be fetched."""
