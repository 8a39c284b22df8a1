"""Asset resolution domain exports."""

from .exceptions import (
    AssetError,
    AssetNotFoundError,
    AssetReadError,
    InvalidAssetRequestError,
    StoreUnavailableError,
)
from .headers import build_asset_headers, cors_headers
from .models import AssetRequest, BuildFileStatus, Resolution, ResolvedAsset
from .service import AssetResolver

__all__ = [
    "AssetError",
    "AssetNotFoundError",
    "AssetReadError",
    "InvalidAssetRequestError",
    "StoreUnavailableError",
    "AssetRequest",
    "BuildFileStatus",
    "Resolution",
    "ResolvedAsset",
    "AssetResolver",
    "build_asset_headers",
    "cors_headers",
]
