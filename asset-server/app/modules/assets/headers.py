"""Response header assembly for resolved assets."""

from __future__ import annotations

from typing import Dict

from .models import ResolvedAsset

ALLOWED_METHODS = "GET, OPTIONS"
EXPOSED_HEADERS = ("Content-Length", "Content-Type", "Content-Encoding", "Accept-Ranges")


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Expose-Headers": ",".join(EXPOSED_HEADERS),
    }


def build_asset_headers(asset: ResolvedAsset) -> Dict[str, str]:
    """Build the full header set for serving ``asset``.

    ``Content-Encoding: gzip`` is present if and only if the served object is
    the compressed variant. ``Accept-Ranges`` is advertised, but range
    requests are answered with the whole object.
    """
    headers = cors_headers()
    headers["Content-Length"] = str(asset.size_bytes)
    headers["Content-Type"] = asset.content_type
    headers["Accept-Ranges"] = "bytes"
    if asset.is_compressed:
        headers["Content-Encoding"] = "gzip"
    return headers
