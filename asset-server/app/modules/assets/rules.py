"""Pure resolution rules: gzip fallback decision table and content types."""

from __future__ import annotations

from typing import Optional

from .models import Resolution

COMPRESSED_SUFFIX = ".gz"

# Unity WebGL build outputs that may be published only in pre-compressed form.
FALLBACK_SUFFIXES = (".data", ".framework.js", ".wasm")

# Matched in order; ".js" also covers ".framework.js" and ".loader.js".
CONTENT_TYPES = (
    (".js", "application/javascript"),
    (".wasm", "application/wasm"),
    (".data", "application/octet-stream"),
)
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# The four files a Unity WebGL loader requests for one build id.
BUILD_FILE_SUFFIXES = (".loader.js", ".data", ".framework.js", ".wasm")


def is_fallback_eligible(logical_path: str) -> bool:
    return logical_path.endswith(FALLBACK_SUFFIXES)


def compressed_path(logical_path: str) -> str:
    return f"{logical_path}{COMPRESSED_SUFFIX}"


def content_type_for(logical_path: str) -> str:
    """Content type of the decoded payload, always taken from the logical path."""
    for suffix, content_type in CONTENT_TYPES:
        if logical_path.endswith(suffix):
            return content_type
    return DEFAULT_CONTENT_TYPE


def decide(logical_path: str, plain_exists: bool, gz_exists: bool) -> Optional[Resolution]:
    """Pick the physical object serving ``logical_path``.

    Returns ``None`` when the asset is absent. ``gz_exists`` is ignored for
    paths that are not fallback eligible.
    """
    if plain_exists:
        physical_path = logical_path
    elif gz_exists and is_fallback_eligible(logical_path):
        physical_path = compressed_path(logical_path)
    else:
        return None
    return Resolution(
        physical_path=physical_path,
        is_compressed=physical_path.endswith(COMPRESSED_SUFFIX),
    )


def build_file_paths(build_id: str) -> list[str]:
    return [f"{build_id}{suffix}" for suffix in BUILD_FILE_SUFFIXES]
