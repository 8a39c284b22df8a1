"""Reusable FastAPI dependencies."""

from .assets import get_asset_resolver

__all__ = [
    "get_asset_resolver",
]
