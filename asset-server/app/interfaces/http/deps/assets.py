"""Asset resolver dependency providers."""

from fastapi import Request

from app.modules.assets import AssetResolver


def get_asset_resolver(request: Request) -> AssetResolver:
    return request.app.state.container.resolver


__all__ = [
    "get_asset_resolver",
]
