"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings
from app.infrastructure.storage import ObjectStoreRegistry, build_object_store_registry
from app.modules.assets import AssetResolver


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    stores: ObjectStoreRegistry
    resolver: AssetResolver

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        stores = build_object_store_registry(settings)
        return cls(settings=settings, stores=stores, resolver=AssetResolver(stores))


__all__ = ["ApplicationContainer"]
