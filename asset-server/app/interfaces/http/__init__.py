from fastapi import APIRouter

from app.interfaces.http.routers import blob


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(blob.router, tags=["资源"])
    return router


__all__ = [
    "create_api_router",
]
