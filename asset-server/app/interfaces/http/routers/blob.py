"""Read-only asset delivery endpoints for WebGL game builds."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from app.interfaces.http.deps import get_asset_resolver
from app.modules.assets import (
    AssetNotFoundError,
    AssetReadError,
    AssetRequest,
    AssetResolver,
    InvalidAssetRequestError,
    StoreUnavailableError,
    build_asset_headers,
    cors_headers,
)
from app.schemas import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Malformed asset path"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Asset missing in plain and gzip form"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Object store failure"},
}


def _error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
        headers=cors_headers(),
    )


@router.api_route(
    "/{asset_path:path}",
    methods=["GET", "HEAD"],
    summary="获取构建资源文件",
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
async def get_asset(asset_path: str, resolver: AssetResolver = Depends(get_asset_resolver)) -> Response:
    try:
        request = AssetRequest.from_path(asset_path)
    except InvalidAssetRequestError as exc:
        logger.info("Rejected asset request %r: %s", asset_path, exc)
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    logger.debug("Asset request %s/%s", request.container_id, request.relative_path)
    try:
        asset = await run_in_threadpool(resolver.resolve, request.container_id, request.relative_path)
    except InvalidAssetRequestError as exc:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except AssetNotFoundError as exc:
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))
    except StoreUnavailableError as exc:
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Object store unavailable: {request.relative_path}",
            str(exc),
        )
    except AssetReadError as exc:
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Failed to read asset: {request.relative_path}",
            str(exc),
        )

    return Response(content=asset.payload, headers=build_asset_headers(asset))


@router.options("/{asset_path:path}", summary="CORS 预检")
async def asset_preflight(asset_path: str) -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=cors_headers())
