import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.core.config import Settings, get_settings
from app.core.container import ApplicationContainer
from app.core.logging_config import configure_logging
from app.interfaces.http import create_api_router
from app.modules.assets.headers import EXPOSED_HEADERS

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s %s starting (environment=%s, storage=%s)",
            settings.project_name,
            __version__,
            settings.environment,
            settings.storage_backend,
        )
        yield

    app = FastAPI(
        title=settings.project_name,
        description="WebGL 构建资源只读分发服务",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.container = ApplicationContainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=list(EXPOSED_HEADERS),
    )

    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()
