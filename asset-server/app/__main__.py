"""Run the asset server with uvicorn using the configured host and port."""

import uvicorn

from app.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
