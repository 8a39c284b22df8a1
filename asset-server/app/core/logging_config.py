"""Process wide logging setup."""

from __future__ import annotations

import logging

from app.core.config import Settings

# pinned at WARNING regardless of the app level
_NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "s3transfer")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.logging.format)
    logging.getLogger("app").setLevel(settings.log_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure_logging"]
