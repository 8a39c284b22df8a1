"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class S3Settings(BaseModel):
    """Connection options for an S3 compatible object store.

    Each container id maps to the bucket ``<bucket_prefix><container id>``.
    Credentials come from the regular boto3 chain (environment, profile, role).
    """

    endpoint_url: Optional[str] = None
    region: Optional[str] = None
    bucket_prefix: str = ""
    key_prefix: str = ""
    path_style: bool = False
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    max_attempts: int = Field(default=1, ge=1)


class StorageSettings(BaseModel):
    backend: Literal["local", "s3"] = "local"
    local_root: Path = Field(default=Path("storage/containers"))
    s3: S3Settings = S3Settings()


class CorsSettings(BaseModel):
    allow_origins: list[str] = ["*"]


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "WebGL Asset Server"
    api_prefix: str = "/api/blob"

    server: ServerSettings = ServerSettings()
    storage: StorageSettings = StorageSettings()
    cors: CorsSettings = CorsSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def storage_backend(self) -> str:
        return self.storage.backend

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else self.logging.level.upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
