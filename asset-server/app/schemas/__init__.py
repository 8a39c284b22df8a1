"""Pydantic schemas used across the project."""
from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class BuildFileInfo(BaseModel):
    logical_path: str
    found: bool
    physical_path: Optional[str] = None
    compressed: bool = False


class BuildReport(BaseModel):
    container_id: str
    build_id: str
    complete: bool
    files: list[BuildFileInfo]
