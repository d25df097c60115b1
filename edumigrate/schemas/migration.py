# edumigrate/schemas/migration.py

from typing import Literal, Optional
from pydantic import BaseModel


class MigrationResult(BaseModel):
    id: str
    name: str
    slug: str = ""
    status: Literal["success", "error"]
    error: Optional[str] = None


class MigrationSummary(BaseModel):
    success: bool = True
    message: str
    updated: int = 0
    errors: int = 0
    results: list[MigrationResult] = []
