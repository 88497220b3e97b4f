"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    operations_supported: int = 0
    # Operation key → description
    operations: dict[str, str] = Field(default_factory=dict)


class MatrixResponse(BaseModel):
    # 16 entries, row-major; None where the entry is not finite
    matrix: list[float | None]
    is_identity: bool = False
    fallback_applied: bool = False
    error: str | None = None


class AngleResponse(BaseModel):
    radians: float


class ErrorResponse(BaseModel):
    error: str
    message: str
