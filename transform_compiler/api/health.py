"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from transform_compiler import __version__
from transform_compiler.engine.operations import get_registry
from transform_compiler.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    registry = get_registry()
    return HealthResponse(
        status="ok",
        version=__version__,
        operations_supported=registry.count,
        operations={spec.op.value: spec.description for spec in registry.all()},
    )
