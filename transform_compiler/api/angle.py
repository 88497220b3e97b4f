"""POST /api/angle: angle value → radians."""

from __future__ import annotations

from fastapi import APIRouter

from transform_compiler.engine.units import normalize_angle
from transform_compiler.models.requests import AngleRequest
from transform_compiler.models.responses import AngleResponse

router = APIRouter()


@router.post("/angle", response_model=AngleResponse)
async def angle(req: AngleRequest) -> AngleResponse:
    return AngleResponse(radians=normalize_angle(req.value))
