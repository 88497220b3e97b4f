"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from transform_compiler.api import angle, convert, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(convert.router)
api_router.include_router(angle.router)
