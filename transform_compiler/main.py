"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from transform_compiler import __version__
from transform_compiler.config import settings
from transform_compiler.engine.errors import TransformError
from transform_compiler.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.transform_compiler_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _transform_error_handler(request: Request, exc: TransformError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    body = ErrorResponse(error=exc.kind, message=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Transform Compiler",
        description="Declarative transform descriptions → composed 4x4 matrices",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TransformError, _transform_error_handler)

    from transform_compiler.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
