"""POST /api/compile: transform description → 4x4 matrix."""

from __future__ import annotations

import math
from typing import Any, Callable

import numpy as np
from fastapi import APIRouter, Depends
from numpy.typing import NDArray

from transform_compiler.config import Settings
from transform_compiler.dependencies import get_compiler_config, get_settings
from transform_compiler.engine.compiler import compile_transform
from transform_compiler.engine.config import CompilerConfig
from transform_compiler.engine.legacy import compile_legacy_transform
from transform_compiler.engine.soft_exceptions import Categories, compile_transform_or_identity
from transform_compiler.models.requests import CompileRequest, LegacyCompileRequest
from transform_compiler.models.responses import MatrixResponse
from transform_compiler.utils.matrix import is_identity, to_flat

router = APIRouter()


def _serialize(matrix: NDArray[np.float64]) -> list[float | None]:
    # JSON has no infinity; perspective(0) yields -inf
    return [v if math.isfinite(v) else None for v in to_flat(matrix)]


def _run(
    compiler: Callable[[Any], NDArray[np.float64]],
    value: Any,
    fallback: bool,
    category: str,
    config: CompilerConfig,
) -> MatrixResponse:
    if not fallback:
        # Errors propagate to the TransformError handler
        matrix = compiler(value)
        return MatrixResponse(
            matrix=_serialize(matrix),
            is_identity=is_identity(matrix, atol=config.identity_atol),
        )

    result = compile_transform_or_identity(value, compiler=compiler, category=category)
    return MatrixResponse(
        matrix=_serialize(result.matrix),
        is_identity=is_identity(result.matrix, atol=config.identity_atol),
        fallback_applied=result.fallback_applied,
        error=str(result.error) if result.error else None,
    )


@router.post("/compile", response_model=MatrixResponse)
async def compile_endpoint(
    req: CompileRequest,
    settings: Settings = Depends(get_settings),
    config: CompilerConfig = Depends(get_compiler_config),
) -> MatrixResponse:
    fallback = settings.fallback_to_identity if req.fallback_to_identity is None else req.fallback_to_identity
    return _run(compile_transform, req.transform, fallback, Categories.TRANSFORM_CONVERSION, config)


@router.post("/compile/legacy", response_model=MatrixResponse)
async def compile_legacy_endpoint(
    req: LegacyCompileRequest,
    settings: Settings = Depends(get_settings),
    config: CompilerConfig = Depends(get_compiler_config),
) -> MatrixResponse:
    fallback = settings.fallback_to_identity if req.fallback_to_identity is None else req.fallback_to_identity
    return _run(compile_legacy_transform, req.props, fallback, Categories.LEGACY_TRANSFORM_CONVERSION, config)
