"""Transform compiler engine."""

from transform_compiler.engine.compiler import compile_transform
from transform_compiler.engine.errors import (
    InvalidTransformInput,
    MalformedAngle,
    TransformError,
    UnsupportedTransformOperation,
)
from transform_compiler.engine.legacy import compile_legacy_transform
from transform_compiler.engine.operations import TransformOp, get_registry
from transform_compiler.engine.soft_exceptions import compile_transform_or_identity, soft_exception_logger
from transform_compiler.engine.units import normalize_angle

__all__ = [
    "compile_transform",
    "compile_legacy_transform",
    "compile_transform_or_identity",
    "normalize_angle",
    "TransformOp",
    "get_registry",
    "soft_exception_logger",
    "TransformError",
    "MalformedAngle",
    "InvalidTransformInput",
    "UnsupportedTransformOperation",
]
