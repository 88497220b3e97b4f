"""Operation registry: every transform operation maps to one elementary-matrix builder.

Usage:
    @operation(TransformOp.SKEW_X, description="Shear along x")
    def skew_x(operand: Any) -> NDArray[np.float64]:
        m = identity()
        m[1, 0] = math.tan(normalize_angle(operand))
        return m

The key set is closed: adding an operation = one enum member + one builder.
The module refuses to import if any member is left without a builder.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from transform_compiler.engine.errors import InvalidTransformInput, UnsupportedTransformOperation, describe
from transform_compiler.engine.units import is_number, normalize_angle, to_float
from transform_compiler.utils.matrix import from_flat, identity

logger = logging.getLogger(__name__)

Builder = Callable[[Any], NDArray[np.float64]]


class TransformOp(str, enum.Enum):
    MATRIX = "matrix"
    PERSPECTIVE = "perspective"
    ROTATE = "rotate"
    ROTATE_X = "rotateX"
    ROTATE_Y = "rotateY"
    ROTATE_Z = "rotateZ"
    SCALE = "scale"
    SCALE_X = "scaleX"
    SCALE_Y = "scaleY"
    SCALE_Z = "scaleZ"
    TRANSLATE = "translate"
    TRANSLATE_X = "translateX"
    TRANSLATE_Y = "translateY"
    TRANSLATE_Z = "translateZ"
    SKEW_X = "skewX"
    SKEW_Y = "skewY"

    @classmethod
    def from_key(cls, key: Any) -> TransformOp:
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedTransformOperation(str(key)) from None


@dataclass
class OperationSpec:
    op: TransformOp
    build: Builder
    description: str = ""


class OperationRegistry:
    """Registry of elementary-matrix builders keyed by operation."""

    def __init__(self) -> None:
        self._specs: dict[TransformOp, OperationSpec] = {}

    def register(self, spec: OperationSpec) -> None:
        if spec.op in self._specs:
            raise ValueError(f"Duplicate builder for operation: {spec.op.value}")
        self._specs[spec.op] = spec
        logger.debug("Registered operation %s", spec.op.value)

    def get(self, op: TransformOp) -> OperationSpec:
        return self._specs[op]

    def all(self) -> list[OperationSpec]:
        return [self._specs[op] for op in TransformOp if op in self._specs]

    def missing(self) -> set[TransformOp]:
        return {op for op in TransformOp if op not in self._specs}

    @property
    def count(self) -> int:
        return len(self._specs)


# Module-level registry, filled at import time and read-only afterwards
_registry = OperationRegistry()


def get_registry() -> OperationRegistry:
    return _registry


def operation(op: TransformOp, *, description: str = ""):
    """Decorator to register an elementary-matrix builder."""

    def decorator(fn: Builder) -> Builder:
        _registry.register(OperationSpec(op=op, build=fn, description=description))
        return fn

    return decorator


# ---------------------------------------------------------------------------
# Operand extraction
# ---------------------------------------------------------------------------


def _number(op: TransformOp, value: Any) -> float:
    number = to_float(value)
    if number is None:
        raise InvalidTransformInput(f"{op.value} expects a number that fits in a float, got {describe(value)}")
    return number


def _numbers(op: TransformOp, value: Any, lengths: tuple[int, ...]) -> list[float]:
    if not isinstance(value, (list, tuple)) or len(value) not in lengths:
        expected = " or ".join(str(n) for n in lengths)
        raise InvalidTransformInput(f"{op.value} expects a list of {expected} numbers, got {describe(value)}")
    return [_number(op, v) for v in value]


# ---------------------------------------------------------------------------
# Elementary matrices (row-vector convention, see utils.matrix)
# ---------------------------------------------------------------------------


def _rotation_z(theta: float) -> NDArray[np.float64]:
    c, s = math.cos(theta), math.sin(theta)
    m = identity()
    m[0, 0], m[0, 1] = c, s
    m[1, 0], m[1, 1] = -s, c
    return m


def _scaling(sx: float, sy: float, sz: float) -> NDArray[np.float64]:
    return np.diag([sx, sy, sz, 1.0])


def _translation(tx: float, ty: float, tz: float) -> NDArray[np.float64]:
    m = identity()
    m[3, :3] = (tx, ty, tz)
    return m


@operation(TransformOp.MATRIX, description="Raw 4x4 matrix, 16 numbers row-major")
def matrix(operand: Any) -> NDArray[np.float64]:
    return from_flat(_numbers(TransformOp.MATRIX, operand, (16,)))


@operation(TransformOp.PERSPECTIVE, description="Perspective with viewer distance d")
def perspective(operand: Any) -> NDArray[np.float64]:
    d = _number(TransformOp.PERSPECTIVE, operand)
    m = identity()
    # d == 0 gives -inf; downstream tolerates degenerate perspective
    with np.errstate(divide="ignore"):
        m[2, 3] = np.divide(-1.0, d)
    return m


@operation(TransformOp.ROTATE, description="Rotation about z (alias of rotateZ)")
def rotate(operand: Any) -> NDArray[np.float64]:
    return _rotation_z(normalize_angle(operand))


@operation(TransformOp.ROTATE_Z, description="Rotation about z")
def rotate_z(operand: Any) -> NDArray[np.float64]:
    return _rotation_z(normalize_angle(operand))


@operation(TransformOp.ROTATE_X, description="Rotation about x")
def rotate_x(operand: Any) -> NDArray[np.float64]:
    theta = normalize_angle(operand)
    c, s = math.cos(theta), math.sin(theta)
    m = identity()
    m[1, 1], m[1, 2] = c, s
    m[2, 1], m[2, 2] = -s, c
    return m


@operation(TransformOp.ROTATE_Y, description="Rotation about y")
def rotate_y(operand: Any) -> NDArray[np.float64]:
    theta = normalize_angle(operand)
    c, s = math.cos(theta), math.sin(theta)
    m = identity()
    m[0, 0], m[0, 2] = c, -s
    m[2, 0], m[2, 2] = s, c
    return m


_SCALE_AXES = ("x", "y", "z")


@operation(TransformOp.SCALE, description="Uniform scale, or per-axis {x, y, z}")
def scale(operand: Any) -> NDArray[np.float64]:
    if is_number(operand):
        s = _number(TransformOp.SCALE, operand)
        return _scaling(s, s, s)
    if isinstance(operand, Mapping):
        unknown = [k for k in operand if k not in _SCALE_AXES]
        if unknown:
            raise InvalidTransformInput(f"scale got unknown axis keys: {unknown}")
        sx, sy, sz = (_number(TransformOp.SCALE, operand.get(axis, 1.0)) for axis in _SCALE_AXES)
        return _scaling(sx, sy, sz)
    raise InvalidTransformInput(f"scale expects a number or an {{x, y, z}} mapping, got {describe(operand)}")


@operation(TransformOp.SCALE_X, description="Scale along x")
def scale_x(operand: Any) -> NDArray[np.float64]:
    return _scaling(_number(TransformOp.SCALE_X, operand), 1.0, 1.0)


@operation(TransformOp.SCALE_Y, description="Scale along y")
def scale_y(operand: Any) -> NDArray[np.float64]:
    return _scaling(1.0, _number(TransformOp.SCALE_Y, operand), 1.0)


@operation(TransformOp.SCALE_Z, description="Scale along z")
def scale_z(operand: Any) -> NDArray[np.float64]:
    return _scaling(1.0, 1.0, _number(TransformOp.SCALE_Z, operand))


@operation(TransformOp.TRANSLATE, description="Translation by [x, y] or [x, y, z]")
def translate(operand: Any) -> NDArray[np.float64]:
    values = _numbers(TransformOp.TRANSLATE, operand, (2, 3))
    tz = values[2] if len(values) > 2 else 0.0
    return _translation(values[0], values[1], tz)


@operation(TransformOp.TRANSLATE_X, description="Translation along x")
def translate_x(operand: Any) -> NDArray[np.float64]:
    return _translation(_number(TransformOp.TRANSLATE_X, operand), 0.0, 0.0)


@operation(TransformOp.TRANSLATE_Y, description="Translation along y")
def translate_y(operand: Any) -> NDArray[np.float64]:
    return _translation(0.0, _number(TransformOp.TRANSLATE_Y, operand), 0.0)


@operation(TransformOp.TRANSLATE_Z, description="Translation along z")
def translate_z(operand: Any) -> NDArray[np.float64]:
    return _translation(0.0, 0.0, _number(TransformOp.TRANSLATE_Z, operand))


@operation(TransformOp.SKEW_X, description="Shear along x by tan(angle)")
def skew_x(operand: Any) -> NDArray[np.float64]:
    m = identity()
    m[1, 0] = math.tan(normalize_angle(operand))
    return m


@operation(TransformOp.SKEW_Y, description="Shear along y by tan(angle)")
def skew_y(operand: Any) -> NDArray[np.float64]:
    m = identity()
    m[0, 1] = math.tan(normalize_angle(operand))
    return m


_missing = _registry.missing()
if _missing:
    raise RuntimeError(f"Operations without a builder: {sorted(op.value for op in _missing)}")
