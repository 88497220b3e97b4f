"""Transform compiler: generic transform description → composed 4x4 matrix.

Two input shapes:
    [m0, ..., m15]                         matrix literal, returned as-is
    [{"rotateZ": "90deg"}, {"translateX": 10}, ...]   operation list

Composition follows CSS transform-list semantics: each operation acts in the
local frame left by the ones before it, so with row vectors the accumulator
grows as ``elementary @ accumulator``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import NDArray

from transform_compiler.engine.errors import InvalidTransformInput
from transform_compiler.engine.operations import TransformOp, get_registry
from transform_compiler.engine.units import is_number, to_float
from transform_compiler.utils.matrix import from_flat, identity

logger = logging.getLogger(__name__)

_MATRIX_SIZE = 16


def is_matrix_literal(value: Any) -> bool:
    """A flat sequence of exactly 16 numbers, each representable as a float."""
    return (
        isinstance(value, (list, tuple))
        and len(value) == _MATRIX_SIZE
        and all(is_number(v) for v in value)
    )


def split_descriptor(descriptor: Any) -> tuple[TransformOp, Any]:
    """Return the (operation, operand) pair of a single-key descriptor."""
    if not isinstance(descriptor, Mapping):
        raise InvalidTransformInput(
            f"Transform operation must be a mapping, got {type(descriptor).__name__}"
        )
    if len(descriptor) != 1:
        raise InvalidTransformInput(
            f"Transform operation must have exactly one key, got {sorted(map(str, descriptor))}"
        )
    ((key, operand),) = descriptor.items()
    return TransformOp.from_key(key), operand


def compile_transform(value: Any) -> NDArray[np.float64]:
    """Compose a transform description into a single 4x4 matrix.

    Raises InvalidTransformInput, UnsupportedTransformOperation or
    MalformedAngle. Nothing is returned on failure; the caller decides
    whether to fall back to identity.
    """
    if is_matrix_literal(value):
        return from_flat([to_float(v) for v in value])

    if not isinstance(value, (list, tuple)):
        raise InvalidTransformInput(
            f"Expected a list of transform operations or 16 numbers, got {type(value).__name__}"
        )

    registry = get_registry()
    accumulator = identity()
    for index, descriptor in enumerate(value):
        op, operand = split_descriptor(descriptor)
        elementary = registry.get(op).build(operand)
        accumulator = elementary @ accumulator
        logger.debug("  [%d] %s %r composed", index, op.value, operand)

    return accumulator
