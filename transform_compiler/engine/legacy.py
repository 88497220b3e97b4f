"""Legacy per-axis transform props → operation list.

Before transform lists, views carried one style key per axis:

    {"translateX": 10, "translateY": 5, "rotation": "45deg", "scaleX": 2}

or a raw ``transformMatrix``. The two forms are exclusive. Per-axis keys are
applied in a fixed order: translate, then rotate, then scale (so the point is
scaled first). ``None`` values mean the prop is unset.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import NDArray

from transform_compiler.engine.compiler import compile_transform
from transform_compiler.engine.errors import InvalidTransformInput, UnsupportedTransformOperation

LEGACY_MATRIX_KEY = "transformMatrix"
LEGACY_AXIS_KEYS = ("translateX", "translateY", "rotation", "scaleX", "scaleY")


def legacy_to_operations(props: Any) -> list[dict[str, Any]]:
    if not isinstance(props, Mapping):
        raise InvalidTransformInput(
            f"Legacy transform props must be a mapping, got {type(props).__name__}"
        )
    present = {k: v for k, v in props.items() if v is not None}

    for key in present:
        if key != LEGACY_MATRIX_KEY and key not in LEGACY_AXIS_KEYS:
            raise UnsupportedTransformOperation(str(key))

    if LEGACY_MATRIX_KEY in present:
        if len(present) > 1:
            raise InvalidTransformInput(
                f"{LEGACY_MATRIX_KEY} cannot be combined with per-axis transform props"
            )
        return [{"matrix": present[LEGACY_MATRIX_KEY]}]

    ops: list[dict[str, Any]] = []
    if "translateX" in present or "translateY" in present:
        ops.append({"translate": [present.get("translateX", 0.0), present.get("translateY", 0.0)]})
    if "rotation" in present:
        ops.append({"rotate": present["rotation"]})
    if "scaleX" in present:
        ops.append({"scaleX": present["scaleX"]})
    if "scaleY" in present:
        ops.append({"scaleY": present["scaleY"]})
    return ops


def compile_legacy_transform(props: Any) -> NDArray[np.float64]:
    """Compile legacy per-axis props into a 4x4 matrix."""
    return compile_transform(legacy_to_operations(props))
