"""Leaf-node 4x4 matrix helpers. No engine imports.

Matrices use the row-vector convention: a point is the homogeneous row
``[x, y, z, 1]`` and maps as ``p @ M``. Translation lives in the last row,
perspective in ``M[2, 3]``. Flattened row-major this is the ``matrix3d()``
element order.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


def identity() -> NDArray[np.float64]:
    """Fresh 4x4 identity. Callers may mutate the result."""
    return np.eye(4, dtype=np.float64)


def from_flat(values: Sequence[float]) -> NDArray[np.float64]:
    """16 numbers (row-major) → 4x4 matrix."""
    return np.asarray(values, dtype=np.float64).reshape(4, 4)


def to_flat(matrix: NDArray[np.float64]) -> list[float]:
    """4x4 matrix → 16 floats, row-major."""
    return [float(v) for v in np.asarray(matrix, dtype=np.float64).reshape(16)]


def is_identity(matrix: NDArray[np.float64], atol: float = 1e-9) -> bool:
    """True when every entry is within ``atol`` of the identity."""
    return bool(np.allclose(matrix, np.eye(4), rtol=0.0, atol=atol))

