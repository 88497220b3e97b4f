"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pytest

from transform_compiler.engine.soft_exceptions import soft_exception_logger


# Sample transform descriptions

IDENTITY_FLAT = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]

SAMPLE_MATRIX = [float(i) for i in range(1, 17)]

ROTATE_THEN_TRANSLATE = [{"rotateZ": "90deg"}, {"translateX": 10}]

TRANSLATE_THEN_ROTATE = [{"translateX": 10}, {"rotateZ": "90deg"}]

CARD_FLIP = [
    {"perspective": 850},
    {"translateX": 50},
    {"rotateY": "60deg"},
    {"scale": 0.9},
]

LEGACY_PROPS = {"translateX": 10, "translateY": 5, "rotation": "90deg", "scaleX": 2}


# Integer too large for a float
HUGE_INT = 10**400


def apply_to_point(matrix, point: Sequence[float]) -> tuple[float, float, float]:
    """Map a 2D or 3D point through a row-vector matrix, dividing by w."""
    z = point[2] if len(point) > 2 else 0.0
    out = np.array([point[0], point[1], z, 1.0], dtype=np.float64) @ matrix
    return (float(out[0] / out[3]), float(out[1] / out[3]), float(out[2] / out[3]))


@pytest.fixture(autouse=True)
def _reset_soft_exception_listeners():
    yield
    soft_exception_logger.clear_listeners()


@pytest.fixture
def card_flip() -> list[dict]:
    return CARD_FLIP


@pytest.fixture
def legacy_props() -> dict:
    return dict(LEGACY_PROPS)
