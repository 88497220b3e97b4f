"""Tests for legacy per-axis transform props."""

import numpy as np
import pytest

from transform_compiler.engine.compiler import compile_transform
from transform_compiler.engine.errors import InvalidTransformInput, UnsupportedTransformOperation
from transform_compiler.engine.legacy import compile_legacy_transform, legacy_to_operations
from transform_compiler.utils.matrix import to_flat
from tests.conftest import IDENTITY_FLAT, SAMPLE_MATRIX, apply_to_point


def test_operation_order_is_translate_rotate_scale(legacy_props):
    assert legacy_to_operations(legacy_props) == [
        {"translate": [10, 5]},
        {"rotate": "90deg"},
        {"scaleX": 2},
    ]


def test_point_is_scaled_then_rotated_then_translated(legacy_props):
    m = compile_legacy_transform(legacy_props)
    # (1, 0) → scale (2, 0) → rotate (0, 2) → translate (10, 7)
    assert apply_to_point(m, (1.0, 0.0)) == pytest.approx((10.0, 7.0, 0.0), abs=1e-9)


def test_missing_translate_axis_defaults_to_zero():
    assert legacy_to_operations({"translateY": 3}) == [{"translate": [0.0, 3]}]


def test_matches_equivalent_operation_list():
    props = {"rotation": 0.5, "scaleY": 3}
    assert np.array_equal(
        compile_legacy_transform(props),
        compile_transform([{"rotate": 0.5}, {"scaleY": 3}]),
    )


def test_empty_props_is_identity():
    assert to_flat(compile_legacy_transform({})) == IDENTITY_FLAT


def test_none_values_are_unset():
    assert to_flat(compile_legacy_transform({"translateX": None, "rotation": None})) == IDENTITY_FLAT


def test_transform_matrix():
    assert to_flat(compile_legacy_transform({"transformMatrix": SAMPLE_MATRIX})) == SAMPLE_MATRIX


def test_transform_matrix_is_exclusive():
    with pytest.raises(InvalidTransformInput):
        compile_legacy_transform({"transformMatrix": SAMPLE_MATRIX, "translateX": 1})


def test_unknown_prop():
    with pytest.raises(UnsupportedTransformOperation) as exc_info:
        compile_legacy_transform({"opacity": 1})
    assert exc_info.value.key == "opacity"


@pytest.mark.parametrize("props", [[{"translateX": 1}], "translateX", None])
def test_not_a_mapping(props):
    with pytest.raises(InvalidTransformInput):
        compile_legacy_transform(props)
