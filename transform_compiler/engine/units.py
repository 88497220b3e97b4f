"""Unit normalizer: angle values in mixed units → radians.

Accepted forms:
    1.25        number, already radians
    "90deg"     degrees
    "1.5rad"    radians
    "45"        bare numeric string, radians

Suffixes are case-sensitive. Whitespace around the value is ignored;
whitespace between the number and its suffix is not accepted.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any, Union

from transform_compiler.engine.errors import MalformedAngle

AngleValue = Union[int, float, str]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_DEG = "deg"
_RAD = "rad"


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def to_float(value: Any) -> float | None:
    """Real number (bool excluded) as a float; None if it isn't one or doesn't fit."""
    if not _is_real(value):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def is_number(value: Any) -> bool:
    return to_float(value) is not None


def _parse_numeric(text: str, original: str) -> float:
    if not _NUMBER_RE.fullmatch(text):
        raise MalformedAngle(original, "numeric portion is not a number")
    return float(text)


def normalize_angle(value: AngleValue) -> float:
    """Return ``value`` as a canonical angle in radians.

    Raises MalformedAngle for unparseable strings and for values that are
    neither numbers nor strings.
    """
    if _is_real(value):
        radians = to_float(value)
        if radians is None:
            raise MalformedAngle(value, "number does not fit in a float")
        return radians
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(_DEG):
            return _parse_numeric(text[: -len(_DEG)], value) * math.pi / 180.0
        if text.endswith(_RAD):
            return _parse_numeric(text[: -len(_RAD)], value)
        return _parse_numeric(text, value)
    raise MalformedAngle(value, f"expected number or string, got {type(value).__name__}")
