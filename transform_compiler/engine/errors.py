"""Conversion errors. All are local, synchronous and deterministic."""

from __future__ import annotations

from typing import Any


def describe(value: Any, limit: int = 80) -> str:
    """repr() for error messages, shortened; huge ints can't always be printed."""
    try:
        text = repr(value)
    except ValueError:
        return f"<{type(value).__name__} too large to display>"
    return text if len(text) <= limit else text[: limit - 3] + "..."


class TransformError(ValueError):
    """Base class for every failure the compiler can raise."""

    kind = "TransformError"


class MalformedAngle(TransformError):
    """An angle operand could not be parsed."""

    kind = "MalformedAngle"

    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Malformed angle: {describe(value)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidTransformInput(TransformError):
    """Top-level input or a descriptor has the wrong structure."""

    kind = "InvalidTransformInput"


class UnsupportedTransformOperation(TransformError):
    """Descriptor key outside the recognized operation set."""

    kind = "UnsupportedTransformOperation"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unsupported transform operation: {key!r}")
