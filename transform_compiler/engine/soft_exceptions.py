"""Soft exceptions: non-fatal failures reported instead of raised.

A host that chooses to keep rendering after a failed conversion reports the
error here. Listeners receive ``(category, exception)`` in registration order.
With no listener registered the error is logged.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from transform_compiler.engine.compiler import compile_transform
from transform_compiler.engine.errors import TransformError
from transform_compiler.utils.matrix import identity

logger = logging.getLogger(__name__)

SoftExceptionListener = Callable[[str, BaseException], None]


class Categories:
    """Category strings listeners can branch on."""

    TRANSFORM_CONVERSION = "TransformCompiler:compile"
    LEGACY_TRANSFORM_CONVERSION = "TransformCompiler:compileLegacy"


class SoftExceptionLogger:
    def __init__(self) -> None:
        # Copy-on-write: dispatch iterates a snapshot, mutators swap the list
        self._listeners: tuple[SoftExceptionListener, ...] = ()
        self._lock = threading.Lock()

    def add_listener(self, listener: SoftExceptionListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners = (*self._listeners, listener)

    def remove_listener(self, listener: SoftExceptionListener) -> None:
        with self._lock:
            self._listeners = tuple(x for x in self._listeners if x != listener)

    def clear_listeners(self) -> None:
        with self._lock:
            self._listeners = ()

    @property
    def listeners(self) -> tuple[SoftExceptionListener, ...]:
        return self._listeners

    def log_soft_exception(self, category: str, cause: BaseException) -> None:
        listeners = self._listeners
        if not listeners:
            logger.error("Unhandled soft exception [%s]: %s", category, cause, exc_info=cause)
            return
        for listener in listeners:
            listener(category, cause)


soft_exception_logger = SoftExceptionLogger()


@dataclass
class FallbackResult:
    matrix: NDArray[np.float64]
    error: TransformError | None = None

    @property
    def fallback_applied(self) -> bool:
        return self.error is not None


def compile_transform_or_identity(
    value: Any,
    *,
    compiler: Callable[[Any], NDArray[np.float64]] = compile_transform,
    category: str = Categories.TRANSFORM_CONVERSION,
) -> FallbackResult:
    """Compile ``value``; on a conversion error report it and use identity."""
    try:
        return FallbackResult(matrix=compiler(value))
    except TransformError as e:
        logger.warning("Transform conversion failed, falling back to identity: %s", e)
        soft_exception_logger.log_soft_exception(category, e)
        return FallbackResult(matrix=identity(), error=e)
