"""Tests for soft exception reporting and the identity fallback."""

import logging

from transform_compiler.engine.errors import MalformedAngle, UnsupportedTransformOperation
from transform_compiler.engine.legacy import compile_legacy_transform
from transform_compiler.engine.soft_exceptions import (
    Categories,
    SoftExceptionLogger,
    compile_transform_or_identity,
    soft_exception_logger,
)
from transform_compiler.utils.matrix import to_flat
from tests.conftest import HUGE_INT, IDENTITY_FLAT, apply_to_point


def test_listeners_called_in_registration_order():
    log = SoftExceptionLogger()
    calls = []
    log.add_listener(lambda cat, e: calls.append(("first", cat)))
    log.add_listener(lambda cat, e: calls.append(("second", cat)))
    log.log_soft_exception("Cat", RuntimeError("boom"))
    assert calls == [("first", "Cat"), ("second", "Cat")]


def test_add_listener_is_idempotent():
    log = SoftExceptionLogger()
    calls = []

    def listener(cat, e):
        calls.append(cat)

    log.add_listener(listener)
    log.add_listener(listener)
    assert len(log.listeners) == 1
    log.log_soft_exception("Cat", RuntimeError("boom"))
    assert calls == ["Cat"]


def test_remove_and_clear():
    log = SoftExceptionLogger()

    def a(cat, e):
        pass

    def b(cat, e):
        pass

    log.add_listener(a)
    log.add_listener(b)
    log.remove_listener(a)
    assert log.listeners == (b,)
    log.clear_listeners()
    assert log.listeners == ()


def test_logs_when_no_listener(caplog):
    log = SoftExceptionLogger()
    with caplog.at_level(logging.ERROR, logger="transform_compiler.engine.soft_exceptions"):
        log.log_soft_exception("Cat", RuntimeError("boom"))
    assert "Unhandled soft exception [Cat]" in caplog.text



def test_fallback_not_applied_on_success():
    result = compile_transform_or_identity([{"translateX": 3}])
    assert not result.fallback_applied
    assert result.error is None
    assert apply_to_point(result.matrix, (0.0, 0.0)) == (3.0, 0.0, 0.0)


def test_fallback_reports_and_returns_identity():
    seen = []
    soft_exception_logger.add_listener(lambda cat, e: seen.append((cat, e)))
    result = compile_transform_or_identity([{"translateX": 3}, {"bogus": 1}])
    assert result.fallback_applied
    assert isinstance(result.error, UnsupportedTransformOperation)
    assert to_flat(result.matrix) == IDENTITY_FLAT
    assert seen == [(Categories.TRANSFORM_CONVERSION, result.error)]


def test_fallback_with_legacy_compiler():
    seen = []
    soft_exception_logger.add_listener(lambda cat, e: seen.append(cat))
    result = compile_transform_or_identity(
        {"rotation": "abcdeg"},
        compiler=compile_legacy_transform,
        category=Categories.LEGACY_TRANSFORM_CONVERSION,
    )
    assert isinstance(result.error, MalformedAngle)
    assert seen == [Categories.LEGACY_TRANSFORM_CONVERSION]


def test_fallback_covers_int_too_large_for_float():
    result = compile_transform_or_identity([{"translateX": HUGE_INT}])
    assert result.fallback_applied
    assert to_flat(result.matrix) == IDENTITY_FLAT
