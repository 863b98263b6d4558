"""Unit tests for the contract-violation exception hierarchy."""

from __future__ import annotations

import pytest

from fallible import (
    FallibleError,
    IllegalCallError,
    IllegalInstantiationError,
    ResultError,
    make_failure,
    make_success,
)

pytestmark = pytest.mark.unit


def test_fallible_error_hint_is_appended() -> None:
    err = FallibleError("boom", hint="do this")

    assert err.message == "boom"
    assert err.hint == "do this"
    assert str(err) == "boom. do this"


def test_fallible_error_without_hint() -> None:
    err = FallibleError("boom")
    assert err.hint is None
    assert str(err) == "boom"


def test_subclass_hierarchy() -> None:
    """Both violation kinds are catchable as ResultError and FallibleError."""
    for cls in (IllegalInstantiationError, IllegalCallError):
        assert issubclass(cls, ResultError)
        assert issubclass(cls, FallibleError)
        assert issubclass(cls, Exception)


def test_kinds_discriminate_violations() -> None:
    assert IllegalInstantiationError.kind == "illegal_instantiation"
    assert IllegalCallError.kind == "illegal_call"


def test_catch_all_handler_can_discriminate() -> None:
    kinds = []
    for trigger in (
        lambda: make_failure("e").unwrap(),
        lambda: make_success("v").unwrap_err(),
    ):
        try:
            trigger()
        except ResultError as exc:
            kinds.append(exc.kind)
    assert kinds == ["illegal_call", "illegal_call"]


def test_illegal_call_for_call_message() -> None:
    err = IllegalCallError.for_call("unwrap", "Failure")

    assert str(err) == "cannot call unwrap on a Result of type Failure"
    assert err.method == "unwrap"
    assert err.variant == "Failure"
    assert err.hint is None


def test_illegal_instantiation_carries_hint_and_received_tag() -> None:
    err = IllegalInstantiationError("bogus")

    assert err.received == "bogus"
    assert err.hint is not None
    assert "make_success" in str(err)


def test_for_call_uses_the_container_article() -> None:
    assert str(IllegalCallError.for_call("unwrap", "Nothing", container="an Option")) == (
        "cannot call unwrap on an Option of type Nothing"
    )
