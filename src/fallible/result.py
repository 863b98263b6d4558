"""Result type for explicit, exception-free error handling.

A ``Result`` is either a Success carrying a value or a Failure carrying an
error. The variant is an explicit ``Variant`` tag fixed at construction, so
every method dispatches on the tag rather than on subclasses. Domain errors
travel as Failure values; only misuse of the type itself raises.

Example:
    def divide(x: float, y: float) -> Result[float, str]:
        if y == 0:
            return make_failure("cannot divide by zero")
        return make_success(x / y)

    divide(10, 2).map(round).unwrap()  # 5
    divide(1, 0).unwrap_or(-1)  # -1
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING, Any, cast

from fallible._contracts import violation
from fallible.errors import IllegalCallError, IllegalInstantiationError
from fallible.option import Option, nothing, some

if TYPE_CHECKING:
    from collections.abc import Callable


# Default for omitted constructor arguments; never a valid tag or payload.
_UNTAGGED: Any = object()


class Variant(enum.Enum):
    """Discriminant for the two Result variants."""

    SUCCESS = "Success"
    FAILURE = "Failure"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Result[T, E]:
    """An immutable Success(value) or Failure(error).

    Build instances with ``make_success``/``make_failure`` (or the
    ``Result.success``/``Result.failure`` classmethods). Supports
    structural pattern matching::

        match result:
            case Result(Variant.SUCCESS, value): ...
            case Result(Variant.FAILURE, error): ...
    """

    variant: Variant = _UNTAGGED
    payload: T | E = _UNTAGGED

    def __post_init__(self) -> None:
        """Reject a missing payload or any tag outside the closed variant set."""
        if not isinstance(self.variant, Variant) or self.payload is _UNTAGGED:
            received = None if self.variant is _UNTAGGED else self.variant
            raise violation(IllegalInstantiationError(received))

    @classmethod
    def success(cls, value: T) -> Result[T, Any]:
        return cls(Variant.SUCCESS, value)

    @classmethod
    def failure(cls, error: E) -> Result[Any, E]:
        return cls(Variant.FAILURE, error)

    def __repr__(self) -> str:
        return f"{self.variant.value}({self.payload!r})"

    def __bool__(self) -> bool:
        raise TypeError("Result has no truth value; use is_success()/is_failure()")

    # Unchecked payload views; callers must have matched the tag first.
    @property
    def _value(self) -> T:
        return cast("T", self.payload)

    @property
    def _error(self) -> E:
        return cast("E", self.payload)

    # --- Inspection ---

    def is_success(self) -> bool:
        return self.variant is Variant.SUCCESS

    def is_failure(self) -> bool:
        return self.variant is Variant.FAILURE

    # --- Option conversion ---

    def success_option(self) -> Option[T]:
        """Return Some(value) for a Success, Nothing otherwise."""
        match self.variant:
            case Variant.SUCCESS:
                return some(self._value)
            case Variant.FAILURE:
                return nothing()

    def failure_option(self) -> Option[E]:
        """Return Some(error) for a Failure, Nothing otherwise."""
        match self.variant:
            case Variant.SUCCESS:
                return nothing()
            case Variant.FAILURE:
                return some(self._error)

    # --- Combinators ---

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return *other* itself if Success, else a new Failure with this error."""
        match self.variant:
            case Variant.SUCCESS:
                return other
            case Variant.FAILURE:
                return Result.failure(self._error)

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain *fn* on the value; Failure short-circuits without calling it."""
        match self.variant:
            case Variant.SUCCESS:
                return fn(self._value)
            case Variant.FAILURE:
                return Result.failure(self._error)

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return a new Success with this value, or *other* itself if Failure."""
        match self.variant:
            case Variant.SUCCESS:
                return Result.success(self._value)
            case Variant.FAILURE:
                return other

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from a Failure with *fn*; Success passes through."""
        match self.variant:
            case Variant.SUCCESS:
                return Result.success(self._value)
            case Variant.FAILURE:
                return fn(self._error)

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value, re-wrapping a Failure untouched."""
        match self.variant:
            case Variant.SUCCESS:
                return Result.success(fn(self._value))
            case Variant.FAILURE:
                return Result.failure(self._error)

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the error value, re-wrapping a Success untouched."""
        match self.variant:
            case Variant.SUCCESS:
                return Result.success(self._value)
            case Variant.FAILURE:
                return Result.failure(fn(self._error))

    # --- Extraction ---

    def expect(self, message: str) -> T:
        if self.variant is Variant.SUCCESS:
            return self._value
        raise violation(
            IllegalCallError(message, method="expect", variant=self.variant.value)
        )

    def expect_err(self, message: str) -> E:
        if self.variant is Variant.FAILURE:
            return self._error
        raise violation(
            IllegalCallError(message, method="expect_err", variant=self.variant.value)
        )

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            IllegalCallError: If this is a Failure.
        """
        if self.variant is Variant.SUCCESS:
            return self._value
        raise violation(IllegalCallError.for_call("unwrap", self.variant.value))

    def unwrap_err(self) -> E:
        """Return the error value.

        Raises:
            IllegalCallError: If this is a Success.
        """
        if self.variant is Variant.FAILURE:
            return self._error
        raise violation(IllegalCallError.for_call("unwrap_err", self.variant.value))

    def unwrap_or(self, fallback: T) -> T:
        if self.variant is Variant.SUCCESS:
            return self._value
        return fallback

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        if self.variant is Variant.SUCCESS:
            return self._value
        return fn(self._error)


def make_success[T](value: T) -> Result[T, Any]:
    """Construct a Success carrying *value*."""
    return Result(Variant.SUCCESS, value)


def make_failure[E](error: E) -> Result[Any, E]:
    """Construct a Failure carrying *error*."""
    return Result(Variant.FAILURE, error)
