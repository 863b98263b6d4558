"""Exception hierarchy for fallible.

These exceptions signal programming mistakes (contract violations), never
domain failures. Domain failures are ordinary ``Failure`` results.
"""

from __future__ import annotations

from typing import ClassVar, Literal

ResultErrorKind = Literal["illegal_instantiation", "illegal_call"]


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is attached."""
        return f"{self.message}. {self.hint}" if self.hint else self.message


class ResultError(FallibleError):
    """A Result contract was violated.

    ``kind`` lets catch-all handlers tell the two violations apart without
    isinstance chains.
    """

    kind: ClassVar[ResultErrorKind]


class IllegalInstantiationError(ResultError):
    """A Result was constructed without a valid variant tag."""

    kind: ClassVar[ResultErrorKind] = "illegal_instantiation"

    def __init__(self, received: object) -> None:
        super().__init__(
            "Result must be constructed as Success or Failure",
            hint="Use make_success() or make_failure()",
        )
        self.received = received


class IllegalCallError(ResultError):
    """An extractor was called on the variant it is not defined for."""

    kind: ClassVar[ResultErrorKind] = "illegal_call"

    def __init__(
        self,
        message: str,
        *,
        method: str,
        variant: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.method = method
        self.variant = variant

    @classmethod
    def for_call(
        cls, method: str, variant: str, *, container: str = "a Result"
    ) -> IllegalCallError:
        """Build the standard "cannot call X on a Result of type Y" error.

        *container* carries its article ("a Result", "an Option").
        """
        return cls(
            f"cannot call {method} on {container} of type {variant}",
            method=method,
            variant=variant,
        )
