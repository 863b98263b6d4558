"""Option: a single value or nothing.

Kept deliberately small: Results only need to construct Options and callers
only need to inspect and unwrap them.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from fallible._contracts import violation
from fallible.errors import IllegalCallError


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Option[T]:
    """A populated (``Some``) or empty (``Nothing``) container."""

    present: bool
    value: T | None = None

    def __post_init__(self) -> None:
        if not self.present and self.value is not None:
            raise ValueError("an empty Option cannot carry a value")

    def __repr__(self) -> str:
        return f"Some({self.value!r})" if self.present else "Nothing"

    def is_some(self) -> bool:
        return self.present

    def is_nothing(self) -> bool:
        return not self.present

    def unwrap(self) -> T:
        """Return the contained value, raising IllegalCallError when empty."""
        if not self.present:
            raise violation(
                IllegalCallError.for_call("unwrap", "Nothing", container="an Option")
            )
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, fallback: T) -> T:
        if self.present:
            return self.value  # type: ignore[return-value]
        return fallback


_NOTHING: Option[Any] = Option(present=False)


def some[T](value: T) -> Option[T]:
    """Wrap *value* in a populated Option."""
    return Option(present=True, value=value)


def nothing() -> Option[Any]:
    """Return the empty Option."""
    return _NOTHING
