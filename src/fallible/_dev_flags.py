"""Internal helpers for development-time feature flags.

Centralizes how opt-in environment toggles are read so semantics stay
consistent across modules and tests can flip them with ``monkeypatch``.
"""

from __future__ import annotations

import logging
import os

__all__ = ["dev_log_violations_enabled", "violation_log_level"]


def dev_log_violations_enabled(*, override: bool | None = None) -> bool:
    """Return True when contract violations should be logged loudly.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``FALLIBLE_LOG_VIOLATIONS`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("FALLIBLE_LOG_VIOLATIONS") == "1"


def violation_log_level(*, override: bool | None = None) -> int:
    """Return the logging level used for contract violations."""
    if dev_log_violations_enabled(override=override):
        return logging.WARNING
    return logging.DEBUG
