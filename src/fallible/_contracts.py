"""Reporting hook for contract violations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fallible._dev_flags import violation_log_level

if TYPE_CHECKING:
    from fallible.errors import ResultError

log = logging.getLogger(__name__)


def violation[E: ResultError](exc: E) -> E:
    """Log *exc* and hand it back so the caller can ``raise violation(...)``."""
    log.log(violation_log_level(), "Contract violation (%s): %s", exc.kind, exc)
    return exc
