"""fallible: explicit success/failure values for Python.

Public API:
    - make_success() / make_failure(): construct Results
    - Result, Variant: the Result type and its discriminant
    - some() / nothing(), Option: the Option container Results convert to
    - attempt() / safe(): capture raised exceptions as Failures
    - FallibleError and subclasses: contract-violation exceptions
"""

from __future__ import annotations

import logging

from fallible.errors import (
    FallibleError,
    IllegalCallError,
    IllegalInstantiationError,
    ResultError,
)
from fallible.interop import attempt, safe
from fallible.option import Option, nothing, some
from fallible.result import Result, Variant, make_failure, make_success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "FallibleError",
    "IllegalCallError",
    "IllegalInstantiationError",
    "Option",
    "Result",
    "ResultError",
    "Variant",
    "attempt",
    "make_failure",
    "make_success",
    "nothing",
    "safe",
    "some",
]
