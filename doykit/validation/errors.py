# doykit/validation/errors.py

"""
Error taxonomy for doykit.

Every failure is described by an ``ErrorKind`` and carried by an exception
class derived from ``DoyError``. Resolvers that return structured results
(see ``doykit.dates.structures.DateOfYear``) store the exception instead of
raising it, so callers can inspect ``error.kind`` without a try/except.
"""

from enum import Enum
from typing import Any, Optional

from ..strings import format_error


class ErrorKind(Enum):
    """Kinds of failure a doykit routine can report."""
    MISSING_ARGUMENT = "MissingArgument"
    INVALID_ARGUMENT = "InvalidArgument"
    OUT_OF_RANGE = "OutOfRange"
    INTERNAL_INCONSISTENCY = "InternalInconsistency"

    def __str__(self):
        return self.value


class DoyError(Exception):
    """
    Base class for all doykit failures.

    Attributes
    ----------
    kind : ErrorKind
        Failure category.
    routine : str
        Name of the routine that detected the failure.
    value : Any
        Offending input value (may be None).
    detail : str, optional
        Extra human-readable context.
    """
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, routine: str, value: Any = None, detail: Optional[str] = None):
        self.routine = routine
        self.value = value
        self.detail = detail
        super().__init__(format_error(routine, self.kind, value, detail))


class MissingArgumentError(DoyError):
    """Raised when a required argument was not supplied."""
    kind = ErrorKind.MISSING_ARGUMENT


class InvalidArgumentError(DoyError):
    """Raised when an argument has the wrong type or is not integer-like."""
    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(DoyError):
    """Raised when an ordinal day, month or day falls outside its valid range."""
    kind = ErrorKind.OUT_OF_RANGE


class InternalInconsistencyError(DoyError):
    """
    Raised when a validated input cannot be located in the cumulative table.

    This signals a defect in table construction, never bad input. Callers
    should not try to recover from it.
    """
    kind = ErrorKind.INTERNAL_INCONSISTENCY

