# doykit/dates/structures.py

from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import (
    COMMON_YEAR_DAYS_PER_MONTH,
    DAYS_IN_LEAP_FEBRUARY,
    FEBRUARY,
    SENTINEL,
)
from ..validation.errors import DoyError, ErrorKind


def days_per_month(leap: bool = False) -> Tuple[int, ...]:
    """
    Month lengths for a common or leap year, January first.

    Parameters
    ----------
    leap : bool, optional
        If True, February has 29 days (default: False).

    Returns
    -------
    tuple of int
        Twelve month lengths.
    """
    lengths = list(COMMON_YEAR_DAYS_PER_MONTH)
    if leap:
        lengths[FEBRUARY - 1] = DAYS_IN_LEAP_FEBRUARY
    return tuple(lengths)


def cumulative_days(lengths: Tuple[int, ...]) -> Tuple[int, ...]:
    """
    Running total of days through the end of each month.

    Entry 0 is 0; entry ``m`` is the number of days from January 1st through
    the last day of month ``m``. For a common year the last entry is 365.

    Examples
    --------
    >>> cumulative_days(days_per_month())[:4]
    (0, 31, 59, 90)
    """
    totals = [0]
    for length in lengths:
        totals.append(totals[-1] + length)
    return tuple(totals)


@dataclass(frozen=True)
class DateOfYear:
    """
    Outcome of resolving an ordinal day to a calendar (month, day).

    On success ``error`` is None. On failure ``month`` and ``day`` hold the
    sentinel value and ``error`` holds the ``DoyError`` describing why, so a
    partial result can never be mistaken for a full one.

    Attributes
    ----------
    month : int
        Month number (1-12), or the sentinel.
    day : int
        Day of month (1-31), or the sentinel.
    error : DoyError, optional
        Failure, if any.
    """
    month: int
    day: int
    error: Optional[DoyError] = None

    @classmethod
    def failure(cls, error: DoyError, sentinel: int = SENTINEL) -> "DateOfYear":
        """Build a failed result with both fields set to ``sentinel``."""
        return cls(month=sentinel, day=sentinel, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind of a failed result, None on success."""
        return None if self.error is None else self.error.kind

    def as_tuple(self) -> Tuple[int, int]:
        return (self.month, self.day)

    def unwrap(self) -> Tuple[int, int]:
        """
        Return ``(month, day)`` or raise the carried error.

        Raises
        ------
        DoyError
            The error stored on a failed result.
        """
        if self.error is not None:
            raise self.error
        return self.as_tuple()
