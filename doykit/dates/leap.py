# doykit/dates/leap.py

"""
Gregorian leap-year rule.

The proleptic Gregorian rule is applied uniformly to every positive year;
there is no special handling of the 1582 calendar reform.
"""

from typing import Any, Optional

from ..constants import DAYS_PER_YEAR, DAYS_PER_LEAP_YEAR
from ..validation.errors import MissingArgumentError, InvalidArgumentError
from ..validation.predicates import is_integer_like


def validate_year(year: Any, routine: str = "is_leap") -> int:
    """
    Check that ``year`` is a positive integer-like value and return it as ``int``.

    Parameters
    ----------
    year : Any
        Candidate year. ``int``, numpy integers and integral floats are
        accepted; ``bool``, strings and non-integral numbers are not.
    routine : str, optional
        Name reported in the error message (default: ``'is_leap'``).

    Raises
    ------
    MissingArgumentError
        If ``year`` is None.
    InvalidArgumentError
        If ``year`` is not a positive integer-like value.
    """
    if year is None:
        raise MissingArgumentError(routine, year, "year is required")
    if not is_integer_like(year):
        raise InvalidArgumentError(routine, year, "year must be an integer")
    if int(year) < 1:
        raise InvalidArgumentError(routine, year, "year must be positive")
    return int(year)


def is_leap(year: Any) -> bool:
    """
    Decide whether a year is a Gregorian leap year.

    A year is a leap year if it is divisible by 4 and either not divisible
    by 100 or divisible by 400.

    Parameters
    ----------
    year : int
        Positive calendar year.

    Returns
    -------
    bool

    Raises
    ------
    InvalidArgumentError
        If ``year`` is not a positive integer-like value.

    Examples
    --------
    >>> is_leap(2004), is_leap(1900), is_leap(2000), is_leap(2023)
    (True, False, True, False)
    """
    year = validate_year(year, "is_leap")
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: Optional[Any] = None) -> int:
    """Return 366 for a leap year, 365 otherwise (including when no year is given)."""
    if year is None:
        return DAYS_PER_YEAR
    return DAYS_PER_LEAP_YEAR if is_leap(year) else DAYS_PER_YEAR
