# doykit/dates/resolver.py

"""
Ordinal day-of-year resolution.

This module maps an ordinal day (1 = January 1st) and an optional year to a
calendar (month, day) pair, and back. It builds its own cumulative day table
for every call instead of relying on the standard library ``calendar`` or
``datetime`` modules.

Boundary policy: month ``m`` covers the half-open interval
``(C[m-1], C[m]]`` of the cumulative table ``C``, so a day equal to a month's
cumulative total is the *last* day of that month, never the first of the next.

Example
-------
>>> resolve_date_of_year(60).as_tuple()
(3, 1)
>>> resolve_date_of_year(60, year=2004).as_tuple()
(2, 29)
>>> resolve_date_of_year(366).kind
<ErrorKind.OUT_OF_RANGE: 'OutOfRange'>
"""

import logging
from typing import Any, Optional, Tuple

from ..config import DoyConfig, DEFAULT_CONFIG
from ..constants import DAYS_PER_YEAR, DAYS_PER_LEAP_YEAR, MONTHS_PER_YEAR
from ..validation.errors import (
    DoyError,
    MissingArgumentError,
    InvalidArgumentError,
    OutOfRangeError,
    InternalInconsistencyError,
)
from ..validation.predicates import is_numeric, is_integer_like
from .leap import is_leap
from .structures import DateOfYear, days_per_month, cumulative_days

logger = logging.getLogger(__name__)


def _validate_ordinal_day(ordinal_day: Any, routine: str) -> int:
    if ordinal_day is None:
        raise MissingArgumentError(routine, ordinal_day, "ordinal_day is required")
    if not is_numeric(ordinal_day):
        raise InvalidArgumentError(routine, ordinal_day, "ordinal_day must be numeric")
    if not is_integer_like(ordinal_day):
        raise InvalidArgumentError(routine, ordinal_day, "ordinal_day must be a whole number")
    return int(ordinal_day)


def year_tables(year: Optional[Any] = None) -> Tuple[Tuple[int, ...], Tuple[int, ...], int]:
    """
    Build the month-length table, cumulative table and maximum ordinal day.

    Without a year the common-year tables are used, even if the caller's
    unstated year happens to be a leap year.

    Parameters
    ----------
    year : int, optional
        Calendar year. None means "no year specified".

    Returns
    -------
    tuple
        ``(days_per_month, cumulative_days, max_ordinal_day)``.

    Raises
    ------
    InvalidArgumentError
        If ``year`` is given but is not a positive integer-like value.
    """
    leap = year is not None and is_leap(year)
    lengths = days_per_month(leap)
    max_ordinal_day = DAYS_PER_LEAP_YEAR if leap else DAYS_PER_YEAR
    return lengths, cumulative_days(lengths), max_ordinal_day


def _locate_month(ordinal_day: int, cumulative: Tuple[int, ...]) -> int:
    for month in range(1, MONTHS_PER_YEAR + 1):
        if cumulative[month - 1] < ordinal_day <= cumulative[month]:
            return month
    raise InternalInconsistencyError(
        "resolve_date_of_year", ordinal_day,
        f"no month interval contains the day; cumulative table {list(cumulative)}"
    )


def resolve_date_of_year(
    ordinal_day: Any,
    year: Optional[Any] = None,
    config: Optional[DoyConfig] = None,
) -> DateOfYear:
    """
    Resolve an ordinal day of the year to a calendar month and day.

    Failures are returned, not raised: the result carries the error and both
    ``month`` and ``day`` are set to the configured sentinel.

    Parameters
    ----------
    ordinal_day : int
        1-based day within the year. Must be a whole number.
    year : int, optional
        Calendar year. If omitted the year is treated as a common (365-day)
        year, so day 366 can only be resolved by naming a leap year.
    config : DoyConfig, optional
        Supplies the sentinel (default: ``DEFAULT_CONFIG``).

    Returns
    -------
    DateOfYear
        ``error`` is None on success. Possible error kinds:
        MISSING_ARGUMENT (ordinal_day is None), INVALID_ARGUMENT (non-numeric
        or fractional day, invalid year), OUT_OF_RANGE (day outside
        ``[1, 365]`` or ``[1, 366]``), INTERNAL_INCONSISTENCY (table defect).

    Examples
    --------
    >>> resolve_date_of_year(1).as_tuple()
    (1, 1)
    >>> resolve_date_of_year(366, year=2000).as_tuple()
    (12, 31)
    """
    config = config or DEFAULT_CONFIG
    routine = "resolve_date_of_year"

    try:
        day_number = _validate_ordinal_day(ordinal_day, routine)
        try:
            lengths, cumulative, max_ordinal_day = year_tables(year)
        except DoyError as e:
            raise type(e)(routine, year, e.detail) from e

        if not 1 <= day_number <= max_ordinal_day:
            raise OutOfRangeError(
                routine, ordinal_day, f"ordinal_day must be in [1, {max_ordinal_day}]"
            )

        month = _locate_month(day_number, cumulative)
        day = day_number - cumulative[month - 1]
        if not 1 <= day <= lengths[month - 1]:
            raise InternalInconsistencyError(
                routine, ordinal_day, f"computed day {day} is outside month {month}"
            )
    except InternalInconsistencyError as e:
        logger.error(str(e))
        return DateOfYear.failure(e, config.sentinel)
    except DoyError as e:
        logger.debug(str(e))
        return DateOfYear.failure(e, config.sentinel)

    logger.debug(f"{routine}: day {day_number} (year={year}) -> month {month}, day {day}")
    return DateOfYear(month=month, day=day)


def date_of_year(ordinal_day: Any, year: Optional[Any] = None) -> Tuple[int, int]:
    """
    Resolve an ordinal day to ``(month, day)``, raising on failure.

    Raises
    ------
    DoyError
        The error ``resolve_date_of_year`` reported, e.g. ``OutOfRangeError``.
    """
    return resolve_date_of_year(ordinal_day, year).unwrap()


def ordinal_day_of(month: Any, day: Any, year: Optional[Any] = None) -> int:
    """
    Convert a calendar month and day to an ordinal day of the year.

    This is the inverse of ``resolve_date_of_year``. February 29th is only
    valid when a leap year is named.

    Parameters
    ----------
    month : int
        Month number (1-12).
    day : int
        Day of month.
    year : int, optional
        Calendar year (default: common year).

    Returns
    -------
    int
        Ordinal day (1-365 or 1-366).

    Raises
    ------
    MissingArgumentError
        If ``month`` or ``day`` is None.
    InvalidArgumentError
        If ``month``, ``day`` or ``year`` is not integer-like.
    OutOfRangeError
        If ``month`` is not in 1-12 or ``day`` exceeds the month length.

    Examples
    --------
    >>> ordinal_day_of(3, 1)
    60
    >>> ordinal_day_of(2, 29, year=2004)
    60
    """
    routine = "ordinal_day_of"
    for name, value in (("month", month), ("day", day)):
        if value is None:
            raise MissingArgumentError(routine, value, f"{name} is required")
        if not is_integer_like(value):
            raise InvalidArgumentError(routine, value, f"{name} must be an integer")

    try:
        lengths, cumulative, _ = year_tables(year)
    except DoyError as e:
        raise type(e)(routine, year, e.detail) from e

    month, day = int(month), int(day)
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise OutOfRangeError(routine, month, f"month must be in [1, {MONTHS_PER_YEAR}]")
    if not 1 <= day <= lengths[month - 1]:
        raise OutOfRangeError(routine, day, f"day must be in [1, {lengths[month - 1]}] for month {month}")
    return cumulative[month - 1] + day
