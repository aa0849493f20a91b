# doykit/dates/batch.py

"""
Vectorised day-of-year resolution.

``resolve_dates_of_year`` applies the same rules as
``doykit.dates.resolver.resolve_date_of_year`` to a whole sequence of ordinal
days and returns a DataFrame, one row per input value, in input order.
Invalid elements do not abort the call: they get sentinel month/day values
and the name of their error kind in the ``ERROR`` column.
"""

import logging
import math
from numbers import Integral, Real
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from ..config import DoyConfig, DEFAULT_CONFIG
from ..validation.errors import DoyError, ErrorKind
from ..validation.predicates import is_numeric, is_integer_like
from .resolver import year_tables

logger = logging.getLogger(__name__)

COLUMNS = ["ORDINAL_DAY", "MONTH", "DAY", "LABEL", "ERROR"]


def _element_error(value: Any, max_ordinal_day: int) -> Optional[ErrorKind]:
    if value is None or value is pd.NA:
        return ErrorKind.MISSING_ARGUMENT
    if isinstance(value, Real) and not isinstance(value, Integral) and math.isnan(value):
        return ErrorKind.MISSING_ARGUMENT
    if not is_numeric(value) or not is_integer_like(value):
        return ErrorKind.INVALID_ARGUMENT
    if not 1 <= int(value) <= max_ordinal_day:
        return ErrorKind.OUT_OF_RANGE
    return None


def resolve_dates_of_year(
    ordinal_days: Iterable[Any],
    year: Optional[Any] = None,
    config: Optional[DoyConfig] = None,
) -> pd.DataFrame:
    """
    Resolve many ordinal days to calendar dates at once.

    Parameters
    ----------
    ordinal_days : iterable
        Ordinal days (list, generator, numpy array or pandas Series). Missing values
        (None/NaN) are reported as MISSING_ARGUMENT.
    year : int, optional
        Calendar year applied to every element (default: common year).
    config : DoyConfig, optional
        Supplies the sentinel and month labels (default: ``DEFAULT_CONFIG``).

    Returns
    -------
    pd.DataFrame
        Columns ``ORDINAL_DAY``, ``MONTH``, ``DAY``, ``LABEL`` (e.g.
        ``'29-Feb'``) and ``ERROR`` (error kind value, None on success).
        ``MONTH``/``DAY`` are int64 and hold the sentinel for failed rows;
        ``ORDINAL_DAY``, ``LABEL`` and ``ERROR`` are object columns.

    Raises
    ------
    InvalidArgumentError
        If ``year`` is given but is not a positive integer-like value.

    Examples
    --------
    >>> df = resolve_dates_of_year([1, 60, 366], year=2004)
    >>> df[['MONTH', 'DAY']].values.tolist()
    [[1, 1], [2, 29], [12, 31]]
    """
    config = config or DEFAULT_CONFIG
    try:
        _, cumulative, max_ordinal_day = year_tables(year)
    except DoyError as e:
        raise type(e)("resolve_dates_of_year", year, e.detail) from e

    if isinstance(ordinal_days, pd.Series):
        values = ordinal_days.tolist()
    elif isinstance(ordinal_days, np.ndarray):
        values = list(ordinal_days.ravel())
    elif isinstance(ordinal_days, Iterable) and not isinstance(ordinal_days, str):
        values = list(ordinal_days)
    else:
        values = [ordinal_days]

    errors = [_element_error(v, max_ordinal_day) for v in values]
    valid = np.array([e is None for e in errors], dtype=bool)

    days = np.zeros(len(values), dtype=np.int64)
    if valid.any():
        days[valid] = [int(v) for v, ok in zip(values, valid) if ok]

    # side='left' puts a day equal to C[m] in month m, matching (C[m-1], C[m]]
    table = np.asarray(cumulative, dtype=np.int64)
    months = np.searchsorted(table, days, side="left")
    day_of_month = days - table[np.clip(months - 1, 0, len(table) - 1)]

    months = np.where(valid, months, config.sentinel).astype(np.int64)
    day_of_month = np.where(valid, day_of_month, config.sentinel).astype(np.int64)

    labels = [
        f"{d:02d}-{config.month_label(m)}" if ok else None
        for m, d, ok in zip(months, day_of_month, valid)
    ]

    n_failed = int((~valid).sum())
    if n_failed:
        logger.debug(f"resolve_dates_of_year: {n_failed} of {len(values)} days could not be resolved")

    # object dtype keeps inputs as given and None as None under string inference
    return pd.DataFrame({
        "ORDINAL_DAY": pd.Series(values, dtype=object),
        "MONTH": months,
        "DAY": day_of_month,
        "LABEL": pd.Series(labels, dtype=object),
        "ERROR": pd.Series([None if e is None else e.value for e in errors], dtype=object),
    }, columns=COLUMNS)
