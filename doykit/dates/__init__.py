# doykit/dates/__init__.py

"""
Calendar day-of-year handling submodule.
"""

from .leap import is_leap, days_in_year, validate_year
from .structures import DateOfYear, days_per_month, cumulative_days
from .resolver import resolve_date_of_year, date_of_year, ordinal_day_of, year_tables
from .batch import resolve_dates_of_year

__all__ = [
    'is_leap',
    'days_in_year',
    'validate_year',
    'DateOfYear',
    'days_per_month',
    'cumulative_days',
    'resolve_date_of_year',
    'date_of_year',
    'ordinal_day_of',
    'year_tables',
    'resolve_dates_of_year',
]
