# doykit/constants.py

"""
Calendar constants for day-of-year resolution.

This module defines the Gregorian month-length table, year lengths and the
sentinel used to mark unresolved month/day fields. Nothing here depends on
the standard library ``calendar`` module; the tables are the single source
of truth for every resolver in the package.
"""

# Number of months in a year
MONTHS_PER_YEAR = 12

# Days per year (non-leap and leap)
DAYS_PER_YEAR = 365
DAYS_PER_LEAP_YEAR = 366

# February length (non-leap and leap)
DAYS_IN_FEBRUARY = 28
DAYS_IN_LEAP_FEBRUARY = 29
FEBRUARY = 2

# Month lengths for a common year, January first
COMMON_YEAR_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Value written to month/day when a resolution fails
SENTINEL = -1

# Default month labels (used for human-readable output only)
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
