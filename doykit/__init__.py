# doykit/__init__.py

"""
doykit: validation, text coercion and day-of-year helpers.

Building blocks for scientific toolkits that need to turn ordinal day
numbers (1 = January 1st) into calendar dates without depending on the
standard library calendar machinery.

Main Components
---------------
is_leap : function
    Gregorian leap-year rule.
resolve_date_of_year : function
    Ordinal day (+ optional year) to a ``DateOfYear`` result.
resolve_dates_of_year : function
    Vectorised resolution into a pandas DataFrame.
DoyConfig : dataclass
    Sentinel, log level and month labels, loadable from YAML.

Subpackages
-----------
dates : Leap-year rule, cumulative tables and resolvers
validation : Error taxonomy and type/character predicates
logs : Logger factory

Example
-------
>>> from doykit import resolve_date_of_year
>>> resolve_date_of_year(60, year=2004).as_tuple()
(2, 29)
"""

from .config import DoyConfig, ConfigError, load_config
from .dates import (
    DateOfYear,
    is_leap,
    days_in_year,
    resolve_date_of_year,
    date_of_year,
    ordinal_day_of,
    resolve_dates_of_year,
)
from .strings import to_text, format_error
from .validation import (
    ErrorKind,
    DoyError,
    MissingArgumentError,
    InvalidArgumentError,
    OutOfRangeError,
    InternalInconsistencyError,
)

__all__ = [
    # Calendar
    'DateOfYear',
    'is_leap',
    'days_in_year',
    'resolve_date_of_year',
    'date_of_year',
    'ordinal_day_of',
    'resolve_dates_of_year',
    # Configuration
    'DoyConfig',
    'ConfigError',
    'load_config',
    # Text
    'to_text',
    'format_error',
    # Errors
    'ErrorKind',
    'DoyError',
    'MissingArgumentError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'InternalInconsistencyError',
]

__version__ = '0.1.0'
