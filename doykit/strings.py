# doykit/strings.py

"""
String coercion helpers for diagnostics.

``to_text`` turns any value into a trimmed string suitable for embedding in
an error message. Integral floats are rendered without a trailing ``.0`` so
that ``366.0`` and ``366`` read the same in diagnostics.
"""

import math
from numbers import Integral, Real
from typing import Any, Optional

import numpy as np


def to_text(value: Any) -> str:
    """
    Convert a value to a trimmed string.

    Parameters
    ----------
    value : Any
        Value to render. Strings are stripped of surrounding whitespace,
        numbers are formatted compactly, everything else goes through ``repr``
        for containers and ``str`` otherwise.

    Returns
    -------
    str
        Trimmed text form of ``value``.

    Examples
    --------
    >>> to_text('  abc  ')
    'abc'
    >>> to_text(366.0)
    '366'
    >>> to_text(None)
    'None'
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value))
    if isinstance(value, Integral):
        return _integer_text(int(value))
    if isinstance(value, Real):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return repr(number)
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return repr(value).strip()
    return str(value).strip()


def _integer_text(number: int) -> str:
    try:
        return str(number)
    except ValueError:
        # above sys.get_int_max_str_digits(); report the size instead
        digits = int(abs(number).bit_length() * math.log10(2)) + 1
        sign = "-" if number < 0 else ""
        return f"{sign}<integer with about {digits} digits>"


def format_error(routine: str, kind: Any, value: Any, detail: Optional[str] = None) -> str:
    """
    Build a diagnostic message naming the routine, error kind and value.

    Examples
    --------
    >>> format_error('resolve_date_of_year', 'OutOfRange', 366, 'must be in [1, 365]')
    'resolve_date_of_year: OutOfRange: 366 (must be in [1, 365])'
    """
    message = f"{to_text(routine)}: {to_text(kind)}: {to_text(value)}"
    if detail:
        message += f" ({to_text(detail)})"
    return message
