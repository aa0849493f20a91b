# doykit/validation/predicates.py

"""
Type and character classification predicates.

All functions are pure ``(value) -> bool`` checks; none of them raise.
``bool`` is deliberately not treated as numeric even though it subclasses
``int`` in Python.
"""

import math
import string
from numbers import Integral, Real
from typing import Any

import numpy as np

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def is_numeric(value: Any) -> bool:
    """
    Check whether a value is a real number.

    Accepts Python ``int``/``float`` and numpy integer/floating scalars.
    Rejects ``bool``, complex numbers, strings and containers.

    Examples
    --------
    >>> is_numeric(60), is_numeric(60.5), is_numeric('60'), is_numeric(True)
    (True, True, False, False)
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, Real)


def is_integer_like(value: Any) -> bool:
    """
    Check whether a value is numeric with a finite integral value.

    Examples
    --------
    >>> is_integer_like(2004), is_integer_like(2004.0), is_integer_like(2004.5)
    (True, True, False)
    """
    if not is_numeric(value):
        return False
    if isinstance(value, Integral):
        return True
    number = float(value)
    return math.isfinite(number) and number.is_integer()


def is_string(value: Any) -> bool:
    """Check whether a value is a ``str``."""
    return isinstance(value, str)


def is_alphanum(value: Any) -> bool:
    """
    Check whether a value is a non-empty string of ASCII letters and digits.

    Examples
    --------
    >>> is_alphanum('abc123'), is_alphanum('abc 123'), is_alphanum('')
    (True, False, False)
    """
    return is_string(value) and len(value) > 0 and all(c in _ALPHANUMERIC for c in value)


def is_lowercase(value: Any) -> bool:
    """
    Check whether a string has cased characters and all of them are lowercase.

    Digits and punctuation are ignored, so ``'abc-1'`` is lowercase while
    ``'123'`` is not (it has no cased characters).
    """
    return is_string(value) and value.islower()
