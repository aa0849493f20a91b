# doykit/validation/__init__.py

from .errors import (
    ErrorKind,
    DoyError,
    MissingArgumentError,
    InvalidArgumentError,
    OutOfRangeError,
    InternalInconsistencyError,
)
from .predicates import is_numeric, is_integer_like, is_string, is_alphanum, is_lowercase

__all__ = [
    'ErrorKind',
    'DoyError',
    'MissingArgumentError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'InternalInconsistencyError',
    'is_numeric',
    'is_integer_like',
    'is_string',
    'is_alphanum',
    'is_lowercase',
]
