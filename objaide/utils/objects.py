"""
Null-safe object helpers.

This module groups the small, always-needed checks that otherwise get
re-written inline all over a codebase: "is any of these None?", "is this
container empty?", "are these two values equal, arrays included?", and
"what should I show for a None?".

Every function accepts None wherever it accepts a value and never raises for
it. Variadic helpers treat "no arguments" as the boundary case and document
what they return for it.
"""

from collections.abc import Mapping, Sized
from enum import Enum
from typing import Any, Optional, TypeVar

import numpy as np
import pandas as pd

T = TypeVar("T")

AT_SIGN = "@"

_PANDAS_TYPES = (pd.Series, pd.DataFrame, pd.Index)
_ARRAY_LIKE_TYPES = (np.ndarray,) + _PANDAS_TYPES


class Null(Enum):
    """
    Placeholder for None when None already carries a meaning.

    **Conceptual**: ``mapping.get(key)`` returns None both when the key maps to
    None and when the key is missing. Storing ``Null.NULL`` instead of None
    keeps the two cases apart. It is also usable in containers or protocols
    that cannot hold None.

    Being an enum member, ``Null.NULL`` is a true singleton: it survives
    pickling and copying with its identity intact, and nothing can mutate it.
    """
    NULL = "NULL"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Null.NULL"


# ----- Null checks -----

def is_null(obj: Any) -> bool:
    """Return True if ``obj`` is None."""
    return obj is None


def is_not_null(obj: Any) -> bool:
    """Return True if ``obj`` is not None."""
    return obj is not None


def first_non_null(*values: Optional[T]) -> Optional[T]:
    """
    Return the first value that is not None.

    Returns None when called with no arguments or when every argument is None.
    """
    for value in values:
        if value is not None:
            return value
    return None


def any_null(*values: Any) -> bool:
    """
    Return True if no values were given or any of them is None.

    Examples:
        >>> any_null()
        True
        >>> any_null(1, None)
        True
        >>> any_null(1, 2)
        False
    """
    if not values:
        return True
    return any(value is None for value in values)


def any_non_null(*values: Any) -> bool:
    """Return True if at least one value is not None (False for no arguments)."""
    return first_non_null(*values) is not None


def all_null(*values: Any) -> bool:
    """Return True if no values were given or every value is None."""
    return all(value is None for value in values)


def all_non_null(*values: Any) -> bool:
    """Return True only if values were given and none of them is None."""
    if not values:
        return False
    return all(value is not None for value in values)


# ----- Empty checks -----

def is_empty(obj: Any) -> bool:
    """
    Check whether an object is None or empty.

    **Supported types**:
      - str / bytes / bytearray: empty when length is 0.
      - numpy arrays: empty when ``size == 0`` (any dimension of length 0).
      - pandas Series / DataFrame / Index: empty per ``.empty``.
      - Any other sized container (list, tuple, set, dict, ...): empty when
        ``len() == 0``.

    Objects of unsupported types are never empty.

    Args:
        obj: Object to check; may be None.

    Returns:
        True if obj is None or a supported type with no content.
    """
    if obj is None:
        return True
    if isinstance(obj, np.ndarray):
        return obj.size == 0
    if isinstance(obj, _PANDAS_TYPES):
        return obj.empty
    if isinstance(obj, Sized):
        return len(obj) == 0
    return False


def is_not_empty(obj: Any) -> bool:
    """Negation of ``is_empty``."""
    return not is_empty(obj)


# ----- Null-safe equals / hash -----

def equals(a: Any, b: Any) -> bool:
    """
    Null-safe equality.

    Two Nones are equal; None never equals a non-None value. numpy arrays and
    pandas objects compare as whole values through ``deep_equals``, since their
    ``==`` is element-wise. Otherwise ``a == b``.

    Examples:
        >>> equals(np.array([1, 2]), np.array([1, 2]))
        True
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, _ARRAY_LIKE_TYPES) or isinstance(b, _ARRAY_LIKE_TYPES):
        return deep_equals(a, b)
    return bool(a == b)


def not_equals(a: Any, b: Any) -> bool:
    """Negation of ``equals``."""
    return not equals(a, b)


def all_equals(*values: Any) -> bool:
    """
    Return True if every value equals its neighbour.

    Zero or one argument is trivially True.
    """
    for left, right in zip(values, values[1:]):
        if not_equals(left, right):
            return False
    return True


def deep_equals(a: Any, b: Any) -> bool:
    """
    Null-safe structural equality.

    **Functionally**:
      - numpy arrays compare with ``np.array_equal`` (same shape, same values),
        so the result is a single bool rather than an element-wise array.
      - pandas objects compare with ``.equals`` (values, index and dtype).
      - lists and tuples compare element-wise, recursively, and only with the
        same container type.
      - mappings compare key sets, then values recursively.
      - anything else falls back to ``equals``.

    Args:
        a: First object, may be None.
        b: Second object, may be None.

    Returns:
        True if a and b are deeply equal.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        if not (isinstance(a, np.ndarray) and isinstance(b, np.ndarray)):
            return False
        return bool(np.array_equal(a, b))
    if isinstance(a, _PANDAS_TYPES) or isinstance(b, _PANDAS_TYPES):
        return type(a) is type(b) and a.equals(b)
    if isinstance(a, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(deep_equals(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping):
        if not isinstance(b, Mapping) or a.keys() != b.keys():
            return False
        return all(deep_equals(a[key], b[key]) for key in a)
    return equals(a, b)


def not_deep_equals(a: Any, b: Any) -> bool:
    """Negation of ``deep_equals``."""
    return not deep_equals(a, b)


def hash_code(obj: Any) -> int:
    """Return 0 for None, otherwise ``hash(obj)``."""
    if obj is None:
        return 0
    return hash(obj)


def hash_values(*objs: Any) -> int:
    """Return a single hash for several objects (order-sensitive)."""
    return hash(objs)


# ----- To string -----

def to_string(obj: Any, null_default: Optional[str] = None) -> str:
    """
    Return ``str(obj)``, or ``null_default`` when obj is None and one is given.

    Examples:
        >>> to_string(12)
        '12'
        >>> to_string(None)
        'None'
        >>> to_string(None, "n/a")
        'n/a'
    """
    if obj is None and null_default is not None:
        return null_default
    return str(obj)


def identity_string(obj: Any) -> Optional[str]:
    """
    Return the identity text of an object, ignoring any custom ``__str__``.

    Format: ``<module>.<qualname>@<hex id>``, e.g. ``builtins.str@7f3a2c1e5b70``.
    Returns None for None.
    """
    if obj is None:
        return None
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}{AT_SIGN}{id(obj):x}"


# ----- Defaulting -----

def default_if_null(obj: Optional[T], default: T) -> T:
    """Return ``default`` if obj is None, otherwise obj."""
    return obj if obj is not None else default
