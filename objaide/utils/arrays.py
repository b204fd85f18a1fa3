"""
Null-safe array helpers.

"Array" here means any sized sequence: list, tuple, bytearray, array.array,
numpy arrays (first dimension).
"""

from array import array as typed_array
from collections.abc import Sized
from typing import Any, Optional

import numpy as np


def get_length(array: Optional[Sized]) -> int:
    """
    Return the length of an array, 0 for None.

    numpy arrays report the length of their first dimension; a 0-d array has
    no first dimension and reports 0.

    Raises:
        TypeError: If the object has no length.
    """
    if array is None:
        return 0
    if isinstance(array, np.ndarray) and array.ndim == 0:
        return 0
    return len(array)


def is_empty(array: Optional[Sized]) -> bool:
    """Return True if the array is None or has length 0."""
    return get_length(array) == 0


def is_not_empty(array: Optional[Sized]) -> bool:
    """Negation of ``is_empty``."""
    return not is_empty(array)


def is_array(obj: Any) -> bool:
    """
    Return True if obj is one of the mutable array types the clone dispatcher copies.

    Tuples are left out: they are immutable and a copy would be the same object.
    """
    return isinstance(obj, (list, bytearray, typed_array, np.ndarray))

