"""
Null-aware comparison and selection utilities.

This module provides the ordering helpers that Python's builtins leave out:
comparisons where None has a defined place, ``min``/``max`` that skip None
instead of raising, a distinct-value median, and a mode that refuses to pick
a winner on ties.

**Ordering sources**: every function works either with the natural ordering
of the values (``<`` and ``>``) or with a caller-supplied comparator. A
comparator follows the ``functools.cmp_to_key`` contract: ``comparator(a, b)``
returns a negative number, zero or a positive number as a is less than, equal
to or greater than b.

**Variadic arguments**: selection functions take their values positionally
(``min_value(3, 1, 2)``); unpack an existing sequence with ``*``. Calling with
no arguments is the empty-sequence case.
"""

from collections.abc import Hashable
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, TypeVar

from objaide.config.settings import ObjaideSettings, get_settings
from objaide.mutable.base import Mutable
from objaide.mutable.mutable_int import MutableInt
from objaide.utils.objects import deep_equals

T = TypeVar("T")

Comparator = Callable[[T, T], int]


# ----- Compare -----

def compare(a: Optional[T], b: Optional[T], null_greater: bool = False) -> int:
    """
    Compare two values with a defined place for None.

    **Functionally**:
    - Identical references (including two Nones) compare equal.
    - If exactly one side is None, ``null_greater`` decides: True puts None
      after every value, False (the default) puts it first.
    - Otherwise the natural ordering decides.

    Args:
        a: First value, may be None.
        b: Second value, may be None.
        null_greater: Whether None sorts after non-None values.

    Returns:
        Negative if a < b, zero if a == b, positive if a > b.

    Raises:
        TypeError: If a and b have no natural ordering between them.

    Examples:
        >>> compare(None, None)
        0
        >>> compare(None, 1)
        -1
        >>> compare(None, 1, null_greater=True)
        1
        >>> compare("b", "a")
        1
    """
    if a is b:
        return 0
    if a is None:
        return 1 if null_greater else -1
    if b is None:
        return -1 if null_greater else 1
    return (a > b) - (a < b)


def compare_with(a: T, b: T, comparator: Comparator) -> int:
    """
    Compare two values with a comparator.

    Identical references (including two Nones) short-circuit to 0; anything
    else, None included, is passed to the comparator, which decides how None
    orders or whether it is allowed at all.
    """
    if a is b:
        return 0
    return comparator(a, b)


# ----- Min / Max -----

def _select(values: Tuple[Any, ...], comparator: Optional[Comparator], sign: int) -> Any:
    """
    Walk values once, keeping the first candidate no later value beats.

    ``sign`` is -1 to select the minimum and +1 for the maximum.
    """
    result = None
    for value in values:
        if comparator is None:
            # The held result starts as None; making None lose in the
            # direction being searched means it is replaced by the first
            # real value and never wins afterwards.
            order = compare(value, result, null_greater=(sign < 0))
        elif value is None:
            continue
        elif result is None:
            result = value
            continue
        else:
            order = compare_with(value, result, comparator)
        if order * sign > 0:
            result = value
    return result


def min_value(*values: Optional[T], comparator: Optional[Comparator] = None) -> Optional[T]:
    """
    Return the smallest value, ignoring None.

    **Functionally**:
    - None arguments never win.
    - On ties the earliest value is kept: a later value replaces the current
      candidate only if it is strictly smaller.
    - With no arguments, or only None arguments, returns None.
    - With a comparator, None arguments are skipped before the comparator
      ever sees them.

    Args:
        *values: Values to select from.
        comparator: Optional cmp-style comparator; natural ordering if omitted.

    Returns:
        The smallest non-None value, or None.

    Examples:
        >>> min_value(3, None, 1, 2)
        1
        >>> min_value(None, None) is None
        True
        >>> min_value("bb", "a", "ccc", comparator=lambda x, y: len(x) - len(y))
        'a'
    """
    return _select(values, comparator, sign=-1)


def max_value(*values: Optional[T], comparator: Optional[Comparator] = None) -> Optional[T]:
    """
    Return the largest value, ignoring None.

    Same rules as ``min_value``: None never wins, the first of several equal
    maxima is returned, and empty or all-None input returns None.
    """
    return _select(values, comparator, sign=1)


# ----- Median -----

def _distinct_sorted(values: List[T], comparator: Optional[Comparator]) -> List[T]:
    """
    Sort values and collapse runs that compare equal, keeping the first of each run.

    Sorting is stable, so the kept element is the earliest occurrence.
    """
    if comparator is None:
        ordered = sorted(values)
        order = compare
    else:
        ordered = sorted(values, key=cmp_to_key(comparator))
        order = comparator
    distinct: List[T] = []
    for value in ordered:
        if not distinct or order(distinct[-1], value) != 0:
            distinct.append(value)
    return distinct


def median(
    *values: T,
    comparator: Optional[Comparator] = None,
    settings: Optional[ObjaideSettings] = None,
) -> Optional[T]:
    """
    Return the lower median of the distinct values.

    **Conceptual**: The values are first collapsed to their sorted set of
    distinct values, so duplicates do not pull the median toward themselves.
    ``median(1, 2, 9, 9, 9)`` is 2 (distinct set {1, 2, 9}), where the
    statistical median of the five elements would be 9.

    **Mathematical**: With d distinct values sorted ascending as v_0..v_{d-1}:
        median = v_{floor((d - 1) / 2)}
    so for an even d the lower of the two middle values is returned.

    **Edge cases**:
    - No arguments: ValueError when ``settings.validate_arguments`` is True
      (default), None when it is False.
    - Any None argument: ValueError, because None has no place in the
      ordering. Use ``median_ignore_null`` to drop them first.

    Args:
        *values: Values to take the median of.
        comparator: Optional cmp-style comparator; natural ordering if omitted.
                    Values the comparator reports as equal collapse together.
        settings: Settings to consult; the global settings if omitted.

    Returns:
        The lower median of the distinct values (or None, see above).

    Raises:
        ValueError: On empty input with validation enabled, or on None elements.

    Examples:
        >>> median(3, 1, 2)
        2
        >>> median(4, 1, 2, 3)
        2
    """
    if not values:
        settings = settings if settings is not None else get_settings()
        if settings.validate_arguments:
            raise ValueError("median requires at least one value")
        return None
    if any(value is None for value in values):
        raise ValueError(
            "median values must not contain None; use median_ignore_null to skip them"
        )

    distinct = _distinct_sorted(list(values), comparator)
    return distinct[(len(distinct) - 1) // 2]


def median_ignore_null(*values: Optional[T], comparator: Optional[Comparator] = None) -> Optional[T]:
    """
    Return the lower median of the distinct non-None values.

    None arguments are dropped first. Returns None when nothing remains,
    including when called with no arguments.

    Examples:
        >>> median_ignore_null(None, 1, None, 2, 3)
        2
        >>> median_ignore_null(None) is None
        True
    """
    present = [value for value in values if value is not None]
    if not present:
        return None
    distinct = _distinct_sorted(present, comparator)
    return distinct[(len(distinct) - 1) // 2]


# ----- Mode -----

class _FrequencyTable:
    """
    Occurrence counts per distinct value, by equality.

    Hashable values are counted in a dict; unhashable ones (lists, dicts,
    numpy arrays, pandas objects) fall back to a linear ``deep_equals`` scan.
    Insertion order is kept in both.
    """

    def __init__(self):
        self._hashed: Dict[Any, MutableInt] = {}
        self._unhashed: List[Tuple[Any, MutableInt]] = []

    def add(self, value: Any) -> None:
        if isinstance(value, Hashable):
            try:
                counter = self._hashed.get(value)
            except TypeError:
                # Hashable by type but not by content, e.g. a tuple holding a list
                counter = None
            else:
                if counter is None:
                    self._hashed[value] = MutableInt(1)
                else:
                    counter.increment()
                return
        for seen, counter in self._unhashed:
            if deep_equals(seen, value):
                counter.increment()
                return
        self._unhashed.append((value, MutableInt(1)))

    def items(self) -> Iterator[Tuple[Any, Mutable[int]]]:
        yield from self._hashed.items()
        yield from self._unhashed


def mode(*values: T) -> Optional[T]:
    """
    Return the most frequent value, or None if there is no single one.

    **Functionally**:
    - Occurrences are counted by equality (``==``, or ``deep_equals`` for
      unhashable values such as numpy arrays), not by ordering, so values
      need not be comparable.
    - The value with the strictly highest count wins.
    - If two or more values share the highest count, there is no mode and
      None is returned.
    - No arguments → None. None arguments are counted like any other value,
      so a None result can also mean "None is the mode".

    Examples:
        >>> mode(1, 1, 2)
        1
        >>> mode(1, 1, 2, 2) is None
        True
        >>> mode("a", [1], [1])
        [1]
    """
    table = _FrequencyTable()
    for value in values:
        table.add(value)

    result = None
    max_count = 0
    for value, count in table.items():
        occurrences = count.get_value()
        if occurrences == max_count:
            result = None
        elif occurrences > max_count:
            max_count = occurrences
            result = value
    return result
