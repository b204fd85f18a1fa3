"""
Mutable integer wrapper.

**Conceptual**: MutableInt is an int you can change in place. It is most useful
as a counter stored in a dict (``counts[key].increment()`` instead of
``counts[key] = counts[key] + 1``) or handed to a callback that needs to report
a number back to its caller.

**Arithmetic families**: each operation comes in three forms, mirroring the
atomic-counter vocabulary:
  - ``add(x)``: update in place and return the wrapper itself (chainable).
  - ``add_and_get(x)``: update, return the new value.
  - ``get_and_add(x)``: update, return the value from before the update.

Every operand may be an int, any ``numbers.Number`` (truncated with ``int()``),
another MutableNumber, or None together with a ``default`` to use instead.

Division truncates toward zero (``-7 / 2 -> -3``), not toward negative infinity
like Python's ``//``.
"""

from numbers import Number
from typing import Any, Optional

from objaide.mutable.base import MutableNumber


def _to_int(value: Any, default: Optional[int] = None) -> int:
    """
    Convert a constructor/setter argument to int.

    None and unparseable strings fall back to ``default`` when one is given.
    """
    if value is None:
        if default is None:
            raise TypeError("MutableInt value cannot be None without a default")
        return int(default)
    if isinstance(value, MutableNumber):
        return int(value.get_value())
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            if default is None:
                raise
            return int(default)
    if isinstance(value, Number):
        return int(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to MutableInt")


def _operand(operand: Any, default: Optional[int] = None) -> int:
    """Convert an arithmetic operand to int; None uses ``default``."""
    if operand is None:
        if default is None:
            raise TypeError("Operand cannot be None without a default")
        return int(default)
    if isinstance(operand, MutableNumber):
        return int(operand.get_value())
    if isinstance(operand, Number):
        return int(operand)
    raise TypeError(f"Unsupported operand type: {type(operand).__name__}")


def _divisor(operand: Any, default: Optional[int] = None) -> int:
    """Like ``_operand``, but a zero divisor also falls back to ``default``."""
    divisor = _operand(operand, default)
    if divisor == 0 and default is not None:
        return int(default)
    return divisor


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    if (dividend >= 0) == (divisor > 0):
        return quotient
    return -quotient


class MutableInt(MutableNumber):
    """
    A mutable int wrapper.

    Args:
        value: Initial value: int, Number, numeric str, MutableNumber or None.
               Defaults to 0.
        default: Used when value is None or a str that does not parse.

    Raises:
        TypeError: If value is None and no default is given, or of an
                   unsupported type.
        ValueError: If value is a non-numeric str and no default is given.

    Examples:
        >>> counter = MutableInt()
        >>> counter.increment_and_get()
        1
        >>> MutableInt("42").add(8).value
        50
        >>> MutableInt("n/a", default=-1).value
        -1
    """

    def __init__(self, value: Any = 0, default: Optional[int] = None):
        self._value = _to_int(value, default)

    # ----- Set/Get -----

    def get_value(self) -> int:
        return self._value

    def set_value(self, value: Any, default: Optional[int] = None) -> None:
        self._value = _to_int(value, default)

    def __index__(self) -> int:
        return self._value

    def duplicate(self) -> "MutableInt":
        return MutableInt(self._value)

    # ----- Increment/Decrement -----

    def increment(self) -> None:
        self._value += 1

    def increment_and_get(self) -> int:
        self._value += 1
        return self._value

    def get_and_increment(self) -> int:
        last = self._value
        self._value += 1
        return last

    def decrement(self) -> None:
        self._value -= 1

    def decrement_and_get(self) -> int:
        self._value -= 1
        return self._value

    def get_and_decrement(self) -> int:
        last = self._value
        self._value -= 1
        return last

    # ----- Add -----

    def add(self, operand: Any, default: Optional[int] = None) -> "MutableInt":
        self._value += _operand(operand, default)
        return self

    def add_and_get(self, operand: Any, default: Optional[int] = None) -> int:
        self._value += _operand(operand, default)
        return self._value

    def get_and_add(self, operand: Any, default: Optional[int] = None) -> int:
        last = self._value
        self._value += _operand(operand, default)
        return last

    # ----- Subtract -----

    def subtract(self, operand: Any, default: Optional[int] = None) -> "MutableInt":
        self._value -= _operand(operand, default)
        return self

    def subtract_and_get(self, operand: Any, default: Optional[int] = None) -> int:
        self._value -= _operand(operand, default)
        return self._value

    def get_and_subtract(self, operand: Any, default: Optional[int] = None) -> int:
        last = self._value
        self._value -= _operand(operand, default)
        return last

    # ----- Multiply -----

    def multiply(self, operand: Any, default: Optional[int] = None) -> "MutableInt":
        self._value *= _operand(operand, default)
        return self

    def multiply_and_get(self, operand: Any, default: Optional[int] = None) -> int:
        self._value *= _operand(operand, default)
        return self._value

    def get_and_multiply(self, operand: Any, default: Optional[int] = None) -> int:
        last = self._value
        self._value *= _operand(operand, default)
        return last

    # ----- Divide -----
    # A None or zero divisor uses ``default`` when one is given; otherwise a
    # zero divisor raises ZeroDivisionError.

    def divide(self, operand: Any, default: Optional[int] = None) -> "MutableInt":
        self._value = _truncating_divide(self._value, _divisor(operand, default))
        return self

    def divide_and_get(self, operand: Any, default: Optional[int] = None) -> int:
        self._value = _truncating_divide(self._value, _divisor(operand, default))
        return self._value

    def get_and_divide(self, operand: Any, default: Optional[int] = None) -> int:
        last = self._value
        self._value = _truncating_divide(self._value, _divisor(operand, default))
        return last

    # ----- Comparison -----

    def compare_to(self, other: Any) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than other."""
        other_value = _operand(other)
        return (self._value > other_value) - (self._value < other_value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MutableInt):
            return self._value == other._value
        return NotImplemented

    __hash__ = None
