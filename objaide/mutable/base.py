"""
Mutable wrapper interfaces.

**Conceptual**: A Mutable is a small box around a value that can be changed in
place. Passing the box lets a callee update a value the caller still holds,
e.g. a counter shared between a loop and a callback, or the per-value counts of
``objaide.utils.compare.mode``.
"""

from abc import ABC, abstractmethod
from numbers import Number
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, Union, runtime_checkable

from objaide.utils.clone import Duplicable

if TYPE_CHECKING:
    from objaide.mutable.mutable_int import MutableInt

T = TypeVar("T")


@runtime_checkable
class Mutable(Protocol[T]):
    """
    Mutable value protocol.

    Any object with ``get_value()`` and ``set_value(value)`` is a Mutable, and
    ``isinstance(obj, Mutable)`` checks for those two methods.
    """

    def get_value(self) -> T:
        """Return the current value."""
        ...

    def set_value(self, value: T) -> None:
        """Replace the current value."""
        ...


class MutableNumber(Duplicable, ABC):
    """
    Base class for mutable numeric wrappers.

    **Functionally**:
    - ``value`` property reads/writes the wrapped number.
    - ``int()`` and ``float()`` work on the wrapper.
    - Ordering compares the wrapped values, against other MutableNumbers or
      plain numbers alike.
    - Instances are unhashable: the value can change after insertion into a
      set or dict, which would corrupt the container.
    - Duplicable: ``clone(wrapper)`` returns an independent wrapper.

    Subclasses implement ``get_value``, ``set_value`` and ``duplicate``.
    """

    __hash__ = None

    @abstractmethod
    def get_value(self) -> Number:
        ...

    @abstractmethod
    def set_value(self, value: Any) -> None:
        ...

    @abstractmethod
    def duplicate(self) -> "MutableNumber":
        ...

    @property
    def value(self) -> Number:
        return self.get_value()

    @value.setter
    def value(self, value: Any) -> None:
        self.set_value(value)

    def __int__(self) -> int:
        return int(self.get_value())

    def __float__(self) -> float:
        return float(self.get_value())

    @staticmethod
    def _operand_value(other: Any) -> Any:
        if isinstance(other, MutableNumber):
            return other.get_value()
        if isinstance(other, Number):
            return other
        return NotImplemented

    def __lt__(self, other: Union["MutableNumber", Number]) -> bool:
        other_value = self._operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.get_value() < other_value

    def __le__(self, other: Union["MutableNumber", Number]) -> bool:
        other_value = self._operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.get_value() <= other_value

    def __gt__(self, other: Union["MutableNumber", Number]) -> bool:
        other_value = self._operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.get_value() > other_value

    def __ge__(self, other: Union["MutableNumber", Number]) -> bool:
        other_value = self._operand_value(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.get_value() >= other_value

    def __str__(self) -> str:
        return str(self.get_value())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_value()!r})"

    # ----- Factories -----

    @staticmethod
    def new_int(value: Any = 0, default: Any = None) -> "MutableInt":
        """
        Create a MutableInt.

        Accepts everything ``MutableInt(...)`` accepts, see that class for the
        conversion rules.
        """
        from objaide.mutable.mutable_int import MutableInt

        return MutableInt(value, default)
