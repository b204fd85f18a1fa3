"""
Cloning dispatcher for duplicable objects.

**Conceptual**: ``clone(obj)`` answers "give me an independent copy of this,
if the object says it can be copied". Objects opt in by being a
``Duplicable`` (subclass, or a type registered with ``Duplicable.register``)
and providing a zero-argument ``duplicate()`` method. Mutable arrays are
always duplicable and are copied here directly.

**Dispatch order**:
  1. None → None.
  2. Not duplicable → None (``clone``) or the object itself
     (``clone_if_possible``).
  3. list / object-dtype numpy array → new container, same element references.
  4. bytearray / array.array / numeric numpy array → new backing store,
     element values copied.
  Array copies keep the concrete type (list subclasses, MaskedArray).
  5. Anything else → ``obj.duplicate()``.

Every failure in step 5 is raised as a ``CloneFailedError`` subclass with the
underlying exception chained as ``__cause__``.
"""

import copy
from abc import ABC
from typing import Any, Optional, TypeVar

import numpy as np

from objaide.utils.arrays import is_array

T = TypeVar("T")

DUPLICATE_METHOD = "duplicate"


class Duplicable(ABC):
    """
    Capability marker for objects that can be cloned with ``clone()``.

    **Contract**: a Duplicable provides ``duplicate(self) -> Self`` returning an
    independent copy. The marker itself declares no abstract method, so a type
    can be registered for a method it only gains later (or never); ``clone``
    reports that as ``CloneMethodMissingError``.

    Setting ``duplicate = None`` on a subclass withdraws the operation
    explicitly; ``clone`` reports that as ``CloneAccessDeniedError``.

    **Usage**:
        class Point(Duplicable):
            def __init__(self, x, y):
                self.x, self.y = x, y

            def duplicate(self):
                return Point(self.x, self.y)

        Duplicable.register(SomeThirdPartyType)  # opt in without subclassing
    """
    __slots__ = ()


class CloneFailedError(Exception):
    """
    Base exception for clone failures.

    **Conceptual**: Callers catch CloneFailedError to handle every way a
    ``duplicate()`` dispatch can go wrong; the subclass and ``__cause__`` tell
    them which one.
    """
    pass


class CloneMethodMissingError(CloneFailedError):
    """
    Raised when a Duplicable object has no ``duplicate`` attribute.

    **Recovery**: Implement ``duplicate()`` on the type, or stop registering it
    as Duplicable.
    """
    pass


class CloneAccessDeniedError(CloneFailedError):
    """
    Raised when ``duplicate`` exists but cannot be called.

    Covers ``duplicate = None`` opt-outs, non-callable attributes and
    attribute lookups that raise PermissionError.
    """
    pass


class CloneInvocationError(CloneFailedError):
    """
    Raised when ``duplicate()`` itself raised, or looking it up raised.

    Covers a ``duplicate`` property whose getter fails. The original exception
    is chained as ``__cause__``.
    """
    pass


def is_duplicable(obj: Any) -> bool:
    """Return True if ``clone`` would attempt to copy obj."""
    return is_array(obj) or isinstance(obj, Duplicable)


def _copy_array(array: Any) -> Any:
    # ndarray.copy and copy.copy keep the concrete type, so subclasses such as
    # MaskedArray (and its mask) or a list subclass survive the copy.
    if isinstance(array, np.ndarray):
        return array.copy()
    return copy.copy(array)


def _invoke_duplicate(obj: Any) -> Any:
    type_name = type(obj).__qualname__
    try:
        method = getattr(obj, DUPLICATE_METHOD)
    except AttributeError as e:
        raise CloneMethodMissingError(
            f"{type_name} is Duplicable but has no {DUPLICATE_METHOD}() method"
        ) from e
    except PermissionError as e:
        raise CloneAccessDeniedError(
            f"Access to {type_name}.{DUPLICATE_METHOD}() was denied"
        ) from e
    except Exception as e:
        raise CloneInvocationError(
            f"Looking up {type_name}.{DUPLICATE_METHOD} raised {type(e).__name__}: {e}"
        ) from e

    if not callable(method):
        raise CloneAccessDeniedError(
            f"{type_name}.{DUPLICATE_METHOD} is not callable (got {method!r})"
        )

    try:
        return method()
    except Exception as e:
        raise CloneInvocationError(
            f"{type_name}.{DUPLICATE_METHOD}() raised {type(e).__name__}: {e}"
        ) from e


def clone(obj: Optional[T]) -> Optional[T]:
    """
    Clone an object if it is duplicable.

    **Functionally**:
    - None → None.
    - Non-duplicable objects → None (use ``clone_if_possible`` to get the
      original back instead).
    - Lists and object-dtype numpy arrays → shallow copy: a new container
      holding the same element references.
    - bytearray, array.array and numeric numpy arrays → new backing store with
      the element values copied; mutating the copy leaves the original alone.
    - Duplicable objects → result of ``obj.duplicate()``.

    Args:
        obj: Object to clone, may be None.

    Returns:
        The clone, or None if obj is None or not duplicable.

    Raises:
        CloneMethodMissingError: obj is Duplicable but has no ``duplicate``.
        CloneAccessDeniedError: ``duplicate`` is not callable or lookup was denied.
        CloneInvocationError: ``duplicate()`` or its lookup raised.

    Examples:
        >>> original = np.array([1, 2, 3])
        >>> cloned = clone(original)
        >>> cloned[0] = 99
        >>> original[0]
        1
    """
    if obj is None or not is_duplicable(obj):
        return None
    if is_array(obj):
        return _copy_array(obj)
    return _invoke_duplicate(obj)


def clone_if_possible(obj: T) -> T:
    """
    Clone an object if it is duplicable, otherwise return it unchanged.

    Unlike ``clone``, a non-duplicable object comes back as the very same
    reference, never None. Errors raised by a Duplicable's ``duplicate()``
    propagate exactly as they do from ``clone``.
    """
    cloned = clone(obj)
    return obj if cloned is None else cloned
