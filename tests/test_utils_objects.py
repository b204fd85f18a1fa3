"""
Tests for objaide/utils/objects.py

These tests verify the null checks, emptiness checks, null-safe equality and
the NULL placeholder.
"""

import copy
import pickle

import numpy as np
import pandas as pd

from objaide.utils.objects import (
    Null,
    all_equals,
    all_non_null,
    all_null,
    any_non_null,
    any_null,
    deep_equals,
    default_if_null,
    equals,
    first_non_null,
    hash_code,
    hash_values,
    identity_string,
    is_empty,
    is_not_empty,
    is_not_null,
    is_null,
    not_deep_equals,
    not_equals,
    to_string,
)


def test_is_null_and_is_not_null():
    """Test the single-value null checks."""
    assert is_null(None)
    assert not is_null(0)
    assert is_not_null("")
    assert not is_not_null(None)


def test_first_non_null():
    """Test that the first non-None value is returned."""
    assert first_non_null(None, 0, 1) == 0
    assert first_non_null(None, None) is None
    assert first_non_null() is None


def test_any_and_all_null_boundaries():
    """Test the variadic null checks, including the no-argument case."""
    assert any_null()
    assert any_null(1, None)
    assert not any_null(1, 2)

    assert not any_non_null()
    assert any_non_null(None, 1)
    assert not any_non_null(None, None)

    assert all_null()
    assert all_null(None, None)
    assert not all_null(None, 1)

    assert not all_non_null()
    assert all_non_null(1, "a")
    assert not all_non_null(1, None)


def test_is_empty_builtin_types():
    """Test emptiness for strings and builtin containers."""
    assert is_empty(None)
    assert is_empty("")
    assert is_empty([])
    assert is_empty(())
    assert is_empty({})
    assert is_empty(set())
    assert is_empty(b"")
    assert not is_empty(" ")
    assert not is_empty([None])
    assert not is_empty({"k": None})


def test_is_empty_numpy_and_pandas():
    """Test emptiness for numpy arrays and pandas objects."""
    assert is_empty(np.array([]))
    assert is_empty(np.zeros((3, 0)))
    assert not is_empty(np.array(5))
    assert not is_empty(np.zeros(2))

    assert is_empty(pd.Series(dtype=float))
    assert is_empty(pd.DataFrame())
    assert not is_empty(pd.Series([1.0]))


def test_is_empty_unsupported_types_are_not_empty():
    """Test that values without a length are never empty."""
    assert not is_empty(0)
    assert not is_empty(False)
    assert not is_empty(object())
    assert is_not_empty(0)


def test_equals_is_null_safe():
    """Test null-safe equality."""
    assert equals(None, None)
    assert not equals(None, 0)
    assert not equals(0, None)
    assert equals(1, 1.0)
    assert not_equals("a", "b")


def test_all_equals():
    """Test adjacent-pair equality across several values."""
    assert all_equals()
    assert all_equals(1)
    assert all_equals(2, 2, 2)
    assert all_equals(None, None)
    assert not all_equals(2, 2, 3)


def test_equals_numpy_arrays_and_pandas():
    """Test that arrays and pandas objects give a single bool from equals."""
    assert equals(np.array([1, 2]), np.array([1, 2]))
    assert not equals(np.array([1, 2]), np.array([1, 3]))
    assert not equals(np.array([1, 2]), [1, 2])
    assert equals(pd.Series([1, 2]), pd.Series([1, 2]))
    assert not equals(pd.Series([1, 2]), pd.Series([2, 1]))
    assert not equals(1, pd.Series([1]))
    assert not equals(pd.Series([1]), 1)
    assert not_equals(np.array([1]), None)
    assert all_equals(np.zeros(3), np.zeros(3), np.zeros(3))
    assert not all_equals(pd.Series([1]), pd.Series([1]), pd.Series([2]))


def test_deep_equals_numpy_arrays():
    """Test that arrays compare as a whole, not element-wise."""
    assert deep_equals(np.array([1, 2]), np.array([1, 2]))
    assert not deep_equals(np.array([1, 2]), np.array([1, 3]))
    assert not deep_equals(np.array([1, 2]), np.array([[1, 2]]))
    assert not deep_equals(np.array([1, 2]), [1, 2])


def test_deep_equals_nested_containers():
    """Test recursive comparison through lists, tuples and dicts."""
    left = {"a": [np.array([1, 2]), (3, None)]}
    right = {"a": [np.array([1, 2]), (3, None)]}
    assert deep_equals(left, right)

    right["a"][1] = (3, 4)
    assert not_deep_equals(left, right)
    assert not deep_equals([1, 2], (1, 2))
    assert not deep_equals({"a": 1}, {"b": 1})


def test_deep_equals_pandas():
    """Test that pandas objects use .equals."""
    assert deep_equals(pd.Series([1, 2]), pd.Series([1, 2]))
    assert not deep_equals(pd.Series([1, 2]), pd.Series([2, 1]))
    assert not deep_equals(pd.Series([1, 2]), [1, 2])
    assert not deep_equals([1, 2], pd.Series([1, 2]))
    assert not deep_equals(pd.Series([1, 2]), pd.DataFrame({"a": [1, 2]}))


def test_hash_code_and_hash_values():
    """Test null-safe hashing."""
    assert hash_code(None) == 0
    assert hash_code("x") == hash("x")
    assert hash_values(1, "a", None) == hash_values(1, "a", None)
    assert hash_values(1, 2) == hash((1, 2))


def test_to_string():
    """Test string conversion with and without a None default."""
    assert to_string(12) == "12"
    assert to_string(None) == "None"
    assert to_string(None, "n/a") == "n/a"
    assert to_string("", "n/a") == ""


def test_identity_string():
    """Test identity text ignores custom __str__ and handles None."""
    class Loud:
        def __str__(self):
            return "LOUD"

    obj = Loud()
    text = identity_string(obj)

    assert identity_string(None) is None
    assert text.endswith(f"@{id(obj):x}")
    assert "Loud" in text
    assert identity_string("").startswith("builtins.str@")


def test_default_if_null():
    """Test defaulting only replaces None."""
    assert default_if_null(None, 5) == 5
    assert default_if_null(0, 5) == 0
    assert default_if_null("", "x") == ""


def test_null_placeholder_is_singleton():
    """Test that NULL keeps its identity through copy and pickle."""
    assert copy.copy(Null.NULL) is Null.NULL
    assert copy.deepcopy(Null.NULL) is Null.NULL
    assert pickle.loads(pickle.dumps(Null.NULL)) is Null.NULL
    assert list(Null) == [Null.NULL]


def test_null_placeholder_distinguishes_missing_key():
    """Test the placeholder separates 'maps to None' from 'missing'."""
    store = {"present": Null.NULL}

    assert store.get("present") is Null.NULL
    assert store.get("missing") is None
    assert not Null.NULL
    assert repr(Null.NULL) == "Null.NULL"
