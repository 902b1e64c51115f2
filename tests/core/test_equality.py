"""Tests for deep equality.

Critical Invariants:
- Different dynamic types are never equal
- Objects compare by key set, not key order
- A superset object never equals its subset (in either order)
- Functions are equal only by identity
"""

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from objectkit import UNDEFINED, BehaviorSettings, Record, deep_clone, deep_equal, define_property


class Status(Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class Account:
    def __init__(self, balance):
        self._balance = balance


json_like = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text() | st.floats(allow_nan=False),
    lambda children: (
        st.lists(children, max_size=4) | st.dictionaries(st.text(), children, max_size=4)
    ),
    max_leaves=20,
)


def test_kind_mismatch_short_circuits():
    assert not deep_equal(1, "1")
    assert not deep_equal([], {})
    assert not deep_equal({}, [])
    assert not deep_equal(None, {})
    assert not deep_equal(True, 1), "bool and number are different dynamic types"


def test_scalars_compare_by_value():
    assert deep_equal(1, 1.0)
    assert deep_equal("abc", "abc")
    assert deep_equal(10**40, 10**40)
    assert deep_equal(UNDEFINED, UNDEFINED)
    assert deep_equal(None, None)
    assert not deep_equal(UNDEFINED, None)


def test_nan_is_not_equal_to_itself_unless_identical():
    nan = float("nan")
    assert deep_equal(nan, nan)
    assert not deep_equal(float("nan"), float("nan"))


def test_nested_arrays():
    assert deep_equal([1, [2, 3]], [1, [2, 3]])
    assert not deep_equal([1, 2], [1, 2, 3])
    assert not deep_equal([1, [2, 3]], [1, [3, 2]])
    assert deep_equal((1, 2), [1, 2]), "tuples and lists are both arrays"


def test_nested_objects():
    assert deep_equal({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}})
    assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert not deep_equal({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}})
    assert not deep_equal({"a": 1}, {"b": 1})
    assert deep_equal({}, {})


def test_superset_never_equals_subset():
    """CRITICAL: Key count is compared, not just per-key presence.

    Why: Scanning only the left operand's keys accepts {a:1} == {a:1, b:2}.
    """
    assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
    assert not deep_equal({"a": 1, "b": 2}, {"a": 1})


def test_legacy_key_count_reproduces_subset_asymmetry():
    legacy = BehaviorSettings(legacy_key_count=True)

    assert deep_equal({"a": 1}, {"a": 1, "b": 2}, settings=legacy)
    assert not deep_equal({"a": 1, "b": 2}, {"a": 1}, settings=legacy)


def test_legacy_key_count_from_environment(env_settings):
    env_settings(legacy_key_count=True)

    assert deep_equal({"a": 1}, {"a": 1, "b": 2})


def test_functions_equal_only_by_identity():
    def f():
        return 1

    def g():
        return 1

    assert deep_equal(f, f)
    assert not deep_equal(f, g)
    assert not deep_equal({"cb": f}, {"cb": g})


def test_records_compare_by_enumerable_slots():
    rec = Record(a=1)
    define_property(rec, "hidden", "x", 0)

    assert deep_equal(rec, {"a": 1})
    assert deep_equal(Record(a=[1, 2]), Record(a=[1, 2]))


def test_instances_compare_by_own_keys():
    @dataclass
    class Point:
        x: int
        y: list

    assert deep_equal(Point(1, [2]), Point(1, [2]))
    assert not deep_equal(Point(1, [2]), Point(1, [3]))


def test_opaque_objects_fall_back_to_equality():
    assert deep_equal(datetime.date(2024, 1, 1), datetime.date(2024, 1, 1))
    assert not deep_equal(datetime.date(2024, 1, 1), datetime.date(2024, 1, 2))
    assert deep_equal({1, 2}, {2, 1})


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (Decimal(1), 1, True),
        (Decimal("1.5"), 1.5, True),
        (Fraction(1, 2), 0.5, True),
        (Decimal("1.5"), Decimal("2.5"), False),
        (Decimal(1), True, False),
    ],
)
def test_numeric_types_compare_as_numbers(a, b, expected):
    assert deep_equal(a, b) is expected
    assert deep_equal({"price": a}, {"price": b}) is expected


def test_enum_members_compare_by_identity():
    """CRITICAL: Distinct Enum members are never equal.

    Why: Members keep their state in private attributes, so walking their
    public keys would find nothing to compare.
    """
    assert deep_equal(Status.ACTIVE, Status.ACTIVE)
    assert not deep_equal(Status.ACTIVE, Status.DELETED)
    assert not deep_equal({"s": Status.ACTIVE}, {"s": Status.DELETED})


def test_private_state_objects_fall_back_to_equality():
    account = Account(1)

    assert deep_equal(account, account)
    assert not deep_equal(Account(1), Account(2))
    assert not deep_equal([Account(1)], [Account(1)])


@given(json_like)
def test_value_equals_its_clone(value):
    """PROPERTY: deep_equal(v, deep_clone(v)) for acyclic, function-free values."""
    assert deep_equal(value, deep_clone(value))


@given(json_like, json_like)
def test_equality_is_symmetric(a, b):
    """PROPERTY: With the corrected key count, operand order never matters."""
    assert deep_equal(a, b) == deep_equal(b, a)
