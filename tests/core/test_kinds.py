"""Tests for kind classification and own-key access.

Critical Invariants:
- Classification is total: every value gets exactly one Kind
- None and arrays never classify as generic objects
- Own keys follow the visibility rules of each object flavour
"""

import datetime
import functools
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from objectkit import UNDEFINED, Kind, Record, Undefined, classify, define_property, own_keys, typeof
from objectkit.core.kinds import get_own, is_decomposable


class Status(Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class Account:
    def __init__(self, balance):
        self._balance = balance


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (1, Kind.SCALAR),
        (1.5, Kind.SCALAR),
        (True, Kind.SCALAR),
        ("s", Kind.SCALAR),
        (b"s", Kind.SCALAR),
        (10**40, Kind.SCALAR),
        (UNDEFINED, Kind.SCALAR),
        (None, Kind.NULL),
        ([], Kind.ARRAY),
        ((1, 2), Kind.ARRAY),
        ({}, Kind.OBJECT),
        (Record(), Kind.OBJECT),
        (datetime.date(2024, 1, 1), Kind.OBJECT),
        (len, Kind.FUNCTION),
        (lambda: None, Kind.FUNCTION),
        (functools.partial(int, "1"), Kind.FUNCTION),
        (dict, Kind.FUNCTION),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


@given(
    st.recursive(
        st.none() | st.booleans() | st.integers() | st.floats() | st.text(),
        lambda children: st.lists(children) | st.dictionaries(st.text(), children),
    )
)
def test_classification_is_total(value):
    """PROPERTY: Every value maps to exactly one Kind."""
    assert isinstance(classify(value), Kind)


@pytest.mark.parametrize(
    ("value", "name"),
    [
        (UNDEFINED, "undefined"),
        (False, "boolean"),
        (0, "number"),
        (0.5, "number"),
        (Decimal("1.5"), "number"),
        (Fraction(1, 3), "number"),
        (2j, "complex"),
        ("", "string"),
        (b"", "bytes"),
        (print, "function"),
        (None, "object"),
        ([], "object"),
        ({}, "object"),
    ],
)
def test_typeof(value, name):
    assert typeof(value) == name


def test_bool_and_int_report_different_types():
    """Python treats True == 1; dynamic typing must still tell them apart."""
    assert typeof(True) != typeof(1)


def test_undefined_is_a_falsy_singleton():
    assert Undefined() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"


def test_own_keys_of_mapping_keeps_order():
    assert own_keys({"b": 1, "a": 2}) == ["b", "a"]


def test_own_keys_of_record_skips_hidden_slots():
    rec = Record(a=1)
    define_property(rec, "hidden", 2, 0)

    assert own_keys(rec) == ["a"]


def test_own_keys_of_dataclass_and_pydantic_model():
    @dataclass
    class Point:
        x: int
        y: int

    class User(BaseModel):
        name: str
        age: int

    assert own_keys(Point(1, 2)) == ["x", "y"]
    assert own_keys(User(name="a", age=3)) == ["name", "age"]


def test_own_keys_of_plain_instance_skips_private_attributes():
    class Thing:
        def __init__(self):
            self.visible = 1
            self._private = 2

    thing = Thing()

    assert own_keys(thing) == ["visible"]
    assert get_own(thing, "visible") == 1


def test_opaque_and_non_object_values_have_no_keys():
    assert own_keys(datetime.date(2024, 1, 1)) == []
    assert own_keys([1, 2]) == []
    assert own_keys("abc") == []
    assert not is_decomposable(datetime.date(2024, 1, 1))
    assert not is_decomposable(None)


@pytest.mark.parametrize(
    "value",
    [Status.ACTIVE, Account(10), datetime.date(2024, 1, 1)],
    ids=["enum-member", "private-state", "date"],
)
def test_objects_without_public_state_are_opaque(value):
    """CRITICAL: Objects exposing no public keys are not decomposable.

    Why: An empty key list would make any two such objects walk as equal
    and pass the serializability scan.
    """
    assert classify(value) is Kind.OBJECT
    assert not is_decomposable(value)
    assert own_keys(value) == []


def test_decimal_and_fraction_are_scalars():
    assert classify(Decimal("2.5")) is Kind.SCALAR
    assert classify(Fraction(1, 2)) is Kind.SCALAR
    assert not is_decomposable(Decimal("2.5"))
