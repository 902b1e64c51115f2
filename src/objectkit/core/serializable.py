"""Serializability check for value graphs.

Usage:
    is_serializable({"a": 1, "b": "x", "c": [1, 2, "y"]})   # True
    is_serializable({"a": lambda: None})                    # False
"""

from __future__ import annotations

from typing import Any

from objectkit.config import BehaviorSettings, get_settings
from objectkit.core.kinds import Kind, classify, get_own, is_decomposable, own_keys, typeof

_ACCEPTED_SCALARS = frozenset({"undefined", "boolean", "number", "string"})


def is_serializable(obj: Any, *, settings: BehaviorSettings | None = None) -> bool:
    """Check if every value reachable from obj fits a textual interchange format.

    Accepted leaves are real numbers, booleans, strings, None and UNDEFINED.
    A function anywhere in the graph fails the check, as do bytes, complex
    numbers and opaque objects. Arrays need every element to pass; nested
    objects need every one of their own values to pass.

    With `legacy_nested_serializable` enabled, a failing object stored
    directly under a key of another object is ignored. Array elements
    are always checked.

    Input graphs must be acyclic.

    Args:
        obj: Value to scan. Arrays and scalars are checked like nested values.
        settings: Overrides the process-wide settings for this call.

    Returns:
        True if the graph is serializable.
    """
    legacy = (settings or get_settings()).legacy_nested_serializable
    return _value_serializable(obj, legacy, nested_in_object=False)


def _keys_serializable(obj: Any, legacy: bool) -> bool:
    for key in own_keys(obj):
        if not _value_serializable(get_own(obj, key), legacy, nested_in_object=True):
            return False
    return True


def _value_serializable(value: Any, legacy: bool, nested_in_object: bool) -> bool:
    kind = classify(value)

    if kind is Kind.SCALAR:
        return typeof(value) in _ACCEPTED_SCALARS
    if kind is Kind.NULL:
        return True
    if kind is Kind.FUNCTION:
        return False
    if kind is Kind.ARRAY:
        return all(_value_serializable(item, legacy, nested_in_object=False) for item in value)

    if legacy and nested_in_object:
        return True
    return is_decomposable(value) and _keys_serializable(value, legacy)
