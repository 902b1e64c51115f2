"""Deep structural equality.

Usage:
    deep_equal([1, [2, 3]], [1, [2, 3]])         # True
    deep_equal({"a": 1}, {"a": 1, "b": 2})       # False
    deep_equal(1, "1")                           # False
"""

from __future__ import annotations

from typing import Any

from objectkit.config import BehaviorSettings, get_settings
from objectkit.core.kinds import Kind, classify, get_own, is_decomposable, own_keys, typeof


def deep_equal(a: Any, b: Any, *, settings: BehaviorSettings | None = None) -> bool:
    """Compare two values for structural equivalence.

    Values of different dynamic types are never equal. Scalars compare by
    value, functions by identity only, arrays element-wise in order and
    objects key-by-key regardless of key order. list and tuple both count
    as arrays; mappings, Records and instances all count as objects.

    Input graphs must be acyclic.

    Args:
        a: First value.
        b: Second value.
        settings: Overrides the process-wide settings for this call.

    Returns:
        True if a and b are structurally equivalent.
    """
    legacy_key_count = (settings or get_settings()).legacy_key_count
    return _deep_equal(a, b, legacy_key_count)


def _deep_equal(a: Any, b: Any, legacy_key_count: bool) -> bool:
    if typeof(a) != typeof(b):
        return False

    if a is b:
        return True

    kind_a, kind_b = classify(a), classify(b)

    if kind_a is Kind.SCALAR:
        return bool(a == b)

    if kind_a is Kind.ARRAY or kind_b is Kind.ARRAY:
        if kind_a is not kind_b:
            return False
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, legacy_key_count) for x, y in zip(a, b, strict=True))

    if kind_a is Kind.OBJECT and kind_b is Kind.OBJECT:
        if not (is_decomposable(a) and is_decomposable(b)):
            # Opaque values (datetimes, sets, Enum members, ...) have no keys to walk
            return bool(a == b)
        return _objects_equal(a, b, legacy_key_count)

    # Distinct functions, or null against an object
    return False


def _objects_equal(a: Any, b: Any, legacy_key_count: bool) -> bool:
    a_keys = own_keys(a)
    b_keys = own_keys(b)

    if not legacy_key_count and len(a_keys) != len(b_keys):
        return False

    b_key_set = set(b_keys)
    for key in a_keys:
        if key not in b_key_set:
            return False
        if not _deep_equal(get_own(a, key), get_own(b, key), legacy_key_count):
            return False
    return True
