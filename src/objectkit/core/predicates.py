"""Key predicates and the JSON round-trip clone.

Usage:
    is_object({"a": 1})                          # True
    has_n_determined_keys({"a": 1, "b": 2}, 2, "a", "b")   # True
    json_clone({"a": (1, 2)})                    # {"a": [1, 2]}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from objectkit.core.kinds import Kind, Undefined, classify, get_own, is_decomposable, own_keys
from objectkit.descriptors import SlotTarget

T = TypeVar("T")


def is_not_array(obj: Any) -> bool:
    """Check if obj is anything but a list or tuple."""
    return classify(obj) is not Kind.ARRAY


def is_object(obj: Any) -> bool:
    """Check if obj is a plain object: not null, not an array, not a scalar or function."""
    return classify(obj) is Kind.OBJECT


def has_unique_key(obj: Any, key: Any = None) -> bool:
    """Check if obj has exactly one own key, optionally a specific one."""
    keys = own_keys(obj)
    return len(keys) == 1 and (key is None or keys[0] == key)


def has_n_keys(obj: Any, n: int) -> bool:
    """Check if obj is an object with exactly n own keys."""
    return is_object(obj) and len(own_keys(obj)) == n


def contains_keys(obj: Any, *keys: Any) -> bool:
    """Check if every key in keys is an own key of obj."""
    present = own_keys(obj)
    return all(key in present for key in keys)


def has_n_determined_keys(obj: Any, n: int, *keys: Any) -> bool:
    """Check if obj has exactly n own keys and they are exactly the given keys."""
    return has_n_keys(obj, n) and len(keys) == n and contains_keys(obj, *keys)


def has_own(obj: Any, name: Any) -> bool:
    """Check if obj owns name, hidden Record slots included.

    Args:
        obj: Any value.
        name: Key or attribute name.

    Returns:
        True if name is an own slot, mapping key or instance attribute.
    """
    if isinstance(obj, SlotTarget):
        return obj.has_own_slot(name)
    if isinstance(obj, Mapping):
        return name in obj
    if name in own_keys(obj):
        return True
    return is_object(obj) and hasattr(obj, "__dict__") and name in vars(obj)


def _json_ready(value: Any) -> Any:
    kind = classify(value)
    if kind is Kind.ARRAY:
        return [None if isinstance(item, Undefined) else _json_ready(item) for item in value]
    if kind is Kind.OBJECT and is_decomposable(value):
        ready: dict[Any, Any] = {}
        for key in own_keys(value):
            item = get_own(value, key)
            if not isinstance(item, Undefined):
                ready[key] = _json_ready(item)
        return ready
    if isinstance(value, Undefined):
        return None
    return value


def json_clone(value: T) -> T:
    """Clone a value by serializing it to JSON and parsing it back.

    Mappings, Records and instances come back as dicts of their own keys and
    tuples as lists. Keys holding UNDEFINED are dropped, while UNDEFINED array
    elements and a top-level UNDEFINED become None.

    Raises:
        TypeError: If the graph holds functions or other non-JSON values.
    """
    return json.loads(json.dumps(_json_ready(value)))  # type: ignore[no-any-return]
