"""Deep freezing of value graphs.

Records freeze in place. Builtin containers cannot, so they are replaced by
their read-only counterparts: lists and tuples become tuples, mappings become
MappingProxyType views and sets become frozensets.

Usage:
    rec = freeze_all(Record(a=Record(b=1), tags=["x"]))
    rec["a"]["b"] = 2         # AccessViolationError
    rec["tags"]               # ("x",)

    view = freeze_all({"a": {"b": 1}})
    view["a"]["b"] = 2        # TypeError
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import is_dataclass
from types import MappingProxyType
from typing import Any

from objectkit.core.kinds import (
    Kind,
    classify,
    get_own,
    is_decomposable,
    is_pydantic_model,
    own_keys,
)
from objectkit.descriptors import Record


def freeze_all(value: Any) -> Any:
    """Make a value graph deeply read-only, children before containers.

    Records, frozen dataclass instances and frozen Pydantic models are
    frozen in place and returned as the same reference. Other instances
    cannot be frozen: their nested values are frozen where that happens in
    place, and a UserWarning is emitted. Freezing an already frozen value
    returns it unchanged.

    Input graphs must be acyclic.

    Args:
        value: Value to freeze.

    Returns:
        The frozen value: the same object where it can be frozen in place,
        otherwise its read-only counterpart.
    """
    kind = classify(value)

    if kind is Kind.ARRAY:
        items = tuple(freeze_all(item) for item in value)
        if isinstance(value, tuple) and all(a is b for a, b in zip(items, value, strict=True)):
            return value
        return items

    if kind is not Kind.OBJECT:
        return value

    if isinstance(value, Record):
        return value.freeze(freeze_all)

    if isinstance(value, Mapping):
        frozen = {key: freeze_all(item) for key, item in value.items()}
        if isinstance(value, MappingProxyType) and all(frozen[k] is value[k] for k in frozen):
            return value
        return MappingProxyType(frozen)

    if isinstance(value, set):
        return frozenset(freeze_all(item) for item in value)

    if _is_frozen_instance(value):
        for key in own_keys(value):
            # Fields are already unassignable; only their contents are deepened
            object.__setattr__(value, key, freeze_all(get_own(value, key)))
        return value

    if is_decomposable(value):
        for key in own_keys(value):
            # Records and frozen instances below still freeze in place
            freeze_all(get_own(value, key))
        warnings.warn(
            f"freeze_all() cannot freeze {type(value).__name__} instances. "
            f"Use a Record, a frozen dataclass or a frozen Pydantic model. "
            f"Nested values that freeze in place were frozen; the instance itself "
            f"was returned unchanged.",
            stacklevel=2,
        )
    return value


def _is_frozen_instance(value: Any) -> bool:
    """Check if value is a frozen dataclass or frozen Pydantic model instance."""
    if is_dataclass(value):
        return bool(type(value).__dataclass_params__.frozen)  # type: ignore[attr-defined]
    if is_pydantic_model(value):
        return bool(type(value).model_config.get("frozen", False))
    return False


def is_frozen(value: Any) -> bool:
    """Check if a value graph is deeply read-only.

    Args:
        value: Value to inspect.

    Returns:
        True for scalars, None, frozen Records, tuples, MappingProxyType views,
        frozensets, frozen dataclasses and frozen Pydantic models whose
        reachable values are all frozen.
    """
    kind = classify(value)

    if kind in (Kind.SCALAR, Kind.NULL):
        return True
    if kind is Kind.ARRAY:
        return isinstance(value, tuple) and all(is_frozen(item) for item in value)
    if kind is Kind.FUNCTION:
        return False

    if isinstance(value, Record):
        return value.is_frozen() and all(is_frozen(value[key]) for key in value)
    if isinstance(value, MappingProxyType):
        return all(is_frozen(item) for item in value.values())
    if isinstance(value, frozenset):
        return all(is_frozen(item) for item in value)
    if _is_frozen_instance(value):
        return all(is_frozen(get_own(value, key)) for key in own_keys(value))
    return False
