"""Property definition helpers built on a single access-level primitive.

Every helper mutates the target in place and returns the same object.

Usage:
    rec = Record()
    define_property(rec, "id", 7, AccessLevel.READ_ONLY)
    define_read_only_property(rec, "id", 8)        # ignored, first writer wins
    define_getter_only_property(rec, "now", time.time)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from objectkit.descriptors.models import AccessLevel, PropertyDescriptor, SlotTarget

T = TypeVar("T")


def _as_target(obj: Any) -> SlotTarget:
    if not isinstance(obj, SlotTarget):
        raise TypeError(
            f"{type(obj).__name__} does not support slot descriptors. "
            f"Use a Record or implement the SlotTarget protocol."
        )
    return obj


def _is_locked(obj: SlotTarget, name: str) -> bool:
    """Check if obj already owns a slot called name that cannot be reassigned."""
    descriptor = obj.get_own_slot(name)
    return descriptor is not None and (descriptor.is_accessor or not descriptor.writable)


def define_property(obj: T, name: str, value: Any, level: int | AccessLevel = 0) -> T:
    """Define a data slot whose flags are decoded from an access level.

    Level bits: WRITABLE=1, ENUMERABLE=2, CONFIGURABLE=4.

        0 -> hidden, fixed, non deletable
        1 -> hidden, modifiable, non deletable
        2 -> shown, fixed, non deletable
        3 -> shown, modifiable, non deletable
        4 -> hidden, fixed, deletable
        5 -> hidden, modifiable, deletable
        6 -> shown, fixed, deletable
        7 -> shown, modifiable, deletable

    Args:
        obj: Slot target to define the slot on.
        name: Slot name.
        value: Slot value.
        level: Integer 0..7 or AccessLevel.

    Returns:
        The same obj.

    Raises:
        TypeError: If obj is not a SlotTarget.
        ValueError: If level is outside 0..7.
        AccessViolationError: If an existing non-configurable slot forbids it.
    """
    target = _as_target(obj)
    target.define_own_slot(name, PropertyDescriptor.from_level(value, level))
    return obj


def define_property_if_absent(
    obj: T, name: str, descriptor: PropertyDescriptor | Mapping[str, Any]
) -> T:
    """Apply a descriptor only when obj has no own slot called name.

    Args:
        obj: Slot target.
        name: Slot name.
        descriptor: PropertyDescriptor or mapping of its fields
            (value, get, set, writable, enumerable, configurable).

    Returns:
        The same obj, unchanged if the slot already existed.
    """
    target = _as_target(obj)
    if target.has_own_slot(name):
        return obj
    target.define_own_slot(name, PropertyDescriptor.coerce(descriptor))
    return obj


def define_read_only_hidden_property(obj: T, name: str, value: Any) -> T:
    return define_property(obj, name, value, AccessLevel.READ_ONLY_HIDDEN)


def define_getter_only_property(obj: T, name: str, value_getter: Callable[[], Any]) -> T:
    """Define a shown, non-configurable slot computed by value_getter.

    Assignments to the slot are accepted and discarded.
    """
    return define_property_if_absent(
        obj,
        name,
        PropertyDescriptor(
            get=value_getter,
            set=lambda _value: None,
            enumerable=True,
            configurable=False,
        ),
    )


def define_writable_hidden_property(obj: T, name: str, value: Any) -> T:
    return define_property(obj, name, value, AccessLevel.WRITABLE_HIDDEN)


def define_read_only_property(obj: T, name: str, value: Any) -> T:
    """Define a shown slot that cannot be modified or deleted.

    If obj already owns a slot called name that cannot be reassigned, obj is
    returned unchanged.
    """
    if _is_locked(_as_target(obj), name):
        return obj
    return define_property(obj, name, value, AccessLevel.READ_ONLY)


def define_non_deletable_normal_property(obj: T, name: str, value: Any) -> T:
    """Define a shown, modifiable slot that cannot be deleted.

    Leaves obj unchanged if it already owns a read-only slot called name.
    """
    if _is_locked(_as_target(obj), name):
        return obj
    return define_property(obj, name, value, AccessLevel.NON_DELETABLE)


def define_deletable_descriptor(obj: T, name: str, value: Any) -> T:
    return define_property(obj, name, value, AccessLevel.DELETABLE_HIDDEN)


def define_hidden_normal_property(obj: T, name: str, value: Any) -> T:
    return define_property(obj, name, value, AccessLevel.HIDDEN_NORMAL)


def define_fixed_deletable_property(obj: T, name: str, value: Any) -> T:
    return define_property(obj, name, value, AccessLevel.FIXED_DELETABLE)


def define_normal_property(obj: T, name: str, value: Any) -> T:
    return define_property(obj, name, value, AccessLevel.NORMAL)
