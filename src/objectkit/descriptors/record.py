"""Record: a plain object whose slots carry property descriptors.

Usage:
    rec = Record(a=1, b=2)
    rec["c"] = 3                      # new slots are fully open
    rec.define_own_slot("secret", PropertyDescriptor(value=42))
    list(rec)                         # ["a", "b", "c"] - hidden slots skipped
    "secret" in rec                   # True - membership sees every own slot
    rec.freeze()
    rec["a"] = 10                     # AccessViolationError
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any

from objectkit.config import get_settings
from objectkit.descriptors.models import AccessLevel, PropertyDescriptor


class AccessViolationError(Exception):
    """Raised when a slot write, delete or redefinition breaks its access level."""

    pass


class Record(MutableMapping[str, Any]):
    """Mutable mapping with per-slot writable / enumerable / configurable flags.

    Iteration, len() and equality only see enumerable slots. Rejected
    operations raise AccessViolationError, or are silently ignored when
    `strict_slots` is disabled in the settings.

    Args:
        data: Optional mapping or iterable of pairs to populate the record.
        **kwargs: Additional slots. All initial slots are fully open.
    """

    __slots__ = ("_slots", "_extensible")

    def __init__(
        self, data: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None, /, **kwargs: Any
    ) -> None:
        self._slots: dict[str, PropertyDescriptor] = {}
        self._extensible = True
        if data is not None:
            self.update(data)
        self.update(kwargs)

    # Mapping protocol

    def __getitem__(self, name: str) -> Any:
        descriptor = self._slots[name]
        if descriptor.is_accessor:
            return descriptor.get() if descriptor.get is not None else None
        return descriptor.value

    def __setitem__(self, name: str, value: Any) -> None:
        descriptor = self._slots.get(name)
        if descriptor is None:
            if not self._extensible:
                self._reject(f"Cannot add slot {name!r}: record is not extensible")
                return
            self._slots[name] = PropertyDescriptor.from_level(value, AccessLevel.NORMAL)
        elif descriptor.is_accessor:
            if descriptor.set is None:
                self._reject(f"Cannot assign slot {name!r}: accessor has no setter")
                return
            descriptor.set(value)
        elif not descriptor.writable:
            self._reject(f"Cannot assign slot {name!r}: slot is read-only")
        else:
            self._slots[name] = descriptor.with_value(value)

    def __delitem__(self, name: str) -> None:
        descriptor = self._slots[name]
        if not descriptor.configurable:
            self._reject(f"Cannot delete slot {name!r}: slot is not configurable")
            return
        del self._slots[name]

    def __iter__(self) -> Iterator[str]:
        return iter([name for name, d in self._slots.items() if d.enumerable])

    def __len__(self) -> int:
        return sum(1 for d in self._slots.values() if d.enumerable)

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def clear(self) -> None:
        """Delete every enumerable slot, subject to the usual delete rules."""
        for name in list(self):
            del self[name]

    # Slot protocol

    def define_own_slot(self, name: str, descriptor: PropertyDescriptor) -> None:
        """Create or redefine a slot.

        A non-configurable slot only accepts redefinitions that keep it
        non-configurable, keep its enumerability and kind (data or accessor),
        and, when read-only, keep its value and its read-only flag. A
        writable non-configurable slot may change value or become read-only.

        Args:
            name: Slot name.
            descriptor: Complete descriptor for the slot.

        Raises:
            AccessViolationError: If the redefinition is not allowed (strict mode).
        """
        current = self._slots.get(name)
        if current is None:
            if not self._extensible:
                self._reject(f"Cannot define slot {name!r}: record is not extensible")
                return
        elif not current.configurable:
            problem = _redefinition_problem(current, descriptor)
            if problem:
                self._reject(f"Cannot redefine slot {name!r}: {problem}")
                return
        self._slots[name] = descriptor

    def get_own_slot(self, name: str) -> PropertyDescriptor | None:
        """Return the descriptor of an own slot, hidden or not."""
        return self._slots.get(name)

    def has_own_slot(self, name: str) -> bool:
        return name in self._slots

    def own_slot_names(self) -> Iterator[str]:
        """Iterate over every own slot name, hidden slots included."""
        return iter(list(self._slots))

    # Extensibility

    def prevent_extensions(self) -> Record:
        self._extensible = False
        return self

    def is_extensible(self) -> bool:
        return self._extensible

    def freeze(self, transform: Callable[[Any], Any] | None = None) -> Record:
        """Make every slot read-only and non-configurable and stop new slots.

        Args:
            transform: Optional function applied to the value of every
                enumerable data slot before it is sealed (used for deep freezing).

        Returns:
            This record.
        """
        for name, descriptor in self._slots.items():
            if transform is not None and descriptor.enumerable and not descriptor.is_accessor:
                descriptor = descriptor.with_value(transform(descriptor.value))
            self._slots[name] = descriptor.sealed()
        self._extensible = False
        return self

    def is_frozen(self) -> bool:
        if self._extensible:
            return False
        return all(
            not d.configurable and (d.is_accessor or not d.writable) for d in self._slots.values()
        )

    def _reject(self, message: str) -> None:
        if get_settings().strict_slots:
            raise AccessViolationError(message)


def _redefinition_problem(current: PropertyDescriptor, new: PropertyDescriptor) -> str | None:
    """Explain why a non-configurable slot cannot take a new descriptor, or None."""
    if new.configurable:
        return "cannot become configurable"
    if new.enumerable != current.enumerable:
        return "cannot change enumerability"
    if new.is_accessor != current.is_accessor:
        return "cannot switch between data and accessor"
    if current.is_accessor:
        if new.get is not current.get or new.set is not current.set:
            return "cannot replace accessors"
        return None
    if not current.writable:
        if new.writable:
            return "cannot become writable"
        if not (new.value is current.value or new.value == current.value):
            return "cannot change a read-only value"
    return None
