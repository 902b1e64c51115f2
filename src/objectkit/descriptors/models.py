"""Descriptor models: access levels, slot descriptors and the slot target protocol."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import IntFlag
from typing import Any, Protocol, Self, runtime_checkable


class AccessLevel(IntFlag):
    """Visibility and mutability bits of a single named slot.

    The three bits are independent; the named presets fix the eight
    combinations under the names used by the define_* helpers.
    """

    WRITABLE = 0b001  # value can be reassigned
    ENUMERABLE = 0b010  # slot shows up in iteration and len()
    CONFIGURABLE = 0b100  # slot can be deleted or redefined

    READ_ONLY_HIDDEN = 0  # hidden, fixed, non deletable
    WRITABLE_HIDDEN = 0b001  # hidden, modifiable, non deletable
    READ_ONLY = 0b010  # shown, fixed, non deletable
    NON_DELETABLE = 0b011  # shown, modifiable, non deletable
    DELETABLE_HIDDEN = 0b100  # hidden, fixed, deletable
    HIDDEN_NORMAL = 0b101  # hidden, modifiable, deletable
    FIXED_DELETABLE = 0b110  # shown, fixed, deletable
    NORMAL = 0b111  # shown, modifiable, deletable

    @classmethod
    def parse(cls, level: int | AccessLevel) -> AccessLevel:
        """Validate an integer level and convert it to an AccessLevel.

        Args:
            level: Integer in 0..7 or an AccessLevel.

        Returns:
            The matching AccessLevel.

        Raises:
            TypeError: If level is not an integer.
            ValueError: If level is outside 0..7.
        """
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"Access level must be an int, got {type(level).__name__}")
        if not 0 <= level <= 0b111:
            raise ValueError(f"Access level must be in 0..7, got {level}")
        return cls(level)

    @classmethod
    def of(cls, *, writable: bool, enumerable: bool, configurable: bool) -> AccessLevel:
        """Encode the three flags into a level."""
        level = cls(0)
        if writable:
            level |= cls.WRITABLE
        if enumerable:
            level |= cls.ENUMERABLE
        if configurable:
            level |= cls.CONFIGURABLE
        return level

    @property
    def writable(self) -> bool:
        return bool(self & AccessLevel.WRITABLE)

    @property
    def enumerable(self) -> bool:
        return bool(self & AccessLevel.ENUMERABLE)

    @property
    def configurable(self) -> bool:
        return bool(self & AccessLevel.CONFIGURABLE)


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Complete description of one named slot.

    A descriptor is either a data descriptor (value + writable) or an accessor
    descriptor (get and/or set). Accessor descriptors ignore `writable`.
    The getter takes no arguments; the setter takes the assigned value.
    """

    value: Any = None
    get: Callable[[], Any] | None = None
    set: Callable[[Any], None] | None = None
    writable: bool = False
    enumerable: bool = False
    configurable: bool = False

    def __post_init__(self) -> None:
        if self.is_accessor and (self.value is not None or self.writable):
            raise TypeError("Descriptor cannot define both accessors and a value/writable flag")

    @classmethod
    def from_level(cls, value: Any, level: int | AccessLevel = 0) -> PropertyDescriptor:
        """Build a data descriptor from a value and an access level.

        Args:
            value: Slot value.
            level: Integer 0..7 combining WRITABLE, ENUMERABLE and CONFIGURABLE.

        Returns:
            Data descriptor with the decoded flags.
        """
        parsed = AccessLevel.parse(level)
        return cls(
            value=value,
            writable=parsed.writable,
            enumerable=parsed.enumerable,
            configurable=parsed.configurable,
        )

    @classmethod
    def coerce(cls, descriptor: PropertyDescriptor | Mapping[str, Any]) -> PropertyDescriptor:
        """Accept a descriptor or a keyword mapping of descriptor fields."""
        if isinstance(descriptor, PropertyDescriptor):
            return descriptor
        return cls(**descriptor)

    @property
    def is_accessor(self) -> bool:
        return self.get is not None or self.set is not None

    @property
    def access_level(self) -> AccessLevel:
        """Level encoded from the three flags (accessors report as non-writable)."""
        return AccessLevel.of(
            writable=self.writable and not self.is_accessor,
            enumerable=self.enumerable,
            configurable=self.configurable,
        )

    def with_value(self, value: Any) -> Self:
        """Return a copy of this data descriptor holding a different value."""
        return replace(self, value=value)

    def sealed(self) -> Self:
        """Return a copy that can no longer be reassigned, deleted or redefined."""
        if self.is_accessor:
            return replace(self, configurable=False)
        return replace(self, writable=False, configurable=False)


@runtime_checkable
class SlotTarget(Protocol):
    """Object whose named slots carry property descriptors."""

    def define_own_slot(self, name: str, descriptor: PropertyDescriptor) -> None: ...
    def get_own_slot(self, name: str) -> PropertyDescriptor | None: ...
    def has_own_slot(self, name: str) -> bool: ...
    def own_slot_names(self) -> Iterator[str]: ...
