"""Descriptor access-control model: access levels, Records and define_* helpers.

Architecture Note:
    descriptors/ mutates a single object in place and never imports core/.
    core/ reads Records through the plain Mapping protocol.
"""

from objectkit.descriptors.define import (
    define_deletable_descriptor,
    define_fixed_deletable_property,
    define_getter_only_property,
    define_hidden_normal_property,
    define_non_deletable_normal_property,
    define_normal_property,
    define_property,
    define_property_if_absent,
    define_read_only_hidden_property,
    define_read_only_property,
    define_writable_hidden_property,
)
from objectkit.descriptors.models import AccessLevel, PropertyDescriptor, SlotTarget
from objectkit.descriptors.record import AccessViolationError, Record

__all__ = [
    # Models
    "AccessLevel",
    "PropertyDescriptor",
    "SlotTarget",
    # Record
    "Record",
    "AccessViolationError",
    # Helpers
    "define_property",
    "define_property_if_absent",
    "define_read_only_hidden_property",
    "define_getter_only_property",
    "define_writable_hidden_property",
    "define_read_only_property",
    "define_non_deletable_normal_property",
    "define_deletable_descriptor",
    "define_hidden_normal_property",
    "define_fixed_deletable_property",
    "define_normal_property",
]
