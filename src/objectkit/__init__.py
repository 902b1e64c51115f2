"""objectkit: structural inspection and manipulation helpers for dynamic value graphs.

Usage:
    from objectkit import Record, deep_clone, deep_equal, define_read_only_property

    config = {"name": "app", "ports": [80, 443]}
    snapshot = deep_clone(config)
    assert deep_equal(config, snapshot)

    rec = Record(name="app")
    define_read_only_property(rec, "id", 7)
    rec["id"] = 8             # AccessViolationError
"""

__version__ = "0.1.0"

# Configuration
from objectkit.config import BehaviorSettings, get_settings, reset_settings

# Core helpers
from objectkit.core import (
    UNDEFINED,
    Kind,
    Undefined,
    classify,
    clone_function,
    contains_keys,
    deep_clone,
    deep_equal,
    freeze_all,
    has_n_determined_keys,
    has_n_keys,
    has_own,
    has_unique_key,
    is_clone,
    is_frozen,
    is_not_array,
    is_object,
    is_serializable,
    json_clone,
    own_keys,
    typeof,
)

# Descriptors
from objectkit.descriptors import (
    AccessLevel,
    AccessViolationError,
    PropertyDescriptor,
    Record,
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

__all__ = [
    # Version
    "__version__",
    # Config
    "BehaviorSettings",
    "get_settings",
    "reset_settings",
    # Kinds
    "Kind",
    "Undefined",
    "UNDEFINED",
    "classify",
    "typeof",
    "own_keys",
    # Predicates
    "is_not_array",
    "is_object",
    "has_unique_key",
    "has_n_keys",
    "contains_keys",
    "has_n_determined_keys",
    "has_own",
    "json_clone",
    # Structural helpers
    "deep_equal",
    "deep_clone",
    "clone_function",
    "is_clone",
    "is_serializable",
    "freeze_all",
    "is_frozen",
    # Descriptors
    "AccessLevel",
    "PropertyDescriptor",
    "Record",
    "AccessViolationError",
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
