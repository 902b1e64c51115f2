"""Core functionalities: kind classification and recursive structural helpers.

Architecture Note:
    core/ contains pure functions over dynamic value graphs. Only freeze_all
    mutates its input, and only for values that can be frozen in place.
    None of the recursive helpers detect reference cycles: inputs must be
    acyclic, and excessive depth surfaces as RecursionError.
"""

from objectkit.core.clone import clone_function, deep_clone, is_clone, original_of
from objectkit.core.equality import deep_equal
from objectkit.core.freeze import freeze_all, is_frozen
from objectkit.core.kinds import (
    UNDEFINED,
    Kind,
    Undefined,
    classify,
    get_own,
    is_decomposable,
    own_keys,
    typeof,
)
from objectkit.core.predicates import (
    contains_keys,
    has_n_determined_keys,
    has_n_keys,
    has_own,
    has_unique_key,
    is_not_array,
    is_object,
    json_clone,
)
from objectkit.core.serializable import is_serializable

__all__ = [
    # Kinds
    "Kind",
    "Undefined",
    "UNDEFINED",
    "classify",
    "typeof",
    "own_keys",
    "get_own",
    "is_decomposable",
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
    "original_of",
    "is_serializable",
    "freeze_all",
    "is_frozen",
]
