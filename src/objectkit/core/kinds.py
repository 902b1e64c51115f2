"""Kind classification and own-key access for dynamic value graphs.

Every recursive helper dispatches on `classify()` before descending, and reads
containers only through `own_keys()` / `get_own()`.

Usage:
    classify([1, 2])        # Kind.ARRAY
    classify({"a": 1})      # Kind.OBJECT
    typeof(None)            # "object"
    own_keys(Point(1, 2))   # ["x", "y"]
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum, auto
from typing import Any, Final


class Undefined:
    """Marker for an absent value, distinct from None (null)."""

    _instance: Undefined | None = None

    __slots__ = ()

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Undefined:
        return self


UNDEFINED: Final = Undefined()


class Kind(Enum):
    """Shape kind of a value. Exactly one applies to every value."""

    SCALAR = auto()  # undefined, boolean, number, string, bytes
    FUNCTION = auto()  # any non-container callable, classes included
    NULL = auto()  # None
    ARRAY = auto()  # list, tuple
    OBJECT = auto()  # mappings, records, instances


_SCALAR_TYPES = (Undefined, bool, numbers.Number, str, bytes)


def classify(value: Any) -> Kind:
    """Classify a value into its Kind.

    None and arrays are tested before the generic object branch, and
    callables only after containers, so a callable Mapping is still an object.

    Args:
        value: Any value.

    Returns:
        The Kind of the value.
    """
    if value is None:
        return Kind.NULL
    if isinstance(value, _SCALAR_TYPES):
        return Kind.SCALAR
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if callable(value):
        return Kind.FUNCTION
    return Kind.OBJECT


def typeof(value: Any) -> str:
    """Return the dynamic type name of a value.

    Null, arrays and objects all report "object"; scalars report their
    family, so 1 and 1.0 share "number" while True reports "boolean".

    Args:
        value: Any value.

    Returns:
        One of "undefined", "boolean", "number", "complex", "string",
        "bytes", "function" or "object".
    """
    kind = classify(value)
    if kind is Kind.FUNCTION:
        return "function"
    if kind is not Kind.SCALAR:
        return "object"
    if isinstance(value, Undefined):
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return "complex"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    return "bytes"


def is_pydantic_model(value: Any) -> bool:
    """Check if value is a Pydantic model instance without importing pydantic."""
    for base in type(value).__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def is_decomposable(value: Any) -> bool:
    """Check if an object value exposes own keys rather than being opaque.

    Args:
        value: Any value.

    Returns:
        True for mappings, dataclass and Pydantic instances, and objects with
        at least one public instance attribute. False for everything else:
        scalars, Enum members and objects whose state is all private.
    """
    if classify(value) is not Kind.OBJECT or isinstance(value, Enum):
        return False
    if isinstance(value, Mapping):
        return True
    if is_dataclass(value) or is_pydantic_model(value):
        return True
    return hasattr(value, "__dict__") and any(not k.startswith("_") for k in vars(value))


def own_keys(value: Any) -> list[Any]:
    """List the own enumerable keys of a value.

    Args:
        value: Any value.

    Returns:
        Mapping keys in iteration order (Records yield enumerable slots only),
        dataclass field names, Pydantic model field names, or the public
        instance attributes of other objects. Non-objects have no keys.
    """
    if not is_decomposable(value):
        return []
    if isinstance(value, Mapping):
        return list(value)
    if is_dataclass(value):
        return [f.name for f in fields(value)]
    if is_pydantic_model(value):
        return list(type(value).model_fields)
    return [k for k in vars(value) if not k.startswith("_")]


def get_own(value: Any, key: Any) -> Any:
    """Read the value stored under one of `own_keys(value)`.

    Args:
        value: Decomposable object.
        key: Key returned by own_keys().

    Returns:
        The stored value.
    """
    if isinstance(value, Mapping):
        return value[key]
    return getattr(value, key)
