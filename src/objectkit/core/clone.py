"""Deep cloning of value graphs, including shallow function clones.

Usage:
    data = {"a": [1, {"b": 2}]}
    snapshot = deep_clone(data)
    snapshot["a"][1]["b"] = 3      # data is untouched

    clone = clone_function(handler)
    clone(*args)               # forwards to handler
"""

from __future__ import annotations

import copy
import functools
import warnings
from collections.abc import Callable, Mapping
from dataclasses import is_dataclass
from typing import Any, ParamSpec, TypeVar, cast

from objectkit.core.kinds import (
    Kind,
    classify,
    get_own,
    is_decomposable,
    is_pydantic_model,
    own_keys,
)
from objectkit.descriptors import Record

T = TypeVar("T")
P = ParamSpec("P")
R = TypeVar("R")


def deep_clone(value: T) -> T:
    """Return a structurally equal copy built from new containers.

    Scalars, None and opaque objects are shared (they have no keys to copy).
    Functions are wrapped by clone_function(). Arrays keep their type
    (list or tuple); Records come back as Records of fully open slots holding
    the enumerable slots of the source; other mappings come back as dicts;
    instances are shallow-copied and their own keys replaced by clones.

    Input graphs must be acyclic.

    Args:
        value: Value to clone.

    Returns:
        The clone. Mutating it never affects value.
    """
    kind = classify(value)

    if kind is Kind.FUNCTION:
        return cast(T, clone_function(cast(Callable[..., Any], value)))

    if kind is Kind.ARRAY:
        items = [deep_clone(item) for item in cast(list[Any], value)]
        return cast(T, tuple(items) if isinstance(value, tuple) else items)

    if kind is Kind.OBJECT and is_decomposable(value):
        return cast(T, _clone_object(value))

    # undefined, boolean, number, string, None and opaque objects
    return value


def _clone_object(value: Any) -> Any:
    keys = own_keys(value)

    if isinstance(value, Record):
        return Record({key: deep_clone(value[key]) for key in keys})
    if isinstance(value, Mapping):
        return {key: deep_clone(value[key]) for key in keys}

    cloned = {key: deep_clone(get_own(value, key)) for key in keys}
    if is_pydantic_model(value):
        return value.model_copy(update=cloned)

    clone = copy.copy(value)
    for key, item in cloned.items():
        if is_dataclass(value):
            # Frozen dataclasses reject setattr; the copy is private until returned
            object.__setattr__(clone, key, item)
        else:
            setattr(clone, key, item)
    return clone


def is_clone(func: Any) -> bool:
    """Check if func is a wrapper produced by clone_function()."""
    return getattr(func, "__is_clone__", False) is True


def original_of(func: Callable[..., Any]) -> Callable[..., Any]:
    """Return the function a clone forwards to, or func itself if it is not a clone."""
    if is_clone(func):
        return cast(Callable[..., Any], func.__cloned_from__)  # type: ignore[attr-defined]
    return func


def clone_function(func: Callable[P, R]) -> Callable[P, R]:
    """Wrap func in a new function that forwards every call to it.

    The wrapper receives the attributes of func (name, docstring, __dict__).
    Cloning a clone targets the original function, so repeated cloning never
    stacks wrappers. Closed-over state stays shared with the original.

    Since the wrapper is a plain function it binds like one: installed as a
    class attribute, it receives the instance as its first argument and passes
    it on to the target.

    Args:
        func: Callable to clone.

    Returns:
        Wrapper tagged with __is_clone__ = True and __cloned_from__ = target.
    """
    if isinstance(func, type):
        warnings.warn(
            f"clone_function() received class {func.__name__}. "
            f"The clone is a plain function, not a class.",
            stacklevel=2,
        )

    target = original_of(func)

    def clone(*args: P.args, **kwargs: P.kwargs) -> R:
        return target(*args, **kwargs)

    # A class __dict__ holds its methods, which do not belong on the wrapper
    updated = () if isinstance(func, type) else functools.WRAPPER_UPDATES
    functools.update_wrapper(clone, func, updated=updated)
    clone.__wrapped__ = target  # type: ignore[attr-defined]
    clone.__is_clone__ = True  # type: ignore[attr-defined]
    clone.__cloned_from__ = target  # type: ignore[attr-defined]
    return clone
