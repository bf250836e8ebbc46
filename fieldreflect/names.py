"""Names of the fields of aggregate types."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .core import ReflectionError, _accepts_positional, _field_names, structure_to_tuple

__all__ = ["get_name", "names_as_array", "for_each_field_with_name"]


def names_as_array(cls: Any) -> tuple[str, ...]:
    """Return the names of all fields of an aggregate type or value."""
    names = _field_names(cls)
    if names is None:
        raise ReflectionError("the fields of a plain tuple have no names")
    return names


def get_name(index: int, cls: Any) -> str:
    """Return the name of the field at position ``index``."""
    names = names_as_array(cls)
    if not 0 <= index < len(names):
        raise IndexError(
            f"field index {index} out of range for an aggregate of {len(names)} fields"
        )
    return names[index]


def for_each_field_with_name(value: Any, func: Callable[..., Any]) -> None:
    """Call ``func`` with the name and value of every field of ``value``.

    ``func`` is called as ``func(name, field, index)`` when it accepts three
    positional arguments and as ``func(name, field)`` otherwise.
    """
    fields = structure_to_tuple(value)
    names = names_as_array(value)
    if not fields:
        return
    if _accepts_positional(func, 3):
        for index, (name, field) in enumerate(zip(names, fields)):
            func(name, field, index)
    else:
        for name, field in zip(names, fields):
            func(name, field)