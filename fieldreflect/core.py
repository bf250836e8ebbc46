"""Field access for simple aggregate values.

An aggregate is a value whose state is an ordered set of public fields:
dataclass instances, named tuples, plain tuples and classes that declare
``__slots__``. Fields are always visited in declaration order.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Callable
from typing import Any

__all__ = [
    "ReflectionError",
    "tuple_size",
    "get",
    "structure_to_tuple",
    "for_each_field",
]

_IGNORED_SLOTS = frozenset({"__dict__", "__weakref__"})
_CO_VARARGS = 0x04


class ReflectionError(TypeError):
    """Raised when a value or type cannot be treated as an aggregate."""


def _is_namedtuple_type(cls: type) -> bool:
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def _slot_names(cls: type) -> tuple[str, ...] | None:
    names: list[str] = []
    found = False
    for klass in reversed(cls.__mro__):
        if klass is object or "__slots__" not in vars(klass):
            continue
        found = True
        slots = vars(klass)["__slots__"]
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if name not in _IGNORED_SLOTS)
    return tuple(names) if found else None


def _field_names(obj: Any) -> tuple[str, ...] | None:
    """Return the field names of an aggregate value or type.

    Returns ``None`` for plain tuples, whose fields are positional only.
    Raises :class:`ReflectionError` when ``obj`` is not an aggregate.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    if dataclasses.is_dataclass(cls):
        return tuple(field.name for field in dataclasses.fields(cls))
    if _is_namedtuple_type(cls):
        return tuple(cls._fields)
    if issubclass(cls, tuple):
        if isinstance(obj, type):
            raise ReflectionError(
                f"the number of fields of {cls.__name__!r} is only known for its values"
            )
        return None
    slots = _slot_names(cls)
    if slots is not None:
        return slots
    raise ReflectionError(f"{cls.__name__!r} is not a reflectable aggregate")


def tuple_size(value: Any) -> int:
    """Return the number of fields of an aggregate value or type."""
    names = _field_names(value)
    if names is None:
        return len(value)
    return len(names)


def structure_to_tuple(value: Any) -> tuple[Any, ...]:
    """Return the field values of ``value`` as a tuple, in declaration order."""
    if isinstance(value, type):
        raise ReflectionError("fields can only be read from a value, not a type")
    names = _field_names(value)
    if names is None:
        return tuple(value)
    return tuple(getattr(value, name) for name in names)


def get(index: int, value: Any) -> Any:
    """Return the field of ``value`` at position ``index``."""
    fields = structure_to_tuple(value)
    if not 0 <= index < len(fields):
        raise IndexError(
            f"field index {index} out of range for an aggregate of {len(fields)} fields"
        )
    return fields[index]


def _max_positional(func: Callable[..., Any]) -> int | None:
    """Return how many positional arguments ``func`` takes, ``None`` if unlimited."""
    if isinstance(func, functools.partial):
        inner = _max_positional(func.func)
        return None if inner is None else max(inner - len(func.args), 0)
    skip = 0
    target: Any = func
    if hasattr(target, "__func__"):
        target = target.__func__
        skip = 1
    code = getattr(target, "__code__", None)
    if code is None and not isinstance(target, type):
        call = getattr(type(target), "__call__", None)
        code = getattr(call, "__code__", None)
        skip = 1
    if code is None:
        return 1
    if code.co_flags & _CO_VARARGS:
        return None
    return max(code.co_argcount - skip, 0)


def _accepts_positional(func: Callable[..., Any], count: int) -> bool:
    capacity = _max_positional(func)
    return capacity is None or capacity >= count


def for_each_field(value: Any, func: Callable[..., Any]) -> None:
    """Call ``func`` for every field of ``value`` in declaration order.

    ``func`` is called as ``func(field, index)`` when it accepts two
    positional arguments and as ``func(field)`` otherwise.
    """
    fields = structure_to_tuple(value)
    if not fields:
        return
    if _accepts_positional(func, 2):
        for index, field in enumerate(fields):
            func(field, index)
    else:
        for field in fields:
            func(field)