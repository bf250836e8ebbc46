"""Class decorator that gives an aggregate comparison, text and hash support."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .functional import (
    eq_fields,
    ge_fields,
    gt_fields,
    hash_fields,
    le_fields,
    lt_fields,
    ne_fields,
)
from .io import io_fields, read_fields

__all__ = ["functions_for"]

_T = TypeVar("_T", bound=type)

_COMPARISONS: dict[str, Callable[[Any, Any], bool]] = {
    "__eq__": eq_fields,
    "__ne__": ne_fields,
    "__lt__": lt_fields,
    "__gt__": gt_fields,
    "__le__": le_fields,
    "__ge__": ge_fields,
}


def _comparison(cls: type, compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], Any]:
    def method(self: Any, other: Any) -> Any:
        if not isinstance(other, cls):
            return NotImplemented
        return compare(self, other)

    return method


def functions_for(cls: _T) -> _T:
    """Define field-wise comparisons, ``__str__``, ``__hash__`` and ``parse`` on ``cls``.

    Comparisons apply between instances of ``cls`` only. ``str`` writes the
    fields as :func:`io_fields` does and ``cls.parse(text)`` reads them back.
    """
    for name, compare in _COMPARISONS.items():
        method = _comparison(cls, compare)
        method.__name__ = name
        setattr(cls, name, method)

    def __str__(self: Any) -> str:
        return io_fields(self)

    def __hash__(self: Any) -> int:
        return hash_fields(self)

    def parse(klass: type, text: str) -> Any:
        return read_fields(text, klass)

    cls.__str__ = __str__
    cls.__hash__ = __hash__
    cls.parse = classmethod(parse)
    return cls