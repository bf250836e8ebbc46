"""Comparison and hashing that prefer a type's own operators.

Each function uses the operator the values provide; when neither side
implements it, the comparison or hash is done field by field.
"""

from __future__ import annotations

from typing import Any

from .functional import (
    eq_fields,
    ge_fields,
    gt_fields,
    hash_fields,
    le_fields,
    lt_fields,
    ne_fields,
)

__all__ = ["eq", "ne", "lt", "gt", "le", "ge", "hash_value"]


def _own(name: str, reflected: str, lhs: Any, rhs: Any) -> Any:
    result = getattr(type(lhs), name)(lhs, rhs)
    if result is NotImplemented:
        result = getattr(type(rhs), reflected)(rhs, lhs)
    return result


def _compare(name: str, reflected: str, fallback, lhs: Any, rhs: Any) -> bool:
    result = _own(name, reflected, lhs, rhs)
    if result is NotImplemented:
        return fallback(lhs, rhs)
    return bool(result)


def eq(lhs: Any, rhs: Any) -> bool:
    """Equality by the values' own ``==``, else by :func:`eq_fields`."""
    return _compare("__eq__", "__eq__", eq_fields, lhs, rhs)


def ne(lhs: Any, rhs: Any) -> bool:
    """Inequality by the values' own ``!=``, else by :func:`ne_fields`."""
    return _compare("__ne__", "__ne__", ne_fields, lhs, rhs)


def lt(lhs: Any, rhs: Any) -> bool:
    """Less-than by the values' own ``<``, else by :func:`lt_fields`."""
    return _compare("__lt__", "__gt__", lt_fields, lhs, rhs)


def gt(lhs: Any, rhs: Any) -> bool:
    """Greater-than by the values' own ``>``, else by :func:`gt_fields`."""
    return _compare("__gt__", "__lt__", gt_fields, lhs, rhs)


def le(lhs: Any, rhs: Any) -> bool:
    """Less-or-equal by the values' own ``<=``, else by :func:`le_fields`."""
    return _compare("__le__", "__ge__", le_fields, lhs, rhs)


def ge(lhs: Any, rhs: Any) -> bool:
    """Greater-or-equal by the values' own ``>=``, else by :func:`ge_fields`."""
    return _compare("__ge__", "__le__", ge_fields, lhs, rhs)


def hash_value(value: Any) -> int:
    """Hash by the type's own ``__hash__``, else by :func:`hash_fields`."""
    own_hash = type(value).__hash__
    if own_hash is None or own_hash is object.__hash__:
        return hash_fields(value)
    return hash(value)