"""Decisions on whether a type may be reflected as an aggregate.

Explicit decisions are recorded per type and, optionally, per purpose.
When nothing was recorded, a type is judged by its shape: dataclasses,
named tuples, tuples and classes declaring ``__slots__`` are aggregates.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from .core import ReflectionError, tuple_size

__all__ = ["set_reflectable", "is_reflectable", "is_implicitly_reflectable"]

_decisions: dict[tuple[type, Any], bool] = {}


def _require_type(cls: Any) -> type:
    if not isinstance(cls, type):
        raise TypeError(f"expected a type, got {type(cls).__name__!r}")
    return cls


def set_reflectable(cls: type, value: bool, what_for: Hashable = None) -> None:
    """Record whether ``cls`` may be reflected.

    With ``what_for`` left as ``None`` the decision applies to every purpose;
    otherwise it applies only to that purpose and takes precedence over a
    general decision.
    """
    _decisions[(_require_type(cls), what_for)] = bool(value)


def is_reflectable(cls: type, what_for: Hashable = None) -> bool | None:
    """Return the recorded decision for ``cls``, or ``None`` when unknown."""
    cls = _require_type(cls)
    if (cls, what_for) in _decisions:
        return _decisions[(cls, what_for)]
    return _decisions.get((cls, None))


def _looks_like_aggregate(cls: type) -> bool:
    if issubclass(cls, tuple):
        return True
    try:
        tuple_size(cls)
    except ReflectionError:
        return False
    return True


def is_implicitly_reflectable(cls: type, what_for: Hashable = None) -> bool:
    """Return whether ``cls`` can be reflected.

    A recorded decision wins; otherwise the shape of the type decides.
    """
    decision = is_reflectable(cls, what_for)
    if decision is not None:
        return decision
    return _looks_like_aggregate(cls)