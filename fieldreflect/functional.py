"""Field-wise comparison and hashing of aggregates."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from .core import structure_to_tuple

__all__ = [
    "eq_fields",
    "ne_fields",
    "lt_fields",
    "le_fields",
    "gt_fields",
    "ge_fields",
    "rotl32",
    "hash_combine",
    "hash_combine32",
    "hash_combine64",
    "hash_fields",
]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def eq_fields(lhs: Any, rhs: Any) -> bool:
    """Return True when both aggregates have equal fields and field counts."""
    left, right = structure_to_tuple(lhs), structure_to_tuple(rhs)
    return all(a == b for a, b in zip(left, right)) and len(left) == len(right)


def ne_fields(lhs: Any, rhs: Any) -> bool:
    """Return True when any field or the field count differs."""
    left, right = structure_to_tuple(lhs), structure_to_tuple(rhs)
    return any(a != b for a, b in zip(left, right)) or len(left) != len(right)


def _lexicographic(
    lhs: Any,
    rhs: Any,
    strict: Callable[[Any, Any], bool],
    tail: Callable[[int, int], bool],
) -> bool:
    left, right = structure_to_tuple(lhs), structure_to_tuple(rhs)
    for a, b in zip(left, right):
        if strict(a, b):
            return True
        if not a == b:
            return False
    return tail(len(left), len(right))


def lt_fields(lhs: Any, rhs: Any) -> bool:
    """Lexicographic less-than over the fields."""
    return _lexicographic(lhs, rhs, operator.lt, operator.lt)


def le_fields(lhs: Any, rhs: Any) -> bool:
    """Lexicographic less-or-equal over the fields."""
    return _lexicographic(lhs, rhs, operator.lt, operator.le)


def gt_fields(lhs: Any, rhs: Any) -> bool:
    """Lexicographic greater-than over the fields."""
    return _lexicographic(lhs, rhs, operator.gt, operator.gt)


def ge_fields(lhs: Any, rhs: Any) -> bool:
    """Lexicographic greater-or-equal over the fields."""
    return _lexicographic(lhs, rhs, operator.gt, operator.ge)


def rotl32(x: int, r: int) -> int:
    """Rotate a 32-bit value left by ``r`` bits."""
    x &= _MASK32
    return ((x << r) | (x >> (32 - r))) & _MASK32


def hash_combine(seed: int, value: int) -> int:
    """Return ``seed`` mixed with ``value`` by the classic golden-ratio step."""
    seed &= _MASK64
    value &= _MASK64
    return (seed ^ ((value + 0x9E3779B9 + (seed << 6) + (seed >> 2)) & _MASK64)) & _MASK64


def hash_combine32(h1: int, k1: int) -> int:
    """Return ``h1`` mixed with ``k1`` by one MurmurHash3 32-bit block step."""
    c1 = 0xCC9E2D51
    c2 = 0x1B873593
    k1 = (k1 * c1) & _MASK32
    k1 = rotl32(k1, 15)
    k1 = (k1 * c2) & _MASK32
    h1 = (h1 & _MASK32) ^ k1
    h1 = rotl32(h1, 13)
    return (h1 * 5 + 0xE6546B64) & _MASK32


def hash_combine64(h: int, k: int) -> int:
    """Return ``h`` mixed with ``k`` by the MurmurHash2 64-bit step."""
    m = 0xC6A4A7935BD1E995
    r = 47
    k = (k * m) & _MASK64
    k ^= k >> r
    k = (k * m) & _MASK64
    h = (h & _MASK64) ^ k
    h = (h * m) & _MASK64
    return (h + 0xE6546B64) & _MASK64


def hash_fields(value: Any) -> int:
    """Hash an aggregate by combining the hashes of its fields.

    Each field's hash is combined with the combined hash of the fields
    after it; an aggregate without fields hashes to zero.
    """
    result = 0
    for field in reversed(structure_to_tuple(value)):
        result = hash_combine64(hash(field) & _MASK64, result)
    return result