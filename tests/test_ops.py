from dataclasses import dataclass

import pytest

from fieldreflect.core import ReflectionError
from fieldreflect.functional import eq_fields, hash_fields, lt_fields
from fieldreflect.ops import eq, ge, gt, hash_value, le, lt, ne


class Plain:
    __slots__ = ("i", "s", "bl", "a")

    def __init__(self, i, s, bl, a):
        self.i = i
        self.s = s
        self.bl = bl
        self.a = a


@dataclass
class Left:
    x: int
    y: int


@dataclass
class Right:
    x: int
    y: int


class AlwaysEqual:
    __slots__ = ("v",)

    def __init__(self, v):
        self.v = v

    def __eq__(self, other):
        return True

    def __hash__(self):
        return 7


class Reversed:
    __slots__ = ("v",)

    def __init__(self, v):
        self.v = v

    def __lt__(self, other):
        return self.v > other.v


S1 = Plain(0, 1, False, 11)
S2 = Plain(0, 1, False, 11111)


def test_documented_lt():
    assert lt(S1, S2) is True
    assert lt(S2, S1) is False


def test_field_comparisons_without_operators():
    same = Plain(0, 1, False, 11)
    assert eq(S1, same) is True
    assert ne(S1, same) is False
    assert ne(S1, S2) is True
    assert gt(S2, S1) is True
    assert le(S1, same) is True
    assert ge(S1, same) is True
    assert le(S1, S2) is True
    assert ge(S1, S2) is False


def test_different_dataclasses_compare_by_fields():
    assert eq(Left(1, 2), Right(1, 2)) is True
    assert ne(Left(1, 2), Right(1, 3)) is True


def test_own_equality_is_preferred():
    a, b = AlwaysEqual(1), AlwaysEqual(2)
    assert eq(a, b) is True
    assert eq_fields(a, b) is False


def test_own_ordering_is_preferred():
    a, b = Reversed(5), Reversed(1)
    assert lt(a, b) is True
    assert lt_fields(a, b) is False


def test_builtin_values_use_their_operators():
    assert lt(1, 2.5) is True
    assert ge(3, 3) is True
    assert eq("a", "a") is True


def test_non_aggregate_without_operator_raises():
    with pytest.raises(ReflectionError):
        eq(object(), object())


def test_hash_of_unhashable_dataclass_uses_fields():
    value = Left(3, 4)
    assert hash_value(value) == hash_fields(value)
    assert hash_value(value) == hash_value(Left(3, 4))


def test_hash_of_plain_class_uses_fields():
    assert hash_value(S1) == hash_fields(Plain(0, 1, False, 11))


def test_own_hash_is_used():
    assert hash_value(AlwaysEqual(99)) == hash(AlwaysEqual(0))
    assert hash_value("text") == hash("text")