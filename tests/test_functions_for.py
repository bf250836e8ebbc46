from dataclasses import dataclass

import pytest

from fieldreflect.core import structure_to_tuple
from fieldreflect.functional import (
    eq_fields,
    ge_fields,
    gt_fields,
    hash_fields,
    le_fields,
    lt_fields,
    ne_fields,
)
from fieldreflect.functions_for import functions_for
from fieldreflect.io import io_fields


@functions_for
class Comparable:
    __slots__ = ("i", "s", "bl", "a")

    def __init__(self, i, s, bl, a):
        self.i = i
        self.s = s
        self.bl = bl
        self.a = a


@functions_for
@dataclass
class Person:
    name: str
    birth_year: int


S1 = Comparable(0, 1, False, 11)
S2 = Comparable(0, 1, False, 11111)


def test_documented_ordering():
    assert S1 < S2
    assert S2 > S1
    assert S1 <= S2
    assert S2 >= S1
    assert S1 != S2
    assert not S1 == S2
    assert lt_fields(S1, S2) is True
    assert gt_fields(S2, S1) is True
    assert le_fields(S1, S2) is True
    assert ge_fields(S2, S1) is True
    assert ne_fields(S1, S2) is True
    assert eq_fields(S1, S2) is False


def test_equal_values():
    copy = Comparable(0, 1, False, 11)
    assert S1 == copy
    assert S1 <= copy and S1 >= copy
    assert not S1 < copy
    assert eq_fields(S1, copy) is True
    assert lt_fields(S1, copy) is False


def test_sorting_follows_fields():
    values = [Comparable(2, 0, False, 0), Comparable(1, 5, True, 0), Comparable(1, 2, False, 9)]
    ordered = sorted(values)
    assert [structure_to_tuple(v) for v in ordered] == sorted(structure_to_tuple(v) for v in values)


def test_str_writes_fields():
    assert str(Comparable(0, 1, False, 6)) == "{0, 1, 0, 6}"
    assert str(Person("Edgar Allan Poe", 1809)) == '{"Edgar Allan Poe", 1809}'
    assert str(S1) == io_fields(S1)


def test_parse_round_trip():
    person = Person('quote " inside', 1809)
    assert Person.parse(str(person)) == person
    parsed = Comparable.parse(io_fields(S2))
    assert parsed == S2


@dataclass
class _Point:
    x: int


def test_other_types_are_not_equal():
    point_cls = functions_for(_Point)
    point = point_cls(1)
    assert (point == 5) is False
    assert point != "text"
    assert point == point_cls(1)


@dataclass
class _Size:
    width: int


def test_ordering_against_other_type_raises():
    size_cls = functions_for(_Size)
    size = size_cls(3)
    assert size < size_cls(4)
    with pytest.raises(TypeError):
        size < 5