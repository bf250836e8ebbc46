import dataclasses
from collections import namedtuple

import pytest

from fieldreflect.traits import (
    is_implicitly_reflectable,
    is_reflectable,
    set_reflectable,
)


def test_unknown_decision_is_none():
    @dataclasses.dataclass
    class Point:
        x: int
        y: int

    assert is_reflectable(Point) is None
    assert is_reflectable(Point, "fusion") is None


def test_dataclass_is_implicitly_reflectable():
    @dataclasses.dataclass
    class Point:
        x: int
        y: int

    assert is_implicitly_reflectable(Point) is True


def test_namedtuple_and_tuple_are_implicitly_reflectable():
    Pair = namedtuple("Pair", "a b")
    assert is_implicitly_reflectable(Pair) is True
    assert is_implicitly_reflectable(tuple) is True


def test_slots_class_is_implicitly_reflectable():
    class Slotted:
        __slots__ = ("a", "b")

    assert is_implicitly_reflectable(Slotted) is True


def test_plain_class_and_builtin_are_not_reflectable():
    class Plain:
        pass

    assert is_implicitly_reflectable(Plain) is False
    assert is_implicitly_reflectable(int) is False


def test_general_decision_overrides_shape():
    @dataclasses.dataclass
    class Hidden:
        x: int

    set_reflectable(Hidden, False)
    assert is_reflectable(Hidden) is False
    assert is_reflectable(Hidden, "anything") is False
    assert is_implicitly_reflectable(Hidden) is False
    assert is_implicitly_reflectable(Hidden, "anything") is False


def test_purpose_specific_decision():
    @dataclasses.dataclass
    class Partial:
        x: int

    set_reflectable(Partial, False, "fusion")
    assert is_reflectable(Partial, "fusion") is False
    assert is_reflectable(Partial) is None
    assert is_implicitly_reflectable(Partial, "fusion") is False
    assert is_implicitly_reflectable(Partial) is True


def test_purpose_decision_beats_general_decision():
    class Plain:
        pass

    set_reflectable(Plain, False)
    set_reflectable(Plain, True, "printing")
    assert is_implicitly_reflectable(Plain, "printing") is True
    assert is_implicitly_reflectable(Plain, "other") is False


def test_non_type_is_rejected():
    with pytest.raises(TypeError):
        is_reflectable(42)
    with pytest.raises(TypeError):
        set_reflectable("not a type", True)