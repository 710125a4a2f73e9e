"""Tests for the type oracle."""

import functools
import typing
from collections import OrderedDict
from dataclasses import dataclass

import pytest

from typedcollection.core.oracle import (
    ANY,
    TypeTag,
    describe_type,
    is_valid,
    normalize_expected_type,
    type_of,
)


@dataclass
class Animal:
    name: str


@dataclass
class Dog(Animal):
    pass


@pytest.mark.parametrize(
    ("item", "expected"),
    [
        ("text", TypeTag.STRING),
        (3, TypeTag.INTEGER),
        (3.5, TypeTag.FLOAT),
        (True, TypeTag.BOOLEAN),
        (None, TypeTag.NULL),
        ([1], TypeTag.ARRAY),
        ((1,), TypeTag.ARRAY),
        ({"a": 1}, TypeTag.ARRAY),
        (OrderedDict(a=1), TypeTag.ARRAY),
        (len, TypeTag.CALLABLE),
        (lambda: None, TypeTag.CALLABLE),
        (functools.partial(int, "1"), TypeTag.CALLABLE),
    ],
)
def test_type_of_builtin_values(item, expected):
    assert type_of(item) is expected


def test_type_of_object_is_its_class():
    assert type_of(Dog("rex")) is Dog


def test_type_of_literal_mode_returns_item():
    item = {"a": 1}
    assert type_of(item, is_literal_type=True) is item


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        (typing.Any, ANY),
        ("", ANY),
        ("mixed", ANY),
        ("integer", TypeTag.INTEGER),
        (int, TypeTag.INTEGER),
        (bool, TypeTag.BOOLEAN),
        (str, TypeTag.STRING),
        (dict, TypeTag.ARRAY),
        (None, TypeTag.NULL),
        (Animal, Animal),
        (TypeTag.FLOAT, TypeTag.FLOAT),
    ],
)
def test_normalize_expected_type(given, expected):
    assert normalize_expected_type(given) == expected


def test_normalize_keeps_literal_values():
    assert normalize_expected_type("integer", is_literal_type=True) == "integer"


def test_normalize_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown type name"):
        normalize_expected_type("integr")


def test_normalize_rejects_values_outside_literal_mode():
    with pytest.raises(ValueError):
        normalize_expected_type(42)


def test_any_accepts_everything():
    for item in (1, "a", None, [1], Dog("rex"), len):
        assert is_valid(item, ANY)


def test_boolean_is_not_an_integer():
    """bool subclasses int in Python but is a separate type tag."""
    assert not is_valid(True, TypeTag.INTEGER)
    assert is_valid(True, TypeTag.BOOLEAN)


def test_class_types_accept_subclasses():
    assert is_valid(Dog("rex"), Animal)
    assert not is_valid(Animal("cat"), Dog)
    assert not is_valid({"name": "rex"}, Animal)


def test_number_and_object_umbrella_tags():
    assert is_valid(1, TypeTag.NUMBER)
    assert is_valid(1.5, TypeTag.NUMBER)
    assert not is_valid(True, TypeTag.NUMBER)
    assert not is_valid("1", TypeTag.NUMBER)
    assert is_valid(Dog("rex"), TypeTag.OBJECT)
    assert not is_valid({"a": 1}, TypeTag.OBJECT)


def test_literal_validity_is_structural_and_strict():
    assert is_valid({"a": [1, 2]}, {"a": [1, 2]}, is_literal_type=True)
    assert not is_valid({"a": [1, 2.0]}, {"a": [1, 2]}, is_literal_type=True)
    assert not is_valid(1, True, is_literal_type=True)


def test_describe_type():
    assert describe_type(TypeTag.INTEGER) == "integer"
    assert describe_type(Dog) == "Dog"
    assert describe_type({"a": 1}, is_literal_type=True) == '{"a": 1}'
    assert describe_type(Dog("rex"), is_literal_type=True) == "Dog(name='rex')"
