"""Tests for field extraction on the different item shapes."""

from enum import Enum

import pytest

from typedcollection import Collection
from typedcollection.core.extraction import Arrayable, FieldExtractor, ItemShape, is_stringable
from typedcollection.errors import FieldNotFoundError, UnsupportedItemTypeError


class Color(Enum):
    RED = "red"


class Account:
    def __init__(self, owner, balance):
        self.owner = owner
        self.balance = balance


@pytest.fixture
def extractor():
    return FieldExtractor()


def test_stringable_values():
    for value in (None, "a", 1, 1.5, True, Color.RED):
        assert is_stringable(value)
    for value in ([1], {"a": 1}, Account("x", 1)):
        assert not is_stringable(value)


def test_shape_of(extractor, point_cls):
    assert extractor.shape_of({"a": 1}) is ItemShape.MAPPING
    assert extractor.shape_of([1, 2]) is ItemShape.MAPPING
    assert extractor.shape_of(point_cls(1, 2)) is ItemShape.CONVERTIBLE
    assert extractor.shape_of(Collection([1])) is ItemShape.CONVERTIBLE
    assert extractor.shape_of("text") is ItemShape.SCALAR
    assert extractor.shape_of(Account("x", 1)) is ItemShape.OBJECT
    assert extractor.shape_of({1, 2}) is ItemShape.UNSUPPORTED
    assert extractor.shape_of(len) is ItemShape.UNSUPPORTED
    assert extractor.shape_of(iter([1])) is ItemShape.UNSUPPORTED


def test_point_fixture_is_arrayable(point_cls):
    assert isinstance(point_cls(1, 2), Arrayable)


def test_extract_from_mapping(extractor):
    assert extractor.extract({"name": "Al"}, "name") == "Al"
    assert extractor.extract({1: "one"}, "1") == "one"


def test_extract_from_sequence_by_position(extractor):
    assert extractor.extract(["a", "b"], 1) == "b"
    assert extractor.extract(["a", "b"], "0") == "a"


def test_extract_from_object(extractor, user_cls):
    assert extractor.extract(user_cls(1, "Al"), "name") == "Al"


def test_extract_from_convertible(extractor, point_cls):
    assert extractor.extract(point_cls(3, 4), "y") == 4


def test_extract_missing_field_raises(extractor, user_cls):
    with pytest.raises(FieldNotFoundError) as excinfo:
        extractor.extract({"name": "Al"}, "age")
    assert excinfo.value.field == "age"
    with pytest.raises(FieldNotFoundError):
        extractor.extract(user_cls(1, "Al"), "email")


def test_empty_field_returns_stringable_item(extractor):
    assert extractor.extract("Theo", None) == "Theo"
    assert extractor.extract(5, "") == 5


def test_empty_field_on_structured_item_is_unsupported(extractor):
    with pytest.raises(UnsupportedItemTypeError):
        extractor.extract({"a": 1}, None)


def test_field_on_scalar_is_unsupported(extractor):
    with pytest.raises(UnsupportedItemTypeError) as excinfo:
        extractor.extract("Theo", "name")
    assert excinfo.value.field == "name"
    assert excinfo.value.item_type == "string"


def test_field_on_set_is_unsupported(extractor):
    with pytest.raises(UnsupportedItemTypeError):
        extractor.extract({1, 2}, "a")


def test_extract_dotted_through_mixed_shapes(extractor, point_cls):
    account = Account({"name": "Al", "tags": ["x", "y"]}, point_cls(1, 2))
    assert extractor.extract_dotted(account, "owner.name") == "Al"
    assert extractor.extract_dotted(account, "owner.tags.1") == "y"
    assert extractor.extract_dotted(account, "balance.x") == 1


def test_extract_dotted_names_failing_segment(extractor):
    with pytest.raises(FieldNotFoundError) as excinfo:
        extractor.extract_dotted({"a": {"b": 1}}, "a.c.d")
    assert excinfo.value.field == "c"


def test_extract_dotted_does_not_descend_into_scalars(extractor):
    with pytest.raises(FieldNotFoundError) as excinfo:
        extractor.extract_dotted({"a": "text"}, "a.upper")
    assert excinfo.value.field == "upper"


def test_extract_falls_back_to_dotted_path(extractor):
    assert extractor.extract({"address": {"city": "Oslo"}}, "address.city") == "Oslo"
    assert extractor.extract({"address.city": "Bergen"}, "address.city") == "Bergen"


def test_injected_stringable_capability():
    extractor = FieldExtractor(stringable=lambda value: isinstance(value, (str, Account)))
    account = Account("Al", 1)
    assert extractor.extract(account, None) is account
    with pytest.raises(UnsupportedItemTypeError):
        extractor.extract(5, None)
