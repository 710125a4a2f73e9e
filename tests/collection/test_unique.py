"""Tests for unique()."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typedcollection import Collection
from typedcollection.core.comparison import identical, loose_equals
from typedcollection.errors import FieldNotFoundError


def test_unique_on_field_keeps_first_occurrence():
    c = Collection([{"id": 1, "name": "Al"}, {"id": 2, "name": "Bo"}, {"id": 1, "name": "Al2"}])
    assert c.unique("id").to_list() == [{"id": 1, "name": "Al"}, {"id": 2, "name": "Bo"}]


def test_unique_scalars_loose_and_strict():
    c = Collection([1, "1", 2, 2.0, True])
    assert c.unique().to_list() == [1, 2]
    assert c.unique(strict=True).to_list() == [1, "1", 2, 2.0, True]


def test_unique_keeps_original_keys():
    c = Collection({"a": 1, "b": 1, "c": 2})
    assert c.unique().to_array() == {"a": 1, "c": 2}


def test_unique_dotted_path(records):
    assert [r["name"] for r in records.unique("address.city")] == ["Al", "Bo"]


def test_unique_with_key_function(user_cls):
    users = Collection([user_cls(1, "Al"), user_cls(2, "al"), user_cls(3, "Bo")])
    assert [u.id for u in users.unique(lambda u: u.name.lower())] == [1, 3]


def test_unique_on_objects_by_attribute(user_cls):
    users = Collection([user_cls(1, "Al"), user_cls(1, "Again")], user_cls)
    assert [u.name for u in users.unique("id")] == ["Al"]


def test_unique_missing_field_raises_by_default():
    c = Collection([{"id": 1}, {"name": "x"}])
    with pytest.raises(FieldNotFoundError) as excinfo:
        c.unique("id")
    assert excinfo.value.field == "id"


def test_unique_missing_field_lenient_mode_keeps_items():
    c = Collection([{"id": 1}, {"name": "x"}, {"id": 1}, {"name": "y"}])
    assert c.unique("id", throw_if_field_missing=False).to_list() == [
        {"id": 1},
        {"name": "x"},
        {"name": "y"},
    ]


def test_unique_uses_stringable_items_directly():
    c = Collection(["a", {"id": "b"}, "a", {"id": "a"}])
    assert c.unique("id").to_list() == ["a", {"id": "b"}]


@given(
    st.lists(st.one_of(st.integers(-5, 5), st.sampled_from(["1", "2", "x"]), st.none())),
    st.booleans(),
)
def test_unique_output_has_no_duplicates_and_keeps_order(values, strict):
    """PROPERTY: unique() leaves no two equal items and preserves first-seen order."""
    equals = identical if strict else loose_equals
    result = Collection(values).unique(strict=strict).to_list()

    for i, a in enumerate(result):
        for b in result[i + 1 :]:
            assert not equals(a, b)

    positions = [next(i for i, v in enumerate(values) if identical(v, item)) for item in result]
    assert positions == sorted(positions)
