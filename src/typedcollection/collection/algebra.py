"""Pure helpers for set algebra and key handling over entry sets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from typedcollection.core.comparison import compare
from typedcollection.core.extraction import is_stringable
from typedcollection.core.oracle import type_of
from typedcollection.core.types import CompareFn, Entries, Key


def default_comparator(a: Any, b: Any) -> int:
    """Compare two items for diff/intersect.

    Objects compare by identity, stringable values by their natural (loose)
    ordering, and values of different types are never equal.
    """
    if isinstance(type_of(a), type) and isinstance(type_of(b), type):
        a, b = id(a), id(b)
    if is_stringable(a) and is_stringable(b):
        result = compare(a, b)
        return -1 if result is None else result
    if type_of(a) != type_of(b):
        return -1
    return 0 if a == b else -1


def contains_value(values: Iterable[Any], candidate: Any, comparator: CompareFn) -> bool:
    return any(comparator(candidate, value) == 0 for value in values)


def value_difference(left: Iterable[Any], right: list[Any], comparator: CompareFn) -> list[Any]:
    """Values of ``left`` that do not occur in ``right``."""
    return [value for value in left if not contains_value(right, value, comparator)]


def assoc_difference(left: Entries, right: Entries, comparator: CompareFn) -> Entries:
    """Entries of ``left`` whose key is missing from ``right`` or whose value differs."""
    return {
        key: value
        for key, value in left.items()
        if key not in right or comparator(value, right[key]) != 0
    }


def value_intersection(left: Entries, right: list[Any], comparator: CompareFn) -> Entries:
    """Entries of ``left`` whose value occurs in ``right``. Keys of ``left`` are kept."""
    return {key: value for key, value in left.items() if contains_value(right, value, comparator)}


def assoc_intersection(left: Entries, right: Entries, comparator: CompareFn) -> Entries:
    """Entries present in both sides under the same key with equal values."""
    return {
        key: value
        for key, value in left.items()
        if key in right and comparator(value, right[key]) == 0
    }


def unique_values(entries: Entries, comparator: CompareFn) -> Entries:
    """Drop entries whose value equals an earlier one. First occurrence wins."""
    kept: Entries = {}
    for key, value in entries.items():
        if not contains_value(kept.values(), value, comparator):
            kept[key] = value
    return kept


def is_integer_key(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def next_integer_key(entries: Entries) -> int:
    """Key an appended entry receives: one past the largest integer key."""
    integer_keys = [key for key in entries if is_integer_key(key)]
    return max(integer_keys) + 1 if integer_keys else 0


def reindex(pairs: Iterable[tuple[Key, Any]]) -> Entries:
    """Renumber integer keys from 0 in order. String keys are kept; a repeated
    string key keeps its first position and takes the last value."""
    entries: Entries = {}
    position = 0
    for key, value in pairs:
        if is_integer_key(key):
            entries[position] = value
            position += 1
        else:
            entries[key] = value
    return entries


def merge_entries(*entry_sets: Entries) -> Entries:
    """Concatenate entry sets: string keys later-wins, all integer keys renumbered."""
    return reindex(pair for entries in entry_sets for pair in entries.items())
