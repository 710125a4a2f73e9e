"""Typed collection: an ordered key/value store with runtime type checking.

Every value entering a collection is checked against its expected type.
Immutable collections (the default) return a new instance from every
operation that changes entries; mutable collections change in place and
return themselves.

Usage:
    scores = Collection([10, 20, 30], TypeTag.INTEGER)
    scores.append("40")            # InvalidTypeError
    high = scores.where(None, ">", 15)

    users = Collection([{"id": 1, "name": "Al"}, {"id": 2, "name": "Bo"}])
    users.where("name", "al").first()   # {"id": 1, "name": "Al"}
"""

from __future__ import annotations

import functools
import math
import warnings
from collections.abc import Callable, ItemsView, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Self

import structlog

from typedcollection.collection.algebra import (
    assoc_difference,
    assoc_intersection,
    default_comparator,
    merge_entries,
    next_integer_key,
    reindex,
    unique_values,
    value_difference,
    value_intersection,
)
from typedcollection.collection.strategies import MutationStrategy
from typedcollection.collection.where import WhereableMixin
from typedcollection.config import get_settings
from typedcollection.core.comparison import identical, loose_equals
from typedcollection.core.extraction import Arrayable, FieldExtractor
from typedcollection.core.oracle import (
    ANY,
    TypeTag,
    describe_type,
    is_valid,
    normalize_expected_type,
    type_of,
)
from typedcollection.core.types import CompareFn, Entries, Key, Predicate
from typedcollection.errors import (
    CollectionTypeMismatchError,
    FieldNotFoundError,
    ImmutableCollectionError,
    InvalidLiteralTypeError,
    InvalidTypeError,
    ItemNotFoundError,
    UnsupportedItemTypeError,
)

logger = structlog.get_logger()

_KEEP: Any = object()


def _to_entries(items: Any) -> Entries:
    """Read constructor input into a fresh entry dict."""
    if items is None:
        return {}
    if isinstance(items, Collection):
        return dict(items._entries)
    if isinstance(items, Mapping):
        return dict(items)
    if isinstance(items, Arrayable):
        return _to_entries(items.to_array())
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Iterable):
        raise TypeError(f"Cannot build a collection from {type(items).__name__}")
    return dict(enumerate(items))


def _to_plain(value: Any) -> Any:
    """Recursively convert Arrayable values (collections included) to plain data."""
    if isinstance(value, Arrayable) and not isinstance(value, type):
        return _to_plain(value.to_array())
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_to_plain(item) for item in value)
    return value


class Collection(WhereableMixin):
    """Ordered key/value collection with an expected item type.

    Args:
        items: Initial entries: a mapping (keys kept), another collection or
            ``Arrayable`` (its array form), or any iterable (keys 0..n-1).
        expected_type: ``ANY`` (default), a ``TypeTag`` or tag name, a class,
            or a literal value when ``is_literal_type`` is set.
        is_literal_type: Every item must be identical to ``expected_type``.
        is_mutable: Change in place instead of returning new instances.
        extractor: Field extractor used by queries. Defaults to ``FieldExtractor()``.

    Raises:
        InvalidTypeError: If an item does not satisfy ``expected_type``.
        InvalidLiteralTypeError: If an item differs from the literal type.
    """

    def __init__(
        self,
        items: Any = None,
        expected_type: Any = ANY,
        is_literal_type: bool = False,
        is_mutable: bool = False,
        *,
        extractor: FieldExtractor | None = None,
    ):
        self._is_literal_type = is_literal_type
        self._is_mutable = is_mutable
        self._expected_type = normalize_expected_type(expected_type, is_literal_type)
        self._extractor = extractor or FieldExtractor()
        entries = _to_entries(items)
        self._validate_entries(entries)
        self._entries: Entries = entries

    @classmethod
    def from_array(
        cls,
        data: Any,
        expected_type: Any = ANY,
        is_literal_type: bool = False,
        is_mutable: bool = False,
    ) -> Self:
        """Rebuild a collection from the output of ``to_array()``."""
        return cls(data, expected_type, is_literal_type, is_mutable)

    # Type state

    @property
    def expected_type(self) -> Any:
        return self._expected_type

    @property
    def type_name(self) -> str:
        """Expected type rendered for humans (JSON for literal types)."""
        return describe_type(self._expected_type, self._is_literal_type)

    @property
    def is_literal_type(self) -> bool:
        return self._is_literal_type

    @property
    def is_mutable(self) -> bool:
        return self._is_mutable

    @property
    def entries(self) -> Mapping[Key, Any]:
        """Read-only view of the entries."""
        return MappingProxyType(self._entries)

    # Validation

    def _validate_item(self, item: Any, key: Any = None) -> None:
        """Raise if an item does not satisfy the expected type."""
        if is_valid(item, self._expected_type, self._is_literal_type):
            return

        expected = self.type_name
        actual = describe_type(type_of(item, self._is_literal_type), self._is_literal_type)
        where = "" if key is None else f" at key [{key}]"
        if self._is_literal_type:
            raise InvalidLiteralTypeError(
                f"Invalid item type encountered{where}, expecting literal type of "
                f"[{expected}], [{actual}] given.",
                expected=expected,
                actual=actual,
                key=key,
            )
        raise InvalidTypeError(
            f"Invalid item type encountered{where}, expecting type of [{expected}], [{actual}] given.",
            expected=expected,
            actual=actual,
            key=key,
        )

    def _validate_entries(self, entries: Entries) -> None:
        for key, item in entries.items():
            self._validate_item(item, key)

    def _same_type(self, other: Collection) -> bool:
        if self._is_literal_type != other._is_literal_type:
            return False
        if self._is_literal_type:
            return identical(self._expected_type, other._expected_type)
        return bool(self._expected_type == other._expected_type)

    def _check_collection_type(self, other: Collection) -> None:
        """Raise if two collections do not share the same expected type."""
        if self._is_literal_type != other._is_literal_type:
            raise CollectionTypeMismatchError(
                "Collection type mismatch, one expects a literal type.",
                expected=self.type_name,
                actual=other.type_name,
            )
        if not self._same_type(other):
            raise CollectionTypeMismatchError(
                f"Collection type mismatch, expecting type of [{self.type_name}], "
                f"[{other.type_name}] given.",
                expected=self.type_name,
                actual=other.type_name,
            )

    def _binary_result_type(self, other: Collection, check_type: bool, operation: str) -> Any:
        """Expected type of a result combining ``self`` and ``other``."""
        if not isinstance(other, Collection):
            raise TypeError(f"{operation}() expects a Collection, got {type(other).__name__}")
        if check_type:
            self._check_collection_type(other)
        if self._same_type(other):
            return self._expected_type
        logger.debug(
            "collection_type_degraded",
            operation=operation,
            expected=self.type_name,
            other=other.type_name,
        )
        return ANY

    # Mutation strategy

    def _apply(self, entries: Entries, expected_type: Any = _KEEP) -> Self:
        """Commit a complete new entry set through this collection's strategy."""
        if expected_type is _KEEP:
            expected_type = self._expected_type
        apply = MutationStrategy.for_collection(self).get_strategy()
        return apply(self, entries, expected_type)

    def _replace(self, entries: Entries, expected_type: Any) -> None:
        self._entries = entries
        self._expected_type = expected_type
        if expected_type is ANY:
            # a degraded literal collection is no longer literal
            self._is_literal_type = False

    def _duplicate(self, entries: Entries, expected_type: Any) -> Self:
        """Construct a sibling holding ``entries`` without re-validating them."""
        duplicate = type(self).__new__(type(self))
        duplicate._is_literal_type = self._is_literal_type and expected_type is not ANY
        duplicate._is_mutable = self._is_mutable
        duplicate._expected_type = expected_type
        duplicate._extractor = self._extractor
        duplicate._entries = entries
        return duplicate

    # Access

    def get(self, key: Key) -> Any:
        """Get the value stored under ``key``.

        Raises:
            ItemNotFoundError: If the key does not exist.
        """
        if key in self._entries:
            return self._entries[key]
        raise ItemNotFoundError(f"Item [{key}] does not exist in the collection.", key=key)

    def set(self, key: Key | None, value: Any) -> None:
        """Store ``value`` under ``key``, or append it when ``key`` is None or "".

        Raises:
            InvalidTypeError: If the value does not satisfy the expected type.
            ImmutableCollectionError: If the collection is immutable.
        """
        if key == "":
            key = None
        self._validate_item(value, key)
        if not self._is_mutable:
            raise ImmutableCollectionError("Cannot set an item of an immutable collection.")
        if key is None:
            key = next_integer_key(self._entries)
        self._entries[key] = value

    def unset(self, key: Key) -> Self:
        """Remove the entry under ``key``. An absent key is ignored."""
        entries = {k: v for k, v in self._entries.items() if k != key}
        return self._apply(entries)

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key | None, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Key) -> None:
        if not self._is_mutable:
            raise ImmutableCollectionError("Cannot unset an item of an immutable collection.")
        if key not in self._entries:
            raise ItemNotFoundError(f"Item [{key}] does not exist in the collection.", key=key)
        del self._entries[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: Any) -> bool:
        return self.has(item)

    def __repr__(self) -> str:
        mode = "mutable" if self._is_mutable else "immutable"
        return f"{type(self).__name__}({self._entries!r}, type={self.type_name}, {mode})"

    def items(self) -> ItemsView[Key, Any]:
        """Read-only key/value pairs in insertion order."""
        return MappingProxyType(self._entries).items()

    def count(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def first(self) -> Any:
        """First value in insertion order, or None when empty."""
        return next(iter(self._entries.values()), None)

    def last(self) -> Any:
        """Last value in insertion order, or None when empty."""
        return next(reversed(self._entries.values()), None)

    def index(self, position: int, strict: bool = False) -> Any:
        """Value at a position in insertion order (negative counts from the end).

        Raises:
            ItemNotFoundError: If ``strict`` and there is no such position.
        """
        values = list(self._entries.values())
        if -len(values) <= position < len(values):
            return values[position]
        if strict:
            raise ItemNotFoundError(
                f"Item at position [{position}] does not exist in the collection.", key=position
            )
        return None

    def has(self, item: Any) -> bool:
        """Check membership using loose equality."""
        return any(loose_equals(value, item) for value in self._entries.values())

    def has_key(self, key: Key) -> bool:
        return key in self._entries

    def keys(self) -> Collection:
        return Collection(list(self._entries.keys()))

    def values(self) -> Collection:
        return Collection(list(self._entries.values()))

    # Entry changes

    def append(self, item: Any) -> Self:
        """Add an item after the last entry.

        Raises:
            InvalidTypeError: If the item does not satisfy the expected type.
        """
        self._validate_item(item)
        entries = dict(self._entries)
        entries[next_integer_key(entries)] = item
        return self._apply(entries)

    def prepend(self, item: Any) -> Self:
        """Add an item before the first entry. Integer keys are renumbered from 0.

        Raises:
            InvalidTypeError: If the item does not satisfy the expected type.
        """
        self._validate_item(item)
        return self._apply(reindex([(0, item), *self._entries.items()]))

    def filter(self, predicate: Predicate) -> Self:
        """Keep the entries for which ``predicate(item)`` is true. Keys are kept."""
        return self._apply({key: item for key, item in self._entries.items() if predicate(item)})

    def unique(
        self,
        column: str | Callable[[Any], Any] | None = None,
        strict: bool = False,
        throw_if_field_missing: bool = True,
    ) -> Self:
        """Keep the first entry for each distinct dedup key.

        The dedup key is the item itself when no column is given or the item is
        stringable, the result of ``column(item)`` for a callable, and otherwise
        the value at the (dotted) column path.

        Args:
            column: Field name, dotted path or key function.
            strict: Compare dedup keys with identity instead of loose equality.
            throw_if_field_missing: Raise when an item lacks the column;
                otherwise such items are kept.

        Raises:
            FieldNotFoundError: If an item lacks the column and
                ``throw_if_field_missing`` is set.
        """
        equals = identical if strict else loose_equals
        seen: list[Any] = []
        kept: Entries = {}
        for key, item in self._entries.items():
            try:
                marker = self._dedup_key(item, column)
            except FieldNotFoundError:
                if throw_if_field_missing:
                    raise
                logger.debug("unique_field_missing", key=key, column=column)
                kept[key] = item
                continue
            if any(equals(marker, previous) for previous in seen):
                continue
            seen.append(marker)
            kept[key] = item
        return self._apply(kept)

    def _dedup_key(self, item: Any, column: str | Callable[[Any], Any] | None) -> Any:
        if callable(column):
            return column(item)
        if column is None or self._extractor.is_stringable(item):
            return item
        return self._extractor.extract_dotted(item, column)

    def map(self, transform: Callable[[Any], Any], check_type: bool = True) -> Self:
        """Apply ``transform`` to every item. Keys are kept.

        Note: object items changed by ``transform`` are changed for every
        collection holding them, mutable or not.

        Args:
            transform: Function applied to each item.
            check_type: Require results to satisfy the expected type; when
                false the result accepts any type.

        Raises:
            InvalidTypeError: If ``check_type`` and a result has the wrong type.
        """
        entries = {key: transform(item) for key, item in self._entries.items()}
        if check_type:
            self._validate_entries(entries)
            return self._apply(entries)
        if self._expected_type is not ANY:
            logger.debug("collection_type_degraded", operation="map", expected=self.type_name)
        return self._apply(entries, ANY)

    def reverse(self, preserve_keys: bool = False) -> Self:
        """Reverse entry order. Integer keys are renumbered unless ``preserve_keys``."""
        pairs = list(reversed(self._entries.items()))
        return self._apply(dict(pairs) if preserve_keys else reindex(pairs))

    def slice(self, offset: int, length: int | None = None, preserve_keys: bool = False) -> Self:
        """Keep ``length`` entries starting at position ``offset``.

        Negative offsets count from the end; a negative length stops that many
        entries before the end.
        """
        pairs = list(self._entries.items())
        start = offset if offset >= 0 else max(len(pairs) + offset, 0)
        if length is None:
            stop = len(pairs)
        elif length >= 0:
            stop = start + length
        else:
            stop = len(pairs) + length
        selected = pairs[start:stop]
        return self._apply(dict(selected) if preserve_keys else reindex(selected))

    def combine(self, keys: Iterable[Key]) -> Self:
        """Use ``keys`` as the keys of the current values, in order.

        Raises:
            ValueError: If the number of keys differs from the number of entries.
        """
        new_keys = list(keys)
        if len(new_keys) != len(self._entries):
            raise ValueError(
                f"combine() expects {len(self._entries)} keys, {len(new_keys)} given."
            )
        self._warn_key_collisions("combine", new_keys)
        return self._apply(dict(zip(new_keys, self._entries.values(), strict=True)))

    def flip(self) -> Self:
        """Exchange keys and values. The new values (old keys) are type checked.

        Raises:
            UnsupportedItemTypeError: If a value cannot be used as a key.
            InvalidTypeError: If the old keys do not satisfy the expected type.
        """
        for item in self._entries.values():
            if not isinstance(item, (int, str)) or isinstance(item, bool):
                item_type = describe_type(type_of(item))
                raise UnsupportedItemTypeError(
                    f"Can only flip integer and string values, [{item_type}] given.",
                    item_type=item_type,
                )
        self._warn_key_collisions("flip", list(self._entries.values()))
        entries = {item: key for key, item in self._entries.items()}
        self._validate_entries(entries)
        return self._apply(entries)

    def _warn_key_collisions(self, operation: str, keys: list[Key]) -> None:
        if len(set(keys)) == len(keys) or not get_settings().warn_on_key_collision:
            return
        warnings.warn(
            f"{operation}() produced duplicate keys. Only the last value for each key will be kept.",
            stacklevel=3,
        )

    # Set algebra

    def diff(
        self, other: Collection, check_type: bool = True, comparator: CompareFn | None = None
    ) -> Self:
        """Values present in only one of the two collections, re-indexed.

        Args:
            other: Collection to compare with.
            check_type: Require both collections to share the expected type.
            comparator: Three-way comparison; 0 means equal.

        Raises:
            CollectionTypeMismatchError: If ``check_type`` and the types differ.
        """
        expected = self._binary_result_type(other, check_type, "diff")
        compare = comparator or default_comparator
        own, theirs = list(self._entries.values()), list(other._entries.values())
        values = value_difference(own, theirs, compare) + value_difference(theirs, own, compare)
        return self._apply(dict(enumerate(values)), expected)

    def diff_assoc(
        self, other: Collection, check_type: bool = True, comparator: CompareFn | None = None
    ) -> Self:
        """Entries whose key is missing on the other side or whose value differs.

        Both directions are combined with merge semantics and duplicate values dropped.
        """
        expected = self._binary_result_type(other, check_type, "diff_assoc")
        compare = comparator or default_comparator
        entries = merge_entries(
            assoc_difference(self._entries, other._entries, compare),
            assoc_difference(other._entries, self._entries, compare),
        )
        return self._apply(unique_values(entries, compare), expected)

    def intersect(
        self, other: Collection, check_type: bool = True, comparator: CompareFn | None = None
    ) -> Self:
        """Entries whose value also occurs in ``other``. Keys are kept."""
        expected = self._binary_result_type(other, check_type, "intersect")
        compare = comparator or default_comparator
        entries = value_intersection(self._entries, list(other._entries.values()), compare)
        return self._apply(entries, expected)

    def intersect_assoc(
        self, other: Collection, check_type: bool = True, comparator: CompareFn | None = None
    ) -> Self:
        """Entries present in both collections under the same key with equal values."""
        expected = self._binary_result_type(other, check_type, "intersect_assoc")
        compare = comparator or default_comparator
        return self._apply(assoc_intersection(self._entries, other._entries, compare), expected)

    def merge(self, other: Collection, check_type: bool = True) -> Self:
        """Append the entries of ``other``.

        String keys of ``other`` overwrite equal keys; all integer keys are renumbered.

        Raises:
            CollectionTypeMismatchError: If ``check_type`` and the types differ.
        """
        expected = self._binary_result_type(other, check_type, "merge")
        return self._apply(merge_entries(self._entries, other._entries), expected)

    # Derived collections and aggregates

    def chunk(self, size: int, preserve_keys: bool = False) -> Collection:
        """Split into an array-typed collection of chunks of ``size`` entries.

        Raises:
            ValueError: If ``size`` is smaller than 1.
        """
        if size < 1:
            raise ValueError(f"Chunk size must be at least 1, {size} given.")
        pairs = list(self._entries.items())
        chunks: list[Any] = []
        for start in range(0, len(pairs), size):
            part = pairs[start : start + size]
            chunks.append(dict(part) if preserve_keys else [value for _, value in part])
        return Collection(chunks, TypeTag.ARRAY)

    def column(self, name: str, key: str | None = None) -> Collection:
        """Collect the ``name`` field of every item that has it.

        Args:
            name: Field to collect.
            key: Field whose value keys each collected value.
        """
        result: Entries = {}
        for item in self._entries.values():
            try:
                value = self._extractor.extract(item, name)
            except FieldNotFoundError:
                continue
            try:
                result_key = self._extractor.extract(item, key) if key else None
            except FieldNotFoundError:
                result_key = None
            if result_key is None or not isinstance(result_key, (int, str)):
                result_key = next_integer_key(result)
            result[result_key] = value
        return Collection(result)

    def reduce(self, reducer: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        return functools.reduce(reducer, self._entries.values(), initial)

    def sum(self) -> int | float:
        return sum(self._entries.values())

    def product(self) -> int | float:
        return math.prod(self._entries.values())

    # Conversion

    def to_array(self) -> dict[Key, Any]:
        """Plain dict of the entries with nested convertible values converted."""
        return {key: _to_plain(item) for key, item in self._entries.items()}

    def to_list(self) -> list[Any]:
        """Plain re-indexed list of the values with nested convertible values converted."""
        return [_to_plain(item) for item in self._entries.values()]
