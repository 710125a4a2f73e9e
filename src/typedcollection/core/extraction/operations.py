"""Field extraction: resolve the value a comparison or dedup key is computed from."""

from __future__ import annotations

import types
from collections.abc import Callable, Iterator, Mapping, Sequence
from enum import Enum
from typing import Any

from typedcollection.core.extraction.models import Arrayable, ItemShape
from typedcollection.core.oracle import describe_type, type_of
from typedcollection.errors import FieldNotFoundError, UnsupportedItemTypeError

_SCALARS = (str, int, float, bool, type(None))
_UNSUPPORTED = (
    set,
    frozenset,
    bytes,
    bytearray,
    Iterator,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)


def is_stringable(value: Any) -> bool:
    """Default stringability check: scalars and enum members compare as themselves."""
    return isinstance(value, (*_SCALARS, Enum))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _lookup(container: Mapping[Any, Any] | Sequence[Any], field: str | int) -> tuple[bool, Any]:
    """Look up a key (or position, for sequences) without raising."""
    if isinstance(container, Mapping):
        if field in container:
            return True, container[field]
        if isinstance(field, str) and field.lstrip("-").isdigit() and int(field) in container:
            return True, container[int(field)]
        return False, None
    if _is_sequence(container):
        try:
            position = int(field)
        except (TypeError, ValueError):
            return False, None
        if -len(container) <= position < len(container):
            return True, container[position]
    return False, None


class FieldExtractor:
    """Resolves fields on collection items.

    Args:
        stringable: Capability check deciding whether an item is compared as
            itself when no field is requested. Defaults to ``is_stringable``.
    """

    def __init__(self, stringable: Callable[[Any], bool] = is_stringable):
        self._stringable = stringable

    def is_stringable(self, item: Any) -> bool:
        return self._stringable(item)

    def shape_of(self, item: Any) -> ItemShape:
        """Classify an item."""
        if isinstance(item, Mapping) or _is_sequence(item):
            return ItemShape.MAPPING
        if isinstance(item, Arrayable) and not isinstance(item, type):
            return ItemShape.CONVERTIBLE
        if self._stringable(item):
            return ItemShape.SCALAR
        if isinstance(item, _UNSUPPORTED) or (callable(item) and not hasattr(item, "__dict__")):
            return ItemShape.UNSUPPORTED
        return ItemShape.OBJECT

    def extract(self, item: Any, field: str | int | None) -> Any:
        """Resolve a single field on an item.

        An empty field returns a stringable item itself. A field containing
        periods that is not a direct key is resolved as a dotted path.

        Raises:
            FieldNotFoundError: If the item has no such field.
            UnsupportedItemTypeError: If fields cannot be looked up on the item.
        """
        if field is None or field == "":
            if self._stringable(item):
                return item
            raise self._unsupported(item, field, "Cannot use an empty field name on a non stringable item")

        shape = self.shape_of(item)
        match shape:
            case ItemShape.MAPPING:
                found, value = _lookup(item, field)
            case ItemShape.CONVERTIBLE:
                found, value = _lookup(item.to_array(), field)
                if not found:
                    found, value = self._attribute(item, field)
            case ItemShape.OBJECT:
                found, value = self._attribute(item, field)
            case ItemShape.SCALAR | ItemShape.UNSUPPORTED:
                raise self._unsupported(item, field, f"Cannot find field [{field}]")

        if found:
            return value
        if isinstance(field, str) and "." in field:
            return self.extract_dotted(item, field)
        raise FieldNotFoundError(str(field))

    def extract_dotted(self, item: Any, path: str) -> Any:
        """Resolve a period-delimited path, one segment at a time.

        Raises:
            FieldNotFoundError: Naming the first segment that cannot be resolved.
        """
        value = item
        for segment in path.split("."):
            found, resolved = _lookup(value, segment)
            if not found and isinstance(value, Arrayable) and not isinstance(value, type):
                found, resolved = _lookup(value.to_array(), segment)
            if not found and not self._is_leaf(value):
                found, resolved = self._attribute(value, segment)
            if not found:
                raise FieldNotFoundError(segment)
            value = resolved
        return value

    def _is_leaf(self, value: Any) -> bool:
        return self._stringable(value) or isinstance(value, (Mapping, *_UNSUPPORTED)) or _is_sequence(value)

    @staticmethod
    def _attribute(item: Any, field: str | int) -> tuple[bool, Any]:
        if not isinstance(field, str) or field.startswith("__"):
            return False, None
        try:
            return True, getattr(item, field)
        except AttributeError:
            return False, None

    @staticmethod
    def _unsupported(item: Any, field: str | int | None, reason: str) -> UnsupportedItemTypeError:
        item_type = describe_type(type_of(item))
        return UnsupportedItemTypeError(
            f"{reason} in collection item type [{item_type}].",
            field=None if field is None else str(field),
            item_type=item_type,
        )
