"""Errors raised by collections and their query helpers."""

from __future__ import annotations

from typing import Any


class CollectionError(Exception):
    """Base class for all collection errors."""

    pass


class InvalidTypeError(CollectionError, TypeError):
    """Raised when an item does not satisfy the collection's expected type."""

    def __init__(self, message: str, *, expected: str, actual: str, key: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.key = key


class InvalidLiteralTypeError(InvalidTypeError):
    """Raised when an item does not equal the collection's literal type."""

    pass


class CollectionTypeMismatchError(CollectionError, TypeError):
    """Raised when two collections with different expected types are combined."""

    def __init__(self, message: str, *, expected: str, actual: str):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ItemNotFoundError(CollectionError, LookupError):
    """Raised on strict lookup of an absent key or position."""

    def __init__(self, message: str, *, key: Any = None):
        super().__init__(message)
        self.key = key


class FieldNotFoundError(CollectionError, LookupError):
    """Raised when a field (or a segment of a dotted path) cannot be resolved on an item."""

    def __init__(self, field: str):
        super().__init__(f"Field [{field}] is not found in the collection item.")
        self.field = field


class UnsupportedItemTypeError(CollectionError, TypeError):
    """Raised when an item's shape has no defined extraction behavior."""

    def __init__(self, message: str, *, field: str | None = None, item_type: str = ""):
        super().__init__(message)
        self.field = field
        self.item_type = item_type


class ImmutableCollectionError(CollectionError):
    """Raised when a mutating primitive is used on an immutable collection."""

    pass
