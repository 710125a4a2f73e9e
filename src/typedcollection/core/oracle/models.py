"""Type tags used to declare what a collection may hold.

Usage:
    Collection([1, 2, 3], TypeTag.INTEGER)
    Collection([User(...)], User)          # class types are checked with isinstance
    Collection(["on", "on"], "on", is_literal_type=True)
"""

from __future__ import annotations

from enum import Enum


class TypeTag(str, Enum):
    """Type category of a collection item."""

    # Scalar types
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"

    # Compound types
    ARRAY = "array"  # list, tuple and dict
    CALLABLE = "callable"

    # Umbrella types
    MIXED = "mixed"  # any item
    NUMBER = "number"  # integer or float, never boolean
    OBJECT = "object"  # any structured (non-scalar, non-array) object

    def __str__(self) -> str:
        return self.value


ANY = TypeTag.MIXED
"""Expected type that accepts every item."""
