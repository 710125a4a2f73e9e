"""Core functionalities: stateless type, comparison and extraction primitives.

Architecture Note:
    core/ contains pure, stateless building blocks with no collection state.
    The stateful store and its mutation strategies live in collection/.
"""

from typedcollection.core.comparison import (
    Operator,
    compare,
    evaluate,
    identical,
    loose_equals,
    to_string,
)
from typedcollection.core.extraction import Arrayable, FieldExtractor, ItemShape, is_stringable
from typedcollection.core.oracle import (
    ANY,
    TypeTag,
    describe_type,
    is_valid,
    normalize_expected_type,
    type_of,
)
from typedcollection.core.types import CompareFn, Entries, Key, Predicate

__all__ = [
    # Types
    "CompareFn",
    "Entries",
    "Key",
    "Predicate",
    # Oracle
    "ANY",
    "TypeTag",
    "describe_type",
    "is_valid",
    "normalize_expected_type",
    "type_of",
    # Comparison
    "Operator",
    "compare",
    "evaluate",
    "identical",
    "loose_equals",
    "to_string",
    # Extraction
    "Arrayable",
    "FieldExtractor",
    "ItemShape",
    "is_stringable",
]
