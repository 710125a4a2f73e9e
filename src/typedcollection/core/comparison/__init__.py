"""Comparator engine: operators and equality semantics."""

from typedcollection.core.comparison.models import Operator
from typedcollection.core.comparison.operations import (
    compare,
    evaluate,
    identical,
    loose_equals,
    to_string,
)

__all__ = [
    # Models
    "Operator",
    # Operations
    "compare",
    "evaluate",
    "identical",
    "loose_equals",
    "to_string",
]
