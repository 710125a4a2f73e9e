"""Type oracle: expected types and item validation."""

from typedcollection.core.oracle.models import ANY, TypeTag
from typedcollection.core.oracle.operations import (
    describe_type,
    is_valid,
    normalize_expected_type,
    type_of,
)

__all__ = [
    # Models
    "ANY",
    "TypeTag",
    # Operations
    "describe_type",
    "is_valid",
    "normalize_expected_type",
    "type_of",
]
