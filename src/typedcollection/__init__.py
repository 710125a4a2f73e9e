"""typedcollection: ordered key/value collections with runtime type checking.

Usage:
    from typedcollection import Collection, TypeTag

    scores = Collection([5, 15, 25, 10, 20], TypeTag.INTEGER)
    scores.where_between(None, 10, 20).to_list()   # [15, 10, 20]

    users = Collection(
        [{"id": 1, "name": "Al"}, {"id": 2, "name": "Bo"}, {"id": 1, "name": "Al2"}],
        dict,
    )
    users.unique("id").to_list()   # first two users
    users.where("name", "like", "al")

    counter = Collection([], int, is_mutable=True)
    counter.append(1)               # same instance, changed in place
"""

__version__ = "0.1.0"

# Collections
from typedcollection.collection import (
    Collection,
    MutationStrategy,
    collection,
)

# Configuration
from typedcollection.config import (
    CollectionSettings,
    get_settings,
)

# Core primitives
from typedcollection.core import (
    ANY,
    Arrayable,
    FieldExtractor,
    ItemShape,
    Operator,
    TypeTag,
    evaluate,
    is_stringable,
    is_valid,
    type_of,
)

# Errors
from typedcollection.errors import (
    CollectionError,
    CollectionTypeMismatchError,
    FieldNotFoundError,
    ImmutableCollectionError,
    InvalidLiteralTypeError,
    InvalidTypeError,
    ItemNotFoundError,
    UnsupportedItemTypeError,
)

__all__ = [
    # Version
    "__version__",
    # Collections
    "Collection",
    "collection",
    "MutationStrategy",
    # Core
    "ANY",
    "TypeTag",
    "Operator",
    "Arrayable",
    "FieldExtractor",
    "ItemShape",
    "evaluate",
    "is_stringable",
    "is_valid",
    "type_of",
    # Config
    "CollectionSettings",
    "get_settings",
    # Errors
    "CollectionError",
    "CollectionTypeMismatchError",
    "FieldNotFoundError",
    "ImmutableCollectionError",
    "InvalidLiteralTypeError",
    "InvalidTypeError",
    "ItemNotFoundError",
    "UnsupportedItemTypeError",
]
