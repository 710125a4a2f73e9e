"""Collection store, mutation strategies and query mixins."""

from typedcollection.collection.collection import Collection
from typedcollection.collection.factory import collection
from typedcollection.collection.strategies import (
    MutationStrategy,
    apply_copy_on_write,
    apply_in_place,
)
from typedcollection.collection.where import WhereableMixin

__all__ = [
    "Collection",
    "collection",
    "MutationStrategy",
    "apply_copy_on_write",
    "apply_in_place",
    "WhereableMixin",
]
