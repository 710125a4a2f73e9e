"""Mutation strategies: in-place replacement vs copy-on-write.

Every operation that changes a collection's entries computes the complete new
entry set first and hands it to the strategy selected by ``is_mutable``. The
strategy either swaps the entries on the same instance or returns a duplicate,
so a failed computation never leaves a partially updated collection behind.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, TypeVar

from typedcollection.core.types import Entries

if TYPE_CHECKING:
    from typedcollection.collection.collection import Collection

C = TypeVar("C", bound="Collection")


class MutationStrategy(Enum):
    """How a collection applies a new entry set."""

    IN_PLACE = auto()  # Replace entries on the same instance
    COPY_ON_WRITE = auto()  # Return a shallow duplicate holding the new entries

    @classmethod
    def for_collection(cls, collection: Collection) -> MutationStrategy:
        return cls.IN_PLACE if collection.is_mutable else cls.COPY_ON_WRITE

    def get_strategy(self) -> Callable[[C, Entries, Any], C]:
        """Get the apply function for this strategy.

        Returns:
            Pure function ``(collection, entries, expected_type) -> collection``.
        """
        strategies = {
            MutationStrategy.IN_PLACE: apply_in_place,
            MutationStrategy.COPY_ON_WRITE: apply_copy_on_write,
        }
        return strategies[self]


def apply_in_place(collection: C, entries: Entries, expected_type: Any) -> C:
    """Swap the entries (and expected type) of the collection itself.

    Args:
        collection: Mutable collection to update.
        entries: Complete new entry set, already validated.
        expected_type: Expected type after the operation.

    Returns:
        The same collection instance.
    """
    collection._replace(entries, expected_type)
    return collection


def apply_copy_on_write(collection: C, entries: Entries, expected_type: Any) -> C:
    """Build a duplicate of the collection around the new entries.

    Values are not copied: objects held by both collections stay shared.

    Args:
        collection: Collection to duplicate; left untouched.
        entries: Complete new entry set, already validated.
        expected_type: Expected type of the duplicate.

    Returns:
        A new collection with the same flags.
    """
    return collection._duplicate(entries, expected_type)
