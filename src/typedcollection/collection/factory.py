"""Shorthand constructor for collections."""

from __future__ import annotations

from typing import Any

from typedcollection.collection.collection import Collection
from typedcollection.config import get_settings
from typedcollection.core.oracle import ANY


def collection(
    items: Any = None,
    expected_type: Any = ANY,
    is_literal_type: bool = False,
    is_mutable: bool | None = None,
) -> Collection:
    """Build a collection, taking mutability from settings when not given.

    Args:
        items: Initial entries.
        expected_type: Expected item type.
        is_literal_type: Treat ``expected_type`` as a literal value.
        is_mutable: Mutability; None uses ``CollectionSettings.mutable``.

    Returns:
        A validated collection.
    """
    if is_mutable is None:
        is_mutable = get_settings().mutable
    return Collection(items, expected_type, is_literal_type, is_mutable)
