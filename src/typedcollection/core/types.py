"""Core type definitions for typedcollection."""

from collections.abc import Callable
from typing import Any

type Key = int | str
"""Entry key. Integer keys may be sparse after removals."""

type Entries = dict[Key, Any]
"""Ordered key/value backing store of a collection."""

type Predicate = Callable[[Any], bool]
"""Keep/drop decision for a single item."""

type CompareFn = Callable[[Any, Any], int]
"""Three-way comparison: negative, zero (equal) or positive."""
