"""Item shapes and the array-conversion capability.

Items that are neither mappings nor plain objects can still take part in
queries by implementing ``Arrayable``:

    @dataclass
    class Point:
        x: int
        y: int

        def to_array(self) -> dict[str, int]:
            return {"x": self.x, "y": self.y}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class ItemShape(Enum):
    """How field lookups are resolved on an item."""

    MAPPING = auto()  # dict-like, or a non-string sequence indexed by position
    CONVERTIBLE = auto()  # implements Arrayable
    OBJECT = auto()  # attribute access
    SCALAR = auto()  # stringable value, compared as itself
    UNSUPPORTED = auto()  # callables, sets, bytes, iterators


@runtime_checkable
class Arrayable(Protocol):
    """Value that can present itself as a plain ordered key/value structure."""

    def to_array(self) -> Mapping[Any, Any] | Sequence[Any]: ...
