"""Field extraction: item shapes, the Arrayable capability and the extractor."""

from typedcollection.core.extraction.models import Arrayable, ItemShape
from typedcollection.core.extraction.operations import FieldExtractor, is_stringable

__all__ = [
    # Models
    "Arrayable",
    "ItemShape",
    # Operations
    "FieldExtractor",
    "is_stringable",
]
