"""Predicate builders for filtering collections by field comparisons.

Usage:
    users.where("age", 30)                 # age == 30 (loose)
    users.where("age", ">=", 18)
    users.where("address.city", "Oslo")    # dotted path
    names.where("bob")                     # item itself equals "bob"
    users.where_like("name", "jo%")        # starts with "jo"
    users.where(lambda user: user.active)  # plain predicate
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Self

from typedcollection.core.comparison import Operator, evaluate
from typedcollection.core.extraction import FieldExtractor
from typedcollection.core.types import Predicate

_UNSET: Any = object()

Column = str | int | None


class WhereableMixin:
    """``where`` family for collections.

    Host classes provide ``filter(predicate)`` and a ``_extractor``. Every
    method builds a predicate and delegates to ``filter``, so the result
    follows the host's mutation strategy.
    """

    _extractor: FieldExtractor
    filter: Callable[[Predicate], Self]

    def where(
        self,
        column: Column | Callable[[Any], bool],
        operator: Operator | str | Any = _UNSET,
        value: Any = _UNSET,
        *,
        strict: bool = False,
    ) -> Self:
        """Keep items matching a comparison.

        The meaning of the arguments depends on how many are given:

        - ``where(value)``: the item itself equals ``value``.
        - ``where(column, value)``: the field equals ``value``.
        - ``where(column, operator, value)``: explicit operator.

        A callable ``column`` is used directly as the predicate.

        Args:
            column: Field name or dotted path, the value to compare items with,
                or a predicate.
            operator: Operator, or the value in the two-argument form.
            value: Right-hand operand of the explicit form.
            strict: Compare case-sensitively with identity instead of loose equality.

        Returns:
            The filtered collection.
        """
        if callable(column) and not isinstance(column, (str, int)):
            return self.filter(column)
        if operator is _UNSET:
            column, operator, value = None, Operator.EQ, column
        elif value is _UNSET:
            operator, value = Operator.EQ, operator
        elif operator is None or operator == "":
            operator = Operator.EQ
        return self.filter(self._predicate(column, Operator.parse(operator), value, strict))

    def where_like(self, column: Column, pattern: str, strict: bool = False) -> Self:
        """Keep items whose field matches a ``%`` wildcard pattern.

        ``"jo%"`` matches prefixes, ``"%son"`` suffixes, and ``"%an%"`` or a
        pattern without wildcards matches anywhere.
        """
        operator, search = Operator.for_like_pattern(pattern)
        return self.filter(self._predicate(column, operator, search, strict))

    def where_not_like(self, column: Column, pattern: str, strict: bool = False) -> Self:
        """Drop items whose field matches a ``%`` wildcard pattern."""
        operator, search = Operator.for_like_pattern(pattern, negate=True)
        return self.filter(self._predicate(column, operator, search, strict))

    def where_null(self, column: Column = None) -> Self:
        return self.filter(self._predicate(column, Operator.EQ, None))

    def where_not_null(self, column: Column = None) -> Self:
        return self.filter(self._predicate(column, Operator.NE, None))

    def where_between(self, column: Column, lower: Any, upper: Any) -> Self:
        """Keep items whose field lies within ``[lower, upper]``."""
        return self.filter(self._predicate(column, Operator.BETWEEN, (lower, upper)))

    def where_not_between(self, column: Column, lower: Any, upper: Any) -> Self:
        return self.filter(self._predicate(column, Operator.NOT_BETWEEN, (lower, upper)))

    def where_in(self, column: Column, values: Iterable[Any]) -> Self:
        return self.filter(self._predicate(column, Operator.IN, list(values)))

    def where_not_in(self, column: Column, values: Iterable[Any]) -> Self:
        return self.filter(self._predicate(column, Operator.NOT_IN, list(values)))

    def _predicate(
        self, column: Column, operator: Operator, search: Any, strict: bool = False
    ) -> Predicate:
        extractor = self._extractor

        def matches(item: Any) -> bool:
            # stringable items are compared as themselves whatever the column
            value = item if extractor.is_stringable(item) else extractor.extract(item, column)
            return evaluate(operator, value, search, strict)

        return matches
