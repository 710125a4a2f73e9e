"""Comparison operators understood by the ``where`` family.

Usage:
    Operator.parse(">=")        # Operator.GE
    Operator.parse("LIKE%")     # Operator.STARTS_WITH (trailing wildcard)
    Operator.for_like_pattern("%son")  # (Operator.ENDS_WITH, "son")
"""

from __future__ import annotations

from enum import Enum


class Operator(Enum):
    """Closed set of comparisons between an extracted value and a search operand."""

    EQ = "="
    IDENTICAL = "==="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    BETWEEN = "BETWEEN"
    NOT_BETWEEN = "NOT_BETWEEN"
    IN = "IN"
    NOT_IN = "NOT_IN"
    CONTAINS = "%LIKE%"
    STARTS_WITH = "LIKE%"
    ENDS_WITH = "%LIKE"
    NOT_CONTAINS = "%NOT_LIKE%"
    NOT_STARTS_WITH = "NOT_LIKE%"
    NOT_ENDS_WITH = "%NOT_LIKE"

    @classmethod
    def parse(cls, value: Operator | str) -> Operator:
        """Resolve an operator from a member, its symbol or an alias.

        Raises:
            ValueError: If the operator is not recognized.
        """
        if isinstance(value, Operator):
            return value
        symbol = value.strip()
        operator = _ALIASES.get(symbol) or _ALIASES.get(symbol.upper())
        if operator is None:
            raise ValueError(f"Unknown comparison operator: {value!r}")
        return operator

    @classmethod
    def for_like_pattern(cls, pattern: str, negate: bool = False) -> tuple[Operator, str]:
        """Pick the like operator from the wildcard positions of a pattern.

        Returns:
            The operator and the pattern with its wildcards stripped.
        """
        leading = pattern.startswith("%")
        trailing = pattern.endswith("%")
        if leading and not trailing:
            operator = Operator.NOT_ENDS_WITH if negate else Operator.ENDS_WITH
        elif trailing and not leading:
            operator = Operator.NOT_STARTS_WITH if negate else Operator.STARTS_WITH
        else:
            operator = Operator.NOT_CONTAINS if negate else Operator.CONTAINS
        return operator, pattern.strip("%")


_ALIASES: dict[str, Operator] = {
    **{op.value: op for op in Operator},
    "==": Operator.EQ,
    "<>": Operator.NE,
    "!==": Operator.NE,
    "CONTAINS": Operator.CONTAINS,
    "LIKE": Operator.CONTAINS,
    "STARTS_WITH": Operator.STARTS_WITH,
    "ENDS_WITH": Operator.ENDS_WITH,
    "NOT_LIKE": Operator.NOT_CONTAINS,
    "NOT_CONTAINS": Operator.NOT_CONTAINS,
    "NOT_STARTS_WITH": Operator.NOT_STARTS_WITH,
    "NOT_ENDS_WITH": Operator.NOT_ENDS_WITH,
}
