"""Pure comparison functions behind the ``where`` family and set algebra.

Two notions of equality are used throughout the package:

- ``loose_equals``: equality with the coercions users of record collections
  expect ("30" equals 30, None equals "", True equals any truthy value).
- ``identical``: same type and same value, recursively for arrays.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from typedcollection.core.comparison.models import Operator

_NUMERIC = (int, float)


def _as_number(value: Any) -> int | float | None:
    """Numeric value of a number or numeric string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, _NUMERIC):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip()) if value.strip() else None
        except ValueError:
            return None
    return None


def identical(a: Any, b: Any) -> bool:
    """Strict equality: same type and equal value, compared recursively."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(identical(x, y) for x, y in zip(a, b, strict=True))
    if isinstance(a, Mapping):
        return list(a.keys()) == list(b.keys()) and all(identical(a[k], b[k]) for k in a)
    return bool(a == b)


def loose_equals(a: Any, b: Any) -> bool:
    """Type-coercing equality."""
    if isinstance(a, bool) or isinstance(b, bool):
        return bool(a) == bool(b)
    if a is None or b is None:
        other = b if a is None else a
        return other == "" if isinstance(other, str) else not other
    if isinstance(a, str) and isinstance(b, str):
        if a == b:
            return True
        num_a, num_b = _as_number(a), _as_number(b)
        return num_a is not None and num_b is not None and num_a == num_b
    if isinstance(a, str) or isinstance(b, str):
        num_a, num_b = _as_number(a), _as_number(b)
        return num_a is not None and num_b is not None and num_a == num_b
    try:
        return bool(a == b)
    except TypeError:
        return False


def compare(a: Any, b: Any) -> int | None:
    """Three-way ordering of two values, or None when they cannot be ordered.

    Numbers and numeric strings are ordered by value. ``None`` orders below
    every value it is not loosely equal to.
    """
    if loose_equals(a, b):
        return 0
    if a is None or b is None:
        return -1 if a is None else 1
    num_a, num_b = _as_number(a), _as_number(b)
    if num_a is not None and num_b is not None:
        return -1 if num_a < num_b else (1 if num_a > num_b else 0)
    try:
        return -1 if a < b else (1 if a > b else 0)
    except TypeError:
        return None


def to_string(value: Any) -> str:
    """String form used by the like operators."""
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def _lower(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    if isinstance(value, (list, tuple, set, frozenset)):
        return type(value)(_lower(v) for v in value)
    return value


def _ordered(a: Any, b: Any, accept: tuple[int, ...]) -> bool:
    result = compare(a, b)
    return result is not None and result in accept


def evaluate(operator: Operator | str, actual: Any, search: Any, strict: bool = False) -> bool:
    """Evaluate ``actual <operator> search``.

    Args:
        operator: Operator member or symbol.
        actual: Value extracted from the item.
        search: Right-hand operand. A ``(lower, upper)`` pair for the between
            operators, a collection of values for the membership operators.
        strict: Disable lower-casing and use identity instead of loose equality.

    Returns:
        True if the item satisfies the comparison.

    Raises:
        ValueError: If the operator is unknown or a between operand is not a pair.
    """
    operator = Operator.parse(operator)
    if not strict:
        actual, search = _lower(actual), _lower(search)
    equals = identical if strict else loose_equals

    match operator:
        case Operator.EQ:
            return equals(actual, search)
        case Operator.IDENTICAL:
            return identical(actual, search)
        case Operator.NE:
            return not identical(actual, search)
        case Operator.GT:
            return _ordered(actual, search, (1,))
        case Operator.LT:
            return _ordered(actual, search, (-1,))
        case Operator.GE:
            return _ordered(actual, search, (0, 1))
        case Operator.LE:
            return _ordered(actual, search, (-1, 0))
        case Operator.BETWEEN | Operator.NOT_BETWEEN:
            lower, upper = _bounds(search)
            inside = _ordered(actual, lower, (0, 1)) and _ordered(actual, upper, (-1, 0))
            if operator is Operator.BETWEEN:
                return inside
            return _ordered(actual, lower, (-1,)) or _ordered(actual, upper, (1,))
        case Operator.IN:
            return any(equals(actual, candidate) for candidate in search)
        case Operator.NOT_IN:
            return not any(equals(actual, candidate) for candidate in search)
        case Operator.CONTAINS:
            return to_string(search) in to_string(actual)
        case Operator.STARTS_WITH:
            return to_string(actual).startswith(to_string(search))
        case Operator.ENDS_WITH:
            return to_string(actual).endswith(to_string(search))
        case Operator.NOT_CONTAINS:
            return to_string(search) not in to_string(actual)
        case Operator.NOT_STARTS_WITH:
            return not to_string(actual).startswith(to_string(search))
        case Operator.NOT_ENDS_WITH:
            return not to_string(actual).endswith(to_string(search))


def _bounds(search: Any) -> tuple[Any, Any]:
    try:
        lower, upper = search
    except (TypeError, ValueError):
        raise ValueError(f"Between operators expect a (lower, upper) pair, got {search!r}") from None
    return lower, upper
