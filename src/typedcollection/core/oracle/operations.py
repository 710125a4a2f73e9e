"""Type oracle: classify items and check them against an expected type."""

from __future__ import annotations

import functools
import json
import types
import typing
from typing import Any

from typedcollection.core.comparison.operations import identical
from typedcollection.core.oracle.models import ANY, TypeTag

_BUILTIN_TAGS: dict[type, TypeTag] = {
    str: TypeTag.STRING,
    int: TypeTag.INTEGER,
    float: TypeTag.FLOAT,
    bool: TypeTag.BOOLEAN,
    type(None): TypeTag.NULL,
    list: TypeTag.ARRAY,
    tuple: TypeTag.ARRAY,
    dict: TypeTag.ARRAY,
}

_CALLABLE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.LambdaType,
    functools.partial,
)


def normalize_expected_type(expected: Any, is_literal_type: bool = False) -> Any:
    """Convert the various ways of spelling an expected type to its canonical form.

    Literal types are returned unchanged. Otherwise ``typing.Any``, ``""`` and
    ``"mixed"`` become ``ANY``, tag names become their ``TypeTag`` and builtin
    scalar classes map onto their tag (``int`` -> ``TypeTag.INTEGER``).

    Args:
        expected: Expected type as given by the caller.
        is_literal_type: Whether ``expected`` is a literal value.

    Returns:
        A ``TypeTag``, a class, or the literal value.
    """
    if is_literal_type:
        return expected
    if expected is typing.Any or expected == "":
        return ANY
    if expected is None:
        return TypeTag.NULL
    if isinstance(expected, TypeTag):
        return expected
    if isinstance(expected, str):
        try:
            return TypeTag(expected)
        except ValueError:
            raise ValueError(f"Unknown type name: {expected!r}") from None
    if isinstance(expected, type):
        return _BUILTIN_TAGS.get(expected, expected)
    raise ValueError(f"Invalid expected type: {expected!r}. Use is_literal_type=True for values.")


def type_of(item: Any, is_literal_type: bool = False) -> Any:
    """Resolve the type of an item.

    In literal mode the item is its own type. Otherwise scalars, arrays and
    callables map to a ``TypeTag`` and every other object to its class.
    """
    if is_literal_type:
        return item
    tag = _BUILTIN_TAGS.get(type(item))
    if tag is not None:
        return tag
    for builtin, builtin_tag in _BUILTIN_TAGS.items():
        # subclasses such as OrderedDict or IntEnum keep their builtin category
        if isinstance(item, builtin):
            return builtin_tag
    if isinstance(item, _CALLABLE_TYPES):
        return TypeTag.CALLABLE
    return type(item)


def is_valid(item: Any, expected: Any, is_literal_type: bool = False) -> bool:
    """Check whether an item satisfies an already normalized expected type."""
    if is_literal_type:
        return identical(item, expected)
    if expected is ANY:
        return True

    actual = type_of(item)
    if actual == expected:
        return True
    if expected is TypeTag.NUMBER:
        return actual in (TypeTag.INTEGER, TypeTag.FLOAT)
    if expected is TypeTag.OBJECT:
        return isinstance(actual, type)
    return isinstance(expected, type) and isinstance(item, expected)


def describe_type(value: Any, is_literal_type: bool = False) -> str:
    """Render an expected or actual type for error messages."""
    if is_literal_type:
        try:
            return json.dumps(value)
        except (TypeError, ValueError):
            return repr(value)
    if isinstance(value, TypeTag):
        return value.value
    if isinstance(value, type):
        return value.__qualname__
    return str(value)
