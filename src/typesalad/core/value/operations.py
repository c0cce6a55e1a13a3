"""Typed value operations: construction by tag, typed equality, concatenation."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from typesalad.core.errors import TypeMismatchError, UntypedError
from typesalad.core.types import TypeTag
from typesalad.core.value.containers import SaladArray, SaladObject
from typesalad.core.value.models import (
    SaladBool,
    SaladDate,
    SaladFloat,
    SaladInt,
    SaladString,
    SaladVec2,
    SaladVec3,
    TypeSalad,
    tag_of,
)

_SCALARS: dict[TypeTag, Callable[[Any], TypeSalad]] = {
    TypeTag.STRING: SaladString,
    TypeTag.INT: SaladInt,
    TypeTag.FLOAT: SaladFloat,
    TypeTag.BOOL: SaladBool,
    TypeTag.DATE: SaladDate,
    TypeTag.ARRAY: SaladArray,
    TypeTag.OBJECT: SaladObject,
}

_COORDINATES: dict[TypeTag, tuple[type[SaladVec2 | SaladVec3], int]] = {
    TypeTag.VEC2: (SaladVec2, 2),
    TypeTag.VEC3: (SaladVec3, 3),
}


def make_value(tag: TypeTag | str, raw: Any) -> TypeSalad:
    """Construct the typed value for ``tag`` from a raw host value.

    Vec2/Vec3 take a sequence of components. Tags whose values are built from
    other typed values (ImagInt, Vector, GenericList) are not constructible
    from a single raw value.

    Args:
        tag: Tag of the value to build.
        raw: Raw host value.

    Returns:
        The typed value.

    Raises:
        TypeMismatchError: If ``raw`` does not satisfy the tag's requirement.
        ValueError: If ``tag`` is unknown or cannot be built from a raw value.
    """
    tag = TypeTag(tag)
    if tag in _SCALARS:
        return _SCALARS[tag](raw)
    if tag in _COORDINATES:
        cls, size = _COORDINATES[tag]
        if isinstance(raw, str) or not isinstance(raw, Sequence) or len(raw) != size:
            raise TypeMismatchError(f"{cls.__name__} expected a sequence of {size} components.")
        return cls(*raw)
    raise ValueError(f"Tag '{tag}' cannot be constructed from a raw value.")


def _require_tag(value: Any, name: str) -> TypeTag:
    tag = tag_of(value)
    if tag is None:
        raise UntypedError(
            f"Parameter '{name}' is untyped (either not a TypeSalad value or incorrectly defined)."
        )
    return tag


def _raw_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # Mutable collections compare by reference, everything else by value
    if isinstance(a, list | dict) or isinstance(b, list | dict):
        return False
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return bool(a == b)


def typed_if(
    a: TypeSalad,
    b: TypeSalad,
    on_equal: Callable[[], Any] | None,
    on_not_equal: Callable[[], Any] | None = None,
) -> None:
    """Branch on the equality of two values of the same tag.

    Calls ``on_equal()`` if the raw values are equal, otherwise ``on_not_equal()``
    when given. Callbacks run before this function returns; non-callables are
    ignored.

    Raises:
        UntypedError: If either argument carries no tag.
        TypeMismatchError: If the tags differ.
    """
    tag_a = _require_tag(a, "a")
    tag_b = _require_tag(b, "b")
    if tag_a != tag_b:
        raise TypeMismatchError(f"Parameter 'b' was type '{tag_b}' but 'a' is type '{tag_a}'.")

    if _raw_equal(a.raw_value(), b.raw_value()):
        if callable(on_equal):
            on_equal()
    elif callable(on_not_equal):
        on_not_equal()


_CONCATENABLE = frozenset({TypeTag.STRING, TypeTag.INT})


def concat(a: TypeSalad, b: TypeSalad) -> SaladString:
    """Concatenate the text of two String or two Int values.

    Returns:
        A new SaladString, e.g. ``concat(SaladInt(1), SaladInt(2))`` renders ``"12"``.

    Raises:
        UntypedError: If either argument carries no tag.
        TypeMismatchError: If the tags differ or are not String/Int.
    """
    tag_a = _require_tag(a, "a")
    tag_b = _require_tag(b, "b")
    if tag_a != tag_b:
        raise TypeMismatchError(f"Parameters 'a' and 'b' have unmatching types ('{tag_a}', '{tag_b}').")
    if tag_a not in _CONCATENABLE:
        raise TypeMismatchError(f"concat expects String or Int values, got '{tag_a}'.")
    return SaladString(f"{a.raw_value()}{b.raw_value()}")
