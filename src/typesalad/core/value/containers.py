"""Typed containers: arrays, keyed objects, and homogeneous generic lists.

Usage:
    arr = SaladArray([SaladInt(1), SaladInt(2)])
    arr.push(SaladInt(3))
    head = arr.slice(0, 2)          # independent copy

    obj = SaladObject({"name": SaladString("salad")})
    obj.set("size", SaladInt(3))

    Strings = generic_list(TypeTag.STRING)
    names = Strings(SaladString("a"))
    names.add(SaladInt(1))          # raises TypeMismatchError
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from functools import cache
from typing import Any, ClassVar

from typesalad.core.errors import InvalidShapeError, TypeMismatchError
from typesalad.core.types import TypeTag
from typesalad.core.value.models import SaladString, TypeSalad, tag_of, to_json_value


def _render_items(items: Iterable[Any]) -> str:
    return ", ".join(str(item) for item in items)


class SaladArray(TypeSalad):
    """Ordered, mutable sequence of typed or raw values.

    The constructor copies ``items``; the array never aliases the caller's list.
    """

    __tag__ = TypeTag.ARRAY

    def __init__(self, items: Iterable[Any] = ()) -> None:
        if isinstance(items, str | bytes | Mapping) or not isinstance(items, Iterable):
            raise InvalidShapeError(
                f"SaladArray expects an iterable of items, got '{type(items).__name__}'."
            )
        self._items: list[Any] = list(items)

    def push(self, item: Any) -> None:
        """Append an item to the end of the array."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the last item.

        Raises:
            IndexError: If the array is empty.
        """
        return self._items.pop()

    @property
    def length(self) -> int:
        return len(self._items)

    def slice(self, start: int | None = None, stop: int | None = None) -> SaladArray:
        """Return a new SaladArray holding a shallow copy of ``items[start:stop]``."""
        return SaladArray(self._items[start:stop])

    def raw_value(self) -> list[Any]:
        return self._items

    def render(self) -> SaladString:
        return SaladString(f"[{_render_items(self._items)}]")

    def to_json(self) -> list[Any]:
        return [to_json_value(item) for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]


_UNSET: Any = object()


class SaladObject(TypeSalad):
    """String-keyed mapping that can hold typed or untyped values."""

    __tag__ = TypeTag.OBJECT

    def __init__(self, obj: Mapping[str, Any] = _UNSET) -> None:
        if obj is _UNSET:
            obj = {}
        if not isinstance(obj, Mapping):
            raise InvalidShapeError(
                f"SaladObject expects a plain mapping, got '{type(obj).__name__}'."
            )
        self._obj: dict[str, Any] = dict(obj)

    def get(self, key: str, default: Any = None) -> Any:
        """Get the value stored under ``key``."""
        return self._obj.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._obj[key] = value

    def keys(self) -> list[str]:
        return list(self._obj)

    def raw_value(self) -> dict[str, Any]:
        return self._obj

    def render(self) -> SaladString:
        return SaladString(json.dumps(self.to_json()))

    def to_json(self) -> dict[str, Any]:
        return {key: to_json_value(value) for key, value in self._obj.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._obj

    def __len__(self) -> int:
        return len(self._obj)


class GenericList(TypeSalad):
    """List that only accepts items tagged with ``expected_tag``.

    Not instantiated directly; use ``generic_list(tag)`` to get the class for a tag.
    """

    __tag__ = TypeTag.GENERIC_LIST
    expected_tag: ClassVar[TypeTag | None] = None

    def __init__(self, *elements: TypeSalad) -> None:
        if self.expected_tag is None:
            raise TypeError("GenericList has no element tag. Use generic_list(tag) instead.")
        self._items: list[TypeSalad] = []
        for element in elements:
            self.add(element)

    def add(self, item: TypeSalad) -> None:
        """Append an item after checking its tag.

        Raises:
            TypeMismatchError: If the item's tag differs from the expected tag.
        """
        received = tag_of(item)
        if received != self.expected_tag:
            raise TypeMismatchError(
                f"Expected type '{self.expected_tag}', received '{received}'."
            )
        self._items.append(item)

    @property
    def items(self) -> list[TypeSalad]:
        return self._items

    def raw_value(self) -> list[TypeSalad]:
        return self._items

    def render(self) -> SaladString:
        return SaladString(f"[GenericList of {self.expected_tag}] [{_render_items(self._items)}]")

    def to_json(self) -> list[Any]:
        return [item.to_json() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TypeSalad]:
        return iter(self._items)


def generic_list(expected_tag: TypeTag | str) -> type[GenericList]:
    """Create the GenericList class that accepts only ``expected_tag`` items.

    The same tag always yields the same class, so ``isinstance`` checks work
    across call sites.

    Args:
        expected_tag: Tag every element must carry.

    Returns:
        A GenericList subclass bound to the tag.

    Raises:
        ValueError: If ``expected_tag`` names no known tag.
    """
    return _generic_list_class(TypeTag(expected_tag))


@cache
def _generic_list_class(tag: TypeTag) -> type[GenericList]:
    return type(f"GenericList[{tag}]", (GenericList,), {"expected_tag": tag})
