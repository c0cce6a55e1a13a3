"""SaladLinq package: chainable queries over in-memory sequences.

Usage:
    await system.use_builtin("SaladLinq")

    result = (
        system.linq.new_query([5, 3, 8, 1, 3])
        .where(lambda n: n > 1)
        .distinct()
        .order_by()
        .take(2)
        .to_list()
    )  # [3, 5]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Self

from typesalad.core.value import GenericList, SaladArray


@dataclass(slots=True)
class Grouping:
    """One group produced by ``SaladLinq.group_by``."""

    key: Any
    values: list[Any] = field(default_factory=list)


class SaladLinq:
    """Chainable query over a private copy of the source.

    Chain methods replace the working list and return ``self``; terminal
    methods (``sum``, ``min``, ``group_by``, ``to_list``, ...) read it.
    """

    def __init__(self, source: Iterable[Any] | None = None) -> None:
        if isinstance(source, SaladArray | GenericList):
            source = source.raw_value()
        if source is None or isinstance(source, str | bytes) or not isinstance(source, Iterable):
            source = ()
        self._data: list[Any] = list(source)

    def where(self, predicate: Callable[[Any], bool]) -> Self:
        self._data = [item for item in self._data if predicate(item)]
        return self

    def select(self, selector: Callable[[Any], Any]) -> Self:
        self._data = [selector(item) for item in self._data]
        return self

    def order_by(self, key: Callable[[Any], Any] | None = None, reverse: bool = False) -> Self:
        """Stable sort by ``key`` (natural ordering when omitted)."""
        self._data.sort(key=key, reverse=reverse)
        return self

    def skip(self, count: int) -> Self:
        self._data = self._data[count:]
        return self

    def take(self, count: int) -> Self:
        self._data = self._data[:count]
        return self

    def distinct(self) -> Self:
        """Drop repeats, keeping first occurrences.

        Hashable items are compared by value, unhashable ones by identity.
        """
        seen: set[Any] = set()
        kept: list[Any] = []
        for item in self._data:
            try:
                hash(item)
                marker = item
            except TypeError:
                marker = ("id", id(item))
            if marker in seen:
                continue
            seen.add(marker)
            kept.append(item)
        self._data = kept
        return self

    def sum(self) -> Any:
        total: Any = 0
        for item in self._data:
            total = total + item
        return total

    def min(self) -> Any:
        """Smallest item, or None when empty."""
        return min(self._data) if self._data else None

    def max(self) -> Any:
        """Largest item, or None when empty."""
        return max(self._data) if self._data else None

    def average(self) -> float:
        """Mean of the items, or 0 when empty."""
        return self.sum() / len(self._data) if self._data else 0

    def count(self) -> int:
        return len(self._data)

    def group_by(self, key_selector: Callable[[Any], Any]) -> list[Grouping]:
        """Group items by key, in order of first appearance."""
        groups: dict[Any, Grouping] = {}
        for item in self._data:
            key = key_selector(item)
            if key not in groups:
                groups[key] = Grouping(key=key)
            groups[key].values.append(item)
        return list(groups.values())

    def to_list(self) -> list[Any]:
        return self._data


class SaladLinqPackage:
    """Package instance the System stores; hands out fresh queries."""

    def new_query(self, source: Iterable[Any] | None = None) -> SaladLinq:
        return SaladLinq(source)
