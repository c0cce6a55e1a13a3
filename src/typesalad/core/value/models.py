"""Typed value models: the base class and scalar wrappers.

Usage:
    name = SaladString("salad")
    count = SaladInt(3)

    name.tag            # TypeTag.STRING
    count.raw_value()   # 3
    count.render()      # SaladString("3")

    SaladInt("3")       # raises TypeMismatchError
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar

from typesalad.core.errors import TypeMismatchError
from typesalad.core.types import TypeTag

if TYPE_CHECKING:
    from typesalad.core.value.containers import GenericList


def _is_number(raw: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(raw, int | float) and not isinstance(raw, bool)


def _kind_mismatch(cls: type, raw: Any, expected: str) -> TypeMismatchError:
    return TypeMismatchError(
        f"{cls.__name__} expected host type {expected}, got '{type(raw).__name__}'."
    )


class TypeSalad:
    """Base class for all typed values.

    Subclasses set ``__tag__``; the tag is fixed per class and cannot be
    reassigned on an instance.
    """

    __tag__: ClassVar[TypeTag]

    @property
    def tag(self) -> TypeTag:
        """The type tag of this value."""
        return type(self).__tag__

    def raw_value(self) -> Any:
        """Return the underlying host value used for equality checks."""
        raise NotImplementedError

    def render(self) -> SaladString:
        """Return the human-readable form, itself typed as a String."""
        return SaladString(str(self.raw_value()))

    def to_json(self) -> Any:
        """Return a JSON-compatible projection of this value."""
        return self.raw_value()

    def __str__(self) -> str:
        return self.render().raw_value()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw_value()!r})"


class SaladString(TypeSalad):
    """Wraps a ``str``."""

    __tag__ = TypeTag.STRING

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise _kind_mismatch(type(self), value, "'str'")
        self._value = value

    def raw_value(self) -> str:
        return self._value

    def render(self) -> SaladString:
        return SaladString(self._value)


class SaladInt(TypeSalad):
    """Wraps an ``int``. Booleans are rejected."""

    __tag__ = TypeTag.INT

    def __init__(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise _kind_mismatch(type(self), value, "'int'")
        self._value = value

    def raw_value(self) -> int:
        return self._value


class SaladFloat(TypeSalad):
    """Wraps a floating-point number. Ints are widened to ``float``."""

    __tag__ = TypeTag.FLOAT

    def __init__(self, value: float) -> None:
        if not _is_number(value):
            raise _kind_mismatch(type(self), value, "'int' or 'float'")
        self._value = float(value)

    def raw_value(self) -> float:
        return self._value

    def render(self) -> SaladString:
        return SaladString(repr(self._value))


class SaladBool(TypeSalad):
    """Wraps a ``bool``."""

    __tag__ = TypeTag.BOOL

    def __init__(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise _kind_mismatch(type(self), value, "'bool'")
        self._value = value

    def raw_value(self) -> bool:
        return self._value

    def render(self) -> SaladString:
        return SaladString("true" if self._value else "false")


class SaladDate(TypeSalad):
    """Wraps a ``datetime``.

    Accepts a ``datetime``, an ISO-8601 string, or a POSIX timestamp in
    seconds (interpreted as UTC). ``raw_value()`` is the POSIX timestamp, so
    two dates naming the same instant compare equal.
    """

    __tag__ = TypeTag.DATE

    def __init__(self, value: datetime | str | float) -> None:
        if isinstance(value, datetime):
            self._value = value
        elif isinstance(value, str):
            try:
                self._value = datetime.fromisoformat(value)
            except ValueError as e:
                raise ValueError(f"SaladDate got an invalid ISO-8601 date: {value!r}") from e
        elif _is_number(value):
            self._value = datetime.fromtimestamp(value, tz=UTC)
        else:
            raise _kind_mismatch(type(self), value, "'datetime', 'str' or a timestamp")

    @property
    def value(self) -> datetime:
        """The wrapped ``datetime``."""
        return self._value

    @property
    def year(self) -> int:
        return self._value.year

    @property
    def month(self) -> int:
        """Month of the year, 1-12."""
        return self._value.month

    @property
    def day(self) -> int:
        return self._value.day

    def raw_value(self) -> float:
        return self._value.timestamp()

    def render(self) -> SaladString:
        return SaladString(self._value.isoformat())

    def to_json(self) -> str:
        return self._value.isoformat()


class _Coordinates(TypeSalad):
    """Shared logic for fixed-size coordinate tuples."""

    _axes: ClassVar[tuple[str, ...]]

    def __init__(self, *coords: str | int | float) -> None:
        if not all(isinstance(c, str) or _is_number(c) for c in coords):
            kinds = ", ".join(f"'{type(c).__name__}'" for c in coords)
            raise TypeMismatchError(
                f"{type(self).__name__} expected 'str' or numeric components, got {kinds}."
            )
        self._coords = coords
        # Stable projection so two identical vectors compare equal
        self._val_string = ",".join(str(c) for c in coords)

    def raw_value(self) -> str:
        return self._val_string

    def render(self) -> SaladString:
        return SaladString(", ".join(str(c) for c in self._coords))

    def to_json(self) -> dict[str, str | int | float]:
        return dict(zip(self._axes, self._coords, strict=True))

    def components(self) -> GenericList:
        """Return the coordinates as a String-typed GenericList."""
        # Late import to avoid circular dependency
        from typesalad.core.value.containers import generic_list

        strings = generic_list(TypeTag.STRING)
        return strings(*(SaladString(str(c)) for c in self._coords))


class SaladVec2(_Coordinates):
    """A 2D coordinate pair."""

    __tag__ = TypeTag.VEC2
    _axes = ("x", "y")

    def __init__(self, x: str | int | float, y: str | int | float) -> None:
        super().__init__(x, y)

    @property
    def x(self) -> str | int | float:
        return self._coords[0]

    @property
    def y(self) -> str | int | float:
        return self._coords[1]


class SaladVec3(_Coordinates):
    """A 3D coordinate triple."""

    __tag__ = TypeTag.VEC3
    _axes = ("x", "y", "z")

    def __init__(
        self, x: str | int | float, y: str | int | float, z: str | int | float
    ) -> None:
        super().__init__(x, y, z)

    @property
    def x(self) -> str | int | float:
        return self._coords[0]

    @property
    def y(self) -> str | int | float:
        return self._coords[1]

    @property
    def z(self) -> str | int | float:
        return self._coords[2]


def tag_of(value: Any) -> TypeTag | None:
    """Get the tag of a typed value, or None if the value is untyped."""
    if isinstance(value, TypeSalad):
        return value.tag
    return None


def raw_of(value: Any) -> Any:
    """Get the raw value of a typed value, passing untyped values through."""
    if isinstance(value, TypeSalad):
        return value.raw_value()
    return value


def to_json_value(value: Any) -> Any:
    """Recursively project typed values (and plain lists/dicts of them) to JSON data."""
    if isinstance(value, TypeSalad):
        return value.to_json()
    if isinstance(value, Mapping):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [to_json_value(v) for v in value]
    return value
