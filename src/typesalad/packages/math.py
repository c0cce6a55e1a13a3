"""SaladMath package: typed integer, imaginary-integer, and polar-vector arithmetic.

Usage:
    await system.use_builtin("SaladMath")
    m = system.math

    m.add(SaladInt(2), SaladInt(3))                      # SaladInt(5)
    m.divide(SaladInt(7), SaladInt(0))                   # raises DivisionByZeroError

    z = ImagInt(SaladInt(1), SaladInt(-2))               # "1 - 2i"
    m.sum(z, ImagInt(SaladInt(2), SaladInt(5)))          # ImagInt "3 + 3i"
"""

from __future__ import annotations

import math
from typing import Any

from typesalad.core.errors import DivisionByZeroError, TypeMismatchError
from typesalad.core.overload import Overloadable
from typesalad.core.types import TypeTag
from typesalad.core.value import SaladInt, SaladString, TypeSalad, raw_of, tag_of


def _expect(value: Any, tag: TypeTag, owner: str) -> None:
    received = tag_of(value)
    if received != tag:
        raise TypeMismatchError(f"{owner} expected {tag}, got '{received}'.")


class ImagInt(TypeSalad):
    """Integer-based imaginary number ``real + imag*i``."""

    __tag__ = TypeTag.IMAG_INT

    def __init__(self, real_part: SaladInt, imag_part: SaladInt) -> None:
        if tag_of(real_part) != TypeTag.INT or tag_of(imag_part) != TypeTag.INT:
            raise TypeMismatchError(
                f"ImagInt expects two SaladInt values. "
                f"Got ({tag_of(real_part)}, {tag_of(imag_part)})."
            )
        self.real_part = real_part
        self.imag_part = imag_part

    def raw_value(self) -> str:
        return f"{self.real_part.raw_value()},{self.imag_part.raw_value()}"

    def render(self) -> SaladString:
        real = self.real_part.raw_value()
        imag = self.imag_part.raw_value()
        sign = "+" if imag >= 0 else "-"
        return SaladString(f"{real} {sign} {abs(imag)}i")

    def to_json(self) -> dict[str, int]:
        return {"real": self.real_part.raw_value(), "imag": self.imag_part.raw_value()}


class Vector(TypeSalad):
    """Magnitude and direction (radians). Components may be numbers or typed numbers."""

    __tag__ = TypeTag.VECTOR

    def __init__(self, magnitude: float | TypeSalad, direction: float | TypeSalad) -> None:
        self.magnitude = magnitude
        self.direction = direction

    def _polar(self) -> tuple[float, float]:
        return float(raw_of(self.magnitude)), float(raw_of(self.direction))

    def to_cartesian(self) -> tuple[float, float]:
        """Return ``(x, y)``."""
        mag, direction = self._polar()
        return mag * math.cos(direction), mag * math.sin(direction)

    def raw_value(self) -> tuple[float, float]:
        return self._polar()

    def render(self) -> SaladString:
        mag, direction = self._polar()
        return SaladString(f"Vector(mag={mag:.2f}, dir={math.degrees(direction):.2f}°)")

    def to_json(self) -> dict[str, float]:
        mag, direction = self._polar()
        return {"magnitude": mag, "direction": direction}


class SaladMath:
    """Typed arithmetic. Every operation checks its argument tags first."""

    ImagInt = ImagInt
    Vector = Vector

    def __init__(self) -> None:
        self._sums = Overloadable()
        self._sums.define_overload("sum", (TypeTag.INT, TypeTag.INT), self.add)
        self._sums.define_overload("sum", (TypeTag.IMAG_INT, TypeTag.IMAG_INT), self.add_imag_int)
        self._sums.define_overload("sum", (TypeTag.VECTOR, TypeTag.VECTOR), self.add_vectors)

    def ensure_int(self, value: Any) -> None:
        _expect(value, TypeTag.INT, "SaladMath")

    def ensure_imag_int(self, value: Any) -> None:
        _expect(value, TypeTag.IMAG_INT, "SaladMath")

    def ensure_vector(self, value: Any) -> None:
        _expect(value, TypeTag.VECTOR, "SaladMath")

    # Int ops

    def add(self, a: SaladInt, b: SaladInt) -> SaladInt:
        self.ensure_int(a)
        self.ensure_int(b)
        return SaladInt(a.raw_value() + b.raw_value())

    def subtract(self, a: SaladInt, b: SaladInt) -> SaladInt:
        self.ensure_int(a)
        self.ensure_int(b)
        return SaladInt(a.raw_value() - b.raw_value())

    def multiply(self, a: SaladInt, b: SaladInt) -> SaladInt:
        self.ensure_int(a)
        self.ensure_int(b)
        return SaladInt(a.raw_value() * b.raw_value())

    def divide(self, a: SaladInt, b: SaladInt) -> SaladInt:
        """Floor division, so the result stays an Int.

        Raises:
            DivisionByZeroError: If ``b`` is zero.
        """
        self.ensure_int(a)
        self.ensure_int(b)
        if b.raw_value() == 0:
            raise DivisionByZeroError("Cannot divide by zero.")
        return SaladInt(a.raw_value() // b.raw_value())

    # ImagInt ops

    def add_imag_int(self, a: ImagInt, b: ImagInt) -> ImagInt:
        self.ensure_imag_int(a)
        self.ensure_imag_int(b)
        return ImagInt(
            SaladInt(a.real_part.raw_value() + b.real_part.raw_value()),
            SaladInt(a.imag_part.raw_value() + b.imag_part.raw_value()),
        )

    def sub_imag_int(self, a: ImagInt, b: ImagInt) -> ImagInt:
        self.ensure_imag_int(a)
        self.ensure_imag_int(b)
        return ImagInt(
            SaladInt(a.real_part.raw_value() - b.real_part.raw_value()),
            SaladInt(a.imag_part.raw_value() - b.imag_part.raw_value()),
        )

    # Vector ops

    def add_vectors(self, a: Vector, b: Vector) -> Vector:
        """Add two polar vectors through their cartesian forms."""
        self.ensure_vector(a)
        self.ensure_vector(b)
        ax, ay = a.to_cartesian()
        bx, by = b.to_cartesian()
        x, y = ax + bx, ay + by
        return Vector(math.hypot(x, y), math.atan2(y, x))

    def sum(self, a: TypeSalad, b: TypeSalad) -> TypeSalad:
        """Add two Ints, two ImagInts, or two Vectors, chosen by argument tags.

        Raises:
            NoMatchingOverloadError: For any other tag pair.
        """
        return self._sums.call_overload("sum", a, b)  # type: ignore[no-any-return]
