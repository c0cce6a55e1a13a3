"""Core type definitions for TypeSalad."""

from enum import StrEnum


class TypeTag(StrEnum):
    """Closed set of tags a typed value can carry.

    Members compare equal to their plain string names, so ``TypeTag.STRING == "String"``.
    """

    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOL = "Bool"
    DATE = "Date"
    VEC2 = "Vec2"
    VEC3 = "Vec3"
    IMAG_INT = "ImagInt"
    VECTOR = "Vector"
    ARRAY = "Array"
    OBJECT = "Object"
    GENERIC_LIST = "GenericList"

