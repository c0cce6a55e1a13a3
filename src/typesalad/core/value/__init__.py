"""Typed value functionality: models, containers, and operations."""

from typesalad.core.value.containers import GenericList, SaladArray, SaladObject, generic_list
from typesalad.core.value.models import (
    SaladBool,
    SaladDate,
    SaladFloat,
    SaladInt,
    SaladString,
    SaladVec2,
    SaladVec3,
    TypeSalad,
    raw_of,
    tag_of,
    to_json_value,
)
from typesalad.core.value.operations import concat, make_value, typed_if

__all__ = [
    # Models
    "TypeSalad",
    "SaladString",
    "SaladInt",
    "SaladFloat",
    "SaladBool",
    "SaladDate",
    "SaladVec2",
    "SaladVec3",
    "tag_of",
    "raw_of",
    "to_json_value",
    # Containers
    "SaladArray",
    "SaladObject",
    "GenericList",
    "generic_list",
    # Operations
    "make_value",
    "typed_if",
    "concat",
]
