"""Core functionalities: typed values, containers, dispatch, and errors.

Architecture Note:
    core/ contains the stateless typed-value contract and helpers.
    For the stateful package registry and storage, see system/.
"""

from typesalad.core.errors import (
    AlreadyEnabledError,
    DivisionByZeroError,
    ExportNotFoundError,
    InvalidShapeError,
    NoMatchingOverloadError,
    NotEnabledError,
    PackageError,
    TypeMismatchError,
    TypeSaladError,
    UntypedError,
)
from typesalad.core.metadata import add_metadata, get_metadata
from typesalad.core.overload import Overloadable, OverloadSignature
from typesalad.core.types import TypeTag
from typesalad.core.value import (
    GenericList,
    SaladArray,
    SaladBool,
    SaladDate,
    SaladFloat,
    SaladInt,
    SaladObject,
    SaladString,
    SaladVec2,
    SaladVec3,
    TypeSalad,
    concat,
    generic_list,
    make_value,
    raw_of,
    tag_of,
    to_json_value,
    typed_if,
)

__all__ = [
    # Types
    "TypeTag",
    # Errors
    "TypeSaladError",
    "TypeMismatchError",
    "UntypedError",
    "InvalidShapeError",
    "NoMatchingOverloadError",
    "PackageError",
    "AlreadyEnabledError",
    "ExportNotFoundError",
    "NotEnabledError",
    "DivisionByZeroError",
    # Values
    "TypeSalad",
    "SaladString",
    "SaladInt",
    "SaladFloat",
    "SaladBool",
    "SaladDate",
    "SaladVec2",
    "SaladVec3",
    "SaladArray",
    "SaladObject",
    "GenericList",
    "generic_list",
    "make_value",
    "tag_of",
    "raw_of",
    "to_json_value",
    "typed_if",
    "concat",
    # Overloads
    "Overloadable",
    "OverloadSignature",
    # Metadata
    "add_metadata",
    "get_metadata",
]
