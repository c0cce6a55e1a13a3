"""TypeSalad: typed value wrappers, overload dispatch, and a package registry.

Usage:
    from typesalad import SaladInt, SaladString, get_system, typed_if

    system = get_system()
    await system.use_builtin("SaladMath")

    total = system.math.add(SaladInt(1), SaladInt(2))
    typed_if(total, SaladInt(3), lambda: system.print(SaladString("three")))

    system.store("total", total)
    system.retrieve("total")    # 3
"""

__version__ = "0.1.0"

# Core primitives
from typesalad.core import (
    AlreadyEnabledError,
    DivisionByZeroError,
    ExportNotFoundError,
    GenericList,
    InvalidShapeError,
    NoMatchingOverloadError,
    NotEnabledError,
    Overloadable,
    OverloadSignature,
    PackageError,
    SaladArray,
    SaladBool,
    SaladDate,
    SaladFloat,
    SaladInt,
    SaladObject,
    SaladString,
    SaladVec2,
    SaladVec3,
    TypeMismatchError,
    TypeSalad,
    TypeSaladError,
    TypeTag,
    UntypedError,
    add_metadata,
    concat,
    generic_list,
    get_metadata,
    make_value,
    raw_of,
    tag_of,
    typed_if,
)

# Registry, storage, events
from typesalad.system import (
    EventEmitter,
    PackageEntry,
    PackageState,
    System,
    SystemEvent,
    get_system,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "TypeTag",
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
    # Operations
    "typed_if",
    "concat",
    "Overloadable",
    "OverloadSignature",
    "add_metadata",
    "get_metadata",
    # System
    "System",
    "get_system",
    "SystemEvent",
    "PackageEntry",
    "PackageState",
    "EventEmitter",
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
]
