"""Packages loadable through ``System.use_package``.

Usage:
    from typesalad import get_system

    system = get_system()
    await system.use_builtin("SaladMath")    # typesalad.packages.math:SaladMath
    await system.use_builtin("SaladLinq")    # typesalad.packages.linq:SaladLinqPackage
    await system.use_builtin("SaladFiles")   # typesalad.packages.files:SaladFilesPackage
"""

from typesalad.packages.files import SaladFiles, SaladFilesPackage
from typesalad.packages.linq import Grouping, SaladLinq, SaladLinqPackage
from typesalad.packages.math import ImagInt, SaladMath, Vector

__all__ = [
    # Math
    "SaladMath",
    "ImagInt",
    "Vector",
    # Linq
    "SaladLinq",
    "SaladLinqPackage",
    "Grouping",
    # Files
    "SaladFiles",
    "SaladFilesPackage",
]
