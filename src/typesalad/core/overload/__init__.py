"""Overload functionality: signatures and tag-based dispatch."""

from typesalad.core.overload.core import Overloadable
from typesalad.core.overload.models import OverloadSignature

__all__ = [
    "Overloadable",
    "OverloadSignature",
]
