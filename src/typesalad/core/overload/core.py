"""Overload dispatch by exact tag signature.

Usage:
    shapes = Overloadable()

    @shapes.overload("area", TypeTag.INT)
    def square(side):
        return SaladInt(side.raw_value() ** 2)

    shapes.define_overload("area", [TypeTag.INT, TypeTag.INT], lambda w, h: ...)

    shapes.call_overload("area", SaladInt(3))        # square
    shapes.call_overload("area", SaladFloat(3.0))    # NoMatchingOverloadError
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from typesalad.core.errors import NoMatchingOverloadError
from typesalad.core.overload.models import OverloadSignature
from typesalad.core.value.models import tag_of


def _arg_tag(arg: Any) -> str:
    """Tag of a typed argument, or the host type name of an untyped one."""
    tag = tag_of(arg)
    if tag is None:
        return type(arg).__name__
    return str(tag)


def _param_tags(param_types: Iterable[str]) -> tuple[str, ...]:
    # A bare tag is a str and would otherwise iterate character by character
    if isinstance(param_types, str):
        raise TypeError(
            f"param_types must be a sequence of tags, got the string '{param_types}'. "
            f"Wrap a single tag in a list."
        )
    return tuple(str(t) for t in param_types)


class Overloadable:
    """Registry of implementations keyed by operation name and argument tags.

    Resolution is purely syntactic: the tags of the actual arguments are joined
    into a key and looked up as-is. There is no best-match search, coercion, or
    arity fallback.
    """

    def __init__(self) -> None:
        """Initialize with no overloads."""
        self._overloads: dict[str, tuple[OverloadSignature, Callable[..., Any]]] = {}

    def define_overload(
        self, name: str, param_types: Iterable[str], fn: Callable[..., Any]
    ) -> OverloadSignature:
        """Register ``fn`` for ``name`` called with arguments tagged ``param_types``.

        An existing overload with the same signature is replaced.

        Args:
            name: Operation name.
            param_types: Ordered argument tags (TypeTag members or host type names).
            fn: Implementation, called with the original arguments.

        Returns:
            The signature the implementation was registered under.

        Raises:
            TypeError: If ``param_types`` is a single string instead of a sequence.
        """
        signature = OverloadSignature(name=name, tags=_param_tags(param_types))
        self._overloads[signature.key] = (signature, fn)
        return signature

    def overload(
        self, name: str, *param_types: str
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of ``define_overload``. Returns the function unchanged."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.define_overload(name, param_types, fn)
            return fn

        return decorator

    def call_overload(self, name: str, *args: Any) -> Any:
        """Call the overload whose signature matches the argument tags exactly.

        Raises:
            NoMatchingOverloadError: If no overload matches.
        """
        signature = OverloadSignature(name=name, tags=tuple(_arg_tag(a) for a in args))
        entry = self._overloads.get(signature.key)
        if entry is None:
            raise NoMatchingOverloadError(f"No overload for {signature}")
        _, fn = entry
        return fn(*args)

    def has_overload(self, name: str, param_types: Iterable[str]) -> bool:
        signature = OverloadSignature(name=name, tags=_param_tags(param_types))
        return signature.key in self._overloads

    def signatures(self) -> list[OverloadSignature]:
        """All registered signatures, in registration order."""
        return [signature for signature, _ in self._overloads.values()]
