"""Overload models: dispatch signatures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class OverloadSignature:
    """Operation name plus the ordered tags of its arguments.

    Two signatures match only if their keys are identical strings.
    """

    name: str
    tags: tuple[str, ...]

    @property
    def key(self) -> str:
        """Dispatch key, e.g. ``"area:Int,Int"``."""
        return f"{self.name}:{','.join(self.tags)}"

    def __str__(self) -> str:
        return f"{self.name}({','.join(self.tags)})"
