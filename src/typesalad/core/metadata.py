"""Reflection-like metadata attached to arbitrary objects.

Usage:
    add_metadata(Position, "design:type", TypeTag.VEC2)
    get_metadata(Position, "design:type")   # TypeTag.VEC2
"""

from __future__ import annotations

from typing import Any
from weakref import WeakKeyDictionary

# Weak keys: attaching metadata never keeps a target alive
_metadata: WeakKeyDictionary[Any, dict[str, Any]] = WeakKeyDictionary()


def add_metadata(target: Any, key: str, value: Any) -> None:
    """Attach ``value`` to ``target`` under ``key``.

    Args:
        target: Object to annotate. Must support weak references.
        key: Metadata key, e.g. ``"design:type"``.
        value: Metadata value.

    Raises:
        TypeError: If ``target`` cannot be weakly referenced (e.g. ``int``, ``str``).
    """
    meta = _metadata.get(target)
    if meta is None:
        meta = {}
        _metadata[target] = meta
    meta[key] = value


def get_metadata(target: Any, key: str, default: Any = None) -> Any:
    """Get metadata attached to ``target`` under ``key``, or ``default``."""
    try:
        meta = _metadata.get(target)
    except TypeError:
        # Objects that cannot be weakly referenced never carry metadata
        return default
    if meta is None:
        return default
    return meta.get(key, default)
