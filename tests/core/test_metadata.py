"""Tests for metadata reflection helpers."""

import gc

from typesalad import SaladInt, TypeTag, add_metadata, get_metadata
from typesalad.core import metadata


def test_add_and_get_metadata():
    class Position:
        pass

    add_metadata(Position, "design:type", TypeTag.VEC2)

    assert get_metadata(Position, "design:type") == TypeTag.VEC2
    assert get_metadata(Position, "missing") is None
    assert get_metadata(Position, "missing", "fallback") == "fallback"


def test_metadata_is_per_target():
    a, b = SaladInt(1), SaladInt(1)
    add_metadata(a, "label", "first")

    assert get_metadata(b, "label") is None


def test_metadata_does_not_keep_target_alive():
    value = SaladInt(1)
    add_metadata(value, "label", "temp")
    before = len(metadata._metadata)

    del value
    gc.collect()

    assert len(metadata._metadata) == before - 1


def test_unreferenceable_targets_have_no_metadata():
    assert get_metadata(42, "anything") is None
