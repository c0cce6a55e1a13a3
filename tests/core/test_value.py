"""Tests for typed value construction, tags, and rendering."""

from datetime import UTC, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typesalad import (
    SaladBool,
    SaladDate,
    SaladFloat,
    SaladInt,
    SaladString,
    SaladVec2,
    SaladVec3,
    TypeMismatchError,
    TypeTag,
    make_value,
    raw_of,
    tag_of,
)

finite_floats = st.floats(allow_nan=False, allow_infinity=False)

valid_pairs = st.one_of(
    st.tuples(st.just(TypeTag.STRING), st.text()),
    st.tuples(st.just(TypeTag.INT), st.integers()),
    st.tuples(st.just(TypeTag.FLOAT), finite_floats),
    st.tuples(st.just(TypeTag.BOOL), st.booleans()),
)


@given(valid_pairs)
def test_construct_preserves_tag_and_raw_value(pair):
    """CRITICAL: construct(tag, raw).tag == tag and raw_value recovers raw.

    Why: Every other operation trusts the tag and compares raw values.
    """
    tag, raw = pair
    value = make_value(tag, raw)

    assert value.tag == tag
    assert value.raw_value() == raw


@pytest.mark.parametrize(
    ("tag", "raw"),
    [
        (TypeTag.STRING, 1),
        (TypeTag.STRING, None),
        (TypeTag.INT, "1"),
        (TypeTag.INT, 1.5),
        (TypeTag.INT, True),
        (TypeTag.FLOAT, "1.5"),
        (TypeTag.FLOAT, False),
        (TypeTag.BOOL, 1),
        (TypeTag.DATE, None),
        (TypeTag.VEC2, (1, None)),
        (TypeTag.VEC2, "1,2"),
        (TypeTag.VEC3, (1, 2)),
    ],
)
def test_construct_rejects_mismatched_kind(tag, raw):
    """Construction fails with TypeMismatchError when the host kind is wrong."""
    with pytest.raises(TypeMismatchError):
        make_value(tag, raw)


def test_type_mismatch_is_a_type_error():
    """Callers catching TypeError still see tag mismatches."""
    with pytest.raises(TypeError, match="expected host type 'str'"):
        SaladString(42)  # type: ignore[arg-type]


def test_tag_cannot_be_reassigned():
    value = SaladInt(1)
    with pytest.raises(AttributeError):
        value.tag = TypeTag.STRING  # type: ignore[misc]


def test_tag_compares_equal_to_plain_name():
    assert SaladString("a").tag == "String"
    assert SaladInt(1).tag == "Int"


def test_render_is_type_preserving():
    """render() returns a String-tagged value, not a host string."""
    rendered = SaladInt(42).render()

    assert isinstance(rendered, SaladString)
    assert rendered.tag == TypeTag.STRING
    assert rendered.raw_value() == "42"
    assert str(SaladInt(42)) == "42"


def test_bool_and_float_rendering():
    assert SaladBool(True).render().raw_value() == "true"
    assert SaladBool(False).render().raw_value() == "false"
    assert SaladFloat(2).raw_value() == 2.0
    assert SaladFloat(2).render().raw_value() == "2.0"


def test_date_raw_value_is_timestamp():
    moment = datetime(2025, 3, 14, 12, 0, tzinfo=UTC)
    date = SaladDate(moment)

    assert date.raw_value() == moment.timestamp()
    assert (date.year, date.month, date.day) == (2025, 3, 14)
    assert date.render().raw_value() == "2025-03-14T12:00:00+00:00"


def test_date_from_iso_string_and_timestamp_agree():
    from_text = SaladDate("2025-03-14T12:00:00+00:00")
    from_number = SaladDate(from_text.raw_value())

    assert from_text.raw_value() == from_number.raw_value()


def test_date_rejects_invalid_iso_string():
    with pytest.raises(ValueError, match="invalid ISO-8601"):
        SaladDate("not a date")


def test_vec2_projection_and_rendering():
    vec = SaladVec2(1, "2")

    assert vec.tag == TypeTag.VEC2
    assert vec.raw_value() == "1,2"
    assert vec.render().raw_value() == "1, 2"
    assert vec.to_json() == {"x": 1, "y": "2"}
    assert (vec.x, vec.y) == (1, "2")


def test_identical_vectors_share_projection():
    """Composite coordinates compare through their stable string projection."""
    assert SaladVec3(1, 2, 3).raw_value() == SaladVec3(1, 2, 3).raw_value()
    assert SaladVec3(1, 2, 3).raw_value() != SaladVec3(3, 2, 1).raw_value()


def test_vec_components_are_string_generic_list():
    components = SaladVec3(1, 2.5, "z").components()

    assert components.tag == TypeTag.GENERIC_LIST
    assert components.expected_tag == TypeTag.STRING
    assert [c.raw_value() for c in components] == ["1", "2.5", "z"]


def test_make_value_builds_coordinates_from_sequence():
    vec = make_value(TypeTag.VEC2, (3, 4))

    assert isinstance(vec, SaladVec2)
    assert vec.raw_value() == "3,4"


def test_make_value_rejects_composite_only_tags():
    with pytest.raises(ValueError, match="cannot be constructed"):
        make_value(TypeTag.IMAG_INT, 1)


def test_make_value_rejects_unknown_tag():
    with pytest.raises(ValueError):
        make_value("Quaternion", 1)


def test_tag_of_and_raw_of_on_untyped_values():
    assert tag_of("plain") is None
    assert raw_of("plain") == "plain"
    assert tag_of(SaladString("x")) == TypeTag.STRING
    assert raw_of(SaladString("x")) == "x"
