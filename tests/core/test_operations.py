"""Tests for typed_if and concat."""

from unittest.mock import Mock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typesalad import (
    SaladArray,
    SaladDate,
    SaladFloat,
    SaladInt,
    SaladString,
    SaladVec2,
    TypeMismatchError,
    TypeTag,
    UntypedError,
    concat,
    typed_if,
)

typed_scalars = st.one_of(
    st.text().map(SaladString),
    st.integers().map(SaladInt),
    st.floats().map(SaladFloat),
    st.tuples(st.integers(), st.integers()).map(lambda xy: SaladVec2(*xy)),
)


@given(typed_scalars)
def test_typed_if_is_reflexive(value):
    """CRITICAL: a value always equals itself."""
    on_equal, on_not_equal = Mock(), Mock()

    typed_if(value, value, on_equal, on_not_equal)

    on_equal.assert_called_once_with()
    on_not_equal.assert_not_called()


@given(st.integers(), st.text())
def test_typed_if_rejects_differing_tags(number, text):
    """CRITICAL: differing tags always fail, whatever the raw values."""
    with pytest.raises(TypeMismatchError):
        typed_if(SaladInt(number), SaladString(text), Mock())


def test_typed_if_nan_float_equals_itself():
    """CRITICAL: NaN floats take the equal branch.

    Why: typed_if(a, a) must be reflexive for every constructible value.
    """
    nan = SaladFloat(float("nan"))
    calls = []
    eq, ne = lambda: calls.append("eq"), lambda: calls.append("ne")

    typed_if(nan, nan, eq, ne)
    typed_if(nan, SaladFloat(float("nan")), eq, ne)
    typed_if(nan, SaladFloat(1.0), eq, ne)

    assert calls == ["eq", "eq", "ne"]


def test_typed_if_branches_on_raw_value():
    calls = []

    typed_if(SaladInt(1), SaladInt(1), lambda: calls.append("eq"), lambda: calls.append("ne"))
    typed_if(SaladInt(1), SaladInt(2), lambda: calls.append("eq"), lambda: calls.append("ne"))

    assert calls == ["eq", "ne"]


def test_typed_if_missing_not_equal_branch_is_a_no_op():
    on_equal = Mock()

    typed_if(SaladString("a"), SaladString("b"), on_equal)

    on_equal.assert_not_called()


def test_typed_if_equal_vectors_by_projection():
    on_equal = Mock()

    typed_if(SaladVec2(1, 2), SaladVec2(1, 2), on_equal)

    on_equal.assert_called_once()


def test_typed_if_equal_dates_by_timestamp():
    on_equal = Mock()

    typed_if(SaladDate(0), SaladDate("1970-01-01T00:00:00+00:00"), on_equal)

    on_equal.assert_called_once()


def test_typed_if_arrays_compare_by_reference():
    """Arrays with equal contents are distinct unless they are the same array."""
    on_equal, on_not_equal = Mock(), Mock()
    a = SaladArray([1, 2])

    typed_if(a, SaladArray([1, 2]), on_equal, on_not_equal)
    typed_if(a, a, on_equal, on_not_equal)

    assert on_not_equal.call_count == 1
    assert on_equal.call_count == 1


@pytest.mark.parametrize(("a", "b"), [("raw", SaladString("x")), (SaladString("x"), None)])
def test_typed_if_rejects_untyped(a, b):
    with pytest.raises(UntypedError, match="untyped"):
        typed_if(a, b, Mock())


def test_concat_strings():
    result = concat(SaladString("ab"), SaladString("cd"))

    assert result.tag == TypeTag.STRING
    assert result.raw_value() == "abcd"


def test_concat_ints_produces_string():
    result = concat(SaladInt(1), SaladInt(23))

    assert isinstance(result, SaladString)
    assert result.raw_value() == "123"


def test_concat_rejects_mixed_tags():
    with pytest.raises(TypeMismatchError, match="unmatching"):
        concat(SaladInt(1), SaladString("x"))


def test_concat_rejects_other_tags():
    with pytest.raises(TypeMismatchError, match="String or Int"):
        concat(SaladFloat(1.0), SaladFloat(2.0))


def test_concat_rejects_untyped():
    with pytest.raises(UntypedError):
        concat("a", SaladString("b"))  # type: ignore[arg-type]
