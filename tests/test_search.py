import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typedvec.search import contains_value, index_of_max, index_of_min, index_of_value
from typedvec.vector import DataType, Vector

int_lists = st.lists(st.integers(-1000, 1000), min_size=1, max_size=30)


@given(int_lists)
def test_index_of_max_points_at_first_maximum(values):
    vec = Vector(values, DataType.INT32)
    index = index_of_max(vec)
    assert vec[index] == max(values)
    assert all(v < vec[index] for v in values[:index])


@given(int_lists)
def test_index_of_min_points_at_first_minimum(values):
    vec = Vector(values, DataType.INT32)
    index = index_of_min(vec)
    assert vec[index] == min(values)
    assert all(v > vec[index] for v in values[:index])


def test_index_of_extremes_on_floats():
    vec = Vector([0.5, -3.25, 9.75, -3.25], DataType.FLOAT)
    assert vec[index_of_max(vec)] == 9.75
    assert vec[index_of_min(vec)] == -3.25
    assert index_of_min(vec) < index_of_max(vec)


@pytest.mark.parametrize("function", [index_of_max, index_of_min])
def test_index_of_extreme_on_empty_raises(function):
    with pytest.raises(ValueError):
        function(Vector([], DataType.INT8))


def test_index_of_value_on_int16():
    vec = Vector([10, 20, 30], DataType.INT16)
    assert index_of_value(vec, 20.0) == 1


@given(int_lists, st.data())
def test_index_of_value_finds_first_occurrence(values, data):
    target = data.draw(st.sampled_from(values))
    vec = Vector(values, DataType.INT64)
    index = index_of_value(vec, target)
    assert vec[index] == target
    assert target not in values[:index]


@given(int_lists)
def test_index_of_value_absent_raises(values):
    vec = Vector(values, DataType.INT32)
    with pytest.raises(ValueError):
        index_of_value(vec, max(values) + 1)


def test_index_of_value_on_empty_raises():
    with pytest.raises(ValueError):
        index_of_value(Vector([]), 1.0)


@given(int_lists, st.integers(-2000, 2000))
def test_contains_value_agrees_with_membership(values, probe):
    vec = Vector(values, DataType.INT32)
    assert contains_value(vec, probe) == (probe in values)


def test_contains_value_uses_stored_representation():
    vec = Vector([256 + 7], DataType.UINT8)
    assert contains_value(vec, 7)
    assert not contains_value(vec, 263)


def test_contains_value_never_matches_nan():
    vec = Vector([math.nan, 1.0])
    assert not contains_value(vec, math.nan)
    assert contains_value(vec, 1.0)


def test_contains_value_on_empty_is_false():
    assert contains_value(Vector([]), 0.0) is False