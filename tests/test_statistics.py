import functools
import math
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typedvec.statistics import (
    compare_doubles,
    maximum,
    mean,
    median,
    minimum,
    standard_deviation,
    variance,
)
from typedvec.vector import DataType, Vector

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
double_lists = st.lists(finite, min_size=1, max_size=30)


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_compare_doubles_is_antisymmetric(a, b):
    assert compare_doubles(a, b) == -compare_doubles(b, a)


@given(st.lists(st.floats(allow_nan=False), max_size=20))
def test_compare_doubles_sorts_like_builtin(values):
    result = sorted(values, key=functools.cmp_to_key(compare_doubles))
    assert result == sorted(values)
    assert all(
        compare_doubles(left, right) <= 0 for left, right in zip(result, result[1:])
    )


def test_compare_doubles_equal_is_zero():
    assert compare_doubles(2.5, 2.5) == 0


@given(double_lists)
def test_maximum_matches_builtin(values):
    assert maximum(Vector(values)) == max(values)


@given(double_lists)
def test_minimum_matches_builtin(values):
    assert minimum(Vector(values)) == min(values)


def test_maximum_and_minimum_on_integer_types():
    vec = Vector([-7, 100, 3], DataType.INT8)
    assert maximum(vec) == 100.0
    assert minimum(vec) == -7.0


def test_maximum_skips_nan():
    vec = Vector([math.nan, 1.5, -2.0])
    assert maximum(vec) == 1.5
    assert minimum(vec) == -2.0


def test_all_nan_gives_extreme_sentinels():
    vec = Vector([math.nan])
    assert maximum(vec) == -sys.float_info.max
    assert minimum(vec) == sys.float_info.max


@pytest.mark.parametrize(
    "function", [maximum, minimum, mean, median, standard_deviation, variance]
)
def test_empty_vector_raises(function):
    with pytest.raises(ValueError):
        function(Vector([]))


def test_mean_of_small_integers():
    assert mean(Vector([1, 2, 3], DataType.INT32)) == 2.0


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=30))
def test_mean_lies_between_min_and_max(values):
    vec = Vector(values, DataType.INT16)
    assert minimum(vec) <= mean(vec) <= maximum(vec)


def test_median_odd_count_is_middle_element():
    assert median(Vector([5, 1, 3], DataType.UINT8)) == 3.0


@given(finite, finite)
def test_median_of_two_is_their_mean(a, b):
    vec = Vector([a, b])
    assert median(vec) == pytest.approx(mean(vec))


@given(double_lists)
def test_median_ignores_order(values):
    assert median(Vector(values)) == median(Vector(sorted(values, reverse=True)))


@given(double_lists)
def test_median_lies_between_min_and_max(values):
    vec = Vector(values)
    assert minimum(vec) <= median(vec) <= maximum(vec)


def test_median_of_large_unsigned_values():
    top = DataType.UINT64.max_value
    assert median(Vector([top], DataType.UINT64)) == float(top)


@given(finite, st.integers(1, 20))
def test_standard_deviation_of_constant_is_zero(value, count):
    assert standard_deviation(Vector([value] * count)) == pytest.approx(0.0, abs=1e-6)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=20), st.integers(-50, 50))
def test_standard_deviation_is_shift_invariant(values, shift):
    base = Vector(values, DataType.INT32)
    shifted = Vector([v + shift for v in values], DataType.INT32)
    assert standard_deviation(shifted) == pytest.approx(
        standard_deviation(base), abs=1e-9
    )


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=20), st.integers(-5, 5))
def test_standard_deviation_scales_with_factor(values, factor):
    base = Vector(values, DataType.INT32)
    scaled = Vector([v * factor for v in values], DataType.INT32)
    assert standard_deviation(scaled) == pytest.approx(
        abs(factor) * standard_deviation(base), abs=1e-9
    )


@given(double_lists)
def test_variance_is_square_of_standard_deviation(values):
    vec = Vector(values)
    assert variance(vec) == pytest.approx(standard_deviation(vec) ** 2)
    assert variance(vec) >= 0.0