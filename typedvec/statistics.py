"""Summary statistics of typed vectors, computed in double precision."""

from __future__ import annotations

import functools
import math
import sys
from collections.abc import Iterable

from typedvec.vector import Vector

_DBL_MAX = sys.float_info.max


def compare_doubles(a: float, b: float) -> int:
    """Three-way comparison: 1 if ``a > b``, -1 if ``a < b``, else 0."""
    return (a > b) - (a < b)


def _as_doubles(vec: Vector, what: str) -> list[float]:
    if len(vec) == 0:
        raise ValueError(f"{what} of an empty vector is undefined")
    return [float(item) for item in vec]


def _greater(current: float, candidate: float) -> float:
    return candidate if candidate > current else current


def _smaller(current: float, candidate: float) -> float:
    return candidate if candidate < current else current


def maximum(vec: Vector) -> float:
    """Largest element as a double.

    NaN elements never win a comparison; if no element exceeds the most
    negative finite double, that value is returned.
    """
    return functools.reduce(_greater, _as_doubles(vec, "maximum"), -_DBL_MAX)


def minimum(vec: Vector) -> float:
    """Smallest element as a double.

    NaN elements never win a comparison; if no element is below the largest
    finite double, that value is returned.
    """
    return functools.reduce(_smaller, _as_doubles(vec, "minimum"), _DBL_MAX)


def _mean_of(values: Iterable[float], count: int) -> float:
    total = 0.0
    for value in values:
        total += value
    return total / count


def mean(vec: Vector) -> float:
    """Arithmetic mean of the elements."""
    values = _as_doubles(vec, "mean")
    return _mean_of(values, len(values))


def median(vec: Vector) -> float:
    """Middle element of the sorted values, or the mean of the two middle ones."""
    values = sorted(
        _as_doubles(vec, "median"), key=functools.cmp_to_key(compare_doubles)
    )
    mid, odd = divmod(len(values), 2)
    if odd:
        return values[mid]
    return (values[mid - 1] + values[mid]) / 2.0


def standard_deviation(vec: Vector) -> float:
    """Population standard deviation of the elements."""
    values = _as_doubles(vec, "standard deviation")
    centre = _mean_of(values, len(values))
    squares = ((value - centre) * (value - centre) for value in values)
    return math.sqrt(_mean_of(squares, len(values)))


def variance(vec: Vector) -> float:
    """Population variance: the square of the standard deviation."""
    deviation = standard_deviation(vec)
    return deviation * deviation