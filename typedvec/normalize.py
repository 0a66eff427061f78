"""Rescaling typed vectors into double-precision vectors."""

from __future__ import annotations

import math

from typedvec.statistics import maximum, mean, minimum, standard_deviation
from typedvec.vector import DataType, Vector


def _require_elements(vec: Vector, what: str) -> None:
    if len(vec) == 0:
        raise ValueError(f"{what} of an empty vector is undefined")


def _max_absolute(vec: Vector) -> float:
    largest = 0.0
    for item in vec:
        magnitude = math.fabs(float(item))
        if magnitude > largest:
            largest = magnitude
    return largest


def _scaled(vec: Vector, offset: float, divisor: float) -> Vector:
    return Vector(((float(item) - offset) / divisor for item in vec), DataType.DOUBLE)


def min_max_norm(vec: Vector) -> Vector:
    """Map the elements linearly onto [0, 1].

    Raises ValueError when the vector is empty or all elements are equal.
    """
    _require_elements(vec, "min-max normalization")
    high = maximum(vec)
    low = minimum(vec)
    if high == low:
        raise ValueError("min-max normalization needs at least two distinct values")
    return _scaled(vec, low, high - low)


def z_score_norm(vec: Vector) -> Vector:
    """Centre the elements on their mean and divide by the standard deviation.

    Raises ValueError when the vector is empty or its deviation is zero.
    """
    _require_elements(vec, "z-score normalization")
    centre = mean(vec)
    deviation = standard_deviation(vec)
    if deviation == 0:
        raise ValueError("z-score normalization of a constant vector is undefined")
    return _scaled(vec, centre, deviation)


def max_absolute_norm(vec: Vector) -> Vector:
    """Divide every element by the largest absolute value.

    Raises ValueError when the vector is empty or all elements are zero.
    """
    _require_elements(vec, "max-absolute normalization")
    largest = _max_absolute(vec)
    if largest == 0:
        raise ValueError("max-absolute normalization of a zero vector is undefined")
    return _scaled(vec, 0.0, largest)


def decimal_scaling_norm(vec: Vector) -> Vector:
    """Divide every element by 10**j, where j = ceil(log10(max |element|)).

    Raises ValueError when the vector is empty or all elements are zero.
    """
    _require_elements(vec, "decimal scaling normalization")
    largest = _max_absolute(vec)
    if largest == 0:
        raise ValueError("decimal scaling normalization of a zero vector is undefined")
    exponent = math.ceil(math.log10(largest))
    return _scaled(vec, 0.0, 10.0**exponent)