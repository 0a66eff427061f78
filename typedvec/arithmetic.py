"""Element-wise arithmetic on typed vectors."""

from __future__ import annotations

import math
from collections.abc import Callable

from typedvec.vector import Vector


def _check_compatible(vec1: Vector, vec2: Vector) -> None:
    if vec1.dimension != vec2.dimension:
        raise ValueError("dimensions of vec1 and vec2 are not equal")
    if vec1.dtype is not vec2.dtype:
        raise TypeError(
            f"data types differ: {vec1.dtype.name} and {vec2.dtype.name}"
        )


def add(vec1: Vector, vec2: Vector) -> Vector:
    """Element-wise sum, stored in the element type of the operands."""
    _check_compatible(vec1, vec2)
    return Vector((a + b for a, b in zip(vec1, vec2)), vec1.dtype)


def sub(vec1: Vector, vec2: Vector) -> Vector:
    """Element-wise difference, stored in the element type of the operands."""
    _check_compatible(vec1, vec2)
    return Vector((a - b for a, b in zip(vec1, vec2)), vec1.dtype)


def _scalar_map(vec: Vector, operation: Callable[[float], float]) -> Vector:
    # Elements are combined with the scalar in double precision, then stored.
    return Vector((operation(float(item)) for item in vec), vec.dtype)


def scalar_multiplication(vec: Vector, scalar: float) -> Vector:
    """Multiply every element by ``scalar``."""
    factor = float(scalar)
    return _scalar_map(vec, lambda item: item * factor)


def scalar_addition(vec: Vector, scalar: float) -> Vector:
    """Add ``scalar`` to every element."""
    term = float(scalar)
    return _scalar_map(vec, lambda item: item + term)


def scalar_subtraction(vec: Vector, scalar: float) -> Vector:
    """Subtract ``scalar`` from every element."""
    term = float(scalar)
    return _scalar_map(vec, lambda item: item - term)


def _divide_by_zero(item: float, zero: float) -> float:
    if item == 0 or math.isnan(item):
        return math.nan
    return math.copysign(math.inf, item) * math.copysign(1.0, zero)


def scalar_division(vec: Vector, scalar: float) -> Vector:
    """Divide every element by ``scalar``.

    Integer elements are truncated toward zero. Division by zero yields
    infinities or NaN for floating types and raises for integer types.
    """
    divisor = float(scalar)
    if divisor == 0:
        if vec.dtype.is_integer:
            raise ZeroDivisionError(
                f"division by zero into {vec.dtype.name} elements"
            )
        return _scalar_map(vec, lambda item: _divide_by_zero(item, divisor))
    return _scalar_map(vec, lambda item: item / divisor)