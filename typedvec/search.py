"""Locating elements within typed vectors."""

from __future__ import annotations

from collections.abc import Callable

from typedvec.vector import Vector


def _index_of_best(vec: Vector, better: Callable[[float, float], bool]) -> int:
    if len(vec) == 0:
        raise ValueError("vector is empty")
    items = iter(enumerate(float(item) for item in vec))
    best_index, best_value = next(items)
    for index, value in items:
        if better(value, best_value):
            best_index, best_value = index, value
    return best_index


def index_of_max(vec: Vector) -> int:
    """Position of the first largest element."""
    return _index_of_best(vec, lambda value, best: value > best)


def index_of_min(vec: Vector) -> int:
    """Position of the first smallest element."""
    return _index_of_best(vec, lambda value, best: value < best)


def index_of_value(vec: Vector, value: float) -> int:
    """Position of the first element equal to ``value``.

    Raises ValueError when no element is equal to it.
    """
    target = float(value)
    for index, item in enumerate(vec):
        if float(item) == target:
            return index
    raise ValueError(f"{value!r} is not in the vector")


def contains_value(vec: Vector, value: float) -> bool:
    """Whether some element is equal to ``value``."""
    target = float(value)
    return any(float(item) == target for item in vec)