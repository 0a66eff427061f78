"""Fixed-type numeric vectors and element-type conversion."""

from __future__ import annotations

import itertools
import math
import numbers
import struct
import sys
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from typing import IO, overload


class DataType(Enum):
    """Element type of a vector, named by its machine representation."""

    INT8 = "b"
    INT16 = "h"
    INT32 = "i"
    INT64 = "q"
    UINT8 = "B"
    UINT16 = "H"
    UINT32 = "I"
    UINT64 = "Q"
    FLOAT = "f"
    DOUBLE = "d"

    @property
    def size(self) -> int:
        """Size of one element in bytes."""
        return struct.calcsize("<" + self.value)

    @property
    def is_integer(self) -> bool:
        return self.value not in "fd"

    @property
    def is_signed(self) -> bool:
        return not self.is_integer or self.value.islower()

    @property
    def bits(self) -> int:
        return self.size * 8

    @property
    def min_value(self) -> int | float:
        """Smallest representable value (finite for floating types)."""
        if self.is_integer:
            return -(1 << (self.bits - 1)) if self.is_signed else 0
        if self is DataType.FLOAT:
            return -struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
        return -sys.float_info.max

    @property
    def max_value(self) -> int | float:
        """Largest representable value (finite for floating types)."""
        if self.is_integer:
            shift = self.bits - 1 if self.is_signed else self.bits
            return (1 << shift) - 1
        if self is DataType.FLOAT:
            return struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
        return sys.float_info.max

    def cast(self, value: numbers.Real) -> int | float:
        """Convert ``value`` as a store into this element type would.

        Integers wrap around modulo 2**bits; floating values stored into an
        integer type are truncated toward zero first. Values stored as FLOAT
        are rounded to single precision.
        """
        if not isinstance(value, numbers.Real):
            raise TypeError(f"cannot store {type(value).__name__} in {self.name}")
        if self.is_integer:
            if isinstance(value, numbers.Integral):
                number = int(value)
            else:
                as_float = float(value)
                if not math.isfinite(as_float):
                    raise ValueError(f"cannot store {as_float} in {self.name}")
                number = math.trunc(as_float)
            number &= (1 << self.bits) - 1
            if self.is_signed and number >= 1 << (self.bits - 1):
                number -= 1 << self.bits
            return number
        as_float = float(value)
        if self is DataType.FLOAT:
            try:
                return struct.unpack("<f", struct.pack("<f", as_float))[0]
            except OverflowError:
                return math.copysign(math.inf, as_float)
        return as_float


class Vector(Sequence):
    """An immutable vector whose elements all share one data type."""

    __slots__ = ("_dtype", "_data")

    def __init__(self, data: Iterable[numbers.Real], dtype: DataType = DataType.DOUBLE):
        if not isinstance(dtype, DataType):
            raise TypeError(f"dtype must be a DataType, not {type(dtype).__name__}")
        self._dtype = dtype
        self._data = tuple(dtype.cast(item) for item in data)

    @classmethod
    def zeros(cls, dimension: int, dtype: DataType = DataType.DOUBLE) -> Vector:
        """A vector of ``dimension`` zero elements."""
        if dimension < 0:
            raise ValueError("dimension must not be negative")
        return cls(itertools.repeat(0, dimension), dtype)

    @property
    def dtype(self) -> DataType:
        return self._dtype

    @property
    def dimension(self) -> int:
        return len(self._data)

    @property
    def element_size(self) -> int:
        return self._dtype.size

    @property
    def size(self) -> int:
        """Total size of the elements in bytes."""
        return self.element_size * self.dimension

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int | float]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> int | float: ...

    @overload
    def __getitem__(self, index: slice) -> Vector: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._data[index], self._dtype)
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._dtype is other._dtype and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._dtype, self._data))

    def __repr__(self) -> str:
        return f"Vector({list(self._data)!r}, DataType.{self._dtype.name})"

    def format(self) -> str:
        """Elements as text, each followed by one space."""
        if self._dtype.is_integer:
            return "".join(f"{item} " for item in self._data)
        return "".join(f"{item:f} " for item in self._data)


def vector(
    data: Iterable[numbers.Real] | None,
    element_count: int,
    dtype: DataType,
) -> Vector:
    """Build a vector of ``element_count`` elements taken from ``data``.

    With ``data`` of None the vector is filled with zeros.
    """
    if element_count < 0:
        raise ValueError("element_count must not be negative")
    if data is None:
        return Vector.zeros(element_count, dtype)
    items = list(itertools.islice(data, element_count))
    if len(items) < element_count:
        raise ValueError(
            f"expected {element_count} elements, got only {len(items)}"
        )
    return Vector(items, dtype)


def print_vector(vec: Vector, file: IO[str] | None = None) -> None:
    """Write the formatted elements of ``vec`` to ``file`` (stdout by default)."""
    stream = sys.stdout if file is None else file
    stream.write(vec.format())