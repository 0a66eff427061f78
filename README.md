# typedvec

Immutable numeric vectors whose elements share one fixed-width type: signed
and unsigned integers of 8, 16, 32 and 64 bits, single-precision floats and
double-precision floats. Every value stored in a vector is converted to its
element type, so integers wrap around and floats are rounded the way
fixed-width values are.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Creating vectors

```python
from typedvec.vector import DataType, Vector, vector, print_vector

v = Vector([1, 2, 3], DataType.INT8)
z = Vector.zeros(4, DataType.DOUBLE)
w = vector([5, 6, 7], 3, DataType.UINT16)   # first 3 elements of the data
e = vector(None, 3, DataType.INT32)         # three zeros

len(v)          # 3
list(v)         # [1, 2, 3]
v[0]            # 1
v[1:]           # Vector([2, 3], DataType.INT8)
v.dimension     # 3
v.element_size  # 1 (bytes per element)
v.size          # 3 (bytes in total)
v.format()      # '1 2 3 '
print_vector(v) # writes '1 2 3 ' to stdout, or to the given file
```

`DataType.cast(value)` converts a value as storing it in that type would:
integers wrap around modulo 2**bits, floats stored in an integer type are
truncated toward zero first (NaN and infinities raise `ValueError`), and
`FLOAT` values are rounded to single precision. `DataType` also offers `size`,
`bits`, `is_integer`, `is_signed`, `min_value` and `max_value`.

`vector(data, element_count, dtype)` raises `ValueError` when `data` holds
fewer than `element_count` elements. Two vectors are equal when they have the
same element type and the same elements. Floating elements are formatted with
six decimals (`'1.500000 '`).

## Arithmetic

```python
from typedvec.arithmetic import (
    add, sub, scalar_multiplication, scalar_addition,
    scalar_subtraction, scalar_division,
)

add(v, v)                       # element-wise sum, same element type
sub(v, v)                       # element-wise difference
scalar_multiplication(v, 2.5)   # fractional parts are truncated for integer types
scalar_division(v, 2)           # Vector([0, 1, 1], DataType.INT8)
```

`add` and `sub` raise `ValueError` for vectors of different dimension and
`TypeError` for vectors of different element type. Scalar operations are
carried out in double precision and the result is stored in the element type
of the input. Dividing by zero raises `ZeroDivisionError` for integer types
and gives infinities (or NaN for zero and NaN elements) for floating types.

## Statistics

All results are doubles. Each function raises `ValueError` on an empty vector.

```python
from typedvec.statistics import (
    maximum, minimum, mean, median, standard_deviation, variance,
    compare_doubles,
)

maximum(v)              # 3.0
minimum(v)              # 1.0
mean(v)                 # 2.0
median(v)               # 2.0
standard_deviation(v)   # population standard deviation
variance(v)             # square of the standard deviation
compare_doubles(1, 2)   # -1
```

## Search

```python
from typedvec.search import index_of_max, index_of_min, index_of_value, contains_value

index_of_max(v)         # 2 (first position of the largest element)
index_of_min(v)         # 0
index_of_value(v, 2)    # 1
contains_value(v, 9)    # False
```

`index_of_max` and `index_of_min` raise `ValueError` on an empty vector;
`index_of_value` raises `ValueError` when no element equals the value.

## Normalization

All normalizations return a vector of `DataType.DOUBLE`.

```python
from typedvec.normalize import (
    min_max_norm, z_score_norm, max_absolute_norm, decimal_scaling_norm,
)

min_max_norm(v)          # values in [0, 1]
z_score_norm(v)          # zero mean, unit standard deviation
max_absolute_norm(v)     # values in [-1, 1]
decimal_scaling_norm(v)  # divided by 10**ceil(log10(max |element|))
```

A normalization of an empty vector, or one that would divide by zero (min-max
or z-score on a constant vector, max-absolute or decimal scaling on an
all-zero vector), raises `ValueError`.

## What the package does not do

typedvec is a library only: it has no command-line program, and it does not
read or write vectors to files. Statistics beyond those above (such as the
mode) and other normalizations (such as softmax, sigmoid or L1/L2) are not
provided, nor are reordering operations such as reversing or shuffling.