"""
Vector: fixed-length numeric vector with a row/column orientation.

Orientation only affects formatting and how a Matrix is built from the
vector; storage is the same flat list either way. All operations return
new vectors except item assignment and normalize().
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from pylinear.core.exceptions import InvalidArgumentError, UnsupportedOperationError
from pylinear.core.numeric import (
    DEFAULT_ELEMENT_TYPE,
    ElementType,
    element_type_for,
    infer_element_type,
    numpy_element_type,
    _root,
)
from pylinear.core.tolerances import ToleranceTier
from pylinear.core.validation import check_dimension, check_index, check_same_length
from pylinear.linalg._base import LinearValue, is_scalar


def _collect(values: Any, dtype: Any) -> tuple[list[Any], ElementType]:
    """Materialize constructor input and resolve its element type."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidArgumentError(
                f"values: expected 1D array, got {values.ndim}D with shape {values.shape}"
            )
        items = list(values)
        if dtype is None and values.dtype.kind in 'iufc':
            return items, numpy_element_type(values.dtype)
    elif isinstance(values, numbers.Number) or not isinstance(values, Iterable):
        raise TypeError(
            f"values: expected a sequence of elements, got {type(values).__name__}; "
            f"use Vector.zeros(size) for a zero vector"
        )
    else:
        items = list(values)

    if dtype is None:
        return items, infer_element_type(items)
    return items, element_type_for(dtype)


class Vector(LinearValue):
    """
    Fixed-length vector over any numeric element type.

    Construction:
        Vector([1, 2, 3])                       column vector of int
        Vector([1.0, 2.0], row_vector=True)     row vector of float
        Vector(values, dtype=Fraction)          explicit element type
        Vector(other)                           deep copy, same orientation
        Vector.zeros(3, dtype=float)            zero-filled

    Binary operations (+, -, dot) require equal lengths and take the
    orientation and element type of the left operand. Scalars are
    converted to the element type before use; division follows the
    element type (integer types truncate toward zero, Python numbers raise
    ZeroDivisionError on a zero divisor, NumPy floats yield inf/nan).

    Examples:
        >>> u = Vector([1, 2, 3])
        >>> v = Vector([4, 5, 6])
        >>> u * v
        32
        >>> u.cross(v)
        Vector([-3, 6, -3], row_vector=False, dtype=int)
    """

    __slots__ = ('_values', '_row_vector')

    def __init__(
        self,
        values: Iterable[Any] | Vector = (),
        row_vector: bool | None = None,
        *,
        dtype: Any = None,
    ):
        if isinstance(values, Vector):
            element_type = values.dtype if dtype is None else element_type_for(dtype)
            items = list(values._values)
            if row_vector is None:
                row_vector = values._row_vector
        else:
            items, element_type = _collect(values, dtype)

        self._dtype = element_type
        self._values = [element_type.convert(value) for value in items]
        self._row_vector = bool(row_vector)

    @classmethod
    def _wrap(cls, values: list[Any], row_vector: bool, dtype: ElementType) -> Vector:
        """Adopt an already-converted list without copying it."""
        vector = cls.__new__(cls)
        vector._dtype = dtype
        vector._values = values
        vector._row_vector = row_vector
        return vector

    @classmethod
    def zeros(
        cls,
        size: int,
        row_vector: bool = False,
        dtype: Any = DEFAULT_ELEMENT_TYPE,
    ) -> Vector:
        """Zero-filled vector of the given size and orientation."""
        size = check_dimension(size, 'size')
        element_type = element_type_for(dtype)
        return cls._wrap([element_type.zero] * size, bool(row_vector), element_type)

    # --- Shape and orientation ---

    @property
    def size(self) -> int:
        """Number of elements."""
        return len(self._values)

    @property
    def length(self) -> int:
        """Alias of size."""
        return len(self._values)

    @property
    def row_vector(self) -> bool:
        """True for a row vector, False for a column vector."""
        return self._row_vector

    @property
    def is_row_vector(self) -> bool:
        return self._row_vector

    @property
    def is_column_vector(self) -> bool:
        return not self._row_vector

    def as_row_vector(self) -> Vector:
        """
        Reinterpret as a row vector.

        Returns self if already a row vector, otherwise a new row vector
        holding the same element values.
        """
        if self._row_vector:
            return self
        return Vector._wrap(list(self._values), True, self._dtype)

    def as_column_vector(self) -> Vector:
        """
        Reinterpret as a column vector.

        Returns self if already a column vector, otherwise a new column
        vector holding the same element values.
        """
        if not self._row_vector:
            return self
        return Vector._wrap(list(self._values), False, self._dtype)

    # --- Element access ---

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[check_index(index, len(self._values), 'index')]

    def __setitem__(self, index: int, value: Any) -> None:
        index = check_index(index, len(self._values), 'index')
        self._values[index] = self._dtype.convert(value)

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self._values)):
            yield self._values[i]

    def copy(self) -> Vector:
        """Deep copy with independent storage."""
        return Vector._wrap(list(self._values), self._row_vector, self._dtype)

    def to_list(self) -> list[Any]:
        """Elements as a new list."""
        return list(self._values)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """
        Elements as a 1D NumPy array.

        Args:
            dtype: Target NumPy dtype. Defaults to the element type's own
                dtype for NumPy scalars, NumPy's inference for int, float
                and complex, and object for everything else.
        """
        return np.array(self._values, dtype=self._numpy_dtype() if dtype is None else dtype)

    # --- Arithmetic ---

    def _elements_of(self, other: Vector, operation: str) -> list[Any]:
        check_same_length(len(self._values), len(other._values), operation)
        if other._dtype is self._dtype:
            return other._values
        return [self._dtype.convert(value) for value in other._values]

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        right = self._elements_of(other, 'add')
        return Vector._wrap(
            [a + b for a, b in zip(self._values, right)], self._row_vector, self._dtype
        )

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        right = self._elements_of(other, 'subtract')
        return Vector._wrap(
            [a - b for a, b in zip(self._values, right)], self._row_vector, self._dtype
        )

    def __neg__(self) -> Vector:
        return Vector._wrap([-a for a in self._values], self._row_vector, self._dtype)

    def dot(self, other: Vector) -> Any:
        """
        Dot product: sum of element-wise products.

        Raises:
            DimensionMismatchError: If the lengths differ
        """
        right = self._elements_of(other, 'dot')
        total = self._dtype.zero
        for a, b in zip(self._values, right):
            total = total + a * b
        return total

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if not is_scalar(other):
            return NotImplemented
        factor = self._scalar(other)
        return Vector._wrap([a * factor for a in self._values], self._row_vector, self._dtype)

    def __rmul__(self, other: Any) -> Vector:
        if not is_scalar(other):
            return NotImplemented
        factor = self._scalar(other)
        return Vector._wrap([factor * a for a in self._values], self._row_vector, self._dtype)

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __truediv__(self, other: Any) -> Vector:
        if not is_scalar(other):
            return NotImplemented
        divisor = self._scalar(other)
        divide = self._dtype.divide
        return Vector._wrap(
            [divide(a, divisor) for a in self._values], self._row_vector, self._dtype
        )

    def cross(self, other: Vector) -> Vector:
        """
        Cross product of two 3-vectors.

        Result orientation and element type follow the left operand.

        Raises:
            UnsupportedOperationError: If either vector's length is not 3
        """
        if len(self._values) != 3 or len(other._values) != 3:
            raise UnsupportedOperationError(
                f"cross: only defined for 3-vectors, got lengths "
                f"{len(self._values)} and {len(other._values)}",
                operation='cross',
            )
        a0, a1, a2 = self._values
        b0, b1, b2 = self._elements_of(other, 'cross')
        return Vector._wrap(
            [a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0],
            self._row_vector,
            self._dtype,
        )

    # --- Norms ---

    def norm2(self) -> Any:
        """Sum of squared elements."""
        total = self._dtype.zero
        for a in self._values:
            total = total + a * a
        return total

    def _norm(self, stacklevel: int) -> Any:
        # Frames: _root, _norm, the public method, its caller
        return _root(self.norm2(), self._dtype, stacklevel)

    def norm(self) -> Any:
        """
        Euclidean norm, sqrt(norm2()), through double precision.

        Integer element types truncate the result.

        Raises:
            ConversionError: If the root cannot be represented
        """
        return self._norm(stacklevel=4)

    def normalized(self) -> Vector:
        """New vector divided element-wise by norm()."""
        norm = self._norm(stacklevel=4)
        divide = self._dtype.divide
        return Vector._wrap(
            [divide(a, norm) for a in self._values], self._row_vector, self._dtype
        )

    def normalize(self) -> None:
        """Divide every element by norm() in place."""
        norm = self._norm(stacklevel=4)
        divide = self._dtype.divide
        self._values = [divide(a, norm) for a in self._values]

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self._values) != len(other._values) or self._row_vector != other._row_vector:
            return False
        return all(bool(a == b) for a, b in zip(self._values, other._values))

    def is_close(self, other: Vector, tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate equality.

        Lengths and orientation must match exactly; elements are compared
        with the tolerance tier of this vector's element type unless one is
        given. Exact element types compare element-wise.
        """
        if len(self._values) != len(other._values) or self._row_vector != other._row_vector:
            return False
        tier = self._resolve_tolerance(tolerance)
        if tier.rtol == 0 and tier.atol == 0:
            return self == other
        dtype = self._comparison_dtype()
        return bool(np.allclose(
            np.array(self._values, dtype=dtype),
            np.array(other._values, dtype=dtype),
            rtol=tier.rtol,
            atol=tier.atol,
        ))

    # --- Formatting ---

    def __str__(self) -> str:
        body = ", ".join(str(a) for a in self._values)
        return f"[{body}]" if self._row_vector else f"[[{body}]]"

    def __repr__(self) -> str:
        body = ", ".join(repr(a) for a in self._values)
        return (
            f"Vector([{body}], row_vector={self._row_vector}, dtype={self._dtype.name})"
        )
