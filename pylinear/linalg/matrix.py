"""
Matrix: fixed-shape numeric matrix over a flat row-major buffer.

Element (i, j) lives at index i * columns + j of a single list of length
rows * columns. Structural operations (arithmetic, transpose, minor,
sub_matrix, swap_rows) always return new matrices; only item assignment
mutates.
"""

from __future__ import annotations

import functools
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pylinear.core.exceptions import InvalidArgumentError
from pylinear.core.numeric import (
    DEFAULT_ELEMENT_TYPE,
    ElementType,
    element_type_for,
    infer_element_type,
    numpy_element_type,
)
from pylinear.core.tolerances import ToleranceTier
from pylinear.core.validation import (
    check_block,
    check_dimension,
    check_index,
    check_inner_dimension,
    check_same_shape,
    check_square,
)
from pylinear.linalg._base import LinearValue, is_scalar
from pylinear.linalg._determinant import cofactor_determinant
from pylinear.linalg._elimination import RowReduction, reduce_rows
from pylinear.linalg.vector import Vector


@functools.lru_cache(maxsize=None)
def _placeholder(rows: int, columns: int, dtype: ElementType) -> Matrix:
    return Matrix._wrap(rows, columns, [], dtype)


class Matrix(LinearValue):
    """
    Fixed-shape matrix over any numeric element type.

    Construction:
        Matrix(2, 3)                            2x3 zero matrix of float
        Matrix(2, 3, dtype=int)                 2x3 zero matrix of int
        Matrix.from_array([[1, 2], [3, 4]])     rectangular literal
        Matrix.from_columns([u, v, w])          columns from vectors
        Matrix.from_vector(v)                   1xN (row) or Nx1 (column)
        Matrix.identity(3)                      conventional identity

    ``*`` is the matrix product for Matrix/Vector operands and scaling for
    scalars; ``@`` is the matrix product only. Binary operations take the
    element type of the left operand.

    Examples:
        >>> a = Matrix.from_array([[1, 2], [3, 4]])
        >>> a.determinant()
        -2
        >>> (a * 2).to_list()
        [[2, 4], [6, 8]]
    """

    __slots__ = ('_rows', '_columns', '_data')

    def __init__(
        self,
        rows: int,
        columns: int,
        *,
        dtype: Any = DEFAULT_ELEMENT_TYPE,
    ):
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')
        element_type = element_type_for(dtype)
        self._dtype = element_type
        self._rows = rows
        self._columns = columns
        self._data = [element_type.zero] * (rows * columns)

    @classmethod
    def _wrap(cls, rows: int, columns: int, data: list[Any], dtype: ElementType) -> Matrix:
        """Adopt an already-converted row-major list without copying it."""
        matrix = cls.__new__(cls)
        matrix._dtype = dtype
        matrix._rows = rows
        matrix._columns = columns
        matrix._data = data
        return matrix

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """
        Matrix holding a single vector.

        A row vector of length N gives a 1xN matrix, a column vector an
        Nx1 matrix.
        """
        data = vector.to_list()
        if vector.is_row_vector:
            return cls._wrap(1, len(data), data, vector.dtype)
        return cls._wrap(len(data), 1, data, vector.dtype)

    @classmethod
    def from_columns(cls, columns: Iterable[Vector], *, dtype: Any = None) -> Matrix:
        """
        Matrix whose columns are the given vectors.

        Args:
            columns: Equal-length vectors (plain sequences are wrapped)
            dtype: Element type; defaults to the columns' shared type, or
                one inferred from all elements when the columns differ

        Raises:
            InvalidArgumentError: If there are no columns or their lengths differ
        """
        vectors = [c if isinstance(c, Vector) else Vector(c) for c in columns]
        if not vectors:
            raise InvalidArgumentError("columns: must have at least one column")

        length = len(vectors[0])
        for j, vector in enumerate(vectors[1:], start=1):
            if len(vector) != length:
                raise InvalidArgumentError(
                    f"columns: all columns must have the same length "
                    f"(column 0 has {length}, column {j} has {len(vector)})"
                )

        if dtype is not None:
            element_type = element_type_for(dtype)
        elif len({vector.dtype for vector in vectors}) == 1:
            element_type = vectors[0].dtype
        else:
            element_type = infer_element_type(
                [value for vector in vectors for value in vector], 'columns'
            )
        data = [
            element_type.convert(vector[i])
            for i in range(length)
            for vector in vectors
        ]
        return cls._wrap(length, len(vectors), data, element_type)

    @classmethod
    def from_array(cls, array: Any, *, dtype: Any = None) -> Matrix:
        """
        Matrix from a rectangular two-dimensional literal.

        Args:
            array: Nested sequences (rows of elements), a 2D NumPy array or
                another Matrix (copied)
            dtype: Element type; inferred from the data if None

        Raises:
            InvalidArgumentError: If the literal is not two-dimensional or
                its rows differ in length
        """
        if isinstance(array, Matrix):
            element_type = array.dtype if dtype is None else element_type_for(dtype)
            data = [element_type.convert(value) for value in array._data]
            return cls._wrap(array.rows, array.columns, data, element_type)

        if isinstance(array, np.ndarray):
            if array.ndim != 2:
                raise InvalidArgumentError(
                    f"array: expected 2D array, got {array.ndim}D with shape {array.shape}"
                )
            rows, columns = array.shape
            items = list(array.reshape(-1))
            if dtype is None and array.dtype.kind in 'iufc':
                dtype = numpy_element_type(array.dtype)
        else:
            try:
                row_lists = [list(row) for row in array]
            except TypeError as e:
                raise InvalidArgumentError(
                    f"array: expected a sequence of rows, got {type(array).__name__}"
                ) from e
            rows = len(row_lists)
            columns = len(row_lists[0]) if row_lists else 0
            for i, row in enumerate(row_lists):
                if len(row) != columns:
                    raise InvalidArgumentError(
                        f"array: ragged rows (row 0 has {columns} elements, "
                        f"row {i} has {len(row)})"
                    )
            items = [value for row in row_lists for value in row]

        element_type = infer_element_type(items, 'array') if dtype is None else element_type_for(dtype)
        data = [element_type.convert(value) for value in items]
        return cls._wrap(rows, columns, data, element_type)

    @classmethod
    def identity(cls, size: int, *, dtype: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
        """Square matrix with one on the diagonal and zero elsewhere."""
        matrix = cls(size, size, dtype=dtype)
        n = matrix._rows
        for i in range(n):
            matrix._data[i * n + i] = matrix._dtype.one
        return matrix

    @classmethod
    def additive_identity_placeholder(cls, dtype: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
        """
        Shared empty 0x1 sentinel.

        Not a zero matrix: adding it to any matrix of another shape raises
        DimensionMismatchError. Cached per element type.
        """
        return _placeholder(0, 1, element_type_for(dtype))

    @classmethod
    def multiplicative_identity_placeholder(cls, dtype: Any = DEFAULT_ELEMENT_TYPE) -> Matrix:
        """
        Shared empty 1x0 sentinel.

        Not an identity matrix: it only multiplies with matrices that have
        zero rows. Cached per element type.
        """
        return _placeholder(1, 0, element_type_for(dtype))

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    # --- Element access ---

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"index: expected (row, column), got {key!r}")
        row = check_index(key[0], self._rows, 'row')
        column = check_index(key[1], self._columns, 'column')
        return row * self._columns + column

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        offset = self._offset(key)
        self._data[offset] = self._dtype.convert(value)

    def copy(self) -> Matrix:
        """Deep copy with independent storage."""
        return Matrix._wrap(self._rows, self._columns, list(self._data), self._dtype)

    def to_list(self) -> list[list[Any]]:
        """Elements as nested row lists."""
        c = self._columns
        return [self._data[i * c:(i + 1) * c] for i in range(self._rows)]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """
        Elements as a 2D NumPy array of shape (rows, columns).

        Args:
            dtype: Target NumPy dtype; defaults as in Vector.to_numpy()
        """
        flat = np.array(self._data, dtype=self._numpy_dtype() if dtype is None else dtype)
        return flat.reshape(self._rows, self._columns)

    # --- Arithmetic ---

    def _elements_of(self, other: Matrix) -> list[Any]:
        if other._dtype is self._dtype:
            return other._data
        return [self._dtype.convert(value) for value in other._data]

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'add')
        right = self._elements_of(other)
        data = [a + b for a, b in zip(self._data, right)]
        return Matrix._wrap(self._rows, self._columns, data, self._dtype)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, 'subtract')
        right = self._elements_of(other)
        data = [a - b for a, b in zip(self._data, right)]
        return Matrix._wrap(self._rows, self._columns, data, self._dtype)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(self._rows, self._columns, [-a for a in self._data], self._dtype)

    def _matrix_product(self, other: Matrix) -> Matrix:
        check_inner_dimension(self._columns, other._rows, 'multiply')
        n, m, p = self._rows, self._columns, other._columns
        left = self._data
        right = self._elements_of(other)
        zero = self._dtype.zero

        data = []
        for i in range(n):
            for j in range(p):
                total = zero
                for k in range(m):
                    total = total + left[i * m + k] * right[k * p + j]
                data.append(total)
        return Matrix._wrap(n, p, data, self._dtype)

    def _vector_product(self, vector: Vector) -> Matrix:
        # Orientation is ignored: the vector always acts as a column
        check_inner_dimension(self._columns, len(vector), 'multiply')
        m = self._columns
        left = self._data
        right = [self._dtype.convert(value) for value in vector]
        zero = self._dtype.zero

        data = []
        for i in range(self._rows):
            total = zero
            for k in range(m):
                total = total + left[i * m + k] * right[k]
            data.append(total)
        return Matrix._wrap(self._rows, 1, data, self._dtype)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if isinstance(other, Vector):
            return self._vector_product(other)
        if not is_scalar(other):
            return NotImplemented
        factor = self._scalar(other)
        return Matrix._wrap(
            self._rows, self._columns, [a * factor for a in self._data], self._dtype
        )

    def __rmul__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        factor = self._scalar(other)
        return Matrix._wrap(
            self._rows, self._columns, [factor * a for a in self._data], self._dtype
        )

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if isinstance(other, Vector):
            return self._vector_product(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        divisor = self._scalar(other)
        divide = self._dtype.divide
        return Matrix._wrap(
            self._rows, self._columns, [divide(a, divisor) for a in self._data], self._dtype
        )

    # --- Structure ---

    def transpose(self) -> Matrix:
        """Columns x rows matrix with result[j, i] == self[i, j]."""
        r, c = self._rows, self._columns
        data = [self._data[i * c + j] for j in range(c) for i in range(r)]
        return Matrix._wrap(c, r, data, self._dtype)

    def minor(self, row: int, column: int) -> Matrix:
        """
        Square matrix with one row and one column removed.

        Raises:
            NotSquareError: If the matrix is not square
            IndexOutOfRangeError: If row or column is out of range
        """
        check_square(self.shape, 'minor')
        row = check_index(row, self._rows, 'row')
        column = check_index(column, self._columns, 'column')
        c = self._columns
        data = [
            self._data[i * c + j]
            for i in range(self._rows) if i != row
            for j in range(c) if j != column
        ]
        return Matrix._wrap(self._rows - 1, c - 1, data, self._dtype)

    def sub_matrix(self, row: int, column: int, rows: int, columns: int) -> Matrix:
        """
        Copy of the rows x columns block whose top-left corner is (row, column).

        Raises:
            IndexOutOfRangeError: If the block extends outside the matrix
        """
        check_block(row, rows, self._rows, 'rows')
        check_block(column, columns, self._columns, 'columns')
        c = self._columns
        data = [
            self._data[(row + i) * c + column + j]
            for i in range(rows)
            for j in range(columns)
        ]
        return Matrix._wrap(rows, columns, data, self._dtype)

    def swap_rows(self, row1: int, row2: int) -> Matrix:
        """New matrix with two rows exchanged; self is unchanged."""
        row1 = check_index(row1, self._rows, 'row1')
        row2 = check_index(row2, self._rows, 'row2')
        c = self._columns
        data = list(self._data)
        data[row1 * c:(row1 + 1) * c], data[row2 * c:(row2 + 1) * c] = (
            self._data[row2 * c:(row2 + 1) * c],
            self._data[row1 * c:(row1 + 1) * c],
        )
        return Matrix._wrap(self._rows, c, data, self._dtype)

    # --- Algorithms ---

    def determinant(self) -> Any:
        """
        Determinant by cofactor expansion along row 0.

        O(n!) but exact for any element type with exact ring arithmetic.

        Raises:
            NotSquareError: If the matrix is not square
        """
        return cofactor_determinant(self)

    def row_reduce(self) -> RowReduction:
        """Row echelon form, rank and pivot columns; see row_reduce()."""
        return reduce_rows(self, stacklevel=3)

    def rank(self) -> int:
        """
        Number of pivots found by row reduction.

        Integer element types divide with truncation and may report a
        wrong rank (a PrecisionWarning is emitted).
        """
        return reduce_rows(self, stacklevel=3).rank

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(bool(a == b) for a, b in zip(self._data, other._data))

    def is_close(self, other: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate equality.

        Shapes must match exactly; elements are compared with the tolerance
        tier of this matrix's element type unless one is given. Exact
        element types compare element-wise.
        """
        if self.shape != other.shape:
            return False
        tier = self._resolve_tolerance(tolerance)
        if tier.rtol == 0 and tier.atol == 0:
            return self == other
        dtype = self._comparison_dtype()
        return bool(np.allclose(
            np.array(self._data, dtype=dtype),
            np.array(other._data, dtype=dtype),
            rtol=tier.rtol,
            atol=tier.atol,
        ))

    # --- Formatting ---

    def __str__(self) -> str:
        return "\n".join(" ".join(str(a) for a in row) for row in self.to_list())

    def __repr__(self) -> str:
        if self._rows == 0 or self._columns == 0:
            return f"Matrix({self._rows}, {self._columns}, dtype={self._dtype.name})"
        return f"Matrix.from_array({self.to_list()!r}, dtype={self._dtype.name})"
