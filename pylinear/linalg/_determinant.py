"""
Determinant by recursive cofactor expansion.

Expands along row 0:

    det(A) = sum_i (-1)^i * A[0, i] * det(minor(A, 0, i))

This is O(n!) but uses only ring operations (+, -, *, negation), so it is
exact for int and Fraction elements where elimination would divide. Each
minor is an owned copy; no views are shared between recursion levels.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pylinear.core.validation import check_square

if TYPE_CHECKING:
    from pylinear.linalg.matrix import Matrix


def cofactor_determinant(matrix: Matrix) -> Any:
    """
    Determinant of a square matrix.

    Base cases: 0x0 gives one (empty product), 1x1 gives the element,
    2x2 gives ad - bc.

    Raises:
        NotSquareError: If the matrix is not square
    """
    check_square(matrix.shape, 'determinant')
    n = matrix.rows
    dtype = matrix.dtype
    a = matrix._data

    if n == 0:
        return dtype.one
    if n == 1:
        return a[0]
    if n == 2:
        return a[0] * a[3] - a[1] * a[2]

    one = dtype.one
    total = dtype.zero
    for i in range(n):
        sign = one if i % 2 == 0 else -one
        total = total + sign * a[i] * cofactor_determinant(matrix.minor(0, i))
    return total
