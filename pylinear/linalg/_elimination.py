"""
Rank by pivoted row reduction.

Repeats on a shrinking working matrix until it runs out of rows or
columns:

1. If the pivot [0, 0] is zero, swap in the first lower row with a nonzero
   entry in column 0. If there is none, drop column 0 and continue.
2. Eliminate column 0 from every other row:
   row[i] -= (row[i][0] / pivot) * row[0]
3. Count the pivot and drop row 0 and column 0.

Division uses the element type's semantics: exact for Fraction, rounded
for floats, truncating for integer types. Integer results can therefore
be wrong (a PrecisionWarning is emitted); use Fraction or float elements
when the rank matters.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pylinear.core.exceptions import PrecisionWarning

if TYPE_CHECKING:
    from pylinear.linalg.matrix import Matrix


@dataclass(frozen=True)
class RowReduction:
    """
    Result of row reduction.

    Attributes:
        echelon: Row echelon form, same shape and element type as the input;
            pivot rows first, remaining rows zero
        rank: Number of pivots found
        pivot_columns: Column index of each pivot, in order
    """
    echelon: Matrix
    rank: int
    pivot_columns: tuple[int, ...]


def row_reduce(matrix: Matrix) -> RowReduction:
    """
    Reduce a matrix to row echelon form and count its pivots.

    Works on a private copy; the input is never modified.

    Args:
        matrix: Matrix of any shape

    Returns:
        RowReduction with echelon form, rank and pivot columns

    Warns:
        PrecisionWarning: If the element type truncates on division
    """
    return reduce_rows(matrix, stacklevel=3)


def reduce_rows(matrix: Matrix, stacklevel: int) -> RowReduction:
    """
    row_reduce() with the warning's stacklevel counted from this function.

    Matrix methods call this directly so the PrecisionWarning names the
    caller of Matrix.rank() rather than the method itself.
    """
    from pylinear.linalg.matrix import Matrix

    dtype = matrix.dtype
    if dtype.integral:
        warnings.warn(
            f"row reduction over {dtype.name} uses truncating division; "
            f"the rank may be inexact (use Fraction or float elements)",
            PrecisionWarning,
            stacklevel=stacklevel,
        )

    echelon = Matrix(matrix.rows, matrix.columns, dtype=dtype)
    work = matrix.copy()
    pivot_columns: list[int] = []
    offset = 0

    while work.rows > 0 and work.columns > 0:
        if dtype.is_zero(work[0, 0]):
            for i in range(1, work.rows):
                if not dtype.is_zero(work[i, 0]):
                    work = work.swap_rows(0, i)
                    break
            else:
                # Column is zero below the processed rows: no pivot here
                work = work.sub_matrix(0, 1, work.rows, work.columns - 1)
                offset += 1
                continue

        pivot = work[0, 0]
        for i in range(1, work.rows):
            factor = dtype.divide(work[i, 0], pivot)
            for j in range(work.columns):
                work[i, j] = work[i, j] - factor * work[0, j]

        rank = len(pivot_columns)
        for j in range(work.columns):
            echelon[rank, offset + j] = work[0, j]
        pivot_columns.append(offset)

        work = work.sub_matrix(1, 1, work.rows - 1, work.columns - 1)
        offset += 1

    return RowReduction(
        echelon=echelon,
        rank=len(pivot_columns),
        pivot_columns=tuple(pivot_columns),
    )
