"""
Linear algebra value types.

Public API:
    Vector         - fixed-length vector with row/column orientation
    Matrix         - fixed-shape matrix over a flat row-major buffer
    row_reduce(m)  - row echelon form, rank and pivot columns
    RowReduction   - result of row_reduce()
"""

from pylinear.linalg.vector import Vector
from pylinear.linalg.matrix import Matrix
from pylinear.linalg._elimination import RowReduction, row_reduce

__all__ = [
    "Vector",
    "Matrix",
    "RowReduction",
    "row_reduce",
]
