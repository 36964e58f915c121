"""
Input validation utilities for PyLinear.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every operation validates before
it allocates or mutates, so a failed call leaves its operands untouched.

Design principles:
    - No negative (from-the-end) indexing
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

import operator
from typing import Any

from pylinear.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NotSquareError,
)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in [0, bound).

    Args:
        index: Index to check (anything supporting __index__)
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, bool):
        raise TypeError(f"{name}: index must be an integer, got bool")
    index = operator.index(index)
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {bound})",
            index=index,
            bound=bound,
        )
    return index


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension (row/column count or vector size) is a non-negative int.

    Raises:
        TypeError: If value is not an integer
        InvalidArgumentError: If value is negative
    """
    if isinstance(value, bool):
        raise TypeError(f"{name}: dimension must be an integer, got bool")
    value = operator.index(value)
    if value < 0:
        raise InvalidArgumentError(f"{name}: must be non-negative, got {value}")
    return value


def check_same_length(left: int, right: int, operation: str) -> None:
    """
    Verify two vector lengths agree.

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: vector lengths differ ({left} vs {right})",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrix shapes are identical.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes differ ({left[0]}x{left[1]} vs {right[0]}x{right[1]})",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dimension(left_columns: int, right_rows: int, operation: str) -> None:
    """
    Verify the inner dimensions of a product agree.

    Raises:
        DimensionMismatchError: If left.columns != right.rows
    """
    if left_columns != right_rows:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions differ "
            f"(left has {left_columns} columns, right has {right_rows} rows)",
            operation=operation,
            expected=left_columns,
            actual=right_rows,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise NotSquareError(
            f"{operation}: matrix must be square, got {rows}x{columns}",
            operation=operation,
            expected=(rows, rows),
            actual=shape,
        )


def check_block(
    start: int,
    extent: int,
    bound: int,
    name: str,
) -> None:
    """
    Verify a block [start, start + extent) lies inside [0, bound].

    Used by sub_matrix() for both axes. An empty block (extent 0) may start
    at the bound.

    Raises:
        IndexOutOfRangeError: If the block leaves the matrix
    """
    if start < 0 or extent < 0 or start + extent > bound:
        raise IndexOutOfRangeError(
            f"{name}: block [{start}, {start + extent}) out of range [0, {bound})",
            index=start + extent if start >= 0 else start,
            bound=bound,
        )
