"""
Exception hierarchy for PyLinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Shape and index errors additionally inherit from
the matching builtin (ValueError, IndexError) so generic handlers keep
working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Errors are raised before any operand is modified
"""


class PyLinearError(Exception):
    """Base exception for all PyLinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when user-provided inputs (shapes, indices, constructor
    arguments) fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError, ValueError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation that was attempted
        expected: Shape (or length) the operation required
        actual: Shape (or length) that was supplied
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionMismatchError):
    """
    Operation requires a square matrix.

    Raised by determinant() and minor() on a matrix whose row and column
    counts differ.
    """
    pass


class InvalidArgumentError(ValidationError, ValueError):
    """
    Malformed constructor input.

    Raised for an empty column list, columns of unequal length, ragged
    literals or negative dimensions.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Index lies outside the valid bounds.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that applied to the index
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class UnsupportedOperationError(PyLinearError):
    """
    Operation is not defined for these operands.

    Raised e.g. by the cross product of vectors whose length is not 3.

    Attributes:
        operation: Name of the unsupported operation
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class NumericalError(PyLinearError):
    """
    Numerical computation failed.

    Base class for errors arising from the element type's arithmetic.
    """
    pass


class ConversionError(NumericalError):
    """
    A value could not be represented in the target element type.

    Raised by the square-root helper when the double round-trip fails, and
    when an operand cannot be converted into a vector's or matrix's
    element type.

    Attributes:
        value: The value that failed to convert
        target: Name of the element type it was converted to
    """

    def __init__(
        self,
        message: str,
        value: object = None,
        target: str | None = None
    ):
        super().__init__(message)
        self.value = value
        self.target = target


class PyLinearWarning(UserWarning):
    """Base category for all PyLinear warnings."""
    pass


class PrecisionWarning(PyLinearWarning):
    """
    Result may be inexact because of the element type's arithmetic.

    Emitted when integer-like element types truncate during division or
    square-root conversion.
    """
    pass
