"""
PyLinear: generic vectors and matrices for Python.

Small linear-algebra primitives parameterized over any numeric element
type (int, float, complex, Fraction, Decimal, NumPy scalars or user
types satisfying the Numeric protocol), with exact cofactor determinants
and pivoted row-reduction rank.

Submodules:
    linalg: Vector, Matrix, row reduction
    core: element types, exceptions, validation, tolerances
"""

__version__ = "0.1.0"

from pylinear.core import (
    Numeric,
    ElementType,
    INTEGER,
    FRACTION,
    FLOAT,
    COMPLEX,
    DECIMAL,
    element_type_for,
    numpy_element_type,
    sqrt,
    ToleranceTier,
    PyLinearError,
    ValidationError,
    DimensionMismatchError,
    NotSquareError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
    NumericalError,
    ConversionError,
    PyLinearWarning,
    PrecisionWarning,
)
from pylinear.linalg import Vector, Matrix, RowReduction, row_reduce

__all__ = [
    "__version__",
    # Value types
    "Vector",
    "Matrix",
    "RowReduction",
    "row_reduce",
    # Element types
    "Numeric",
    "ElementType",
    "INTEGER",
    "FRACTION",
    "FLOAT",
    "COMPLEX",
    "DECIMAL",
    "element_type_for",
    "numpy_element_type",
    "sqrt",
    "ToleranceTier",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "DimensionMismatchError",
    "NotSquareError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "UnsupportedOperationError",
    "NumericalError",
    "ConversionError",
    "PyLinearWarning",
    "PrecisionWarning",
]
