"""
Core infrastructure for PyLinear.

This module provides the element-type machinery and shared abstractions
used by the linalg value types.

Key components:
    protocols: Numeric capability contract
    numeric: ElementType descriptors, inference, sqrt helper
    exceptions: Exception and warning hierarchy
    validation: Index and shape validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinear.core.protocols import Numeric, is_numeric, is_numeric_type
from pylinear.core.numeric import (
    ElementType,
    INTEGER,
    FRACTION,
    FLOAT,
    COMPLEX,
    DECIMAL,
    DEFAULT_ELEMENT_TYPE,
    element_type_for,
    infer_element_type,
    numpy_element_type,
    sqrt,
)
from pylinear.core.tolerances import (
    ToleranceTier,
    EXACT,
    FLOAT64,
    FLOAT32,
    FLOAT16,
    select_tolerance,
)
from pylinear.core.exceptions import (
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

__all__ = [
    # Protocols
    "Numeric",
    "is_numeric",
    "is_numeric_type",
    # Element types
    "ElementType",
    "INTEGER",
    "FRACTION",
    "FLOAT",
    "COMPLEX",
    "DECIMAL",
    "DEFAULT_ELEMENT_TYPE",
    "element_type_for",
    "infer_element_type",
    "numpy_element_type",
    "sqrt",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FLOAT64",
    "FLOAT32",
    "FLOAT16",
    "select_tolerance",
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
