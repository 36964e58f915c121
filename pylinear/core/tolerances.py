"""
Tolerance tiers for approximate comparison.

Defines precision expectations for the element types a Vector or Matrix
can hold:
- Exact types (int, Fraction, NumPy integers): zero tolerance
- Double precision (float, complex, numpy.float64): machine precision
- Single/half precision NumPy floats: relaxed
- Decimal: matched to double precision after conversion

Used by is_close() on vectors and matrices and by the test suite.
"""

from dataclasses import dataclass

import numpy as np

from pylinear.core.numeric import ElementType


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer and rational arithmetic: results must match exactly
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic: elements must be equal',
)

# IEEE double precision
FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision: agrees to machine precision',
)

# IEEE single precision (numpy.float32, numpy.complex64)
FLOAT32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='float32',
    description='Single precision: relaxed for 24-bit mantissa',
)

# IEEE half precision (numpy.float16)
FLOAT16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='float16',
    description='Half precision: relaxed for 11-bit mantissa',
)


def select_tolerance(element_type: ElementType) -> ToleranceTier:
    """Select appropriate tolerance tier for a given element type."""
    if element_type.exact:
        return EXACT
    if issubclass(element_type.kind, np.generic):
        itemsize = np.dtype(element_type.kind).itemsize
        if np.issubdtype(element_type.kind, np.complexfloating):
            itemsize //= 2
        if itemsize <= 2:
            return FLOAT16
        if itemsize <= 4:
            return FLOAT32
    return FLOAT64
