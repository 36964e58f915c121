"""
Shared behaviour of Vector and Matrix.

Both types own a flat list of elements of a single ElementType. This base
keeps the element-type bookkeeping, scalar-operand conversion and NumPy
interop in one place.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from pylinear.core.numeric import ElementType
from pylinear.core.protocols import is_numeric
from pylinear.core.tolerances import ToleranceTier, select_tolerance


class LinearValue:
    """Base class for element containers (Vector, Matrix)."""

    __slots__ = ('_dtype',)

    # Mutable containers: equality is element-wise, hashing is disabled
    __hash__ = None

    # Make NumPy defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    _dtype: ElementType

    @property
    def dtype(self) -> ElementType:
        """Element type of the stored values."""
        return self._dtype

    def _scalar(self, value: Any) -> Any:
        """Convert a scalar operand into this container's element type."""
        return self._dtype.convert(value)

    def _numpy_dtype(self) -> np.dtype | None:
        kind = self._dtype.kind
        if issubclass(kind, np.generic):
            return np.dtype(kind)
        if kind in (int, float, complex):
            return None
        return np.dtype(object)

    def _comparison_dtype(self) -> np.dtype:
        kind = self._dtype.kind
        if issubclass(kind, numbers.Complex) and not issubclass(kind, numbers.Real):
            return np.dtype(np.complex128)
        return np.dtype(np.float64)

    def _resolve_tolerance(self, tolerance: ToleranceTier | None) -> ToleranceTier:
        return select_tolerance(self._dtype) if tolerance is None else tolerance


def is_scalar(value: Any) -> bool:
    """Numeric operand that is not itself a vector, matrix or array."""
    return is_numeric(value) and not isinstance(value, (LinearValue, np.ndarray))
