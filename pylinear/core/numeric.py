"""
Element types and the square-root helper.

An ElementType is the explicit numeric-operations object behind every
Vector and Matrix: it supplies the additive and multiplicative identities,
the conversion of operands into the element type, the conversion of a
double back into it, and the division used by row reduction. It is
resolved once at construction (explicitly through ``dtype=`` or inferred
from the data) so the algorithms never dispatch on element types.

Built-in element types:
    INTEGER   Python int, division truncates toward zero
    FRACTION  fractions.Fraction, exact
    FLOAT     Python float (IEEE double)
    COMPLEX   Python complex
    DECIMAL   decimal.Decimal, current context precision

NumPy scalar dtypes map to cached element types via numpy_element_type().
Any other class satisfying the Numeric protocol gets a generic element
type built from ``kind(0)`` and ``kind(1)``.
"""

from __future__ import annotations

import functools
import math
import numbers
import operator
import warnings
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Iterable

import numpy as np

from pylinear.core.exceptions import ConversionError, PrecisionWarning, ValidationError
from pylinear.core.protocols import is_numeric, is_numeric_type


# Errors raised by Python and NumPy constructors on unrepresentable values
_CONVERSION_FAILURES = (TypeError, ValueError, OverflowError, ArithmeticError)


@dataclass(frozen=True)
class ElementType:
    """
    Numeric operations for one element type.

    Attributes:
        name: Display name ('int', 'float', 'numpy.float32', ...)
        kind: Python type of the stored elements
        zero: Additive identity
        one: Multiplicative identity
        exact: Addition and multiplication are exact (no rounding)
        integral: Integer-like type; division and sqrt truncate
        converter: Strict conversion of an operand into ``kind``
        double_converter: Lossy conversion of a double into ``kind``
        divider: Division used for scaling and elimination
    """
    name: str
    kind: type
    # Identities of user types may be unhashable; hashing uses name and kind
    zero: Any = field(hash=False)
    one: Any = field(hash=False)
    exact: bool = False
    integral: bool = False
    converter: Callable[[Any], Any] = field(default=None, repr=False, compare=False)
    double_converter: Callable[[float], Any] = field(default=None, repr=False, compare=False)
    divider: Callable[[Any, Any], Any] = field(
        default=operator.truediv, repr=False, compare=False
    )

    def convert(self, value: Any) -> Any:
        """
        Convert an operand into this element type.

        Raises:
            ConversionError: If the value is not numeric or cannot be
                represented (e.g. 2.5 as an integer, a complex as a float)
        """
        if type(value) is self.kind:
            return value
        if not is_numeric(value):
            raise ConversionError(
                f"cannot convert {value!r} to {self.name}: "
                f"{type(value).__name__} is not a numeric type",
                value=value,
                target=self.name,
            )
        try:
            return self.converter(value)
        except _CONVERSION_FAILURES as e:
            raise ConversionError(
                f"cannot convert {value!r} to {self.name}: {e}",
                value=value,
                target=self.name,
            ) from e

    def from_double(self, value: float) -> Any:
        """
        Convert a double back into this element type.

        Lossy by design: integer-like types truncate toward zero.

        Raises:
            ConversionError: If the double cannot be represented (NaN or
                infinity as an integer, overflow of a fixed-width type)
        """
        try:
            return self.double_converter(value)
        except _CONVERSION_FAILURES as e:
            raise ConversionError(
                f"cannot represent {value!r} as {self.name}: {e}",
                value=value,
                target=self.name,
            ) from e

    def divide(self, numerator: Any, denominator: Any) -> Any:
        """Divide with this type's semantics (truncating for integral types)."""
        return self.divider(numerator, denominator)

    def is_zero(self, value: Any) -> bool:
        """Equality-to-zero test used by pivot search."""
        return bool(value == self.zero)

    def __str__(self) -> str:
        return self.name


# ═══════════════════════════════════════════════════════════════════════
# Converters
# ═══════════════════════════════════════════════════════════════════════


def _is_complex_only(value: Any) -> bool:
    return isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)


def _to_integer(value: Any) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    if _is_complex_only(value):
        raise TypeError(f"complex value {value!r} has no integer representation")
    result = int(value)
    if result != value:
        raise ValueError(f"{value!r} is not integral")
    return result


def _to_fraction(value: Any) -> Fraction:
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    if isinstance(value, (numbers.Rational, float, Decimal)):
        return Fraction(value)
    if isinstance(value, numbers.Real):
        return Fraction(float(value))
    raise TypeError(f"{type(value).__name__} has no rational representation")


def _to_float(value: Any) -> float:
    if _is_complex_only(value):
        raise TypeError(f"complex value {value!r} has no float representation")
    return float(value)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, numbers.Rational):
        return Decimal(value.numerator) / Decimal(value.denominator)
    if isinstance(value, numbers.Real) and not isinstance(value, Decimal):
        return Decimal(float(value))
    return Decimal(value)


def _truncating_divide(numerator: Any, denominator: Any) -> Any:
    """Integer division rounding toward zero (not floor)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


# ═══════════════════════════════════════════════════════════════════════
# Built-in element types
# ═══════════════════════════════════════════════════════════════════════


INTEGER = ElementType(
    name='int',
    kind=int,
    zero=0,
    one=1,
    exact=True,
    integral=True,
    converter=_to_integer,
    double_converter=int,
    divider=_truncating_divide,
)

FRACTION = ElementType(
    name='Fraction',
    kind=Fraction,
    zero=Fraction(0),
    one=Fraction(1),
    exact=True,
    converter=_to_fraction,
    double_converter=Fraction,
)

FLOAT = ElementType(
    name='float',
    kind=float,
    zero=0.0,
    one=1.0,
    converter=_to_float,
    double_converter=float,
)

COMPLEX = ElementType(
    name='complex',
    kind=complex,
    zero=0j,
    one=1 + 0j,
    converter=complex,
    double_converter=complex,
)

DECIMAL = ElementType(
    name='Decimal',
    kind=Decimal,
    zero=Decimal(0),
    one=Decimal(1),
    converter=_to_decimal,
    double_converter=Decimal,
)

DEFAULT_ELEMENT_TYPE = FLOAT

_BUILTIN_ELEMENT_TYPES: dict[type, ElementType] = {
    int: INTEGER,
    Fraction: FRACTION,
    float: FLOAT,
    complex: COMPLEX,
    Decimal: DECIMAL,
}


@functools.lru_cache(maxsize=None)
def _numpy_element_type(dtype_name: str) -> ElementType:
    dtype = np.dtype(dtype_name)
    scalar = dtype.type
    integral = dtype.kind in 'iu'

    if integral:
        def converter(value):
            return scalar(_to_integer(value))

        def double_converter(value):
            return scalar(int(value))
    elif dtype.kind == 'f':
        def converter(value):
            return scalar(_to_float(value))

        double_converter = scalar
    else:
        converter = scalar
        double_converter = scalar

    return ElementType(
        name=f'numpy.{dtype.name}',
        kind=scalar,
        zero=scalar(0),
        one=scalar(1),
        exact=integral,
        integral=integral,
        converter=converter,
        double_converter=double_converter,
        divider=_truncating_divide if integral else operator.truediv,
    )


def numpy_element_type(dtype: Any) -> ElementType:
    """
    Element type for a NumPy scalar dtype.

    Args:
        dtype: Anything np.dtype() accepts ('float32', np.int64, ...)

    Returns:
        Cached ElementType; the same instance for equivalent dtypes

    Raises:
        ValidationError: If the dtype is not integer, floating or complex
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: {dtype!r} is not a NumPy dtype") from e
    if resolved.kind not in 'iufc':
        raise ValidationError(
            f"dtype: {resolved.name} is not numeric, expected integer, floating or complex"
        )
    return _numpy_element_type(resolved.name)


@functools.lru_cache(maxsize=None)
def _generic_element_type(kind: type) -> ElementType:
    try:
        zero, one = kind(0), kind(1)
    except _CONVERSION_FAILURES as e:
        raise ValidationError(
            f"dtype: {kind.__name__} cannot be built from 0 and 1: {e}"
        ) from e
    return ElementType(
        name=kind.__name__,
        kind=kind,
        zero=zero,
        one=one,
        converter=kind,
        double_converter=kind,
    )


def element_type_for(dtype: Any) -> ElementType:
    """
    Resolve an ElementType from a type, NumPy dtype or ElementType.

    Args:
        dtype: ElementType instance, builtin numeric type (int, float,
            complex, Fraction, Decimal), NumPy dtype or scalar type, or a
            user class satisfying the Numeric protocol

    Returns:
        The matching ElementType

    Raises:
        ValidationError: If no element type can be derived
    """
    if isinstance(dtype, ElementType):
        return dtype
    if isinstance(dtype, type) and dtype in _BUILTIN_ELEMENT_TYPES:
        return _BUILTIN_ELEMENT_TYPES[dtype]
    if isinstance(dtype, (np.dtype, str)) or (
        isinstance(dtype, type) and issubclass(dtype, np.generic)
    ):
        return numpy_element_type(dtype)
    if is_numeric_type(dtype):
        return _generic_element_type(dtype)
    raise ValidationError(
        f"dtype: cannot derive an element type from {dtype!r}"
    )


def infer_element_type(values: Iterable[Any], name: str = 'values') -> ElementType:
    """
    Infer the element type of a collection of values.

    Homogeneous collections use their own type. Mixed collections are
    promoted along the numeric tower (Integral, Rational, Real, Complex).
    An empty collection yields DEFAULT_ELEMENT_TYPE.

    Args:
        values: Elements to inspect
        name: Parameter name for error messages

    Raises:
        ValidationError: If an element is not numeric or the mix has no
            common type
    """
    values = list(values)
    if not values:
        return DEFAULT_ELEMENT_TYPE

    for value in values:
        if not is_numeric(value):
            raise ValidationError(
                f"{name}: element {value!r} of type {type(value).__name__} "
                f"does not satisfy the numeric contract"
            )

    kinds = {type(value) for value in values}
    if len(kinds) == 1:
        return element_type_for(kinds.pop())

    for tower_class, element_type in (
        (numbers.Integral, INTEGER),
        (numbers.Rational, FRACTION),
        (numbers.Real, FLOAT),
        (numbers.Complex, COMPLEX),
    ):
        if all(isinstance(value, tower_class) for value in values):
            return element_type

    names = ", ".join(sorted(kind.__name__ for kind in kinds))
    raise ValidationError(
        f"{name}: no common element type for ({names}); pass dtype explicitly"
    )


def sqrt(value: Any, dtype: Any = None) -> Any:
    """
    Approximate square root through double precision.

    Converts the value to a double, takes the square root and converts the
    result back to the element type. Lossy for integer-like element types
    (sqrt(8) == 2); pick a floating or exact type for precise results.

    Args:
        value: Non-negative numeric value
        dtype: Element type of the result; inferred from value if None

    Returns:
        Square root in the element type

    Raises:
        ConversionError: If the value has no double representation, is
            negative, or the root cannot be represented in the element type

    Warns:
        PrecisionWarning: If an integral element type truncated the root
    """
    element_type = infer_element_type([value]) if dtype is None else element_type_for(dtype)
    return _root(value, element_type, stacklevel=3)


def _root(value: Any, element_type: ElementType, stacklevel: int) -> Any:
    """
    Square root in an element type.

    ``stacklevel`` counts frames from this function, so callers inside the
    package can point the truncation warning at user code.
    """
    if _is_complex_only(value):
        raise ConversionError(
            f"sqrt: complex value {value!r} has no double representation",
            value=value,
            target='float',
        )
    try:
        double = float(value)
    except _CONVERSION_FAILURES as e:
        raise ConversionError(
            f"sqrt: cannot convert {value!r} to a double: {e}",
            value=value,
            target='float',
        ) from e

    if double < 0:
        raise ConversionError(
            f"sqrt: negative value {value!r} has no real square root",
            value=value,
            target=element_type.name,
        )

    root = math.sqrt(double)
    result = element_type.from_double(root)

    if element_type.integral and float(result) != root:
        warnings.warn(
            f"sqrt({value!r}) truncated to {result!r} for element type {element_type.name}",
            PrecisionWarning,
            stacklevel=stacklevel,
        )
    return result
