"""
Core protocols for PyLinear.

These define the structural interface an element type must satisfy to be
stored in a Vector or Matrix. We use Protocol (structural typing) rather
than ABC (nominal typing) so that builtin numbers, NumPy scalars and user
types all qualify without registration.

Design Principles:
    - Minimal contract: prescribe only the arithmetic the algorithms use
    - Identities (zero/one) and conversions live on ElementType, not on values
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class Numeric(Protocol):
    """
    Numeric capability contract for vector and matrix elements.

    A value qualifies when it supports addition, subtraction,
    multiplication, true division, unary negation (used for the sign
    alternation in cofactor expansion) and equality comparison (used for
    zero tests during pivot search).

    Note:
        isinstance() checks only that the methods exist. Whether they
        return values of the same type is the caller's responsibility.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...

    def __neg__(self) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        ...


_ARITHMETIC_METHODS = ('__add__', '__sub__', '__mul__', '__truediv__', '__neg__')


def is_numeric(value: object) -> bool:
    """Check whether a value satisfies the Numeric protocol."""
    # bool passes structurally but is never a meaningful element
    return not isinstance(value, bool) and isinstance(value, Numeric)


def is_numeric_type(cls: type) -> bool:
    """
    Check whether instances of a class satisfy the Numeric protocol.

    issubclass() is unavailable here: defining __eq__ in the protocol body
    sets __hash__ to None, a non-method member. Every class has __eq__, so
    only the arithmetic methods are checked.
    """
    if not isinstance(cls, type) or issubclass(cls, bool):
        return False
    return all(callable(getattr(cls, name, None)) for name in _ARITHMETIC_METHODS)
