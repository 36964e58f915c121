"""
Tests for Vector.

Covers construction and element-type resolution, orientation, element
access, arithmetic with the left-operand rule, dot and cross products,
norms, equality, formatting and NumPy interop.
"""

import warnings
from fractions import Fraction

import numpy as np
import pytest

from pylinear import (
    FLOAT,
    FRACTION,
    INTEGER,
    ConversionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    PrecisionWarning,
    UnsupportedOperationError,
    ValidationError,
    Vector,
)
from pylinear.core.tolerances import FLOAT16


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_list_infers_int(self):
        v = Vector([1, 2, 3])
        assert v.dtype is INTEGER
        assert v.size == 3
        assert v.is_column_vector

    def test_mixed_promotes_to_float(self):
        v = Vector([1, 2.5])
        assert v.dtype is FLOAT
        assert v.to_list() == [1.0, 2.5]
        assert all(type(a) is float for a in v)

    def test_explicit_dtype_converts(self):
        v = Vector([1, 2], dtype=Fraction)
        assert v.dtype is FRACTION
        assert all(type(a) is Fraction for a in v)

    def test_explicit_dtype_rejects_lossy(self):
        with pytest.raises(ConversionError):
            Vector([1.5], dtype=int)

    def test_row_vector_flag(self):
        assert Vector([1, 2], row_vector=True).is_row_vector
        assert Vector([1, 2], True).row_vector is True

    def test_empty_defaults_to_float(self):
        v = Vector()
        assert v.size == 0
        assert v.dtype is FLOAT

    def test_from_generator(self):
        assert Vector(i * i for i in range(4)).to_list() == [0, 1, 4, 9]

    def test_from_numpy_keeps_dtype(self):
        v = Vector(np.array([1.0, 2.0], dtype=np.float32))
        assert v.dtype.name == "numpy.float32"
        assert type(v[0]) is np.float32

    def test_rejects_2d_numpy(self):
        with pytest.raises(InvalidArgumentError, match="expected 1D"):
            Vector(np.zeros((2, 2)))

    def test_rejects_scalar(self):
        with pytest.raises(TypeError, match="Vector.zeros"):
            Vector(5)

    def test_rejects_non_numeric_elements(self):
        with pytest.raises(ValidationError):
            Vector(["a", "b"])

    def test_copy_constructor_is_deep(self):
        original = Vector([1, 2, 3], row_vector=True)
        clone = Vector(original)
        clone[0] = 10
        assert original[0] == 1
        assert clone.is_row_vector

    def test_copy_constructor_orientation_override(self):
        assert Vector(Vector([1, 2], True), False).is_column_vector

    def test_copy_constructor_dtype_override(self):
        clone = Vector(Vector([1, 2]), dtype=float)
        assert clone.dtype is FLOAT

    def test_zeros(self):
        v = Vector.zeros(3)
        assert v.to_list() == [0.0, 0.0, 0.0]
        assert v.dtype is FLOAT
        assert v.is_column_vector

    def test_zeros_typed_row(self):
        v = Vector.zeros(2, row_vector=True, dtype=int)
        assert v.to_list() == [0, 0]
        assert v.is_row_vector

    def test_zeros_rejects_negative(self):
        with pytest.raises(InvalidArgumentError):
            Vector.zeros(-1)

    def test_user_numeric_type(self, scaled):
        v = Vector([scaled(1), scaled(2)])
        assert v.dtype.kind is scaled
        assert v.dot(v) == scaled(5)


# ═══════════════════════════════════════════════════════════════════════
# Orientation
# ═══════════════════════════════════════════════════════════════════════


class TestOrientation:

    def test_as_row_vector_keeps_values(self):
        v = Vector([1, 2, 3])
        row = v.as_row_vector()
        assert row.is_row_vector
        assert row.to_list() == [1, 2, 3]
        assert v.is_column_vector

    def test_as_column_vector_keeps_values(self):
        column = Vector([4, 5], row_vector=True).as_column_vector()
        assert column.is_column_vector
        assert column.to_list() == [4, 5]

    def test_same_orientation_returns_self(self):
        v = Vector([1, 2], row_vector=True)
        assert v.as_row_vector() is v

    def test_flip_has_independent_storage(self):
        v = Vector([1, 2])
        row = v.as_row_vector()
        row[0] = 9
        assert v[0] == 1


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get_and_set(self):
        v = Vector([1, 2, 3])
        v[1] = 7
        assert v[1] == 7
        assert len(v) == 3
        assert v.length == 3

    def test_set_converts(self):
        v = Vector([1, 2])
        v[0] = 3.0
        assert type(v[0]) is int

    def test_set_rejects_lossy(self):
        v = Vector([1, 2])
        with pytest.raises(ConversionError):
            v[0] = 2.5
        assert v[0] == 1

    @pytest.mark.parametrize("index", [3, -1])
    def test_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError):
            Vector([1, 2, 3])[index]

    def test_set_out_of_range(self):
        v = Vector([1, 2, 3])
        with pytest.raises(IndexOutOfRangeError):
            v[3] = 0

    def test_iteration(self):
        assert list(Vector([3, 1, 2])) == [3, 1, 2]

    def test_copy_is_independent(self):
        v = Vector([1, 2])
        c = v.copy()
        c[0] = 5
        assert v[0] == 1


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add(self, vectors_123_456):
        u, v = vectors_123_456
        assert (u + v).to_list() == [5, 7, 9]

    def test_subtract(self, vectors_123_456):
        u, v = vectors_123_456
        assert (v - u).to_list() == [3, 3, 3]

    def test_negate(self):
        assert (-Vector([1, -2])).to_list() == [-1, 2]

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="add") as exc_info:
            Vector([1, 2]) + Vector([1, 2, 3])
        assert exc_info.value.operation == "add"

    def test_left_orientation_wins(self):
        result = Vector([1, 2], row_vector=True) + Vector([3, 4])
        assert result.is_row_vector

    def test_left_dtype_wins(self):
        result = Vector([1.0, 2.0]) + Vector([1, 2])
        assert result.dtype is FLOAT
        assert result.to_list() == [2.0, 4.0]

    def test_right_operand_must_convert(self):
        with pytest.raises(ConversionError):
            Vector([1, 2]) + Vector([0.5, 0.5])

    def test_operands_unchanged(self, vectors_123_456):
        u, v = vectors_123_456
        u + v
        assert u.to_list() == [1, 2, 3]
        assert v.to_list() == [4, 5, 6]

    def test_scale_both_sides(self):
        v = Vector([1, 2, 3])
        assert (v * 2).to_list() == [2, 4, 6]
        assert (2 * v).to_list() == [2, 4, 6]

    def test_numpy_scalar_on_left(self):
        result = np.float64(2.0) * Vector([1.0, 2.0])
        assert isinstance(result, Vector)
        assert result.to_list() == [2.0, 4.0]

    def test_scalar_must_convert(self):
        with pytest.raises(ConversionError):
            Vector([1, 2]) * 0.5

    def test_divide_float(self):
        assert (Vector([1.0, 3.0]) / 2).to_list() == [0.5, 1.5]

    def test_divide_int_truncates_toward_zero(self):
        assert (Vector([7, -7]) / 2).to_list() == [3, -3]

    def test_divide_fraction_exact(self):
        assert (Vector([1, 2], dtype=Fraction) / 3).to_list() == [Fraction(1, 3), Fraction(2, 3)]

    def test_divide_by_zero_python_types(self):
        with pytest.raises(ZeroDivisionError):
            Vector([1.0]) / 0
        with pytest.raises(ZeroDivisionError):
            Vector([1]) / 0

    def test_divide_by_zero_numpy_float(self):
        v = Vector(np.array([1.0, -1.0]))
        with np.errstate(divide="ignore"):
            result = v / 0
        assert result.to_list() == [np.inf, -np.inf]

    def test_vector_times_list_unsupported(self):
        with pytest.raises(TypeError):
            Vector([1, 2]) * [1, 2]


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestProducts:

    def test_dot(self, vectors_123_456):
        u, v = vectors_123_456
        assert u.dot(v) == 32

    def test_dot_via_operators(self, vectors_123_456):
        u, v = vectors_123_456
        assert u * v == 32
        assert u @ v == 32

    def test_dot_ignores_orientation(self):
        assert Vector([1, 2], row_vector=True).dot(Vector([3, 4])) == 11

    def test_dot_empty_is_zero(self):
        assert Vector([], dtype=int).dot(Vector([], dtype=int)) == 0

    def test_dot_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            Vector([1, 2]).dot(Vector([1]))

    def test_cross(self, vectors_123_456):
        u, v = vectors_123_456
        result = u.cross(v)
        assert result.to_list() == [-3, 6, -3]
        assert result.is_column_vector

    def test_cross_orientation_from_left(self):
        result = Vector([1, 0, 0], True).cross(Vector([0, 1, 0]))
        assert result.is_row_vector
        assert result.to_list() == [0, 0, 1]

    def test_cross_anticommutes(self, vectors_123_456):
        u, v = vectors_123_456
        assert u.cross(v) == -v.cross(u)

    @pytest.mark.parametrize("left, right", [
        ([1, 2], [3, 4]),
        ([1, 2, 3], [1, 2, 3, 4]),
        ([1, 2, 3, 4], [1, 2, 3]),
    ])
    def test_cross_requires_three(self, left, right):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            Vector(left).cross(Vector(right))
        assert exc_info.value.operation == "cross"


# ═══════════════════════════════════════════════════════════════════════
# Norms
# ═══════════════════════════════════════════════════════════════════════


class TestNorms:

    def test_norm2(self, vectors_123_456):
        u, _ = vectors_123_456
        assert u.norm2() == 14

    def test_norm_exact_int(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Vector([3, 4]).norm() == 5

    def test_norm_int_truncates(self):
        with pytest.warns(PrecisionWarning):
            assert Vector([1, 1]).norm() == 1

    @pytest.mark.parametrize("method", ["norm", "normalized", "normalize"])
    def test_truncation_warning_points_at_caller(self, method):
        v = Vector([1, 1])
        with pytest.warns(PrecisionWarning) as record:
            getattr(v, method)()
        assert record[0].filename == __file__

    def test_norm_float(self):
        assert Vector([1.0, 1.0]).norm() == pytest.approx(2 ** 0.5)

    def test_normalized(self):
        v = Vector([3.0, 4.0])
        n = v.normalized()
        assert n.to_list() == pytest.approx([0.6, 0.8])
        assert v.to_list() == [3.0, 4.0]

    def test_normalize_in_place(self):
        v = Vector([0.0, 2.0], row_vector=True)
        v.normalize()
        assert v.to_list() == [0.0, 1.0]
        assert v.is_row_vector

    def test_normalized_has_unit_norm(self, rng):
        v = Vector(rng.standard_normal(5).tolist())
        assert v.normalized().norm() == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        with pytest.raises(ZeroDivisionError):
            Vector([0.0, 0.0]).normalized()


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal_elements(self):
        assert Vector([1, 2, 3]) == Vector([1, 2, 3])

    def test_distinct_storage_equal(self):
        v = Vector([1, 2])
        assert v == v.copy()

    def test_different_elements(self):
        assert Vector([1, 2]) != Vector([1, 3])

    def test_different_length(self):
        assert Vector([1, 2]) != Vector([1, 2, 0])

    def test_different_orientation(self):
        assert Vector([1, 2]) != Vector([1, 2], row_vector=True)

    def test_across_element_types(self):
        assert Vector([1, 2]) == Vector([1.0, 2.0])

    def test_not_equal_to_list(self):
        assert Vector([1, 2]) != [1, 2]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1]))

    def test_is_close_float(self):
        a = Vector([1.0, 2.0])
        assert a.is_close(Vector([1.0, 2.0 + 1e-13]))
        assert not a.is_close(Vector([1.0, 2.001]))

    def test_is_close_custom_tolerance(self):
        assert Vector([1.0, 2.0]).is_close(Vector([1.0, 2.001]), FLOAT16)

    def test_is_close_exact_type(self):
        a = Vector([1, 2], dtype=Fraction)
        assert a.is_close(Vector([1, 2]))
        assert not a.is_close(Vector([1, 3]))

    def test_is_close_complex(self):
        assert Vector([1 + 1j]).is_close(Vector([1 + 1j + 1e-14]))

    def test_is_close_orientation(self):
        assert not Vector([1.0]).is_close(Vector([1.0], row_vector=True))


# ═══════════════════════════════════════════════════════════════════════
# Formatting and interop
# ═══════════════════════════════════════════════════════════════════════


class TestFormatting:

    def test_str_row(self):
        assert str(Vector([1, 2, 3], row_vector=True)) == "[1, 2, 3]"

    def test_str_column(self):
        assert str(Vector([1, 2, 3])) == "[[1, 2, 3]]"

    def test_repr(self):
        assert repr(Vector([-3, 6, -3])) == "Vector([-3, 6, -3], row_vector=False, dtype=int)"

    def test_to_list_is_copy(self):
        v = Vector([1, 2])
        items = v.to_list()
        items[0] = 9
        assert v[0] == 1


class TestNumpyInterop:

    def test_to_numpy_float(self):
        arr = Vector([1.0, 2.0]).to_numpy()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0])

    def test_to_numpy_numpy_dtype(self):
        arr = Vector(np.array([1, 2], dtype=np.int16)).to_numpy()
        assert arr.dtype == np.int16

    def test_to_numpy_fraction_is_object(self):
        arr = Vector([1, 2], dtype=Fraction).to_numpy()
        assert arr.dtype == object

    def test_to_numpy_explicit_dtype(self):
        arr = Vector([1, 2], dtype=Fraction).to_numpy(dtype=float)
        np.testing.assert_array_equal(arr, [1.0, 2.0])
