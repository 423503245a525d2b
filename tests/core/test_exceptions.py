"""
Tests for densemat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DensematError)
    - Diagnostic attributes on DimensionError, IndexOutOfBoundsError,
      UnsupportedScalarError
    - IndexOutOfBoundsError is also a builtin IndexError
    - Default attribute values (None for optional attributes)
"""

import pytest

from densemat.core.exceptions import (
    DensematError,
    DimensionError,
    IndexOutOfBoundsError,
    UnsupportedScalarError,
    ValidationError,
    VectorConsumedError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DensematError."""

    def test_validation_error_is_densemat_error(self):
        with pytest.raises(DensematError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_unsupported_scalar_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise UnsupportedScalarError("no identity")

    def test_index_error_is_densemat_error(self):
        with pytest.raises(DensematError):
            raise IndexOutOfBoundsError("out of range")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfBoundsError("out of range")

    def test_consumed_is_densemat_error(self):
        with pytest.raises(DensematError):
            raise VectorConsumedError("moved")

    def test_consumed_is_not_validation_error(self):
        """Using a consumed vector is a lifecycle error, not bad input."""
        assert not isinstance(VectorConsumedError("moved"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries operation and expected/actual extents."""

    def test_all_attributes(self):
        err = DimensionError(
            "Matrix.add: shape mismatch",
            operation="Matrix.add",
            expected=(2, 2),
            actual=(2, 3),
        )
        assert str(err) == "Matrix.add: shape mismatch"
        assert err.operation == "Matrix.add"
        assert err.expected == (2, 2)
        assert err.actual == (2, 3)

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.operation is None
        assert err.expected is None
        assert err.actual is None


class TestIndexOutOfBoundsError:

    def test_all_attributes(self):
        err = IndexOutOfBoundsError("row index 5 out of range", index=5, bounds=3)
        assert err.index == 5
        assert err.bounds == 3

    def test_defaults_are_none(self):
        err = IndexOutOfBoundsError("out of range")
        assert err.index is None
        assert err.bounds is None


class TestUnsupportedScalarError:

    def test_carries_type(self):
        err = UnsupportedScalarError("no identity for str", scalar_type=str)
        assert err.scalar_type is str

    def test_catchable_with_attributes(self):
        with pytest.raises(UnsupportedScalarError) as exc_info:
            raise UnsupportedScalarError("nope", scalar_type=complex)
        assert exc_info.value.scalar_type is complex
