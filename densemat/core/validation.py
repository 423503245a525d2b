"""
Input validation utilities for densemat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Containers call them before
touching their storage, so a rejected call never leaves an operand
half-updated.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densemat.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row/column/element count is a non-negative integer.

    Args:
        value: Count to check
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an int, is a bool, or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_value_count(values: Sequence[Any], nrows: int, ncols: int, name: str) -> None:
    """
    Verify a flat value sequence fills an nrows x ncols matrix exactly.

    Raises:
        DimensionError: If len(values) != nrows * ncols
    """
    expected = nrows * ncols
    if len(values) != expected:
        raise DimensionError(
            f"{name}: {nrows}x{ncols} matrix needs {expected} values, got {len(values)}",
            operation=name,
            expected=expected,
            actual=len(values),
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand (or (len,) for vectors)
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch, left is {_fmt(left)}, right is {_fmt(right)}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_matching(
    expected: int,
    actual: int,
    operation: str,
    what: str,
) -> None:
    """
    Verify one extent of the right operand matches the left operand.

    Used where operations constrain a single axis: concatenation
    (rows or columns), matrix product (inner dimension), row scaling.

    Args:
        expected: Extent required by the left operand
        actual: Extent of the right operand
        operation: Operation name for error messages
        what: Description of the extent, e.g. "column count"

    Raises:
        DimensionError: If the extents differ
    """
    if expected != actual:
        raise DimensionError(
            f"{operation}: {what} mismatch, expected {expected}, got {actual}",
            operation=operation,
            expected=expected,
            actual=actual,
        )


def check_uniform_rows(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a nested row literal is non-empty and rectangular.

    Every row must supply the same number of columns. This runs before any
    storage is allocated.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (nrows, ncols)

    Raises:
        ValidationError: If there are no rows or the first row is empty
        DimensionError: If a row length differs from the first row's
    """
    if len(rows) == 0:
        raise ValidationError(f"{name}: needs at least one row")

    ncols = len(rows[0])
    if ncols == 0:
        raise ValidationError(f"{name}: rows must have at least one column")

    for i, row in enumerate(rows):
        if len(row) != ncols:
            raise DimensionError(
                f"{name}: row {i} has {len(row)} columns, expected {ncols}",
                operation=name,
                expected=ncols,
                actual=len(row),
            )
    return len(rows), ncols


def check_index(index: int, bound: int, axis: str) -> None:
    """
    Verify a single position lies in [0, bound).

    Negative positions are rejected rather than wrapped.

    Raises:
        TypeError: If index is not an integer
        IndexOutOfBoundsError: If index is outside [0, bound)
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{axis} index must be an integer, got {type(index).__name__}")
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of range for extent {bound}",
            index=int(index),
            bounds=bound,
        )


def infer_scalar_type(values: Sequence[Any], dtype: type | None, name: str) -> type:
    """
    Resolve the scalar type of a container.

    An explicit dtype always wins. Otherwise the type of the first value is
    used, falling back to float for empty input. Mixed value types are not
    an error (Python arithmetic promotes them), but they are reported with
    a warning because identities will be produced for the chosen type only.

    Args:
        values: Container values
        dtype: Explicit scalar type, or None to infer
        name: Container name for the warning message

    Returns:
        The scalar type
    """
    if dtype is not None:
        return dtype
    if len(values) == 0:
        return float

    chosen = type(values[0])
    found = {type(v) for v in values}
    if len(found) > 1:
        names = ", ".join(sorted(t.__name__ for t in found))
        warnings.warn(
            f"{name}: values mix scalar types ({names}); using {chosen.__name__} "
            f"as dtype. Pass dtype= explicitly to silence this warning.",
            stacklevel=3,
        )
    return chosen


def check_array(array: ArrayLike, ndim: int, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array of given rank.

    Rejects inputs that result in object or other non-numeric dtypes.

    Args:
        array: Input to validate
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If array has the wrong number of dimensions
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected integer or floating data"
        )

    if result.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {result.ndim}D with shape {result.shape}",
            operation=name,
            expected=ndim,
            actual=result.ndim,
        )
    return result


def _fmt(shape: tuple[int, ...]) -> str:
    return "x".join(str(s) for s in shape)
