"""
Literal construction of matrices.

    >>> matrix([1, 2, 3],
    ...        [4, 5, 6])
    Matrix(2x3, dtype=int, [[1, 2, 3], [4, 5, 6]])
"""

from __future__ import annotations

from typing import Any, Sequence

from densemat.matrix.matrix import Matrix


def matrix(*rows: Sequence[Any], dtype: type | None = None) -> Matrix:
    """
    Build a Matrix from its rows, written out one argument per row.

    Parameters
    ----------
    *rows : sequences
        Row values. All rows must have the same length.
    dtype : type, optional
        Scalar type. Inferred from the first value when omitted.

    Raises
    ------
    DimensionError
        If the rows have differing lengths.
    ValidationError
        If no rows are given or the rows are empty.
    """
    return Matrix.from_rows(rows, dtype=dtype)
