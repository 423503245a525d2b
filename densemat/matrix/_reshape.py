"""
Layout kernels: transpose and horizontal concatenation over flat storage.

Vertical concatenation needs no kernel; in row-major order it is a plain
append of the other operand's storage.
"""

from __future__ import annotations

from typing import Any


def transposed(data: list[Any], nrows: int, ncols: int) -> list[Any]:
    """Storage of the (ncols x nrows) transpose."""
    return [data[row * ncols + col] for col in range(ncols) for row in range(nrows)]


def interleaved(
    left: list[Any], left_cols: int,
    right: list[Any], right_cols: int,
    nrows: int,
) -> list[Any]:
    """Storage of [left | right]: per row, left's columns then right's."""
    out = []
    for i in range(nrows):
        out.extend(left[i * left_cols:(i + 1) * left_cols])
        out.extend(right[i * right_cols:(i + 1) * right_cols])
    return out
