"""
Product kernels over flat row-major storage.

Pure functions: they take flat lists plus shapes and return new flat
lists. Shape checks are the caller's job.
"""

from __future__ import annotations

from typing import Any


def matmul(
    a: list[Any], a_rows: int, a_cols: int,
    b: list[Any], b_cols: int,
    zero: Any,
) -> list[Any]:
    """
    Row-major product of an (a_rows x a_cols) and an (a_cols x b_cols) matrix.

    Each output cell is a left-to-right fold over k starting at ``zero``.
    """
    out = []
    for i in range(a_rows):
        row = i * a_cols
        for j in range(b_cols):
            acc = zero
            for k in range(a_cols):
                acc = acc + a[row + k] * b[k * b_cols + j]
            out.append(acc)
    return out


def kronecker(
    a: list[Any], a_rows: int, a_cols: int,
    b: list[Any], b_rows: int, b_cols: int,
    zero: Any,
) -> list[Any]:
    """
    Kronecker product.

    Cell (sr, sc) of ``a`` times cell (or_, oc) of ``b`` lands at
    (sr*b_rows + or_, sc*b_cols + oc). The buffer starts filled with
    ``zero`` and each of its cells is written exactly once.
    """
    ncols = a_cols * b_cols
    out = [zero] * (a_rows * b_rows * ncols)
    for sr in range(a_rows):
        for sc in range(a_cols):
            x = a[sr * a_cols + sc]
            for or_ in range(b_rows):
                base = (sr * b_rows + or_) * ncols + sc * b_cols
                src = or_ * b_cols
                for oc in range(b_cols):
                    out[base + oc] = x * b[src + oc]
    return out


def scaled_rows(data: list[Any], ncols: int, factors: list[Any]) -> None:
    """Multiply row i of ``data`` by ``factors[i]`` in place."""
    for i, f in enumerate(factors):
        start = i * ncols
        for p in range(start, start + ncols):
            data[p] = data[p] * f
