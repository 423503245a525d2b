"""
Matrix: owned two-dimensional row-major container generic over its scalar type.

In-place operations (add, sub, scale, hadamard, mul_vector, transpose,
vercat, horcat) mutate the receiver; operators (+, -, *, @) and
kronecker() return a new Matrix. Every precondition is checked before
storage is touched, so a rejected call leaves both operands unchanged.
The storage length always equals nrows * ncols.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densemat.core.tolerances import ToleranceTier, tier_for
from densemat.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_matching,
    check_same_shape,
    check_uniform_rows,
    check_value_count,
    infer_scalar_type,
)
from densemat.matrix import _products, _reshape
from densemat.traits import one, zero
from densemat.vector import Vector


class Matrix:
    """
    Dense row-major matrix.

    Element (row, col) is stored at flat offset ``row * ncols + col``.

    Construction:
        Matrix(2, 2, [1, 2, 3, 4])
        Matrix.zeros(3, 3, dtype=int)
        Matrix.identity(3)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_numpy(array)

    Parameters
    ----------
    nrows, ncols : int
        Shape. Zero is allowed; negative is not.
    values : iterable
        Exactly ``nrows * ncols`` elements in row-major order. Copied.
    dtype : type, optional
        Scalar type used to produce identities. Inferred from the first
        value when omitted.
    """

    __slots__ = ('_nrows', '_ncols', '_data', '_dtype')

    def __init__(
        self,
        nrows: int,
        ncols: int,
        values: Iterable[Any],
        dtype: type | None = None,
    ):
        nrows = check_dimension(nrows, "nrows")
        ncols = check_dimension(ncols, "ncols")
        data = list(values)
        check_value_count(data, nrows, ncols, "Matrix")
        self._nrows = nrows
        self._ncols = ncols
        self._data = data
        self._dtype = infer_scalar_type(data, dtype, "Matrix")

    @classmethod
    def zeros(cls, nrows: int, ncols: int, dtype: type = float) -> Matrix:
        """Matrix filled with the additive identity of ``dtype``."""
        nrows = check_dimension(nrows, "nrows")
        ncols = check_dimension(ncols, "ncols")
        return cls._wrap(nrows, ncols, [zero(dtype)] * (nrows * ncols), dtype)

    @classmethod
    def identity(cls, n: int, dtype: type = float) -> Matrix:
        """
        Square identity matrix.

        Flat positions divisible by n + 1 are exactly the diagonal.
        """
        n = check_dimension(n, "n")
        z, o = zero(dtype), one(dtype)
        data = [o if i % (n + 1) == 0 else z for i in range(n * n)]
        return cls._wrap(n, n, data, dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], dtype: type | None = None) -> Matrix:
        """
        Build from a nested row literal.

        Every row must have the same number of columns; this is checked
        before any storage is allocated.
        """
        nrows, ncols = check_uniform_rows(rows, "Matrix.from_rows")
        data = [x for row in rows for x in row]
        return cls._wrap(nrows, ncols, data, infer_scalar_type(data, dtype, "Matrix"))

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """Build from a 2D numeric array, keeping its numpy scalar type."""
        arr = check_array(array, 2, "array")
        nrows, ncols = arr.shape
        return cls._wrap(nrows, ncols, list(arr.ravel()), arr.dtype.type)

    @classmethod
    def _wrap(cls, nrows: int, ncols: int, data: list[Any], dtype: type) -> Matrix:
        """Adopt ``data`` as storage without copying or validating."""
        mat = cls.__new__(cls)
        mat._nrows = nrows
        mat._ncols = ncols
        mat._data = data
        mat._dtype = dtype
        return mat

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def nrows(self) -> int:
        """Number of rows."""
        return self._nrows

    @property
    def ncols(self) -> int:
        """Number of columns."""
        return self._ncols

    @property
    def shape(self) -> tuple[int, int]:
        """(nrows, ncols)."""
        return (self._nrows, self._ncols)

    @property
    def dtype(self) -> type:
        """Scalar type of the elements."""
        return self._dtype

    def is_square(self) -> bool:
        return self._nrows == self._ncols

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, col) pair, got {key!r}")
        row, col = key
        check_index(row, self._nrows, "row")
        check_index(col, self._ncols, "column")
        return row * self._ncols + col

    def __getitem__(self, key: tuple[int, int]) -> Any:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        self._data[self._offset(key)] = value

    def __iter__(self) -> Iterator[Any]:
        """Elements in row-major order."""
        return iter(self._data)

    # ------------------------------------------------------------------
    # In-place arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> None:
        """Add ``other`` elementwise, in place."""
        check_same_shape(self.shape, other.shape, "Matrix.add")
        data = self._data
        for i, y in enumerate(other._data):
            data[i] = data[i] + y

    def sub(self, other: Matrix) -> None:
        """Subtract ``other`` elementwise, in place."""
        check_same_shape(self.shape, other.shape, "Matrix.sub")
        data = self._data
        for i, y in enumerate(other._data):
            data[i] = data[i] - y

    def scale(self, k: Any) -> None:
        """Multiply every element by ``k``, in place."""
        data = self._data
        for i, x in enumerate(data):
            data[i] = x * k

    def hadamard(self, other: Matrix) -> None:
        """Elementwise (Hadamard) product, in place."""
        check_same_shape(self.shape, other.shape, "Matrix.hadamard")
        data = self._data
        for i, y in enumerate(other._data):
            data[i] = data[i] * y

    def mul_vector(self, vector: Vector) -> None:
        """
        Scale row i by ``vector[i]``, in place.

        This is a per-row broadcast, not a matrix-vector product: the
        shape is unchanged and the vector length must equal nrows.
        """
        factors = vector.tolist()
        check_matching(self._nrows, len(factors), "Matrix.mul_vector", "row count vs vector length")
        _products.scaled_rows(self._data, self._ncols, factors)

    # ------------------------------------------------------------------
    # Layout changes (in place)
    # ------------------------------------------------------------------

    def transpose(self) -> None:
        """Transpose in place; dimensions swap."""
        self._data = _reshape.transposed(self._data, self._nrows, self._ncols)
        self._nrows, self._ncols = self._ncols, self._nrows

    def vercat(self, other: Matrix) -> None:
        """Append ``other``'s rows below this matrix's rows."""
        check_matching(self._ncols, other._ncols, "Matrix.vercat", "column count")
        self._data.extend(other._data)
        self._nrows += other._nrows

    def horcat(self, other: Matrix) -> None:
        """Append ``other``'s columns to the right of this matrix's columns."""
        check_matching(self._nrows, other._nrows, "Matrix.horcat", "row count")
        self._data = _reshape.interleaved(
            self._data, self._ncols, other._data, other._ncols, self._nrows
        )
        self._ncols += other._ncols

    # ------------------------------------------------------------------
    # Products returning a new matrix
    # ------------------------------------------------------------------

    def kronecker(self, other: Matrix) -> Matrix:
        """Kronecker product, shape (r1*r2, c1*c2)."""
        data = _products.kronecker(
            self._data, self._nrows, self._ncols,
            other._data, other._nrows, other._ncols,
            zero(self._dtype),
        )
        return Matrix._wrap(
            self._nrows * other._nrows, self._ncols * other._ncols, data, self._dtype
        )

    def matmul(self, other: Matrix) -> Matrix:
        """Matrix product ``self @ other``."""
        check_matching(self._ncols, other._nrows, "Matrix.matmul", "inner dimension")
        data = _products.matmul(
            self._data, self._nrows, self._ncols,
            other._data, other._ncols,
            zero(self._dtype),
        )
        return Matrix._wrap(self._nrows, other._ncols, data, self._dtype)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __mul__(self, other: Any) -> Matrix:
        # Matrix * Matrix is the matrix product; Matrix * scalar scales.
        # scalar * Matrix is deliberately left undefined.
        if isinstance(other, Matrix):
            return self.matmul(other)
        if isinstance(other, Vector):
            return NotImplemented
        return Matrix._wrap(
            self._nrows, self._ncols, [x * other for x in self._data], self._dtype
        )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "Matrix.__add__")
        data = [x + y for x, y in zip(self._data, other._data)]
        return Matrix._wrap(self._nrows, self._ncols, data, self._dtype)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, "Matrix.__sub__")
        data = [x - y for x, y in zip(self._data, other._data)]
        return Matrix._wrap(self._nrows, self._ncols, data, self._dtype)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub(other)
        return self

    # ------------------------------------------------------------------
    # Comparison, copies, conversion
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(x == y for x, y in zip(self._data, other._data))

    __hash__ = None

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        Shapes must match. The tier defaults to the one matching this
        matrix's dtype (exact for integer and rational types).
        """
        if self.shape != other.shape:
            return False
        tier = tier or tier_for(self._dtype)
        return all(
            math.isclose(x, y, rel_tol=tier.rtol, abs_tol=tier.atol)
            for x, y in zip(self._data, other._data)
        )

    def copy(self) -> Matrix:
        """Deep copy: new storage, same shape, each element copied."""
        return Matrix._wrap(self._nrows, self._ncols, list(self._data), self._dtype)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def tolist(self) -> list[list[Any]]:
        """Nested list of rows."""
        n = self._ncols
        return [self._data[i * n:(i + 1) * n] for i in range(self._nrows)]

    def to_numpy(self) -> NDArray[Any]:
        """Elements as a 2D numpy array of this matrix's dtype."""
        return np.array(self._data, dtype=self._dtype).reshape(self._nrows, self._ncols)

    def __repr__(self) -> str:
        return (
            f"Matrix({self._nrows}x{self._ncols}, dtype={self._dtype.__name__}, "
            f"{self.tolist()!r})"
        )
