"""
Vector: owned one-dimensional sequence of scalars.

Elementwise add/sub/scale mutate in place; dot() folds left to right from
the additive identity. A Vector can hand its storage to a 1xN or Nx1
Matrix without copying, after which it is consumed and unusable.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TYPE_CHECKING

import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from densemat.core.exceptions import VectorConsumedError
from densemat.core.tolerances import ToleranceTier, tier_for
from densemat.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_same_shape,
    infer_scalar_type,
)
from densemat.traits import zero

if TYPE_CHECKING:
    from densemat.matrix import Matrix


class Vector:
    """
    Dense vector generic over its scalar type.

    Construction:
        Vector([1, 2, 3])
        Vector.zeros(3, dtype=int)
        Vector.from_numpy(array)

    Parameters
    ----------
    values : iterable
        Elements, copied into the vector's own storage.
    dtype : type, optional
        Scalar type. Inferred from the first value when omitted.
    """

    __slots__ = ('_values', '_dtype')

    def __init__(self, values: Iterable[Any], dtype: type | None = None):
        data = list(values)
        self._dtype = infer_scalar_type(data, dtype, "Vector")
        self._values: list[Any] | None = data

    @classmethod
    def zeros(cls, count: int, dtype: type = float) -> Vector:
        """Vector of ``count`` additive identities."""
        count = check_dimension(count, "count")
        return cls._wrap([zero(dtype)] * count, dtype)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Vector:
        """Build from a 1D numeric array, keeping its numpy scalar type."""
        arr = check_array(array, 1, "array")
        return cls._wrap(list(arr), arr.dtype.type)

    @classmethod
    def _wrap(cls, data: list[Any], dtype: type) -> Vector:
        vec = cls.__new__(cls)
        vec._values = data
        vec._dtype = dtype
        return vec

    @property
    def _data(self) -> list[Any]:
        if self._values is None:
            raise VectorConsumedError(
                "Vector storage was moved into a Matrix by to_row_matrix()/to_col_matrix()"
            )
        return self._values

    @property
    def dtype(self) -> type:
        """Scalar type of the elements."""
        return self._dtype

    def size(self) -> int:
        """Number of elements."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        data = self._data
        check_index(index, len(data), "Vector")
        return data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        data = self._data
        check_index(index, len(data), "Vector")
        data[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # ------------------------------------------------------------------
    # In-place arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Vector) -> None:
        """Add ``other`` elementwise, in place."""
        data, rhs = self._data, other._data
        check_same_shape((len(data),), (len(rhs),), "Vector.add")
        for i, y in enumerate(rhs):
            data[i] = data[i] + y

    def sub(self, other: Vector) -> None:
        """Subtract ``other`` elementwise, in place."""
        data, rhs = self._data, other._data
        check_same_shape((len(data),), (len(rhs),), "Vector.sub")
        for i, y in enumerate(rhs):
            data[i] = data[i] - y

    def scale(self, k: Any) -> None:
        """Multiply every element by ``k``, in place."""
        data = self._data
        for i, x in enumerate(data):
            data[i] = x * k

    def dot(self, other: Vector) -> Any:
        """
        Inner product.

        Accumulated strictly left to right starting from the additive
        identity, so floating-point results are reproducible.
        """
        data, rhs = self._data, other._data
        check_same_shape((len(data),), (len(rhs),), "Vector.dot")
        result = zero(self._dtype)
        for x, y in zip(data, rhs):
            result = result + x * y
        return result

    # ------------------------------------------------------------------
    # Comparison and copies
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        data, rhs = self._data, other._data
        if len(data) != len(rhs):
            return False
        return all(x == y for x, y in zip(data, rhs))

    __hash__ = None

    def allclose(self, other: Vector, tier: ToleranceTier | None = None) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        The tier defaults to the one matching this vector's dtype
        (exact for integer and rational types).
        """
        data, rhs = self._data, other._data
        if len(data) != len(rhs):
            return False
        tier = tier or tier_for(self._dtype)
        return all(
            math.isclose(x, y, rel_tol=tier.rtol, abs_tol=tier.atol)
            for x, y in zip(data, rhs)
        )

    def copy(self) -> Vector:
        """Deep copy: new storage, same elements."""
        return Vector._wrap(list(self._data), self._dtype)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Vector:
        return self.copy()

    def tolist(self) -> list[Any]:
        """Elements as a new list."""
        return list(self._data)

    def to_numpy(self) -> NDArray[Any]:
        """Elements as a 1D numpy array of this vector's dtype."""
        return np.array(self._data, dtype=self._dtype)

    # ------------------------------------------------------------------
    # Consuming conversions
    # ------------------------------------------------------------------

    def to_row_matrix(self) -> Matrix:
        """Move the storage into a 1xN Matrix. The vector is consumed."""
        from densemat.matrix import Matrix

        data = self._release()
        return Matrix._wrap(1, len(data), data, self._dtype)

    def to_col_matrix(self) -> Matrix:
        """Move the storage into an Nx1 Matrix. The vector is consumed."""
        from densemat.matrix import Matrix

        data = self._release()
        return Matrix._wrap(len(data), 1, data, self._dtype)

    def _release(self) -> list[Any]:
        data = self._data
        self._values = None
        return data

    def __repr__(self) -> str:
        if self._values is None:
            return "Vector(<consumed>)"
        return f"Vector({self._values!r}, dtype={self._dtype.__name__})"
