"""
Exception hierarchy for densemat.

All exceptions inherit from DensematError to allow catching any
library-specific error. Contract violations (shape mismatch, bad index,
unknown scalar type) are reported through these types; no operation
mutates its operands before its preconditions have been checked.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DensematError(Exception):
    """Base exception for all densemat errors."""
    pass


class ValidationError(DensematError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (negative
    dimensions, empty literals, non-numeric arrays).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible.

    Raised when a value count does not match the requested shape, or when
    two operands of add/sub/hadamard/concatenation/multiplication have
    shapes the operation cannot combine.

    Attributes:
        operation: Name of the operation that rejected its operands
        expected: The shape or length the operation required
        actual: The shape or length it was given
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class UnsupportedScalarError(ValidationError):
    """
    No additive or multiplicative identity is known for a scalar type.

    Attributes:
        scalar_type: The type that was looked up
    """

    def __init__(self, message: str, scalar_type: type | None = None):
        super().__init__(message)
        self.scalar_type = scalar_type


class IndexOutOfBoundsError(DensematError, IndexError):
    """
    Element index outside the container's bounds.

    Also an IndexError, so code written against plain sequences keeps
    working.

    Attributes:
        index: The offending index (int for vectors, pair for matrices)
        bounds: The container extent (length or shape)
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        bounds: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class VectorConsumedError(DensematError):
    """
    A Vector was used after its storage was handed to a Matrix.

    Raised by every Vector operation once to_row_matrix() or
    to_col_matrix() has been called on it.
    """
    pass
