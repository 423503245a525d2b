"""
Dense row-major matrices.

Public API:
    Matrix       - the container
    matrix(...)  - literal builder, one argument per row
"""

from densemat.matrix.matrix import Matrix
from densemat.matrix.builder import matrix

__all__ = [
    "Matrix",
    "matrix",
]
