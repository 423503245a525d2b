"""
Dense vectors.

Public API:
    Vector - the container
"""

from densemat.vector.vector import Vector

__all__ = [
    "Vector",
]
