"""
Numeric-identity abstraction.

Containers are generic over their element type; the only thing they need
from that type beyond arithmetic is a way to produce 0 and 1 of the right
kind.

Public API:
    zero(T)                       - additive identity of T
    one(T)                        - multiplicative identity of T
    register_scalar(T, zero, one) - add a scalar type to the registry
    is_supported(T)               - whether both identities are available
"""

from densemat.traits._identities import (
    ScalarIdentities,
    register_scalar,
    zero,
    one,
    is_supported,
    registered_types,
)

__all__ = [
    "zero",
    "one",
    "register_scalar",
    "is_supported",
    "registered_types",
    "ScalarIdentities",
]
