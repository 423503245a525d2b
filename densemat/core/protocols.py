"""
Core protocols for densemat.

Scalar types participate in the containers by supplying an additive and a
multiplicative identity. We use Protocol (structural typing) rather than
ABC (nominal typing), so a user type only needs the two class-level
methods; built-in and numpy types are covered by the registry in
densemat.traits instead.

Design Principles:
    - One method per identity element
    - Implemented once per concrete scalar type
    - No reliance on implicit numeric literal coercion
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class Zero(Protocol):
    """
    Capability: the type has an additive identity.

    Implementations expose ``zero`` as a classmethod or staticmethod so the
    identity can be produced from the type alone:

        >>> class Mod7:
        ...     @classmethod
        ...     def zero(cls): return cls(0)
    """

    def zero(self):
        """Return the additive identity of this scalar type."""
        ...


@runtime_checkable
class One(Protocol):
    """Capability: the type has a multiplicative identity."""

    def one(self):
        """Return the multiplicative identity of this scalar type."""
        ...


@runtime_checkable
class Scalar(Zero, One, Protocol):
    """Both identities. The minimum a user scalar type must provide."""
    ...
