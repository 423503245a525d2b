"""
Registry of additive and multiplicative identities per scalar type.

Built-in entries cover Python int/float, fractions.Fraction, and the
fixed-width numpy integer and floating types. Other types either register
here or implement the Zero/One protocols themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable

import numpy as np

from densemat.core.exceptions import UnsupportedScalarError
from densemat.core.protocols import One, Zero


@dataclass(frozen=True)
class ScalarIdentities:
    """Identity factories for one scalar type."""
    scalar_type: type
    zero: Callable[[], Any]
    one: Callable[[], Any]


_REGISTRY: dict[type, ScalarIdentities] = {}


def register_scalar(
    scalar_type: type,
    *,
    zero: Callable[[], Any],
    one: Callable[[], Any],
) -> ScalarIdentities:
    """
    Register the identities of a scalar type.

    Parameters
    ----------
    scalar_type : type
        The element type containers will be parameterized over.
    zero, one : callable
        Zero-argument factories returning the additive and multiplicative
        identity. Re-registering a type replaces its entry.
    """
    if not isinstance(scalar_type, type):
        raise TypeError(f"scalar_type must be a type, got {scalar_type!r}")
    entry = ScalarIdentities(scalar_type=scalar_type, zero=zero, one=one)
    _REGISTRY[scalar_type] = entry
    return entry


def zero(scalar_type: type) -> Any:
    """Additive identity of ``scalar_type``."""
    entry = _REGISTRY.get(scalar_type)
    if entry is not None:
        return entry.zero()
    if isinstance(scalar_type, type) and issubclass(scalar_type, Zero):
        return scalar_type.zero()
    raise UnsupportedScalarError(
        f"no additive identity known for {_name(scalar_type)}; "
        f"register it with register_scalar() or implement zero()",
        scalar_type=scalar_type,
    )


def one(scalar_type: type) -> Any:
    """Multiplicative identity of ``scalar_type``."""
    entry = _REGISTRY.get(scalar_type)
    if entry is not None:
        return entry.one()
    if isinstance(scalar_type, type) and issubclass(scalar_type, One):
        return scalar_type.one()
    raise UnsupportedScalarError(
        f"no multiplicative identity known for {_name(scalar_type)}; "
        f"register it with register_scalar() or implement one()",
        scalar_type=scalar_type,
    )


def is_supported(scalar_type: type) -> bool:
    """Whether both identities can be produced for ``scalar_type``."""
    if scalar_type in _REGISTRY:
        return True
    return (
        isinstance(scalar_type, type)
        and issubclass(scalar_type, Zero)
        and issubclass(scalar_type, One)
    )


def registered_types() -> tuple[type, ...]:
    """Types with a registry entry, in registration order."""
    return tuple(_REGISTRY)


def _name(scalar_type: Any) -> str:
    return getattr(scalar_type, '__name__', repr(scalar_type))


def _register_builtins() -> None:
    register_scalar(int, zero=lambda: 0, one=lambda: 1)
    register_scalar(float, zero=lambda: 0.0, one=lambda: 1.0)
    register_scalar(Fraction, zero=lambda: Fraction(0), one=lambda: Fraction(1))

    for np_type in (
        np.int8, np.int16, np.int32, np.int64,
        np.uint8, np.uint16, np.uint32, np.uint64,
    ):
        register_scalar(
            np_type,
            zero=lambda t=np_type: t(0),
            one=lambda t=np_type: t(1),
        )

    for np_type in (np.float32, np.float64):
        register_scalar(
            np_type,
            zero=lambda t=np_type: t(0.0),
            one=lambda t=np_type: t(1.0),
        )


_register_builtins()
