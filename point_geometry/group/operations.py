"""
Generic Group Operations

Free functions over any type satisfying the LieGroupElement contract. The
derivative-returning variants only build the Jacobians the caller asks for.
"""

from typing import Any, Type, TypeVar

import numpy as np

from .jacobians import Jacobians, identity_jacobian, negative_identity_jacobian

T = TypeVar('T')


def _check_same_type(p1: Any, p2: Any) -> None:
    if type(p1) is not type(p2):
        raise ValueError(
            f"Operands must have the same type, got {type(p1).__name__} "
            f"and {type(p2).__name__}"
        )


def identity(cls: Type[T]) -> T:
    """Return the group identity of a point type (its default value)."""
    return cls()


def compose(p1: T, p2: T) -> T:
    """Group operation: field-wise addition of two points."""
    _check_same_type(p1, p2)
    return p1.compose(p2)


def inverse(p: T) -> T:
    """Group inverse: field-wise negation."""
    return p.inverse()


def between(p1: T, p2: T) -> T:
    """Relative element taking p1 to p2, i.e. p2 - p1."""
    _check_same_type(p1, p2)
    return p1.inverse().compose(p2)


def expmap(cls: Type[T], v: Any) -> T:
    """Build a point of type cls from its tangent vector."""
    return cls.Expmap(v)


def logmap(p: Any) -> np.ndarray:
    """Return the tangent vector of a point."""
    return type(p).Logmap(p)


def compose_with_jacobians(p1: T, p2: T, H1: bool = True, H2: bool = True) -> Jacobians:
    """
    Compose two points and optionally return the derivatives of the result.

    Args:
        p1: First operand
        p2: Second operand
        H1: Whether to compute the derivative with respect to p1
        H2: Whether to compute the derivative with respect to p2

    Returns:
        Jacobians(value, H1, H2) where unrequested matrices are None
    """
    value = compose(p1, p2)
    dimension = p1.dim()
    return Jacobians(
        value,
        identity_jacobian(dimension) if H1 else None,
        identity_jacobian(dimension) if H2 else None,
    )


def between_with_jacobians(p1: T, p2: T, H1: bool = True, H2: bool = True) -> Jacobians:
    """
    Compute between(p1, p2) and optionally its derivatives.

    Args:
        p1: Reference point
        p2: Target point
        H1: Whether to compute the derivative with respect to p1
        H2: Whether to compute the derivative with respect to p2

    Returns:
        Jacobians(value, H1, H2) where unrequested matrices are None
    """
    value = between(p1, p2)
    dimension = p1.dim()
    return Jacobians(
        value,
        negative_identity_jacobian(dimension) if H1 else None,
        identity_jacobian(dimension) if H2 else None,
    )


def Dcompose1(p1: Any, p2: Any) -> np.ndarray:
    """Derivative of compose(p1, p2) with respect to p1."""
    return identity_jacobian(p1.dim())


def Dcompose2(p1: Any, p2: Any) -> np.ndarray:
    """Derivative of compose(p1, p2) with respect to p2."""
    return identity_jacobian(p2.dim())


def Dbetween1(p1: Any, p2: Any) -> np.ndarray:
    """Derivative of between(p1, p2) with respect to p1."""
    return negative_identity_jacobian(p1.dim())


def Dbetween2(p1: Any, p2: Any) -> np.ndarray:
    """Derivative of between(p1, p2) with respect to p2."""
    return identity_jacobian(p2.dim())
