"""
Group-Algebra Contract

Structural Lie group interface, generic operations, and constant Jacobians.
"""

from .contract import LieGroupElement, is_lie_group_element
from .jacobians import Jacobians, identity_jacobian, negative_identity_jacobian
from .operations import (
    identity, compose, inverse, between, expmap, logmap,
    compose_with_jacobians, between_with_jacobians,
    Dcompose1, Dcompose2, Dbetween1, Dbetween2,
)

__all__ = [
    'LieGroupElement', 'is_lie_group_element',
    'Jacobians', 'identity_jacobian', 'negative_identity_jacobian',
    'identity', 'compose', 'inverse', 'between', 'expmap', 'logmap',
    'compose_with_jacobians', 'between_with_jacobians',
    'Dcompose1', 'Dcompose2', 'Dbetween1', 'Dbetween2',
]
