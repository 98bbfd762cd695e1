"""
Point Geometry

Immutable 2D, 3D and stereo point types that are also elements of additive
Lie groups, for use by estimation back-ends such as bundle adjustment or SLAM.

This package implements:
- Point2, Point3 and StereoPoint2 value types with identity, compose, inverse,
  Expmap/Logmap, vectorization and tolerance-based equality
- Generic group operations with exact constant Jacobians
- 3-vector algebra (cross, dot, norm) for Point3
- Field-record serialization and a versioned YAML point archive
"""

__version__ = "1.0.0"

from .points import (
    Point2, Point3, StereoPoint2,
    add, sub, Dadd1, Dadd2, Dsub1, Dsub2, cross, dot, norm,
)
from .group import (
    LieGroupElement, is_lie_group_element, Jacobians,
    identity, compose, inverse, between, expmap, logmap,
    compose_with_jacobians, between_with_jacobians,
    Dcompose1, Dcompose2, Dbetween1, Dbetween2,
)
from .serialization import to_record, from_record, PointArchive
from .utils import ConfigManager, assert_equal

__all__ = [
    # Points
    'Point2', 'Point3', 'StereoPoint2',
    'add', 'sub', 'Dadd1', 'Dadd2', 'Dsub1', 'Dsub2', 'cross', 'dot', 'norm',
    # Group contract
    'LieGroupElement', 'is_lie_group_element', 'Jacobians',
    'identity', 'compose', 'inverse', 'between', 'expmap', 'logmap',
    'compose_with_jacobians', 'between_with_jacobians',
    'Dcompose1', 'Dcompose2', 'Dbetween1', 'Dbetween2',
    # Serialization
    'to_record', 'from_record', 'PointArchive',
    # Utilities
    'ConfigManager', 'assert_equal',
]
