"""
Point Types

Immutable 2D, 3D and stereo points, each an additive Lie group element.
"""

from .point2 import Point2
from .point3 import Point3, add, sub, Dadd1, Dadd2, Dsub1, Dsub2, cross, dot, norm
from .stereo_point2 import StereoPoint2

__all__ = [
    'Point2', 'Point3', 'StereoPoint2',
    'add', 'sub', 'Dadd1', 'Dadd2', 'Dsub1', 'Dsub2', 'cross', 'dot', 'norm',
]
