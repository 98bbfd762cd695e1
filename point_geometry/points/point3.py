"""
3D Point

A point in space and an element of the 3D translation group, with the usual
3-vector algebra (cross, dot, norm) and constant Jacobians for add/sub.
"""

import math
import numbers
import sys
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, TextIO

import numpy as np

from ..group.jacobians import identity_jacobian, negative_identity_jacobian
from ..utils.vectors import to_flat_vector, format_fields


@dataclass(frozen=True)
class Point3:
    """Immutable 3D point. The default value is the group identity."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Dimension of the tangent space, used to autodetect sizes
    dimension: ClassVar[int] = 3

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    @classmethod
    def from_vector(cls, v: Any) -> 'Point3':
        """Build a Point3 from a flat vector [x, y, z]."""
        x, y, z = to_flat_vector(v, cls.dimension, cls.__name__)
        return cls(x, y, z)

    def print(self, label: str = "", stream: Optional[TextIO] = None) -> None:
        """Write the point, prefixed by an optional label, to stream (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(f"{label}{format_fields((self.x, self.y, self.z))}\n")

    def equals(self, q: 'Point3', tol: float = 1e-9) -> bool:
        """True if every coordinate differs by less than tol."""
        if type(q) is not type(self):
            return False
        return (abs(self.x - q.x) < tol and
                abs(self.y - q.y) < tol and
                abs(self.z - q.z) < tol)

    @classmethod
    def Dim(cls) -> int:
        return cls.dimension

    # Lie group requirements

    def dim(self) -> int:
        return self.dimension

    def inverse(self) -> 'Point3':
        """Negate the coordinates so that compose(p, inverse(p)) == Point3()."""
        return Point3(-self.x, -self.y, -self.z)

    def compose(self, p: 'Point3') -> 'Point3':
        """Add the coordinates of two points."""
        return self + p

    @classmethod
    def Expmap(cls, v: Any) -> 'Point3':
        """Exponential map at identity: create a Point3 from x, y, z."""
        return cls.from_vector(v)

    @staticmethod
    def Logmap(p: 'Point3') -> np.ndarray:
        """Log map at identity: the x, y, z of the point."""
        return p.vector()

    def vector(self) -> np.ndarray:
        """Return [x, y, z] as a float64 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # Operators

    def __neg__(self) -> 'Point3':
        return Point3(-self.x, -self.y, -self.z)

    def __add__(self, q: 'Point3') -> 'Point3':
        if not isinstance(q, Point3):
            return NotImplemented
        return Point3(self.x + q.x, self.y + q.y, self.z + q.z)

    def __sub__(self, q: 'Point3') -> 'Point3':
        if not isinstance(q, Point3):
            return NotImplemented
        return Point3(self.x - q.x, self.y - q.y, self.z - q.z)

    def __mul__(self, s: float) -> 'Point3':
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Point3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> 'Point3':
        # Zero divisors are not guarded: the result holds inf or nan.
        if not isinstance(s, numbers.Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return Point3.from_vector(self.vector() / np.float64(s))

    def norm(self) -> float:
        """Euclidean distance from the origin."""
        return norm(self)

    def dist(self, p2: 'Point3') -> float:
        """Euclidean distance to another point."""
        return norm(p2 - self)


def add(p: Point3, q: Point3) -> Point3:
    """add(p, q) is the same as p + q."""
    return p + q


def Dadd1(p: Point3, q: Point3) -> np.ndarray:
    return identity_jacobian(3)


def Dadd2(p: Point3, q: Point3) -> np.ndarray:
    return identity_jacobian(3)


def sub(p: Point3, q: Point3) -> Point3:
    """sub(p, q) is the same as p - q."""
    return p - q


def Dsub1(p: Point3, q: Point3) -> np.ndarray:
    return identity_jacobian(3)


def Dsub2(p: Point3, q: Point3) -> np.ndarray:
    return negative_identity_jacobian(3)


def cross(p: Point3, q: Point3) -> Point3:
    """Cross product p x q."""
    return Point3(p.y * q.z - p.z * q.y,
                  p.z * q.x - p.x * q.z,
                  p.x * q.y - p.y * q.x)


def dot(p: Point3, q: Point3) -> float:
    """Inner product of p and q."""
    return p.x * q.x + p.y * q.y + p.z * q.z


def norm(p: Point3) -> float:
    """Euclidean norm of p treated as a vector from the origin."""
    return math.hypot(p.x, p.y, p.z)
