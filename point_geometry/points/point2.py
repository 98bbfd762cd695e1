"""
2D Point

A point in the plane, also an element of the 2D translation group: compose
adds coordinates, inverse negates them, and the exponential map is just the
constructor from a 2-vector.
"""

import numbers
import sys
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, TextIO

import numpy as np

from ..utils.vectors import to_flat_vector, format_fields


@dataclass(frozen=True)
class Point2:
    """Immutable 2D point. The default value is the group identity."""
    x: float = 0.0
    y: float = 0.0

    # Dimension of the tangent space, used to autodetect sizes
    dimension: ClassVar[int] = 2

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_vector(cls, v: Any) -> 'Point2':
        """Build a Point2 from a flat vector [x, y]."""
        x, y = to_flat_vector(v, cls.dimension, cls.__name__)
        return cls(x, y)

    @classmethod
    def Dim(cls) -> int:
        return cls.dimension

    def dim(self) -> int:
        return self.dimension

    def print(self, label: str = "", stream: Optional[TextIO] = None) -> None:
        """Write the point, prefixed by an optional label, to stream (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(f"{label}{format_fields((self.x, self.y))}\n")

    def equals(self, q: 'Point2', tol: float = 1e-9) -> bool:
        """True if both coordinates differ by less than tol."""
        if type(q) is not type(self):
            return False
        return abs(self.x - q.x) < tol and abs(self.y - q.y) < tol

    # Lie group requirements

    def compose(self, p: 'Point2') -> 'Point2':
        """Add the coordinates of two points."""
        return self + p

    def inverse(self) -> 'Point2':
        """Negate each coordinate so that compose(p, inverse(p)) == Point2()."""
        return Point2(-self.x, -self.y)

    @classmethod
    def Expmap(cls, v: Any) -> 'Point2':
        """Exponential map around identity: create a Point2 from a 2-vector."""
        return cls.from_vector(v)

    @staticmethod
    def Logmap(p: 'Point2') -> np.ndarray:
        """Log map around identity: the point as a 2-vector."""
        return p.vector()

    def vector(self) -> np.ndarray:
        """Return [x, y] as a float64 array."""
        return np.array([self.x, self.y], dtype=np.float64)

    # Operators

    def __neg__(self) -> 'Point2':
        return Point2(-self.x, -self.y)

    def __add__(self, q: 'Point2') -> 'Point2':
        if not isinstance(q, Point2):
            return NotImplemented
        return Point2(self.x + q.x, self.y + q.y)

    def __sub__(self, q: 'Point2') -> 'Point2':
        if not isinstance(q, Point2):
            return NotImplemented
        return Point2(self.x - q.x, self.y - q.y)

    def __mul__(self, s: float) -> 'Point2':
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return Point2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> 'Point2':
        # Zero divisors are not guarded: the result holds inf or nan.
        if not isinstance(s, numbers.Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return Point2.from_vector(self.vector() / np.float64(s))

    def norm(self) -> float:
        """Euclidean distance from the origin."""
        return float(np.hypot(self.x, self.y))

    def dist(self, p2: 'Point2') -> float:
        """Euclidean distance to another point."""
        return (p2 - self).norm()
