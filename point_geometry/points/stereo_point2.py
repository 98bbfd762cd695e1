"""
Stereo Point

A rectified stereo observation: horizontal pixel coordinates in the left and
right images and a shared vertical coordinate. Composes like a 3-vector.
"""

import numbers
import sys
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, TextIO

import numpy as np

from .point2 import Point2
from ..utils.vectors import to_flat_vector, format_fields


@dataclass(frozen=True)
class StereoPoint2:
    """Immutable stereo point (uL, uR, v). v is the same in both rectified images."""
    uL: float = 0.0
    uR: float = 0.0
    v: float = 0.0

    dimension: ClassVar[int] = 3

    def __post_init__(self):
        object.__setattr__(self, 'uL', float(self.uL))
        object.__setattr__(self, 'uR', float(self.uR))
        object.__setattr__(self, 'v', float(self.v))

    @classmethod
    def from_vector(cls, d: Any) -> 'StereoPoint2':
        uL, uR, v = to_flat_vector(d, cls.dimension, cls.__name__)
        return cls(uL, uR, v)

    def print(self, label: str = "", stream: Optional[TextIO] = None) -> None:
        if stream is None:
            stream = sys.stdout
        stream.write(f"{label}{format_fields((self.uL, self.uR, self.v))}\n")

    def equals(self, q: 'StereoPoint2', tol: float = 1e-9) -> bool:
        if type(q) is not type(self):
            return False
        return (abs(self.uL - q.uL) < tol and
                abs(self.uR - q.uR) < tol and
                abs(self.v - q.v) < tol)

    @classmethod
    def Dim(cls) -> int:
        return cls.dimension

    def dim(self) -> int:
        return self.dimension

    def vector(self) -> np.ndarray:
        return np.array([self.uL, self.uR, self.v], dtype=np.float64)

    def __neg__(self) -> 'StereoPoint2':
        return StereoPoint2(-self.uL, -self.uR, -self.v)

    def __add__(self, b: 'StereoPoint2') -> 'StereoPoint2':
        if not isinstance(b, StereoPoint2):
            return NotImplemented
        return StereoPoint2(self.uL + b.uL, self.uR + b.uR, self.v + b.v)

    def __sub__(self, b: 'StereoPoint2') -> 'StereoPoint2':
        if not isinstance(b, StereoPoint2):
            return NotImplemented
        return StereoPoint2(self.uL - b.uL, self.uR - b.uR, self.v - b.v)

    def __mul__(self, s: float) -> 'StereoPoint2':
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return StereoPoint2(self.uL * s, self.uR * s, self.v * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> 'StereoPoint2':
        if not isinstance(s, numbers.Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return StereoPoint2.from_vector(self.vector() / np.float64(s))

    def point2(self) -> Point2:
        """Pixel location in the left image; uR is dropped."""
        return Point2(self.uL, self.v)

    def compose(self, p1: 'StereoPoint2') -> 'StereoPoint2':
        return self + p1

    def inverse(self) -> 'StereoPoint2':
        return StereoPoint2() - self

    @classmethod
    def Expmap(cls, d: Any) -> 'StereoPoint2':
        """Exponential map around identity: create a StereoPoint2 from a 3-vector."""
        return cls.from_vector(d)

    @staticmethod
    def Logmap(p: 'StereoPoint2') -> np.ndarray:
        return p.vector()
