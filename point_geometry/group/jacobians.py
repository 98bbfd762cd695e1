"""
Jacobians of Translation-Group Operations

Composition in an additive group is vector addition, so every derivative is an
exact identity or negative-identity matrix, independent of the operands.
"""

from typing import Any, NamedTuple, Optional

import numpy as np


class Jacobians(NamedTuple):
    """Result of a derivative-returning operation.

    H1 and H2 are None unless the caller asked for them.
    """
    value: Any
    H1: Optional[np.ndarray] = None
    H2: Optional[np.ndarray] = None


def identity_jacobian(dimension: int) -> np.ndarray:
    """Return the dimension x dimension identity matrix."""
    return np.eye(dimension, dtype=np.float64)


def negative_identity_jacobian(dimension: int) -> np.ndarray:
    """Return the dimension x dimension negative identity matrix."""
    return -np.eye(dimension, dtype=np.float64)
