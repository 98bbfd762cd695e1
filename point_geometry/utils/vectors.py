"""
Vector Helpers

Conversions between flat numeric vectors and point fields.
"""

from typing import Any, Iterable

import numpy as np


def to_flat_vector(v: Any, dimension: int, type_name: str) -> np.ndarray:
    """
    Convert a sequence or array into a flat float64 vector of fixed length.

    Column and row vectors are flattened. The length must match exactly;
    nothing is truncated or padded.

    Args:
        v: Sequence or numpy array of numbers
        dimension: Required number of elements
        type_name: Name of the type being built, used in error messages

    Returns:
        1-D float64 array of shape (dimension,)
    """
    vector = np.asarray(v, dtype=np.float64).reshape(-1)
    if vector.size != dimension:
        raise ValueError(
            f"{type_name} expected vector of length {dimension}, got {vector.size}"
        )
    return vector


def format_fields(values: Iterable[float], precision: int = 6) -> str:
    """Render field values as '(a, b, c)' with the given significant digits."""
    return "(" + ", ".join(f"{value:.{precision}g}" for value in values) + ")"
