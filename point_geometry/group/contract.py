"""
Lie Group Element Contract

Structural interface that every point type satisfies on its own. Generic code
(optimizers, archives, the helpers in group.operations) relies only on these
members and never on a shared base class.
"""

from typing import Any, ClassVar, Optional, Protocol, TextIO, runtime_checkable

import numpy as np


REQUIRED_MEMBERS = (
    'Dim', 'dim', 'compose', 'inverse', 'Expmap', 'Logmap',
    'equals', 'print', 'vector',
)


@runtime_checkable
class LieGroupElement(Protocol):
    """Capabilities expected from a geometric value manipulated by an optimizer."""

    dimension: ClassVar[int]

    @classmethod
    def Dim(cls) -> int: ...

    def dim(self) -> int: ...

    def compose(self, other: Any) -> Any: ...

    def inverse(self) -> Any: ...

    @classmethod
    def Expmap(cls, v: Any) -> Any: ...

    @staticmethod
    def Logmap(p: Any) -> np.ndarray: ...

    def equals(self, other: Any, tol: float = 1e-9) -> bool: ...

    def print(self, label: str = "", stream: Optional[TextIO] = None) -> None: ...

    def vector(self) -> np.ndarray: ...


def is_lie_group_element(obj: Any) -> bool:
    """
    Check whether an object (or class) exposes the full group contract.

    Args:
        obj: Instance or class to inspect

    Returns:
        True if every required member is present and dimension is a positive int
    """
    if not all(callable(getattr(obj, name, None)) for name in REQUIRED_MEMBERS):
        return False

    dimension = getattr(obj, 'dimension', None)
    return isinstance(dimension, int) and dimension > 0
