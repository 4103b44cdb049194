"""
Capability contracts consumed across affinekit.

- Transformable: values a Transformation can act on
- HasOrigin: values whose local origin can be relocated

Both contracts are also exposed as generic functions (``transform`` and
``move_origin_to``) so that types outside our control, such as builtin
containers, can be registered explicitly instead of subclassing.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class Transformable(ABC):
    """
    Contract for things that can be transformed.

    Implementations must be structure preserving:
        x.transform(t1 @ t2) == x.transform(t2).transform(t1)
        x.transform(identity) == x
    """

    @abstractmethod
    def transform(self, t):
        """Apply the transformation ``t``, returning a value of the same shape."""


class HasOrigin(ABC):
    """Things with a local origin that can be moved to a given point."""

    @abstractmethod
    def move_origin_to(self, p):
        """Return a copy whose local origin has moved to the point ``p``."""


__all__ = [
    'Transformable',
    'HasOrigin',
]
