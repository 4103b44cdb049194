"""
Origin relocation and translational invariance.

``move_origin_to(p, x)`` moves the local origin of ``x`` to the point
``p``; ``move_origin_by(v, x)`` moves it by the vector ``v``.

TransInv is a wrapper which makes a transformable value translationally
invariant: the translational component of transformations no longer
affects whatever it wraps. Directions and normals are the typical use.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from ..core.points import Point, origin
from ..core.protocols import HasOrigin, Transformable
from ..core.spaces import VectorSpace, vector_space_of
from .affine import Transformation
from .transformable import transform

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class TransInv(Transformable, HasOrigin, Generic[T]):
    """
    Translation-invariant wrapper.

    Transforming a TransInv keeps only the linear and transpose parts of
    the transformation; moving its origin does nothing.
    """
    value: T

    def unwrap(self) -> T:
        return self.value

    def transform(self, t: Transformation) -> 'TransInv[T]':
        linear_only = Transformation(t.linear, t.transpose, t.space.zero(), t.space)
        return TransInv(transform(linear_only, self.value))

    def move_origin_to(self, p: Point) -> 'TransInv[T]':
        return self


vector_space_of.register(TransInv, lambda w: vector_space_of(w.value))


# =============================================================================
# ORIGIN RELOCATION
# =============================================================================

@functools.singledispatch
def _move_origin_value(x, p: Point):
    if isinstance(x, HasOrigin):
        return x.move_origin_to(p)
    raise TypeError(f"{type(x).__name__} has no origin to move")


def move_origin_to(p: Point, x):
    """
    Move the local origin of ``x`` to the point ``p``.

    Raises:
        TypeError: if ``x`` has no registered origin behaviour
    """
    return _move_origin_value.dispatch(type(x))(x, p)


def _register(cls: type, func=None):
    """Register origin behaviour; ``func(p, x)`` receives the point first."""
    def decorate(f):
        _move_origin_value.register(cls, lambda x, p: f(p, x))
        return f
    if func is not None:
        return decorate(func)
    return decorate


move_origin_to.register = _register


def move_origin_by(v: Any, x, space: Optional[VectorSpace] = None):
    """
    Move the local origin of ``x`` by the vector ``v``.

    The vector space is inferred from ``v`` unless given; vectors stored
    as tuples need it given.
    """
    if space is None:
        space = vector_space_of(v)
    return move_origin_to(origin(space) + v, x)


__all__ = [
    'TransInv',
    'move_origin_to',
    'move_origin_by',
]
