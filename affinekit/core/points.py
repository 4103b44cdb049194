"""
Points of an affine space.

A Point wraps a vector to mark it as a *position* rather than a
displacement: translations move points but leave vectors alone.

A Point remembers the vector space its coordinates live in, and all
point arithmetic goes through that space. Scalars and arrays infer their
space; coordinates stored as tuples or lists are ambiguous (they read as
containers elsewhere) and need the space passed explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import jax.numpy as jnp
import numpy as np

from .protocols import HasOrigin, Transformable
from .spaces import VectorSpace, vector_space_of


@dataclass(frozen=True, eq=False)
class Point(Transformable, HasOrigin):
    """
    An affine position with coordinates in some vector space.

    Points compare and hash by coordinate values, so they can be stored
    in sets and used as mapping keys. The space takes no part in
    comparisons.

    Supported arithmetic:
        point + vector -> point
        point - vector -> point
        point - point  -> vector

    Attributes:
        coords: The position vector
        space: The vector space of ``coords`` (inferred when omitted)

    Raises:
        TypeError: if ``space`` is omitted and cannot be inferred
    """
    coords: Any
    space: Optional[VectorSpace] = None

    def __post_init__(self):
        if self.space is None:
            if isinstance(self.coords, (tuple, list)):
                raise TypeError(
                    f"cannot infer the vector space of {type(self.coords).__name__} "
                    f"coordinates; pass space= explicitly"
                )
            object.__setattr__(self, "space", vector_space_of(self.coords))

    def transform(self, t) -> 'Point':
        return t.papply(self)

    def move_origin_to(self, p: 'Point') -> 'Point':
        return Point(self.space.subtract(self.coords, p.coords), self.space)

    def __add__(self, vector) -> 'Point':
        if isinstance(vector, Point):
            return NotImplemented
        return Point(self.space.add(self.coords, vector), self.space)

    def __sub__(self, other):
        if isinstance(other, Point):
            return self.space.subtract(self.coords, other.coords)
        return Point(self.space.subtract(self.coords, other), self.space)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        a = np.asarray(self.coords)
        b = np.asarray(other.coords)
        return a.shape == b.shape and bool(np.all(a == b))

    def __hash__(self) -> int:
        return hash(_hashable(self.coords))

    def __repr__(self) -> str:
        return f"Point({_hashable(self.coords)!r})"


def _hashable(coords):
    values = np.asarray(coords).tolist()
    return tuple(values) if isinstance(values, list) else values


def origin(space: VectorSpace) -> Point:
    """The point at the zero vector of ``space``."""
    return Point(space.zero(), space)


def point(*coords) -> Point:
    """Build a point in Euclidean space from its coordinates."""
    return Point(jnp.asarray([float(c) for c in coords]))


vector_space_of.register(Point, lambda p: p.space)


__all__ = [
    'Point',
    'origin',
    'point',
]
