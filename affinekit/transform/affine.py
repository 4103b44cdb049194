"""
General affine transformations.

A Transformation is an invertible linear map, its *transpose*, and a
translation vector. By the transpose of a linear map we mean the linear
map whose matrix is the transpose of the original's matrix: any scaling
is its own transpose, and the transpose of a rotation is its inverse.

Transposes are tracked because when a shape is transformed by a linear
map L, its normal vectors transform by L's inverse transpose. Bounding
functions, defined in terms of perpendicular hyperplanes, need exactly
that.

Composition follows the usual convention: ``t1 @ t2`` performs t2 first,
then t1.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import jax.numpy as jnp

from ..config import load_settings
from ..core.linear import InvertibleLinearMap, invertible
from ..core.points import Point
from ..core.protocols import HasOrigin, Transformable
from ..core.spaces import Euclidean, VectorSpace, vector_space_of
from ..errors import SpaceMismatchError, ZeroScalingError
from .matrix import check_transpose


@dataclass(frozen=True, eq=False)
class Transformation(Transformable, HasOrigin):
    """
    Affine transformation over a vector space.

    Attributes:
        linear: Invertible linear part L
        transpose: Invertible map whose matrix is the transpose of L's
        translation: Translation vector, applied to points only
        space: The vector space acted on
    """
    linear: InvertibleLinearMap
    transpose: InvertibleLinearMap
    translation: Any
    space: VectorSpace

    @classmethod
    def identity(cls, space: VectorSpace) -> 'Transformation':
        """The identity transformation on ``space``."""
        ident = InvertibleLinearMap.identity()
        return cls(ident, ident, space.zero(), space)

    def inverse(self) -> 'Transformation':
        """
        Invert the transformation.

        (L, Lᵗ, v) -> (L⁻¹, Lᵗ⁻¹, -L⁻¹(v))
        """
        linear = self.linear.inverse()
        return Transformation(
            linear,
            self.transpose.inverse(),
            self.space.negate(linear.apply(self.translation)),
            self.space,
        )

    def __matmul__(self, other: 'Transformation') -> 'Transformation':
        """
        Compose transformations: ``self @ other`` performs ``other`` first.

        Linear parts compose in order, transposes in reverse order
        ((L1 L2)ᵗ = L2ᵗ L1ᵗ), and the inner translation is carried
        through the outer linear part: v1 + L1(v2).
        """
        if not isinstance(other, Transformation):
            return NotImplemented
        if self.space != other.space:
            raise SpaceMismatchError(
                f"cannot compose transformations over {self.space!r} and {other.space!r}"
            )
        return Transformation(
            self.linear @ other.linear,
            other.transpose @ self.transpose,
            self.space.add(self.translation, self.linear.apply(other.translation)),
            self.space,
        )

    def apply(self, v):
        """
        Apply to a vector. The translation never affects vectors,
        since they are invariant under translation.
        """
        return self.linear.apply(v)

    def papply(self, p: Point) -> Point:
        """Apply to a point: linear part, then translation."""
        return Point(self.space.add(self.linear.apply(p.coords), self.translation), self.space)

    def act(self, x):
        """Monoid action of the transformation on any transformable value."""
        from .transformable import transform
        return transform(self, x)

    def transform(self, t: 'Transformation') -> 'Transformation':
        return t @ self

    def move_origin_to(self, p: Point) -> 'Transformation':
        shift = self.space.subtract(self.space.zero(), p.coords)
        return translation(shift, self.space) @ self

    def __repr__(self) -> str:
        return f"Transformation(space={self.space!r}, translation={self.translation!r})"


# =============================================================================
# ACCESSORS
# =============================================================================

def inv(t: Transformation) -> Transformation:
    """Invert a transformation."""
    return t.inverse()


def transp(t: Transformation) -> InvertibleLinearMap:
    """Get the transpose of a transformation (ignoring the translation)."""
    return t.transpose


def transl(t: Transformation):
    """Get the translational component of a transformation."""
    return t.translation


def apply(t: Transformation, v):
    """Apply a transformation to a vector."""
    return t.apply(v)


def papply(t: Transformation, p: Point) -> Point:
    """Apply a transformation to a point."""
    return t.papply(p)


# =============================================================================
# CONSTRUCTORS
# =============================================================================

def identity(space: VectorSpace) -> Transformation:
    """The identity transformation on ``space``."""
    return Transformation.identity(space)


def from_linear(
    linear: InvertibleLinearMap,
    transpose: InvertibleLinearMap,
    space: VectorSpace,
    check: Optional[bool] = None,
) -> Transformation:
    """
    Create a general affine transformation from an invertible linear
    transformation and its transpose. The translation is zero.

    Args:
        linear: Invertible linear part
        transpose: Its transpose, trusted unless checking is enabled
        space: Vector space acted on
        check: Verify the transpose (defaults to AFFINEKIT_CHECK_TRANSPOSE)

    Raises:
        TransposeMismatchError: if checking is enabled and fails
    """
    t = Transformation(linear, transpose, space.zero(), space)
    if check is None:
        check = load_settings().check_transpose
    if check:
        check_transpose(t)
    return t


def _as_vector(v, space: Optional[VectorSpace]):
    if isinstance(v, (list, tuple)) and (space is None or isinstance(space, Euclidean)):
        return jnp.asarray([float(c) for c in v])
    return v


def translation(v, space: Optional[VectorSpace] = None) -> Transformation:
    """
    Create a translation by the vector ``v``.

    Lists and tuples are read as Euclidean coordinates unless another
    space is given. The space is inferred from ``v`` unless given.
    """
    v = _as_vector(v, space)
    if space is None:
        space = vector_space_of(v)
    ident = InvertibleLinearMap.identity()
    return Transformation(ident, ident, v, space)


def scaling(s, space: VectorSpace) -> Transformation:
    """
    Create a uniform scaling transformation. Scaling is its own transpose.

    Raises:
        ZeroScalingError: if ``s`` is zero, since the result would not
            be invertible
    """
    if s == 0:
        raise ZeroScalingError("cannot scale by zero: the result is not invertible")
    lin = invertible(
        lambda v: space.scale(s, v),
        lambda v: space.divide(v, s),
    )
    return from_linear(lin, lin, space)


vector_space_of.register(Transformation, lambda t: t.space)


__all__ = [
    'Transformation',
    'inv',
    'transp',
    'transl',
    'apply',
    'papply',
    'identity',
    'from_linear',
    'translation',
    'scaling',
]
