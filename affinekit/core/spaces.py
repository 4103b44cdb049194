"""
Vector spaces with a basis decomposition.

A vector space supplies the additive-group structure (zero, add, negate),
scalar multiplication and division, and a *basis decomposition*: every
vector is expressed as a finite list of (basis index, coefficient) pairs
in a fixed basis order. That decomposition is all the transformation
algebra needs to recover matrices from opaque linear functions.

Concrete spaces:
- Euclidean(n): vectors are 1-D JAX arrays of length n
- ScalarField: vectors are plain scalars (int, float, Fraction, 0-d arrays)

vector_space_of() infers the space a value lives in. Other modules
register their own types with it.
"""
from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache, singledispatch
from typing import Any, Hashable, List, Tuple

import jax
import jax.numpy as jnp
import numpy as np

from ..log import get_logger

logger = get_logger(__name__)


# =============================================================================
# ABSTRACT VECTOR SPACE
# =============================================================================

class VectorSpace(ABC):
    """
    Abstract vector space over a scalar field.

    Subclasses must be hashable, immutable values: the basis cache is keyed
    on the space itself, and two equal spaces must share one basis.

    The arithmetic defaults use Python operators, which covers JAX arrays,
    NumPy arrays and all numeric scalar types.
    """

    @property
    @abstractmethod
    def dim(self) -> int:
        """Number of basis vectors."""

    @abstractmethod
    def zero(self) -> Any:
        """The additive identity."""

    @abstractmethod
    def decompose(self, v) -> List[Tuple[Hashable, Any]]:
        """Express ``v`` as (basis index, coefficient) pairs in basis order."""

    @abstractmethod
    def basis_value(self, index: Hashable) -> Any:
        """The basis vector with the given index."""

    def add(self, u, v):
        return u + v

    def negate(self, v):
        return -v

    def subtract(self, u, v):
        return u - v

    def scale(self, s, v):
        return s * v

    def divide(self, v, s):
        return v / s

    def basis(self) -> Tuple[Any, ...]:
        """All basis vectors in basis order (memoised per space)."""
        return _cached_basis(self)


@lru_cache(maxsize=None)
def _cached_basis(space: VectorSpace) -> Tuple[Any, ...]:
    # Indices come from decomposing zero, so the ordering always matches
    # what decompose() reports for any other vector.
    indices = [index for index, _ in space.decompose(space.zero())]
    logger.debug("caching %d basis vectors for %r", len(indices), space)
    return tuple(space.basis_value(index) for index in indices)


def clear_basis_cache() -> None:
    """Drop every memoised basis (they are recomputed on demand)."""
    _cached_basis.cache_clear()


# =============================================================================
# CONCRETE SPACES
# =============================================================================

@dataclass(frozen=True)
class Euclidean(VectorSpace):
    """
    Real coordinate space R^n with the standard basis.

    Vectors are 1-D JAX arrays; basis index i is the i-th unit vector,
    and decompose() lists coordinates in ascending index order.
    """
    n: int

    def __post_init__(self):
        if not isinstance(self.n, numbers.Integral) or self.n < 1:
            raise ValueError(f"Euclidean dimension must be a positive integer, got {self.n!r}")

    @property
    def dim(self) -> int:
        return self.n

    def zero(self) -> jnp.ndarray:
        return jnp.zeros(self.n)

    def decompose(self, v) -> List[Tuple[int, Any]]:
        v = jnp.asarray(v)
        return [(i, v[i]) for i in range(self.n)]

    def basis_value(self, index: int) -> jnp.ndarray:
        return jnp.zeros(self.n).at[index].set(1.0)

    def __repr__(self) -> str:
        return f"Euclidean({self.n})"


@dataclass(frozen=True)
class ScalarField(VectorSpace):
    """
    A field viewed as a one-dimensional vector space over itself.

    The only basis index is the empty tuple and the basis vector is 1,
    so exact types such as fractions.Fraction stay exact.
    """

    @property
    def dim(self) -> int:
        return 1

    def zero(self):
        return 0

    def decompose(self, v) -> List[Tuple[tuple, Any]]:
        return [((), v)]

    def basis_value(self, index: tuple):
        return 1

    def __repr__(self) -> str:
        return "ScalarField()"


R1 = Euclidean(1)
R2 = Euclidean(2)
R3 = Euclidean(3)
SCALARS = ScalarField()


# =============================================================================
# SPACE INFERENCE
# =============================================================================

@singledispatch
def vector_space_of(value) -> VectorSpace:
    """
    Infer the vector space a value lives in.

    Register additional types with ``vector_space_of.register``.

    Raises:
        TypeError: if the type has no registered space
    """
    raise TypeError(f"cannot infer a vector space for {type(value).__name__}")


@vector_space_of.register(numbers.Number)
def _(value) -> VectorSpace:
    return SCALARS


def _array_space(value) -> VectorSpace:
    if value.ndim == 0:
        return SCALARS
    if value.ndim == 1:
        return Euclidean(int(value.shape[0]))
    raise TypeError(f"expected a scalar or 1-D array, got shape {value.shape}")


vector_space_of.register(jax.Array, _array_space)
vector_space_of.register(np.ndarray, _array_space)


__all__ = [
    'VectorSpace',
    'Euclidean',
    'ScalarField',
    'R1',
    'R2',
    'R3',
    'SCALARS',
    'vector_space_of',
    'clear_basis_cache',
]
