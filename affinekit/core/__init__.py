"""
Core primitives for the transformation algebra.

This module provides the leaves of the dependency graph:
- VectorSpace, Euclidean, ScalarField: spaces with a basis decomposition
- Point: affine positions, distinguished from free vectors
- InvertibleLinearMap: a linear map paired with its inverse
- Transformable, HasOrigin: capability contracts
"""
from .spaces import (
    VectorSpace,
    Euclidean,
    ScalarField,
    R1,
    R2,
    R3,
    SCALARS,
    vector_space_of,
    clear_basis_cache,
)
from .points import (
    Point,
    origin,
    point,
)
from .linear import (
    InvertibleLinearMap,
    invertible,
    linv,
    lapp,
)
from .protocols import (
    Transformable,
    HasOrigin,
)

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
    'Point',
    'origin',
    'point',
    'InvertibleLinearMap',
    'invertible',
    'linv',
    'lapp',
    'Transformable',
    'HasOrigin',
]
