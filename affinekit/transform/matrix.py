"""
Matrix extraction and determinants for transformations.

Transformations store their linear part as opaque functions. Matrices are
recovered by pushing every basis vector of the space through the linear
part and decomposing the images back into coefficients:

    matrix_rep(t) = [decompose(L(e_0)), decompose(L(e_1)), ...]

i.e. a list of *columns*, each a list of scalars in basis order. This is
what rendering backends consume, together with the translation vector.

The determinant is computed by cofactor expansion along the first row
(the entries m[0][i], see det).
This works for any scalar type with +, - and * (floats, JAX scalars,
fractions.Fraction) but costs O(n!) and is meant for 2D/3D spaces.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, TypeVar

import jax.numpy as jnp
import numpy as np

from ..config import load_settings
from ..errors import TransposeMismatchError
from ..log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


# =============================================================================
# BASIS EXTRACTION
# =============================================================================

def basis(space) -> List[Any]:
    """
    Get the basis vectors of ``space`` in basis order.

    The result is memoised per space; see VectorSpace.basis.
    """
    return list(space.basis())


def on_basis(t) -> Tuple[List[Any], Any]:
    """
    Get the images of the basis vectors under the linear part of ``t``,
    and the translation vector. Mostly useful for implementing backends.

    Args:
        t: Transformation

    Returns:
        (basis images in basis order, translation)
    """
    return [t.apply(e) for e in t.space.basis()], t.translation


def _columns(space, images) -> List[List[Any]]:
    return [[c for _, c in space.decompose(v)] for v in images]


def matrix_rep(t) -> List[List[Any]]:
    """
    Matrix of the linear part of ``t`` as a list of column vectors.

    Column j holds the coefficients of the image of basis vector j.
    """
    images, _ = on_basis(t)
    return _columns(t.space, images)


def transpose_matrix_rep(t) -> List[List[Any]]:
    """Matrix of the stored transpose part of ``t``, as a list of columns."""
    return _columns(t.space, [t.transpose(e) for e in t.space.basis()])


# =============================================================================
# COFACTOR EXPANSION
# =============================================================================

def remove(n: int, xs: Sequence[T]) -> List[T]:
    """Remove the n-th element from a list."""
    return list(xs[:n]) + list(xs[n + 1:])


def minor(i: int, j: int, m: Sequence[Sequence[T]]) -> List[List[T]]:
    """
    Minor matrix for cofactor C(i, j).

    Removes entry ``i`` from every column, then column ``j``.
    """
    return remove(j, [remove(i, column) for column in m])


def det(m: Sequence[Sequence[Any]]):
    """
    Determinant of a square matrix given as a list of columns.

    det([[a]]) = a
    det(m)     = Σᵢ (-1)^i · m[0][i] · det(minor(i, 0, m))

    i.e. cofactor expansion along the first row m[0].

    Args:
        m: n columns of n scalars each

    Returns:
        The determinant, in the scalar type of the entries

    Raises:
        ValueError: for an empty matrix

    Complexity: O(n!)
    """
    n = len(m)
    if n == 0:
        raise ValueError("determinant of an empty matrix is undefined")
    if n == 1:
        return m[0][0]
    first = m[0]
    total = first[0] * det(minor(0, 0, m))
    for i in range(1, n):
        term = first[i] * det(minor(i, 0, m))
        total = total - term if i % 2 else total + term
    return total


def determinant(t):
    """
    The determinant of the linear part of a Transformation.

    Multiplicative under composition:
        determinant(t1 @ t2) == determinant(t1) * determinant(t2)
    """
    m = matrix_rep(t)
    warn_dim = load_settings().det_warn_dim
    if len(m) > warn_dim:
        logger.warning(
            "cofactor expansion on a %d-dimensional space is O(n!); "
            "threshold is %d", len(m), warn_dim,
        )
    return det(m)


# =============================================================================
# BACKEND HELPERS AND CONSISTENCY CHECKS
# =============================================================================

def homogeneous_matrix(t) -> jnp.ndarray:
    """
    Row-major (n+1)x(n+1) homogeneous matrix of ``t``:

        | M  v |
        | 0  1 |

    where M is the linear part and v the translation.
    """
    n = t.space.dim
    linear = np.asarray(matrix_rep(t), dtype=float).T
    shift = np.asarray([c for _, c in t.space.decompose(t.translation)], dtype=float)
    out = jnp.eye(n + 1)
    out = out.at[:n, :n].set(jnp.asarray(linear))
    return out.at[:n, n].set(jnp.asarray(shift))


def check_transpose(t, atol: Optional[float] = None) -> None:
    """
    Verify that the stored transpose of ``t`` matches its linear part.

    Args:
        t: Transformation
        atol: Absolute tolerance (defaults to AFFINEKIT_TRANSPOSE_ATOL)

    Raises:
        TransposeMismatchError: if the matrices disagree
    """
    if atol is None:
        atol = load_settings().transpose_atol
    linear = np.asarray(matrix_rep(t), dtype=float)
    stored = np.asarray(transpose_matrix_rep(t), dtype=float)
    logger.debug("checking transpose consistency over %r", t.space)
    if not np.allclose(stored, linear.T, rtol=0.0, atol=atol):
        max_diff = float(np.max(np.abs(stored - linear.T)))
        raise TransposeMismatchError(
            f"transpose part does not match the linear part over {t.space!r}\n"
            f"  Max absolute difference: {max_diff}"
        )


def transformations_close(t1, t2, atol: float = 1e-6) -> bool:
    """
    Compare two transformations by their action.

    Linear parts, transposes and translations are compared as matrices;
    transformations over different spaces are never close.
    """
    if t1.space != t2.space:
        return False
    pairs = [
        (matrix_rep(t1), matrix_rep(t2)),
        (transpose_matrix_rep(t1), transpose_matrix_rep(t2)),
        (
            [c for _, c in t1.space.decompose(t1.translation)],
            [c for _, c in t2.space.decompose(t2.translation)],
        ),
    ]
    return all(
        np.allclose(np.asarray(a, dtype=float), np.asarray(b, dtype=float), rtol=0.0, atol=atol)
        for a, b in pairs
    )


__all__ = [
    'basis',
    'on_basis',
    'matrix_rep',
    'transpose_matrix_rep',
    'remove',
    'minor',
    'det',
    'determinant',
    'homogeneous_matrix',
    'check_transpose',
    'transformations_close',
]
