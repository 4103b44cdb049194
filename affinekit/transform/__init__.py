"""
Affine transformations and the Transformable capability.

This module provides:
- Transformation: invertible linear part, its transpose, and a translation
- Matrix extraction (on_basis, matrix_rep) and cofactor determinants
- transform(): uniform action on points, vectors, containers and functions
- TransInv: wrapper ignoring the translational component
- move_origin_to / move_origin_by: origin relocation

See Also:
    affinekit.core: vector spaces, points and invertible linear maps
"""
from .affine import (
    Transformation,
    inv,
    transp,
    transl,
    apply,
    papply,
    identity,
    from_linear,
    translation,
    scaling,
)
from .matrix import (
    basis,
    on_basis,
    matrix_rep,
    transpose_matrix_rep,
    remove,
    minor,
    det,
    determinant,
    homogeneous_matrix,
    check_transpose,
    transformations_close,
)
from .transformable import (
    transform,
    conjugate,
    translate,
    scale,
)
from .invariance import (
    TransInv,
    move_origin_to,
    move_origin_by,
)

__all__ = [
    # Affine
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
    # Matrix
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
    # Transformable
    'transform',
    'conjugate',
    'translate',
    'scale',
    # Invariance
    'TransInv',
    'move_origin_to',
    'move_origin_by',
]
