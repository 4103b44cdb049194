"""
Affine Transformations over Abstract Vector Spaces

This package provides a generic algebra of affine transformations that
works for any vector space with a basis decomposition. It provides:

Core (affinekit.core):
    - VectorSpace: Abstract space with zero, add, scale and decompose
    - Euclidean, ScalarField: Concrete spaces on JAX arrays and scalars
    - Point: Affine positions (moved by translations, unlike vectors)
    - InvertibleLinearMap: Linear map paired with its inverse

Transformations (affinekit.transform):
    - Transformation: Linear part, transpose and translation
    - translation, scaling, from_linear, identity: Constructors
    - matrix_rep, on_basis, determinant: Matrix extraction
    - transform: Uniform action on points, containers and functions
    - TransInv: Translation-invariant wrapper

Usage:
    from affinekit import R2, point, scaling, translation, transform

    t = scaling(2.0, R2) @ translation((1.0, 0.0))
    transform(t, point(0.0, 0.0))   # Point((2.0, 0.0))
"""

# =============================================================================
# Core (affinekit.core)
# =============================================================================
from .core import (
    VectorSpace,
    Euclidean,
    ScalarField,
    R1,
    R2,
    R3,
    SCALARS,
    vector_space_of,
    clear_basis_cache,
    Point,
    origin,
    point,
    InvertibleLinearMap,
    invertible,
    linv,
    lapp,
    Transformable,
    HasOrigin,
)

# =============================================================================
# Transformations (affinekit.transform)
# =============================================================================
from .transform import (
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
    basis,
    on_basis,
    matrix_rep,
    transpose_matrix_rep,
    det,
    determinant,
    homogeneous_matrix,
    check_transpose,
    transformations_close,
    transform,
    conjugate,
    translate,
    scale,
    TransInv,
    move_origin_to,
    move_origin_by,
)

# =============================================================================
# Errors and configuration
# =============================================================================
from .errors import (
    AffineError,
    ZeroScalingError,
    SpaceMismatchError,
    TransposeMismatchError,
)
from .config import Settings, load_settings


__version__ = "0.1.0"

__all__ = [
    # Core - spaces
    "VectorSpace",
    "Euclidean",
    "ScalarField",
    "R1",
    "R2",
    "R3",
    "SCALARS",
    "vector_space_of",
    "clear_basis_cache",
    # Core - points
    "Point",
    "origin",
    "point",
    # Core - linear maps
    "InvertibleLinearMap",
    "invertible",
    "linv",
    "lapp",
    # Core - contracts
    "Transformable",
    "HasOrigin",
    # Transformations
    "Transformation",
    "inv",
    "transp",
    "transl",
    "apply",
    "papply",
    "identity",
    "from_linear",
    "translation",
    "scaling",
    # Matrices
    "basis",
    "on_basis",
    "matrix_rep",
    "transpose_matrix_rep",
    "det",
    "determinant",
    "homogeneous_matrix",
    "check_transpose",
    "transformations_close",
    # Transformable
    "transform",
    "conjugate",
    "translate",
    "scale",
    "TransInv",
    "move_origin_to",
    "move_origin_by",
    # Errors
    "AffineError",
    "ZeroScalingError",
    "SpaceMismatchError",
    "TransposeMismatchError",
    # Config
    "Settings",
    "load_settings",
]
