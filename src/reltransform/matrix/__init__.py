"""
2D matrix module.

Provides the 2x3 affine matrix primitives that the transform capabilities
compose, plus Numba-backed batch application to points and vectors.
"""

from reltransform.matrix.api import (
    Matrix2d,
    as_matrix,
    determinant,
    identity,
    invert,
    is_identity,
    multiply,
    orient,
    rotate_radians,
    scale,
    shear,
    to_3x3,
    transform_points,
    transform_vectors,
    translate,
)

__all__ = [
    "Matrix2d",
    "as_matrix",
    "to_3x3",
    "identity",
    "translate",
    "rotate_radians",
    "orient",
    "scale",
    "shear",
    "multiply",
    "determinant",
    "invert",
    "is_identity",
    "transform_points",
    "transform_vectors",
]
