"""
reltransform - Relative 2D Transform Capabilities

Composable 2D affine transforms in local coordinates, on top of a 2x3 matrix
representation.

Features:
- Mixin capabilities that any context type can adopt
- RelativeTransform2d: trans, rot_deg, rot_rad, orient, scale, zoom, flip_v, flip_h, shear
- AddSquareBorder: square_border_width derived from square_border_radius
- Read-only NumPy 2x3 matrices as immutable values
- Numba kernels for mapping point batches through a transform
- Immutable (Context) and builder-style (TransformState) reference hosts

Example - Immutable context:
    >>> from reltransform import Context
    >>>
    >>> ctx = Context.new()
    >>> child = ctx.trans(400, 300).rot_deg(45.0).zoom(2.0)
    >>> child.trans_point(10.0, 0.0)

Example - Custom host:
    >>> from reltransform import RelativeTransform2d, identity
    >>>
    >>> class Sprite(RelativeTransform2d):
    ...     def __init__(self, matrix=None):
    ...         self.matrix = identity() if matrix is None else matrix
    ...     def get_transform(self):
    ...         return self.matrix
    ...     def with_transform(self, matrix):
    ...         return Sprite(matrix)
    >>>
    >>> sprite = Sprite().trans(5.0, 0.0).flip_v()
"""

__version__ = "0.1.0"

# Capabilities
from reltransform.capabilities import AddSquareBorder, RelativeTransform2d, compose_local

# Reference hosts
from reltransform.context import Context, TransformState

# Matrix primitives
from reltransform.matrix import (
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

# Protocols
from reltransform.protocols import CanTransform, HasTransform, SquareBorderHost, TransformHost

# Shapes
from reltransform.shapes import Rectangle

__all__ = [
    # Version
    "__version__",
    # Capabilities
    "AddSquareBorder",
    "RelativeTransform2d",
    "compose_local",
    # Hosts
    "Context",
    "TransformState",
    "Rectangle",
    # Protocols
    "HasTransform",
    "CanTransform",
    "TransformHost",
    "SquareBorderHost",
    # Matrix primitives
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
