"""
2D Affine Matrix Primitives

Pure NumPy constructors and operations on 2x3 affine matrices.

A matrix ``[[a, b, tx], [c, d, ty]]`` stands for the 3x3 affine matrix with
bottom row ``[0, 0, 1]``. Every function returns a new read-only float64
array, so matrices behave as immutable values.

Functions:
- identity(), translate(), rotate_radians(), orient(), scale(), shear():
  elementary transform constructors
- multiply(): composition, ``multiply(a, b)`` applies ``b`` first, then ``a``
- invert(), determinant(), is_identity(): inspection helpers
- transform_points(), transform_vectors(): batch application (Numba kernels)
"""

import math
from typing import TypeAlias

import numpy as np

from reltransform.constants import (
    AFFINE_BOTTOM_ROW,
    DEFAULT_ATOL,
    DTYPE,
    HOMOGENEOUS_SHAPE,
    MATRIX_SHAPE,
)
from reltransform.matrix.kernels import transform_points_numba, transform_vectors_numba
from reltransform.validators import validate_point_array, validate_real

# Type aliases for better readability
Matrix2d: TypeAlias = np.ndarray
ArrayLike: TypeAlias = np.ndarray | tuple | list


def _freeze(m: np.ndarray) -> Matrix2d:
    """Mark a freshly built matrix read-only."""
    m.setflags(write=False)
    return m


def _from_coefficients(a: float, b: float, tx: float, c: float, d: float, ty: float) -> Matrix2d:
    return _freeze(np.array([[a, b, tx], [c, d, ty]], dtype=DTYPE))


# ============================================================================
# Conversion
# ============================================================================


def as_matrix(value: ArrayLike) -> Matrix2d:
    """
    Coerce an array-like into a read-only 2x3 float64 matrix.

    Accepts a 2x3 array-like, or a 3x3 homogeneous matrix whose bottom row is
    ``[0, 0, 1]``. Read-only float64 2x3 arrays that own their data are
    returned unchanged; views are copied so a writable base cannot change
    the result.

    Args:
        value: Matrix-like input

    Returns:
        Matrix2d

    Raises:
        ValueError: If the shape is not 2x3 or 3x3, or a 3x3 input is not affine
    """
    if (
        isinstance(value, np.ndarray)
        and value.shape == MATRIX_SHAPE
        and value.dtype == DTYPE
        and not value.flags.writeable
        and value.base is None
    ):
        return value

    m = np.array(value, dtype=DTYPE)
    if m.shape == HOMOGENEOUS_SHAPE:
        if not np.array_equal(m[2], AFFINE_BOTTOM_ROW):
            raise ValueError(
                f"3x3 matrix must have bottom row {list(AFFINE_BOTTOM_ROW)}, got {m[2].tolist()}"
            )
        m = m[:2].copy()
    elif m.shape != MATRIX_SHAPE:
        raise ValueError(f"Expected a 2x3 or 3x3 affine matrix, got shape {m.shape}")

    return _freeze(m)


def to_3x3(m: Matrix2d) -> np.ndarray:
    """Return the homogeneous 3x3 form of a 2x3 matrix."""
    return np.vstack([as_matrix(m), np.asarray(AFFINE_BOTTOM_ROW, dtype=DTYPE)])


# ============================================================================
# Elementary Matrices
# ============================================================================


def identity() -> Matrix2d:
    """Identity matrix."""
    return _from_coefficients(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)


@validate_real("x", 0)
@validate_real("y", 1)
def translate(x: float, y: float) -> Matrix2d:
    """Translation by ``(x, y)``."""
    return _from_coefficients(1.0, 0.0, x, 0.0, 1.0, y)


@validate_real("angle", 0)
def rotate_radians(angle: float) -> Matrix2d:
    """
    Counter-clockwise rotation by ``angle`` radians.

    Args:
        angle: Rotation angle in radians

    Returns:
        ``[[cos, -sin, 0], [sin, cos, 0]]``
    """
    c = math.cos(angle)
    s = math.sin(angle)
    return _from_coefficients(c, -s, 0.0, s, c, 0.0)


@validate_real("x", 0)
@validate_real("y", 1)
def orient(x: float, y: float) -> Matrix2d:
    """
    Rotation that turns the x axis to point toward ``(x, y)``.

    Returns the identity when ``(x, y)`` is the origin.

    Args:
        x: Target x coordinate
        y: Target y coordinate

    Returns:
        Rotation matrix with ``cos = x / len`` and ``sin = y / len``
    """
    length = math.hypot(x, y)
    if length == 0.0:
        return identity()

    c = x / length
    s = y / length
    return _from_coefficients(c, -s, 0.0, s, c, 0.0)


@validate_real("sx", 0)
@validate_real("sy", 1)
def scale(sx: float, sy: float) -> Matrix2d:
    """Non-uniform scale. Negative factors mirror, zero collapses an axis."""
    return _from_coefficients(sx, 0.0, 0.0, 0.0, sy, 0.0)


@validate_real("sx", 0)
@validate_real("sy", 1)
def shear(sx: float, sy: float) -> Matrix2d:
    """
    Axis-aligned shear.

    ``sx`` shifts x proportionally to y, ``sy`` shifts y proportionally to x.
    """
    return _from_coefficients(1.0, sx, 0.0, sy, 1.0, 0.0)


# ============================================================================
# Composition and Inspection
# ============================================================================


def multiply(a: Matrix2d, b: Matrix2d) -> Matrix2d:
    """
    Compose two affine matrices.

    The result applied to a point first applies ``b``, then ``a``, so
    ``multiply(current, delta)`` expresses ``delta`` in the local frame of
    ``current``.

    Args:
        a: Outer (parent) matrix
        b: Inner (child) matrix

    Returns:
        Composed matrix
    """
    a = as_matrix(a)
    b = as_matrix(b)

    # Implicit bottom row [0, 0, 1] on both operands
    m = np.empty(MATRIX_SHAPE, dtype=DTYPE)
    m[:, :2] = a[:, :2] @ b[:, :2]
    m[:, 2] = a[:, :2] @ b[:, 2] + a[:, 2]
    return _freeze(m)


def determinant(m: Matrix2d) -> float:
    """Determinant of the linear part."""
    m = as_matrix(m)
    return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])


def invert(m: Matrix2d) -> Matrix2d:
    """
    Inverse affine map.

    Args:
        m: Matrix to invert

    Returns:
        Matrix ``inv`` such that ``multiply(m, inv)`` is the identity

    Raises:
        ValueError: If the matrix is singular
    """
    m = as_matrix(m)
    det = determinant(m)
    if det == 0.0:
        raise ValueError(
            "Cannot invert a singular matrix (determinant is 0). "
            "Zero scale factors collapse an axis and have no inverse."
        )

    a, b, tx = m[0]
    c, d, ty = m[1]
    ia = d / det
    ib = -b / det
    ic = -c / det
    id_ = a / det
    return _from_coefficients(ia, ib, -(ia * tx + ib * ty), ic, id_, -(ic * tx + id_ * ty))


def is_identity(m: Matrix2d, atol: float = DEFAULT_ATOL) -> bool:
    """Check whether a matrix is the identity within ``atol``."""
    return bool(np.allclose(as_matrix(m), identity(), rtol=0.0, atol=atol))


# ============================================================================
# Application
# ============================================================================


def _apply(kernel, m: Matrix2d, values: ArrayLike) -> np.ndarray:
    arr = np.asarray(values, dtype=DTYPE)
    single = arr.ndim == 1
    batch = np.ascontiguousarray(arr.reshape(-1, 2))
    out = np.empty_like(batch)
    kernel(batch, as_matrix(m), out)
    return out[0] if single else out


@validate_point_array("points", 1)
def transform_points(m: Matrix2d, points: ArrayLike) -> np.ndarray:
    """
    Map points through an affine matrix.

    Args:
        m: Affine matrix
        points: Points [N, 2] or a single point [2]

    Returns:
        New array with the same shape as ``points``

    Example:
        >>> transform_points(translate(1.0, 2.0), [[0.0, 0.0]])
        array([[1., 2.]])
    """
    return _apply(transform_points_numba, m, points)


@validate_point_array("vectors", 1)
def transform_vectors(m: Matrix2d, vectors: ArrayLike) -> np.ndarray:
    """
    Map direction vectors through the linear part of an affine matrix.

    Args:
        m: Affine matrix (translation ignored)
        vectors: Vectors [N, 2] or a single vector [2]

    Returns:
        New array with the same shape as ``vectors``
    """
    return _apply(transform_vectors_numba, m, vectors)
