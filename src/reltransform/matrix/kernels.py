"""
Numba-optimized kernels for applying 2x3 affine matrices.

Provides JIT-compiled loops that map batches of points and vectors through a
single matrix. fastmath is left off so NaN and infinity propagate exactly as
they do in NumPy.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

# ============================================================================
# Point / Vector Application
# ============================================================================


@njit(parallel=True, cache=True, nogil=True)
def transform_points_numba(
    points: NDArray[np.float64], m: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """
    Apply an affine matrix (linear part and translation) to points.

    Args:
        points: Input points [N, 2]
        m: Affine matrix [2, 3]
        out: Output array [N, 2] (pre-allocated, may alias points)
    """
    a, b, tx = m[0, 0], m[0, 1], m[0, 2]
    c, d, ty = m[1, 0], m[1, 1], m[1, 2]

    N = points.shape[0]
    for i in prange(N):
        x = points[i, 0]
        y = points[i, 1]
        out[i, 0] = a * x + b * y + tx
        out[i, 1] = c * x + d * y + ty


@njit(parallel=True, cache=True, nogil=True)
def transform_vectors_numba(
    vectors: NDArray[np.float64], m: NDArray[np.float64], out: NDArray[np.float64]
) -> None:
    """
    Apply only the linear part of an affine matrix to vectors.

    Args:
        vectors: Input vectors [N, 2]
        m: Affine matrix [2, 3] (translation column ignored)
        out: Output array [N, 2] (pre-allocated, may alias vectors)
    """
    a, b = m[0, 0], m[0, 1]
    c, d = m[1, 0], m[1, 1]

    N = vectors.shape[0]
    for i in prange(N):
        x = vectors[i, 0]
        y = vectors[i, 1]
        out[i, 0] = a * x + b * y
        out[i, 1] = c * x + d * y


# ============================================================================
# Helper Functions
# ============================================================================


def get_numba_status() -> dict[str, Any]:
    """
    Get information about Numba availability and configuration.

    Returns:
        Dictionary with Numba status information
    """
    import numba

    return {
        "available": True,
        "version": numba.__version__,
        "num_threads": numba.config.NUMBA_NUM_THREADS,
        "threading_layer": numba.config.THREADING_LAYER,
    }


def warmup_matrix_kernels() -> None:
    """
    Warm up Numba JIT compilation for the matrix kernels.

    Call this once before timing-sensitive work to avoid first-call
    compilation overhead.
    """
    points = np.zeros((16, 2), dtype=np.float64)
    m = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], dtype=np.float64)
    m.setflags(write=False)  # Matches the read-only matrices from as_matrix
    out = np.empty_like(points)

    transform_points_numba(points, m, out)
    transform_vectors_numba(points, m, out)
