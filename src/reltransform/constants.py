"""
Constants and default values for reltransform.

Centralizes magic numbers and numeric defaults for better maintainability.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# Matrix Representation
# =============================================================================

DTYPE = np.float64  # Double precision scalars
MATRIX_SHAPE = (2, 3)  # [[a, b, tx], [c, d, ty]]
HOMOGENEOUS_SHAPE = (3, 3)  # Full affine form with bottom row [0, 0, 1]
AFFINE_BOTTOM_ROW = (0.0, 0.0, 1.0)

# Spatial dimensions
SPATIAL_DIMS = 2  # X, Y

# =============================================================================
# Borders
# =============================================================================

DEFAULT_BORDER = 0.0  # No border
BORDER_WIDTH_TO_RADIUS = 0.5  # radius = width / 2

# =============================================================================
# Comparison
# =============================================================================

DEFAULT_ATOL = 1e-9  # Absolute tolerance for matrix comparisons
