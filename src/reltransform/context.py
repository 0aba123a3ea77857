"""
Context: reference hosts for the relative transform capability.

This module provides two host types that differ only in how they install a
new transform:

- Context: immutable value. Every derived operation returns a new Context and
  leaves the receiver untouched.
- TransformState: mutable builder. Every derived operation updates the
  receiver in place and returns it for chaining.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field, replace
from typing import Any, Self, TypeAlias

import numpy as np

from reltransform.capabilities.relative import RelativeTransform2d
from reltransform.matrix import api as mat

logger = logging.getLogger(__name__)

ArrayLike: TypeAlias = np.ndarray | tuple | list


@dataclass(frozen=True, eq=False, slots=True)
class Context(RelativeTransform2d):
    """
    Immutable context holding a current transform.

    Attributes:
        transform: Current 2x3 transform (local -> parent coordinates)

    Example:
        >>> ctx = Context.new().trans(320, 240).rot_deg(30.0)
        >>> corner = ctx.trans_point(10.0, 0.0)
    """

    transform: np.ndarray = field(default_factory=mat.identity)

    def __post_init__(self):
        """Coerce the matrix to a read-only 2x3 float64 array."""
        object.__setattr__(self, "transform", mat.as_matrix(self.transform))

    @classmethod
    def new(cls) -> Self:
        """Context with identity transform."""
        return cls()

    def get_transform(self) -> np.ndarray:
        return self.transform

    def with_transform(self, matrix: np.ndarray) -> Self:
        return replace(self, transform=mat.as_matrix(matrix))

    def reset(self) -> Self:
        """Return a context whose transform is the identity."""
        logger.debug("[Context] Reset transform")
        return replace(self, transform=mat.identity())

    def trans_point(self, x: float, y: float) -> tuple[float, float]:
        """Map a local point through the current transform."""
        px, py = mat.transform_points(self.transform, (x, y))
        return float(px), float(py)

    def apply(self, points: ArrayLike) -> np.ndarray:
        """
        Map local points through the current transform.

        Args:
            points: Points [N, 2] or a single point [2]

        Returns:
            Transformed points with the input's shape
        """
        return mat.transform_points(self.transform, points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return np.array_equal(self.transform, other.transform)

    __hash__ = None


class TransformState(RelativeTransform2d):
    """
    Mutable transform builder.

    Derived operations update this object in place and return it, so a chain
    of calls accumulates into one matrix.

    Example:
        >>> state = TransformState().trans(3.0, 4.0).zoom(2.0)
        >>> state.get_transform()
        array([[2., 0., 3.],
               [0., 2., 4.]])
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: ArrayLike | None = None):
        """
        Initialize the builder.

        Args:
            matrix: Starting transform (identity if None)
        """
        self._matrix: np.ndarray = mat.identity() if matrix is None else mat.as_matrix(matrix)
        logger.debug("[TransformState] Initialized")

    def get_transform(self) -> np.ndarray:
        return self._matrix

    def with_transform(self, matrix: np.ndarray) -> Self:
        self._matrix = mat.as_matrix(matrix)
        return self

    def reset(self) -> Self:
        """
        Reset to the identity transform.

        Returns:
            Self for method chaining
        """
        self._matrix = mat.identity()
        logger.debug("[TransformState] Reset")
        return self

    def is_identity(self) -> bool:
        """Check if no net transform has been accumulated."""
        return mat.is_identity(self._matrix)

    def apply(self, points: ArrayLike) -> np.ndarray:
        """Map points through the accumulated transform."""
        return mat.transform_points(self._matrix, points)

    def copy(self) -> Self:
        """
        Create an independent copy of the builder.

        Returns:
            New TransformState with the same matrix
        """
        return deepcopy(self)

    def __copy__(self) -> Self:
        """Shallow copy (creates deep copy for safety)."""
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        """Deep copy implementation."""
        # Matrices are read-only, so sharing the array is safe
        return self.__class__(self._matrix)

    def __repr__(self) -> str:
        """String representation of the builder."""
        coeffs = ", ".join(f"{v:g}" for v in self._matrix.ravel())
        return f"TransformState([{coeffs}])"
