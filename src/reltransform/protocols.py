"""
Protocol definitions for reltransform host types.

Defines the structural contracts a context type must satisfy to receive the
derived capability methods.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable

import numpy as np


@runtime_checkable
class HasTransform(Protocol):
    """Host that can report its current 2x3 transform."""

    def get_transform(self) -> np.ndarray:
        """
        Return the current transform.

        Returns:
            The 2x3 matrix currently installed (by reference, not a copy)
        """
        ...


@runtime_checkable
class CanTransform(Protocol):
    """Host that can install a new 2x3 transform."""

    def with_transform(self, matrix: np.ndarray) -> Self:
        """
        Install a new current transform.

        Immutable hosts return a new instance; builder-style hosts update
        themselves and return ``self``. Either way the result must equal the
        receiver except for its transform.

        Args:
            matrix: New 2x3 matrix

        Returns:
            Host with ``matrix`` installed
        """
        ...


@runtime_checkable
class TransformHost(HasTransform, CanTransform, Protocol):
    """Host satisfying both transform contracts."""


@runtime_checkable
class SquareBorderHost(Protocol):
    """Host that can add a square border of a given radius."""

    def square_border_radius(self, radius: float) -> Self:
        """
        Add a square border.

        Args:
            radius: Border radius (half the border width)

        Returns:
            Host carrying the border
        """
        ...
