"""
Square border capability.

Derives a border-by-width operation from a host's border-by-radius operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from reltransform.constants import BORDER_WIDTH_TO_RADIUS


class AddSquareBorder(ABC):
    """
    Mixin for hosts that can add a square border.

    Subclasses implement ``square_border_radius``; what a border means
    (inset amount, outline thickness, ...) is up to the host.
    """

    __slots__ = ()

    @abstractmethod
    def square_border_radius(self, radius: float) -> Self:
        """Add a square border with the given radius."""
        ...

    def square_border_width(self, width: float) -> Self:
        """Add a square border with the given width (radius = width / 2)."""
        return self.square_border_radius(BORDER_WIDTH_TO_RADIUS * width)
