"""
Shape descriptors that carry a square border.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self

from reltransform.capabilities.border import AddSquareBorder
from reltransform.constants import DEFAULT_BORDER


@dataclass(frozen=True, slots=True)
class Rectangle(AddSquareBorder):
    """
    Axis-aligned rectangle descriptor with an optional square border.

    Attributes:
        x: Left edge
        y: Top edge
        width: Width
        height: Height
        border: Border radius (half the border width)

    Example:
        >>> Rectangle(0.0, 0.0, 100.0, 50.0).square_border_width(4.0).border
        2.0
    """

    x: float
    y: float
    width: float
    height: float
    border: float = DEFAULT_BORDER

    def square_border_radius(self, radius: float) -> Self:
        return replace(self, border=radius)

    @property
    def has_border(self) -> bool:
        """Check if a non-zero border is set."""
        return self.border != 0
