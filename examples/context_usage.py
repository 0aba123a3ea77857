"""
Example: relative transforms on drawing contexts.

Demonstrates how to use reltransform for:
- Immutable contexts in pixel coordinates
- Builder-style accumulation
- Adopting the capabilities on your own types
- Square borders on shape descriptors
"""

import logging

import numpy as np

from reltransform import Context, Rectangle, RelativeTransform2d, TransformState, identity

# Configure logging to see context operations
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


class Sprite(RelativeTransform2d):
    """A user type that only knows how to hold a matrix."""

    __slots__ = ("name", "matrix")

    def __init__(self, name: str, matrix: np.ndarray | None = None):
        self.name = name
        self.matrix = identity() if matrix is None else matrix

    def get_transform(self) -> np.ndarray:
        return self.matrix

    def with_transform(self, matrix: np.ndarray) -> "Sprite":
        return Sprite(self.name, matrix)


def main():
    # Move to the center of an 800x600 area and map a rotated, scaled unit square
    center = Context.new().trans(400, 300)
    square = center.rot_deg(30.0).zoom(50.0)
    corners = np.array([[-0.5, -0.5], [0.5, -0.5], [0.5, 0.5], [-0.5, 0.5]])
    print("Square corners:")
    print(square.apply(corners))

    # The original contexts are untouched
    print("Center still at:", center.trans_point(0.0, 0.0))
    print("Reset to origin:", square.reset() == Context.new())

    # Builder-style accumulation
    state = TransformState().trans(3.0, 4.0).scale(2.0, 2.0)
    print("Accumulated:", state)

    # Any type can adopt the capability
    sprite = Sprite("ship").orient(1.0, 1.0).trans(10.0, 0.0)
    print(f"{sprite.name} position:", sprite.get_transform()[:, 2])

    # Borders by width or radius
    button = Rectangle(10.0, 10.0, 120.0, 40.0).square_border_width(3.0)
    print("Button border radius:", button.border)


if __name__ == "__main__":
    main()
