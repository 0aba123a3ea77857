"""
Relative transform capability.

Derives local-coordinate transform operations for any host that can report
its current 2x3 matrix and install a new one. Each operation builds an
elementary matrix and installs ``multiply(current, elementary)``.

Example:
    >>> from reltransform import Context
    >>> ctx = Context.new().trans(10.0, 20.0).rot_deg(45.0).zoom(2.0)
    >>> ctx.trans_point(1.0, 0.0)
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Self

import numpy as np

from reltransform.matrix import api as mat


def compose_local(host: RelativeTransform2d, delta: np.ndarray) -> RelativeTransform2d:
    """Install ``delta`` on top of the host's current transform, in its local frame."""
    return host.with_transform(mat.multiply(host.get_transform(), delta))


class RelativeTransform2d(ABC):
    """
    Mixin providing transforms in local coordinates.

    Subclasses implement ``get_transform`` and ``with_transform``. Whether
    the derived methods return a fresh instance or the mutated receiver is
    decided by ``with_transform``.
    """

    __slots__ = ()

    @abstractmethod
    def get_transform(self) -> np.ndarray:
        """Return the current 2x3 transform."""
        ...

    @abstractmethod
    def with_transform(self, matrix: np.ndarray) -> Self:
        """Return this host with ``matrix`` installed as its transform."""
        ...

    def trans(self, x: float, y: float) -> Self:
        """Translate by ``(x, y)`` in local coordinates."""
        return compose_local(self, mat.translate(x, y))

    def rot_deg(self, angle: float) -> Self:
        """Rotate by ``angle`` degrees in local coordinates."""
        return self.rot_rad(angle * math.pi / 180.0)

    def rot_rad(self, angle: float) -> Self:
        """Rotate by ``angle`` radians in local coordinates."""
        return compose_local(self, mat.rotate_radians(angle))

    def orient(self, x: float, y: float) -> Self:
        """
        Orient the x axis to look at a point, in local coordinates.

        Leaves the x axis unchanged if the point is the origin.
        """
        return compose_local(self, mat.orient(x, y))

    def scale(self, sx: float, sy: float) -> Self:
        """Scale in local coordinates."""
        return compose_local(self, mat.scale(sx, sy))

    def zoom(self, s: float) -> Self:
        """Scale uniformly in both directions."""
        return self.scale(s, s)

    def flip_v(self) -> Self:
        """Flip vertically in local coordinates."""
        return self.scale(1.0, -1.0)

    def flip_h(self) -> Self:
        """
        Flip horizontally in local coordinates.

        Note:
            This scales by ``(-1, 0)``, which also collapses the y axis rather
            than mirroring x alone. Use ``scale(-1.0, 1.0)`` for a pure mirror.
        """
        return self.scale(-1.0, 0.0)

    def shear(self, sx: float, sy: float) -> Self:
        """Shear in local coordinates."""
        return compose_local(self, mat.shear(sx, sy))
