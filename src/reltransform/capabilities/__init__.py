"""
Capability mixins.

Hosts inherit these to receive derived border and transform operations.
"""

from reltransform.capabilities.border import AddSquareBorder
from reltransform.capabilities.relative import RelativeTransform2d, compose_local

__all__ = [
    "AddSquareBorder",
    "RelativeTransform2d",
    "compose_local",
]
