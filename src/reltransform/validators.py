"""
Validation decorators for reltransform primitives.

Provides reusable argument checking for the matrix primitives. Values are only
checked for type and shape; numeric edge cases (NaN, infinity, zero scales)
pass through untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from numbers import Real
from typing import Any, TypeAlias

import numpy as np

# Type alias for callables
F: TypeAlias = Callable[..., Any]


def _lookup(args: tuple, kwargs: dict, param_name: str, param_index: int) -> tuple[bool, Any]:
    """Find a parameter either by position or by keyword."""
    if len(args) > param_index:
        return True, args[param_index]
    if param_name in kwargs:
        return True, kwargs[param_name]
    return False, None


def validate_real(param_name: str = "value", param_index: int = 0) -> Callable[[F], F]:
    """
    Decorator for validating real-valued scalar parameters.

    Accepts any ``numbers.Real`` (Python ints/floats and NumPy scalars).
    NaN and infinity are real floats and are accepted.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with type validation

    Example:
        >>> @validate_real("angle")
        ... def rotate_radians(angle: float) -> np.ndarray:
        ...     ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _lookup(args, kwargs, param_name, param_index)
            if not found:
                return func(*args, **kwargs)

            if not isinstance(value, Real):
                raise TypeError(
                    f"{param_name} must be a real number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


def validate_point_array(param_name: str = "points", param_index: int = 1) -> Callable[[F], F]:
    """
    Decorator for validating batches of 2D points or vectors.

    The parameter must be array-like with shape ``(N, 2)`` or ``(2,)``.

    Args:
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature

    Returns:
        Decorated function with shape validation
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            found, value = _lookup(args, kwargs, param_name, param_index)
            if not found:
                return func(*args, **kwargs)

            if not isinstance(value, (np.ndarray, list, tuple)):
                raise TypeError(f"{param_name} must be array-like, got {type(value).__name__}")

            shape = np.shape(value)
            if not (shape == (2,) or (len(shape) == 2 and shape[1] == 2)):
                raise ValueError(
                    f"{param_name} must have shape (N, 2) or (2,), got {shape}. "
                    f"Stack x/y coordinates as columns."
                )

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
