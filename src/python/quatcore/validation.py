"""
Opt-in fail-fast checks for degenerate results.

The value types never raise on degenerate input: inverting a zero
quaternion or building a rotation from a zero-length axis quietly produces
inf/NaN components. Code that would rather stop at the first bad value
wraps results with ``ensure_finite``:

>>> q = ensure_finite(a.divide(b))                 # raises on inf/NaN
>>> q = ensure_finite(a.divide(b), strict=False)   # warns and passes through
"""
from __future__ import annotations

import logging
import warnings
from typing import TypeVar, Union

import numpy as np

from quatcore.mat4 import Mat4
from quatcore.quaternion import Quaternion
from quatcore.vec3 import Vec3

logger = logging.getLogger(__name__)

T = TypeVar("T", Quaternion, Vec3, Mat4)


class NonFiniteQuaternionError(ValueError):
    """Raised when a checked value has an infinite or NaN component."""


def _values(value: Union[Quaternion, Vec3, Mat4]) -> np.ndarray:
    if isinstance(value, (Quaternion, Vec3)):
        return value.components
    if isinstance(value, Mat4):
        return value.to_array()
    raise TypeError(
        f"Expected Quaternion, Vec3 or Mat4, got {type(value).__name__}"
    )


def is_finite(value: Union[Quaternion, Vec3, Mat4]) -> bool:
    """True if every component of ``value`` is finite."""
    return bool(np.all(np.isfinite(_values(value))))


def ensure_finite(value: T, what: str = "quaternion", strict: bool = True) -> T:
    """
    Check that a value has only finite components.

    Parameters
    ----------
    value : Quaternion | Vec3 | Mat4
        Value to check.
    what : str
        Name used in error and warning messages.
    strict : bool
        If True, raise NonFiniteQuaternionError. If False, issue a
        RuntimeWarning and return the value unchanged.

    Returns
    -------
    Quaternion | Vec3 | Mat4
        ``value`` itself, so the call can wrap an expression.

    Raises
    ------
    NonFiniteQuaternionError
        If strict=True and any component is inf or NaN.
    TypeError
        If ``value`` is not one of the supported value types.
    """
    if is_finite(value):
        return value

    msg = f"{what} has non-finite components: {value!r}"
    if strict:
        raise NonFiniteQuaternionError(msg)

    logger.warning(msg)
    warnings.warn(msg, RuntimeWarning, stacklevel=2)
    return value
