"""
Tolerance-based floating-point comparison.

Two single-precision values are considered equal when any of the following
holds:

    - they compare equal exactly (this also covers equal infinities),
    - they differ by no more than an absolute tolerance ``eps``,
    - they are adjacent float32 values (at most one ulp apart).

NaN is never equal to anything, including itself. The checks run under
``np.errstate`` so comparing infinities never emits numpy warnings.
"""

import numpy as np

from quatcore.constants import SCALAR, QUAT_EPSILON, HASH_DECIMALS


def _close(a: np.ndarray, b: np.ndarray, eps: float) -> np.ndarray:
    """Elementwise equality mask for two float32 arrays of equal shape."""
    with np.errstate(invalid="ignore", over="ignore"):
        # Difference in float64 so that large float32 values cannot overflow
        diff = np.abs(a.astype(np.float64) - b.astype(np.float64))
        ulp = np.spacing(np.maximum(np.abs(a), np.abs(b)))
        return (a == b) | (diff <= eps) | (diff <= ulp)


def equals(a: float, b: float, eps: float = QUAT_EPSILON) -> bool:
    """
    Compare two scalars with an absolute tolerance.

    Parameters
    ----------
    a, b : float
        Values to compare. Both are rounded to float32 first.
    eps : float
        Absolute tolerance.

    Returns
    -------
    bool
        True if the values are equal within ``eps`` or one float32 ulp.
    """
    return bool(_close(np.asarray(a, dtype=SCALAR),
                       np.asarray(b, dtype=SCALAR), eps))


def array_equals(a, b, eps: float = QUAT_EPSILON) -> bool:
    """
    Componentwise tolerance comparison of two array-likes.

    Arrays of different shapes are never equal.
    """
    a = np.asarray(a, dtype=SCALAR)
    b = np.asarray(b, dtype=SCALAR)
    if a.shape != b.shape:
        return False
    return bool(np.all(_close(a, b, eps)))


def hash_key(values, decimals: int = HASH_DECIMALS) -> tuple:
    """Rounded component tuple used by the value types' ``__hash__``."""
    rounded = np.round(np.asarray(values, dtype=np.float64), decimals=decimals)
    # Fold -0.0 into 0.0 so sign-flipped zeros share a bucket
    return tuple(float(c) + 0.0 for c in rounded)
