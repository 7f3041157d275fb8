"""
Three-component single-precision vector.

``Vec3`` is the small immutable vector type the quaternion code reads axes
from and writes rotated vectors to. It is deliberately minimal: component
access, length, the handful of products rotation code needs, and the fused
``normalize_to`` used by axis-angle construction.
"""

from typing import Union

import numpy as np

from quatcore.constants import SCALAR, VEC_EPSILON
from quatcore import precision


class Vec3:
    """
    Immutable 3-vector with float32 components.

    Parameters
    ----------
    x, y, z : float
        Components. Stored as float32.

    Examples
    --------
    >>> v = Vec3(3.0, 0.0, 4.0)
    >>> v.length()
    5.0
    >>> v.normalize_to(10.0).z
    8.0
    """

    def __init__(self, x: float, y: float, z: float) -> None:
        v = np.array([x, y, z], dtype=SCALAR)
        v.flags.writeable = False
        self._v = v

    @staticmethod
    def of(value: Union['Vec3', np.ndarray, list, tuple]) -> 'Vec3':
        """
        Coerce a Vec3 or any 3-element array-like into a Vec3.

        Raises
        ------
        ValueError
            If ``value`` does not have exactly three components.
        """
        if isinstance(value, Vec3):
            return value
        arr = np.asarray(value, dtype=SCALAR)
        if arr.shape != (3,):
            raise ValueError(f"Vec3 needs 3 components, got shape {arr.shape}")
        return Vec3(arr[0], arr[1], arr[2])

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def components(self) -> np.ndarray:
        """Copy of the components as a float32 array ``[x, y, z]``."""
        return self._v.copy()

    # =========================================================================
    # VECTOR OPERATIONS
    # =========================================================================

    def length(self) -> float:
        """Euclidean length sqrt(x^2 + y^2 + z^2), accumulated in float64."""
        v = self._v.astype(np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.sqrt(np.dot(v, v)))

    def dot(self, other: 'Vec3') -> float:
        return float(np.dot(self._v, other._v))

    def cross(self, other: 'Vec3') -> 'Vec3':
        c = np.cross(self._v, other._v)
        return Vec3(c[0], c[1], c[2])

    def add(self, other: 'Vec3') -> 'Vec3':
        s = self._v + other._v
        return Vec3(s[0], s[1], s[2])

    def subtract(self, other: 'Vec3') -> 'Vec3':
        d = self._v - other._v
        return Vec3(d[0], d[1], d[2])

    def scale(self, s: float) -> 'Vec3':
        with np.errstate(invalid="ignore", over="ignore"):
            r = self._v * SCALAR(s)
        return Vec3(r[0], r[1], r[2])

    def normalize(self) -> 'Vec3':
        """Return a unit-length copy. A zero vector yields NaN components."""
        return self.normalize_to(1.0)

    def normalize_to(self, length: float) -> 'Vec3':
        """
        Rescale this vector to the given length in a single step.

        Computes ``self * (length / |self|)`` rather than normalizing to unit
        length first and scaling afterwards. A zero-length vector produces
        NaN components; no exception is raised and numpy's floating-point
        warnings are suppressed.

        Parameters
        ----------
        length : float
            Target length. May be negative, which also flips the direction.

        Returns
        -------
        Vec3
            Rescaled vector.
        """
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            factor = np.float64(length) / np.float64(self.length())
            r = self._v.astype(np.float64) * factor
        return Vec3(r[0], r[1], r[2])

    def equals_with_epsilon(self, other: object, eps: float) -> bool:
        if not isinstance(other, Vec3):
            return False
        return precision.array_equals(self._v, other._v, eps)

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __add__(self, other: 'Vec3') -> 'Vec3':
        if isinstance(other, Vec3):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: 'Vec3') -> 'Vec3':
        if isinstance(other, Vec3):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Union[float, int]) -> 'Vec3':
        if isinstance(other, (int, float, np.floating)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> 'Vec3':
        if isinstance(other, (int, float, np.floating)):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> 'Vec3':
        return Vec3(-self._v[0], -self._v[1], -self._v[2])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return precision.array_equals(self._v, other._v, VEC_EPSILON)

    def __hash__(self) -> int:
        return hash(precision.hash_key(self._v))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vec3({self._v[0]}, {self._v[1]}, {self._v[2]})"
