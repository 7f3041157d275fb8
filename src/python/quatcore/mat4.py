"""
4x4 single-precision matrix.

``Mat4`` is the output type of ``Quaternion.to_mat4``. Elements are given
and stored in row-major order; ``to_buffer`` produces the column-major
float32 layout that OpenGL-style APIs (``glUniformMatrix4fv`` with
``transpose=False``) expect.
"""

import numpy as np

from quatcore.constants import SCALAR, MAT_EPSILON
from quatcore import precision


class Mat4:
    """
    Immutable 4x4 matrix with float32 elements.

    Parameters
    ----------
    *values : float
        Exactly sixteen scalars in row-major order:
        ``m00, m01, m02, m03, m10, ..., m33``.

    Raises
    ------
    ValueError
        If the number of scalars is not sixteen.
    """

    def __init__(self, *values: float) -> None:
        if len(values) != 16:
            raise ValueError(f"Mat4 needs 16 scalars, got {len(values)}")
        m = np.array(values, dtype=SCALAR).reshape(4, 4)
        m.flags.writeable = False
        self._m = m

    @staticmethod
    def identity() -> 'Mat4':
        return Mat4(1.0, 0.0, 0.0, 0.0,
                    0.0, 1.0, 0.0, 0.0,
                    0.0, 0.0, 1.0, 0.0,
                    0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_array(array) -> 'Mat4':
        """Build a Mat4 from a 4x4 array-like in row-major order."""
        arr = np.asarray(array, dtype=SCALAR)
        if arr.shape != (4, 4):
            raise ValueError(f"Mat4 needs a 4x4 array, got shape {arr.shape}")
        return Mat4(*arr.ravel())

    def get(self, row: int, col: int) -> float:
        return float(self._m[row, col])

    def transpose(self) -> 'Mat4':
        return Mat4(*self._m.T.ravel())

    def multiply(self, other: 'Mat4') -> 'Mat4':
        """Matrix product ``self @ other``."""
        return Mat4(*(self._m @ other._m).ravel())

    def to_array(self) -> np.ndarray:
        """Row-major copy as a (4, 4) float32 array."""
        return self._m.copy()

    def to_buffer(self) -> np.ndarray:
        """Column-major flat float32 array of 16 elements for GPU upload."""
        return np.ascontiguousarray(self._m.T).ravel()

    def equals_with_epsilon(self, other: object, eps: float) -> bool:
        if not isinstance(other, Mat4):
            return False
        return precision.array_equals(self._m, other._m, eps)

    def __matmul__(self, other: 'Mat4') -> 'Mat4':
        if isinstance(other, Mat4):
            return self.multiply(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return precision.array_equals(self._m, other._m, MAT_EPSILON)

    def __hash__(self) -> int:
        return hash(precision.hash_key(self._m.ravel()))

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(str(v) for v in row) + "]" for row in self._m
        )
        return f"Mat4({rows})"
