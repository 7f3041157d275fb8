"""
===============================================================================
QUATCORE - Quaternion Value Type
===============================================================================

Immutable single-precision quaternion for representing and composing 3D
rotations in graphics, animation and physics code. Quaternions avoid the
gimbal lock of Euler angles, compose by multiplication, and interpolate
smoothly along great-circle arcs (slerp).

Convention
----------
Scalar-first storage:

    q = [w, x, y, z] = w + x*i + y*j + z*k

where w is the scalar (real) part and [x, y, z] the vector (imaginary) part.
A unit quaternion rotates by angle theta about unit axis n when

    q = [cos(theta/2), sin(theta/2) * n]

Numerical Behaviour
-------------------
Components are stored as float32. Intermediate arithmetic is carried out in
float64 where it matters (Euler construction, products, slerp weights) and
rounded once on construction of the result.

Degenerate inputs are NOT rejected: inverting a zero quaternion, building
from a zero-length axis, or normalizing a zero quaternion yields inf/NaN
components without raising and without numpy warnings. Callers who want
fail-fast behaviour wrap results with ``quatcore.validation.ensure_finite``.

Unit length is never enforced. ``add`` and ``scale`` leave the unit sphere;
``to_mat4``, ``rotate`` and ``slerp`` only carry their geometric meaning for
unit inputs.

Euler Angle Convention
----------------------
``from_euler(pitch, yaw, roll)`` takes pitch about X, yaw about Y and roll
about Z, with roll applied outermost:

    q = q_z(roll) * q_y(yaw) * q_x(pitch)

References
----------
    [1] Shoemake, "Animating Rotation with Quaternion Curves", SIGGRAPH 1985.
    [2] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.
    [3] Diebel, "Representing Attitude: Euler Angles, Unit Quaternions, and
        Rotation Vectors", Stanford, 2006.

===============================================================================
"""

import logging
from typing import Union

import numpy as np

from quatcore.constants import SCALAR, QUAT_EPSILON, QUAT_DELTA
from quatcore import precision
from quatcore.vec3 import Vec3
from quatcore.mat4 import Mat4

logger = logging.getLogger(__name__)

# numpy floating-point error settings for the silent-degeneracy paths
_QUIET = dict(divide="ignore", invalid="ignore", over="ignore")


class Quaternion:
    """
    Immutable quaternion with float32 components.

    The raw constructor stores its arguments verbatim: no validation, no
    normalization. Use ``from_axis_angle`` or ``from_euler`` to obtain a
    unit rotation quaternion.

    Attributes
    ----------
    w : float
        Scalar (real) component.
    x : float
        First imaginary component (i-axis).
    y : float
        Second imaginary component (j-axis).
    z : float
        Third imaginary component (k-axis).

    Examples
    --------
    >>> q = Quaternion(3.0, 1.0, 0.0, 0.0)
    >>> str(q)
    '3.0 + 1.0i + 0.0j + 0.0k'
    >>> q_yaw = Quaternion.from_axis_angle(Vec3(0.0, 1.0, 0.0), np.pi / 2)
    >>> q_mid = QUAT_IDENT.slerp(q_yaw, 0.5)
    """

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        """
        Store the four components verbatim.

        Parameters
        ----------
        w : float
            Scalar part.
        x, y, z : float
            Vector part.
        """
        with np.errstate(**_QUIET):
            q = np.array([w, x, y, z], dtype=SCALAR)
        q.flags.writeable = False
        self._q = q

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def w(self) -> float:
        """Scalar (real) part of the quaternion."""
        return float(self._q[0])

    @property
    def x(self) -> float:
        """First imaginary component (i-axis)."""
        return float(self._q[1])

    @property
    def y(self) -> float:
        """Second imaginary component (j-axis)."""
        return float(self._q[2])

    @property
    def z(self) -> float:
        """Third imaginary component (k-axis)."""
        return float(self._q[3])

    @property
    def scalar(self) -> float:
        """Scalar part of the quaternion (alias for w)."""
        return self.w

    @property
    def vector(self) -> Vec3:
        """Vector (imaginary) part as a Vec3."""
        return Vec3(self._q[1], self._q[2], self._q[3])

    @property
    def components(self) -> np.ndarray:
        """
        Full quaternion as a float32 array [w, x, y, z].

        Returns
        -------
        np.ndarray
            Copy of the internal component array.
        """
        return self._q.copy()

    # =========================================================================
    # STATIC FACTORY METHODS
    # =========================================================================

    @staticmethod
    def identity() -> 'Quaternion':
        """
        Return the shared identity quaternion [1, 0, 0, 0].

        The identity is the multiplicative neutral element and represents
        zero rotation.
        """
        return QUAT_IDENT

    @staticmethod
    def from_scalar_vector(w: float, v: Union[Vec3, np.ndarray, list, tuple]) -> 'Quaternion':
        """
        Build a quaternion from a scalar part and a vector part.

        Equivalent to ``Quaternion(w, v.x, v.y, v.z)``. The vector's
        components are copied; no reference to ``v`` is kept.

        Parameters
        ----------
        w : float
            Scalar part.
        v : Vec3 or array-like
            Vector part with three components.
        """
        v = Vec3.of(v)
        return Quaternion(w, v.x, v.y, v.z)

    @staticmethod
    def from_axis_angle(axis: Union[Vec3, np.ndarray, list, tuple],
                        angle: float) -> 'Quaternion':
        """
        Create a rotation quaternion from an axis and an angle.

            q = [cos(angle/2), sin(angle/2) * axis / |axis|]

        The axis does not need to be normalized. It is rescaled directly to
        length sin(angle/2) in one step (``Vec3.normalize_to``), so a
        zero-length axis yields NaN vector components rather than an error.

        Parameters
        ----------
        axis : Vec3 or array-like
            Rotation axis with three components.
        angle : float
            Rotation angle in radians.

        Returns
        -------
        Quaternion
            Unit quaternion for a non-degenerate axis.
        """
        half_angle = angle / 2.0
        v = Vec3.of(axis).normalize_to(np.sin(half_angle))
        return Quaternion(np.cos(half_angle), v.x, v.y, v.z)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float) -> 'Quaternion':
        """
        Create a rotation quaternion from pitch/yaw/roll Euler angles.

        Pitch rotates about X, yaw about Y and roll about Z, with roll
        applied outermost:

            q = q_z(roll) * q_y(yaw) * q_x(pitch)

        where each single-axis quaternion is

            q_x(a) = [cos(a/2), sin(a/2), 0, 0]
            q_y(a) = [cos(a/2), 0, sin(a/2), 0]
            q_z(a) = [cos(a/2), 0, 0, sin(a/2)]

        Parameters
        ----------
        pitch : float
            Rotation about the X-axis (radians).
        yaw : float
            Rotation about the Y-axis (radians).
        roll : float
            Rotation about the Z-axis (radians).

        Returns
        -------
        Quaternion
            Unit quaternion equivalent to the Euler sequence.

        Notes
        -----
        The half-angle terms and their products are evaluated in float64;
        only the four final components are rounded to float32.
        """
        half_pitch = np.float64(pitch) / 2.0
        half_yaw = np.float64(yaw) / 2.0
        half_roll = np.float64(roll) / 2.0

        cp = np.cos(half_pitch)
        sp = np.sin(half_pitch)
        cy = np.cos(half_yaw)
        sy = np.sin(half_yaw)
        cr = np.cos(half_roll)
        sr = np.sin(half_roll)

        w = cr * cy * cp + sr * sy * sp
        x = cr * cy * sp - sr * sy * cp
        y = cr * sy * cp + sr * cy * sp
        z = sr * cy * cp - cr * sy * sp

        return Quaternion(w, x, y, z)

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def norm(self) -> float:
        """
        Euclidean norm sqrt(w^2 + x^2 + y^2 + z^2).

        Returns
        -------
        float
            Magnitude of the quaternion as a 4-vector.
        """
        with np.errstate(**_QUIET):
            return float(np.sqrt(np.dot(self._q, self._q)))

    def dot(self, other: 'Quaternion') -> float:
        """Four-component dot product, w included."""
        with np.errstate(**_QUIET):
            return float(np.dot(self._q.astype(np.float64),
                                other._q.astype(np.float64)))

    def conjugate(self) -> 'Quaternion':
        """
        Return the conjugate [w, -x, -y, -z].

        For unit quaternions the conjugate equals the inverse and represents
        the reverse rotation.
        """
        return Quaternion(self._q[0], -self._q[1], -self._q[2], -self._q[3])

    def add(self, other: 'Quaternion') -> 'Quaternion':
        """Componentwise sum. The result is generally not unit length."""
        with np.errstate(**_QUIET):
            s = self._q + other._q
        return Quaternion(s[0], s[1], s[2], s[3])

    def scale(self, s: float) -> 'Quaternion':
        """Multiply every component by the scalar ``s``."""
        with np.errstate(**_QUIET):
            r = self._q.astype(np.float64) * s
        return Quaternion(r[0], r[1], r[2], r[3])

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        Quaternion multiplication is NOT commutative. For rotation
        quaternions the product applies ``other`` first, then ``self``.

            (a1 + b1*i + c1*j + d1*k) * (a2 + b2*i + c2*j + d2*k) =

            (a1*a2 - b1*b2 - c1*c2 - d1*d2) +
            (a1*b2 + b1*a2 + c1*d2 - d1*c2) i +
            (a1*c2 - b1*d2 + c1*a2 + d1*b2) j +
            (a1*d2 + b1*c2 - c1*b2 + d1*a2) k

        Parameters
        ----------
        other : Quaternion
            The right-hand quaternion in the product.

        Returns
        -------
        Quaternion
            The Hamilton product.
        """
        a1, b1, c1, d1 = self._q.astype(np.float64)
        a2, b2, c2, d2 = other._q.astype(np.float64)

        with np.errstate(**_QUIET):
            w = a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2
            x = a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2
            y = a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2
            z = a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2

        return Quaternion(w, x, y, z)

    def inverse(self) -> 'Quaternion':
        """
        Return the multiplicative inverse.

            q^{-1} = [w, -x, -y, -z] / (w^2 + x^2 + y^2 + z^2)

        A zero quaternion produces inf/NaN components; nothing is raised.

        Returns
        -------
        Quaternion
            Inverse such that q * q^{-1} = identity for non-zero q.
        """
        with np.errstate(**_QUIET):
            d = np.dot(self._q, self._q)
            inv = np.array([self._q[0], -self._q[1], -self._q[2], -self._q[3]],
                           dtype=SCALAR) / d
        return Quaternion(inv[0], inv[1], inv[2], inv[3])

    def divide(self, other: 'Quaternion') -> 'Quaternion':
        """
        Left division: ``self.inverse().multiply(other)``.

        Note the operand order. This is q^{-1} * other, not
        q * other^{-1}.
        """
        return self.inverse().multiply(other)

    def normalize(self) -> 'Quaternion':
        """
        Return a unit-magnitude copy.

        A zero quaternion yields NaN components.
        """
        with np.errstate(**_QUIET):
            n = np.sqrt(np.dot(self._q, self._q))
            q = self._q / n
        return Quaternion(q[0], q[1], q[2], q[3])

    # =========================================================================
    # ROTATION OPERATIONS
    # =========================================================================

    def rotate(self, v: Union[Vec3, np.ndarray, list, tuple]) -> Vec3:
        """
        Rotate a 3D vector by this (unit) quaternion.

        Equivalent to the sandwich product q * [0, v] * q*, evaluated with
        the cheaper two-cross-product form:

            t  = 2 * (u x v)
            v' = v + w * t + u x t

        where u = [x, y, z] is the vector part.

        Parameters
        ----------
        v : Vec3 or array-like
            Vector to rotate.

        Returns
        -------
        Vec3
            Rotated vector.
        """
        v = Vec3.of(v).components.astype(np.float64)
        u = self._q[1:].astype(np.float64)

        with np.errstate(**_QUIET):
            t = 2.0 * np.cross(u, v)
            r = v + self._q[0] * t + np.cross(u, t)
        return Vec3(r[0], r[1], r[2])

    def to_mat4(self) -> Mat4:
        """
        Convert to a 4x4 homogeneous rotation matrix.

        The rotation block is assembled as

            | 1-(yy+zz)  xy-wz      xz+wy      0 |
            | xy+wz      1-(xx+zz)  yz-wx      0 |
            | xz-wy      yz+wx      1-(xx+yy)  0 |
            | 0          0          0          1 |

        from the doubled cross terms (xx = x * 2x, wz = w * 2z, ...) and
        then transposed. The returned matrix therefore rotates row vectors
        (``v @ M``), and its column-major buffer is the column-vector
        rotation matrix expected by OpenGL.

        Only meaningful for unit quaternions; other input silently yields a
        non-orthonormal matrix.

        Returns
        -------
        Mat4
            Rotation matrix with zero translation.
        """
        w, x, y, z = self._q.astype(np.float64)

        with np.errstate(**_QUIET):
            # Doubled components
            x2 = x + x
            y2 = y + y
            z2 = z + z

            xx = x * x2
            xy = x * y2
            xz = x * z2
            yy = y * y2
            yz = y * z2
            zz = z * z2
            wx = w * x2
            wy = w * y2
            wz = w * z2

            m = Mat4(1.0 - (yy + zz), xy - wz, xz + wy, 0.0,
                     xy + wz, 1.0 - (xx + zz), yz - wx, 0.0,
                     xz - wy, yz + wx, 1.0 - (xx + yy), 0.0,
                     0.0, 0.0, 0.0, 1.0)
        return m.transpose()

    # =========================================================================
    # INTERPOLATION
    # =========================================================================

    def slerp(self, to: 'Quaternion', t: float) -> 'Quaternion':
        """
        Spherical linear interpolation from this quaternion toward ``to``.

            slerp(q1, q2, t) = q1 * sin((1-t)*omega) / sin(omega)
                             + q2 * sin(t*omega) / sin(omega)

        where cos(omega) = q1 . q2.

        Parameters
        ----------
        to : Quaternion
            Target quaternion (reached at t=1).
        t : float
            Interpolation parameter. Not clamped: values outside [0, 1]
            extrapolate along the same arc.

        Returns
        -------
        Quaternion
            Interpolated quaternion. Not renormalized.

        Notes
        -----
        - If q1 . q2 < 0 the target is negated so that the shorter of the
          two arcs is followed (q and -q are the same rotation).
        - When 1 - cos(omega) <= QUAT_DELTA the inputs are nearly identical
          and sin(omega) is too small to divide by, so the weights fall back
          to the linear blend (1 - t, t).
        """
        cosom = self.dot(to)
        to1 = to._q.astype(np.float64)

        # Shorter arc
        if cosom < 0.0:
            cosom = -cosom
            to1 = -to1

        with np.errstate(**_QUIET):
            if (1.0 - cosom) > QUAT_DELTA:
                omega = np.arccos(cosom)
                sinom = np.sin(omega)
                scale0 = np.sin((1.0 - t) * omega) / sinom
                scale1 = np.sin(t * omega) / sinom
            else:
                logger.debug("slerp: 1 - cosom = %.3e within QUAT_DELTA, "
                             "using linear blend", 1.0 - cosom)
                scale0 = 1.0 - t
                scale1 = t

            r = scale0 * self._q.astype(np.float64) + scale1 * to1

        return Quaternion(r[0], r[1], r[2], r[3])

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def equals(self, other: object) -> bool:
        """Componentwise equality within QUAT_EPSILON."""
        return self.equals_with_epsilon(other, QUAT_EPSILON)

    def equals_with_epsilon(self, other: object, eps: float) -> bool:
        """
        Componentwise equality within a caller-supplied tolerance.

        Parameters
        ----------
        other : object
            Value to compare. Anything but a Quaternion compares unequal.
        eps : float
            Absolute tolerance per component.
        """
        if not isinstance(other, Quaternion):
            return False
        return precision.array_equals(self._q, other._q, eps)

    def is_unit(self, tolerance: float = QUAT_EPSILON) -> bool:
        """True if |q| is within ``tolerance`` of 1."""
        return abs(self.norm() - 1.0) <= tolerance

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: Union['Quaternion', float, int]) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar -> componentwise scaling
        """
        if isinstance(other, Quaternion):
            return self.multiply(other)
        elif isinstance(other, (int, float, np.floating)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> 'Quaternion':
        """Right-multiplication by a scalar: scalar * Quaternion."""
        if isinstance(other, (int, float, np.floating)):
            return self.scale(other)
        return NotImplemented

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.add(-other)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        """
        Negate all components.

        -q represents the same rotation as q.
        """
        return Quaternion(-self._q[0], -self._q[1], -self._q[2], -self._q[3])

    def __eq__(self, other: object) -> bool:
        """
        Equality comparison with tolerance.

        Unlike a bitwise comparison, two quaternions whose components each
        differ by at most QUAT_EPSILON are equal. q and -q are NOT equal here
        even though they encode the same rotation.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash based on components rounded to the QUAT_EPSILON grid."""
        return hash(precision.hash_key(self._q))

    def __str__(self) -> str:
        """
        Diagnostic form ``"{w} + {x}i + {y}j + {z}k"``.

        Components use the shortest text that round-trips the float32
        value, e.g. ``3.0 + 1.0i + 0.0j + 0.0k``.
        """
        w, x, y, z = (str(c) for c in self._q)
        return f"{w} + {x}i + {y}j + {z}k"

    def __repr__(self) -> str:
        """
        Unambiguous string representation for debugging.

        Format: Quaternion(w=..., x=..., y=..., z=...)
        """
        return (f"Quaternion(w={self.w:+.8f}, x={self.x:+.8f}, "
                f"y={self.y:+.8f}, z={self.z:+.8f})")


QUAT_IDENT = Quaternion(1.0, 0.0, 0.0, 0.0)
"""Identity quaternion [1, 0, 0, 0] representing no rotation."""
