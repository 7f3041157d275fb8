"""
quatcore - Quaternion algebra for 3D rotations.

Core Components
---------------
Quaternion : Immutable float32 quaternion value type
QUAT_IDENT : Shared identity quaternion
Vec3 : 3-component vector consumed and produced by Quaternion
Mat4 : 4x4 matrix produced by Quaternion.to_mat4

Examples
--------
>>> from quatcore import Quaternion, Vec3, QUAT_IDENT
>>> q = Quaternion.from_axis_angle(Vec3(0.0, 0.0, 1.0), 1.5707963)
>>> half_way = QUAT_IDENT.slerp(q, 0.5)
>>> m = q.to_mat4()
"""

__version__ = "0.1.0"

from quatcore.constants import (
    MAT_EPSILON,
    QUAT_DELTA,
    QUAT_EPSILON,
    VEC_EPSILON,
)
from quatcore.mat4 import Mat4
from quatcore.quaternion import QUAT_IDENT, Quaternion
from quatcore.vec3 import Vec3

# Error handling
from quatcore.validation import NonFiniteQuaternionError, ensure_finite, is_finite

# Configuration
from quatcore.config import QuatcoreConfig, configure_logging, load_config

__all__ = [
    # Version
    "__version__",
    # Core
    "Quaternion",
    "QUAT_IDENT",
    "Vec3",
    "Mat4",
    # Constants
    "QUAT_EPSILON",
    "QUAT_DELTA",
    "VEC_EPSILON",
    "MAT_EPSILON",
    # Validation
    "NonFiniteQuaternionError",
    "ensure_finite",
    "is_finite",
    # Configuration
    "QuatcoreConfig",
    "load_config",
    "configure_logging",
]
