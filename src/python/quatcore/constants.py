"""
===============================================================================
QUATCORE - Numeric Constants
===============================================================================
Central repository for the tolerances and scalar type shared by the
quaternion, vector and matrix value types.

All value types store their components as single-precision floats, which
is what graphics pipelines upload to the GPU. Tolerances are sized for
float32 round-off, not float64.
===============================================================================
"""

import numpy as np


# =============================================================================
# SCALAR TYPE
# =============================================================================
SCALAR = np.float32                     # Working component type

# =============================================================================
# ANGLE CONVERSION
# =============================================================================
DEG2RAD = np.pi / 180.0                 # Degrees -> radians
RAD2DEG = 180.0 / np.pi                 # Radians -> degrees

# =============================================================================
# COMPARISON TOLERANCES
# =============================================================================
QUAT_EPSILON = 1e-5                     # Componentwise quaternion equality
VEC_EPSILON = 1e-5                      # Componentwise Vec3 equality
MAT_EPSILON = 1e-5                      # Elementwise Mat4 equality

# =============================================================================
# INTERPOLATION
# =============================================================================
# Below this angular separation (1 - cos(omega)) slerp switches to a plain
# linear blend, since sin(omega) is too close to zero to divide by.
QUAT_DELTA = 0.001

# =============================================================================
# HASHING
# =============================================================================
# Components are rounded to this many decimals before hashing, matching the
# 1e-5 comparison grid above.
HASH_DECIMALS = 5
