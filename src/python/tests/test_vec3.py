"""
===============================================================================
QUATCORE - Vec3 Test Suite
===============================================================================
Tests for the three-component vector used for rotation axes and rotated
vectors: construction, products, fused rescaling and degenerate input.
===============================================================================
"""

import sys
import os
import warnings

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quatcore.vec3 import Vec3


@pytest.fixture
def v345():
    return Vec3(3.0, 0.0, 4.0)


class TestConstruction:

    def test_components(self, v345):
        assert (v345.x, v345.y, v345.z) == (3.0, 0.0, 4.0)
        assert v345.components.dtype == np.float32

    def test_of_sequence(self):
        assert Vec3.of([1, 2, 3]) == Vec3(1.0, 2.0, 3.0)
        assert Vec3.of(np.array([1.0, 2.0, 3.0])) == Vec3(1.0, 2.0, 3.0)

    def test_of_returns_same_vec3(self, v345):
        assert Vec3.of(v345) is v345

    @pytest.mark.parametrize("bad", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0], [[1.0, 2.0, 3.0]]])
    def test_of_wrong_shape(self, bad):
        with pytest.raises(ValueError):
            Vec3.of(bad)

    def test_iter(self, v345):
        x, y, z = v345
        assert (x, y, z) == (3.0, 0.0, 4.0)

    def test_immutable(self, v345):
        c = v345.components
        c[0] = -1.0
        assert v345.x == 3.0
        with pytest.raises(AttributeError):
            v345.x = 1.0


class TestOperations:

    def test_length(self, v345):
        assert v345.length() == pytest.approx(5.0)

    def test_dot_and_cross(self):
        x = Vec3(1.0, 0.0, 0.0)
        y = Vec3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vec3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vec3(0.0, 0.0, -1.0)

    def test_arithmetic(self, v345):
        assert v345 + Vec3(1.0, 1.0, 1.0) == Vec3(4.0, 1.0, 5.0)
        assert v345 - Vec3(1.0, 1.0, 1.0) == Vec3(2.0, -1.0, 3.0)
        assert v345 * 2 == Vec3(6.0, 0.0, 8.0)
        assert 0.5 * v345 == Vec3(1.5, 0.0, 2.0)
        assert -v345 == Vec3(-3.0, 0.0, -4.0)

    def test_normalize(self, v345):
        n = v345.normalize()
        assert n == Vec3(0.6, 0.0, 0.8)
        assert n.length() == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("target", [10.0, 0.5, 0.0])
    def test_normalize_to(self, v345, target):
        r = v345.normalize_to(target)
        assert_allclose(r.length(), target, atol=1e-6)
        assert_allclose(r.components, v345.components * target / 5.0, atol=1e-6)

    def test_normalize_to_negative_flips(self, v345):
        assert v345.normalize_to(-5.0) == -v345

    def test_large_components(self):
        """Squares beyond float32 range still give the right length."""
        v = Vec3(1e20, 0.0, -1e20)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert v.length() == pytest.approx(np.sqrt(2.0) * 1e20, rel=1e-6)
            n = v.normalize()
        assert n == Vec3(np.sqrt(0.5), 0.0, -np.sqrt(0.5))

    def test_normalize_to_zero_vector_is_nan(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            r = Vec3(0.0, 0.0, 0.0).normalize_to(1.0)
        assert np.all(np.isnan(r.components))


class TestEquality:

    def test_tolerance(self):
        assert Vec3(1.0, 2.0, 3.0) == Vec3(1.000001, 2.0, 3.0)
        assert Vec3(1.0, 2.0, 3.0) != Vec3(1.01, 2.0, 3.0)
        assert Vec3(1.0, 2.0, 3.0).equals_with_epsilon(Vec3(1.01, 2.0, 3.0), 0.1)

    def test_other_types(self):
        assert Vec3(1.0, 2.0, 3.0) != (1.0, 2.0, 3.0)
        assert not Vec3(1.0, 2.0, 3.0).equals_with_epsilon([1.0, 2.0, 3.0], 1.0)

    def test_hash(self):
        assert len({Vec3(1.0, 2.0, 3.0), Vec3(1.0, 2.0, 3.0)}) == 1

    def test_repr(self):
        assert repr(Vec3(1.0, 2.5, -3.0)) == "Vec3(1.0, 2.5, -3.0)"
