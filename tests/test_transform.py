"""Unit tests for placement transforms."""

import math

import numpy as np
import pytest


class TestTransformConstruction:
    """Tests for building transforms."""

    def test_identity(self):
        from facetracer.core.transform import Transform

        t = Transform.identity()
        assert np.allclose(t.apply_point((1.0, 2.0, 3.0)), [1.0, 2.0, 3.0])
        assert np.allclose(t.translation, [0.0, 0.0, 0.0])

    def test_translation_only(self):
        from facetracer.core.transform import Transform

        t = Transform.new((1.0, -2.0, 3.0))
        assert np.allclose(t.apply_point((0.0, 0.0, 0.0)), [1.0, -2.0, 3.0])
        # Directions ignore translation
        assert np.allclose(t.apply_vector((0.0, 0.0, 1.0)), [0.0, 0.0, 1.0])

    def test_rotation_about_y(self):
        """Test that a quarter turn about Y maps +Z onto +X."""
        from facetracer.core.transform import Transform

        t = Transform.new((0.0, 0.0, 0.0), (0.0, math.pi / 2.0, 0.0))
        assert np.allclose(t.apply_vector((0.0, 0.0, 1.0)), [1.0, 0.0, 0.0])

    def test_rotation_about_x(self):
        """Test that a quarter turn about X maps +Z onto -Y."""
        from facetracer.core.transform import Transform

        t = Transform.new((0.0, 0.0, 0.0), (math.pi / 2.0, 0.0, 0.0))
        assert np.allclose(t.apply_vector((0.0, 0.0, 1.0)), [0.0, -1.0, 0.0])

    def test_rotation_matrix_is_orthonormal(self):
        from facetracer.core.transform import rotation_matrix

        r = rotation_matrix((0.3, -1.2, 0.7))
        assert np.allclose(r @ r.T, np.eye(3))
        assert abs(np.linalg.det(r) - 1.0) < 1e-12


class TestTransformInverse:
    """Tests for inverse mapping and degenerate matrices."""

    def test_inverse_round_trip(self):
        from facetracer.core.transform import Transform

        t = Transform.new((1.0, 2.0, 3.0), (0.4, 0.5, -0.6))
        p = np.array((-3.0, 0.5, 7.0))
        assert np.allclose(t.inverse_apply_point(t.apply_point(p)), p)
        assert np.allclose(t.inverse().apply_point(t.apply_point(p)), p)

    def test_zero_scale_is_fatal(self):
        """Test that a non-invertible transform fails at construction."""
        from facetracer.core.transform import DegenerateTransformError, Transform

        m = np.eye(4)
        m[2, 2] = 0.0
        with pytest.raises(DegenerateTransformError):
            Transform.from_matrix(m)

    def test_degenerate_error_is_value_error(self):
        from facetracer.core.transform import DegenerateTransformError

        assert issubclass(DegenerateTransformError, ValueError)

    def test_non_affine_matrix_rejected(self):
        from facetracer.core.transform import Transform

        m = np.eye(4)
        m[3, 0] = 1.0
        with pytest.raises(ValueError):
            Transform(m)

    def test_wrong_shape_rejected(self):
        from facetracer.core.transform import Transform

        with pytest.raises(ValueError):
            Transform(np.eye(3))

    def test_normal_matrix(self):
        """Test the inverse transpose for rigid and scaled transforms."""
        from facetracer.core.transform import Transform

        rigid = Transform.new((1.0, 2.0, 3.0), (0.2, -0.3, 0.4))
        assert np.allclose(rigid.normal_matrix, rigid.linear)

        scaled = Transform.from_matrix(np.diag((2.0, 4.0, 1.0, 1.0)))
        assert np.allclose(scaled.normal_matrix, np.diag((0.5, 0.25, 1.0)))


class TestTransformComposition:
    """Tests for composition and comparison."""

    def test_then_applies_self_first(self):
        """Test that a.then(b) rotates locally, then places with b."""
        from facetracer.core.transform import Transform

        local = Transform.new((0.0, 0.0, 1.0))
        placement = Transform.new((10.0, 0.0, 0.0), (0.0, math.pi / 2.0, 0.0))
        combined = local.then(placement)
        expected = placement.apply_point(local.apply_point((0.0, 0.0, 0.0)))
        assert np.allclose(combined.apply_point((0.0, 0.0, 0.0)), expected)
        assert np.allclose(expected, [11.0, 0.0, 0.0])

    def test_approx_equality(self):
        from facetracer.core.transform import Transform

        a = Transform.new((1.0, 0.0, 0.0), (0.0, 0.1, 0.0))
        b = Transform.new((1.0 + 1e-12, 0.0, 0.0), (0.0, 0.1, 0.0))
        c = Transform.new((2.0, 0.0, 0.0))
        assert a == b
        assert a != c
