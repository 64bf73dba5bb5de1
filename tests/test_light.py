"""Unit tests for area lights and their shading terms."""

import math

import numpy as np
import pytest


@pytest.fixture
def overhead_light(red_material):
    """1 x 1 light two units above the origin, facing down."""
    from facetracer.core.transform import Transform
    from facetracer.geometry.face import Face
    from facetracer.materials.light import LightMaterial
    from facetracer.scene.light import Light

    face = Face(1.0, 1.0, Transform.new((0.0, 0.0, 2.0), (math.pi, 0.0, 0.0)), red_material)
    return Light(face, LightMaterial.new((1.0, 0.5, 0.25), (1.0, 1.0, 1.0)))


class TestLightGeometry:
    """Tests for the light's face behaviour."""

    def test_faces_down(self, overhead_light):
        assert np.allclose(overhead_light.face.normal, [0.0, 0.0, -1.0])
        assert np.allclose(overhead_light.transform.translation, [0.0, 0.0, 2.0])

    def test_material_is_face_material(self, overhead_light, red_material):
        assert overhead_light.material is red_material

    def test_random_on_face(self, overhead_light, rng):
        for _ in range(50):
            p = overhead_light.random_on_face(rng)
            assert abs(p[2] - 2.0) < 1e-12
            assert abs(p[0]) <= 0.5 and abs(p[1]) <= 0.5

    def test_intersects(self, overhead_light):
        from facetracer.core.ray import Ray

        hit = overhead_light.intersects(Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)))
        assert hit.distance == pytest.approx(2.0)

    def test_equality_is_structural(self, overhead_light):
        assert overhead_light == overhead_light.copy()


class TestShading:
    """Tests for the diffuse and specular terms."""

    def test_diffuse_head_on(self, overhead_light, white_phong):
        from facetracer.core.ray import Ray

        shadow_ray = Ray.between((0.0, 0.0, 0.0), (0.0, 0.0, 2.0))
        c = overhead_light.shade_diffuse(np.array((0.0, 0.0, 1.0)), white_phong, shadow_ray)
        assert np.allclose(c, np.array((1.0, 0.5, 0.25)) / math.pi)

    def test_diffuse_follows_cosine(self, overhead_light, white_phong):
        from facetracer.core.ray import Ray

        shadow_ray = Ray((0.0, 0.0, 0.0), (1.0, 0.0, 1.0))
        c = overhead_light.shade_diffuse(np.array((0.0, 0.0, 1.0)), white_phong, shadow_ray)
        assert np.allclose(c, math.sqrt(0.5) * np.array((1.0, 0.5, 0.25)) / math.pi)

    def test_diffuse_zero_from_behind(self, overhead_light, white_phong):
        from facetracer.core.ray import Ray

        shadow_ray = Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
        c = overhead_light.shade_diffuse(np.array((0.0, 0.0, -1.0)), white_phong, shadow_ray)
        assert np.array_equal(c, [0.0, 0.0, 0.0])

    def test_specular_mirror_alignment(self, overhead_light, white_phong):
        """Test the normalized lobe when the eye sits on the mirror direction."""
        from facetracer.core.ray import Ray

        shadow_ray = Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
        eye = np.array((0.0, 0.0, 5.0))
        c = overhead_light.shade_specular(eye, np.array((0.0, 0.0, 1.0)), white_phong, shadow_ray)
        assert np.allclose(c, 3.0 / (2.0 * math.pi))

    def test_specular_away_from_lobe(self, overhead_light, white_phong):
        from facetracer.core.ray import Ray

        # Mirror direction is (-1, 0, 1); the eye is on the other side
        shadow_ray = Ray((0.0, 0.0, 0.0), (1.0, 0.0, 1.0))
        eye = np.array((5.0, 0.0, 0.0))
        c = overhead_light.shade_specular(eye, np.array((0.0, 0.0, 1.0)), white_phong, shadow_ray)
        assert np.array_equal(c, [0.0, 0.0, 0.0])

    def test_specular_is_clamped(self, overhead_light):
        from facetracer.core.ray import Ray
        from facetracer.materials.phong import Phong

        shiny = Phong((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 50.0)
        shadow_ray = Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
        eye = np.array((0.0, 0.0, 5.0))
        c = overhead_light.shade_specular(eye, np.array((0.0, 0.0, 1.0)), shiny, shadow_ray)
        assert np.array_equal(c, [1.0, 1.0, 1.0])
