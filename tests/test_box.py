"""Unit tests for the Box primitive and ray-box intersection."""

import math

import numpy as np
import pytest


@pytest.fixture
def cube(red_material):
    """Unit cube centered at (5, 5, 5)."""
    from facetracer.core.transform import Transform
    from facetracer.geometry.box import Box

    return Box((1.0, 1.0, 1.0), Transform.new((5.0, 5.0, 5.0)), red_material)


class TestBoxFaces:
    """Tests for the face decomposition."""

    def test_six_faces(self, cube):
        from facetracer.geometry.box import FACE_NAMES

        assert len(cube.faces) == 6
        assert FACE_NAMES == ("top", "bottom", "left", "right", "front", "back")

    @pytest.mark.parametrize(
        "name,normal",
        [
            ("top", (0.0, 1.0, 0.0)),
            ("bottom", (0.0, -1.0, 0.0)),
            ("left", (-1.0, 0.0, 0.0)),
            ("right", (1.0, 0.0, 0.0)),
            ("front", (0.0, 0.0, 1.0)),
            ("back", (0.0, 0.0, -1.0)),
        ],
    )
    def test_normals_point_outward(self, cube, name, normal):
        face = cube.face(name)
        assert np.allclose(face.normal, normal, atol=1e-12)
        assert np.allclose(face.center, np.array((5.0, 5.0, 5.0)) + 0.5 * np.array(normal))

    def test_face_extents_follow_size(self, red_material):
        from facetracer.core.transform import Transform
        from facetracer.geometry.box import Box

        box = Box((1.0, 2.0, 3.0), Transform.identity(), red_material)
        assert (box.face("top").width, box.face("top").height) == (1.0, 3.0)
        assert (box.face("left").width, box.face("left").height) == (3.0, 2.0)
        assert (box.face("front").width, box.face("front").height) == (1.0, 2.0)
        assert np.allclose(box.face("left").center, [-0.5, 0.0, 0.0])
        assert np.allclose(box.face("top").center, [0.0, 1.0, 0.0])

    def test_transform_change_moves_faces(self, cube):
        from facetracer.core.transform import Transform

        cube.transform = Transform.new((0.0, 0.0, 0.0), (0.0, math.pi / 2.0, 0.0))
        # The front face (+Z) now looks along +X
        assert np.allclose(cube.face("front").normal, [1.0, 0.0, 0.0])
        assert np.allclose(cube.face("front").center, [0.5, 0.0, 0.0])

    def test_non_positive_size_rejected(self, red_material):
        from facetracer.core.transform import Transform
        from facetracer.geometry.box import Box

        with pytest.raises(ValueError):
            Box((1.0, 0.0, 1.0), Transform.identity(), red_material)


class TestRayBox:
    """Tests for ray_box."""

    def test_hit_back_face_from_origin(self, cube):
        """Test a ray toward the cube hitting the face nearest the origin."""
        from facetracer.core.ray import Ray
        from facetracer.geometry.box import ray_box

        hit = ray_box(Ray((5.0, 5.0, 0.0), (0.0, 0.0, 1.0)), cube)
        assert hit is not None
        assert hit.distance == pytest.approx(4.5)
        assert np.allclose(hit.position, [5.0, 5.0, 4.5])
        assert np.allclose(hit.normal, [0.0, 0.0, -1.0], atol=1e-12)

    def test_miss(self, cube):
        from facetracer.core.ray import Ray
        from facetracer.geometry.box import ray_box

        assert ray_box(Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)), cube) is None

    def test_from_inside_hits_far_face(self, cube):
        from facetracer.core.ray import Ray
        from facetracer.geometry.box import ray_box

        hit = ray_box(Ray((5.0, 5.0, 5.0), (1.0, 0.0, 0.0)), cube)
        assert hit.distance == pytest.approx(0.5)
        assert np.allclose(hit.normal, [1.0, 0.0, 0.0], atol=1e-12)

    def test_rotated_box(self, red_material):
        """Test a box turned 45 degrees presenting a corner."""
        from facetracer.core.ray import Ray
        from facetracer.core.transform import Transform
        from facetracer.geometry.box import Box, ray_box

        box = Box((1.0, 1.0, 1.0), Transform.new((0.0, 0.0, 0.0), (0.0, math.pi / 4.0, 0.0)), red_material)
        hit = ray_box(Ray((0.1, 0.0, 10.0), (0.0, 0.0, -1.0)), box)
        assert hit is not None
        assert hit.distance == pytest.approx(10.0 - (math.sqrt(2.0) / 2.0 - 0.1))
        assert np.allclose(hit.normal, [math.sqrt(0.5), 0.0, math.sqrt(0.5)])

    def test_closest_of_face_hits(self, cube, rng):
        """Test that the box hit is the minimum over its faces."""
        from facetracer.core.ray import Ray
        from facetracer.geometry.box import ray_box
        from facetracer.geometry.face import ray_face

        for _ in range(100):
            origin = rng.uniform(-2.0, 12.0, size=3)
            direction = np.array((5.0, 5.0, 5.0)) + rng.uniform(-0.7, 0.7, size=3) - origin
            ray = Ray(origin, direction)
            face_hits = [h for h in (ray_face(ray, f) for f in cube.faces) if h is not None]
            hit = ray_box(ray, cube)
            if not face_hits:
                assert hit is None
            else:
                assert hit.distance == min(h.distance for h in face_hits)

    def test_equality(self, cube, white_phong):
        from facetracer.core.transform import Transform
        from facetracer.geometry.box import Box

        assert cube == Box((1.0, 1.0, 1.0), Transform.new((5.0, 5.0, 5.0)), white_phong)
        assert cube != Box((1.0, 1.0, 2.0), Transform.new((5.0, 5.0, 5.0)), white_phong)
