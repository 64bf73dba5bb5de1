"""Tests for the demo scene."""

import numpy as np
import pytest


class TestCornellBoxScene:
    """Tests for create_cornell_box_scene."""

    def test_contents(self):
        from facetracer.geometry.box import Box
        from facetracer.geometry.face import Face
        from facetracer.scene.cornell_box import create_cornell_box_scene

        scene = create_cornell_box_scene(32, 24)
        surfaces = [o.as_surface() for o in scene.objects if o.is_surface]
        assert len(scene) == 8
        assert len(scene.lights()) == 1
        assert sum(isinstance(s, Face) for s in surfaces) == 5
        assert sum(isinstance(s, Box) for s in surfaces) == 2
        assert scene.camera.viewport() == (32, 24)

    def test_light_faces_down(self):
        from facetracer.scene.cornell_box import create_cornell_box_scene

        light = create_cornell_box_scene().lights()[0]
        assert np.allclose(light.face.normal, [0.0, -1.0, 0.0])
        assert np.allclose(light.transform.translation, [0.0, 2.99, -3.0])

    def test_camera_looks_into_room(self):
        """Test that the center ray hits the back wall."""
        from facetracer.scene.cornell_box import create_cornell_box_scene

        scene = create_cornell_box_scene(32, 24)
        inter = scene.intersects(scene.camera.pixel_ray(16.0, 12.0))
        assert inter is not None
        assert inter.position[2] == pytest.approx(-5.0)

    def test_params_override(self):
        from facetracer.scene.cornell_box import CornellBoxParams, create_cornell_box_scene

        scene = create_cornell_box_scene(16, 12, CornellBoxParams(background=(1.0, 0.0, 0.0)))
        assert np.array_equal(scene.background, [1.0, 0.0, 0.0])

    def test_small_render(self):
        """Test an end-to-end render: lit, not saturated, not empty."""
        from facetracer.core.renderer import Renderer, RenderSettings
        from facetracer.preview.export import mean_brightness
        from facetracer.scene.cornell_box import create_cornell_box_scene

        image = Renderer(create_cornell_box_scene(16, 12), RenderSettings(seed=0)).render()
        assert image.shape == (12, 16, 3)
        brightness = mean_brightness(image)
        assert np.all(brightness > 0.1)
        assert np.all(brightness < 0.95)
        assert len(np.unique(image.reshape(-1, 3), axis=0)) > 4
