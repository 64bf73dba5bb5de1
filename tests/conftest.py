"""Pytest configuration for raytracer tests.

Shared fixtures: a seeded random generator and the small building blocks
(materials, faces, cameras) most test modules need.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so sampling-based tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def red_material():
    from facetracer.materials.simple import Simple

    return Simple((1.0, 0.0, 0.0))


@pytest.fixture
def white_phong():
    """Phong material with a small ambient term and full diffuse/specular."""
    from facetracer.materials.phong import Phong

    return Phong(
        ambient=(0.1, 0.1, 0.1),
        diffuse=(1.0, 1.0, 1.0),
        specular=(1.0, 1.0, 1.0),
        shininess=1.0,
    )


@pytest.fixture
def unit_face(red_material):
    """3 x 3 face five units down the -Z axis, facing the origin."""
    from facetracer.core.transform import Transform
    from facetracer.geometry.face import Face

    return Face(3.0, 3.0, Transform.new((0.0, 0.0, -5.0)), red_material)


@pytest.fixture
def ortho_camera():
    """5x5 pixel orthographic camera at the origin looking down -Z."""
    from facetracer.camera.orthographic import Orthographic
    from facetracer.core.transform import Transform

    return Orthographic((5, 5), (5.0, 5.0), Transform.identity())
