"""Cornell-box style demo scene.

The scene is a room built from five large grey walls (left, right, back,
ceiling and floor) holding two boxes, a blue cube and a taller red box turned
45 degrees, lit by a small square area light just below the ceiling. The
camera stands at (0, 1.8, 0) looking down -Z with a 90 x 70 degree field of
view.

Example:
    >>> from facetracer.scene.cornell_box import create_cornell_box_scene
    >>> scene = create_cornell_box_scene(320, 240)
    >>> len(scene.lights())
    1
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from facetracer.camera.perspective import Perspective
from facetracer.core.transform import Transform
from facetracer.geometry.box import Box
from facetracer.geometry.face import Face
from facetracer.materials.light import LightMaterial
from facetracer.materials.phong import Phong
from facetracer.scene.light import Light
from facetracer.scene.objects import Object
from facetracer.scene.scene import Scene

RGB = tuple[float, float, float]


@dataclass
class CornellBoxParams:
    """Parameters for configuring the demo scene.

    All parameters default to the classic configuration.

    Attributes:
        ambient: Ambient color shared by all materials.
        wall_color: Diffuse and specular color of the walls.
        blue_box_color: Diffuse color of the cube.
        red_box_color: Diffuse color of the tall box.
        shininess: Phong exponent of every material.
        light_diffuse: Diffuse intensity of the area light.
        light_specular: Specular intensity of the area light.
        light_size: Side length of the square area light.
        background: Color of rays that escape the room.
        fov_degrees: (horizontal, vertical) camera field of view.
    """

    ambient: RGB = (0.1, 0.1, 0.1)
    wall_color: RGB = (0.6, 0.6, 0.6)
    blue_box_color: RGB = (0.1, 0.2, 1.0)
    red_box_color: RGB = (1.0, 0.2, 0.1)
    shininess: float = 2.0
    light_diffuse: RGB = (0.6, 0.6, 0.6)
    light_specular: RGB = (0.25, 0.25, 0.25)
    light_size: float = 0.5
    background: RGB = (0.3, 0.3, 0.3)
    fov_degrees: tuple[float, float] = (90.0, 70.0)


# Walls are large enough to close the room as seen from the camera
WALL_SIZE = 50.0


def create_cornell_box_scene(
    width: int = 320,
    height: int = 240,
    params: CornellBoxParams | None = None,
) -> Scene:
    """Create the demo scene.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        params: Scene parameters (defaults to CornellBoxParams()).

    Returns:
        The Scene, including its perspective camera.
    """
    p = params if params is not None else CornellBoxParams()
    half_pi = math.pi / 2.0

    grey = Phong(p.ambient, p.wall_color, p.wall_color, p.shininess)
    blue = Phong(p.ambient, p.blue_box_color, (0.4, 0.4, 0.4), p.shininess)
    red = Phong(p.ambient, p.red_box_color, (0.6, 0.6, 0.6), p.shininess)

    def wall(translation: tuple[float, float, float], axis_angle: tuple[float, float, float]) -> Face:
        return Face(WALL_SIZE, WALL_SIZE, Transform.new(translation, axis_angle), grey)

    walls = [
        wall((-2.0, 0.0, -2.0), (0.0, half_pi, 0.0)),  # left
        wall((2.0, 0.0, -2.0), (0.0, -half_pi, 0.0)),  # right
        wall((0.0, 0.0, -5.0), (0.0, 0.0, 0.0)),  # back
        wall((0.0, 3.0, 0.0), (half_pi, 0.0, 0.0)),  # ceiling
        wall((0.0, 0.0, -2.5), (-half_pi, 0.0, 0.0)),  # floor
    ]
    boxes = [
        Box((1.0, 1.0, 1.0), Transform.new((1.0, 0.5, -4.0)), blue),
        Box((1.0, 2.0, 1.0), Transform.new((-1.0, 1.0, -4.0), (0.0, math.pi / 4.0, 0.0)), red),
    ]
    light = Light(
        Face(
            p.light_size,
            p.light_size,
            Transform.new((0.0, 2.99, -3.0), (half_pi, 0.0, 0.0)),
            grey,
        ),
        LightMaterial.new(p.light_diffuse, p.light_specular),
    )

    camera = Perspective(
        (width, height),
        (math.radians(p.fov_degrees[0]), math.radians(p.fov_degrees[1])),
        Transform.new((0.0, 1.8, 0.0)),
    )

    objects = [Object.from_surface(s) for s in (*walls, *boxes)]
    objects.append(Object.from_light(light))
    return Scene(background=p.background, objects=objects, camera=camera)
