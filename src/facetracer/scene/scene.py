"""Scene aggregate: objects, camera and background.

The Scene owns everything a render reads: the background color painted where
primary rays escape, the list of Objects, and the Camera. It is built once and
is not mutated while rendering, so a single Scene is shared by every row task
of a parallel render.

Closest-hit queries are a linear scan over all objects; there is no spatial
acceleration structure.

Example:
    >>> from facetracer.camera.orthographic import Orthographic
    >>> from facetracer.core.ray import Ray
    >>> from facetracer.core.transform import Transform
    >>> from facetracer.geometry.face import Face
    >>> from facetracer.materials.simple import Simple
    >>> from facetracer.scene.scene import Scene
    >>> wall = Face(3.0, 3.0, Transform.new((0.0, 0.0, -5.0)), Simple((1.0, 0.0, 0.0)))
    >>> cam = Orthographic((5, 5), (5.0, 5.0), Transform.identity())
    >>> scene = Scene(background=(0.3, 0.3, 0.3), objects=[wall], camera=cam)
    >>> scene.intersects(Ray((0.0, 0.0, 0.0), (0.0, 0.0, -1.0))).distance
    5.0
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy.typing as npt

from facetracer.camera.base import Camera
from facetracer.core.color import Color, as_color
from facetracer.core.ray import Ray
from facetracer.scene.intersection import Intersection, closest_intersection
from facetracer.scene.light import Light
from facetracer.scene.objects import Object, Surface, as_object


class Scene:
    """Objects, camera and background color of a render."""

    __slots__ = ("_background", "_objects", "_camera", "_lights")

    def __init__(
        self,
        background: npt.ArrayLike,
        objects: Iterable[Object | Light | Surface],
        camera: Camera,
    ) -> None:
        """Create a scene.

        Args:
            background: RGB color for rays that hit nothing.
            objects: Scene members; bare Lights, Faces and Boxes are wrapped
                in Objects.
            camera: The camera used to generate primary rays.

        Raises:
            TypeError: If the camera does not provide the Camera methods or an
                object has an unsupported type.
        """
        if not isinstance(camera, Camera):
            raise TypeError(f"{type(camera).__name__} does not implement the Camera interface")
        self._background = as_color(background)
        self._background.setflags(write=False)
        self._objects = tuple(as_object(o) for o in objects)
        self._camera = camera
        self._lights = tuple(o for o in self._objects if o.is_light)

    @property
    def background(self) -> Color:
        return self._background

    @property
    def objects(self) -> tuple[Object, ...]:
        return self._objects

    @property
    def camera(self) -> Camera:
        return self._camera

    def lights(self) -> list[Light]:
        """Return every light in the scene, in insertion order."""
        return [o.as_light() for o in self._lights]  # type: ignore[misc]

    def light_objects(self) -> tuple[Object, ...]:
        """Return the Objects wrapping the scene's lights."""
        return self._lights

    def intersects(self, ray: Ray) -> Intersection | None:
        """Find the closest object hit by the ray, if any."""
        return closest_intersection(obj.intersects(ray) for obj in self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return (
            f"Scene(objects={len(self._objects)}, lights={len(self._lights)}, "
            f"camera={self._camera!r})"
        )
