"""Perspective (pinhole) camera.

In its local frame the camera sits at the origin and looks down -Z with +Y
up. The field of view is given as (horizontal, vertical) angles in radians.
For continuous pixel coordinates (x, y) the normalized offsets

    u = x / width - 0.5,    v = y / height - 0.5

are turned into the local direction (tan(u * fov_x), tan(v * fov_y), -1),
which the camera transform then places in world space.

Example:
    >>> import math
    >>> from facetracer.camera.perspective import Perspective
    >>> from facetracer.core.transform import Transform
    >>> cam = Perspective(
    ...     (320, 240),
    ...     (math.radians(90.0), math.radians(70.0)),
    ...     Transform.new((0.0, 1.8, 0.0)),
    ... )
    >>> ray = cam.pixel_ray(160.0, 120.0)  # Ray through image center
"""

from __future__ import annotations

import math

import numpy as np

from facetracer.camera.base import check_viewport, in_viewport
from facetracer.core.ray import Ray, Vec3, normalize
from facetracer.core.transform import Transform


class Perspective:
    """Pinhole camera with an independent horizontal and vertical field of view.

    Attributes:
        fov: (horizontal, vertical) field of view in radians.
        transform: Local-to-world placement of the camera.
    """

    def __init__(
        self,
        viewport: tuple[int, int],
        fov: tuple[float, float],
        transform: Transform,
    ) -> None:
        """Create a perspective camera.

        Raises:
            ValueError: If the viewport is empty or a field of view angle is
                not in (0, pi).
        """
        self._viewport = check_viewport(viewport)
        fov_x, fov_y = (float(a) for a in fov)
        for angle in (fov_x, fov_y):
            if not 0.0 < angle < math.pi:
                raise ValueError(f"Field of view must be in (0, pi) radians, got {angle}")
        self.fov = (fov_x, fov_y)
        self.transform = transform

    def viewport(self) -> tuple[int, int]:
        return self._viewport

    def set_viewport(self, viewport: tuple[int, int]) -> None:
        self._viewport = check_viewport(viewport)

    def eye_position(self) -> Vec3:
        return self.transform.translation

    def pixel_ray(self, x: float, y: float) -> Ray | None:
        if not in_viewport(x, y, self._viewport):
            return None
        width, height = self._viewport
        fov_x, fov_y = self.fov
        u = x / width - 0.5
        v = y / height - 0.5
        local = normalize(np.array((math.tan(u * fov_x), math.tan(v * fov_y), -1.0)))
        return Ray(
            origin=self.transform.translation,
            direction=self.transform.apply_vector(local),
        )

    def __repr__(self) -> str:
        return f"Perspective(viewport={self._viewport}, fov={self.fov})"
