"""Orthographic camera.

All primary rays are parallel to the camera's local -Z axis. Their origins are
spread over a ``size = (width, height)`` window, in world units, centered on
the camera position and lying in the camera's local XY plane.
"""

from __future__ import annotations

import numpy as np

from facetracer.camera.base import check_viewport, in_viewport
from facetracer.core.ray import Ray, Vec3, normalize
from facetracer.core.transform import Transform

_FORWARD = np.array((0.0, 0.0, -1.0))


class Orthographic:
    """Parallel-projection camera.

    Attributes:
        size: World-space (width, height) of the view window.
        transform: Local-to-world placement of the camera.
    """

    def __init__(
        self,
        viewport: tuple[int, int],
        size: tuple[float, float],
        transform: Transform,
    ) -> None:
        """Create an orthographic camera.

        Raises:
            ValueError: If the viewport or the view window is empty.
        """
        self._viewport = check_viewport(viewport)
        w, h = (float(s) for s in size)
        if not (w > 0.0 and h > 0.0):
            raise ValueError(f"View window must be positive, got {w} x {h}")
        self.size = (w, h)
        self.transform = transform

    def viewport(self) -> tuple[int, int]:
        return self._viewport

    def set_viewport(self, viewport: tuple[int, int]) -> None:
        self._viewport = check_viewport(viewport)

    def eye_position(self) -> Vec3:
        return self.transform.translation

    def direction(self) -> Vec3:
        """World-space direction shared by every primary ray."""
        return normalize(self.transform.apply_vector(_FORWARD))

    def pixel_ray(self, x: float, y: float) -> Ray | None:
        if not in_viewport(x, y, self._viewport):
            return None
        width, height = self._viewport
        u = (x / width - 0.5) * self.size[0]
        v = (y / height - 0.5) * self.size[1]
        return Ray(origin=self.transform.apply_point((u, v, 0.0)), direction=self.direction())

    def __repr__(self) -> str:
        return f"Orthographic(viewport={self._viewport}, size={self.size})"
