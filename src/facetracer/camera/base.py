"""Camera capability consumed by the renderer.

A camera maps continuous pixel coordinates to primary rays. Pixel coordinates
follow the image-plane convention:

    x in [0, width):  left to right
    y in [0, height): bottom to top

so pixel (px, py) covers [px, px + 1) x [py, py + 1). Coordinates outside the
viewport have no ray.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from facetracer.core.ray import Ray, Vec3


@runtime_checkable
class Camera(Protocol):
    """Maps pixel coordinates to world-space rays."""

    def viewport(self) -> tuple[int, int]:
        """Return the image size (width, height) in pixels."""
        ...

    def pixel_ray(self, x: float, y: float) -> Ray | None:
        """Return the primary ray through continuous pixel coordinates (x, y).

        Returns None if the coordinates fall outside the viewport.
        """
        ...

    def eye_position(self) -> Vec3:
        """Return the world-space position used as the viewer for shading."""
        ...


def check_viewport(viewport: tuple[int, int]) -> tuple[int, int]:
    """Validate a (width, height) pair.

    Raises:
        ValueError: If either dimension is not a positive integer.
    """
    width, height = (int(v) for v in viewport)
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport dimensions must be positive, got {width}x{height}")
    return width, height


def in_viewport(x: float, y: float, viewport: tuple[int, int]) -> bool:
    width, height = viewport
    return 0.0 <= x < width and 0.0 <= y < height
