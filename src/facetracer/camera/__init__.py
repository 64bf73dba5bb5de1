"""Camera module for primary ray generation.

Components:
    base: Camera capability (viewport, pixel_ray, eye_position)
    perspective: Pinhole camera with horizontal/vertical field of view
    orthographic: Parallel-projection camera

Pixel coordinates are continuous:
    x in [0, width): left to right across the image
    y in [0, height): bottom to top across the image
"""

from .base import Camera
from .orthographic import Orthographic
from .perspective import Perspective

__all__ = [
    "Camera",
    "Orthographic",
    "Perspective",
]
