"""Box primitive built from six faces.

In its local frame a box is centered on the origin with extents ``size`` along
X, Y and Z. It is decomposed into six Faces, each with an outward-pointing
normal. The face transforms are derived by placing each face on its side of the
local box and then applying the box's own transform, so they are recomputed
whenever the box transform changes.

Ray-box intersection tests the six faces independently and keeps the closest
hit. This is a brute-force six-plane test rather than a slab test.
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from facetracer.core.ray import Ray, Vec3, as_vec3
from facetracer.core.transform import Transform
from facetracer.geometry.face import Face, HitRecord, ray_face
from facetracer.materials.material import Material

FACE_NAMES = ("top", "bottom", "left", "right", "front", "back")


def _face_layout(size: Vec3) -> dict[str, tuple[float, float, Transform]]:
    """Local (width, height, placement) of each face of a box of the given size."""
    sx, sy, sz = size
    half_pi = math.pi / 2.0
    return {
        "top": (sx, sz, Transform.new((0.0, sy / 2.0, 0.0), (-half_pi, 0.0, 0.0))),
        "bottom": (sx, sz, Transform.new((0.0, -sy / 2.0, 0.0), (half_pi, 0.0, 0.0))),
        "left": (sz, sy, Transform.new((-sx / 2.0, 0.0, 0.0), (0.0, -half_pi, 0.0))),
        "right": (sz, sy, Transform.new((sx / 2.0, 0.0, 0.0), (0.0, half_pi, 0.0))),
        "front": (sx, sy, Transform.new((0.0, 0.0, sz / 2.0))),
        "back": (sx, sy, Transform.new((0.0, 0.0, -sz / 2.0), (0.0, math.pi, 0.0))),
    }


class Box:
    """A rectangular solid made of six faces.

    Attributes:
        size: Extents along the local X, Y and Z axes.
        transform: Local-to-world placement of the box center.
        material: Material shared by all six faces.
        faces: The six derived faces, in FACE_NAMES order.
    """

    __slots__ = ("size", "material", "_transform", "_local", "_faces")

    def __init__(self, size: npt.ArrayLike, transform: Transform, material: Material) -> None:
        """Create a box.

        Raises:
            ValueError: If any extent is not strictly positive.
        """
        size = as_vec3(size)
        if not np.all(size > 0.0):
            raise ValueError(f"Box extents must be positive, got {size.tolist()}")
        size.setflags(write=False)
        self.size = size
        self.material = material
        self._local = _face_layout(size)
        self._faces = {
            name: Face(w, h, placement, material) for name, (w, h, placement) in self._local.items()
        }
        self.transform = transform

    @property
    def transform(self) -> Transform:
        return self._transform

    @transform.setter
    def transform(self, transform: Transform) -> None:
        self._transform = transform
        for name, (_, _, placement) in self._local.items():
            self._faces[name].transform = placement.then(transform)

    @property
    def faces(self) -> tuple[Face, ...]:
        return tuple(self._faces[name] for name in FACE_NAMES)

    def face(self, name: str) -> Face:
        """Return one face by name (see FACE_NAMES)."""
        return self._faces[name]

    def intersects(self, ray: Ray) -> HitRecord | None:
        return ray_box(ray, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return bool(np.allclose(self.size, other.size)) and self._transform.approx_eq(
            other._transform
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Box(size={self.size.tolist()}, center={self._transform.translation.tolist()})"


def ray_box(ray: Ray, box: Box) -> HitRecord | None:
    """Test for ray-box intersection.

    Args:
        ray: The ray to test.
        box: The box to test against.

    Returns:
        The closest of the per-face hits, or None if no face is hit.
    """
    closest: HitRecord | None = None
    for face in box.faces:
        hit = ray_face(ray, face)
        if hit is not None and (closest is None or hit.distance < closest.distance):
            closest = hit
    return closest
