"""Rectangular face primitive with ray-face intersection.

A face is a width x height rectangle. In its local frame it lies in the XY
plane, is centered on the origin, and its normal is +Z. A Transform places the
local frame in world space. The world normal is +Z mapped by the inverse
transpose of the linear part, so it stays perpendicular to the face under
scaling and shear as well as under rotation.

Ray-face intersection uses the parametric plane test:
1. Find where the ray meets the plane containing the face
2. Map that point into the face's local frame and check the rectangle bounds

Faces are not back-face culled: a ray arriving from either side of the plane
produces a hit, as long as the hit lies in front of the ray origin.

Example:
    >>> from facetracer.core.ray import Ray
    >>> from facetracer.core.transform import Transform
    >>> from facetracer.geometry.face import Face, ray_face
    >>> from facetracer.materials.simple import Simple
    >>> face = Face(3.0, 3.0, Transform.new((0.0, 0.0, -5.0)), Simple((1.0, 0.0, 0.0)))
    >>> hit = ray_face(Ray((0.0, 0.0, 0.0), (0.0, 0.0, -1.0)), face)
    >>> hit.distance
    5.0
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from facetracer.core.ray import EPSILON, Ray, Vec3, dot, length, normalize
from facetracer.core.transform import Transform
from facetracer.materials.material import Material

_LOCAL_Z = np.array((0.0, 0.0, 1.0))
_LOCAL_ORIGIN = np.array((0.0, 0.0, 0.0))

# Largest local-frame distance from the face plane accepted for a hit
PLANE_TOLERANCE = 1e-7


class HitRecord(NamedTuple):
    """Raw result of a ray-geometry intersection.

    Attributes:
        position: World-space hit point.
        distance: Euclidean distance from the ray origin to the hit point.
        normal: Unit surface normal of the struck face (not flipped toward
            the ray).
    """

    position: Vec3
    distance: float
    normal: Vec3


class Face:
    """A finite planar rectangle.

    Attributes:
        width: Extent along the local X axis.
        height: Extent along the local Y axis.
        transform: Local-to-world placement.
        material: Material used to shade the face.
    """

    __slots__ = ("width", "height", "material", "_transform", "_normal", "_center")

    def __init__(
        self,
        width: float,
        height: float,
        transform: Transform,
        material: Material,
    ) -> None:
        """Create a face.

        Raises:
            ValueError: If width or height is not strictly positive.
        """
        width = float(width)
        height = float(height)
        if not (width > 0.0 and height > 0.0):
            raise ValueError(f"Face extents must be positive, got {width} x {height}")
        self.width = width
        self.height = height
        self.material = material
        self.transform = transform

    @property
    def transform(self) -> Transform:
        return self._transform

    @transform.setter
    def transform(self, transform: Transform) -> None:
        self._transform = transform
        self._normal = normalize(transform.normal_matrix @ _LOCAL_Z)
        self._center = transform.apply_point(_LOCAL_ORIGIN)

    @property
    def normal(self) -> Vec3:
        """Unit world-space normal (local +Z mapped by the normal matrix)."""
        return self._normal

    @property
    def center(self) -> Vec3:
        """World-space position of the face center."""
        return self._center

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains_local(self, local: Vec3) -> bool:
        """Check whether a local-frame point lies inside the rectangle.

        Bounds are closed: points exactly on an edge are inside.
        """
        return abs(local[0]) <= self.width / 2.0 and abs(local[1]) <= self.height / 2.0

    def random_on_face(self, rng: np.random.Generator) -> Vec3:
        """Sample a point uniformly over the face, in world space.

        Args:
            rng: Random number generator owned by the calling task.
        """
        w = self.width / 2.0
        h = self.height / 2.0
        x = rng.uniform(-w, w)
        y = rng.uniform(-h, h)
        return self._transform.apply_point((x, y, 0.0))

    def intersects(self, ray: Ray) -> HitRecord | None:
        return ray_face(ray, self)

    def copy(self) -> Face:
        return Face(self.width, self.height, self._transform, self.material)

    def __eq__(self, other: object) -> bool:
        # Geometry only, the material does not take part
        if not isinstance(other, Face):
            return NotImplemented
        return (
            math.isclose(self.width, other.width, rel_tol=1e-9, abs_tol=1e-12)
            and math.isclose(self.height, other.height, rel_tol=1e-9, abs_tol=1e-12)
            and self._transform.approx_eq(other._transform)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Face(width={self.width}, height={self.height}, "
            f"center={self._center.tolist()}, normal={self._normal.tolist()})"
        )


def ray_face(ray: Ray, face: Face) -> HitRecord | None:
    """Test for ray-face intersection.

    Args:
        ray: The ray to test. Its direction need not be normalized.
        face: The face to test against.

    Returns:
        The hit record, or None when the ray is parallel to the face plane,
        the plane lies behind the ray origin, or the plane hit falls outside
        the rectangle.
    """
    normal = face.normal
    d = dot(ray.direction, normal)
    if abs(d) < EPSILON:
        return None

    t = dot(face.center - ray.origin, normal) / d
    if t < 0.0:
        return None

    position = ray.origin + t * ray.direction
    local = face.transform.inverse_apply_point(position)
    if abs(local[2]) > PLANE_TOLERANCE or not face.contains_local(local):
        return None

    return HitRecord(position=position, distance=length(position - ray.origin), normal=normal)
