"""Orthonormal bases and cone sampling.

An OrthoNormalBase is a right-handed frame (u, v, w) built around one given
direction. The renderer uses it to turn a direction sampled around the local
+w axis into a world-space direction, e.g. for glossy reflection rays.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from facetracer.core.ray import EPSILON, Vec3, as_vec3, cross, length, normalize

_X = np.array((1.0, 0.0, 0.0))
_Y = np.array((0.0, 1.0, 0.0))


def _perpendicular(n: Vec3) -> Vec3:
    """Return a unit vector perpendicular to the unit vector n."""
    p = cross(n, _X)
    if length(p) < 1e-6:
        p = cross(n, _Y)
    return normalize(p)


@dataclass(frozen=True, eq=False)
class OrthoNormalBase:
    """A right-handed orthonormal frame.

    Attributes:
        u: First axis.
        v: Second axis.
        w: Third axis, u x v.
    """

    u: Vec3
    v: Vec3
    w: Vec3

    @classmethod
    def from_u(cls, u: Vec3) -> OrthoNormalBase:
        un = cls._unit(u)
        v = _perpendicular(un)
        return cls(u=un, v=v, w=cross(un, v))

    @classmethod
    def from_v(cls, v: Vec3) -> OrthoNormalBase:
        vn = cls._unit(v)
        w = _perpendicular(vn)
        return cls(u=cross(vn, w), v=vn, w=w)

    @classmethod
    def from_w(cls, w: Vec3) -> OrthoNormalBase:
        """Build a frame whose w axis is the given direction."""
        wn = cls._unit(w)
        u = _perpendicular(wn)
        return cls(u=u, v=cross(wn, u), w=wn)

    @staticmethod
    def _unit(d: Vec3) -> Vec3:
        d = as_vec3(d)
        if length(d) < EPSILON:
            raise ValueError("Cannot build an orthonormal basis from a zero vector")
        return normalize(d)

    def local_to_world(self, local: Vec3) -> Vec3:
        """Transform a direction given in (u, v, w) coordinates to world space."""
        return local[0] * self.u + local[1] * self.v + local[2] * self.w


def random_in_cone(axis: Vec3, half_angle: float, rng: np.random.Generator) -> Vec3:
    """Sample a unit direction uniformly inside a cone.

    Directions are uniform over the spherical cap of the given half-angle
    around ``axis``.

    Args:
        axis: Cone axis (need not be normalized).
        half_angle: Cone half-angle in radians, in [0, pi].
        rng: Random number generator owned by the calling task.

    Returns:
        A unit vector whose angle to ``axis`` is at most ``half_angle``.
    """
    onb = OrthoNormalBase.from_w(axis)
    r1, r2 = rng.random(2)
    cos_theta = 1.0 - r1 * (1.0 - math.cos(half_angle))
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    phi = 2.0 * math.pi * r2
    local = np.array((math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, cos_theta))
    return onb.local_to_world(local)
