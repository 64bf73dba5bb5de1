"""Ray data structure and vector utilities.

This module provides the fundamental Ray dataclass and the small set of
vector helpers the tracer needs. Points and vectors are plain NumPy arrays of
shape (3,) with dtype float64, so every helper here also accepts anything
``np.asarray`` can turn into such an array.

Example:
    >>> from facetracer.core.ray import Ray, vec3
    >>> ray = Ray(origin=vec3(0.0, 0.0, 0.0), direction=vec3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    array([ 0.,  0., -5.])
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Type alias for 3D points and vectors
Vec3 = npt.NDArray[np.float64]

# Tolerance used for "is this effectively zero" checks on vector quantities
EPSILON = 1e-9


def vec3(x: float, y: float, z: float) -> Vec3:
    """Create a 3D vector as a float64 NumPy array."""
    return np.array((x, y, z), dtype=np.float64)


def as_vec3(v: npt.ArrayLike) -> Vec3:
    """Convert a sequence to a float64 vector of shape (3,).

    Raises:
        ValueError: If the input does not hold exactly three components.
    """
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {arr.shape}")
    return arr


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length; code that needs a direction normalizes it itself.
    """

    origin: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", as_vec3(self.origin))
        object.__setattr__(self, "direction", as_vec3(self.direction))

    @classmethod
    def between(cls, start: npt.ArrayLike, end: npt.ArrayLike) -> Ray:
        """Create the ray leaving ``start`` and passing through ``end``.

        The direction is ``end - start`` and is left unnormalized, so
        ``ray.at(1.0) == end``.
        """
        start = as_vec3(start)
        return cls(origin=start, direction=as_vec3(end) - start)

    def at(self, t: float) -> Vec3:
        """Compute the point origin + t * direction."""
        return self.origin + t * self.direction

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"


# =============================================================================
# Vector Utility Functions
# =============================================================================


def length(v: Vec3) -> float:
    """Compute the Euclidean length of a vector."""
    return float(np.sqrt(np.dot(v, v)))


def length_squared(v: Vec3) -> float:
    """Compute the squared length of a vector."""
    return float(np.dot(v, v))


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v. If v is zero-length,
        a zero vector is returned.
    """
    n = length(v)
    if n < EPSILON:
        return np.zeros(3, dtype=np.float64)
    return v / n


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product a . b as a Python float."""
    return float(np.dot(a, b))


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product a x b."""
    return np.cross(a, b)


def reflect(direction: Vec3, normal: Vec3) -> Vec3:
    """Mirror a direction about a normal: 2 (d . n) n - d.

    Both vectors should be unit length. Unlike the incident-ray convention,
    ``direction`` points away from the surface (toward the light or the
    viewer) and so does the result.
    """
    return 2.0 * dot(direction, normal) * normal - direction


def near_zero(v: Vec3, tol: float = 1e-8) -> bool:
    """Check if a vector is near zero in all components."""
    return bool(np.all(np.abs(v) < tol))
