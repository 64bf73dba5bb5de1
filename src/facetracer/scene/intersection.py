"""Intersection results and closest-hit resolution.

An Intersection is what a scene query returns: the hit point, its distance
along the ray, the unit normal of the struck geometry and the Object that was
struck. It borrows the Object from the Scene and is discarded once the pixel
sample that produced it has been shaded.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from facetracer.core.ray import Vec3

if TYPE_CHECKING:
    from facetracer.scene.objects import Object


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray hit against a scene object.

    Attributes:
        position: World-space hit point.
        distance: Distance from the ray origin (>= 0).
        normal: Unit surface normal at the hit point.
        object: The struck scene object.
    """

    position: Vec3
    distance: float
    normal: Vec3
    object: Object


def closest_intersection(intersections: Iterable[Intersection | None]) -> Intersection | None:
    """Select the minimum-distance hit.

    Args:
        intersections: Per-object results; None entries are misses.

    Returns:
        The closest hit, or None if there are no hits at all. Among exactly
        equal distances the first one in iteration order wins.
    """
    closest: Intersection | None = None
    for inter in intersections:
        if inter is not None and (closest is None or inter.distance < closest.distance):
            closest = inter
    return closest
