"""Scene module: objects, intersections and the scene aggregate.

Components:
    light: Rectangular area light and its shading terms
    objects: Object union (Light | Surface) with kind-based dispatch
    intersection: Intersection records and closest-hit resolution
    scene: Scene aggregate (background, objects, camera)
    cornell_box: Ready-made demo scene

Scene data flow for one camera sample:
    camera.pixel_ray -> scene.intersects -> object material / light shading
    -> scene.intersects (shadow ray) -> accumulate
"""

from .intersection import Intersection, closest_intersection
from .light import Light
from .objects import Object, ObjectKind, Surface, as_object
from .scene import Scene

__all__ = [
    "Intersection",
    "closest_intersection",
    "Light",
    "Object",
    "ObjectKind",
    "Surface",
    "as_object",
    "Scene",
]
