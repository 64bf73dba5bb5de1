"""Direct-lighting integrator with optional glossy reflection bounces.

For each primary ray the integrator finds the closest hit and:

- paints the background color if nothing is hit;
- returns a light's diffuse intensity if the ray strikes a light directly;
- otherwise shades the surface: its ambient color, plus for every light in
  the scene the Phong diffuse and specular terms of a uniformly sampled point
  on that light, provided a shadow ray toward the point reaches that same
  light unobstructed;
- and, while the bounce budget lasts, adds a glossy reflection: one ray cast
  in a cone around the mirror direction, weighted by the specular color.

Shadows are hard for a single sample. Soft shadows come from re-sampling the
light position for every pixel sample and averaging.

All randomness is drawn from the Generator passed in by the caller.

Example:
    >>> import numpy as np
    >>> from facetracer.core.integrator import ray_energy
    >>> color = ray_energy(scene, ray, bounces=0, rng=np.random.default_rng(7))
"""

from __future__ import annotations

import math

import numpy as np

from facetracer.core.color import Color
from facetracer.core.onb import random_in_cone
from facetracer.core.ray import Ray, Vec3, dot, normalize, reflect
from facetracer.scene.intersection import Intersection
from facetracer.scene.objects import Object
from facetracer.scene.scene import Scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Offset applied to secondary ray origins along the normal to avoid the
# shaded surface occluding itself through rounding error
SHADOW_EPSILON = 1e-6

# Half-angle of the cone glossy reflection rays are drawn from
REFLECTION_CONE_ANGLE = math.radians(30.0)

# Hard ceiling on the reflection recursion depth
MAX_BOUNCES = 16


def offset_origin(position: Vec3, normal: Vec3, toward: Vec3) -> Vec3:
    """Nudge a surface point off the surface, on the side ``toward`` points to."""
    side = normal if dot(normal, toward) >= 0.0 else -normal
    return position + SHADOW_EPSILON * side


# =============================================================================
# Visibility
# =============================================================================


def light_visible(scene: Scene, light_object: Object, shadow_ray: Ray) -> bool:
    """Check that the closest hit along a shadow ray is the target light.

    Any other object, including another light, blocks the light.
    """
    inter = scene.intersects(shadow_ray)
    return inter is not None and inter.object == light_object


def direct_lighting(scene: Scene, intersect: Intersection, rng: np.random.Generator) -> Color:
    """Ambient plus the diffuse and specular contribution of every visible light.

    Args:
        scene: The scene being rendered.
        intersect: Hit on a reflective surface.
        rng: Random number generator owned by the calling task.

    Returns:
        Linear RGB radiance at the hit point (not clamped).
    """
    material = intersect.object.material
    normal = intersect.normal
    eye = scene.camera.eye_position()
    color = np.array(material.ambient_color, dtype=np.float64)

    for light_object in scene.light_objects():
        light = light_object.as_light()
        target = light.random_on_face(rng)
        direction = target - intersect.position
        if dot(normal, direction) <= 0.0:
            # Light is behind the surface
            continue

        origin = offset_origin(intersect.position, normal, direction)
        shadow_ray = Ray.between(origin, target)
        if not light_visible(scene, Object.from_light(light), shadow_ray):
            continue

        color += light.shade_diffuse(normal, material, shadow_ray)
        color += light.shade_specular(eye, normal, material, shadow_ray)

    return color


# =============================================================================
# Ray Tracing
# =============================================================================


def reflection_ray(ray: Ray, intersect: Intersection, rng: np.random.Generator) -> Ray | None:
    """Sample a glossy reflection ray leaving the hit point.

    The direction is drawn uniformly from a cone around the mirror reflection
    of the incoming direction. Returns None if the sample points into the
    surface.
    """
    incoming = normalize(ray.direction)
    normal = intersect.normal
    if dot(normal, incoming) > 0.0:
        # Struck from the back side
        normal = -normal

    mirror = reflect(-incoming, normal)
    direction = random_in_cone(mirror, REFLECTION_CONE_ANGLE, rng)
    if dot(direction, normal) <= 0.0:
        return None
    return Ray(origin=offset_origin(intersect.position, normal, direction), direction=direction)


def ray_energy(scene: Scene, ray: Ray, bounces: int, rng: np.random.Generator) -> Color:
    """Compute the radiance carried back along a ray.

    Args:
        scene: The scene being rendered.
        ray: The ray to trace.
        bounces: Remaining glossy reflection bounces (>= 0).
        rng: Random number generator owned by the calling task.

    Returns:
        Linear RGB radiance (not clamped).

    Raises:
        ValueError: If bounces is negative or above MAX_BOUNCES.
    """
    if not 0 <= bounces <= MAX_BOUNCES:
        raise ValueError(f"Bounce count must be in [0, {MAX_BOUNCES}], got {bounces}")

    intersect = scene.intersects(ray)
    if intersect is None:
        return np.array(scene.background, dtype=np.float64)

    light = intersect.object.as_light()
    if light is not None:
        # Lights are painted flat with their diffuse intensity
        return np.array(light.light_material.diffuse_intensity, dtype=np.float64)

    color = direct_lighting(scene, intersect, rng)

    material = intersect.object.material
    if bounces > 0 and material.is_glossy:
        refl = reflection_ray(ray, intersect, rng)
        if refl is not None:
            color += material.specular_color * ray_energy(scene, refl, bounces - 1, rng)

    return color
