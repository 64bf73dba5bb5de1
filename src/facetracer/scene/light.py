"""Rectangular area light.

A Light is a Face that emits. Its footprint is sampled uniformly to cast
shadow rays, and it evaluates the diffuse and specular contribution it makes
to a surface point once a shadow ray has confirmed the point can see it.

Shading terms, for a shadow ray with unit direction l, surface normal n,
surface material m and light intensities (I_d, I_s):

    diffuse  = I_d * max(0, l.n) / pi * m.diffuse_color
    specular = clamp01(I_s * max(0, r.v)^s * (s + 2) / (2 pi) * m.specular_color)

with r = 2 (l.n) n - l, v the unit direction from the shaded point to the eye
and s = m.shininess.
"""

from __future__ import annotations

import math

import numpy as np

from facetracer.core.color import Color, clamp01
from facetracer.core.ray import Ray, Vec3, dot, normalize, reflect
from facetracer.core.transform import Transform
from facetracer.geometry.face import Face, HitRecord, ray_face
from facetracer.materials.light import LightMaterial
from facetracer.materials.material import Material

INV_PI = 1.0 / math.pi


class Light:
    """An emitting face.

    Attributes:
        face: The emitting area. Its material is the light's nominal surface
            material, used only by code that treats the light as geometry.
        light_material: Emission intensities.
    """

    __slots__ = ("face", "light_material")

    def __init__(self, face: Face, light_material: LightMaterial) -> None:
        self.face = face
        self.light_material = light_material

    @property
    def transform(self) -> Transform:
        return self.face.transform

    @property
    def material(self) -> Material:
        return self.face.material

    def random_on_face(self, rng: np.random.Generator) -> Vec3:
        """Sample a point uniformly over the light's footprint."""
        return self.face.random_on_face(rng)

    def intersects(self, ray: Ray) -> HitRecord | None:
        return ray_face(ray, self.face)

    def shade_diffuse(self, normal: Vec3, material: Material, shadow_ray: Ray) -> Color:
        """Diffuse contribution of this light at the shadow ray origin.

        Args:
            normal: Unit surface normal at the shaded point.
            material: Material of the shaded surface.
            shadow_ray: Ray from the shaded point toward the sampled light point.
        """
        l = normalize(shadow_ray.direction)
        d = max(0.0, dot(l, normal))
        return self.light_material.diffuse_intensity * (d * INV_PI) * material.diffuse_color

    def shade_specular(
        self,
        eye: Vec3,
        normal: Vec3,
        material: Material,
        shadow_ray: Ray,
    ) -> Color:
        """Specular contribution of this light at the shadow ray origin.

        Args:
            eye: Camera eye position.
            normal: Unit surface normal at the shaded point.
            material: Material of the shaded surface.
            shadow_ray: Ray from the shaded point toward the sampled light point.
        """
        shininess = material.shininess
        l = normalize(shadow_ray.direction)
        r = reflect(l, normal)
        v = normalize(eye - shadow_ray.origin)
        d = max(0.0, dot(r, v)) ** shininess
        norm_factor = (shininess + 2.0) / (2.0 * math.pi)
        c = self.light_material.specular_intensity * (d * norm_factor) * material.specular_color
        return clamp01(c)

    def copy(self) -> Light:
        return Light(self.face.copy(), self.light_material)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Light):
            return NotImplemented
        return self.face == other.face and self.light_material == other.light_material

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Light(face={self.face!r})"
