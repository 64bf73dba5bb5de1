"""Material capability shared by all reflective surfaces.

Every surface owns a Material. The renderer reads four quantities from it:

    ambient_color   added unconditionally, even when no light is visible
    diffuse_color   scales the Lambertian term of each visible light
    specular_color  scales the normalized Phong lobe of each visible light
    shininess       Phong exponent (>= 0)

Materials are immutable values, safe to share between rendering threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from facetracer.core.color import Color


class Material(ABC):
    """Reflectance description of a surface."""

    @property
    @abstractmethod
    def ambient_color(self) -> Color: ...

    @property
    @abstractmethod
    def diffuse_color(self) -> Color: ...

    @property
    @abstractmethod
    def specular_color(self) -> Color: ...

    @property
    @abstractmethod
    def shininess(self) -> float: ...

    @property
    def is_glossy(self) -> bool:
        """Whether the material reflects anything specularly."""
        return bool(self.specular_color.any())
