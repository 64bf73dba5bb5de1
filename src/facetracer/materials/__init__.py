"""Materials module for surface reflectance and light emission.

Components:
    material: Material capability (ambient, diffuse, specular, shininess)
    simple: Flat, ambient-only material
    phong: Phong material with energy-normalized diffuse and specular terms
    light: LightMaterial, the emission description of an area light
"""

from .light import LightMaterial
from .material import Material
from .phong import Phong
from .simple import Simple

__all__ = [
    "Material",
    "Simple",
    "Phong",
    "LightMaterial",
]
