"""Emission description of an area light."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from facetracer.core.color import Color, as_color


@dataclass(frozen=True, eq=False)
class LightMaterial:
    """Emission intensities of a light.

    Unlike a surface Material this does not describe reflectance. A camera ray
    that strikes the light sees ``diffuse_intensity`` directly, and shading
    uses both intensities to light other surfaces.

    Attributes:
        diffuse_intensity: RGB intensity feeding the diffuse term.
        specular_intensity: RGB intensity feeding the specular term.
    """

    diffuse_intensity: Color
    specular_intensity: Color

    def __post_init__(self) -> None:
        for name in ("diffuse_intensity", "specular_intensity"):
            value = as_color(getattr(self, name))
            if np.any(value < 0.0):
                raise ValueError(f"Light {name} must be non-negative, got {value.tolist()}")
            value.setflags(write=False)
            object.__setattr__(self, name, value)

    @classmethod
    def new(cls, diffuse: npt.ArrayLike, specular: npt.ArrayLike) -> LightMaterial:
        return cls(diffuse_intensity=as_color(diffuse), specular_intensity=as_color(specular))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LightMaterial):
            return NotImplemented
        return bool(
            np.array_equal(self.diffuse_intensity, other.diffuse_intensity)
            and np.array_equal(self.specular_intensity, other.specular_intensity)
        )

    __hash__ = None  # type: ignore[assignment]
