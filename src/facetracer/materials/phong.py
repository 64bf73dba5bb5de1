"""Phong material.

The Phong model combines three colors and an exponent:

    L = ambient
      + sum over visible lights of
          diffuse_intensity * max(0, l.n) / pi * diffuse_color
        + specular_intensity * max(0, r.v)^s * (s + 2) / (2 pi) * specular_color

where l is the unit direction toward a sampled light point, n the surface
normal, r the mirror of l about n, v the unit direction toward the eye and s
the shininess. The 1/pi and (s + 2)/(2 pi) factors keep the reflected energy
bounded as the shininess grows. The per-light terms are evaluated by the light
being sampled (see facetracer.scene.light); this class only stores the
coefficients.

Example:
    >>> from facetracer.materials.phong import Phong
    >>> grey = Phong(
    ...     ambient=(0.1, 0.1, 0.1),
    ...     diffuse=(0.6, 0.6, 0.6),
    ...     specular=(0.6, 0.6, 0.6),
    ...     shininess=2.0,
    ... )
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from facetracer.core.color import Color, as_color
from facetracer.materials.material import Material


class Phong(Material):
    """Ambient + diffuse + specular material."""

    __slots__ = ("_ambient", "_diffuse", "_specular", "_shininess")

    def __init__(
        self,
        ambient: npt.ArrayLike,
        diffuse: npt.ArrayLike,
        specular: npt.ArrayLike,
        shininess: float,
    ) -> None:
        """Create a Phong material.

        Args:
            ambient: Ambient RGB color, each channel expected in [0, 1].
            diffuse: Diffuse RGB reflectance.
            specular: Specular RGB reflectance.
            shininess: Phong exponent.

        Raises:
            ValueError: If shininess is negative or not finite.
        """
        shininess = float(shininess)
        if not np.isfinite(shininess) or shininess < 0.0:
            raise ValueError(f"Shininess must be a finite value >= 0, got {shininess}")

        self._ambient = as_color(ambient)
        self._diffuse = as_color(diffuse)
        self._specular = as_color(specular)
        for c in (self._ambient, self._diffuse, self._specular):
            c.setflags(write=False)
        self._shininess = shininess

    @property
    def ambient_color(self) -> Color:
        return self._ambient

    @property
    def diffuse_color(self) -> Color:
        return self._diffuse

    @property
    def specular_color(self) -> Color:
        return self._specular

    @property
    def shininess(self) -> float:
        return self._shininess

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Phong):
            return NotImplemented
        return (
            np.array_equal(self._ambient, other._ambient)
            and np.array_equal(self._diffuse, other._diffuse)
            and np.array_equal(self._specular, other._specular)
            and self._shininess == other._shininess
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Phong(ambient={self._ambient.tolist()}, diffuse={self._diffuse.tolist()}, "
            f"specular={self._specular.tolist()}, shininess={self._shininess})"
        )
