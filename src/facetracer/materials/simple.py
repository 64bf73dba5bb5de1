"""Flat, unlit material.

A Simple material paints a surface with a single color regardless of the
lights in the scene: the color is used as the ambient term and the diffuse
and specular terms are zero.

Example:
    >>> from facetracer.materials.simple import Simple
    >>> red = Simple((1.0, 0.0, 0.0))
    >>> red.diffuse_color
    array([0., 0., 0.])
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from facetracer.core.color import BLACK, Color, as_color
from facetracer.materials.material import Material


class Simple(Material):
    """Ambient-only material with a flat color.

    Attributes:
        color: The flat RGB color.
    """

    __slots__ = ("_color",)

    def __init__(self, color: npt.ArrayLike) -> None:
        self._color = as_color(color)
        self._color.setflags(write=False)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def ambient_color(self) -> Color:
        return self._color

    @property
    def diffuse_color(self) -> Color:
        return BLACK

    @property
    def specular_color(self) -> Color:
        return BLACK

    @property
    def shininess(self) -> float:
        # Unused: the specular color is black
        return 1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simple):
            return NotImplemented
        return bool(np.array_equal(self._color, other._color))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Simple(color={self._color.tolist()})"
