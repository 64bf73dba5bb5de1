"""Scene objects: a closed union of lights and reflective surfaces.

    Object  = Light | Surface
    Surface = Face | Box

Every member of a Scene is wrapped in an Object, which dispatches intersection
and material queries by kind and stamps hits with a reference back to itself,
so that shading code can recover the struck material or light.

Two Objects compare equal when they have the same kind and structurally equal
geometry. The renderer relies on this to check that a shadow ray reached the
light it was aimed at.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from facetracer.core.ray import Ray
from facetracer.geometry.box import Box
from facetracer.geometry.face import Face
from facetracer.materials.material import Material
from facetracer.scene.intersection import Intersection
from facetracer.scene.light import Light

Surface = Union[Face, Box]


class ObjectKind(Enum):
    """Discriminant of the Object union."""

    LIGHT = "light"
    SURFACE = "surface"


class Object:
    """A scene member: either an emitting Light or a reflective Surface."""

    __slots__ = ("kind", "_payload")

    def __init__(self, kind: ObjectKind, payload: Light | Surface) -> None:
        if kind is ObjectKind.LIGHT and not isinstance(payload, Light):
            raise TypeError(f"Light object needs a Light, got {type(payload).__name__}")
        if kind is ObjectKind.SURFACE and not isinstance(payload, (Face, Box)):
            raise TypeError(f"Surface object needs a Face or Box, got {type(payload).__name__}")
        self.kind = kind
        self._payload = payload

    @classmethod
    def from_light(cls, light: Light) -> Object:
        return cls(ObjectKind.LIGHT, light)

    @classmethod
    def from_surface(cls, surface: Surface) -> Object:
        return cls(ObjectKind.SURFACE, surface)

    @property
    def is_light(self) -> bool:
        return self.kind is ObjectKind.LIGHT

    @property
    def is_surface(self) -> bool:
        return self.kind is ObjectKind.SURFACE

    def as_light(self) -> Light | None:
        return self._payload if self.kind is ObjectKind.LIGHT else None  # type: ignore[return-value]

    def as_surface(self) -> Surface | None:
        return self._payload if self.kind is ObjectKind.SURFACE else None  # type: ignore[return-value]

    @property
    def material(self) -> Material:
        """Surface material; for a light, the nominal material of its face."""
        return self._payload.material

    def intersects(self, ray: Ray) -> Intersection | None:
        """Intersect the ray with the underlying geometry.

        Returns:
            An Intersection referencing this object, or None on a miss.
        """
        hit = self._payload.intersects(ray)
        if hit is None:
            return None
        return Intersection(
            position=hit.position,
            distance=hit.distance,
            normal=hit.normal,
            object=self,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if type(self._payload) is not type(other._payload):
            return False
        return self._payload == other._payload

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Object.{self.kind.name}({self._payload!r})"


def as_object(member: Object | Light | Surface) -> Object:
    """Wrap a Light, Face or Box in an Object; Objects pass through unchanged."""
    if isinstance(member, Object):
        return member
    if isinstance(member, Light):
        return Object.from_light(member)
    if isinstance(member, (Face, Box)):
        return Object.from_surface(member)
    raise TypeError(f"Cannot place {type(member).__name__} in a scene")
