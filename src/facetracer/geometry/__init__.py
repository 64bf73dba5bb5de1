"""Geometry module for shape primitives and intersection algorithms.

Components:
    face: Rectangular face primitive and the ray-face test
    box: Six-face box primitive and the ray-box test

Ray-object intersection follows the pattern:
    hit = ray_face(ray, face)   # HitRecord(position, distance, normal) or None

Misses of every kind (parallel ray, plane behind the origin, point outside the
rectangle) are reported as None rather than raised.
"""

from .box import FACE_NAMES, Box, ray_box
from .face import Face, HitRecord, ray_face

__all__ = [
    "Face",
    "HitRecord",
    "ray_face",
    "Box",
    "FACE_NAMES",
    "ray_box",
]
