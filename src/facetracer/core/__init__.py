"""Core rendering module.

This module contains the fundamental building blocks of the tracer:

Components:
    ray: Ray data structure and vector utilities
    transform: Placement transforms (rotation + translation)
    onb: Orthonormal bases and cone sampling
    color: RGB helpers and sRGB gamma correction
    sampler: Sub-pixel sample patterns (uniform, jittered, random)
    integrator: Direct lighting, shadow rays and glossy reflection bounces
    renderer: Per-pixel sampling loop, sequential and row-parallel

Rendering evaluates ambient + Phong diffuse/specular direct lighting from
rectangular area lights, with hard shadows per sample that average into soft
shadows across samples.
"""

from .color import BLACK, clamp01, rgb, srgb_decode, srgb_encode, to_uint8
from .onb import OrthoNormalBase, random_in_cone
from .ray import (
    Ray,
    cross,
    dot,
    length,
    length_squared,
    near_zero,
    normalize,
    reflect,
    vec3,
)
from .sampler import Jittered, PixelSampler, Random, Uniform, get_sampler
from .transform import DegenerateTransformError, Transform, rotation_matrix

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from facetracer.core.integrator or facetracer.core.renderer.

__all__ = [
    "Ray",
    "vec3",
    "length",
    "length_squared",
    "normalize",
    "dot",
    "cross",
    "reflect",
    "near_zero",
    "Transform",
    "DegenerateTransformError",
    "rotation_matrix",
    "OrthoNormalBase",
    "random_in_cone",
    "BLACK",
    "rgb",
    "clamp01",
    "srgb_encode",
    "srgb_decode",
    "to_uint8",
    "PixelSampler",
    "Uniform",
    "Jittered",
    "Random",
    "get_sampler",
]
