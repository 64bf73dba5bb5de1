"""Offline ray tracer for rectangular faces, boxes and area lights.

This package traces rays from a camera through every pixel, finds the
closest surface, and shades it with ambient + energy-normalized Phong direct
lighting from rectangular area lights, with:
- Shadow rays toward uniformly sampled points on each light
- Uniform, jittered or random multi-sample anti-aliasing
- Optional glossy reflection bounces
- Sequential or row-parallel rendering

Subpackages:
    core: Rays, transforms, sampling, the integrator and the renderer
    geometry: Face and Box primitives and their intersection tests
    materials: Surface materials and light emission
    scene: Scene objects, intersection records and the scene aggregate
    camera: Perspective and orthographic cameras
    preview: Image display and PNG export
"""

__version__ = "0.1.0"
