"""RGB color helpers.

Colors are float64 NumPy arrays of shape (3,) holding linear RGB values,
nominally in [0, 1]. Light intensities and accumulated radiance may exceed 1
and are clamped only when a pixel is finalized.

The display encoding is the sRGB transfer curve:

    encode(c) = 12.92 c                       if c <= 0.0031308
              = 1.055 c^(1/2.4) - 0.055       otherwise
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from facetracer.core.ray import as_vec3

Color = npt.NDArray[np.float64]

# sRGB transfer function constants
SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_LINEAR_SCALE = 12.92
SRGB_A = 0.055
SRGB_GAMMA = 2.4


def rgb(r: float, g: float, b: float) -> Color:
    """Create a linear RGB color."""
    return np.array((r, g, b), dtype=np.float64)


def as_color(c: npt.ArrayLike) -> Color:
    """Convert a 3-sequence to a color array."""
    return as_vec3(c)


BLACK = rgb(0.0, 0.0, 0.0)
BLACK.setflags(write=False)


def clamp01(c: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Clamp every channel to [0, 1]."""
    return np.clip(np.asarray(c, dtype=np.float64), 0.0, 1.0)


def srgb_encode(c: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Apply sRGB gamma correction to linear values in [0, 1].

    Works element-wise on scalars, colors, or whole images.
    """
    c = np.asarray(c, dtype=np.float64)
    # np.power on the low branch is discarded but must not see negatives
    high = (1.0 + SRGB_A) * np.power(np.maximum(c, 0.0), 1.0 / SRGB_GAMMA) - SRGB_A
    return np.where(c <= SRGB_LINEAR_THRESHOLD, SRGB_LINEAR_SCALE * c, high)


def srgb_decode(c: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Invert srgb_encode, mapping display values back to linear."""
    c = np.asarray(c, dtype=np.float64)
    threshold = SRGB_LINEAR_SCALE * SRGB_LINEAR_THRESHOLD
    high = np.power((np.maximum(c, 0.0) + SRGB_A) / (1.0 + SRGB_A), SRGB_GAMMA)
    return np.where(c <= threshold, c / SRGB_LINEAR_SCALE, high)


def to_uint8(c: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """Convert [0, 1] values to 8-bit, rounding to nearest."""
    return np.rint(clamp01(c) * 255.0).astype(np.uint8)
