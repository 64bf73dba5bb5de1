"""Image export utilities for rendered images.

The renderer produces a finished (height, width, 3) uint8 array; this module
encodes it to a file with Pillow. The image is written to a temporary file
next to the destination and moved into place only once encoding succeeded, so
an interrupted or failed save never leaves a truncated image behind.

Supported formats:
    - Anything Pillow can write for RGB data, chosen from the file suffix
      (PNG is the default)

Example:
    >>> from facetracer.core.renderer import render
    >>> from facetracer.preview.export import save_png
    >>> image = render(scene)
    >>> save_png(image, "output.png")
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage


def check_image(image: npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    """Validate a rendered raster.

    Raises:
        ValueError: If the array is not (H, W, 3) uint8.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got dtype {image.dtype}")
    return image


def to_pil(image: npt.NDArray[np.uint8]) -> PILImage.Image:
    """Wrap a rendered raster in a Pillow image."""
    return PILImage.fromarray(np.ascontiguousarray(check_image(image)))


def save_png(image: npt.NDArray[np.uint8], filepath: str | os.PathLike[str]) -> Path:
    """Save a rendered raster to a file.

    Args:
        image: Rendered image, shape (H, W, 3), dtype uint8, row 0 at the top.
        filepath: Output path. The format follows the suffix; a path without
            a suffix is written as PNG.

    Returns:
        The path written.

    Raises:
        ValueError: If the image has the wrong shape or dtype, or Pillow does
            not know the file suffix.
        OSError: If the destination cannot be written.
    """
    path = Path(filepath)
    pil_image = to_pil(image)
    fmt = "PNG" if not path.suffix else None
    if fmt is None:
        ext = path.suffix.lower()
        PILImage.init()
        if ext not in PILImage.EXTENSION:
            raise ValueError(f"Unsupported image format: {path.suffix!r}")
        fmt = PILImage.EXTENSION[ext]

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            pil_image.save(fh, format=fmt)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path


def load_image(filepath: str | os.PathLike[str]) -> npt.NDArray[np.uint8]:
    """Read an image file back as an (H, W, 3) uint8 array."""
    with PILImage.open(filepath) as img:
        return np.asarray(img.convert("RGB"), dtype=np.uint8).copy()


def mean_brightness(image: npt.NDArray[np.uint8]) -> npt.NDArray[np.float64]:
    """Mean per-channel value of an image, in [0, 1]."""
    return check_image(image).reshape(-1, 3).mean(axis=0) / 255.0


def compute_rmse(
    image_a: npt.NDArray[np.generic],
    image_b: npt.NDArray[np.generic],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes must match: {image_a.shape} vs {image_b.shape}")

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
