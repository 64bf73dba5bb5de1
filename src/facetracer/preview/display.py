"""Matplotlib-based preview of rendered images.

Rendered images are already gamma corrected 8-bit rasters, so they are shown
as they are. ``show_progress`` is a ready-made progress callback for
interactive sessions.

Example:
    >>> from facetracer.preview.display import show_preview
    >>> show_preview(image, title="Cornell box, 16 spp")
"""

from __future__ import annotations

import sys
from typing import TextIO

import numpy as np
import numpy.typing as npt

from facetracer.preview.export import check_image, compute_rmse


def show_preview(
    image: npt.NDArray[np.uint8],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a rendered image in a Matplotlib figure.

    Args:
        image: Rendered image, shape (H, W, 3), dtype uint8.
        title: Figure title (default shows the resolution).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    check_image(image)
    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")
    if title is None:
        height, width = image.shape[:2]
        title = f"Render Preview - {width}x{height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)


def show_comparison(
    image_a: npt.NDArray[np.uint8],
    image_b: npt.NDArray[np.uint8],
    *,
    labels: tuple[str, str] = ("A", "B"),
    diff_scale: float = 10.0,
    figsize: tuple[float, float] = (16, 6),
    block: bool = True,
) -> float:
    """Display two renders side by side with their amplified difference.

    Returns:
        RMSE between the two images, in [0, 1] display units.
    """
    import matplotlib.pyplot as plt

    a = check_image(image_a).astype(np.float64) / 255.0
    b = check_image(image_b).astype(np.float64) / 255.0
    rmse = compute_rmse(a, b)
    diff = np.clip(np.abs(a - b) * diff_scale, 0.0, 1.0)

    fig, axes = plt.subplots(1, 3, figsize=figsize)
    for ax, img, label in zip(
        axes,
        (a, b, diff),
        (labels[0], labels[1], f"Difference ({diff_scale}x) - RMSE: {rmse:.6f}"),
    ):
        ax.imshow(img)
        ax.set_title(label)
        ax.axis("off")

    plt.tight_layout()
    plt.show(block=block)
    return rmse


def show_progress(fraction: float, stream: TextIO | None = None) -> None:
    """Print render progress as a percentage, rewriting the current line."""
    out = stream if stream is not None else sys.stdout
    out.write(f"\rRendering: {fraction * 100.0:5.1f}%")
    if fraction >= 1.0:
        out.write("\n")
    out.flush()
