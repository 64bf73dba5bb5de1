"""Preview module for output and visualization.

Components:
    display: Matplotlib-based preview and progress printing
    export: PNG export (Pillow) and image comparison helpers

Example:
    >>> from facetracer.preview import save_png, show_preview
    >>> save_png(image, "output.png")
    >>> show_preview(image)
"""

from facetracer.preview.display import show_comparison, show_preview, show_progress
from facetracer.preview.export import (
    check_image,
    compute_rmse,
    load_image,
    mean_brightness,
    save_png,
    to_pil,
)

__all__ = [
    "show_preview",
    "show_comparison",
    "show_progress",
    "save_png",
    "load_image",
    "to_pil",
    "check_image",
    "mean_brightness",
    "compute_rmse",
]
