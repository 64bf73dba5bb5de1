"""Image renderer: per-pixel sampling, accumulation and gamma correction.

The Renderer drives the integrator over every pixel of the camera viewport:

1. The sampler produces n*n sub-pixel positions for the pixel
2. Each position is mapped to a primary ray by the camera and traced
3. The radiance is averaged, clamped to [0, 1], gamma corrected (sRGB) and
   converted to 8 bits

Image row 0 is the top of the picture while camera y grows upward, so image
row r is camera row height - 1 - r.

Two execution modes are provided:

- ``render()`` walks the rows in order on the calling thread
- ``render_parallel()`` fans the rows out over a thread pool; each row is
  computed independently and copied into the image once complete

The per-pixel loop is pure Python and holds the GIL, so the thread pool runs
rows concurrently but does not scale with the number of cores.

Every image row draws its random numbers from its own Generator, spawned from
one SeedSequence. A seeded render is therefore reproducible and gives the same
image in both modes, whatever order the rows finish in.

Example:
    >>> from facetracer.core.renderer import Renderer, RenderSettings
    >>> from facetracer.scene.cornell_box import create_cornell_box_scene
    >>>
    >>> scene = create_cornell_box_scene(160, 120)
    >>> renderer = Renderer(scene, RenderSettings(samples=2, seed=1))
    >>> image = renderer.render_parallel(callback=lambda f: print(f"{f:.0%}"))
    >>> image.shape
    (120, 160, 3)
"""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from facetracer.core.color import Color, clamp01, srgb_encode, to_uint8
from facetracer.core.integrator import MAX_BOUNCES, ray_energy
from facetracer.core.sampler import PixelSampler, Uniform
from facetracer.scene.scene import Scene

logger = logging.getLogger(__name__)

# Progress callback receives the fraction of rows completed, in [0, 1]
ProgressCallback = Callable[[float], None]

Image = npt.NDArray[np.uint8]


@dataclass
class RenderSettings:
    """Render configuration.

    Attributes:
        samples: Sample density n; each pixel gets n*n samples.
        bounces: Glossy reflection bounce budget (0 disables reflections).
        correct_gamma: Apply sRGB gamma correction before quantizing.
        seed: Seed for the per-row random streams; None draws fresh entropy.
        workers: Thread count for parallel rendering; None picks the CPU count.
    """

    samples: int = 1
    bounces: int = 0
    correct_gamma: bool = True
    seed: int | None = None
    workers: int | None = None

    def __post_init__(self) -> None:
        if self.samples < 1:
            raise ValueError(f"Sample density must be >= 1, got {self.samples}")
        if not 0 <= self.bounces <= MAX_BOUNCES:
            raise ValueError(f"Bounce count must be in [0, {MAX_BOUNCES}], got {self.bounces}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"Worker count must be >= 1, got {self.workers}")


class _Progress:
    """Row completion counter shared by render tasks."""

    def __init__(self, total: int, callback: ProgressCallback | None) -> None:
        self._total = total
        self._done = 0
        self._callback = callback
        self._lock = threading.Lock()

    def row_done(self) -> None:
        with self._lock:
            self._done += 1
            if self._callback is not None:
                self._callback(self._done / self._total)


class Renderer:
    """Renders a Scene into an 8-bit RGB image.

    Attributes:
        scene: The scene to render. It is only read, never modified.
        settings: Render configuration.
        sampler: Sub-pixel sample pattern.
    """

    def __init__(
        self,
        scene: Scene,
        settings: RenderSettings | None = None,
        sampler: PixelSampler | None = None,
    ) -> None:
        self.scene = scene
        self.settings = settings if settings is not None else RenderSettings()
        self.sampler = sampler if sampler is not None else Uniform()

    @property
    def width(self) -> int:
        return self.scene.camera.viewport()[0]

    @property
    def height(self) -> int:
        return self.scene.camera.viewport()[1]

    # -------------------------------------------------------------------------
    # Per-pixel work
    # -------------------------------------------------------------------------

    def pixel_energy(self, x: int, y: int, rng: np.random.Generator) -> Color:
        """Average linear radiance of a pixel, clamped to [0, 1].

        Args:
            x: Pixel column, left to right.
            y: Pixel row in camera coordinates, bottom to top.
            rng: Random number generator owned by the calling task.
        """
        camera = self.scene.camera
        bounces = self.settings.bounces
        samples = self.sampler.samples((x, y), self.settings.samples, rng)

        energy = np.zeros(3, dtype=np.float64)
        for xf, yf in samples:
            ray = camera.pixel_ray(float(xf), float(yf))
            if ray is None:
                energy += self.scene.background
                continue
            energy += ray_energy(self.scene, ray, bounces, rng)

        return clamp01(energy / len(samples))

    def finalize(self, energy: npt.ArrayLike) -> npt.NDArray[np.uint8]:
        """Gamma correct (if enabled) and quantize linear [0, 1] values."""
        if self.settings.correct_gamma:
            energy = srgb_encode(energy)
        return to_uint8(energy)

    def render_row(self, row: int, rng: np.random.Generator) -> Image:
        """Render one image row (row 0 is the top of the image).

        Returns:
            Array of shape (width, 3) with dtype uint8.
        """
        width, height = self.width, self.height
        y = height - 1 - row
        linear = np.empty((width, 3), dtype=np.float64)
        for x in range(width):
            linear[x] = self.pixel_energy(x, y, rng)
        return self.finalize(linear)

    # -------------------------------------------------------------------------
    # Whole image
    # -------------------------------------------------------------------------

    def _row_generators(self) -> list[np.random.Generator]:
        seeds = np.random.SeedSequence(self.settings.seed).spawn(self.height)
        return [np.random.default_rng(s) for s in seeds]

    def render(self, callback: ProgressCallback | None = None) -> Image:
        """Render the image sequentially, top row first.

        Args:
            callback: Optional progress callback, called after every row with
                the fraction of rows completed.

        Returns:
            Array of shape (height, width, 3) with dtype uint8.
        """
        width, height = self.width, self.height
        image = np.zeros((height, width, 3), dtype=np.uint8)
        progress = _Progress(height, callback)
        rngs = self._row_generators()

        logger.info(
            "Rendering %dx%d, %d samples/pixel, %d bounces (sequential)",
            width,
            height,
            self.settings.samples**2,
            self.settings.bounces,
        )
        start = time.perf_counter()
        for row in range(height):
            image[row] = self.render_row(row, rngs[row])
            logger.debug("Row %d done", row)
            progress.row_done()
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def render_parallel(
        self,
        callback: ProgressCallback | None = None,
        workers: int | None = None,
    ) -> Image:
        """Render the image with rows distributed over a thread pool.

        Args:
            callback: Optional progress callback. Calls are serialized and
                report a non-decreasing fraction, but may come from any
                worker thread.
            workers: Thread count; overrides ``settings.workers``.

        Returns:
            Array of shape (height, width, 3) with dtype uint8.

        Raises:
            ValueError: If ``workers`` is given and is less than 1.
            Exception: Whatever a row task raised. The remaining rows are
                cancelled and no image is returned.
        """
        width, height = self.width, self.height
        if workers is None:
            workers = self.settings.workers or os.cpu_count() or 1
        elif workers < 1:
            raise ValueError(f"Worker count must be >= 1, got {workers}")
        image = np.zeros((height, width, 3), dtype=np.uint8)
        progress = _Progress(height, callback)
        rngs = self._row_generators()

        def task(row: int) -> tuple[int, Image]:
            pixels = self.render_row(row, rngs[row])
            progress.row_done()
            return row, pixels

        logger.info(
            "Rendering %dx%d, %d samples/pixel, %d bounces (%d threads)",
            width,
            height,
            self.settings.samples**2,
            self.settings.bounces,
            workers,
        )
        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="render-row") as pool:
            futures = [pool.submit(task, row) for row in range(height)]
            try:
                for future in as_completed(futures):
                    row, pixels = future.result()
                    image[row] = pixels
                    logger.debug("Row %d done", row)
            except BaseException:
                for future in futures:
                    future.cancel()
                raise
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def __repr__(self) -> str:
        return f"Renderer(scene={self.scene!r}, settings={self.settings!r}, sampler={self.sampler!r})"


def render(
    scene: Scene,
    settings: RenderSettings | None = None,
    sampler: PixelSampler | None = None,
    *,
    parallel: bool = False,
    callback: ProgressCallback | None = None,
) -> Image:
    """Render a scene in one call.

    Args:
        scene: The scene to render.
        settings: Render configuration (defaults to RenderSettings()).
        sampler: Sub-pixel sample pattern (defaults to Uniform).
        parallel: Distribute rows over a thread pool.
        callback: Optional progress callback.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    renderer = Renderer(scene, settings, sampler)
    if parallel:
        return renderer.render_parallel(callback=callback)
    return renderer.render(callback=callback)
