"""Sub-pixel sample patterns for anti-aliasing.

A pixel sampler turns a pixel coordinate (px, py) and a density n into n*n
continuous sample positions inside [px, px + 1) x [py, py + 1):

    Uniform:  the centers of an n x n grid of cells
    Jittered: one uniformly random point inside each grid cell (stratified)
    Random:   n*n independent uniform points anywhere in the pixel

Samplers hold no random state of their own. The caller passes in a NumPy
Generator, so each rendering task can own an independent stream and no
generator is ever shared between threads.

Example:
    >>> import numpy as np
    >>> from facetracer.core.sampler import Uniform
    >>> Uniform().samples((3, 7), 2, np.random.default_rng(0))
    array([[3.25, 7.25],
           [3.75, 7.25],
           [3.25, 7.75],
           [3.75, 7.75]])
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt

SampleArray = npt.NDArray[np.float64]


def _check_density(n: int) -> int:
    n = int(n)
    if n < 1:
        raise ValueError(f"Sample density must be >= 1, got {n}")
    return n


def _grid(n: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Cell indices (i, j) of an n x n grid, x varying fastest."""
    j, i = np.divmod(np.arange(n * n, dtype=np.float64), n)
    return i, j


def _place(pixel: tuple[int, int], offsets: SampleArray) -> SampleArray:
    """Shift [0, 1) offsets into the pixel, keeping them below the far edge."""
    px, py = pixel
    origin = np.array((px, py), dtype=np.float64)
    upper = np.nextafter(origin + 1.0, origin)
    return np.minimum(origin + offsets, upper)


class PixelSampler(ABC):
    """Produces sub-pixel sample positions."""

    name: str = ""

    @abstractmethod
    def samples(self, pixel: tuple[int, int], n: int, rng: np.random.Generator) -> SampleArray:
        """Return n*n sample positions inside the pixel.

        Args:
            pixel: Integer pixel coordinate (px, py).
            n: Sample density; n*n samples are produced.
            rng: Random number generator owned by the calling task.

        Returns:
            Array of shape (n*n, 2) holding (x, y) positions.

        Raises:
            ValueError: If n < 1.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Uniform(PixelSampler):
    """Regular grid of cell centers."""

    name = "uniform"

    def samples(self, pixel: tuple[int, int], n: int, rng: np.random.Generator) -> SampleArray:
        n = _check_density(n)
        i, j = _grid(n)
        offsets = np.column_stack(((i + 0.5) / n, (j + 0.5) / n))
        return _place(pixel, offsets)


class Jittered(PixelSampler):
    """One random point per grid cell."""

    name = "jittered"

    def samples(self, pixel: tuple[int, int], n: int, rng: np.random.Generator) -> SampleArray:
        n = _check_density(n)
        i, j = _grid(n)
        jitter = rng.random((n * n, 2))
        offsets = np.column_stack(((i + jitter[:, 0]) / n, (j + jitter[:, 1]) / n))
        return _place(pixel, offsets)


class Random(PixelSampler):
    """Unstratified uniform points over the whole pixel."""

    name = "random"

    def samples(self, pixel: tuple[int, int], n: int, rng: np.random.Generator) -> SampleArray:
        n = _check_density(n)
        return _place(pixel, rng.random((n * n, 2)))


SAMPLERS: dict[str, type[PixelSampler]] = {
    cls.name: cls for cls in (Uniform, Jittered, Random)
}


def get_sampler(name: str) -> PixelSampler:
    """Create a sampler by name ("uniform", "jittered" or "random").

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return SAMPLERS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown sampler: {name!r} (expected one of {', '.join(sorted(SAMPLERS))})"
        ) from None
