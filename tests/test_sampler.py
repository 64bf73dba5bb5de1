"""Unit tests for sub-pixel samplers."""

import numpy as np
import pytest

SAMPLER_NAMES = ["uniform", "jittered", "random"]


class TestSamplerContract:
    """Properties every sampler must satisfy."""

    @pytest.mark.parametrize("name", SAMPLER_NAMES)
    @pytest.mark.parametrize("n", [1, 2, 3, 5])
    def test_count_and_range(self, name, n, rng):
        """Test that n*n samples are produced, all inside the pixel."""
        from facetracer.core.sampler import get_sampler

        pts = get_sampler(name).samples((4, 9), n, rng)
        assert pts.shape == (n * n, 2)
        assert np.all(pts[:, 0] >= 4.0) and np.all(pts[:, 0] < 5.0)
        assert np.all(pts[:, 1] >= 9.0) and np.all(pts[:, 1] < 10.0)

    @pytest.mark.parametrize("name", SAMPLER_NAMES)
    @pytest.mark.parametrize("n", [0, -2])
    def test_invalid_density(self, name, n, rng):
        from facetracer.core.sampler import get_sampler

        with pytest.raises(ValueError):
            get_sampler(name).samples((0, 0), n, rng)


class TestUniform:
    """Tests for the regular grid sampler."""

    def test_single_sample_is_pixel_center(self, rng):
        from facetracer.core.sampler import Uniform

        assert np.allclose(Uniform().samples((2, 3), 1, rng), [[2.5, 3.5]])

    def test_grid_centers(self, rng):
        from facetracer.core.sampler import Uniform

        pts = Uniform().samples((3, 7), 2, rng)
        assert np.allclose(pts, [[3.25, 7.25], [3.75, 7.25], [3.25, 7.75], [3.75, 7.75]])

    def test_deterministic(self):
        from facetracer.core.sampler import Uniform

        a = Uniform().samples((0, 0), 3, np.random.default_rng(1))
        b = Uniform().samples((0, 0), 3, np.random.default_rng(2))
        assert np.array_equal(a, b)


class TestJittered:
    """Tests for the stratified sampler."""

    def test_one_sample_per_cell(self, rng):
        from facetracer.core.sampler import Jittered

        n = 4
        pts = Jittered().samples((0, 0), n, rng)
        cells = {(int(x * n), int(y * n)) for x, y in pts}
        assert len(cells) == n * n

    def test_reproducible_with_seed(self):
        from facetracer.core.sampler import Jittered

        a = Jittered().samples((1, 1), 3, np.random.default_rng(5))
        b = Jittered().samples((1, 1), 3, np.random.default_rng(5))
        assert np.array_equal(a, b)


class TestGetSampler:
    """Tests for sampler lookup by name."""

    def test_lookup_is_case_insensitive(self):
        from facetracer.core.sampler import Jittered, get_sampler

        assert isinstance(get_sampler("Jittered"), Jittered)

    def test_unknown_name(self):
        from facetracer.core.sampler import get_sampler

        with pytest.raises(ValueError, match="Unknown sampler"):
            get_sampler("halton")
