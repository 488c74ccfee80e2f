from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from distcore.distributions.sampling import ArraySample, resolve_rng
from tests.unit.distributions.test_basic import DistributionTestBase


class TestSampling(DistributionTestBase):
    def test_sample_uniform_ppf_only_shape_bounds_and_mean(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        n = 1000
        sample = distr.sample(n, seed=7)

        assert sample.shape == (n, 1)
        arr = sample.array
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr <= 1.0)).all()

        mean = float(arr.mean())
        assert mean == pytest.approx(0.5, abs=0.1)

    def test_sample_through_fitted_ppf(self) -> None:
        distr = self.make_uniform_cdf_distribution()
        sample = distr.sample(50, rng=np.random.default_rng(1))
        assert sample.shape == (50, 1)
        assert ((sample.array >= 0.0) & (sample.array <= 1.0)).all()

    def test_seed_makes_sampling_reproducible(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        first = distr.sample(10, seed=42).array
        second = distr.sample(10, seed=42).array
        np.testing.assert_array_equal(first, second)

    def test_zero_samples(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        assert distr.sample(0).shape == (0, 1)

    def test_negative_sample_size_is_rejected(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        with pytest.raises(ValueError, match="non-negative"):
            distr.sample(-1)


class TestArraySample:
    def test_requires_2d(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_statistics(self) -> None:
        sample = ArraySample(np.array([[1.0], [2.0], [3.0], [4.0]]))
        assert len(sample) == 4
        assert sample.dimension == 1
        np.testing.assert_allclose(sample.mean(), [2.5])
        np.testing.assert_allclose(sample.var(), [5.0 / 3.0])
        assert [float(row[0]) for row in sample] == [1.0, 2.0, 3.0, 4.0]


class TestResolveRng:
    def test_rng_wins_and_is_popped(self) -> None:
        rng = np.random.default_rng(0)
        options = {"rng": rng, "seed": 3, "xtol": 1e-6}
        assert resolve_rng(options) is rng
        assert options == {"xtol": 1e-6}

    def test_seed(self) -> None:
        a = resolve_rng({"seed": 5}).random()
        b = resolve_rng({"seed": 5}).random()
        assert a == b

    def test_rejects_non_generator(self) -> None:
        with pytest.raises(TypeError, match="Generator"):
            resolve_rng({"rng": 42})
