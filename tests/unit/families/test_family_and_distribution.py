from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math

import numpy as np
import pytest

from distcore.distributions.computation import FittedComputationMethod
from distcore.families import ParametricFamily, ParametricFamilyRegister, Parametrization, parametrization
from distcore.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestFamilyDistribution(TestBaseFamily):
    def setup_method(self) -> None:
        self.distr = self.make_default_family()(value=2.0)

    def test_sampling_uses_derived_quantile(self) -> None:
        sample = self.distr.sample(128, seed=3)
        assert sample.shape == (128, 1)
        arr = sample.array
        assert (arr >= 0.0).all() and (arr <= 2.0).all()

    def test_analytical_computations_are_bound_to_base_parameters(self) -> None:
        computations = self.distr.analytical_computations
        assert set(computations) == {self.PDF, self.CDF, self.MEAN}
        assert computations[self.CDF](0.5) == pytest.approx(0.25)

        alt = self.make_default_family().distribution("alt", value=1.0)
        assert alt.mean() == pytest.approx(1.0)

    def test_analytical_computations_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            self.distr.analytical_computations["ppf"] = None  # type: ignore[index]

    def test_distribution_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.distr.parameters = None  # type: ignore[misc]

    def test_scalar_and_array_evaluation(self) -> None:
        assert isinstance(self.distr.pdf(0.5), float)
        assert self.distr.cdf(0.5) == pytest.approx(0.25)

        x = np.array([[-1.0, 0.5], [1.5, 3.0]])
        np.testing.assert_allclose(self.distr.cdf(x), [[0.0, 0.25], [0.75, 1.0]])
        assert self.distr.pdf(x).shape == (2, 2)

    def test_derived_characteristics(self) -> None:
        assert self.distr.provides(self.PDF)
        assert self.distr.provides("ppf")
        assert self.distr.provides("sf")
        assert not self.distr.provides("var")
        assert not self.distr.provides("ln_pdf")

        assert isinstance(self.distr.query_method("ppf"), FittedComputationMethod)
        assert self.distr.sf(0.5) == pytest.approx(0.75)
        np.testing.assert_allclose(self.distr.inverse_cdf(np.array([0.2, 0.9])), [0.4, 1.8], atol=1e-9)
        assert self.distr.ppf(0.5) == pytest.approx(1.0, abs=1e-9)
        assert self.distr.inverse_cdf(0.0) == 0.0
        assert self.distr.inverse_cdf(1.0) == 2.0

    def test_inverse_cdf_rejects_out_of_range_probability(self) -> None:
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            self.distr.inverse_cdf(1.2)
        with pytest.raises(ValueError):
            self.distr.inverse_cdf(np.array([0.5, -0.1]))

    def test_missing_characteristic_raises(self) -> None:
        assert self.distr.mean() == 1.0
        with pytest.raises(RuntimeError):
            self.distr.variance()
        with pytest.raises(RuntimeError):
            self.distr.ln_pdf(0.5)

    def test_bounds_come_from_base_support(self) -> None:
        alt = self.make_default_family().distribution("alt", value=1.5)
        assert alt.min() == 0.0
        assert alt.max() == 3.0

    def test_bounds_without_support(self) -> None:
        fam = ParametricFamily(
            name="Unbounded",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={self.PDF: lambda p, x: x},
        )

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            value: float

        distr = fam(value=1.0)
        assert distr.support is None
        assert distr.min() == -math.inf
        assert distr.max() == math.inf


class TestParametricFamilyRegister(TestBaseFamily):
    def setup_method(self) -> None:
        self.register = ParametricFamilyRegister()

    def test_get_returns_registered_family(self) -> None:
        fam = self.make_default_family()
        self.register.register(fam)
        assert self.register.get("Default") is fam

    def test_duplicate_family_is_rejected(self) -> None:
        self.register.register(self.make_default_family())
        with pytest.raises(ValueError, match="already"):
            self.register.register(self.make_default_family())

    def test_unknown_family(self) -> None:
        with pytest.raises(ValueError, match="No family Nope found in register"):
            self.register.get("Nope")

    def test_registers_are_independent(self) -> None:
        self.register.register(self.make_default_family())
        with pytest.raises(ValueError):
            ParametricFamilyRegister().get("Default")
