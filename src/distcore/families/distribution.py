"""
Members of a parametric family.

:class:`ParametricFamilyDistribution` implements every capability interface
of :mod:`distcore.distributions.capabilities` on top of the
characteristics its family supplies in closed form or the computation
strategy derives.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from math import inf, sqrt
from typing import TYPE_CHECKING

import numpy as np

from distcore.distributions.distribution import Distribution
from distcore.numeric import squeeze_scalar
from distcore.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distcore.distributions.computation import AnalyticalComputation
    from distcore.distributions.strategies import ComputationStrategy, SamplingStrategy
    from distcore.distributions.support import ContinuousSupport
    from distcore.families.parametric_family import ParametricFamily
    from distcore.families.parametrizations import Parametrization
    from distcore.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A distribution with fixed, validated parameters.

    Parameters
    ----------
    family : ParametricFamily
        Family the distribution belongs to.
    parameters : Parametrization
        Parameters as given by the caller.
    base_parameters : Parametrization
        The same parameters in the family's base parametrization.
    """

    family: ParametricFamily
    parameters: Parametrization
    base_parameters: Parametrization = field(repr=False)
    _support: ContinuousSupport | None = field(repr=False)
    _analytical: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        return self.family.distr_type

    @property
    def support(self) -> ContinuousSupport | None:
        return self._support

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    def provides(self, characteristic_name: GenericCharacteristicName) -> bool:
        """Whether the characteristic is analytical or derivable."""
        return self.computation_strategy.provides(characteristic_name, self)

    def _evaluate(
        self, name: GenericCharacteristicName, x: Number | NumericArray, **options: Any
    ) -> float | NumericArray:
        method = self.query_method(name, **options)
        arr = np.asarray(x, dtype=np.float64)
        if method.is_vectorized:
            return squeeze_scalar(np.asarray(method(arr), dtype=np.float64))
        if arr.ndim == 0:
            return float(method(float(arr)))
        return np.array([method(float(v)) for v in arr.flat], dtype=np.float64).reshape(arr.shape)

    def pdf(self, x: Number | NumericArray, **options: Any) -> float | NumericArray:
        """Probability density; ``0`` outside the support."""
        return self._evaluate(CharacteristicName.PDF, x, **options)

    def ln_pdf(self, x: Number | NumericArray, **options: Any) -> float | NumericArray:
        """Natural log of the density; ``-inf`` outside the support."""
        return self._evaluate(CharacteristicName.LN_PDF, x, **options)

    def cdf(self, x: Number | NumericArray, **options: Any) -> float | NumericArray:
        return self._evaluate(CharacteristicName.CDF, x, **options)

    def sf(self, x: Number | NumericArray, **options: Any) -> float | NumericArray:
        """Survival function ``1 - cdf(x)``."""
        return self._evaluate(CharacteristicName.SF, x, **options)

    def inverse_cdf(self, p: Number | NumericArray, **options: Any) -> float | NumericArray:
        """
        Quantile function.

        Raises
        ------
        ValueError
            If any probability is outside ``[0, 1]``.
        """
        arr = np.asarray(p, dtype=np.float64)
        if np.any((arr < 0) | (arr > 1)):
            raise ValueError("Probability must be in [0, 1]")
        return self._evaluate(CharacteristicName.PPF, arr, **options)

    ppf = inverse_cdf

    def _summary(self, name: GenericCharacteristicName) -> float | None:
        value = self.query_method(name)(None)
        return None if value is None else float(value)

    def mean(self) -> float | None:
        return self._summary(CharacteristicName.MEAN)

    def variance(self) -> float | None:
        return self._summary(CharacteristicName.VAR)

    def std_dev(self) -> float | None:
        variance = self.variance()
        return None if variance is None else sqrt(variance)

    def entropy(self) -> float | None:
        """Differential entropy in nats."""
        return self._summary(CharacteristicName.ENTROPY)

    def skewness(self) -> float | None:
        return self._summary(CharacteristicName.SKEW)

    def median(self) -> float | None:
        return self._summary(CharacteristicName.MEDIAN)

    def mode(self) -> float | None:
        """Location of the density maximum, or ``None`` when it is not unique."""
        return self._summary(CharacteristicName.MODE)

    def min(self) -> float:
        return -inf if self._support is None else self._support.left

    def max(self) -> float:
        return inf if self._support is None else self._support.right
