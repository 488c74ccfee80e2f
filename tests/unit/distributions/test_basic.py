from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

from distcore.distributions.computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from distcore.distributions.support import ContinuousSupport
from distcore.types import CharacteristicName
from tests.utils.mocks import StandaloneUnivariateDistribution


class DistributionTestBase:
    PDF = CharacteristicName.PDF
    CDF = CharacteristicName.CDF
    SF = CharacteristicName.SF
    PPF = CharacteristicName.PPF

    def make_uniform_ppf_distribution(self) -> StandaloneUnivariateDistribution:
        return StandaloneUnivariateDistribution(
            [AnalyticalComputation[float, float](self.PPF, lambda q, **_: q)],
            support=ContinuousSupport(0, 1),
        )

    def make_uniform_cdf_distribution(self) -> StandaloneUnivariateDistribution:
        def uniform_cdf(x: float, **_: Any) -> float:
            return min(max(x, 0.0), 1.0)

        return StandaloneUnivariateDistribution(
            [AnalyticalComputation[float, float](self.CDF, uniform_cdf)],
            support=ContinuousSupport(0, 1),
        )

    def make_logistic_cdf_distribution(self) -> StandaloneUnivariateDistribution:
        def logistic_cdf(x: float, **_: Any) -> float:
            return 1.0 / (1.0 + math.exp(-x))

        return StandaloneUnivariateDistribution(
            [AnalyticalComputation[float, float](self.CDF, logistic_cdf)],
            support=ContinuousSupport(),
        )

    @staticmethod
    def make_fictitious_computation_method(source: str, target: str) -> ComputationMethod[Any, Any]:
        def _fitted_const(*_args: Any, **_kwargs: Any) -> FittedComputationMethod[Any, Any]:
            return FittedComputationMethod[Any, Any](target, source, lambda *_a, **_k: None)

        return ComputationMethod(source, target, _fitted_const)
