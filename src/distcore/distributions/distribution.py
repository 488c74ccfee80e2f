"""
Distribution Interface
======================

What the computation strategy, the fitters and the samplers need from a
distribution: its type, its analytical characteristics, its support and its
strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distcore.distributions.computation import AnalyticalComputation, Method
    from distcore.distributions.sampling import Sample
    from distcore.distributions.strategies import ComputationStrategy, SamplingStrategy
    from distcore.distributions.support import ContinuousSupport
    from distcore.types import DistributionType, GenericCharacteristicName


class Distribution(Protocol):
    @property
    def distribution_type(self) -> DistributionType: ...
    @property
    def support(self) -> ContinuousSupport | None: ...
    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy: ...
    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        """Analytical or derived method for ``characteristic_name``."""
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, self, **options)
