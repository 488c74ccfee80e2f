"""
Parametric families.

A :class:`ParametricFamily` ties together the closed-form characteristics
of a family of distributions, its parametrizations, its support and its
strategies. Calling the family validates parameters and returns a
:class:`~distcore.families.distribution.ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING

from distcore.distributions.computation import AnalyticalComputation
from distcore.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from distcore.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from distcore.distributions.strategies import ComputationStrategy, SamplingStrategy
    from distcore.distributions.support import ContinuousSupport
    from distcore.families.parametrizations import Parametrization
    from distcore.types import DistributionType, GenericCharacteristicName, ParametrizationName

    type Characteristic = Callable[[Parametrization, Any], Any]

logger = logging.getLogger(__name__)


class ParametricFamily:
    """
    A family of distributions and the factory of its members.

    Parameters
    ----------
    name : str
        Family name, the key in the families register.
    distr_type : DistributionType
        Type shared by every member of the family.
    distr_parametrizations : list of str
        Declared parametrization names; the first is the base one.
    distr_characteristics : Mapping
        Characteristic name to ``f(base_parameters, x)``.
    support_by_parametrization : Callable, optional
        Support of the member with the given base parameters.
    sampling_strategy, computation_strategy : optional
        Inverse transform sampling and
        :class:`~distcore.distributions.strategies.DefaultComputationStrategy`
        by default.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[GenericCharacteristicName, Characteristic],
        support_by_parametrization: Callable[[Parametrization], ContinuousSupport] | None = None,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
    ) -> None:
        self.name = name
        self.distr_type = distr_type
        self.parametrization_names = list(distr_parametrizations)
        self.distr_characteristics = dict(distr_characteristics)
        self.support_by_parametrization = support_by_parametrization
        self.sampling_strategy = sampling_strategy or DefaultSamplingUnivariateStrategy()
        self.computation_strategy = computation_strategy or DefaultComputationStrategy()
        self.parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self.name!r}, parametrizations={self.parametrization_names})"

    @property
    def base(self) -> type[Parametrization]:
        """Class of the base (first declared) parametrization."""
        base_name = self.parametrization_names[0]
        if base_name not in self.parametrizations:
            raise ValueError(f"Base parametrization '{base_name}' is not registered.")
        return self.parametrizations[base_name]

    def register_parametrization(
        self, name: ParametrizationName, cls: type[Parametrization]
    ) -> None:
        if name not in self.parametrization_names:
            raise ValueError(f"Family {self.name} does not declare parametrization '{name}'.")
        if name in self.parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self.parametrizations[name] = cls

    def bind(
        self, base_parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed-form characteristics with ``base_parameters`` bound in."""
        return {
            characteristic: AnalyticalComputation(characteristic, partial(func, base_parameters))
            for characteristic, func in self.distr_characteristics.items()
        }

    def distribution(
        self, parametrization_name: ParametrizationName | None = None, **values: Any
    ) -> ParametricFamilyDistribution:
        """
        Validate ``values`` and build a distribution.

        Parameters are checked in the parametrization they are given in and
        again after conversion to the base parametrization.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is not registered.
        InvalidParametersError
            If a parameter is NaN or a constraint fails.
        """
        if parametrization_name is None:
            cls = self.base
        else:
            cls = self.parametrizations[parametrization_name]
        parameters = cls(**values)
        parameters.validate()
        base_parameters = parameters.transform_to_base_parametrization()
        if base_parameters is not parameters:
            base_parameters.validate()

        logger.debug(f"{self.name}: created distribution with {parameters}")
        support = (
            self.support_by_parametrization(base_parameters)
            if self.support_by_parametrization is not None
            else None
        )
        return ParametricFamilyDistribution(
            family=self,
            parameters=parameters,
            base_parameters=base_parameters,
            _support=support,
            _analytical=MappingProxyType(self.bind(base_parameters)),
        )

    __call__ = distribution
