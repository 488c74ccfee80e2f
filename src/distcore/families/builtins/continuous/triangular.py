"""
Triangular distribution family implementation.

Contains the Triangular family with a ``(min, max, mode)`` parametrization
and a symmetric ``(center, half_width)`` parametrization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from math import isfinite, log, sqrt
from typing import TYPE_CHECKING, cast

import numpy as np

from distcore.distributions.strategies import DefaultSamplingUnivariateStrategy
from distcore.distributions.support import ContinuousSupport
from distcore.families.parametric_family import ParametricFamily
from distcore.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distcore.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)


def configure_triangular_family() -> ParametricFamily:
    """Build the Triangular family together with its parametrizations."""
    TRIANGULAR_DOC = """
    Triangular distribution.

    A continuous distribution on [min, max] whose density rises linearly
    from 0 at ``min`` to its peak 2 / (max - min) at ``mode`` and falls
    linearly back to 0 at ``max``.

    Probability density function (a = min, b = max, c = mode):
        f(x) = 2(x - a) / ((b - a)(c - a))   for a <= x < c
        f(x) = 2 / (b - a)                   for x = c
        f(x) = 2(b - x) / ((b - a)(b - c))   for c < x <= b

    ``mode`` may coincide with either endpoint.
    """

    def _abc(parameters: Parametrization) -> tuple[float, float, float]:
        parameters = cast(_Standard, parameters)
        return float(parameters.min), float(parameters.max), float(parameters.mode)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for triangular distribution.
            - For x outside [min, max]: returns 0
            - For x == mode: returns 2 / (max - min)
            - Otherwise: the rising or falling linear edge

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - min: float (left endpoint)
            - max: float (right endpoint)
            - mode: float (peak location)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        a, b, c = _abc(parameters)
        x = np.asarray(x, dtype=np.float64)

        # Edges of zero width are never selected; silence their 0/0.
        with np.errstate(divide="ignore", invalid="ignore"):
            rising = 2.0 * (x - a) / ((b - a) * (c - a))
            falling = 2.0 * (b - x) / ((b - a) * (b - c))

        result = np.select(
            [x == c, (x >= a) & (x < c), (x > c) & (x <= b)],
            [2.0 / (b - a), rising, falling],
            default=0.0,
        )
        return cast(NumericArray, np.where(np.isnan(x), np.nan, result))

    def ln_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Natural logarithm of the density; ``-inf`` where it vanishes."""
        with np.errstate(divide="ignore"):
            return cast(NumericArray, np.log(pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for triangular distribution.

        Piecewise quadratic, ``0`` below ``min`` and ``1`` from ``max`` on.
        """
        a, b, c = _abc(parameters)
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            rising = (x - a) ** 2 / ((b - a) * (c - a)) if c > a else np.zeros_like(x)
            falling = 1.0 - (b - x) ** 2 / ((b - a) * (b - c))

        result = np.select([x < a, x <= c, x < b], [0.0, rising, falling], default=1.0)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, result))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for triangular distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields min, max and mode
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        a, b, c = _abc(parameters)
        split = (c - a) / (b - a)
        left = a + np.sqrt(p * (b - a) * (c - a))
        right = b - np.sqrt(np.maximum(1.0 - p, 0.0) * (b - a) * (b - c))
        return cast(NumericArray, np.where(p < split, left, right))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of triangular distribution."""
        a, b, c = _abc(parameters)
        return (a + b + c) / 3.0

    def _spread(a: float, b: float, c: float) -> float:
        return a * a + b * b + c * c - a * b - a * c - b * c

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of triangular distribution."""
        return _spread(*_abc(parameters)) / 18.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        a, b, _c = _abc(parameters)
        return 0.5 + log((b - a) / 2.0)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of triangular distribution."""
        a, b, c = _abc(parameters)
        q = sqrt(2.0) * (a + b - 2.0 * c) * (2.0 * a - b - c) * (a - 2.0 * b + c)
        return q / (5.0 * _spread(a, b, c) ** 1.5)

    def median_func(parameters: Parametrization, _: Any) -> float:
        a, b, c = _abc(parameters)
        if c >= (a + b) / 2.0:
            return a + sqrt((b - a) * (c - a) / 2.0)
        return b - sqrt((b - a) * (b - c) / 2.0)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return _abc(parameters)[2]

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of triangular distribution"""
        a, b, _c = _abc(parameters)
        return ContinuousSupport(a, b)

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "symmetric"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
        },
        sampling_strategy=DefaultSamplingUnivariateStrategy(),
        support_by_parametrization=_support,
    )
    Triangular.__doc__ = TRIANGULAR_DOC

    @parametrization(family=Triangular, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of triangular distribution.

        Parameters
        ----------
        min : float
            Left endpoint of the support
        max : float
            Right endpoint of the support
        mode : float
            Peak location, ``min <= mode <= max``
        """

        min: float
        max: float
        mode: float

        @constraint(description="min, max and mode are finite")
        def check_finite(self) -> bool:
            return isfinite(self.min) and isfinite(self.max) and isfinite(self.mode)

        @constraint(description="min < max")
        def check_min_less_than_max(self) -> bool:
            return self.min < self.max

        @constraint(description="min <= mode <= max")
        def check_mode_inside(self) -> bool:
            return self.min <= self.mode <= self.max

    @parametrization(family=Triangular, name="symmetric")
    class _Symmetric(Parametrization):
        """
        Symmetric parametrization of triangular distribution.

        Parameters
        ----------
        center : float
            Mode and midpoint of the support
        half_width : float
            Distance from the center to either endpoint
        """

        center: float
        half_width: float

        @constraint(description="center and half_width are finite")
        def check_finite(self) -> bool:
            return isfinite(self.center) and isfinite(self.half_width)

        @constraint(description="half_width > 0")
        def check_half_width_positive(self) -> bool:
            return self.half_width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(
                min=self.center - self.half_width,
                max=self.center + self.half_width,
                mode=self.center,
            )

    logger.debug(f"configured {Triangular!r}")
    return Triangular
