"""
Beta distribution family implementation.

Contains the Beta family on ``[0, 1]`` with a shape parametrization and a
mean-precision parametrization. Infinite shape parameters are allowed and
collapse the distribution to a point mass; every characteristic dispatches on
the same ordered regime classifier.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from enum import Enum, auto
from math import inf, isfinite, isinf, sqrt
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, betaln, digamma, gamma, gammaln

from distcore.distributions.sampling import ArraySample, resolve_rng
from distcore.distributions.support import ContinuousSupport
from distcore.families.parametric_family import ParametricFamily
from distcore.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distcore.numeric import is_zero, ulps_eq
from distcore.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from distcore.distributions.distribution import Distribution
    from distcore.families.distribution import ParametricFamilyDistribution

logger = logging.getLogger(__name__)

LARGE_SHAPE_THRESHOLD = 80.0
"""Above this shape value the density is evaluated in log space."""


class _Regime(Enum):
    """Parameter regimes, listed in the order they are tested."""

    POINT_MASS_HALF = auto()
    POINT_MASS_ONE = auto()
    POINT_MASS_ZERO = auto()
    UNIFORM = auto()
    GENERAL = auto()


def _regime(shape_a: float, shape_b: float) -> _Regime:
    if isinf(shape_a) and isinf(shape_b):
        return _Regime.POINT_MASS_HALF
    if isinf(shape_a):
        return _Regime.POINT_MASS_ONE
    if isinf(shape_b):
        return _Regime.POINT_MASS_ZERO
    if ulps_eq(shape_a, 1.0) and ulps_eq(shape_b, 1.0):
        return _Regime.UNIFORM
    return _Regime.GENERAL


_ATOMS = {
    _Regime.POINT_MASS_HALF: 0.5,
    _Regime.POINT_MASS_ONE: 1.0,
    _Regime.POINT_MASS_ZERO: 0.0,
}


def _at_atom(regime: _Regime, x: NumericArray) -> NumericArray:
    """Mask of points sitting on the atom of a point-mass regime."""
    if regime is _Regime.POINT_MASS_ZERO:
        return np.asarray(is_zero(x))
    return np.asarray(ulps_eq(x, _ATOMS[regime]))


def _general_ln_pdf(shape_a: float, shape_b: float, x: NumericArray) -> NumericArray:
    """
    Log-density of the non-degenerate regime.

    At ``x ~ 0`` the ``(a - 1) ln x`` term is ``0`` for ``a ~ 1`` and ``-inf``
    otherwise; the ``(b - 1) ln(1 - x)`` term is treated alike at ``x ~ 1``.
    """
    norm = gammaln(shape_a + shape_b) - gammaln(shape_a) - gammaln(shape_b)
    with np.errstate(divide="ignore", invalid="ignore"):
        lower = np.where(
            is_zero(x),
            0.0 if ulps_eq(shape_a, 1.0) else -inf,
            (shape_a - 1.0) * np.log(x),
        )
        upper = np.where(
            ulps_eq(x, 1.0),
            0.0 if ulps_eq(shape_b, 1.0) else -inf,
            (shape_b - 1.0) * np.log1p(-x),
        )
    return cast(NumericArray, norm + lower + upper)


class BetaGammaRatioSampling:
    """
    Beta sampler built from two Gamma variates.

    Draws ``X ~ Gamma(a, 1)`` and ``Y ~ Gamma(b, 1)`` and returns
    ``X / (X + Y)``. Point-mass regimes return their atom.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        rng = resolve_rng(options)
        base = cast("ParametricFamilyDistribution", distr).base_parameters.parameters
        a, b = float(base["shape_a"]), float(base["shape_b"])

        regime = _regime(a, b)
        if regime in _ATOMS:
            values = np.full(n, _ATOMS[regime], dtype=np.float64)
        else:
            x = rng.gamma(a, 1.0, size=n)
            y = rng.gamma(b, 1.0, size=n)
            values = x / (x + y)
        return ArraySample(values.reshape(n, 1))


def configure_beta_family() -> ParametricFamily:
    """Build the Beta family together with its parametrizations."""
    BETA_DOC = """
    Beta distribution.

    A continuous distribution on [0, 1] with two positive shape parameters
    a (``shape_a``) and b (``shape_b``).

    Probability density function:
        f(x) = Γ(a + b) / (Γ(a) Γ(b)) * x^(a - 1) * (1 - x)^(b - 1)

    Either shape may be +inf: a = inf puts all mass at 1, b = inf at 0 and
    a = b = inf at 1/2. Shapes both equal to 1 give the uniform
    distribution on [0, 1].
    """

    def _shapes(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Standard, parameters)
        return float(parameters.shape_a), float(parameters.shape_b)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape_a: float (first shape, may be inf)
            - shape_b: float (second shape, may be inf)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            ``0`` outside [0, 1], ``inf`` on the atom of a point mass,
            otherwise the density values
        """
        a, b = _shapes(parameters)
        x = np.asarray(x, dtype=np.float64)
        regime = _regime(a, b)

        if regime in _ATOMS:
            inner = np.where(_at_atom(regime, x), inf, 0.0)
        elif regime is _Regime.UNIFORM:
            inner = np.ones_like(x)
        elif a > LARGE_SHAPE_THRESHOLD or b > LARGE_SHAPE_THRESHOLD:
            inner = np.exp(_general_ln_pdf(a, b, x))
        else:
            norm = gamma(a + b) / (gamma(a) * gamma(b))
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                inner = norm * np.power(x, a - 1.0) * np.power(1.0 - x, b - 1.0)

        outside = (x < 0.0) | (x > 1.0)
        result = np.where(outside, 0.0, inner)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, result))

    def ln_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Natural logarithm of the beta density.

        ``-inf`` outside [0, 1]; in point-mass regimes ``inf`` on the atom and
        ``-inf`` elsewhere; ``0`` everywhere on [0, 1] for the uniform case.
        """
        a, b = _shapes(parameters)
        x = np.asarray(x, dtype=np.float64)
        regime = _regime(a, b)

        if regime in _ATOMS:
            inner = np.where(_at_atom(regime, x), inf, -inf)
        elif regime is _Regime.UNIFORM:
            inner = np.zeros_like(x)
        else:
            inner = _general_ln_pdf(a, b, x)

        outside = (x < 0.0) | (x > 1.0)
        result = np.where(outside, -inf, inner)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, result))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for beta distribution.

        ``0`` below 0 and ``1`` from 1 on; point masses jump at their atom
        and the general regime uses the regularized incomplete beta function
        ``I_x(a, b)``.
        """
        a, b = _shapes(parameters)
        x = np.asarray(x, dtype=np.float64)
        regime = _regime(a, b)

        if regime is _Regime.POINT_MASS_HALF:
            inner = np.where(x < 0.5, 0.0, 1.0)
        elif regime is _Regime.POINT_MASS_ONE:
            inner = np.zeros_like(x)
        elif regime is _Regime.POINT_MASS_ZERO:
            inner = np.ones_like(x)
        elif regime is _Regime.UNIFORM:
            inner = x
        else:
            inner = betainc(a, b, np.clip(x, 0.0, 1.0))

        result = np.select([x < 0.0, x >= 1.0], [0.0, 1.0], default=inner)
        return cast(NumericArray, np.where(np.isnan(x), np.nan, result))

    def mean_func(parameters: Parametrization, _: Any) -> float | None:
        """Mean of beta distribution; undefined when both shapes are infinite."""
        a, b = _shapes(parameters)
        regime = _regime(a, b)
        if regime is _Regime.POINT_MASS_HALF:
            return None
        if regime in _ATOMS:
            return _ATOMS[regime]
        return a / (a + b)

    def var_func(parameters: Parametrization, _: Any) -> float | None:
        """Variance of beta distribution."""
        a, b = _shapes(parameters)
        regime = _regime(a, b)
        if regime is _Regime.POINT_MASS_HALF:
            return None
        if regime in _ATOMS:
            return 0.0
        return a * b / ((a + b) * (a + b) * (a + b + 1.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float | None:
        """Differential entropy; undefined for point masses."""
        a, b = _shapes(parameters)
        if _regime(a, b) in _ATOMS:
            return None
        return float(
            betaln(a, b)
            - (a - 1.0) * digamma(a)
            - (b - 1.0) * digamma(b)
            + (a + b - 2.0) * digamma(a + b)
        )

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of beta distribution."""
        a, b = _shapes(parameters)
        regime = _regime(a, b)
        if regime is _Regime.POINT_MASS_HALF:
            return 0.0
        if regime is _Regime.POINT_MASS_ONE:
            return -2.0
        if regime is _Regime.POINT_MASS_ZERO:
            return 2.0
        return 2.0 * (b - a) * sqrt(a + b + 1.0) / ((a + b + 2.0) * sqrt(a * b))

    def median_func(parameters: Parametrization, _: Any) -> float | None:
        a, b = _shapes(parameters)
        regime = _regime(a, b)
        if regime is _Regime.POINT_MASS_HALF:
            return None
        if regime in _ATOMS:
            return _ATOMS[regime]
        if ulps_eq(a, b):
            return 0.5
        return float(betaincinv(a, b, 0.5))

    def mode_func(parameters: Parametrization, _: Any) -> float | None:
        """
        Mode of beta distribution.

        Undefined (``None``) when either shape is at most 1 or both are
        infinite.
        """
        a, b = _shapes(parameters)
        if a <= 1.0 or b <= 1.0 or (isinf(a) and isinf(b)):
            return None
        if isinf(a):
            return 1.0
        if isinf(b):
            return 0.0
        return (a - 1.0) / (a + b - 2.0)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of beta distribution"""
        return ContinuousSupport(0.0, 1.0)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanPrecision"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
        },
        sampling_strategy=BetaGammaRatioSampling(),
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Shape parametrization of beta distribution.

        Parameters
        ----------
        shape_a : float
            First shape parameter (``alpha``), positive, may be inf
        shape_b : float
            Second shape parameter (``beta``), positive, may be inf
        """

        shape_a: float
        shape_b: float

        @constraint(description="shape_a > 0")
        def check_shape_a_positive(self) -> bool:
            return self.shape_a > 0

        @constraint(description="shape_b > 0")
        def check_shape_b_positive(self) -> bool:
            return self.shape_b > 0

    @parametrization(family=Beta, name="meanPrecision")
    class _MeanPrecision(Parametrization):
        """
        Mean-precision parametrization of beta distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution, in (0, 1)
        precision : float
            Precision ``shape_a + shape_b``, positive and finite
        """

        mean: float
        precision: float

        @constraint(description="0 < mean < 1")
        def check_mean_in_unit_interval(self) -> bool:
            return 0 < self.mean < 1

        @constraint(description="0 < precision < inf")
        def check_precision_positive_finite(self) -> bool:
            return self.precision > 0 and isfinite(self.precision)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to shape parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(
                shape_a=self.mean * self.precision,
                shape_b=(1.0 - self.mean) * self.precision,
            )

    logger.debug(f"configured {Beta!r}")
    return Beta
