"""
Fitters for derived characteristics
===================================

Each ``fit_*`` function realizes one edge of the univariate continuous
characteristic graph. It resolves the source characteristic through the
distribution, wraps it as a scalar function and returns a
:class:`~distcore.distributions.computation.FittedComputationMethod`.

- ``cdf -> ppf``: Brent's method on ``cdf(x) - q`` inside the support;
- ``cdf -> sf``: the complement ``1 - cdf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from math import inf, isfinite
from typing import TYPE_CHECKING

from scipy import optimize as _sp_optimize

from distcore.distributions.computation import FittedComputationMethod
from distcore.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from distcore.distributions.distribution import Distribution

logger = logging.getLogger(__name__)

MAX_BRACKET_DOUBLINGS = 1100
"""Doublings of the search step before an unbounded side is given up on."""


def _scalar_cdf(distribution: Distribution) -> Callable[[float], float]:
    method = distribution.query_method(CharacteristicName.CDF)
    return lambda x: float(method(x))


def _bracket(
    cdf: Callable[[float], float], q: float, left: float, right: float
) -> tuple[float, float]:
    """
    Interval ``[lo, hi]`` with ``cdf(lo) < q <= cdf(hi)``.

    Finite support endpoints are used as they are; an infinite side is
    searched by doubling steps away from the origin.
    """
    lo = left if isfinite(left) else min(-1.0, right - 1.0)
    hi = right if isfinite(right) else max(1.0, left + 1.0)
    step = 1.0
    for _ in range(MAX_BRACKET_DOUBLINGS):
        move_lo = not isfinite(left) and cdf(lo) >= q
        move_hi = not isfinite(right) and cdf(hi) < q
        if not (move_lo or move_hi):
            return lo, hi
        step *= 2.0
        if move_lo:
            lo -= step
        if move_hi:
            hi += step
    raise RuntimeError(f"Could not bracket probability {q} for the quantile search.")


def fit_cdf_to_ppf(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[float, float]:
    """
    Quantile function by root finding on the cumulative distribution.

    Parameters
    ----------
    distribution : Distribution
        Distribution providing ``cdf`` and, optionally, a support.
    **options
        ``xtol``, ``rtol`` and ``maxiter`` are passed to
        :func:`scipy.optimize.brentq`.
    """
    cdf = _scalar_cdf(distribution)
    support = distribution.support
    left, right = (support.left, support.right) if support is not None else (-inf, inf)
    root_options = {k: options[k] for k in ("xtol", "rtol", "maxiter") if k in options}
    root_options.setdefault("xtol", 1e-13)

    def _ppf(q: float, **_: Any) -> float:
        if not 0.0 <= q <= 1.0:
            raise ValueError("Probability must be in [0, 1]")
        if q == 0.0:
            return left
        if q == 1.0:
            return right
        lo, hi = _bracket(cdf, q, left, right)
        if cdf(lo) >= q:
            return lo
        return float(_sp_optimize.brentq(lambda x: cdf(x) - q, lo, hi, **root_options))

    logger.debug(f"fitted ppf from cdf on [{left}, {right}]")
    return FittedComputationMethod[float, float](
        target=CharacteristicName.PPF, source=CharacteristicName.CDF, func=_ppf
    )


def fit_cdf_to_sf(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[float, float]:
    """Survival function ``1 - cdf``."""
    cdf = _scalar_cdf(distribution)
    return FittedComputationMethod[float, float](
        target=CharacteristicName.SF,
        source=CharacteristicName.CDF,
        func=lambda x, **_: 1.0 - cdf(x),
    )
