"""
Capability Interfaces
=====================

Narrow, independently satisfiable contracts of a univariate continuous
distribution. A concrete distribution implements the subset it can; an
undefined moment is reported as ``None``, never as an exception.

- :class:`Bounded` — support endpoints.
- :class:`Moments` — mean, variance, standard deviation, entropy, skewness.
- :class:`HasMedian`, :class:`HasMode` — location summaries.
- :class:`Density` — ``pdf`` and its natural log.
- :class:`Cumulative` — ``cdf``, survival function and quantile.
- :class:`Sampleable` — random draws.

Examples
--------
>>> from distcore import configure_families_register
>>> from distcore.types import FamilyName
>>> beta = configure_families_register().get(FamilyName.BETA)(shape_a=2.0, shape_b=3.0)
>>> isinstance(beta, Density) and isinstance(beta, Moments)
True
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any

    from distcore.distributions.sampling import Sample
    from distcore.types import Number, NumericArray


@runtime_checkable
class Bounded(Protocol):
    def min(self) -> float: ...
    def max(self) -> float: ...


@runtime_checkable
class Moments(Protocol):
    def mean(self) -> float | None: ...
    def variance(self) -> float | None: ...
    def std_dev(self) -> float | None: ...
    def entropy(self) -> float | None: ...
    def skewness(self) -> float | None: ...


@runtime_checkable
class HasMedian(Protocol):
    def median(self) -> float | None: ...


@runtime_checkable
class HasMode(Protocol):
    def mode(self) -> float | None: ...


@runtime_checkable
class Density(Protocol):
    """``pdf(x) == exp(ln_pdf(x))`` wherever both are finite."""

    def pdf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def ln_pdf(self, x: Number | NumericArray) -> float | NumericArray: ...


@runtime_checkable
class Cumulative(Protocol):
    """Total, non-decreasing ``cdf`` with its complement and inverse."""

    def cdf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def sf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def inverse_cdf(self, p: Number | NumericArray) -> float | NumericArray: ...


@runtime_checkable
class Sampleable(Protocol):
    def sample(self, n: int, **options: Any) -> Sample: ...


__all__ = [
    "Bounded",
    "Moments",
    "HasMedian",
    "HasMode",
    "Density",
    "Cumulative",
    "Sampleable",
]
