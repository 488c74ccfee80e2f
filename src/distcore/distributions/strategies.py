"""
Computation and Sampling Strategies
===================================

A distribution delegates two decisions to strategies: which callable
evaluates a characteristic, and how a sample is drawn.

:class:`DefaultComputationStrategy` holds no state. Every call looks the
characteristic up among the analytical ones and otherwise fits it afresh
along the characteristic graph, so one instance may serve any number of
distributions and threads at once.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from distcore.distributions.graph import characteristic_graph
from distcore.distributions.sampling import ArraySample, Sample, resolve_rng
from distcore.types import CharacteristicName, GenericCharacteristicName

if TYPE_CHECKING:
    from distcore.distributions.computation import Method
    from distcore.distributions.distribution import Distribution

logger = logging.getLogger(__name__)


class ComputationStrategy(Protocol):
    def provides(self, state: GenericCharacteristicName, distr: "Distribution") -> bool: ...

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> "Method[Any, Any]": ...


class DefaultComputationStrategy:
    """
    Analytical characteristics first, graph derivations second.

    A derived characteristic is fitted from the analytical source with the
    shortest path to it; the fitters receive ``**options``.
    """

    def provides(self, state: GenericCharacteristicName, distr: "Distribution") -> bool:
        """Whether ``state`` is analytical or derivable for ``distr``."""
        if state in distr.analytical_computations:
            return True
        graph = characteristic_graph(distr.distribution_type)
        return any(graph.find_path(src, state) is not None for src in distr.analytical_computations)

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> "Method[Any, Any]":
        """
        Resolve an analytical or fitted method for ``state``.

        Raises
        ------
        RuntimeError
            If ``distr`` has no analytical characteristics or none of them
            leads to ``state``.
        """
        analytical = distr.analytical_computations
        if state in analytical:
            return analytical[state]
        if not analytical:
            raise RuntimeError(
                "Distribution provides no analytical computations to ground conversions."
            )

        graph = characteristic_graph(distr.distribution_type)
        paths = [p for src in analytical if (p := graph.find_path(src, state))]
        if not paths:
            raise RuntimeError(
                f"No conversion path from any analytical characteristic to '{state}'."
            )
        path = min(paths, key=len)
        logger.debug(
            f"deriving '{state}' via {' -> '.join([path[0].source, *(m.target for m in path)])}"
        )
        fitted = None
        for edge in path:
            fitted = edge.fit(distr, **options)
        assert fitted is not None
        return fitted


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy:
    """
    Inverse transform sampler.

    Applies the distribution's ``ppf`` to ``n`` uniforms drawn from ``rng``
    (or a generator seeded with ``seed``) and returns an
    :class:`ArraySample` of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        rng = resolve_rng(options)
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        u = rng.random(n)
        if ppf.is_vectorized:
            values = np.asarray(ppf(u), dtype=np.float64)
        else:
            values = np.array([ppf(float(x)) for x in u], dtype=np.float64)
        return ArraySample(values.reshape(n, 1))
