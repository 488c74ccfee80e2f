"""
Distributions subpackage

- distribution protocol (:mod:`.distribution`);
- capability interfaces (:mod:`.capabilities`);
- characteristic graph and its fitters (:mod:`.graph`, :mod:`.fitters`);
- samples (:mod:`.sampling`);
- computation and sampling strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .capabilities import (
    Bounded,
    Cumulative,
    Density,
    HasMedian,
    HasMode,
    Moments,
    Sampleable,
)
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .graph import CharacteristicGraph, characteristic_graph
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport

__all__ = [
    # capabilities
    "Bounded",
    "Moments",
    "HasMedian",
    "HasMode",
    "Density",
    "Cumulative",
    "Sampleable",
    # computation
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    "CharacteristicGraph",
    "characteristic_graph",
    # distribution
    "Distribution",
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "ContinuousSupport",
]
