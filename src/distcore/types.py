"""
Core Type Definitions
=====================

Names, type aliases and the distribution type descriptor shared by the
framework and the built-in families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

Number = np.floating[Any] | np.integer[Any] | int | float
"""A Python or NumPy real scalar."""

NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
BoolArray = NDArray[np.bool_]

type GenericCharacteristicName = str
type ParametrizationName = str


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Descriptor selecting the characteristic graph of a distribution.

    Parameters
    ----------
    kind : str
        ``"continuous"`` for every distribution of this package.
    dimension : int
        Dimension of the sample space.
    """

    kind: str
    dimension: int


UnivariateContinuous = DistributionType(kind="continuous", dimension=1)


class CharacteristicName(StrEnum):
    """
    Names of the characteristics a distribution can expose.

    ``CDF``, ``SF`` and ``PPF`` are also nodes of the characteristic graph:
    a family that supplies ``cdf`` gets the other two derived.
    """

    PDF = "pdf"
    LN_PDF = "ln_pdf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    ENTROPY = "entropy"
    MEDIAN = "median"
    MODE = "mode"


class FamilyName(StrEnum):
    BETA = "Beta"
    TRIANGULAR = "Triangular"


__all__ = [
    "BoolArray",
    "CharacteristicName",
    "DistributionType",
    "FamilyName",
    "GenericCharacteristicName",
    "Number",
    "NumericArray",
    "ParametrizationName",
    "UnivariateContinuous",
]
