"""
Support of a univariate continuous distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from distcore.types import BoolArray, Number, NumericArray


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Interval ``[left, right]`` carrying the probability mass.

    Outside the support densities vanish and the cumulative distribution
    function is clamped to 0 (left) or 1 (right). Infinite endpoints are
    limits, so ``±inf`` is never a member.

    Parameters
    ----------
    left, right : float
        Endpoints, ``-inf`` and ``inf`` by default.
    left_closed, right_closed : bool
        Whether a finite endpoint belongs to the support.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Membership test, elementwise for arrays."""
        arr = np.asarray(x, dtype=np.float64)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        inside = above & below & np.isfinite(arr)
        return bool(inside) if inside.ndim == 0 else inside

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(x))  # type: ignore[call-overload]


__all__ = ["ContinuousSupport"]
