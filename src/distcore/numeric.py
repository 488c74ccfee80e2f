"""
Floating-point helpers
======================

Near-equality predicates used to detect degenerate parameters and boundary
inputs, plus a small adapter that returns Python floats for scalar input.

Tolerance policy
----------------
Two doubles ``a`` and ``b`` are *ULP-equal* when any of the following holds:

- ``a == b`` (this covers equal infinities);
- ``|a - b| <= F64_EPSILON`` (absolute tolerance near zero);
- ``a`` and ``b`` have the same sign and at most ``DEFAULT_MAX_ULPS``
  representable doubles lie between them.

NaN is never equal to anything. The policy decides, for instance, whether a
shape parameter of ``1 + 2**-52`` is treated as exactly ``1``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from distcore.types import BoolArray, Number, NumericArray

F64_EPSILON: float = float(np.finfo(np.float64).eps)
"""Machine epsilon of IEEE-754 double precision."""

DEFAULT_MAX_ULPS: int = 4
"""Maximum distance in units in the last place for :func:`ulps_eq`."""


def ulps_eq(
    a: Number | NumericArray,
    b: Number | NumericArray,
    epsilon: float = F64_EPSILON,
    max_ulps: int = DEFAULT_MAX_ULPS,
) -> bool | BoolArray:
    """
    Tolerance-based equality of doubles.

    Parameters
    ----------
    a, b : Number or NumericArray
        Values to compare; arrays are broadcast against each other.
    epsilon : float, default F64_EPSILON
        Absolute tolerance.
    max_ulps : int, default DEFAULT_MAX_ULPS
        Maximum number of representable doubles between ``a`` and ``b``.

    Returns
    -------
    bool or BoolArray
        ``bool`` for scalar input, boolean array otherwise.
    """
    a_arr, b_arr = np.broadcast_arrays(
        np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)
    )

    with np.errstate(invalid="ignore"):
        close = (a_arr == b_arr) | (np.abs(a_arr - b_arr) <= epsilon)

    # Bit patterns of same-signed doubles are ordered like their magnitudes.
    same_sign = np.signbit(a_arr) == np.signbit(b_arr)
    a_bits = np.where(same_sign, a_arr.astype(np.float64).view(np.int64), 0)
    b_bits = np.where(same_sign, b_arr.astype(np.float64).view(np.int64), 0)
    near = same_sign & (np.abs(a_bits - b_bits) <= max_ulps)

    result = (close | near) & ~np.isnan(a_arr) & ~np.isnan(b_arr)

    if np.ndim(result) == 0:
        return bool(result)
    return cast("BoolArray", result)


def is_zero(x: Number | NumericArray) -> bool | BoolArray:
    """Zero test under the :func:`ulps_eq` policy."""
    return ulps_eq(x, 0.0)


def squeeze_scalar(values: NumericArray) -> float | NumericArray:
    """Return a Python ``float`` for 0-d results and the array otherwise."""
    if np.ndim(values) == 0:
        return float(values)
    return values


__all__ = [
    "F64_EPSILON",
    "DEFAULT_MAX_ULPS",
    "ulps_eq",
    "is_zero",
    "squeeze_scalar",
]
