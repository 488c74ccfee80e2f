"""
Samples
=======

What a sampling strategy returns, and how it picks its random source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping
    from typing import Any

    from distcore.types import NumericArray


class Sample(Protocol):
    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


@dataclass(frozen=True, slots=True)
class ArraySample:
    """
    Draws stored row-wise, ``(n, dimension)``.

    Raises
    ------
    ValueError
        If ``array`` is not two-dimensional.
    """

    array: NumericArray

    def __post_init__(self) -> None:
        if np.ndim(self.array) != 2:
            raise ValueError(f"ArraySample expects a 2D array, got shape {np.shape(self.array)}")

    def __len__(self) -> int:
        return len(self.array)

    def __iter__(self) -> Iterator[NumericArray]:
        return iter(self.array)

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(s) for s in self.array.shape)

    @property
    def dimension(self) -> int:
        return self.shape[1]

    def mean(self) -> NumericArray:
        """Per-column sample mean."""
        return np.mean(self.array, axis=0)

    def var(self) -> NumericArray:
        """Per-column unbiased sample variance."""
        return np.var(self.array, axis=0, ddof=1)


def resolve_rng(options: MutableMapping[str, Any]) -> np.random.Generator:
    """
    Pop ``rng`` and ``seed`` out of ``options`` and return the generator to
    draw from.

    An explicit ``rng`` wins over ``seed``; with neither, a fresh generator
    seeded from the OS is returned.
    """
    rng = options.pop("rng", None)
    seed = options.pop("seed", None)
    if rng is None:
        return np.random.default_rng(seed)
    if not isinstance(rng, np.random.Generator):
        raise TypeError(f"rng must be a numpy.random.Generator, got {type(rng).__name__}")
    return rng
