"""
Computation Primitives
======================

Callables that evaluate one characteristic of one distribution:

- :class:`AnalyticalComputation` wraps a family's closed form with its
  parameters bound; it takes scalars or numpy arrays;
- :class:`FittedComputationMethod` wraps a scalar function a fitter built
  from another characteristic.

:class:`ComputationMethod` is an edge ``source -> target`` of the
characteristic graph and fits the :class:`FittedComputationMethod` for a
given distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from mypy_extensions import KwArg

from distcore.types import GenericCharacteristicName

if TYPE_CHECKING:
    from distcore.distributions.distribution import Distribution

type _Func[In, Out] = Callable[[In, KwArg(Any)], Out]


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    target: GenericCharacteristicName
    func: _Func[In, Out]

    is_vectorized: ClassVar[bool] = True

    def __call__(self, value: In, **options: Any) -> Out:
        return self.func(value, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """
    Derived characteristic, evaluated one point at a time.

    Parameters
    ----------
    target : str
        Characteristic the callable computes.
    source : str
        Characteristic it was derived from.
    func : Callable
        Scalar implementation.
    """

    target: GenericCharacteristicName
    source: GenericCharacteristicName
    func: _Func[In, Out]

    is_vectorized: ClassVar[bool] = False

    def __call__(self, value: In, **options: Any) -> Out:
        return self.func(value, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    source: GenericCharacteristicName
    target: GenericCharacteristicName
    fitter: Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        """Derive ``target`` for ``distribution``; ``options`` go to the fitter."""
        return self.fitter(distribution, **options)


type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]
