"""
Parametrizations
================

A parametrization is a frozen dataclass holding the numbers that select one
member of a family. Methods marked with :func:`constraint` are its
invariants; :meth:`Parametrization.validate` runs them once, when a
distribution is created.

Examples
--------
>>> @parametrization(family=Beta, name="standard")
... class Standard(Parametrization):
...     shape_a: float
...     shape_b: float
...
...     @constraint("shape_a > 0")
...     def positive_a(self) -> bool:
...         return self.shape_a > 0
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields
from math import isnan
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from typing import Any

    from distcore.families.parametric_family import ParametricFamily
    from distcore.types import ParametrizationName

logger = logging.getLogger(__name__)

_CONSTRAINT_ATTR = "__constraint_description__"


class InvalidParametersError(ValueError):
    """Parameter values violate a constraint of their parametrization."""


class Parametrization:
    __param_name__: ClassVar[ParametrizationName]
    __constraints__: ClassVar[tuple[tuple[str, Callable[[Any], bool]], ...]] = ()

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    def validate(self) -> None:
        """
        Raise :class:`InvalidParametersError` for a NaN parameter or for the
        first constraint that does not hold.
        """
        for key, value in self.parameters.items():
            if isinstance(value, float) and isnan(value):
                raise InvalidParametersError(f"Parameter '{key}' must not be NaN")
        for description, check in self.__constraints__:
            if not check(self):
                logger.debug(f"{type(self).__name__}{self.parameters}: {description} fails")
                raise InvalidParametersError(f'Constraint "{description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the family's base parametrization."""
        return self


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """Mark a predicate method as an invariant named ``description``."""

    def mark(func: F) -> F:
        setattr(func, _CONSTRAINT_ATTR, description)
        return func

    return mark


def parametrization(
    *, family: ParametricFamily, name: ParametrizationName
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Turn a :class:`Parametrization` subclass into a frozen slotted dataclass
    and register it with ``family`` under ``name``.

    Constraints keep their declaration order.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        cls = dataclass(frozen=True, slots=True)(cls)
        cls.__param_name__ = name
        cls.__constraints__ = tuple(
            (getattr(attr, _CONSTRAINT_ATTR), attr)
            for attr in vars(cls).values()
            if hasattr(attr, _CONSTRAINT_ATTR)
        )
        family.register_parametrization(name, cls)
        return cls

    return register
