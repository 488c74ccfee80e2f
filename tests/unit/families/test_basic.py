from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np

from distcore.distributions.support import ContinuousSupport
from distcore.families import ParametricFamily, Parametrization, constraint, parametrization
from distcore.types import CharacteristicName, GenericCharacteristicName, UnivariateContinuous


class TestBaseFamily:
    PDF: GenericCharacteristicName = CharacteristicName.PDF
    CDF: GenericCharacteristicName = CharacteristicName.CDF
    MEAN: GenericCharacteristicName = CharacteristicName.MEAN

    def make_default_family(self, distr_characteristics: dict[str, Any] | None = None) -> ParametricFamily:
        """Uniform family on ``[0, value]``; ``alt`` holds half the width."""
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: lambda p, x: np.where((x >= 0) & (x <= p.value), 1.0 / p.value, 0.0),
                self.CDF: lambda p, x: np.clip(np.asarray(x) / p.value, 0.0, 1.0),
                self.MEAN: lambda p, _: p.value / 2.0,
            }
        fam = ParametricFamily(
            name="Default",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,
            support_by_parametrization=lambda p: ContinuousSupport(0.0, p.value),
        )

        @parametrization(family=fam, name="base")
        class Base(Parametrization):
            value: float

            @constraint("value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @parametrization(family=fam, name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value * 2)  # type: ignore[call-arg]

        return fam
