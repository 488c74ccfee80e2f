"""
Register of parametric families, keyed by family name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from distcore.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    def __init__(self) -> None:
        self._families: dict[str, ParametricFamily] = {}

    def get(self, name: str) -> ParametricFamily:
        """
        Family registered under ``name``.

        Raises
        ------
        ValueError
            If there is none.
        """
        try:
            return self._families[name]
        except KeyError:
            raise ValueError(f"No family {name} found in register") from None

    def register(self, family: ParametricFamily) -> None:
        if family.name in self._families:
            raise ValueError(f"Family {family.name} already found in register")
        self._families[family.name] = family
        logger.debug(f"registered {family!r}")
