"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from distcore.families.builtins.continuous.beta import configure_beta_family
from distcore.families.builtins.continuous.triangular import configure_triangular_family

__all__ = [
    "configure_beta_family",
    "configure_triangular_family",
]
