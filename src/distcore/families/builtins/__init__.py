"""
Built-in distribution families.

This package contains the statistical distribution families that are
available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from distcore.families.builtins.continuous import (
    configure_beta_family,
    configure_triangular_family,
)

__all__ = [
    "configure_beta_family",
    "configure_triangular_family",
]
