"""
Built-in families
=================

:func:`configure_families_register` returns the register holding the
Beta and Triangular families. It is built on the first call and shared
afterwards; concurrent first calls still build it exactly once.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from functools import lru_cache

from distcore.families.builtins import (
    configure_beta_family,
    configure_triangular_family,
)
from distcore.families.registry import ParametricFamilyRegister

_configure_lock = threading.Lock()


@lru_cache(maxsize=1)
def _build_register() -> ParametricFamilyRegister:
    register = ParametricFamilyRegister()
    register.register(configure_beta_family())
    register.register(configure_triangular_family())
    return register


def configure_families_register() -> ParametricFamilyRegister:
    """Register of the built-in parametric families."""
    with _configure_lock:
        return _build_register()


def reset_families_register() -> None:
    """Drop the shared register; the next call builds a fresh one."""
    with _configure_lock:
        _build_register.cache_clear()
