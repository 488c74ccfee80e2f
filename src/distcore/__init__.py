"""
distcore
========

Continuous probability distributions with density, cumulative distribution
and moment functions that stay well defined in degenerate parameter regimes.
Provides type definitions, capability interfaces, characteristic computation
graphs, parametric family management and the built-in Beta and Triangular
families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .numeric import *
from .numeric import __all__ as _numeric_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("distcore")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_numeric_all,
    *_types_all,
]

del _distr_all
del _family_all
del _numeric_all
del _types_all
