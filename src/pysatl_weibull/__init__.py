"""
PySATL Weibull
==============

Two-parameter Weibull distribution model: density, cumulative and survival
functions, quantiles, log-density derivatives, moments, sampling and
parameter marshaling.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-weibull")
__all__ = [
    "__version__",
    *_distr_all,
    *_types_all,
]

del _distr_all
del _types_all
