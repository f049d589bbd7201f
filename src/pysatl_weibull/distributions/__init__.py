"""
Distributions subpackage

Interfaces and the Weibull implementation of PySATL Weibull:

- distribution protocol (:mod:`.distribution`);
- analytical computations (:mod:`.computation`);
- parameter interchange (:mod:`.parameters`);
- random sources (:mod:`.random`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- supports (:mod:`.support`);
- the Weibull distribution (:mod:`.weibull`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution
from .parameters import Parameter, ParameterMarshaler
from .random import RandomSource, default_random_source, reset_default_random_source
from .sampling import ArraySample, Sample
from .support import ContinuousSupport, Support
from .weibull import SCALE_NAME, SHAPE_NAME, WeibullDistribution

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    "WeibullDistribution",
    # parameters
    "Parameter",
    "ParameterMarshaler",
    "SHAPE_NAME",
    "SCALE_NAME",
    # random sources
    "RandomSource",
    "default_random_source",
    "reset_default_random_source",
    # sampling
    "Sample",
    "ArraySample",
    # supports
    "Support",
    "ContinuousSupport",
]
