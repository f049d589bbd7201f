"""
Analytical Computations
=======================

:class:`AnalyticalComputation` binds a characteristic name to the callable a
distribution provides for it. Pointwise characteristics (``pdf``, ``cdf``,
``ppf`` ...) evaluate their argument; constant characteristics (``mean``,
``var`` ...) receive and ignore it, so every computation is called the same way.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mypy_extensions import KwArg

from pysatl_weibull.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)

    @classmethod
    def constant(
        cls, target: GenericCharacteristicName, func: Callable[[], Out]
    ) -> "AnalyticalComputation[Any, Out]":
        """
        Wrap a zero-argument characteristic (a moment, the median ...).

        The resulting computation accepts and discards the usual ``data``
        argument and options.
        """

        def _evaluate(_: Any = None, **__: Any) -> Out:
            return func()

        return AnalyticalComputation(target=target, func=_evaluate)


__all__ = [
    "AnalyticalComputation",
]
