"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: a distribution
exposes its type, its support and a mapping of analytical computations, and
resolves characteristics by name through :meth:`Distribution.query_method`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_weibull.distributions.computation import AnalyticalComputation
    from pysatl_weibull.distributions.sampling import Sample
    from pysatl_weibull.distributions.support import Support
    from pysatl_weibull.types import EuclideanDistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def support(self) -> Support | None: ...

    def sample(self, n: int) -> Sample: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the computation for ``characteristic_name``.

        Raises
        ------
        KeyError
            If the distribution does not provide the characteristic.
        """
        computations = self.analytical_computations
        if characteristic_name not in computations:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not provided by this distribution"
            )
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any = None, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)


__all__ = [
    "Distribution",
]
