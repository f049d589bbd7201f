"""
Weibull Distribution
====================

Two-parameter Weibull distribution over the non-negative reals.

Probability density function:
    f(x) = (K/λ) * (x/λ)^(K-1) * exp(-(x/λ)^K) for x ≥ 0

with shape ``K > 0`` and scale ``λ > 0``. ``K = 1`` is the exponential
distribution with mean ``λ``, ``K = 2`` the Rayleigh distribution.

Notes
-----
- Parameters are not validated on construction; behaviour for ``K ≤ 0`` or
  ``λ ≤ 0`` is unspecified.
- Pointwise characteristics accept scalars or arrays. Scalars give ``float``,
  arrays give arrays of the same shape.
- Analytically undefined values are returned as ``nan`` (or ``±inf``) rather
  than raised.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from scipy.special import gamma

from pysatl_weibull.distributions.computation import AnalyticalComputation
from pysatl_weibull.distributions.distribution import Distribution
from pysatl_weibull.distributions.parameters import Parameter, check_length
from pysatl_weibull.distributions.random import RandomSource, default_random_source
from pysatl_weibull.distributions.sampling import ArraySample
from pysatl_weibull.distributions.support import ContinuousSupport
from pysatl_weibull.types import (
    CharacteristicName,
    EuclideanDistributionType,
    Number,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableSequence, Sequence

    import numpy.typing as npt

    from pysatl_weibull.types import GenericCharacteristicName

SHAPE_NAME = "K"
SCALE_NAME = "λ"


def _unwrap(result: Any, like: Any) -> Any:
    """Return a ``float`` for scalar input and the array otherwise."""
    if np.ndim(like) == 0:
        return float(result)
    return cast(NumericArray, result)


@dataclass(slots=True)
class WeibullDistribution(Distribution):
    """
    Weibull distribution with shape ``K`` and scale ``λ``.

    Parameters
    ----------
    shape : float
        Shape parameter ``K``, valid range ``(0, +inf)``.
    scale : float
        Scale parameter ``λ``, valid range ``(0, +inf)``.
    random_source : RandomSource, optional
        Source of deviates for :meth:`rand`. Borrowed, never owned; the
        process-wide default is used when absent.
    """

    shape: float
    scale: float
    random_source: RandomSource | None = field(default=None, compare=False, repr=False)

    # ------------------------------------------------------------------ #
    # Distribution interface
    # ------------------------------------------------------------------ #

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        """Support ``[0, +inf)``."""
        return ContinuousSupport(left=0.0)

    @property
    def parameters(self) -> dict[str, float]:
        """Parameters keyed by their public names."""
        return {SHAPE_NAME: self.shape, SCALE_NAME: self.scale}

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Mapping from characteristic name to analytical callable."""
        pointwise = {
            CharacteristicName.PDF: self.prob,
            CharacteristicName.LOG_PDF: self.log_prob,
            CharacteristicName.CDF: self.cdf,
            CharacteristicName.SF: self.survival,
            CharacteristicName.PPF: self.quantile,
        }
        constants = {
            CharacteristicName.MEAN: self.mean,
            CharacteristicName.VAR: self.variance,
            CharacteristicName.STD: self.std_dev,
            CharacteristicName.SKEW: self.skewness,
            CharacteristicName.KURT: self.ex_kurtosis,
            CharacteristicName.ENTROPY: self.entropy,
            CharacteristicName.MEDIAN: self.median,
            CharacteristicName.MODE: self.mode,
        }
        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {
            name: AnalyticalComputation(target=name, func=func) for name, func in pointwise.items()
        }
        computations.update(
            {
                name: AnalyticalComputation.constant(name, func)
                for name, func in constants.items()
            }
        )
        return computations

    # ------------------------------------------------------------------ #
    # Density and cumulative family
    # ------------------------------------------------------------------ #

    def cdf(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Cumulative distribution function ``1 - exp(-(x/λ)^K)``.

        Returns 0 for ``x < 0``.
        """
        arr = np.asarray(x, dtype=np.float64)
        with np.errstate(invalid="ignore", over="ignore"):
            inside = -np.expm1(-np.power(arr / self.scale, self.shape))
        return _unwrap(np.where(arr < 0, 0.0, inside), x)

    def survival(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Survival function (complementary CDF) ``exp(-(x/λ)^K)``.

        Returns 1 for ``x < 0``.
        """
        arr = np.asarray(x, dtype=np.float64)
        with np.errstate(invalid="ignore", over="ignore"):
            inside = np.exp(-np.power(arr / self.scale, self.shape))
        return _unwrap(np.where(arr < 0, 1.0, inside), x)

    def log_prob(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Natural logarithm of the density.

        Parameters
        ----------
        x : Number or array_like
            Points at which to evaluate the log-density.

        Returns
        -------
        float or NumericArray
            ``log(K/λ) + (K-1) log(x/λ) - (x/λ)^K`` for ``x ≥ 0``, and 0
            (not ``-inf``) for ``x < 0``.

        Notes
        -----
        At ``x = 0`` the value depends on the shape:

        - ``0 < K < 1``: ``+inf``;
        - ``K == 1``: 0, for every ``λ``;
        - ``K > 1``: ``-inf``.
        """
        arr = np.asarray(x, dtype=np.float64)
        z = arr / self.scale
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            log_density = np.log(self.shape / self.scale) - np.power(z, self.shape)
            if self.shape == 1.0:
                log_density = np.where(arr == 0, 0.0, log_density)
            else:
                log_density = log_density + (self.shape - 1.0) * np.log(z)
        return _unwrap(np.where(arr < 0, 0.0, log_density), x)

    def prob(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """Probability density function; 0 for ``x < 0``."""
        arr = np.asarray(x, dtype=np.float64)
        with np.errstate(over="ignore"):
            density = np.exp(self.log_prob(arr))
        return _unwrap(np.where(arr < 0, 0.0, density), x)

    def hazard(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """Hazard rate ``f(x) / S(x) = (K/λ) (x/λ)^(K-1)``; 0 for ``x < 0``."""
        arr = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            rate = np.full(arr.shape, self.shape / self.scale)
            if self.shape != 1.0:
                rate = rate * np.power(arr / self.scale, self.shape - 1.0)
        return _unwrap(np.where(arr < 0, 0.0, rate), x)

    # ------------------------------------------------------------------ #
    # Derivatives
    # ------------------------------------------------------------------ #

    def dlogprob_dx(self, x: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Derivative of the log-density with respect to ``x``.

        ``-(K (x/λ)^K + K - 1) / x`` for ``x > 0``, 0 for ``x < 0`` and
        ``nan`` at ``x == 0``.

        Notes
        -----
        The analytic derivative of :meth:`log_prob` is
        ``(K - 1 - K (x/λ)^K) / x``; the two agree only for ``K == 1``.
        """
        arr = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            zk = np.power(arr / self.scale, self.shape)
            positive = -(self.shape * zk + self.shape - 1.0) / arr
        return _unwrap(np.where(arr > 0, positive, np.where(arr < 0, 0.0, np.nan)), x)

    def dlogprob_dparam(
        self, x: Number | npt.ArrayLike, out: MutableSequence[Any] | None = None
    ) -> Any:
        """
        Derivatives of :meth:`log_prob` with respect to the parameters.

        Parameters
        ----------
        x : Number or array_like
            Point(s) of evaluation.
        out : mutable sequence of length 2, optional
            Container receiving the derivatives. A new array is allocated
            when omitted.

        Returns
        -------
        numpy.ndarray or the given ``out``
            ``[∂/∂K, ∂/∂λ]``, in that order. Both are 0 for ``x < 0`` and
            ``nan`` at ``x == 0``.

        Raises
        ------
        ValueError
            If ``out`` does not have length 2.
        """
        if out is not None:
            check_length("weibull", out, self.num_parameters, "derivative length mismatch")

        arr = np.asarray(x, dtype=np.float64)
        k = self.shape
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            z = arr / self.scale
            zk_minus_one = np.power(z, k) - 1.0
            d_shape = (1.0 - k * zk_minus_one * np.log(z)) / k
            d_scale = k * zk_minus_one / self.scale

        d_shape = np.where(arr > 0, d_shape, np.where(arr < 0, 0.0, np.nan))
        d_scale = np.where(arr > 0, d_scale, np.where(arr < 0, 0.0, np.nan))

        if out is None:
            return np.stack([d_shape, d_scale])
        out[0] = _unwrap(d_shape, x)
        out[1] = _unwrap(d_scale, x)
        return out

    # ------------------------------------------------------------------ #
    # Moments and shape descriptors
    # ------------------------------------------------------------------ #

    def _gamma_pow(self, i: float, power: float) -> float:
        """``Γ(1 + i/K) ** power``."""
        return float(gamma(1.0 + i / self.shape)) ** power

    def mean(self) -> float:
        return self.scale * self._gamma_pow(1, 1)

    def variance(self) -> float:
        return self.scale**2 * (self._gamma_pow(2, 1) - self._gamma_pow(1, 2))

    def std_dev(self) -> float:
        return math.sqrt(self.variance())

    def skewness(self) -> float:
        mean = self.mean()
        std_dev = self.std_dev()
        return (
            self._gamma_pow(3, 1) * self.scale**3 - 3 * mean * std_dev**2 - mean**3
        ) / std_dev**3

    def ex_kurtosis(self) -> float:
        """Excess kurtosis (fourth standardised moment minus 3)."""
        g = self._gamma_pow
        numerator = (
            -6 * g(1, 4) + 12 * g(1, 2) * g(2, 1) - 3 * g(2, 2) - 4 * g(1, 1) * g(3, 1) + g(4, 1)
        )
        return numerator / (g(2, 1) - g(1, 2)) ** 2

    def entropy(self) -> float:
        """Differential entropy ``γ (1 - 1/K) + log(λ/K) + 1``."""
        euler_term = float(np.euler_gamma) * (1.0 - 1.0 / self.shape)
        return euler_term + math.log(self.scale / self.shape) + 1.0

    def median(self) -> float:
        return self.scale * math.log(2.0) ** (1.0 / self.shape)

    def mode(self) -> float:
        """
        Mode of the distribution.

        ``λ ((K-1)/K)^(1/K)`` for ``K > 1``, 0 for ``K == 1`` and ``nan`` for
        ``K < 1``, where the density decreases monotonically from ``+inf``.
        """
        if self.shape > 1.0:
            return self.scale * ((self.shape - 1.0) / self.shape) ** (1.0 / self.shape)
        if self.shape == 1.0:
            return 0.0
        return math.nan

    # ------------------------------------------------------------------ #
    # Quantile and sampling
    # ------------------------------------------------------------------ #

    def quantile(self, p: Number | npt.ArrayLike) -> float | NumericArray:
        """
        Percent point function (inverse CDF) ``λ (-log(1-p))^(1/K)``.

        Parameters
        ----------
        p : Number or array_like
            Probability from [0, 1].

        Returns
        -------
        float or NumericArray
            0 for ``p = 0`` and ``inf`` for ``p = 1``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1].
        """
        arr = np.asarray(p, dtype=np.float64)
        if np.any((arr < 0) | (arr > 1)):
            raise ValueError("Probability must be in [0, 1]")

        with np.errstate(divide="ignore"):
            return _unwrap(self.scale * np.power(-np.log1p(-arr), 1.0 / self.shape), p)

    def rand(self) -> float:
        """
        Draw one value through :meth:`quantile`.

        The argument passed to :meth:`quantile` is a *standard normal*
        deviate of the random source, so the result is not Weibull distributed
        and a ``ValueError`` is raised whenever the deviate falls outside
        [0, 1].
        """
        source = self.random_source if self.random_source is not None else default_random_source()
        return cast(float, self.quantile(float(source.standard_normal())))

    def sample(self, n: int) -> ArraySample:
        """
        Draw ``n`` values with :meth:`rand`.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.
        """
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        return ArraySample.from_values([self.rand() for _ in range(n)])

    # ------------------------------------------------------------------ #
    # Parameter marshaling
    # ------------------------------------------------------------------ #

    @property
    def num_parameters(self) -> int:
        return 2

    def marshal_parameters(
        self, out: MutableSequence[Parameter] | None = None
    ) -> MutableSequence[Parameter]:
        """
        Export ``[K, λ]`` as named parameters.

        Parameters
        ----------
        out : mutable sequence of length 2, optional
            Container to fill in place; a new list is returned when omitted.

        Raises
        ------
        ValueError
            If ``out`` does not have length 2.
        """
        if out is None:
            return [Parameter(SHAPE_NAME, self.shape), Parameter(SCALE_NAME, self.scale)]

        check_length("weibull", out, self.num_parameters, "improper parameter length")
        out[0] = Parameter(SHAPE_NAME, self.shape)
        out[1] = Parameter(SCALE_NAME, self.scale)
        return out

    def unmarshal_parameters(self, params: Sequence[Parameter]) -> None:
        """
        Set ``K`` and ``λ`` from named parameters.

        Parameters
        ----------
        params : sequence of Parameter
            Exactly ``[Parameter("K", ...), Parameter("λ", ...)]``.

        Raises
        ------
        ValueError
            If the length or either name does not match. The distribution is
            left unchanged.
        """
        check_length(
            "weibull", params, self.num_parameters, "incorrect number of parameters to set"
        )
        for position, expected in enumerate((SHAPE_NAME, SCALE_NAME)):
            if params[position].name != expected:
                raise ValueError(
                    f"weibull: parameter name mismatch at position {position}: "
                    f"expected {expected!r}, got {params[position].name!r}"
                )

        self.shape = float(params[0].value)
        self.scale = float(params[1].value)


__all__ = [
    "WeibullDistribution",
    "SHAPE_NAME",
    "SCALE_NAME",
]
