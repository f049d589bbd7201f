"""
Tests for the Weibull quantile function and sampler.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest

from pysatl_weibull import WeibullDistribution, default_random_source, reset_default_random_source
from pysatl_weibull.distributions.random import RandomSource
from tests.utils.mocks import ScriptedRandomSource

from .base import BaseDistributionTest


class TestWeibullQuantile(BaseDistributionTest):
    PROBABILITIES = [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999]

    @pytest.mark.parametrize("shape, scale", BaseDistributionTest.PARAMETER_GRID)
    def test_against_scipy(self, shape, scale):
        p = np.array(self.PROBABILITIES)
        result = self.make(shape, scale).quantile(p)

        assert result.shape == p.shape
        np.testing.assert_allclose(result, self.reference(shape, scale).ppf(p), rtol=1e-10)

    @pytest.mark.parametrize("shape, scale", BaseDistributionTest.PARAMETER_GRID)
    def test_cdf_inverts_quantile(self, shape, scale):
        dist = self.make(shape, scale)
        p = np.array(self.PROBABILITIES)

        self.assert_arrays_almost_equal(dist.cdf(dist.quantile(p)), p)

    def test_boundaries(self):
        dist = self.make(1.5, 2.0)

        assert dist.quantile(0.0) == 0.0
        assert dist.quantile(1.0) == math.inf

    @pytest.mark.parametrize("p", [-0.1, 1.1])
    def test_rejects_probability_outside_unit_interval(self, p):
        with pytest.raises(ValueError, match=r"\[0, 1\]"):
            self.make(1.5, 2.0).quantile(p)

    def test_rejects_array_with_any_invalid_probability(self):
        with pytest.raises(ValueError):
            self.make(1.5, 2.0).quantile(np.array([0.2, 0.5, 1.5]))

    def test_median_is_half_quantile(self):
        dist = self.make(2.5, 1.3)

        assert dist.quantile(0.5) == pytest.approx(dist.median())


class TestWeibullRand(BaseDistributionTest):
    def test_feeds_normal_deviate_into_quantile(self):
        source = ScriptedRandomSource(normals=[0.5])
        dist = WeibullDistribution(shape=2.0, scale=3.0, random_source=source)

        assert dist.rand() == pytest.approx(dist.quantile(0.5))
        assert source.normal_calls == 1
        assert source.uniform_calls == 0

    @pytest.mark.parametrize("deviate", [-0.3, 1.7])
    def test_fails_when_deviate_is_not_a_probability(self, deviate):
        dist = WeibullDistribution(2.0, 3.0, random_source=ScriptedRandomSource(normals=[deviate]))

        with pytest.raises(ValueError):
            dist.rand()

    def test_uses_default_source_when_none_attached(self):
        reset_default_random_source(seed=12345)
        deviate = float(np.random.default_rng(12345).standard_normal())
        dist = self.make(2.0, 3.0)

        if 0.0 <= deviate <= 1.0:
            assert dist.rand() == pytest.approx(dist.quantile(deviate))
        else:
            with pytest.raises(ValueError):
                dist.rand()

    def test_default_source_is_shared_until_reset(self):
        first = default_random_source()

        assert default_random_source() is first
        reset_default_random_source()
        assert default_random_source() is not first

    def test_numpy_generator_is_a_random_source(self):
        assert isinstance(np.random.default_rng(0), RandomSource)
        assert isinstance(ScriptedRandomSource(), RandomSource)

    def test_random_source_is_not_part_of_equality(self):
        with_source = WeibullDistribution(2.0, 3.0, random_source=ScriptedRandomSource())

        assert with_source == WeibullDistribution(2.0, 3.0)


class TestWeibullSample(BaseDistributionTest):
    def test_sample_shape_and_values(self):
        normals = [0.1, 0.5, 0.9]
        dist = WeibullDistribution(1.5, 2.0, random_source=ScriptedRandomSource(normals=normals))

        sample = dist.sample(3)

        assert sample.shape == (3, 1)
        assert len(sample) == 3
        self.assert_arrays_almost_equal(sample.array[:, 0], dist.quantile(np.array(normals)))

    def test_empty_sample(self):
        assert self.make(1.5, 2.0).sample(0).shape == (0, 1)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            self.make(1.5, 2.0).sample(-1)

    def test_sample_propagates_quantile_failure(self):
        dist = WeibullDistribution(
            1.5, 2.0, random_source=ScriptedRandomSource(normals=[0.2, -1.0])
        )

        with pytest.raises(ValueError):
            dist.sample(2)
