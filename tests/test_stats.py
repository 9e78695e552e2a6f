"""Tests for the statistical services."""

import numpy as np
import pytest

from benchlens.errors import InvalidInputError, UpstreamError
from benchlens.stats import (
    Estimate,
    Estimator,
    bootstrap_estimate,
    kernel_density_estimate,
    new_system_generator,
    ols_regress,
    weighted_average,
)


class TestWeightedAverage:
    """Tests for quantile interpolation."""

    def test_quartiles(self):
        """Test quartiles interpolate between order statistics."""
        sample = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
        assert weighted_average(sample, 1, 4) == pytest.approx(3.25)
        assert weighted_average(sample, 3, 4) == pytest.approx(7.75)

    def test_unsorted_input(self):
        """Test the sample need not be sorted."""
        assert weighted_average([3.0, 1.0, 2.0], 2, 4) == pytest.approx(2.0)

    def test_single_value(self):
        """Test any quantile of one value is that value."""
        assert weighted_average([4.0], 1, 4) == 4.0

    def test_empty_rejected(self):
        """Test an empty sample is rejected."""
        with pytest.raises(InvalidInputError):
            weighted_average([], 1, 4)

    def test_invalid_quantile_rejected(self):
        """Test k must lie between 0 and q."""
        with pytest.raises(InvalidInputError):
            weighted_average([1.0, 2.0], 5, 4)


class TestBootstrapEstimate:
    """Tests for bootstrap_estimate."""

    @pytest.fixture
    def sample(self):
        return np.random.default_rng(99).normal(loc=10.0, scale=2.0, size=100)

    def test_estimates_in_requested_order(self, sample):
        """Test one estimate per estimator, in order."""
        mean, std = bootstrap_estimate(
            sample, [Estimator.MEAN, Estimator.STD_DEV], 500, 0.95, new_system_generator(1)
        )
        assert mean.point == pytest.approx(float(np.mean(sample)))
        assert std.point == pytest.approx(float(np.std(sample)))
        assert mean.confidence_level == 0.95

    def test_interval_brackets_point(self, sample):
        """Test the interval contains the point estimate."""
        (mean,) = bootstrap_estimate(sample, [Estimator.MEAN], 500, 0.95, new_system_generator(2))
        assert mean.lower_bound <= mean.point <= mean.upper_bound
        assert mean.lower_bound < mean.upper_bound

    def test_seeded_generator_is_reproducible(self, sample):
        """Test equal seeds give equal intervals."""
        first = bootstrap_estimate(sample, [Estimator.MEAN], 300, 0.9, new_system_generator(5))
        second = bootstrap_estimate(sample, [Estimator.MEAN], 300, 0.9, new_system_generator(5))
        assert first == second

    def test_constant_sample_is_degenerate(self):
        """Test a constant sample collapses the interval onto the point."""
        mean, std = bootstrap_estimate(
            [3.0] * 10, [Estimator.MEAN, Estimator.STD_DEV], 100, 0.95, new_system_generator(0)
        )
        assert mean == Estimate(3.0, 3.0, 3.0, 0.95)
        assert std == Estimate(0.0, 0.0, 0.0, 0.95)

    def test_empty_rejected(self):
        """Test an empty sample is rejected."""
        with pytest.raises(InvalidInputError):
            bootstrap_estimate([], [Estimator.MEAN], 100, 0.95, new_system_generator(0))


class TestEstimate:
    """Tests for Estimate."""

    def test_scale(self):
        """Test scaling multiplies point and bounds."""
        scaled = Estimate(2.0, 1.0, 3.0, 0.95).scale(10.0)
        assert scaled == Estimate(20.0, 10.0, 30.0, 0.95)


class TestOlsRegress:
    """Tests for ols_regress."""

    def test_intercept_last(self):
        """Test the intercept follows the predictor coefficients."""
        coefficients, r_square = ols_regress([[1.0, 2.0, 3.0, 4.0]], [5.0, 7.0, 9.0, 11.0])
        assert coefficients == pytest.approx([2.0, 3.0])
        assert r_square == pytest.approx(1.0)

    def test_constant_responder(self):
        """Test a constant responder fitted exactly has R² of one."""
        _, r_square = ols_regress([[1.0, 2.0, 3.0]], [4.0, 4.0, 4.0])
        assert r_square == 1.0

    def test_length_mismatch(self):
        """Test columns of different lengths are rejected."""
        with pytest.raises(UpstreamError):
            ols_regress([[1.0, 2.0]], [1.0, 2.0, 3.0])

    def test_underdetermined(self):
        """Test fewer observations than coefficients are rejected."""
        with pytest.raises(UpstreamError):
            ols_regress([[1.0, 2.0], [3.0, 1.0]], [1.0, 2.0])


class TestKernelDensityEstimate:
    """Tests for kernel_density_estimate."""

    def test_grid_spans_padded_range(self):
        """Test the grid covers the sample range plus a tenth either side."""
        values, pdf = kernel_density_estimate([0.0, 1.0, 2.0, 3.0, 10.0], 128)
        assert len(values) == 128
        assert len(pdf) == 128
        assert values[0] == pytest.approx(-1.0)
        assert values[-1] == pytest.approx(11.0)

    def test_density_is_non_negative(self):
        """Test densities are never negative."""
        sample = np.random.default_rng(3).normal(size=200)
        _, pdf = kernel_density_estimate(sample, 64)
        assert np.all(pdf >= 0)

    def test_constant_sample_is_point_mass(self):
        """Test a zero-spread sample puts all density at its value."""
        values, pdf = kernel_density_estimate([2.0, 2.0, 2.0], 16)
        step = values[1] - values[0]
        assert values[0] == pytest.approx(1.8)
        assert values[-1] == pytest.approx(2.2)
        assert np.count_nonzero(pdf) == 1
        assert abs(values[np.argmax(pdf)] - 2.0) <= step / 2 + 1e-12
        assert float(pdf.sum() * step) == pytest.approx(1.0)

    def test_constant_zero_sample(self):
        """Test a sample of zeros gets a unit-wide grid."""
        values, pdf = kernel_density_estimate([0.0, 0.0], 5)
        assert list(values) == pytest.approx([-1.0, -0.5, 0.0, 0.5, 1.0])
        assert list(pdf) == pytest.approx([0.0, 0.0, 2.0, 0.0, 0.0])

    def test_empty_rejected(self):
        """Test an empty sample is rejected."""
        with pytest.raises(InvalidInputError):
            kernel_density_estimate([], 16)
