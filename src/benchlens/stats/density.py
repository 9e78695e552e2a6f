"""Kernel density estimation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from scipy import stats as scipy_stats

from benchlens.errors import InvalidInputError, UpstreamError

logger = logging.getLogger(__name__)


def _point_mass(value: float, points: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Density of a zero-spread sample: all mass at the grid point nearest ``value``.

    The grid spans a tenth of the value either side (one unit when the
    value is zero).
    """
    pad = abs(value) / 10 or 1.0
    grid = np.linspace(value - pad, value + pad, points)
    pdf = np.zeros(points)
    step = grid[1] - grid[0] if points > 1 else 1.0
    pdf[np.argmin(np.abs(grid - value))] = 1.0 / step
    return grid, pdf


def kernel_density_estimate(
    sample: Sequence[float] | np.ndarray,
    points: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Estimate the density of a sample with a Gaussian kernel.

    The grid spans the sample range padded by a tenth of the range on
    each side. A sample with no spread yields a point mass instead.

    Args:
        sample: Observed values
        points: Number of grid points

    Returns:
        Tuple of (grid values, density at each grid value)
    """
    arr = np.asarray(sample, dtype=np.float64)
    if arr.size == 0:
        raise InvalidInputError("cannot estimate the density of an empty sample")
    if points < 1:
        raise InvalidInputError(f"points must be positive, got {points}")

    lo, hi = float(arr.min()), float(arr.max())
    if hi == lo:
        return _point_mass(lo, points)

    pad = (hi - lo) / 10
    grid = np.linspace(lo - pad, hi + pad, points)

    try:
        pdf = scipy_stats.gaussian_kde(arr)(grid)
    except (ValueError, np.linalg.LinAlgError) as e:
        logger.exception("Kernel density estimate failed")
        raise UpstreamError(f"kernel density estimate failed: {e}") from e

    return grid, pdf
