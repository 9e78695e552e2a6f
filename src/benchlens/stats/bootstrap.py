"""Bootstrap confidence intervals for sample statistics."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import numpy as np
from scipy import stats as scipy_stats

from benchlens.errors import InvalidInputError, UpstreamError

from .estimates import Estimate, Estimator

logger = logging.getLogger(__name__)


def _mean(values: np.ndarray, axis: int = -1) -> np.ndarray:
    return np.mean(values, axis=axis)


def _std_dev(values: np.ndarray, axis: int = -1) -> np.ndarray:
    return np.std(values, ddof=0, axis=axis)


_STATISTICS: dict[Estimator, Callable[..., np.ndarray]] = {
    Estimator.MEAN: _mean,
    Estimator.STD_DEV: _std_dev,
}


def new_system_generator(seed: int | None = None) -> np.random.Generator:
    """
    Create a fresh random generator.

    Args:
        seed: Fixed seed for reproducible resampling; None draws from OS entropy

    Returns:
        A generator owned by the caller
    """
    return np.random.default_rng(seed)


def bootstrap_estimate(
    sample: Sequence[float] | np.ndarray,
    estimators: Sequence[Estimator],
    resamples: int,
    confidence_level: float,
    rng: np.random.Generator,
) -> list[Estimate]:
    """
    Estimate statistics of a sample with BCa bootstrap intervals.

    Args:
        sample: Observed values
        estimators: Statistics to estimate, in output order
        resamples: Number of resamples drawn with replacement
        confidence_level: Interval coverage, between 0 and 1
        rng: Generator used for resampling

    Returns:
        One Estimate per estimator

    Raises:
        InvalidInputError: If the sample is empty
        UpstreamError: If scipy fails to compute an interval
    """
    arr = np.asarray(sample, dtype=np.float64)
    if arr.size == 0:
        raise InvalidInputError("cannot bootstrap an empty sample")

    estimates: list[Estimate] = []
    for estimator in estimators:
        statistic = _STATISTICS[estimator]

        # Resampling a constant sample reproduces it, so the interval collapses
        if arr.size < 2 or np.ptp(arr) == 0:
            point = float(np.mean(arr)) if estimator is Estimator.MEAN else 0.0
            estimates.append(Estimate(point, point, point, confidence_level))
            continue

        try:
            result = scipy_stats.bootstrap(
                (arr,),
                statistic,
                n_resamples=resamples,
                confidence_level=confidence_level,
                method="BCa",
                vectorized=True,
                rng=rng,
            )
        except Exception as e:
            logger.exception(f"Bootstrap of {estimator.value} failed")
            raise UpstreamError(f"bootstrap of {estimator.value} failed: {e}") from e

        estimates.append(
            Estimate(
                point=float(statistic(arr)),
                lower_bound=float(result.confidence_interval.low),
                upper_bound=float(result.confidence_interval.high),
                confidence_level=confidence_level,
            )
        )

    return estimates
