"""Full statistical analysis of a benchmark's measurements."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from benchlens.errors import InvalidInputError
from benchlens.metrics import MEASURE_KEYS, Measured, rescale
from benchlens.stats import (
    Estimator,
    bootstrap_estimate,
    kernel_density_estimate,
    new_system_generator,
)

from .outliers import classify_outliers
from .regression import regress
from .types import KDE, Report, SampleAnalysis
from .variance import outlier_variance

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)

DEFAULT_REGRESSION: tuple[list[str], str] = (["iters"], "time")
DEFAULT_KDE_POINTS = 128


def scale(factor: float, analysis: SampleAnalysis) -> SampleAnalysis:
    """Multiply the mean and standard deviation estimates of an analysis by ``factor``."""
    return analysis.scale(factor)


def analyse_sample(
    index: int,
    name: str,
    confidence_level: float,
    regressions: Sequence[tuple[Sequence[str], str]],
    measurements: Sequence[Measured],
    resamples: int,
    *,
    kde_points: int = DEFAULT_KDE_POINTS,
    seed: int | None = None,
) -> Report:
    """
    Perform a full analysis of one benchmark's measurements.

    The iterations-versus-time regression is always run first, followed
    by any extra regressions requested. The per-iteration times are then
    bootstrapped for mean and standard deviation, checked for outliers
    and smoothed into a density curve.

    Args:
        index: Benchmark number
        name: Benchmark name
        confidence_level: Confidence level of the bootstrap intervals, in (0, 1)
        regressions: Extra (predictors, responder) regressions to perform
        measurements: Raw measurements of the benchmark
        resamples: Number of bootstrap resamples
        kde_points: Number of points in the density curve
        seed: Seed for the resampling generator; None draws from OS entropy

    Returns:
        Report for the benchmark

    Raises:
        AnalysisError: If validation, any regression or a numerical step fails
    """
    if not 0 < confidence_level < 1:
        raise InvalidInputError(f"confidence level must be in (0, 1), got {confidence_level}")
    if resamples < 1:
        raise InvalidInputError(f"resamples must be positive, got {resamples}")

    logger.info(f"Analysing {name!r} ({len(measurements)} measurements)")

    specs = [DEFAULT_REGRESSION, *regressions]
    fitted = [regress(predictors, responder, measurements) for predictors, responder in specs]

    times = np.array([rescale(m).time for m in measurements], dtype=np.float64)
    n = len(measurements)

    logger.debug(f"Bootstrapping {name!r} with {resamples} resamples")
    rng = new_system_generator(seed)
    est_mean, est_std_dev = bootstrap_estimate(
        times,
        [Estimator.MEAN, Estimator.STD_DEV],
        resamples,
        confidence_level,
        rng,
    )

    analysis = SampleAnalysis(
        regressions=fitted,
        mean=est_mean,
        std_dev=est_std_dev,
        outlier_variance=outlier_variance(est_mean, est_std_dev, float(n)),
    )

    logger.debug(f"Estimating density of {name!r} over {kde_points} points")
    values, pdf = kernel_density_estimate(times, kde_points)

    report = Report(
        number=index,
        name=name,
        keys=list(MEASURE_KEYS),
        measured=list(measurements),
        analysis=analysis,
        outliers=classify_outliers(times),
        kdes=[KDE(type="time", values=values, pdf=pdf)],
    )

    logger.info(
        f"Analysed {name!r}: outliers have a {analysis.outlier_variance.description} "
        f"effect on variance ({analysis.outlier_variance.fraction:.1%})"
    )
    return report


def analyse_mean(
    sample: Sequence[float] | np.ndarray,
    iters: int,
    console: Console | None = None,
) -> float:
    """
    Print the mean of a sample and characterise its outliers.

    Args:
        sample: Non-empty sample of times in seconds
        iters: Number of iterations used to compute the sample
        console: Rich console (creates new one if not provided)

    Returns:
        The sample mean
    """
    from rich.console import Console

    from benchlens.reporters import format_seconds, note_outliers

    arr = np.asarray(sample, dtype=np.float64)
    if arr.size == 0:
        raise InvalidInputError("cannot compute the mean of an empty sample")

    if console is None:
        console = Console()

    mu = float(np.mean(arr))
    console.print(f"mean is {format_seconds(mu)} ({iters} iterations)", highlight=False)
    note_outliers(classify_outliers(arr), console)
    return mu
