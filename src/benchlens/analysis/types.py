"""Result types produced by benchmark analysis."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum

import numpy as np

from benchlens.metrics import Measured
from benchlens.stats import Estimate


@dataclass(frozen=True)
class Outliers:
    """
    Outlier counts for a sample, classified with the boxplot technique.

    Counts from separately classified subsets can be combined with ``+``;
    ``Outliers()`` is the empty classification. Combining is only
    meaningful when every subset was fenced with the same quartiles.
    """

    samples_seen: int = 0
    low_severe: int = 0
    low_mild: int = 0
    high_mild: int = 0
    high_severe: int = 0

    def __add__(self, other: Outliers) -> Outliers:
        if not isinstance(other, Outliers):
            return NotImplemented
        return Outliers(
            samples_seen=self.samples_seen + other.samples_seen,
            low_severe=self.low_severe + other.low_severe,
            low_mild=self.low_mild + other.low_mild,
            high_mild=self.high_mild + other.high_mild,
            high_severe=self.high_severe + other.high_severe,
        )


class OutlierEffect(IntEnum):
    """How strongly outliers inflate the sample variance, least to most."""

    UNAFFECTED = 0
    SLIGHT = 1
    MODERATE = 2
    SEVERE = 3


@dataclass(frozen=True)
class OutlierVariance:
    """Share of the sample variance explained by outliers."""

    effect: OutlierEffect
    description: str
    fraction: float


@dataclass(frozen=True)
class Regression:
    """
    Result of regressing one metric against others.

    ``coefficients`` maps each predictor name to its coefficient; the
    intercept is stored under ``"y"``.
    """

    responder: str
    coefficients: dict[str, float]
    r_square: float


@dataclass(frozen=True)
class SampleAnalysis:
    """Statistical summary of one benchmark's timing sample."""

    regressions: list[Regression]
    mean: Estimate
    std_dev: Estimate
    outlier_variance: OutlierVariance

    def scale(self, factor: float) -> SampleAnalysis:
        """Multiply the mean and standard deviation estimates by ``factor``."""
        return replace(self, mean=self.mean.scale(factor), std_dev=self.std_dev.scale(factor))


@dataclass(frozen=True)
class KDE:
    """Kernel density estimate of one metric."""

    type: str
    values: np.ndarray
    pdf: np.ndarray


@dataclass(frozen=True)
class Report:
    """Complete analysis of a single benchmark."""

    number: int
    name: str
    keys: list[str]
    measured: list[Measured]
    analysis: SampleAnalysis
    outliers: Outliers
    kdes: list[KDE] = field(default_factory=list)
