"""Boxplot outlier classification."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from benchlens.errors import InvalidInputError
from benchlens.stats import weighted_average

from .types import Outliers


def classify_outliers(sample: Sequence[float] | np.ndarray) -> Outliers:
    """
    Classify the values of a sample as mild or severe outliers.

    Values more than 1.5 interquartile ranges outside the quartiles are
    mild outliers, more than 3 ranges severe. Every value lands in at
    most one bucket, even when a zero IQR makes the fences coincide.

    Args:
        sample: Non-empty sample to classify

    Returns:
        Outlier counts for the sample

    Raises:
        InvalidInputError: If the sample is empty
    """
    ssa = np.sort(np.asarray(sample, dtype=np.float64))
    if ssa.size == 0:
        raise InvalidInputError("cannot classify outliers of an empty sample")

    q1 = weighted_average(ssa, 1, 4)
    q3 = weighted_average(ssa, 3, 4)
    iqr = q3 - q1

    lo_severe = q1 - iqr * 3
    lo_mild = q1 - iqr * 1.5
    hi_mild = q3 + iqr * 1.5
    hi_severe = q3 + iqr * 3

    return Outliers(
        samples_seen=int(ssa.size),
        low_severe=int(np.count_nonzero((ssa <= lo_severe) & (ssa < hi_mild))),
        low_mild=int(np.count_nonzero((ssa > lo_severe) & (ssa <= lo_mild))),
        high_mild=int(np.count_nonzero((ssa >= hi_mild) & (ssa < hi_severe))),
        high_severe=int(np.count_nonzero((ssa >= hi_severe) & (ssa > lo_mild))),
    )


def count_outliers(outliers: Outliers) -> int:
    """Total number of outliers across all four buckets."""
    return outliers.low_severe + outliers.low_mild + outliers.high_mild + outliers.high_severe
