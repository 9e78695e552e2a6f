"""Quantile estimation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from benchlens.errors import InvalidInputError


def weighted_average(sample: Sequence[float] | np.ndarray, k: int, q: int) -> float:
    """
    Estimate the k-th q-quantile of a sample.

    Interpolates linearly between the two order statistics around
    position ``(n - 1) * k / q``.

    Args:
        sample: Values to estimate from (need not be sorted)
        k: Quantile index, between 0 and q
        q: Number of quantiles (4 for quartiles)

    Returns:
        The interpolated quantile
    """
    arr = np.asarray(sample, dtype=np.float64)
    if arr.size == 0:
        raise InvalidInputError("cannot compute a quantile of an empty sample")
    if q < 2 or not 0 <= k <= q:
        raise InvalidInputError(f"invalid quantile {k}/{q}")
    return float(np.quantile(arr, k / q, method="linear"))
