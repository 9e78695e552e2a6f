"""Ordinary least squares regression."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from benchlens.errors import UpstreamError


def ols_regress(
    predictors: Sequence[Sequence[float] | np.ndarray],
    responder: Sequence[float] | np.ndarray,
) -> tuple[np.ndarray, float]:
    """
    Fit ``responder ~ predictors + intercept`` by least squares.

    Args:
        predictors: One column of observations per predictor
        responder: Observed responder values

    Returns:
        Tuple of (coefficients, R²). Coefficients are ordered like
        ``predictors`` with the intercept last.

    Raises:
        UpstreamError: If columns disagree in length or there are fewer
            observations than coefficients
    """
    y = np.asarray(responder, dtype=np.float64)
    n = y.size
    columns = [np.asarray(p, dtype=np.float64) for p in predictors]

    if any(col.size != n for col in columns):
        raise UpstreamError("predictor and responder columns differ in length")
    if n < len(columns) + 1:
        raise UpstreamError(
            f"fewer observations ({n}) than coefficients ({len(columns) + 1})"
        )

    design = np.column_stack([*columns, np.ones(n)])
    coefficients, *_ = np.linalg.lstsq(design, y, rcond=None)

    residuals = y - design @ coefficients
    sse = float(residuals @ residuals)
    centered = y - y.mean()
    sst = float(centered @ centered)
    # A constant responder is fitted exactly by the intercept alone
    r_square = 1.0 if sst == 0 else 1.0 - sse / sst

    return coefficients, r_square
