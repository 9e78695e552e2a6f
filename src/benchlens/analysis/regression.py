"""Regression of one benchmark metric against others."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from benchlens.errors import MissingMetricError, NoDataAvailableError, NoMeasurementsError
from benchlens.metrics import Measured, validate_accessors
from benchlens.stats import ols_regress

from .types import Regression

logger = logging.getLogger(__name__)


def regress(
    predictors: Sequence[str],
    responder: str,
    measurements: Sequence[Measured],
) -> Regression:
    """
    Regress the given predictors against the responder.

    Args:
        predictors: Predictor metric names
        responder: Responder metric name
        measurements: Measurements to fit, all carrying every named metric

    Returns:
        Regression with one coefficient per predictor and the intercept under "y"

    Raises:
        NoMeasurementsError: If there are no measurements
        NoPredictorsError: If no predictors were given
        DuplicateMetricError: If a metric is named more than once
        UnknownMetricError: If a metric name is not registered
        NoDataAvailableError: If the first measurement lacks any metric
        MissingMetricError: If a later measurement lacks a metric
        UpstreamError: If the least-squares fit fails
    """
    if not measurements:
        raise NoMeasurementsError()

    accessors = validate_accessors(predictors, responder)

    head = measurements[0]
    unmeasured = [name for name, access in accessors if access(head) is None]
    if unmeasured:
        raise NoDataAvailableError(unmeasured)

    columns = np.empty((len(accessors), len(measurements)), dtype=np.float64)
    for i, measured in enumerate(measurements):
        for j, (name, access) in enumerate(accessors):
            value = access(measured)
            if value is None:
                raise MissingMetricError(i, name)
            columns[j, i] = value

    responder_column, *predictor_columns = columns
    coefficients, r_square = ols_regress(predictor_columns, responder_column)

    logger.debug(f"Regressed {responder} on {', '.join(predictors)}: R²={r_square:.4f}")

    return Regression(
        responder=responder,
        coefficients={
            name: float(coef)
            for name, coef in zip([*predictors, "y"], coefficients, strict=True)
        },
        r_square=r_square,
    )
