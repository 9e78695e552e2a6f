"""Effect of outliers on the estimated sample variance."""

from __future__ import annotations

import logging
import math

from benchlens.stats import Estimate

from .types import OutlierEffect, OutlierVariance

logger = logging.getLogger(__name__)


def classify_effect(fraction: float) -> tuple[OutlierEffect, str]:
    """Map the outlier share of the variance to an effect and description."""
    if fraction < 0.01:
        return OutlierEffect.UNAFFECTED, "no"
    if fraction < 0.1:
        return OutlierEffect.SLIGHT, "slight"
    if fraction < 0.5:
        return OutlierEffect.MODERATE, "moderate"
    return OutlierEffect.SEVERE, "severe"


def outlier_variance(mean: Estimate, std_dev: Estimate, sample_size: float) -> OutlierVariance:
    """
    Estimate how much outliers inflate the variance of a sample.

    Finds the smallest number of uncontaminated measurements consistent
    with the bootstrapped standard deviation and attributes the rest of
    the variance to outliers.

    Args:
        mean: Bootstrap estimate of the sample mean
        std_dev: Bootstrap estimate of the sample standard deviation
        sample_size: Number of measurements in the original sample

    Returns:
        Fraction of the variance explained by outliers, with its effect
    """
    a = sample_size
    sigma_b = std_dev.point

    # No measured spread leaves nothing for outliers to explain
    if sigma_b == 0 or not math.isfinite(sigma_b):
        logger.debug("Standard deviation is zero or undefined; outlier variance is 0")
        return OutlierVariance(OutlierEffect.UNAFFECTED, "no", 0.0)

    mu_a = mean.point / a
    mu_g_min = mu_a / 2
    sigma_g = min(mu_g_min / 4, sigma_b / math.sqrt(a))
    sigma_g2 = sigma_g * sigma_g
    sigma_b2 = sigma_b * sigma_b

    def c_max(x: float) -> int:
        d = (mu_a - x) ** 2
        ad = a * d
        k0 = -a * ad
        k1 = sigma_b2 - a * sigma_g2 + ad
        det = k1 * k1 - 4 * sigma_g2 * k0
        return math.floor(-2 * k0 / (k1 + math.sqrt(det)))

    def var_out(c: float) -> float:
        ac = a - c
        return (ac / a) * (sigma_b2 - ac * sigma_g2)

    x = min(c_max(0), c_max(mu_g_min))
    var_out_min = min(var_out(1), var_out(x)) / sigma_b2

    effect, description = classify_effect(var_out_min)
    return OutlierVariance(effect, description, var_out_min)
