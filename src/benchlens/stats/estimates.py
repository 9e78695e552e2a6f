"""Point estimates with confidence bounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Estimator(Enum):
    """Statistics that can be bootstrapped."""

    MEAN = "mean"
    STD_DEV = "std_dev"


@dataclass(frozen=True)
class Estimate:
    """A point estimate and its confidence interval."""

    point: float
    lower_bound: float
    upper_bound: float
    confidence_level: float

    def scale(self, factor: float) -> Estimate:
        """Multiply the point and both bounds by ``factor``."""
        return Estimate(
            point=self.point * factor,
            lower_bound=self.lower_bound * factor,
            upper_bound=self.upper_bound * factor,
            confidence_level=self.confidence_level,
        )
