"""Statistical services used by benchmark analysis."""

from .bootstrap import bootstrap_estimate, new_system_generator
from .density import kernel_density_estimate
from .estimates import Estimate, Estimator
from .quantile import weighted_average
from .regression import ols_regress

__all__ = [
    "Estimate",
    "Estimator",
    "bootstrap_estimate",
    "kernel_density_estimate",
    "new_system_generator",
    "ols_regress",
    "weighted_average",
]
