"""Configuration for benchmark analysis."""

from .base import AnalysisConfig, RegressionSpec

__all__ = [
    "AnalysisConfig",
    "RegressionSpec",
]
