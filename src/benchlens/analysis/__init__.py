"""Outlier classification, regression and sample analysis."""

from .outliers import classify_outliers, count_outliers
from .regression import regress
from .sample import DEFAULT_REGRESSION, analyse_mean, analyse_sample, scale
from .types import (
    KDE,
    OutlierEffect,
    Outliers,
    OutlierVariance,
    Regression,
    Report,
    SampleAnalysis,
)
from .variance import classify_effect, outlier_variance

__all__ = [
    "DEFAULT_REGRESSION",
    "KDE",
    "OutlierEffect",
    "OutlierVariance",
    "Outliers",
    "Regression",
    "Report",
    "SampleAnalysis",
    "analyse_mean",
    "analyse_sample",
    "classify_effect",
    "classify_outliers",
    "count_outliers",
    "outlier_variance",
    "regress",
    "scale",
]
