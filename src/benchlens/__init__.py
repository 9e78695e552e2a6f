"""benchlens - statistical analysis of benchmark measurements."""

from benchlens.analysis import (
    KDE,
    OutlierEffect,
    Outliers,
    OutlierVariance,
    Regression,
    Report,
    SampleAnalysis,
    analyse_mean,
    analyse_sample,
    classify_outliers,
    count_outliers,
    outlier_variance,
    regress,
)
from benchlens.config import AnalysisConfig, RegressionSpec
from benchlens.errors import AnalysisError
from benchlens.metrics import MEASURE_KEYS, Measured, resolve_accessors, validate_accessors
from benchlens.reporters import describe_outliers, note_outliers
from benchlens.runner import AnalysisOrchestrator, analyse_concurrent

__version__ = "0.1.0"

__all__ = [
    "KDE",
    "MEASURE_KEYS",
    "AnalysisConfig",
    "AnalysisError",
    "AnalysisOrchestrator",
    "Measured",
    "OutlierEffect",
    "OutlierVariance",
    "Outliers",
    "Regression",
    "RegressionSpec",
    "Report",
    "SampleAnalysis",
    "analyse_concurrent",
    "analyse_mean",
    "analyse_sample",
    "classify_outliers",
    "count_outliers",
    "describe_outliers",
    "note_outliers",
    "outlier_variance",
    "regress",
    "resolve_accessors",
    "validate_accessors",
]
