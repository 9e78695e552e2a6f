"""Console reporting for analysis results."""

from .format import format_seconds
from .outliers import describe_outliers, note_outliers

__all__ = [
    "describe_outliers",
    "format_seconds",
    "note_outliers",
]
