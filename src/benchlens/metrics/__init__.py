"""Benchmark measurement records and metric accessors."""

from .accessors import (
    MEASURE_ACCESSORS,
    MEASURE_KEYS,
    METRIC_DESCRIPTIONS,
    Accessor,
    resolve_accessors,
    validate_accessors,
)
from .types import Measured, rescale

__all__ = [
    "MEASURE_ACCESSORS",
    "MEASURE_KEYS",
    "METRIC_DESCRIPTIONS",
    "Accessor",
    "Measured",
    "rescale",
    "resolve_accessors",
    "validate_accessors",
]
