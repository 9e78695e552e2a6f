"""Named metric accessors and regression name validation."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Sequence

from benchlens.errors import DuplicateMetricError, NoPredictorsError, UnknownMetricError

from .types import Measured

Accessor = Callable[[Measured], float | None]


def _field(name: str) -> Accessor:
    def access(measured: Measured) -> float | None:
        value = getattr(measured, name)
        if value is None:
            return None
        value = float(value)
        # NaN or inf means the collector could not observe the metric
        if not math.isfinite(value):
            return None
        return value

    access.__name__ = f"access_{name}"
    return access


METRIC_DESCRIPTIONS: dict[str, str] = {
    "time": "wall-clock time",
    "cpu_time": "CPU time",
    "cycles": "CPU cycles",
    "iters": "loop iterations",
    "allocated": "bytes allocated",
    "num_gcs": "number of garbage collections",
    "bytes_copied": "number of bytes copied during GC",
    "mutator_wall_seconds": "wall-clock time for mutator threads",
    "mutator_cpu_seconds": "CPU time spent running mutator threads",
    "gc_wall_seconds": "wall-clock time spent doing GC",
    "gc_cpu_seconds": "CPU time spent doing GC",
}

MEASURE_ACCESSORS: dict[str, Accessor] = {name: _field(name) for name in METRIC_DESCRIPTIONS}

MEASURE_KEYS: tuple[str, ...] = tuple(MEASURE_ACCESSORS)


def resolve_accessors(names: Sequence[str]) -> list[tuple[str, Accessor]]:
    """
    Look up the accessor for each metric name.

    Args:
        names: Metric names, in the order the accessors are wanted

    Returns:
        (name, accessor) pairs in the same order as ``names``

    Raises:
        UnknownMetricError: If any name is not registered (all are listed)
    """
    unresolved = [name for name in names if name not in MEASURE_ACCESSORS]
    if unresolved:
        raise UnknownMetricError(unresolved)
    return [(name, MEASURE_ACCESSORS[name]) for name in names]


def validate_accessors(
    predictors: Sequence[str],
    responder: str,
) -> list[tuple[str, Accessor]]:
    """
    Validate regression metric names and resolve their accessors.

    Args:
        predictors: Predictor metric names (must be non-empty)
        responder: Responder metric name

    Returns:
        Accessors for the responder followed by the predictors

    Raises:
        NoPredictorsError: If no predictors were given
        DuplicateMetricError: If any name occurs more than once
        UnknownMetricError: If any name is not registered
    """
    if not predictors:
        raise NoPredictorsError()

    names = [responder, *predictors]
    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        raise DuplicateMetricError(duplicates)

    return resolve_accessors(names)
