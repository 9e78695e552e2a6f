"""Measurement record for a single benchmark run."""

from __future__ import annotations

from dataclasses import dataclass, replace

from benchlens.errors import InvalidInputError


@dataclass(frozen=True)
class Measured:
    """
    Raw metrics collected for one batch of benchmark iterations.

    Wall-clock time and the iteration count are always recorded. All
    other metrics depend on what the collector could observe and are
    None when unavailable.
    """

    time: float
    iters: int
    cpu_time: float | None = None
    cycles: int | None = None
    allocated: int | None = None
    num_gcs: int | None = None
    bytes_copied: int | None = None
    mutator_wall_seconds: float | None = None
    mutator_cpu_seconds: float | None = None
    gc_wall_seconds: float | None = None
    gc_cpu_seconds: float | None = None

    def __post_init__(self) -> None:
        if self.iters < 1:
            raise InvalidInputError(f"iters must be at least 1, got {self.iters}")


_FLOAT_FIELDS = (
    "time",
    "cpu_time",
    "mutator_wall_seconds",
    "mutator_cpu_seconds",
    "gc_wall_seconds",
    "gc_cpu_seconds",
)
_INT_FIELDS = ("cycles", "allocated", "num_gcs", "bytes_copied")


def rescale(measured: Measured) -> Measured:
    """
    Normalize a measurement to per-iteration values.

    Every metric except the iteration count is divided by ``iters``.
    Integer metrics are rounded; missing metrics stay missing.

    Args:
        measured: Measurement covering ``measured.iters`` iterations

    Returns:
        New Measured describing a single iteration
    """
    iters = measured.iters
    changes: dict[str, float | int] = {}

    for name in _FLOAT_FIELDS:
        value = getattr(measured, name)
        if value is not None:
            changes[name] = value / iters

    for name in _INT_FIELDS:
        value = getattr(measured, name)
        if value is not None:
            changes[name] = round(value / iters)

    return replace(measured, **changes)
