"""Duration formatting."""

from __future__ import annotations

import math

_UNITS = [
    (1.0, "s"),
    (1e-3, "ms"),
    (1e-6, "μs"),
    (1e-9, "ns"),
    (1e-12, "ps"),
]


def format_seconds(seconds: float) -> str:
    """
    Format a duration with a readable unit and about four significant digits.

    Examples: ``1.235 s``, ``12.50 ms``, ``312.0 ns``.
    """
    if not math.isfinite(seconds):
        return f"{seconds} s"
    if seconds < 0:
        return "-" + format_seconds(-seconds)

    for scale, unit in _UNITS:
        if seconds >= scale or unit == "ps":
            value = seconds / scale
            break

    if value >= 1e9:
        return f"{value:.4g} {unit}"
    if value >= 1000:
        return f"{value:.0f} {unit}"
    if value >= 100:
        return f"{value:.1f} {unit}"
    if value >= 10:
        return f"{value:.2f} {unit}"
    return f"{value:.3f} {unit}"
