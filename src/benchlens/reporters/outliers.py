"""Human-readable outlier notices."""

from __future__ import annotations

from rich.console import Console

from benchlens.analysis.outliers import count_outliers
from benchlens.analysis.types import Outliers


def describe_outliers(outliers: Outliers) -> list[str]:
    """
    Describe the outliers found in a sample.

    Severe buckets are reported whenever they are non-empty; mild
    buckets only when they hold more than 1% of the samples.

    Args:
        outliers: Classification to describe

    Returns:
        Notices, empty when the sample has no outliers
    """
    total = count_outliers(outliers)
    if total == 0:
        return []

    def pct(count: int) -> float:
        return 100.0 * count / outliers.samples_seen

    notices = [
        f"found {total} outliers among {outliers.samples_seen} samples ({pct(total):.1f}%)"
    ]
    for count, threshold, label in [
        (outliers.low_severe, 0, "low severe"),
        (outliers.low_mild, 1, "low mild"),
        (outliers.high_mild, 1, "high mild"),
        (outliers.high_severe, 0, "high severe"),
    ]:
        if pct(count) > threshold:
            notices.append(f"  {count} ({pct(count):.1f}%) {label}")

    return notices


def note_outliers(outliers: Outliers, console: Console | None = None) -> None:
    """
    Print outlier notices to the console.

    Args:
        outliers: Classification to report
        console: Rich console (creates new one if not provided)
    """
    if console is None:
        console = Console()

    for notice in describe_outliers(outliers):
        console.print(notice, highlight=False)
