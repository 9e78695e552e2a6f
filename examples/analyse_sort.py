"""Analyse timings of sorting a list.

This example times ``sorted`` at increasing iteration counts, then
analyses the measurements: regression of time on iterations, bootstrap
estimates of the per-iteration mean and standard deviation, and an
outlier report.

Usage:
    python examples/analyse_sort.py
"""

import random
import time

from benchlens import AnalysisConfig, AnalysisOrchestrator, Measured, analyse_mean
from benchlens.reporters import format_seconds, note_outliers


def measure(iters: int, data: list[int]) -> Measured:
    """Time ``iters`` sorts of ``data``."""
    cpu_start = time.process_time()
    start = time.perf_counter()
    for _ in range(iters):
        sorted(data)
    elapsed = time.perf_counter() - start
    return Measured(time=elapsed, iters=iters, cpu_time=time.process_time() - cpu_start)


def main():
    rng = random.Random(42)
    data = [rng.randrange(1_000_000) for _ in range(10_000)]

    measurements = [measure(iters, data) for iters in range(1, 41)]

    config = AnalysisConfig(confidence_level=0.95, resamples=1000, regressions=["cpu_time:iters"])
    report = AnalysisOrchestrator(config).analyse("sort 10k ints", measurements)

    analysis = report.analysis
    print(f"Benchmark: {report.name}")
    print(
        f"  mean:    {format_seconds(analysis.mean.point)} "
        f"({format_seconds(analysis.mean.lower_bound)} .. "
        f"{format_seconds(analysis.mean.upper_bound)})"
    )
    print(f"  std dev: {format_seconds(analysis.std_dev.point)}")
    for regression in analysis.regressions:
        print(
            f"  {regression.responder} ~ iters: "
            f"{format_seconds(regression.coefficients['iters'])}/iter, "
            f"R²={regression.r_square:.4f}"
        )
    print(
        f"  variance introduced by outliers: {analysis.outlier_variance.fraction:.1%} "
        f"({analysis.outlier_variance.description})"
    )
    note_outliers(report.outliers)

    # Quick check of a single batch without bootstrapping
    analyse_mean([m.time / m.iters for m in measurements], iters=len(measurements))


if __name__ == "__main__":
    main()
