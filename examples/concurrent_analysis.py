"""Analyse several benchmarks concurrently.

Each analysis owns its random generator, so independent benchmarks can
be analysed in parallel worker threads.

Usage:
    python examples/concurrent_analysis.py
"""

import asyncio
import logging
import random

from benchlens import AnalysisConfig, AnalysisOrchestrator, Measured, analyse_concurrent


def synthetic(per_iter: float, jitter: float, rng: random.Random) -> list[Measured]:
    """Fake measurements with a fixed per-iteration cost and some noise."""
    return [
        Measured(time=per_iter * iters * rng.uniform(1 - jitter, 1 + jitter), iters=iters)
        for iters in range(1, 61)
    ]


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    rng = random.Random(7)
    benchmarks = {
        "dict lookup": synthetic(4e-8, 0.02, rng),
        "json dumps": synthetic(3e-6, 0.10, rng),
        "regex match": synthetic(6e-7, 0.30, rng),
    }

    config = AnalysisConfig(resamples=2000, concurrency=3)
    reports = await analyse_concurrent(
        AnalysisOrchestrator(config),
        benchmarks,
        concurrency=config.concurrency,
    )

    print("\nOutlier effect on variance:")
    print("-" * 50)
    for r in reports:
        ov = r.analysis.outlier_variance
        print(f"  {r.name:12s}: {ov.description:8s} ({ov.fraction:.1%})")


if __name__ == "__main__":
    asyncio.run(main())
