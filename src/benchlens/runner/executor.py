"""Concurrent execution of independent benchmark analyses."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from benchlens.analysis import Report
    from benchlens.metrics import Measured

    from .orchestrator import AnalysisOrchestrator

logger = logging.getLogger(__name__)


async def analyse_concurrent(
    orchestrator: AnalysisOrchestrator,
    benchmarks: Mapping[str, Sequence[Measured]],
    concurrency: int,
) -> list[Report]:
    """
    Analyse benchmarks in worker threads with semaphore limiting.

    Each analysis owns its own random generator, so runs do not
    interfere with each other.

    Args:
        orchestrator: Orchestrator holding the analysis configuration
        benchmarks: Measurements keyed by benchmark name
        concurrency: Maximum analyses running at once

    Returns:
        List of reports (same order as benchmarks)
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    semaphore = asyncio.Semaphore(concurrency)

    async def run(index: int, name: str, measurements: Sequence[Measured]) -> Report:
        async with semaphore:
            logger.debug(f"Starting analysis of {name!r}")
            return await asyncio.to_thread(orchestrator.analyse, name, measurements, index)

    return list(
        await asyncio.gather(
            *[run(i, name, meas) for i, (name, meas) in enumerate(benchmarks.items())]
        )
    )
