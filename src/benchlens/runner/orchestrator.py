"""Analysis orchestrator - analyses a batch of benchmarks."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from benchlens.analysis import analyse_sample

if TYPE_CHECKING:
    from benchlens.analysis import Report
    from benchlens.config import AnalysisConfig
    from benchlens.metrics import Measured

logger = logging.getLogger(__name__)


class AnalysisOrchestrator:
    """
    Applies one analysis configuration to many benchmarks.

    Coordinates:
    - Benchmark numbering
    - Extra regressions from the configuration
    - Bootstrap settings (confidence level, resamples, seed)
    """

    def __init__(self, config: AnalysisConfig) -> None:
        """
        Initialize orchestrator.

        Args:
            config: Analysis configuration
        """
        self.config = config
        self.regressions = [spec.as_tuple() for spec in config.regressions]

    def analyse(
        self,
        name: str,
        measurements: Sequence[Measured],
        index: int = 0,
    ) -> Report:
        """
        Analyse a single benchmark.

        Args:
            name: Benchmark name
            measurements: Raw measurements of the benchmark
            index: Benchmark number

        Returns:
            Report for the benchmark
        """
        return analyse_sample(
            index,
            name,
            self.config.confidence_level,
            self.regressions,
            measurements,
            self.config.resamples,
            kde_points=self.config.kde_points,
            seed=self.config.seed,
        )

    def run(self, benchmarks: Mapping[str, Sequence[Measured]]) -> list[Report]:
        """
        Analyse every benchmark in order, stopping at the first failure.

        Args:
            benchmarks: Measurements keyed by benchmark name

        Returns:
            One report per benchmark, numbered from 0 in mapping order
        """
        reports: list[Report] = []
        total = len(benchmarks)

        for index, (name, measurements) in enumerate(benchmarks.items()):
            logger.info(f"=== Benchmark {index + 1}/{total}: {name} ===")
            reports.append(self.analyse(name, measurements, index))

        logger.info(f"Analysed {total} benchmarks")
        return reports
