"""Tests for batch analysis."""

import asyncio

import pytest

from benchlens.config import AnalysisConfig
from benchlens.errors import NoMeasurementsError
from benchlens.runner import AnalysisOrchestrator, analyse_concurrent


@pytest.fixture
def orchestrator():
    config = AnalysisConfig(resamples=200, seed=3, regressions=["cpu_time:iters"])
    return AnalysisOrchestrator(config)


class TestAnalysisOrchestrator:
    """Tests for AnalysisOrchestrator."""

    def test_analyse_uses_config(self, orchestrator, measurements):
        """Test configured regressions and settings are applied."""
        report = orchestrator.analyse("bench", measurements, index=4)
        assert report.number == 4
        assert [r.responder for r in report.analysis.regressions] == ["time", "cpu_time"]
        assert report.analysis.mean.confidence_level == 0.95

    def test_run_numbers_in_order(self, orchestrator, measurements):
        """Test benchmarks are numbered in mapping order."""
        reports = orchestrator.run({"a": measurements, "b": measurements[:20]})
        assert [(r.number, r.name) for r in reports] == [(0, "a"), (1, "b")]
        assert reports[1].outliers.samples_seen == 20

    def test_run_fails_fast(self, orchestrator, measurements):
        """Test the first failing benchmark aborts the run."""
        with pytest.raises(NoMeasurementsError):
            orchestrator.run({"a": measurements, "empty": [], "c": measurements})


class TestAnalyseConcurrent:
    """Tests for analyse_concurrent."""

    def test_preserves_order(self, orchestrator, measurements):
        """Test reports come back in input order."""
        benchmarks = {f"bench{i}": measurements[: 10 + i] for i in range(4)}
        reports = asyncio.run(analyse_concurrent(orchestrator, benchmarks, concurrency=2))
        assert [r.name for r in reports] == list(benchmarks)
        assert [r.number for r in reports] == [0, 1, 2, 3]

    def test_matches_sequential(self, orchestrator, measurements):
        """Test seeded concurrent analysis matches the sequential run."""
        benchmarks = {"a": measurements, "b": measurements[:15]}
        sequential = orchestrator.run(benchmarks)
        concurrent = asyncio.run(analyse_concurrent(orchestrator, benchmarks, concurrency=2))
        assert [r.analysis.mean for r in concurrent] == [r.analysis.mean for r in sequential]

    def test_invalid_concurrency(self, orchestrator, measurements):
        """Test concurrency must be at least one."""
        with pytest.raises(ValueError):
            asyncio.run(analyse_concurrent(orchestrator, {"a": measurements}, concurrency=0))
