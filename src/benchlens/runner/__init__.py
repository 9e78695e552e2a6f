"""Batch and concurrent analysis of benchmarks."""

from .executor import analyse_concurrent
from .orchestrator import AnalysisOrchestrator

__all__ = [
    "AnalysisOrchestrator",
    "analyse_concurrent",
]
