"""Exceptions raised by benchmark analysis."""

from __future__ import annotations

from collections.abc import Iterable


def render_names(names: Iterable[str]) -> str:
    """Render metric names as a quoted, comma-separated list."""
    return ", ".join(f'"{name}"' for name in names)


class AnalysisError(Exception):
    """Base class for all analysis failures."""


class InvalidInputError(AnalysisError, ValueError):
    """Input violates a precondition (e.g. an empty sample)."""


class NoPredictorsError(AnalysisError):
    """A regression was requested without any predictors."""

    def __init__(self) -> None:
        super().__init__("no predictors specified")


class DuplicateMetricError(AnalysisError):
    """The same metric appears more than once in a regression."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"duplicated metric {render_names(names)}")


class UnknownMetricError(AnalysisError):
    """One or more metric names are not in the accessor registry."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"unknown metric {render_names(names)}")


class NoMeasurementsError(AnalysisError):
    """A regression was requested over zero measurements."""

    def __init__(self) -> None:
        super().__init__("no measurements")


class NoDataAvailableError(AnalysisError):
    """The first measurement carries no value for some requested metrics."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"no data available for {render_names(names)}")


class MissingMetricError(AnalysisError):
    """A measurement after the first lacks a requested metric."""

    def __init__(self, record_index: int, metric: str) -> None:
        self.record_index = record_index
        self.metric = metric
        super().__init__(f'record {record_index} has no value for "{metric}"')


class UpstreamError(AnalysisError):
    """A numerical delegate (solver, bootstrap, density estimator) failed."""
