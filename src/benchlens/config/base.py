"""Analysis configuration models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class RegressionSpec(BaseModel):
    """A regression of one metric against one or more predictors."""

    predictors: list[str] = Field(min_length=1)
    responder: str = Field(min_length=1)

    @classmethod
    def parse(cls, text: str) -> RegressionSpec:
        """
        Parse a regression written as ``responder:predictor,predictor``.

        Example: ``"time:iters,allocated"``.
        """
        responder, sep, rest = text.partition(":")
        if not sep:
            raise ValueError(f"regression must look like 'responder:predictors', got {text!r}")
        predictors = [p.strip() for p in rest.split(",") if p.strip()]
        return cls(predictors=predictors, responder=responder.strip())

    def as_tuple(self) -> tuple[list[str], str]:
        """Return the spec as a (predictors, responder) pair."""
        return list(self.predictors), self.responder


class AnalysisConfig(BaseModel):
    """Settings shared by every benchmark analysis in a run."""

    confidence_level: float = Field(default=0.95, gt=0, lt=1)
    resamples: int = Field(default=1000, gt=0)
    regressions: list[RegressionSpec] = Field(default_factory=list)
    kde_points: int = Field(default=128, gt=0)
    seed: int | None = None
    concurrency: int = Field(default=1, ge=1)

    @field_validator("regressions", mode="before")
    @classmethod
    def parse_regressions(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            return [RegressionSpec.parse(v) if isinstance(v, str) else v for v in value]
        return value
