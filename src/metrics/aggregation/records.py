"""Shared data records for effect-size pooling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

PoolingMethod = Literal["random", "fixed"]


@dataclass(frozen=True)
class PooledEstimate:
    """Inverse-variance pooled Fisher z with its interval, plus r-scale views."""

    method: PoolingMethod
    k: int
    estimate: float
    standard_error: float
    lower: float
    upper: float
    z_score: float
    p_value: float

    @property
    def r(self) -> float:
        return math.tanh(self.estimate)

    @property
    def r_lower(self) -> float:
        return math.tanh(self.lower)

    @property
    def r_upper(self) -> float:
        return math.tanh(self.upper)


@dataclass(frozen=True)
class Heterogeneity:
    """Cochran's Q and the derived between-study variance summaries."""

    q: float
    df: int
    q_p_value: float
    tau_squared: float
    i_squared: float

    @property
    def tau(self) -> float:
        return math.sqrt(self.tau_squared)


@dataclass(frozen=True)
class EggerResult:
    """Egger regression intercept test for funnel-plot asymmetry."""

    intercept: float
    standard_error: float
    t_value: float
    df: int
    p_value: float
    slope: float


@dataclass(frozen=True)
class MetaAnalysisConfig:
    """Options for pooling a batch of effect sizes."""

    method: PoolingMethod = "random"
    confidence: float = 0.95
    egger_min_studies: int = 10

    def validate(self) -> None:
        if self.method not in ("random", "fixed"):
            raise ValueError("method must be 'random' or 'fixed'.")
        if not 0 < self.confidence < 1:
            raise ValueError("confidence must fall within (0, 1).")
        if self.egger_min_studies < 2:
            raise ValueError("egger_min_studies must be at least 2.")


__all__ = [
    "EggerResult",
    "Heterogeneity",
    "MetaAnalysisConfig",
    "PoolingMethod",
    "PooledEstimate",
]
