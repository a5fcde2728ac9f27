"""Full and half p-curve tests for one appraisal-emotion batch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from src.datahub.observation import StudyObservation

from .stouffer import StoufferResult, stouffer_combine
from .transform import PPValueRecord, TestStatistic, compute_pp_values, statistic_from_correlation

PCurveTuple = Tuple[Optional[float], Optional[float], Optional[float], Optional[float], Optional[float], Optional[float]]


@dataclass(frozen=True)
class PCurveResult:
    """Right-skew and 33% power tests over the significant studies of a batch."""

    ksig: int
    khalf: int
    full: StoufferResult
    full33: StoufferResult
    half: StoufferResult
    half33: StoufferResult

    def as_tuple(self) -> PCurveTuple:
        """Return ``(z_full, p_full, z_33, p_33, z_half, p_half)``."""
        return (self.full.z, self.full.p, self.full33.z, self.full33.p, self.half.z, self.half.p)


def run_pcurve_from_statistics(statistics: Sequence[TestStatistic]) -> PCurveResult:
    """Combine the pp-value columns of already-converted statistics."""
    records: Sequence[PPValueRecord] = compute_pp_values(statistics)
    return PCurveResult(
        ksig=sum(1 for stat in statistics if stat.significant),
        khalf=sum(1 for stat in statistics if stat.half_significant),
        full=stouffer_combine(record.pp_full for record in records),
        full33=stouffer_combine(record.pp33_full for record in records),
        half=stouffer_combine(record.pp_half for record in records),
        half33=stouffer_combine(record.pp33_half for record in records),
    )


def run_pcurve(observations: Iterable[StudyObservation]) -> PCurveResult:
    """Run the p-curve tests on a prepared batch (every N >= 3, finite r)."""
    statistics = [statistic_from_correlation(obs.r, obs.n) for obs in observations]
    return run_pcurve_from_statistics(statistics)


__all__ = ["PCurveResult", "PCurveTuple", "run_pcurve", "run_pcurve_from_statistics"]
