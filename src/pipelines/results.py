"""Per-batch meta-analysis results and their tabular view."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from src.datahub.observation import StudyObservation
from src.datahub.request import FilterRequest
from src.metrics.aggregation import (
    EggerResult,
    Heterogeneity,
    MetaAnalysisConfig,
    PooledEstimate,
    assess_heterogeneity,
    egger_test,
    interpret_batch,
    pool_effects,
)
from src.metrics.pcurve import PCurveResult, run_pcurve

from .batches import poolable_effects, prepare_batch, select_batches


@dataclass(frozen=True)
class BatchResult:
    """Everything displayed for one appraisal-emotion pair."""

    appraisal: str
    emotion: str
    pooled: PooledEstimate
    heterogeneity: Heterogeneity
    egger: Optional[EggerResult] = None
    pcurve: Optional[PCurveResult] = None
    interpretation: Optional[str] = None

    @property
    def k(self) -> int:
        return self.pooled.k


def analyze_batch(
    appraisal: str,
    emotion: str,
    observations: Sequence[StudyObservation],
    publication_bias: bool = False,
    interpretation: bool = False,
    config: Optional[MetaAnalysisConfig] = None,
) -> BatchResult:
    cfg = config or MetaAnalysisConfig()
    pooled = pool_effects(observations, cfg)
    heterogeneity = assess_heterogeneity(observations)

    egger: Optional[EggerResult] = None
    pcurve: Optional[PCurveResult] = None
    if publication_bias:
        egger = egger_test(observations, min_studies=cfg.egger_min_studies)
        pcurve = run_pcurve(prepare_batch(observations))

    text: Optional[str] = None
    if interpretation:
        text = interpret_batch(appraisal, emotion, pooled, heterogeneity, egger=egger, pcurve=pcurve)

    return BatchResult(
        appraisal=appraisal,
        emotion=emotion,
        pooled=pooled,
        heterogeneity=heterogeneity,
        egger=egger,
        pcurve=pcurve,
        interpretation=text,
    )


def build_results(
    observations: Sequence[StudyObservation],
    request: FilterRequest,
    config: Optional[MetaAnalysisConfig] = None,
) -> List[BatchResult]:
    """Recompute every batch selected by ``request`` from scratch."""
    plan = select_batches(observations, request)
    print(f"[meta] {len(plan)} appraisal-emotion pairs match emotion={request.emotion}, appraisal={request.appraisal}")

    results: List[BatchResult] = []
    for key in plan.keys:
        appraisal, emotion = key
        members = poolable_effects(plan.members[key])
        if not members:
            print(f"[meta] Skipping {appraisal} × {emotion}: no poolable effect sizes")
            continue
        results.append(
            analyze_batch(
                appraisal,
                emotion,
                members,
                publication_bias=request.publication_bias,
                interpretation=request.interpretation,
                config=config,
            )
        )
    return results


def _result_row(result: BatchResult, request: FilterRequest) -> Dict[str, object]:
    row: Dict[str, object] = {
        "Appraisal": result.appraisal,
        "Emotion": result.emotion,
        "k": result.k,
        "r": result.pooled.r,
        "CI lower": result.pooled.r_lower,
        "CI upper": result.pooled.r_upper,
        "p": result.pooled.p_value,
        "Q": result.heterogeneity.q,
        "Q p": result.heterogeneity.q_p_value,
        "tau": result.heterogeneity.tau,
        "I2": result.heterogeneity.i_squared,
    }
    if request.publication_bias:
        row["Egger p"] = result.egger.p_value if result.egger else None
        z_full, p_full, z_33, p_33, z_half, p_half = (
            result.pcurve.as_tuple() if result.pcurve else (None,) * 6
        )
        row.update(
            {
                "p-curve z": z_full,
                "p-curve p": p_full,
                "33% z": z_33,
                "33% p": p_33,
                "half z": z_half,
                "half p": p_half,
            }
        )
    if request.interpretation:
        row["Interpretation"] = result.interpretation
    return row


def results_to_frame(results: Sequence[BatchResult], request: FilterRequest) -> pd.DataFrame:
    """Lay results out one row per appraisal-emotion pair."""
    return pd.DataFrame([_result_row(result, request) for result in results])


def write_results(frame: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    print(f"[meta] Saved {len(frame)} rows → {path}")
    return path


__all__ = ["BatchResult", "analyze_batch", "build_results", "results_to_frame", "write_results"]
