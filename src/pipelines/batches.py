"""Turn a filter request into prepared appraisal-emotion batches."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from src.datahub.observation import StudyObservation
from src.datahub.request import FilterRequest
from src.metrics.errors import InvalidSampleSizeError
from src.metrics.pcurve.transform import degrees_of_freedom

from .bucketing import BatchPlan, build_batch_plan


def select_batches(
    observations: Sequence[StudyObservation],
    request: FilterRequest,
) -> BatchPlan[StudyObservation]:
    """Group the observations matching ``request`` by (appraisal, emotion)."""
    return build_batch_plan(request.select(observations), lambda obs: obs.key)


def prepare_batch(observations: Iterable[StudyObservation]) -> Tuple[StudyObservation, ...]:
    """Drop observations the p-curve cannot use (N < 3 or a non-finite r)."""
    kept: List[StudyObservation] = []
    for obs in observations:
        label = obs.study_id or "unnamed study"
        try:
            degrees_of_freedom(obs.n)
        except InvalidSampleSizeError as exc:
            print(f"[pcurve] Excluding {label} ({obs.appraisal}/{obs.emotion}): {exc}")
            continue
        if not math.isfinite(obs.r) or abs(obs.r) >= 1.0:
            print(f"[pcurve] Excluding {label} ({obs.appraisal}/{obs.emotion}): r={obs.r} is not a usable correlation.")
            continue
        kept.append(obs)
    return tuple(kept)


def poolable_effects(observations: Iterable[StudyObservation]) -> Tuple[StudyObservation, ...]:
    """Drop observations without a finite z or a strictly positive, finite v."""
    kept: List[StudyObservation] = []
    for obs in observations:
        if math.isfinite(obs.z) and math.isfinite(obs.v) and obs.v > 0:
            kept.append(obs)
            continue
        label = obs.study_id or "unnamed study"
        print(f"[meta] Excluding {label} ({obs.appraisal}/{obs.emotion}): z={obs.z}, v={obs.v} cannot be pooled.")
    return tuple(kept)


__all__ = ["poolable_effects", "prepare_batch", "select_batches"]
