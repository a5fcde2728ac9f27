"""Egger's regression test for small-study effects."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
from scipy import stats

from src.datahub.observation import StudyObservation

from .builders import build_effect_arrays
from .records import EggerResult


def egger_test(observations: Iterable[StudyObservation], min_studies: int = 10) -> Optional[EggerResult]:
    """Regress standardized effects on precision and test the intercept.

    Returns None when the batch has ``min_studies`` or fewer effect sizes, or when
    every study has the same standard error.
    """
    arrays = build_effect_arrays(observations)
    if arrays.k <= min_studies:
        return None

    precision = 1.0 / arrays.standard_errors
    standardized = arrays.effects / arrays.standard_errors
    if np.ptp(precision) == 0:
        print(f"[meta] Skipping Egger test: all {arrays.k} studies share one standard error.")
        return None

    fit = stats.linregress(precision, standardized)
    df = arrays.k - 2
    intercept_se = float(fit.intercept_stderr)
    if intercept_se > 0:
        t_value = float(fit.intercept) / intercept_se
        p_value = float(2.0 * stats.t.sf(abs(t_value), df))
    else:
        t_value = float("inf") if fit.intercept != 0 else 0.0
        p_value = 0.0 if fit.intercept != 0 else 1.0

    return EggerResult(
        intercept=float(fit.intercept),
        standard_error=intercept_se,
        t_value=t_value,
        df=df,
        p_value=p_value,
        slope=float(fit.slope),
    )


__all__ = ["egger_test"]
