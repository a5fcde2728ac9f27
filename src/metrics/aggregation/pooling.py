"""Fixed- and random-effects pooling of Fisher z effect sizes."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
from scipy import stats

from src.datahub.observation import StudyObservation

from .builders import build_effect_arrays, cochran_q, dersimonian_laird_tau2
from .records import Heterogeneity, MetaAnalysisConfig, PooledEstimate


def pool_effects(
    observations: Iterable[StudyObservation],
    config: Optional[MetaAnalysisConfig] = None,
) -> PooledEstimate:
    """Pool a batch with inverse-variance weights (DerSimonian-Laird for random effects)."""
    cfg = config or MetaAnalysisConfig()
    cfg.validate()

    arrays = build_effect_arrays(observations)
    variances = arrays.variances
    if cfg.method == "random":
        variances = variances + dersimonian_laird_tau2(arrays)
    weights = 1.0 / variances

    estimate = float(np.sum(weights * arrays.effects) / np.sum(weights))
    standard_error = float(np.sqrt(1.0 / np.sum(weights)))
    critical = float(stats.norm.ppf(0.5 + cfg.confidence / 2.0))
    z_score = estimate / standard_error
    p_value = float(2.0 * stats.norm.sf(abs(z_score)))

    return PooledEstimate(
        method=cfg.method,
        k=arrays.k,
        estimate=estimate,
        standard_error=standard_error,
        lower=estimate - critical * standard_error,
        upper=estimate + critical * standard_error,
        z_score=float(z_score),
        p_value=p_value,
    )


def assess_heterogeneity(observations: Iterable[StudyObservation]) -> Heterogeneity:
    """Compute Q, its chi-squared p-value, tau^2 and I^2 (percent)."""
    arrays = build_effect_arrays(observations)
    q = cochran_q(arrays)
    df = arrays.k - 1
    q_p_value = float(stats.chi2.sf(q, df)) if df > 0 else 1.0
    i_squared = max(0.0, 100.0 * (q - df) / q) if q > 0 else 0.0
    return Heterogeneity(
        q=q,
        df=df,
        q_p_value=q_p_value,
        tau_squared=dersimonian_laird_tau2(arrays),
        i_squared=float(i_squared),
    )


__all__ = ["assess_heterogeneity", "pool_effects"]
