"""Tests for effect-size pooling, heterogeneity and Egger's test."""

from __future__ import annotations

import math
from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.datahub.observation import StudyObservation
from src.metrics.aggregation.builders import build_effect_arrays, dersimonian_laird_tau2
from src.metrics.aggregation.interpretation import describe_heterogeneity, describe_magnitude, interpret_batch
from src.metrics.aggregation.pooling import assess_heterogeneity, pool_effects
from src.metrics.aggregation.publication_bias import egger_test
from src.metrics.aggregation.records import MetaAnalysisConfig
from src.metrics.pcurve.engine import PCurveResult, run_pcurve
from src.metrics.pcurve.stouffer import StoufferResult


def _make_observations(effects: list[float], variances: list[float]) -> list[StudyObservation]:
    return [
        StudyObservation(
            appraisal="Certainty",
            emotion="Fear",
            n=int(round(1.0 / v)) + 3,
            r=math.tanh(z),
            z=z,
            v=v,
            study_id=f"study-{idx}",
        )
        for idx, (z, v) in enumerate(zip(effects, variances))
    ]


# ---------------------------------------------------------------------------
# Array builders


def test_build_effect_arrays_basic() -> None:
    arrays = build_effect_arrays(_make_observations([0.1, 0.2], [0.01, 0.04]))
    assert arrays.k == 2
    assert np.allclose(arrays.weights, [100.0, 25.0])
    assert np.allclose(arrays.standard_errors, [0.1, 0.2])


def test_build_effect_arrays_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        build_effect_arrays([])
    with pytest.raises(ValueError):
        build_effect_arrays(_make_observations([0.1], [0.0]))
    with pytest.raises(ValueError):
        build_effect_arrays(_make_observations([float("nan")], [0.01]))


# ---------------------------------------------------------------------------
# Pooling and heterogeneity


def test_random_effects_matches_hand_computation() -> None:
    observations = _make_observations([0.1, 0.3, 0.5], [0.01, 0.01, 0.01])
    arrays = build_effect_arrays(observations)
    assert dersimonian_laird_tau2(arrays) == pytest.approx(0.03)

    pooled = pool_effects(observations)
    assert pooled.method == "random"
    assert pooled.k == 3
    assert pooled.estimate == pytest.approx(0.3)
    assert pooled.standard_error == pytest.approx(math.sqrt(1 / 75))
    assert pooled.lower == pytest.approx(0.3 - 1.959964 * math.sqrt(1 / 75), abs=1e-6)
    assert pooled.upper == pytest.approx(0.3 + 1.959964 * math.sqrt(1 / 75), abs=1e-6)
    assert pooled.r == pytest.approx(math.tanh(0.3))


def test_fixed_effect_ignores_tau() -> None:
    observations = _make_observations([0.1, 0.3, 0.5], [0.01, 0.01, 0.01])
    pooled = pool_effects(observations, MetaAnalysisConfig(method="fixed"))
    assert pooled.estimate == pytest.approx(0.3)
    assert pooled.standard_error == pytest.approx(math.sqrt(1 / 300))


def test_heterogeneity_matches_hand_computation() -> None:
    heterogeneity = assess_heterogeneity(_make_observations([0.1, 0.3, 0.5], [0.01, 0.01, 0.01]))
    assert heterogeneity.q == pytest.approx(8.0)
    assert heterogeneity.df == 2
    assert heterogeneity.q_p_value == pytest.approx(math.exp(-4))
    assert heterogeneity.i_squared == pytest.approx(75.0)
    assert heterogeneity.tau == pytest.approx(math.sqrt(0.03))


def test_single_study_has_no_heterogeneity() -> None:
    observations = _make_observations([0.2], [0.02])
    heterogeneity = assess_heterogeneity(observations)
    assert heterogeneity.q == pytest.approx(0.0)
    assert heterogeneity.i_squared == 0.0
    assert heterogeneity.tau_squared == 0.0
    assert heterogeneity.q_p_value == 1.0
    assert pool_effects(observations).estimate == pytest.approx(0.2)


def test_meta_analysis_config_validates() -> None:
    with pytest.raises(ValueError):
        MetaAnalysisConfig(method="bayes").validate()  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        MetaAnalysisConfig(confidence=1.5).validate()


# ---------------------------------------------------------------------------
# Egger's test


def _asymmetric_batch(k: int) -> list[StudyObservation]:
    variances = [1.0 / (20 + 10 * idx) for idx in range(k)]
    noise = [0.05 if idx % 2 else -0.05 for idx in range(k)]
    # z / se = 1.5 + 0.2 / se + noise
    effects = [math.sqrt(v) * (1.5 + eps) + 0.2 for v, eps in zip(variances, noise)]
    return _make_observations(effects, variances)


def test_egger_requires_more_than_ten_studies() -> None:
    assert egger_test(_asymmetric_batch(10)) is None


def test_egger_recovers_intercept() -> None:
    result = egger_test(_asymmetric_batch(14))
    assert result is not None
    assert result.df == 12
    assert result.intercept == pytest.approx(1.5, abs=0.1)
    assert result.slope == pytest.approx(0.2, abs=0.02)
    assert result.p_value < 0.001


def test_egger_skips_identical_standard_errors() -> None:
    observations = _make_observations([0.1 * idx for idx in range(12)], [0.02] * 12)
    assert egger_test(observations) is None


# ---------------------------------------------------------------------------
# Interpretation


def test_magnitude_and_heterogeneity_bands() -> None:
    assert describe_magnitude(0.05) == "negligible"
    assert describe_magnitude(-0.2) == "small"
    assert describe_magnitude(0.35) == "medium"
    assert describe_magnitude(0.6) == "large"
    assert describe_heterogeneity(10) == "low"
    assert describe_heterogeneity(40) == "moderate"
    assert describe_heterogeneity(60) == "substantial"
    assert describe_heterogeneity(90) == "considerable"


def test_interpret_batch_mentions_effect_and_pcurve() -> None:
    observations = _make_observations([0.3, 0.35, 0.4], [0.01, 0.02, 0.015])
    pooled = pool_effects(observations)
    heterogeneity = assess_heterogeneity(observations)
    text = interpret_batch(
        "Certainty",
        "Fear",
        pooled,
        heterogeneity,
        pcurve=run_pcurve(observations),
    )
    assert text.startswith("Across 3 studies, Certainty shows a medium positive association with Fear")
    assert "excludes zero" in text
    assert "right-skewed" in text


def test_interpret_batch_reports_missing_pcurve() -> None:
    observations = _make_observations([0.01, -0.02], [0.02, 0.03])
    pooled = pool_effects(observations)
    text = interpret_batch("Novelty", "Surprise", pooled, assess_heterogeneity(observations), pcurve=run_pcurve(observations))
    assert "includes zero" in text
    assert "could not be estimated" in text


def _flat_pcurve(full33_p: float) -> PCurveResult:
    return PCurveResult(
        ksig=5,
        khalf=2,
        full=StoufferResult(z=0.8, p=0.79, k=5),
        full33=StoufferResult(z=-2.3, p=full33_p, k=5),
        half=StoufferResult(z=0.4, p=0.66, k=2),
        half33=StoufferResult(z=-1.0, p=0.16, k=2),
    )


def test_interpret_batch_reports_flat_pcurve_at_33_percent_power() -> None:
    observations = _make_observations([0.1, 0.12, 0.08], [0.02, 0.02, 0.02])
    pooled = pool_effects(observations)
    heterogeneity = assess_heterogeneity(observations)

    flat = interpret_batch("Control", "Sadness", pooled, heterogeneity, pcurve=_flat_pcurve(0.011))
    assert "not right-skewed" in flat
    assert "flatter than expected at 33% power (p = 0.011)" in flat

    inconclusive = interpret_batch("Control", "Sadness", pooled, heterogeneity, pcurve=_flat_pcurve(0.4))
    assert "not right-skewed" in inconclusive
    assert "33% power" not in inconclusive
