"""Plain-language summaries of a pooled appraisal-emotion effect."""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from .records import EggerResult, Heterogeneity, PooledEstimate

if TYPE_CHECKING:
    from src.metrics.pcurve.engine import PCurveResult


def describe_magnitude(r: float) -> str:
    """Cohen's benchmarks for correlations."""
    size = abs(r)
    if size < 0.1:
        return "negligible"
    if size < 0.3:
        return "small"
    if size < 0.5:
        return "medium"
    return "large"


def describe_heterogeneity(i_squared: float) -> str:
    if i_squared < 25:
        return "low"
    if i_squared < 50:
        return "moderate"
    if i_squared < 75:
        return "substantial"
    return "considerable"


def _format_p(p: float) -> str:
    return "p < .001" if p < 0.001 else f"p = {p:.3f}"


def interpret_batch(
    appraisal: str,
    emotion: str,
    pooled: PooledEstimate,
    heterogeneity: Heterogeneity,
    egger: Optional[EggerResult] = None,
    pcurve: Optional["PCurveResult"] = None,
) -> str:
    """Describe the pooled effect, its heterogeneity and any bias diagnostics in prose.

    The p-curve counts as right-skewed when either the full-curve or the
    half-curve Stouffer test has p < .05. This is a single-threshold rule, not
    the "half < .05, or both full and half < .10" rule of p-curve app 4.0.
    When the curve is not right-skewed, a 33% power test with p < .05 is
    reported as a curve flatter than 33% power would produce.
    """
    direction = "positive" if pooled.r >= 0 else "negative"
    studies = "study" if pooled.k == 1 else "studies"
    sentences: List[str] = [
        f"Across {pooled.k} {studies}, {appraisal} shows a {describe_magnitude(pooled.r)} {direction} "
        f"association with {emotion} (r = {pooled.r:.2f}, 95% CI [{pooled.r_lower:.2f}, {pooled.r_upper:.2f}])."
    ]

    if pooled.lower > 0 or pooled.upper < 0:
        sentences.append("The confidence interval excludes zero.")
    else:
        sentences.append("The confidence interval includes zero, so the direction of the effect is uncertain.")

    if pooled.k > 1:
        sentences.append(
            f"Heterogeneity is {describe_heterogeneity(heterogeneity.i_squared)} "
            f"(I² = {heterogeneity.i_squared:.0f}%, tau = {heterogeneity.tau:.2f})."
        )

    if egger is not None:
        if egger.p_value < 0.05:
            sentences.append(f"Egger's test suggests funnel-plot asymmetry ({_format_p(egger.p_value)}).")
        else:
            sentences.append(f"Egger's test shows no funnel-plot asymmetry ({_format_p(egger.p_value)}).")

    if pcurve is not None:
        if pcurve.full.p is None:
            sentences.append("No study reached p < .05, so the p-curve could not be estimated.")
        elif pcurve.full.p < 0.05 or (pcurve.half.p is not None and pcurve.half.p < 0.05):
            sentences.append(
                f"The p-curve of {pcurve.ksig} significant results is right-skewed, indicating evidential value."
            )
        else:
            sentences.append(
                f"The p-curve of {pcurve.ksig} significant results is not right-skewed; "
                "evidential value cannot be established."
            )
            if pcurve.full33.p is not None and pcurve.full33.p < 0.05:
                sentences.append(
                    f"It is also flatter than expected at 33% power ({_format_p(pcurve.full33.p)}), "
                    "so these studies lack adequate evidential value."
                )

    return " ".join(sentences)


__all__ = ["describe_heterogeneity", "describe_magnitude", "interpret_batch"]
