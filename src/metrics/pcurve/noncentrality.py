"""Noncentrality search for F and chi-squared power targets."""

from __future__ import annotations

from typing import Literal, Optional

from scipy import optimize, stats

from ..errors import NoncentralityNotFoundError

DistributionFamily = Literal["f", "chi2"]


def locate_noncentrality(
    family: DistributionFamily,
    power: float,
    df1: float,
    df2: Optional[float] = None,
    alpha: float = 0.05,
    upper: float = 1000.0,
) -> float:
    """Return the noncentrality parameter giving ``power`` at the ``alpha`` critical value.

    The critical value is the ``1 - alpha`` quantile of the central distribution.
    The root of ``CDF(xc; ncp) - (1 - power)`` is bracketed over ``[0, upper]``.

    Args:
        family: ``"f"`` for F(df1, df2) or ``"chi2"`` for chi-squared(df1).
        power: Target probability of exceeding the critical value, strictly in (0, 1).
        df1: Numerator degrees of freedom (or the chi-squared degrees of freedom).
        df2: Denominator degrees of freedom; required for ``"f"``.
        alpha: Significance threshold defining the critical value.
        upper: Upper end of the search bracket.

    Raises:
        ValueError: If the arguments are out of range.
        NoncentralityNotFoundError: If no root lies inside the bracket.
    """
    if not 0.0 < power < 1.0:
        raise ValueError("power must fall strictly within (0, 1).")
    if not 0.0 < alpha < 1.0:
        raise ValueError("alpha must fall strictly within (0, 1).")
    if df1 <= 0:
        raise ValueError("df1 must be strictly positive.")
    if upper <= 0:
        raise ValueError("upper must be strictly positive.")

    if family == "f":
        if df2 is None or df2 <= 0:
            raise ValueError("F distributions require a strictly positive df2.")
        critical = float(stats.f.ppf(1.0 - alpha, df1, df2))

        def cdf_at_critical(ncp: float) -> float:
            return float(stats.ncf.cdf(critical, df1, df2, ncp))

    elif family == "chi2":
        critical = float(stats.chi2.ppf(1.0 - alpha, df1))

        def cdf_at_critical(ncp: float) -> float:
            return float(stats.ncx2.cdf(critical, df1, ncp))

    else:
        raise ValueError(f"Unknown distribution family '{family}'. Expected 'f' or 'chi2'.")

    def error(ncp: float) -> float:
        return cdf_at_critical(ncp) - (1.0 - power)

    low, high = error(0.0), error(upper)
    if low == 0.0:
        return 0.0
    if not low * high <= 0:
        raise NoncentralityNotFoundError(
            f"No noncentrality parameter in [0, {upper}] gives power={power} for {family} (df1={df1}, df2={df2})."
        )
    return float(optimize.brentq(error, 0.0, upper))


__all__ = ["DistributionFamily", "locate_noncentrality"]
