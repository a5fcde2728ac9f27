"""Convert correlations into F statistics and p-curve pp-values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
from scipy import stats

from ..errors import InvalidSampleSizeError
from .bounds import checked_bound
from .noncentrality import locate_noncentrality

SIGNIFICANCE = 0.05
HALF_SIGNIFICANCE = 0.025
TARGET_POWER = 1.0 / 3.0


@dataclass(frozen=True)
class TestStatistic:
    """F(1, df) statistic and its bounded p-value for one study."""

    __test__ = False  # keep pytest from collecting this record

    df: int
    value: float
    p: float

    @property
    def significant(self) -> bool:
        return self.p < SIGNIFICANCE

    @property
    def half_significant(self) -> bool:
        return self.p < HALF_SIGNIFICANCE


@dataclass(frozen=True)
class PPValueRecord:
    """pp-values of one study under the null and the 33% power alternative."""

    statistic: TestStatistic
    pp_full: Optional[float]
    pp_half: Optional[float]
    pp33_full: Optional[float]
    pp33_half: Optional[float]


def degrees_of_freedom(n: int) -> int:
    """Residual degrees of freedom of a correlation, ``n - 2``."""
    if n < 3:
        raise InvalidSampleSizeError(f"Sample size must be at least 3 to convert a correlation, got N={n}.")
    return int(n) - 2


def statistic_from_correlation(r: float, n: int) -> TestStatistic:
    """Turn a correlation into a squared t, i.e. an F(1, n - 2) statistic."""
    df = degrees_of_freedom(n)
    if not np.isfinite(r) or abs(r) >= 1.0:
        raise ValueError(f"Correlation must be finite and inside (-1, 1), got r={r!r}.")
    t_value = r / math.sqrt((1.0 - r**2) / df)
    value = t_value**2
    p = checked_bound(1.0 - stats.f.cdf(value, 1, df), name="p-value")
    return TestStatistic(df=df, value=float(value), p=p)


def _noncentral_cdf(value: float, df: int, ncp: float) -> float:
    return float(stats.ncf.cdf(value, 1, df, ncp))


def _expected_half_share(df: int, ncp33: float) -> float:
    """3x the probability of p < .025 under the 33% power alternative."""
    critical = float(stats.f.ppf(1.0 - HALF_SIGNIFICANCE, 1, df))
    below = 1.0 - _noncentral_cdf(critical, df, ncp33)
    return 3.0 * below


def compute_pp_values(statistics: Sequence[TestStatistic]) -> List[PPValueRecord]:
    """Compute full/half pp-values under the null and under 33% power.

    The half-curve 33% correction uses ``prop25``, the share of significant
    p-values expected below .025 when power is 33%. It depends on ``df`` and is
    evaluated for every study in the batch.
    """
    ncps = [locate_noncentrality("f", TARGET_POWER, 1, stat.df, alpha=SIGNIFICANCE) for stat in statistics]
    prop25 = [_expected_half_share(stat.df, ncp) for stat, ncp in zip(statistics, ncps)]

    records: List[PPValueRecord] = []
    for stat, ncp33, share in zip(statistics, ncps, prop25):
        pp_full: Optional[float] = None
        pp_half: Optional[float] = None
        pp33_full: Optional[float] = None
        pp33_half: Optional[float] = None

        if stat.significant:
            pp_full = checked_bound(20.0 * stat.p, name="pp-value")
            alt_cdf = _noncentral_cdf(stat.value, stat.df, ncp33)
            pp33_full = checked_bound(3.0 * (alt_cdf - 2.0 / 3.0), name="33% pp-value")
        if stat.half_significant:
            pp_half = checked_bound(40.0 * stat.p, name="half pp-value")
            alt_cdf = _noncentral_cdf(stat.value, stat.df, ncp33)
            pp33_half = checked_bound((1.0 / share) * (alt_cdf - (1.0 - share)), name="half 33% pp-value")

        records.append(
            PPValueRecord(
                statistic=stat,
                pp_full=pp_full,
                pp_half=pp_half,
                pp33_full=pp33_full,
                pp33_half=pp33_half,
            )
        )
    return records


__all__ = [
    "HALF_SIGNIFICANCE",
    "PPValueRecord",
    "SIGNIFICANCE",
    "TARGET_POWER",
    "TestStatistic",
    "compute_pp_values",
    "degrees_of_freedom",
    "statistic_from_correlation",
]
