"""Stouffer combination of pp-values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
from scipy import stats


@dataclass(frozen=True)
class StoufferResult:
    """Combined z-score and its lower-tail p-value over ``k`` defined pp-values."""

    z: Optional[float]
    p: Optional[float]
    k: int

    @property
    def defined(self) -> bool:
        return self.z is not None


def stouffer_combine(pp_values: Iterable[Optional[float]]) -> StoufferResult:
    """Combine pp-values into ``sum(Phi^-1(pp)) / sqrt(k)``.

    Missing entries (``None`` or NaN) are skipped. When nothing is left the
    result carries ``None`` for both ``z`` and ``p``.
    """
    defined = [float(pp) for pp in pp_values if pp is not None and not np.isnan(pp)]
    if not defined:
        return StoufferResult(z=None, p=None, k=0)

    quantiles = stats.norm.ppf(np.asarray(defined, dtype=float))
    z = float(np.sum(quantiles) / math.sqrt(len(defined)))
    p = float(stats.norm.cdf(z))
    return StoufferResult(z=z, p=p, k=len(defined))


__all__ = ["StoufferResult", "stouffer_combine"]
