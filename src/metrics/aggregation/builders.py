"""Array builders shared by the pooling, heterogeneity and Egger routines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from src.datahub.observation import StudyObservation


@dataclass(frozen=True)
class EffectArrays:
    effects: np.ndarray
    variances: np.ndarray

    @property
    def k(self) -> int:
        return int(self.effects.shape[0])

    @property
    def weights(self) -> np.ndarray:
        return 1.0 / self.variances

    @property
    def standard_errors(self) -> np.ndarray:
        return np.sqrt(self.variances)


def build_effect_arrays(observations: Iterable[StudyObservation]) -> EffectArrays:
    """Convert observations into Fisher z effects and sampling variances."""
    record_list = list(observations)
    if not record_list:
        raise ValueError("No effect sizes supplied for pooling.")

    effects = np.asarray([obs.z for obs in record_list], dtype=float)
    variances = np.asarray([obs.v for obs in record_list], dtype=float)
    if not np.all(np.isfinite(effects)):
        raise ValueError("Effect sizes contain non-finite entries.")
    if not np.all(np.isfinite(variances)) or np.any(variances <= 0):
        raise ValueError("Sampling variances must be finite and strictly positive.")
    return EffectArrays(effects=effects, variances=variances)


def cochran_q(arrays: EffectArrays) -> float:
    weights = arrays.weights
    fixed = np.sum(weights * arrays.effects) / np.sum(weights)
    return float(np.sum(weights * (arrays.effects - fixed) ** 2))


def dersimonian_laird_tau2(arrays: EffectArrays) -> float:
    """Between-study variance via the DerSimonian-Laird moment estimator."""
    if arrays.k < 2:
        return 0.0
    weights = arrays.weights
    q = cochran_q(arrays)
    c = np.sum(weights) - np.sum(weights**2) / np.sum(weights)
    if c <= 0:
        return 0.0
    return float(max(0.0, (q - (arrays.k - 1)) / c))


__all__ = ["EffectArrays", "build_effect_arrays", "cochran_q", "dersimonian_laird_tau2"]
