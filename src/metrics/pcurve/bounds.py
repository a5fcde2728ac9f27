"""Clamp probabilities away from exact 0 and 1."""

from __future__ import annotations

from typing import Union, overload

import numpy as np

from ..errors import ProbabilityInvariantError

MACHINE_EPSILON = 2.2e-16
_RANGE_SLACK = 1e-9


@overload
def bound_probability(value: float) -> float: ...


@overload
def bound_probability(value: np.ndarray) -> np.ndarray: ...


def bound_probability(value: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Clamp ``value`` into [eps, 1 - eps] so quantile functions stay finite."""
    if isinstance(value, np.ndarray):
        return np.clip(value, MACHINE_EPSILON, 1.0 - MACHINE_EPSILON)
    return float(min(max(float(value), MACHINE_EPSILON), 1.0 - MACHINE_EPSILON))


def checked_bound(value: float, name: str = "probability") -> float:
    """Bound ``value`` after checking that it is a real probability."""
    value = float(value)
    if not np.isfinite(value) or value < -_RANGE_SLACK or value > 1.0 + _RANGE_SLACK:
        raise ProbabilityInvariantError(f"{name} must fall within [0, 1] before bounding, got {value!r}.")
    return bound_probability(value)


__all__ = ["MACHINE_EPSILON", "bound_probability", "checked_bound"]
