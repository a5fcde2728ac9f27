"""P-curve analysis: evidential value versus selective reporting."""

from .bounds import MACHINE_EPSILON, bound_probability
from .engine import PCurveResult, run_pcurve, run_pcurve_from_statistics
from .noncentrality import locate_noncentrality
from .stouffer import StoufferResult, stouffer_combine
from .transform import PPValueRecord, TestStatistic, compute_pp_values, statistic_from_correlation

__all__ = [
    "MACHINE_EPSILON",
    "PCurveResult",
    "PPValueRecord",
    "StoufferResult",
    "TestStatistic",
    "bound_probability",
    "compute_pp_values",
    "locate_noncentrality",
    "run_pcurve",
    "run_pcurve_from_statistics",
    "statistic_from_correlation",
    "stouffer_combine",
]
