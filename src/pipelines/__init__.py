"""Batch selection and result tables for the appraisal-emotion meta-analysis."""

from .batches import poolable_effects, prepare_batch, select_batches
from .bucketing import BatchKey, BatchPlan, build_batch_plan
from .results import BatchResult, analyze_batch, build_results, results_to_frame, write_results

__all__ = [
    "BatchKey",
    "BatchPlan",
    "BatchResult",
    "analyze_batch",
    "build_batch_plan",
    "build_results",
    "poolable_effects",
    "prepare_batch",
    "results_to_frame",
    "select_batches",
    "write_results",
]
