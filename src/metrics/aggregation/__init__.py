"""Meta-analytic summaries of appraisal-emotion effect-size batches."""

from .interpretation import interpret_batch
from .pooling import assess_heterogeneity, pool_effects
from .publication_bias import egger_test
from .records import EggerResult, Heterogeneity, MetaAnalysisConfig, PooledEstimate

__all__ = [
    "EggerResult",
    "Heterogeneity",
    "MetaAnalysisConfig",
    "PooledEstimate",
    "assess_heterogeneity",
    "egger_test",
    "interpret_batch",
    "pool_effects",
]
