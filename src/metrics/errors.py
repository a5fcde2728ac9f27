"""Exceptions raised by the meta-analysis and p-curve metrics."""


class InvalidSampleSizeError(ValueError):
    """Raised when a study is too small for a correlation-to-F conversion (N < 3)."""


class NoncentralityNotFoundError(RuntimeError):
    """Raised when no noncentrality parameter reaches the requested power inside the search bracket."""


class ProbabilityInvariantError(RuntimeError):
    """Raised when a probability leaves [0, 1] before bounding, which indicates an upstream defect."""


__all__ = [
    "InvalidSampleSizeError",
    "NoncentralityNotFoundError",
    "ProbabilityInvariantError",
]
