from .config import ALL_CHOICE, APPRAISALS, EMOTIONS, UNRECOGNIZED_LABEL
from .labels import canonical_appraisal, canonical_emotion
from .loader import load_observations
from .observation import StudyObservation
from .request import FilterRequest

__all__ = [
    "ALL_CHOICE",
    "APPRAISALS",
    "EMOTIONS",
    "UNRECOGNIZED_LABEL",
    "FilterRequest",
    "StudyObservation",
    "canonical_appraisal",
    "canonical_emotion",
    "load_observations",
]
