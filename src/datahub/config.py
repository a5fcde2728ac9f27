"""Static configuration for the appraisal-emotion effect-size dataset."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple, TypedDict


class ColumnConfig(TypedDict):
    required: Tuple[str, ...]
    optional: Tuple[str, ...]
    renames: Dict[str, str]


# Default location used by the Typer CLI; callers may override it.
DEFAULT_DATA_PATH = Path("data/appraisal_emotion.csv")
DEFAULT_RESULTS_ROOT = Path("data/results")

ALL_CHOICE = "all"
UNRECOGNIZED_LABEL = "unrecognized label"

# ---------------------------------------------------------------------------
# Dataset columns.

COLUMNS: ColumnConfig = {
    "required": ("Appraisal", "Emotion", "N", "r", "z", "v"),
    "optional": ("Study", "Year", "Included", "Remarks"),
    "renames": {
        "Appraisal": "appraisal",
        "Emotion": "emotion",
        "N": "n",
        "r": "r",
        "z": "z",
        "v": "v",
        "Study": "study_id",
        "Year": "year",
        "Included": "included",
        "Remarks": "remarks",
    },
}

# ---------------------------------------------------------------------------
# Canonical labels offered by the filters.

APPRAISALS: Tuple[str, ...] = (
    "Accountability: other",
    "Accountability: self",
    "Certainty",
    "Control",
    "Effort",
    "Fairness",
    "Goal conduciveness",
    "Goal relevance",
    "Legitimacy",
    "Norm compatibility",
    "Novelty",
    "Pleasantness",
    "Problem-focused coping",
    "Situational control",
)

EMOTIONS: Tuple[str, ...] = (
    "Anger",
    "Anxiety",
    "Boredom",
    "Compassion",
    "Contempt",
    "Disgust",
    "Fear",
    "Gratitude",
    "Guilt",
    "Happiness",
    "Hope",
    "Interest",
    "Pride",
    "Regret",
    "Relief",
    "Sadness",
    "Shame",
    "Surprise",
)


__all__ = [
    "ALL_CHOICE",
    "APPRAISALS",
    "COLUMNS",
    "ColumnConfig",
    "DEFAULT_DATA_PATH",
    "DEFAULT_RESULTS_ROOT",
    "EMOTIONS",
    "UNRECOGNIZED_LABEL",
]
