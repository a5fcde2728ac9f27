"""Lookup tables collapsing coded appraisal/emotion labels into canonical clusters."""

from __future__ import annotations

from typing import Dict, Mapping

from .config import APPRAISALS, EMOTIONS, UNRECOGNIZED_LABEL

# Raw labels are matched after lower-casing and collapsing whitespace.
APPRAISAL_SYNONYMS: Dict[str, str] = {
    "other accountability": "Accountability: other",
    "other-agency": "Accountability: other",
    "other agency": "Accountability: other",
    "other responsibility": "Accountability: other",
    "blame other": "Accountability: other",
    "self accountability": "Accountability: self",
    "self-agency": "Accountability: self",
    "self agency": "Accountability: self",
    "self responsibility": "Accountability: self",
    "self-blame": "Accountability: self",
    "certainty": "Certainty",
    "uncertainty": "Certainty",
    "predictability": "Certainty",
    "control": "Control",
    "controllability": "Control",
    "personal control": "Control",
    "coping potential": "Control",
    "power": "Control",
    "effort": "Effort",
    "anticipated effort": "Effort",
    "attentional activity": "Effort",
    "fairness": "Fairness",
    "justice": "Fairness",
    "unfairness": "Fairness",
    "goal conduciveness": "Goal conduciveness",
    "goal congruence": "Goal conduciveness",
    "motivational congruence": "Goal conduciveness",
    "goal obstruction": "Goal conduciveness",
    "goal relevance": "Goal relevance",
    "motivational relevance": "Goal relevance",
    "importance": "Goal relevance",
    "legitimacy": "Legitimacy",
    "deservingness": "Legitimacy",
    "norm compatibility": "Norm compatibility",
    "moral violation": "Norm compatibility",
    "norm violation": "Norm compatibility",
    "self-standards": "Norm compatibility",
    "novelty": "Novelty",
    "unexpectedness": "Novelty",
    "suddenness": "Novelty",
    "familiarity": "Novelty",
    "pleasantness": "Pleasantness",
    "intrinsic pleasantness": "Pleasantness",
    "valence": "Pleasantness",
    "problem-focused coping": "Problem-focused coping",
    "problem focused coping": "Problem-focused coping",
    "situational control": "Situational control",
    "circumstance agency": "Situational control",
    "situational agency": "Situational control",
    "chance": "Situational control",
}

EMOTION_SYNONYMS: Dict[str, str] = {
    "anger": "Anger",
    "angry": "Anger",
    "irritation": "Anger",
    "frustration": "Anger",
    "rage": "Anger",
    "anxiety": "Anxiety",
    "worry": "Anxiety",
    "nervousness": "Anxiety",
    "boredom": "Boredom",
    "compassion": "Compassion",
    "sympathy": "Compassion",
    "pity": "Compassion",
    "contempt": "Contempt",
    "disgust": "Disgust",
    "moral disgust": "Disgust",
    "fear": "Fear",
    "afraid": "Fear",
    "gratitude": "Gratitude",
    "thankfulness": "Gratitude",
    "guilt": "Guilt",
    "happiness": "Happiness",
    "joy": "Happiness",
    "enjoyment": "Happiness",
    "elation": "Happiness",
    "hope": "Hope",
    "interest": "Interest",
    "curiosity": "Interest",
    "pride": "Pride",
    "regret": "Regret",
    "relief": "Relief",
    "sadness": "Sadness",
    "sorrow": "Sadness",
    "dejection": "Sadness",
    "shame": "Shame",
    "embarrassment": "Shame",
    "surprise": "Surprise",
}


def _normalize(label: str) -> str:
    return " ".join(str(label).strip().lower().split())


def _lookup(label: object, synonyms: Mapping[str, str], canonical: tuple[str, ...]) -> str:
    if label is None:
        return UNRECOGNIZED_LABEL
    key = _normalize(str(label))
    if key in synonyms:
        return synonyms[key]
    for name in canonical:
        if _normalize(name) == key:
            return name
    return UNRECOGNIZED_LABEL


def canonical_appraisal(label: object) -> str:
    """Map a coded appraisal label onto its cluster, or ``UNRECOGNIZED_LABEL``."""
    return _lookup(label, APPRAISAL_SYNONYMS, APPRAISALS)


def canonical_emotion(label: object) -> str:
    """Map a coded emotion label onto its canonical name, or ``UNRECOGNIZED_LABEL``."""
    return _lookup(label, EMOTION_SYNONYMS, EMOTIONS)


__all__ = [
    "APPRAISAL_SYNONYMS",
    "EMOTION_SYNONYMS",
    "canonical_appraisal",
    "canonical_emotion",
]
