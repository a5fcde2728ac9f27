"""Filter selections coming from the CLI or the interactive explorer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .config import ALL_CHOICE, APPRAISALS, EMOTIONS
from .observation import StudyObservation


@dataclass(frozen=True)
class FilterRequest:
    """Describe which appraisal-emotion pairs to analyse and which extras to compute."""

    emotion: str = ALL_CHOICE
    appraisal: str = ALL_CHOICE
    publication_bias: bool = False
    interpretation: bool = False

    @classmethod
    def from_flags(
        cls,
        emotion: str = ALL_CHOICE,
        appraisal: str = ALL_CHOICE,
        publication_bias: bool = False,
        interpretation: bool = False,
    ) -> "FilterRequest":
        """Translate CLI flags into a normalized request."""
        return cls(
            emotion=_match_choice(emotion, EMOTIONS, "emotion"),
            appraisal=_match_choice(appraisal, APPRAISALS, "appraisal"),
            publication_bias=publication_bias,
            interpretation=interpretation,
        )

    def matches(self, observation: StudyObservation) -> bool:
        if self.emotion != ALL_CHOICE and observation.emotion != self.emotion:
            return False
        if self.appraisal != ALL_CHOICE and observation.appraisal != self.appraisal:
            return False
        return True

    def select(self, observations: Iterable[StudyObservation]) -> Tuple[StudyObservation, ...]:
        return tuple(obs for obs in observations if self.matches(obs))


def _match_choice(value: str, choices: Sequence[str], name: str) -> str:
    cleaned = " ".join((value or ALL_CHOICE).split())
    if cleaned.lower() == ALL_CHOICE:
        return ALL_CHOICE
    for choice in choices:
        if choice.lower() == cleaned.lower():
            return choice
    raise ValueError(f"Unknown {name} '{value}'. Choose '{ALL_CHOICE}' or one of: {', '.join(choices)}")


__all__ = ["FilterRequest"]
