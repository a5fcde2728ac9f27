from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StudyObservation:
    """One coded appraisal-emotion correlation from a primary study."""

    appraisal: str
    emotion: str
    n: int
    r: float
    z: float
    v: float
    study_id: Optional[str] = None
    year: Optional[int] = None
    included: bool = True
    remarks: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.appraisal, self.emotion)
