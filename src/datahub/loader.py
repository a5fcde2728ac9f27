from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pandas as pd

from .config import COLUMNS, DEFAULT_DATA_PATH
from .helpers import is_missing, to_flag, to_float, to_int, to_optional_int, to_optional_str
from .labels import canonical_appraisal, canonical_emotion
from .observation import StudyObservation


def read_table(path: Path) -> pd.DataFrame:
    """Read the coded dataset and check that the analysis columns are present."""
    frame = pd.read_csv(path)
    missing = [column for column in COLUMNS["required"] if column not in frame.columns]
    if missing:
        raise ValueError(f"{path} is missing required columns: {', '.join(missing)}")
    keep = [column for column in (*COLUMNS["required"], *COLUMNS["optional"]) if column in frame.columns]
    return frame[keep].rename(columns=COLUMNS["renames"])


def load_observations(
    path: Path = DEFAULT_DATA_PATH,
    normalize_labels: bool = True,
    included_only: bool = True,
) -> Tuple[StudyObservation, ...]:
    """Load coded effect sizes as immutable StudyObservation records."""
    frame = read_table(path)
    observations = []
    dropped = 0

    for row in frame.to_dict(orient="records"):
        if any(is_missing(row.get(field)) for field in ("n", "r", "z", "v")):
            dropped += 1
            continue

        included = to_flag(row.get("included"))
        if included_only and not included:
            continue

        appraisal = str(row.get("appraisal"))
        emotion = str(row.get("emotion"))
        if normalize_labels:
            appraisal = canonical_appraisal(row.get("appraisal"))
            emotion = canonical_emotion(row.get("emotion"))

        try:
            n = to_int(row["n"])
            r = to_float(row["r"])
            z = to_float(row["z"])
            v = to_float(row["v"])
        except ValueError as exc:
            print(f"[datahub] Skipping {row.get('study_id') or 'unnamed study'}: {exc}")
            dropped += 1
            continue
        if v <= 0:
            print(f"[datahub] Skipping {row.get('study_id') or 'unnamed study'}: sampling variance v={v} is not positive")
            dropped += 1
            continue

        observations.append(
            StudyObservation(
                appraisal=appraisal,
                emotion=emotion,
                n=n,
                r=r,
                z=z,
                v=v,
                study_id=to_optional_str(row.get("study_id")),
                year=to_optional_int(row.get("year")),
                included=included,
                remarks=to_optional_str(row.get("remarks")),
            )
        )

    if dropped:
        print(f"[datahub] Dropped {dropped} rows without a usable N, r, z or v from {path}")
    print(f"[datahub] Loaded {len(observations)} effect sizes from {path}")
    return tuple(observations)
