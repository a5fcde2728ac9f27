from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Sequence, Tuple, TypeVar

SampleT = TypeVar("SampleT")
BatchKey = Tuple[str, str]


@dataclass(frozen=True)
class BatchPlan(Generic[SampleT]):
    """Samples grouped by key, with keys kept in sorted order."""

    keys: Tuple[BatchKey, ...]
    members: Dict[BatchKey, Tuple[SampleT, ...]]

    def sizes(self) -> Dict[BatchKey, int]:
        return {key: len(self.members[key]) for key in self.keys}

    def __len__(self) -> int:
        return len(self.keys)


def build_batch_plan(
    samples: Sequence[SampleT],
    key_fn: Callable[[SampleT], BatchKey],
) -> BatchPlan[SampleT]:
    """Group samples by `key_fn`, preserving input order inside each batch."""
    groups: Dict[BatchKey, List[SampleT]] = defaultdict(list)
    for sample in samples:
        groups[key_fn(sample)].append(sample)

    keys = tuple(sorted(groups))
    return BatchPlan(keys=keys, members={key: tuple(groups[key]) for key in keys})
