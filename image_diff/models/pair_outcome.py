from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

from .image_pair import ImagePair


class PairStatus(Enum):
    KEPT = "kept"            # diff image written
    DISCARDED = "discarded"  # nothing changed
    FAILED = "failed"        # load, diff or write error


@dataclass
class PairOutcome:
    pair: ImagePair
    status: PairStatus
    reason: str | None = None
    output_path: Path | None = None


@dataclass
class RunResult:
    """
    Everything a run produced: where diffs went and what happened to each pair.
    """
    output_dir: Path
    outcomes: List[PairOutcome] = field(default_factory=list)

    def _with_status(self, status: PairStatus) -> List[PairOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def kept(self) -> List[PairOutcome]:
        return self._with_status(PairStatus.KEPT)

    @property
    def discarded(self) -> List[PairOutcome]:
        return self._with_status(PairStatus.DISCARDED)

    @property
    def failed(self) -> List[PairOutcome]:
        return self._with_status(PairStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)
