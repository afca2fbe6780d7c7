from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RootKind(Enum):
    """What before_images / after_images point at."""
    SINGLE_IMAGE = "single_image"
    COLLECTION = "collection"


@dataclass(frozen=True)
class ImagePair:
    """
    One before/after comparison.
    after_path was discovered on disk; before_path may not exist.
    """
    before_path: Path
    after_path: Path

    @property
    def name(self) -> str:
        return self.after_path.name
