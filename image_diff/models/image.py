from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np

from .bounds import Bounds


@dataclass
class Image:
    """
    Simple data object: RGBA pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repository layer.
    """
    pixels: np.ndarray # Shape (H, W, 4), dtype uint8, RGBA order.
    path: Path | None = None # Source of the image.

    @property
    def bounds(self) -> Bounds:
        height, width = self.pixels.shape[:2]
        return Bounds.from_size(width, height)

    @property
    def is_placeholder(self) -> bool:
        return self.bounds.is_empty
