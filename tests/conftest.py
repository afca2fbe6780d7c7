"""Shared fixtures: fabricate RGBA pixel arrays and PNG files on disk."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

WHITE = (255, 255, 255, 255)


@pytest.fixture
def solid():
    """Factory: (H, W, 4) uint8 array filled with one RGBA color."""
    def _solid(height: int, width: int, color=WHITE) -> np.ndarray:
        arr = np.empty((height, width, 4), dtype=np.uint8)
        arr[:] = color
        return arr
    return _solid


@pytest.fixture
def write_png():
    """Factory: save an array as PNG, creating parent directories."""
    def _write(path: Path, pixels: np.ndarray) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(pixels).save(path, format="PNG")
        return path
    return _write
