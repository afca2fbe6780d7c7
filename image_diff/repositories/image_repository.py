from pathlib import Path
from typing import Union, Iterator
import numpy as np
import cv2
from PIL import Image as PILImage

from ..errors import DecodeError
from ..models.image import Image


class ImageRepository:
    """
    Handles file I/O for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def create_placeholder(path: Union[str, Path] = None) -> Image:
        """Zero-area image standing in for a file that does not exist."""
        return ImageRepository.create_image(np.zeros((0, 0, 4), dtype=np.uint8), path)

    @staticmethod
    def _to_rgba(arr: np.ndarray, path: Path) -> np.ndarray:
        # 16-bit PNGs come back as uint16; keep the high byte
        if arr.dtype == np.uint16:
            arr = (arr >> 8).astype(np.uint8)
        elif arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)

        if arr.ndim == 2:
            return cv2.cvtColor(arr, cv2.COLOR_GRAY2RGBA)
        channels = arr.shape[2]
        if channels == 1:
            return cv2.cvtColor(arr[:, :, 0], cv2.COLOR_GRAY2RGBA)
        if channels == 3:
            return cv2.cvtColor(arr, cv2.COLOR_BGR2RGBA)
        if channels == 4:
            return cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
        raise DecodeError(f"Unsupported channel count {channels}: {path}")

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        """
        Decode *path* into an RGBA Image.

        A path that does not exist is not an error: it means the image was
        added or removed between the two sets, and a zero-area placeholder
        is returned instead.
        """
        path = Path(path)
        if not path.exists():
            return ImageRepository.create_placeholder(path)

        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None:
            raise DecodeError(f"Image unreadable or not a supported format: {path}")

        return Image(pixels=ImageRepository._to_rgba(arr, path), path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path]) -> None:
        """Encode *image* as PNG at *path*, truncating any existing file."""
        PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(Path(path), format="PNG")

    @staticmethod
    def iter_entries(folder: Union[str, Path]) -> Iterator[Path]:
        """
        Yield the regular files directly under *folder*, sorted by name.
        Raises OSError if the folder cannot be listed.
        """
        folder = Path(folder)
        for p in sorted(folder.iterdir()):
            if p.is_file():
                yield p
