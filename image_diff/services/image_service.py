from pathlib import Path
from typing import List, Union

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No diff logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk, or a placeholder if it is missing."""
        return self.image_repository.load(path)

    def save(self, image: Image, path: Union[str, Path]) -> None:
        """
        Business-level method to save the image as PNG to a specific path.
        """
        self.image_repository.save(image, path)

    def list_files(self, folder: Union[str, Path]) -> List[Path]:
        return list(self.image_repository.iter_entries(folder))
