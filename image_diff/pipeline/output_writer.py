import logging
from pathlib import Path
from typing import Union

from ..errors import WriteError
from ..models.image import Image
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def prepare_output_dir(output_dir: Union[str, Path]) -> Path:
    """
    Create the output directory if it is missing.
    Best effort: a failure is logged and the path is returned anyway; any
    later write into it fails per pair.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create output directory {output_dir}: {e}")
    return output_dir


def write_diff_image(
    artifact: Image,
    after_path: Union[str, Path],
    output_dir: Union[str, Path],
    *,
    image_service: ImageService = ImageService(),
) -> Path:
    """
    Save *artifact* as PNG in *output_dir*, named like the after image.

    Returns:
        Path of the written file.

    Raises:
        WriteError: the artifact is empty or could not be encoded/written.
    """
    output_path = Path(output_dir) / Path(after_path).name

    if artifact.bounds.is_empty:
        raise WriteError(f"Refusing to write empty diff image {output_path}")

    try:
        image_service.save(artifact, output_path)
    except (OSError, ValueError) as e:
        raise WriteError(f"Cannot write diff image {output_path}: {e}") from e

    return output_path
