import logging
from pathlib import Path
from typing import List, Union

from ..config import IMAGE_EXT
from ..errors import DirectoryListError
from ..models.image_pair import ImagePair, RootKind
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def resolve_pairs(
    before: Union[str, Path],
    after: Union[str, Path],
    kind: RootKind,
    *,
    image_service: ImageService = ImageService(),
    ext: str = IMAGE_EXT,
) -> List[ImagePair]:
    """
    Single image: exactly one pair, (before, after).
    Collection: one pair per `ext` file directly under *after*, matched by
    name to *before*. The extension match is case-sensitive; anything else
    is skipped. Subdirectories are not descended into.
    """
    before, after = Path(before), Path(after)

    if kind is RootKind.SINGLE_IMAGE:
        return [ImagePair(before_path=before, after_path=after)]

    try:
        entries = image_service.list_files(after)
    except OSError as e:
        raise DirectoryListError(f"Cannot list after_images {after}: {e}") from e

    pairs: List[ImagePair] = []
    for entry in entries:
        # name match, so a file called exactly ".png" still counts
        if not entry.name.endswith(ext):
            logger.debug(f"Skipping due to extension: {entry}")
            continue
        pairs.append(ImagePair(before_path=before / entry.name, after_path=entry))

    return pairs
