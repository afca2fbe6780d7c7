import os
import stat
from pathlib import Path
from typing import Union

from ..errors import ConfigValidationError
from ..models.image_pair import RootKind


def _stat(path: Path, name: str) -> os.stat_result:
    try:
        return path.stat()
    except OSError as e:
        raise ConfigValidationError(f"Cannot access {name} {path}: {e.strerror or e}") from e


def validate_roots(
    before: Union[str, Path],
    after: Union[str, Path],
) -> RootKind:
    """
    Checks that before_images and after_images are the same kind of thing.

    Args:
        before: Path to a before image or a directory of before images.
        after: Path to an after image or a directory of after images.

    Returns:
        RootKind.COLLECTION if both are directories,
        RootKind.SINGLE_IMAGE if neither is.

    Raises:
        ConfigValidationError: a root cannot be stat'ed, or one is a
            directory and the other is not.
    """
    before_is_dir = stat.S_ISDIR(_stat(Path(before), "before_images").st_mode)
    after_is_dir = stat.S_ISDIR(_stat(Path(after), "after_images").st_mode)

    if before_is_dir != after_is_dir:
        raise ConfigValidationError(
            "File Mode of before_images and after_images are different "
            f"(before_images is a {'directory' if before_is_dir else 'file'}, "
            f"after_images is a {'directory' if after_is_dir else 'file'})"
        )

    return RootKind.COLLECTION if after_is_dir else RootKind.SINGLE_IMAGE
