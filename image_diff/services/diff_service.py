import logging

from ..models.diff_engine import DiffEngine
from ..models.diff_result import DiffResult
from ..models.image import Image

logger = logging.getLogger(__name__)


class DiffService:
    """
    Business logic on top of the diff engine: run it and decide whether the
    result is worth keeping.
    """

    def __init__(self, engine: DiffEngine | None = None):
        self.engine = engine or DiffEngine()

    def compare(self, before: Image, after: Image) -> DiffResult:
        return self.engine.diff(before, after)

    @staticmethod
    def bounds_unchanged(before: Image, result: DiffResult) -> bool:
        """
        Structural check: the artifact covers exactly the before image.
        """
        return before.bounds == result.artifact.bounds

    def should_keep(self, before: Image, result: DiffResult) -> bool:
        """
        Args:
            before (Image): The baseline image of the pair.
            result (DiffResult): What the engine returned for the pair.
        Returns:
            True if the diff image covers a different rectangle than the
            before image. Equal bounds mean unchanged, nothing is written.
        """
        keep = not self.bounds_unchanged(before, result)
        if keep != result.changed:
            # e.g. after is a prefix of before: same bounds, rows removed
            logger.warning(
                f"Bounds check disagrees with diff signal "
                f"(changed={result.changed}, before={before.bounds}, diff={result.artifact.bounds})"
            )
        return keep
