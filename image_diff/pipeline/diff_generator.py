"""
Diff Generator Pipeline
Loads every before/after pair, diffs it, and writes the diff image for the
pairs that changed. A pair that fails never stops the others.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from ..errors import ImageDiffError
from ..models.image_pair import ImagePair
from ..models.pair_outcome import PairOutcome, PairStatus, RunResult
from ..services.diff_service import DiffService
from ..services.image_service import ImageService
from .output_writer import write_diff_image

logger = logging.getLogger(__name__)


def process_pair(
    pair: ImagePair,
    output_dir: Union[str, Path],
    *,
    image_service: ImageService,
    diff_service: DiffService,
) -> PairOutcome:
    """
    Loaded → Diffed → Kept | Discarded.
    Load, diff and write errors propagate to the caller.
    """
    before = image_service.load(pair.before_path)
    after = image_service.load(pair.after_path)
    if before.is_placeholder:
        logger.info(f"{pair.name}: no before image, treating as added")

    result = diff_service.compare(before, after)
    if not diff_service.should_keep(before, result):
        return PairOutcome(pair=pair, status=PairStatus.DISCARDED)

    output_path = write_diff_image(result.artifact, pair.after_path, output_dir, image_service=image_service)
    bounds = result.artifact.bounds
    logger.debug(f"{pair.name}: diff image {bounds.width}x{bounds.height}")
    return PairOutcome(
        pair=pair,
        status=PairStatus.KEPT,
        reason=f"+{result.rows_added}/-{result.rows_removed} rows",
        output_path=output_path,
    )


def generate_diff_images(
    pairs: Iterable[ImagePair],
    output_dir: Union[str, Path],
    *,
    image_service: ImageService = ImageService(),
    diff_service: DiffService = DiffService(),
) -> RunResult:
    """
    Process *pairs* one after the other, in order.

    Args:
        pairs: Resolved before/after pairs.
        output_dir: Where kept diff images are written.
        image_service: Service for image loading and saving.
        diff_service: Service running the diff and the keep decision.

    Returns:
        RunResult with one PairOutcome per pair.
    """
    run = RunResult(output_dir=Path(output_dir))

    for pair in pairs:
        try:
            outcome = process_pair(pair, output_dir, image_service=image_service, diff_service=diff_service)
        except ImageDiffError as e:
            logger.error(f"{pair.name}: {e}")
            outcome = PairOutcome(pair=pair, status=PairStatus.FAILED, reason=str(e))
        except (OSError, ValueError, MemoryError) as e:
            logger.error(f"{pair.name}: diff failed: {e}")
            outcome = PairOutcome(pair=pair, status=PairStatus.FAILED, reason=f"{type(e).__name__}: {e}")

        if outcome.status is PairStatus.KEPT:
            logger.info(f"{pair.name}: changed ({outcome.reason}) → {outcome.output_path}")
        elif outcome.status is PairStatus.DISCARDED:
            logger.info(f"{pair.name}: unchanged")
        run.outcomes.append(outcome)

    return run


def log_run_summary(run: RunResult) -> None:
    logger.info(
        f"Compared {len(run.outcomes)} image(s): {len(run.kept)} changed, "
        f"{len(run.discarded)} unchanged, {len(run.failed)} failed"
    )
    for outcome in run.failed:
        logger.warning(f"   failed: {outcome.pair.after_path} ({outcome.reason})")
