#!/usr/bin/env python3
"""
Generate diff images between a before and an after set of screenshots.

Inputs come from the environment (before_images, after_images,
BITRISE_SOURCE_DIR, ...) and can be overridden on the command line.
Exit code 0 on success, 1 on a configuration, listing or export error.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import StepConfig
from ..errors import ImageDiffError
from ..models.pair_outcome import RunResult
from ..pipeline.diff_generator import generate_diff_images, log_run_summary
from ..pipeline.image_set_resolver import resolve_pairs
from ..pipeline.output_writer import prepare_output_dir
from ..pipeline.root_validator import validate_roots
from ..services.result_publisher import PUBLISHERS, ResultPublisher, create_publisher

logger = logging.getLogger("image_diff")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate diff images for changed screenshots.")
    parser.add_argument("--before-images", help="before image, or directory of before images")
    parser.add_argument("--after-images", help="after image, or directory of after images")
    parser.add_argument("--source-dir", help="base directory for the diff_image_output directory")
    parser.add_argument("--publisher", choices=sorted(PUBLISHERS), help="how to export the output directory")
    parser.add_argument(
        "--fail-on-pair-error",
        action="store_true",
        help="exit 1 if any single pair could not be diffed",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def run_step(config: StepConfig, publisher: ResultPublisher) -> RunResult:
    """
    Idle → Validated → Resolving → ProcessingPairs → Done, then export.
    Raises ImageDiffError for everything that must fail the whole run.
    """
    output_dir = prepare_output_dir(config.output_dir)

    kind = validate_roots(config.before_images, config.after_images)
    pairs = resolve_pairs(config.before_images, config.after_images, kind, ext=config.image_ext)
    logger.info(f"Comparing {len(pairs)} image pair(s) ({kind.value})")

    run = generate_diff_images(pairs, output_dir)
    log_run_summary(run)

    publisher.publish(config.export_key, str(output_dir))
    return run


def main(argv: Optional[List[str]] = None, publisher: Optional[ResultPublisher] = None) -> int:
    args = parse_args(argv)

    try:
        config = StepConfig.from_env(
            before_images=args.before_images,
            after_images=args.after_images,
            source_dir=args.source_dir,
            publisher=args.publisher,
            log_level="DEBUG" if args.verbose else None,
        )
    except ImageDiffError as e:
        setup_logging("INFO")
        logger.error(f"Error: {e}")
        return 1

    setup_logging(config.log_level)
    print(config.describe())

    try:
        publisher = publisher or create_publisher(config.publisher)
        run = run_step(config, publisher)
    except ImageDiffError as e:
        logger.error(f"Error: {e}")
        return 1

    if args.fail_on_pair_error and run.has_failures:
        logger.error(f"Error: {len(run.failed)} image pair(s) failed")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
