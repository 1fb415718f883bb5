"""
Messy penguins fixture generator.
Runs load -> corrupt -> write clean -> write messy -> report in sequence.

Usage:
    python scripts/create_messy_data.py [--reference FILE] [--output-dir DIR]

Produces:
1. penguins_clean.csv: verbatim copy of the reference table
2. penguins_messy.csv: the same table with catalogued defects injected
3. A summary of every injected defect on stdout (or --report FILE)
"""

import sys
from pathlib import Path
from typing import Optional
from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from corruption.catalogue import CATALOGUE
from corruption.corruptor import corrupt
from corruption.report import summarize, write_report
from ingestion.errors import FixtureError, WriteFailure
from ingestion.reference.dataset_config import (
    CLEAN_FILENAME,
    MESSY_FILENAME,
    RANDOM_SEED,
    get_data_directory,
    get_log_level,
)
from ingestion.reference.loader import load_reference, write_table


def setup_logging():
    """Configure logging for fixture generation."""
    logs_dir = project_root / "logs"
    logs_dir.mkdir(exist_ok=True)

    # Remove default handler
    logger.remove()

    # Console goes to stderr so stdout carries only the report
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=get_log_level(),
        colorize=True,
    )

    logger.add(
        logs_dir / "fixtures_{time:YYYY-MM-DD}.log",
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
    )


def prepare_output_directory(output_dir: Optional[Path]) -> Path:
    """Resolve and create the output directory."""
    if output_dir is None:
        output_dir = get_data_directory(create=False)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailure(output_dir, e.strerror or str(e)) from e
    return output_dir


def main(
    reference: Optional[str] = None,
    output_dir: Optional[str] = None,
    report_path: Optional[str] = None,
    seed: int = RANDOM_SEED,
) -> int:
    """
    Generate the clean and messy fixtures and print the issue report.

    Args:
        reference: Local CSV copy of the reference table (default: palmerpenguins)
        output_dir: Directory for the CSV fixtures (default: PENGUINS_DATA_DIR or data/)
        report_path: Write the report to this file instead of stdout
        seed: Seed for randomized corruption variants

    Returns:
        Process exit code
    """
    logger.info("=" * 60)
    logger.info("MESSY DATA CREATION")
    logger.info("=" * 60)

    step = "load reference"
    try:
        clean = load_reference(reference)

        step = "corrupt"
        messy = corrupt(clean, seed=seed, catalogue=CATALOGUE)

        step = "prepare output directory"
        out_dir = prepare_output_directory(Path(output_dir) if output_dir else None)

        step = "write clean fixture"
        clean_path = write_table(clean, out_dir / CLEAN_FILENAME)

        step = "write messy fixture"
        messy_path = write_table(messy, out_dir / MESSY_FILENAME)

        step = "write report"
        report = summarize(CATALOGUE, shape=messy.shape, files=[clean_path, messy_path])
        write_report(report, report_path)
    except FixtureError as e:
        logger.error(f"❌ Failed at step '{step}': {e}")
        return 1
    except Exception as e:
        logger.error(f"❌ Failed at step '{step}': {e}")
        logger.exception(e)
        return 1

    logger.success(f"✅ {report.total} issues injected into {messy_path.name}")
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Generate clean and messy penguin fixtures")
    parser.add_argument(
        "--reference",
        type=str,
        help="Path to a local reference CSV (defaults to the palmerpenguins dataset)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for penguins_clean.csv and penguins_messy.csv",
    )
    parser.add_argument(
        "--report",
        type=str,
        help="Write the issue report to this file instead of stdout",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help=f"Seed for randomized variants (default: {RANDOM_SEED})",
    )

    args = parser.parse_args()

    setup_logging()
    sys.exit(main(
        reference=args.reference,
        output_dir=args.output_dir,
        report_path=args.report,
        seed=args.seed,
    ))
