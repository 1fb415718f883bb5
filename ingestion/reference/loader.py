"""
Reference layer: load the Palmer Penguins table and serialize fixtures.

Loads the published reference table (or a local copy), checks it against
the documented schema, and writes/reads CSV fixtures with one fixed set
of parsing rules so written files round-trip byte for byte.
"""

from pathlib import Path
from typing import Optional, Union
import pandas as pd
from loguru import logger

from ingestion.errors import MissingFixture, WriteFailure
from ingestion.reference.dataset_config import NA_REP, REFERENCE_COLUMNS
from validation.schema_validator import validate_reference


def read_table(csv_path: Union[str, Path]) -> pd.DataFrame:
    """
    Parse a fixture CSV.

    Only "NA" and empty fields are treated as missing, and whitespace is
    kept, so padded or misspelled labels survive parsing.
    """
    return pd.read_csv(
        csv_path,
        keep_default_na=False,
        na_values=[NA_REP, ""],
    )


def write_table(df: pd.DataFrame, csv_path: Union[str, Path]) -> Path:
    """
    Write a table as CSV.

    Args:
        df: Table to serialize
        csv_path: Destination file; its directory must already exist

    Returns:
        Path that was written

    Raises:
        WriteFailure: if the destination is not writable
    """
    csv_path = Path(csv_path)
    try:
        df.to_csv(csv_path, index=False, na_rep=NA_REP, lineterminator="\n")
    except OSError as e:
        raise WriteFailure(csv_path, e.strerror or str(e)) from e

    logger.info(f"Wrote {len(df):,} rows x {len(df.columns)} columns to {csv_path}")
    return csv_path


def load_reference(csv_path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """
    Load the reference table.

    Args:
        csv_path: Local CSV copy of the dataset. When omitted the table
            shipped with the palmerpenguins package is used.

    Returns:
        Non-empty DataFrame holding the documented columns in order

    Raises:
        MissingFixture: if the table cannot be obtained or fails validation
    """
    if csv_path is not None:
        csv_path = Path(csv_path)
        if not csv_path.exists():
            raise MissingFixture(f"Reference CSV not found: {csv_path}")
        logger.info(f"Loading reference table from {csv_path}")
        try:
            df = read_table(csv_path)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
            raise MissingFixture(f"Could not read reference CSV {csv_path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise MissingFixture(f"Reference CSV is empty: {csv_path}") from e
    else:
        logger.info("Loading reference table from palmerpenguins")
        try:
            from palmerpenguins import load_penguins
            df = load_penguins()
        except (ImportError, OSError) as e:
            raise MissingFixture(f"Could not load palmerpenguins data: {e}") from e

    is_valid, report = validate_reference(df)
    for warning in report["warnings"]:
        logger.warning(warning)
    if not is_valid:
        raise MissingFixture("; ".join(report["errors"]))

    logger.info(f"Loaded {len(df):,} rows, {len(df.columns)} columns")
    return df[REFERENCE_COLUMNS].copy()
