"""
Fixture corruptor: inject the catalogued defects into a reference table.
"""

from typing import Sequence, Set, Tuple
import pandas as pd
from loguru import logger

from corruption.catalogue import CATALOGUE, Corruption, max_row
from ingestion.reference.dataset_config import RANDOM_SEED


def corrupt(
    table: pd.DataFrame,
    seed: int = RANDOM_SEED,
    catalogue: Sequence[Corruption] = CATALOGUE,
) -> pd.DataFrame:
    """
    Apply the corruption catalogue to a copy of the reference table.

    All catalogued edits are literal values or deterministic transforms of
    the original cell, so the result does not depend on `seed`. It is kept
    so randomized variants stay reproducible.

    Args:
        table: Reference table; never modified
        seed: Seed for randomized sub-choices
        catalogue: Corruption records keyed by 1-based row position

    Returns:
        New DataFrame with the same shape and column order as `table`

    Raises:
        ValueError: if the catalogue targets a column or row the table lacks
    """
    last_row = max_row(catalogue)
    if last_row is not None and last_row > len(table):
        raise ValueError(
            f"Catalogue targets row {last_row} but table has only {len(table)} rows"
        )

    missing = sorted({entry.column for entry in catalogue} - set(table.columns))
    if missing:
        raise ValueError(f"Catalogue targets unknown columns: {missing}")

    # Literal edits never draw from the seed
    logger.debug(f"Corrupting with seed {seed}")

    messy = table.copy(deep=True)
    claimed: Set[Tuple[str, int]] = set()

    for entry in catalogue:
        rows = []
        for row in entry.rows:
            cell = (entry.column, row)
            if cell in claimed:
                logger.warning(
                    f"Row {row} of '{entry.column}' already corrupted; skipping {entry.kind.name}"
                )
                continue
            claimed.add(cell)
            rows.append(row)

        if not rows:
            continue

        positions = [row - 1 for row in rows]
        col_pos = messy.columns.get_loc(entry.column)
        originals = table.iloc[positions, col_pos].tolist()
        messy.iloc[positions, col_pos] = [entry.apply(value) for value in originals]
        logger.debug(f"{entry.column}: {entry.kind.name} at rows {rows}")

    logger.info(
        f"Injected {len(claimed)} defects into {messy.shape[0]} rows x {messy.shape[1]} columns"
    )
    return messy
