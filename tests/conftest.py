"""
Shared fixtures: a synthetic reference table with the published shape.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np
import pandas as pd
import pytest

from ingestion.reference.dataset_config import EXPECTED_ROWS, REFERENCE_COLUMNS


def build_reference_table(n_rows: int = EXPECTED_ROWS) -> pd.DataFrame:
    """Penguin-like table without missing values, laid out like the real one."""
    rng = np.random.default_rng(7)
    positions = np.arange(1, n_rows + 1)

    species = np.where(positions <= 152, "Adelie", np.where(positions <= 276, "Gentoo", "Chinstrap"))
    island = np.where(
        species == "Gentoo",
        "Biscoe",
        np.where(species == "Chinstrap", "Dream", np.array(["Torgersen", "Biscoe", "Dream"])[positions % 3]),
    )
    island[277] = "Torgersen"  # row 278

    df = pd.DataFrame({
        "species": species,
        "island": island,
        "bill_length_mm": np.round(rng.uniform(35.0, 55.0, n_rows), 1),
        "bill_depth_mm": np.round(rng.uniform(14.0, 21.0, n_rows), 1),
        "flipper_length_mm": rng.integers(180, 230, n_rows).astype(float),
        "body_mass_g": (rng.integers(60, 120, n_rows) * 50).astype(float),
        "sex": np.where(positions % 2 == 0, "male", "female"),
        "year": (2007 + positions % 3).astype("int64"),
    })
    return df[REFERENCE_COLUMNS]


@pytest.fixture
def reference_table() -> pd.DataFrame:
    return build_reference_table()


@pytest.fixture
def reference_csv(tmp_path, reference_table) -> Path:
    """Reference table written the way the loader expects to read it."""
    from ingestion.reference.loader import write_table

    return write_table(reference_table, tmp_path / "reference.csv")
