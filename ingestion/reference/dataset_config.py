"""
Reference dataset configuration for the Palmer Penguins fixtures.

Documents the shape of the reference table (column order, column kinds,
plausible ranges) and where the generated fixtures are written.
Output location can be overridden via .env (PENGUINS_DATA_DIR).
"""

import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Fixed seed for any randomized corruption variants
RANDOM_SEED = 2024

CLEAN_FILENAME = "penguins_clean.csv"
MESSY_FILENAME = "penguins_messy.csv"

# Missing values are serialized the same way R's write_csv does
NA_REP = "NA"

# Published dataset has 344 observations
EXPECTED_ROWS = 344

CATEGORICAL_COLUMNS = ["species", "island"]
MEASUREMENT_COLUMNS = [
    "bill_length_mm",
    "bill_depth_mm",
    "flipper_length_mm",
    "body_mass_g",
]
BINARY_COLUMNS = ["sex"]
YEAR_COLUMNS = ["year"]

# Column order of the reference table
REFERENCE_COLUMNS: List[str] = (
    CATEGORICAL_COLUMNS + MEASUREMENT_COLUMNS + BINARY_COLUMNS + YEAR_COLUMNS
)

SPECIES = ["Adelie", "Chinstrap", "Gentoo"]
ISLANDS = ["Biscoe", "Dream", "Torgersen"]
SEX_VALUES = ["female", "male"]

# Biologically plausible ranges (inclusive)
PLAUSIBLE_RANGES: Dict[str, Tuple[float, float]] = {
    "bill_length_mm": (30.0, 60.0),
    "bill_depth_mm": (13.0, 22.0),
    "flipper_length_mm": (170.0, 235.0),
    "body_mass_g": (2700.0, 6300.0),
}

# Study period
YEAR_WINDOW: Tuple[int, int] = (2007, 2009)


def get_column_kind(column: str) -> Optional[str]:
    """Get the documented kind of a reference column."""
    if column in CATEGORICAL_COLUMNS:
        return "categorical"
    if column in MEASUREMENT_COLUMNS:
        return "continuous"
    if column in BINARY_COLUMNS:
        return "binary"
    if column in YEAR_COLUMNS:
        return "year"
    return None


def get_data_directory(create: bool = True) -> Path:
    """Get (and optionally create) the fixture output directory."""
    data_dir = Path(os.getenv("PENGUINS_DATA_DIR", PROJECT_ROOT / "data"))
    if create:
        data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_log_level() -> str:
    """Get console log level from environment."""
    return os.getenv("LOG_LEVEL", "INFO").upper()
