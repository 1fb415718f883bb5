"""
Corruption catalogue for the messy penguins fixture.

Every injected defect is declared here once, as a Corruption record keyed
by 1-based row position. The corruptor applies these records and the
report counts them, so the two can never drift apart.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
import numpy as np
import pandas as pd


class EditKind(Enum):
    """Kinds of defect, with the label used in the summary report."""

    LEADING_SPACE = "leading spaces"
    TRAILING_SPACE = "trailing spaces"
    LOWERCASE = "lowercase entries"
    EXTRA_TEXT = "extra text"
    TYPO = "typos"
    NEGATIVE = "impossible negatives"
    ZERO = "impossible zeros"
    TOO_LARGE = "impossibly large values"
    TOO_SMALL = "impossibly small values"
    PLACEHOLDER = "placeholder values not removed"
    MISSING = "additional missing values"
    ABBREVIATION = "abbreviations ('M'/'F')"
    CAPITALIZED = "wrong capitalization ('Male'/'Female')"
    LOWER_ABBREVIATION = "lowercase abbreviations ('m'/'f')"
    UPPERCASE = "uppercase entries ('MALE'/'FEMALE')"
    AFTER_WINDOW = "after study period"
    BEFORE_WINDOW = "before study period"
    DIGIT_DROPPED = "missing digit"
    DIGIT_ADDED = "extra digit"

    @property
    def label(self) -> str:
        return self.value


# Real-world source of each defect kind
ISSUE_ORIGINS: Dict[EditKind, str] = {
    EditKind.LEADING_SPACE: "Whitespace problems (leading/trailing spaces)",
    EditKind.TRAILING_SPACE: "Whitespace problems (leading/trailing spaces)",
    EditKind.LOWERCASE: "Data entry mistakes (typos, case inconsistencies)",
    EditKind.EXTRA_TEXT: "Data entry mistakes (typos, case inconsistencies)",
    EditKind.TYPO: "Data entry mistakes (typos, case inconsistencies)",
    EditKind.ABBREVIATION: "Inconsistent categorical coding",
    EditKind.CAPITALIZED: "Inconsistent categorical coding",
    EditKind.LOWER_ABBREVIATION: "Inconsistent categorical coding",
    EditKind.UPPERCASE: "Inconsistent categorical coding",
    EditKind.NEGATIVE: "Sensor/measurement errors (impossible values)",
    EditKind.ZERO: "Sensor/measurement errors (impossible values)",
    EditKind.TOO_LARGE: "Sensor/measurement errors (impossible values)",
    EditKind.TOO_SMALL: "Sensor/measurement errors (impossible values)",
    EditKind.PLACEHOLDER: "Placeholder values not removed (999, 99.9)",
    EditKind.MISSING: "Field data collection gaps (missing values)",
    EditKind.AFTER_WINDOW: "Transcription errors (out-of-range years, digit mistakes)",
    EditKind.BEFORE_WINDOW: "Transcription errors (out-of-range years, digit mistakes)",
    EditKind.DIGIT_DROPPED: "Transcription errors (out-of-range years, digit mistakes)",
    EditKind.DIGIT_ADDED: "Transcription errors (out-of-range years, digit mistakes)",
}


def _drop_digit(value: Any) -> int:
    """2007 -> 207: drop the first zero (or the last digit if there is none)."""
    digits = str(int(value))
    pos = digits.find("0")
    if pos < 0:
        pos = len(digits) - 1
    return int(digits[:pos] + digits[pos + 1:])


def _add_digit(value: Any) -> int:
    """2009 -> 20009: repeat the first zero (or the last digit if there is none)."""
    digits = str(int(value))
    pos = digits.find("0")
    if pos < 0:
        pos = len(digits) - 1
    return int(digits[:pos + 1] + digits[pos:])


# Edits derived from the cell's own value; None means the payload is a literal
_TRANSFORMS: Dict[EditKind, Callable[[Any, Any], Any]] = {
    EditKind.LEADING_SPACE: lambda value, payload: f" {value}",
    EditKind.TRAILING_SPACE: lambda value, payload: f"{value} ",
    EditKind.LOWERCASE: lambda value, payload: str(value).lower(),
    EditKind.EXTRA_TEXT: lambda value, payload: f"{value}{payload}",
    EditKind.ABBREVIATION: lambda value, payload: str(value)[0].upper(),
    EditKind.CAPITALIZED: lambda value, payload: str(value).capitalize(),
    EditKind.LOWER_ABBREVIATION: lambda value, payload: str(value)[0].lower(),
    EditKind.UPPERCASE: lambda value, payload: str(value).upper(),
    EditKind.MISSING: lambda value, payload: np.nan,
    EditKind.DIGIT_DROPPED: lambda value, payload: _drop_digit(value),
    EditKind.DIGIT_ADDED: lambda value, payload: _add_digit(value),
}


@dataclass(frozen=True)
class Corruption:
    """One catalogue entry: apply `kind` to `column` at 1-based `rows`."""

    column: str
    rows: Tuple[int, ...]
    kind: EditKind
    payload: Any = None

    def __post_init__(self):
        if not self.rows:
            raise ValueError(f"Corruption on '{self.column}' targets no rows")
        if any(row < 1 for row in self.rows):
            raise ValueError(f"Row positions are 1-based, got {self.rows}")
        if len(set(self.rows)) != len(self.rows):
            raise ValueError(f"Duplicate row positions in {self.rows}")
        if self.kind not in _TRANSFORMS and self.payload is None:
            raise ValueError(f"{self.kind.name} on '{self.column}' needs a literal payload")

    @property
    def origin(self) -> str:
        return ISSUE_ORIGINS[self.kind]

    def apply(self, value: Any) -> Any:
        """Return the corrupted form of a single cell value."""
        transform = _TRANSFORMS.get(self.kind)
        if transform is None:
            return self.payload
        # Missing cells have no surface form to distort
        if self.kind is not EditKind.MISSING and pd.isna(value):
            return value
        return transform(value, self.payload)


CATALOGUE: Tuple[Corruption, ...] = (
    # Species: typos and formatting from manual data entry
    Corruption("species", (5, 145, 234), EditKind.TRAILING_SPACE),
    Corruption("species", (23, 167), EditKind.LOWERCASE),
    Corruption("species", (67,), EditKind.EXTRA_TEXT, " penguin"),
    Corruption("species", (189,), EditKind.TYPO, "Adelei"),
    # Island: inconsistent transcription
    Corruption("island", (45, 112), EditKind.LEADING_SPACE),
    Corruption("island", (87, 201), EditKind.TRAILING_SPACE),
    Corruption("island", (156,), EditKind.LOWERCASE),
    Corruption("island", (278,), EditKind.TYPO, "Torgerson"),
    # Measurements: impossible values, placeholders and gaps
    Corruption("bill_length_mm", (12,), EditKind.NEGATIVE, -5.2),
    Corruption("bill_length_mm", (89,), EditKind.TOO_LARGE, 250.5),
    Corruption("bill_length_mm", (156,), EditKind.ZERO, 0.0),
    Corruption("bill_length_mm", (223,), EditKind.PLACEHOLDER, 999.0),
    Corruption("bill_length_mm", (78, 165, 299, 320), EditKind.MISSING),
    Corruption("bill_depth_mm", (45,), EditKind.NEGATIVE, -2.1),
    Corruption("bill_depth_mm", (178,), EditKind.PLACEHOLDER, 99.9),
    Corruption("bill_depth_mm", (123, 245), EditKind.MISSING),
    Corruption("flipper_length_mm", (67,), EditKind.ZERO, 0.0),
    Corruption("flipper_length_mm", (289,), EditKind.PLACEHOLDER, 999.0),
    Corruption("flipper_length_mm", (45, 234), EditKind.MISSING),
    Corruption("body_mass_g", (34,), EditKind.TOO_LARGE, 15000.0),
    Corruption("body_mass_g", (145,), EditKind.TOO_LARGE, 10000.0),
    Corruption("body_mass_g", (201,), EditKind.TOO_SMALL, 500.0),
    Corruption("body_mass_g", (56, 178, 267), EditKind.MISSING),
    # Sex: alternate surface forms of the row's own value
    Corruption("sex", (18, 92, 187, 76, 143, 256), EditKind.ABBREVIATION),
    Corruption("sex", (129, 234, 198), EditKind.CAPITALIZED),
    Corruption("sex", (287,), EditKind.LOWER_ABBREVIATION),
    Corruption("sex", (312,), EditKind.UPPERCASE),
    # Year: outside the 2007-2009 study period or mistyped
    Corruption("year", (99,), EditKind.AFTER_WINDOW, 2020),
    Corruption("year", (234,), EditKind.BEFORE_WINDOW, 2006),
    Corruption("year", (178,), EditKind.DIGIT_DROPPED),
    Corruption("year", (301,), EditKind.DIGIT_ADDED),
)


def find_overlaps(catalogue=CATALOGUE) -> List[Tuple[str, int]]:
    """
    Find (column, row) cells targeted by more than one catalogue entry.

    Returns:
        Sorted list of conflicting cells; empty for a well-formed catalogue
    """
    seen = set()
    overlaps = set()
    for entry in catalogue:
        for row in entry.rows:
            cell = (entry.column, row)
            if cell in seen:
                overlaps.add(cell)
            seen.add(cell)
    return sorted(overlaps)


def issue_origins(catalogue=CATALOGUE) -> List[str]:
    """Distinct real-world origins exercised by the catalogue, in catalogue order."""
    origins = []
    for entry in catalogue:
        if entry.origin not in origins:
            origins.append(entry.origin)
    return origins


def max_row(catalogue=CATALOGUE) -> Optional[int]:
    """Highest row position the catalogue targets."""
    return max((row for entry in catalogue for row in entry.rows), default=None)
