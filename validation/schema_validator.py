"""
Schema validation for the penguin reference table.
"""

from typing import Dict, List, Tuple
import pandas as pd
from loguru import logger

from ingestion.reference.dataset_config import (
    EXPECTED_ROWS,
    MEASUREMENT_COLUMNS,
    REFERENCE_COLUMNS,
    YEAR_COLUMNS,
)


class ReferenceSchemaValidator:
    """Validates reference table structure and data types."""

    # Columns the corruption catalogue addresses
    REQUIRED_COLUMNS = REFERENCE_COLUMNS

    def __init__(self, df: pd.DataFrame):
        """Initialize validator with DataFrame."""
        self.df = df
        self.validation_errors: List[str] = []
        self.validation_warnings: List[str] = []

    def validate_structure(self) -> Tuple[bool, List[str]]:
        """
        Validate that the table is non-empty and has the documented columns.

        Returns:
            (is_valid, missing_columns)
        """
        missing = [col for col in self.REQUIRED_COLUMNS if col not in self.df.columns]

        if missing:
            self.validation_errors.append(
                f"Missing required columns: {', '.join(missing)}"
            )

        if self.df.empty:
            self.validation_errors.append("Reference table is empty")
            return False, missing

        if len(self.df) != EXPECTED_ROWS:
            self.validation_warnings.append(
                f"Reference table has {len(self.df)} rows (published dataset has {EXPECTED_ROWS})"
            )

        extra = [col for col in self.df.columns if col not in self.REQUIRED_COLUMNS]
        if extra:
            self.validation_warnings.append(
                f"Ignoring undocumented columns: {', '.join(extra)}"
            )

        return not missing, missing

    def validate_data_types(self) -> bool:
        """Validate that measurement and year columns are numeric."""
        errors = []

        for col in MEASUREMENT_COLUMNS:
            if not pd.api.types.is_numeric_dtype(self.df[col]):
                errors.append(f"Column '{col}' should be numeric, found {self.df[col].dtype}")

        for col in YEAR_COLUMNS:
            if not pd.api.types.is_integer_dtype(self.df[col]):
                errors.append(f"Column '{col}' should be integer, found {self.df[col].dtype}")

        if errors:
            self.validation_errors.extend(errors)
            return False

        return True

    def get_validation_report(self) -> Dict:
        """Get full validation report."""
        return {
            "is_valid": len(self.validation_errors) == 0,
            "errors": self.validation_errors,
            "warnings": self.validation_warnings,
            "row_count": len(self.df),
            "column_count": len(self.df.columns),
        }


def validate_reference(df: pd.DataFrame) -> Tuple[bool, Dict]:
    """
    Convenience function to validate the reference table.

    Args:
        df: DataFrame to validate

    Returns:
        (is_valid, validation_report)
    """
    validator = ReferenceSchemaValidator(df)

    structure_valid, missing = validator.validate_structure()
    if structure_valid:
        validator.validate_data_types()

    report = validator.get_validation_report()
    logger.debug(f"Reference validation: {report['row_count']} rows, valid={report['is_valid']}")
    return report["is_valid"], report
