"""
Tests for reference loading, validation and CSV serialization.
"""

import pandas as pd
import pytest

from corruption.corruptor import corrupt
from ingestion.errors import MissingFixture, WriteFailure
from ingestion.reference.dataset_config import REFERENCE_COLUMNS
from ingestion.reference.loader import load_reference, read_table, write_table
from validation.schema_validator import ReferenceSchemaValidator, validate_reference


def test_load_reference_from_csv(reference_csv, reference_table):
    """Local CSV copies load with documented columns in order."""
    df = load_reference(reference_csv)

    assert list(df.columns) == REFERENCE_COLUMNS
    pd.testing.assert_frame_equal(df, reference_table, check_dtype=False)


def test_load_reference_reorders_columns(tmp_path, reference_table):
    """Column order follows the documented schema."""
    path = tmp_path / "shuffled.csv"
    write_table(reference_table[list(reversed(REFERENCE_COLUMNS))], path)

    assert list(load_reference(path).columns) == REFERENCE_COLUMNS


def test_load_reference_missing_file(tmp_path):
    """A missing reference file is a MissingFixture."""
    with pytest.raises(MissingFixture, match="not found"):
        load_reference(tmp_path / "nope.csv")


def test_load_reference_empty_file(tmp_path):
    """An empty reference file is a MissingFixture."""
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(MissingFixture):
        load_reference(path)


def test_load_reference_missing_column(tmp_path, reference_table):
    """A reference table without a documented column is rejected."""
    path = tmp_path / "partial.csv"
    write_table(reference_table.drop(columns=["sex"]), path)

    with pytest.raises(MissingFixture, match="sex"):
        load_reference(path)


def test_load_reference_header_only(tmp_path):
    """A header without rows is rejected as empty."""
    path = tmp_path / "header.csv"
    path.write_text(",".join(REFERENCE_COLUMNS) + "\n")

    with pytest.raises(MissingFixture, match="empty"):
        load_reference(path)


def test_clean_round_trip_is_byte_identical(tmp_path, reference_table):
    """Parsing a written fixture and writing it again reproduces the bytes."""
    first = write_table(reference_table, tmp_path / "penguins_clean.csv")
    second = write_table(read_table(first), tmp_path / "again.csv")

    assert first.read_bytes() == second.read_bytes()


def test_messy_round_trip_keeps_whitespace(tmp_path, reference_table):
    """Padded labels and NA markers survive a write/read cycle."""
    messy = corrupt(reference_table)
    path = write_table(messy, tmp_path / "penguins_messy.csv")
    parsed = read_table(path)

    assert parsed["island"].iloc[44] == messy["island"].iloc[44]
    assert parsed["island"].iloc[44].startswith(" ")
    assert parsed["species"].iloc[4].endswith(" ")
    assert parsed["bill_length_mm"].isna().sum() == 4
    assert write_table(parsed, tmp_path / "again.csv").read_bytes() == path.read_bytes()


def test_na_written_as_marker(tmp_path, reference_table):
    """Missing values are written as NA."""
    messy = corrupt(reference_table)
    text = write_table(messy, tmp_path / "messy.csv").read_text()

    assert ",NA," in text


def test_write_table_unwritable(tmp_path, reference_table):
    """Writing into a missing directory raises WriteFailure naming the path."""
    target = tmp_path / "missing" / "penguins_clean.csv"

    with pytest.raises(WriteFailure) as excinfo:
        write_table(reference_table, target)

    assert excinfo.value.path == target
    assert "penguins_clean.csv" in str(excinfo.value)


def test_validator_accepts_reference(reference_table):
    """The synthetic reference passes validation without warnings."""
    is_valid, report = validate_reference(reference_table)

    assert is_valid
    assert report["errors"] == []
    assert report["warnings"] == []
    assert report["row_count"] == 344


def test_validator_flags_types_and_shape(reference_table):
    """Non-numeric measurements fail; unexpected row counts only warn."""
    df = reference_table.head(50).copy()
    df["body_mass_g"] = df["body_mass_g"].astype(str)
    df["notes"] = "x"

    validator = ReferenceSchemaValidator(df)
    structure_valid, missing = validator.validate_structure()
    types_valid = validator.validate_data_types()
    report = validator.get_validation_report()

    assert structure_valid and missing == []
    assert not types_valid
    assert not report["is_valid"]
    assert any("body_mass_g" in e for e in report["errors"])
    assert any("50 rows" in w for w in report["warnings"])
    assert any("notes" in w for w in report["warnings"])


def test_load_published_reference():
    """The palmerpenguins table has the documented shape and takes every edit."""
    pytest.importorskip("palmerpenguins")

    df = load_reference()
    messy = corrupt(df)

    assert df.shape == (344, 8)
    assert messy.shape == df.shape
    assert messy["bill_length_mm"].iloc[11] == -5.2
    assert messy["island"].iloc[277] == "Torgerson"

    newly_missing = messy["bill_length_mm"].isna() & df["bill_length_mm"].notna()
    assert [pos + 1 for pos in newly_missing[newly_missing].index] == [78, 165, 299, 320]
