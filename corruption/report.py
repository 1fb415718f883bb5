"""
Summary report of the defects injected by the corruption catalogue.

Counts come straight from the catalogue's row positions, so the report
always matches what `corrupt` did.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO, Tuple, Union

from corruption.catalogue import CATALOGUE, Corruption, EditKind, issue_origins
from ingestion.errors import WriteFailure
from ingestion.reference.dataset_config import get_column_kind

RULE = "=" * 60

_UNITS = ("_mm", "_g")


@dataclass
class CategoryCount:
    """Number of cells hit by one defect kind in one column."""
    column: str
    kind: EditKind
    count: int
    values: List = field(default_factory=list)

    @property
    def description(self) -> str:
        text = f"{self.count} {self.kind.label}"
        if self.values:
            text += " (" + ", ".join(_format_value(v) for v in self.values) + ")"
        return text


@dataclass
class IssueReport:
    """Per-column defect counts with totals and rates."""
    categories: List[CategoryCount]
    n_rows: Optional[int] = None
    n_columns: Optional[int] = None
    origins: List[str] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        """Affected columns in catalogue order."""
        seen = []
        for category in self.categories:
            if category.column not in seen:
                seen.append(category.column)
        return seen

    @property
    def column_totals(self) -> Dict[str, int]:
        totals = {col: 0 for col in self.columns}
        for category in self.categories:
            totals[category.column] += category.count
        return totals

    @property
    def total(self) -> int:
        return sum(category.count for category in self.categories)

    @property
    def n_cells(self) -> Optional[int]:
        if self.n_rows is None or self.n_columns is None:
            return None
        return self.n_rows * self.n_columns

    @property
    def defect_rate(self) -> Optional[float]:
        """Issues per cell of the table."""
        if not self.n_cells:
            return None
        return self.total / self.n_cells

    @property
    def observation_rate(self) -> Optional[float]:
        """Issues per row of the table."""
        if not self.n_rows:
            return None
        return self.total / self.n_rows

    def count(self, column: str, kind: EditKind) -> int:
        """Get the count for one (column, kind) category, 0 if absent."""
        return sum(
            c.count for c in self.categories if c.column == column and c.kind is kind
        )


def _format_value(value) -> str:
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def summarize(
    catalogue: Sequence[Corruption] = CATALOGUE,
    shape: Optional[Tuple[int, int]] = None,
    files: Sequence[Path] = (),
) -> IssueReport:
    """
    Count catalogue row positions per (column, kind).

    Args:
        catalogue: Corruption records that were applied
        shape: (rows, columns) of the corrupted table, enables rates
        files: Artifacts written alongside the report

    Returns:
        IssueReport with categories in first-declared order
    """
    categories: Dict[Tuple[str, EditKind], CategoryCount] = {}
    for entry in catalogue:
        key = (entry.column, entry.kind)
        if key not in categories:
            categories[key] = CategoryCount(entry.column, entry.kind, 0)
        category = categories[key]
        category.count += len(entry.rows)
        if entry.payload is not None and entry.payload not in category.values:
            category.values.append(entry.payload)

    n_rows, n_columns = shape if shape is not None else (None, None)
    return IssueReport(
        categories=list(categories.values()),
        n_rows=n_rows,
        n_columns=n_columns,
        origins=issue_origins(catalogue),
        files=[Path(f) for f in files],
    )


def _column_title(column: str) -> str:
    name = column
    for unit in _UNITS:
        if name.endswith(unit):
            name = name[: -len(unit)]
    return name.replace("_", " ").upper()


def format_report(report: IssueReport) -> str:
    """Render the report as plain text."""
    lines = ["", RULE, "MESSY DATA CREATION SUMMARY", RULE, ""]

    if report.n_rows is not None:
        lines.append("Dataset dimensions:")
        lines.append(f"  Clean dataset:  {report.n_rows} rows x {report.n_columns} columns")
        lines.append(f"  Messy dataset:  {report.n_rows} rows x {report.n_columns} columns")
        lines.append("")

    lines.append("Data quality issues introduced:")
    lines.append("")

    totals = report.column_totals
    for number, column in enumerate(report.columns, start=1):
        kind = get_column_kind(column) or "other"
        lines.append(f"{number}. {_column_title(column)} ({kind}):")
        for category in report.categories:
            if category.column == column:
                lines.append(f"   - {category.description}")
        lines.append(f"   -> Total: {totals[column]} issues")
        lines.append("")

    lines.append(RULE)
    if report.defect_rate is not None:
        lines.append(
            f"GRAND TOTAL: {report.total} data quality issues across {report.n_rows} observations"
        )
        lines.append(
            f"Defect rate: {report.defect_rate:.1%} of {report.n_cells} cells "
            f"({report.observation_rate:.1%} per observation)"
        )
    else:
        lines.append(f"GRAND TOTAL: {report.total} data quality issues")
    lines.append(RULE)
    lines.append("")

    if report.files:
        lines.append("Files created:")
        lines.extend(f"  - {path}" for path in report.files)
        lines.append("")

    if report.origins:
        lines.append("These errors represent common real-world data quality issues:")
        lines.extend(f"  - {origin}" for origin in report.origins)
        lines.append("")

    return "\n".join(lines)


def write_report(
    report: IssueReport,
    destination: Union[None, str, Path, TextIO] = None,
) -> None:
    """
    Write the formatted report.

    Args:
        report: Report to render
        destination: Stream or file path; defaults to stdout

    Raises:
        WriteFailure: if a file destination is not writable
    """
    text = format_report(report)

    if destination is None:
        destination = sys.stdout

    if isinstance(destination, (str, Path)):
        path = Path(destination)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise WriteFailure(path, e.strerror or str(e)) from e
        return

    destination.write(text)
    destination.flush()
