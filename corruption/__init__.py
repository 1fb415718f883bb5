"""Deterministic defect injection for the messy penguins fixture."""

from corruption.catalogue import CATALOGUE, Corruption, EditKind, find_overlaps
from corruption.corruptor import corrupt
from corruption.report import IssueReport, format_report, summarize, write_report

__all__ = [
    "CATALOGUE",
    "Corruption",
    "EditKind",
    "find_overlaps",
    "corrupt",
    "IssueReport",
    "format_report",
    "summarize",
    "write_report",
]
