"""UI components for terminal output."""

from .report import build_report_document, print_project_report

__all__ = [
    "build_report_document",
    "print_project_report",
]
