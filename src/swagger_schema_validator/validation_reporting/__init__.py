"""Validation reporting exports."""

from .report_models import Severity, ValidationFinding, ValidationReport
from .report_rendering import render_report_json, render_report_text

__all__ = [
    "Severity",
    "ValidationFinding",
    "ValidationReport",
    "render_report_json",
    "render_report_text",
]
