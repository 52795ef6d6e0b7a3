"""Text and JSON renderings of validation reports."""

from __future__ import annotations

import json
from decimal import Decimal

from .report_models import ValidationReport


def render_report_text(report: ValidationReport) -> str:
    """Render one report as human-readable lines."""
    status = "OK" if report.is_success else "FAILED"
    summary = f"{status} {report.definition_pointer}"
    counts = _finding_counts(report)
    if counts:
        summary = f"{summary} ({counts})"
    lines = [summary]
    for finding in report:
        location = finding.instance_pointer or "/"
        lines.append(f"  {finding.severity.value}: [{location}] {finding.message}")
    return "\n".join(lines)


def render_report_json(report: ValidationReport) -> str:
    """Render one report as an indented JSON document."""
    return json.dumps(report.to_dict(), indent=2, default=_json_default)


def _finding_counts(report: ValidationReport) -> str:
    parts = []
    error_count = len(report.errors)
    warning_count = len(report.warnings)
    if error_count:
        parts.append(f"{error_count} error{'s' if error_count != 1 else ''}")
    if warning_count:
        parts.append(f"{warning_count} warning{'s' if warning_count != 1 else ''}")
    return ", ".join(parts)


def _json_default(value: object) -> object:
    if isinstance(value, Decimal):
        return str(value)
    return repr(value)
