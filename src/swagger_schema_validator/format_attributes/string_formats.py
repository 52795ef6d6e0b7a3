"""String checks for the byte (base64) and date formats."""

from __future__ import annotations

import re
from datetime import date

from swagger_schema_validator.validation_reporting.report_models import Severity

from .format_models import FormatViolation

_BASE64_PATTERN = re.compile(
    r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?"
)
_FULL_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def check_base64(value: str) -> FormatViolation | None:
    """Reject strings outside the RFC 4648 alphabet or with broken padding."""
    if _BASE64_PATTERN.fullmatch(value):
        return None
    return FormatViolation(
        severity=Severity.ERROR,
        key="err.format.base64.invalid",
        message="string is not a valid base64 value (invalid base64)",
        arguments={"value": value},
    )


def check_date(value: str) -> FormatViolation | None:
    """Reject strings that are not an existing yyyy-MM-dd calendar date."""
    if _FULL_DATE_PATTERN.fullmatch(value):
        try:
            date.fromisoformat(value)
        except ValueError:
            pass
        else:
            return None
    return FormatViolation(
        severity=Severity.ERROR,
        key="err.format.invalidDate",
        message=f'string "{value}" is invalid against requested date format "yyyy-MM-dd"',
        arguments={"value": value, "expected": "yyyy-MM-dd"},
    )
