"""Format attribute entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from swagger_schema_validator.validation_reporting.report_models import Severity


@dataclass(frozen=True)
class FormatViolation:
    """Outcome of a failed format check for one instance value."""

    severity: Severity
    key: str
    message: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


FormatCheck = Callable[[Any], "FormatViolation | None"]


@dataclass(frozen=True)
class FormatAttribute:
    """Named format refinement scoped to one JSON instance type."""

    name: str
    instance_type: str
    check: FormatCheck
