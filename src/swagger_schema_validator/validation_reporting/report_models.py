"""Validation report entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity levels a validation finding can carry."""

    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        """Return the ordering rank, higher is more severe."""
        return _SEVERITY_RANKS[self]

    def is_failure(self) -> bool:
        """Return True when the severity makes a report unsuccessful."""
        return self.rank >= Severity.ERROR.rank


_SEVERITY_RANKS = {Severity.WARNING: 1, Severity.ERROR: 2, Severity.FATAL: 3}


@dataclass(frozen=True)
class ValidationFinding:  # pylint: disable=too-many-instance-attributes
    """One schema/instance mismatch or format fidelity loss."""

    severity: Severity
    key: str
    message: str
    keyword: str
    instance_pointer: str = ""
    schema_pointer: str = ""
    arguments: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "severity": self.severity.value,
            "key": self.key,
            "message": self.message,
            "keyword": self.keyword,
            "instance": self.instance_pointer,
            "schema": self.schema_pointer,
            "arguments": dict(self.arguments),
        }


@dataclass(frozen=True)
class ValidationReport:
    """Ordered findings produced by validating one payload against one definition."""

    definition_pointer: str
    findings: tuple[ValidationFinding, ...] = ()

    @property
    def is_success(self) -> bool:
        """Return True when no finding is at error severity or above."""
        return not any(finding.severity.is_failure() for finding in self.findings)

    @property
    def errors(self) -> tuple[ValidationFinding, ...]:
        """Findings at error severity or above."""
        return tuple(finding for finding in self.findings if finding.severity.is_failure())

    @property
    def warnings(self) -> tuple[ValidationFinding, ...]:
        """Findings at warning severity."""
        return tuple(
            finding for finding in self.findings if finding.severity is Severity.WARNING
        )

    def __iter__(self) -> Iterator[ValidationFinding]:
        return iter(self.findings)

    def __len__(self) -> int:
        return len(self.findings)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "definition": self.definition_pointer,
            "success": self.is_success,
            "findings": [finding.to_dict() for finding in self.findings],
        }
