"""Compiled schema unit and report construction."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from jsonschema import ValidationError
from referencing import Registry
from referencing.exceptions import Unresolvable

from swagger_schema_validator.spec_loading.spec_models import SpecDocument
from swagger_schema_validator.validation_reporting.report_models import (
    Severity,
    ValidationFinding,
    ValidationReport,
)

from .compilation_errors import UnknownDefinitionError
from .swagger_dialect import FormatViolationError, MissingPropertiesError, SwaggerDialect


@dataclass(frozen=True)
class CompiledSchemaUnit:
    """Reusable validator for one (spec document, definition pointer) pair.

    The unit itself holds no per-run state: every ``run`` starts a fresh
    engine session from the dialect.
    """

    document: SpecDocument
    pointer: str
    dialect: SwaggerDialect
    registry: Registry
    syntax_findings: tuple[ValidationFinding, ...] = ()

    @property
    def entry_schema(self) -> dict[str, str]:
        """Schema that references the definition inside the registered document."""
        return {"$ref": f"{self.document.uri}#{self.pointer}"}

    def run(self, instance: Any, *, deep_check: bool = False) -> ValidationReport:
        """Validate one instance and return the findings in evaluation order."""
        if self.syntax_findings:
            return ValidationReport(definition_pointer=self.pointer, findings=self.syntax_findings)

        session = self.dialect.new_session(
            self.entry_schema, self.registry, deep_check=deep_check
        )
        try:
            errors = list(session.iter_errors(instance))
        except Unresolvable as exc:
            raise UnknownDefinitionError(str(getattr(exc, "ref", exc))) from exc
        return ValidationReport(
            definition_pointer=self.pointer,
            findings=tuple(_finding_from_error(error, self.pointer) for error in errors),
        )


def syntax_findings_for(
    dialect: SwaggerDialect, definition: Any, pointer: str
) -> tuple[ValidationFinding, ...]:
    """Convert meta-schema violations of a definition into fatal findings."""
    return tuple(
        ValidationFinding(
            severity=Severity.FATAL,
            key="fatal.schema.syntax",
            message=f"invalid schema syntax: {error.message}",
            keyword=str(error.validator),
            schema_pointer=pointer + json_pointer(error.absolute_path),
        )
        for error in dialect.syntax_errors(definition)
    )


def json_pointer(parts: Iterable[Any]) -> str:
    """Join path segments into an RFC 6901 pointer."""
    return "".join(f"/{str(part).replace('~', '~0').replace('/', '~1')}" for part in parts)


def _finding_from_error(error: ValidationError, definition_pointer: str) -> ValidationFinding:
    instance_pointer = json_pointer(error.absolute_path)
    schema_pointer = definition_pointer + json_pointer(error.absolute_schema_path)
    if isinstance(error, FormatViolationError):
        violation = error.violation
        return ValidationFinding(
            severity=violation.severity,
            key=violation.key,
            message=violation.message,
            keyword="format",
            instance_pointer=instance_pointer,
            schema_pointer=schema_pointer,
            arguments=violation.arguments,
        )
    arguments: dict[str, Any] = {}
    if isinstance(error, MissingPropertiesError):
        arguments = {"required": error.required, "missing": error.missing}
    return ValidationFinding(
        severity=Severity.ERROR,
        key=f"err.{error.validator}",
        message=error.message,
        keyword=str(error.validator),
        instance_pointer=instance_pointer,
        schema_pointer=schema_pointer,
        arguments=arguments,
    )
