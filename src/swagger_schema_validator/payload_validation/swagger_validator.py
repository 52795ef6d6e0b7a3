"""Public entry point: validate payloads against Swagger spec definitions."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TextIO

from swagger_schema_validator.schema_compilation import SchemaCompiler, process_schema_compiler
from swagger_schema_validator.spec_loading import (
    DocumentFormat,
    SpecDocument,
    load_spec_file,
    parse_spec_text,
)
from swagger_schema_validator.validation_reporting.report_models import ValidationReport
from swagger_schema_validator.vendor_keywords import TransformationTable, transform_definitions

from .payload_errors import EmptyDocumentError, EmptyPayloadError

_VALIDATOR_LOGGER = logging.getLogger("swagger_schema_validator.validation")
_VALIDATOR_LOGGER.addHandler(logging.NullHandler())

Deserializer = Callable[[str], Any]


class SwaggerValidator:
    """Validates payloads against the definitions of one Swagger 2.0 spec.

    The Swagger spec tree is transformed once, at construction, and must not be
    mutated afterwards: compiled definitions are cached per validator instance
    and pointer for the lifetime of the process.
    """

    def __init__(
        self,
        spec_tree: Any,
        custom_transformations: Mapping[str, str] | None = None,
        *,
        compiler: SchemaCompiler | None = None,
    ) -> None:
        table = TransformationTable.with_custom(custom_transformations)
        self._document = SpecDocument(root=transform_definitions(spec_tree, table))
        self._compiler = compiler or process_schema_compiler()

    @classmethod
    def for_json_spec(
        cls, source: str | TextIO, *, compiler: SchemaCompiler | None = None
    ) -> SwaggerValidator:
        """Create a validator from a JSON spec (text or text stream).

        Raises:
          SpecParseError: If the text is not a valid JSON object.
        """
        return cls(parse_spec_text(DocumentFormat.JSON, source), compiler=compiler)

    @classmethod
    def for_yaml_spec(
        cls, source: str | TextIO, *, compiler: SchemaCompiler | None = None
    ) -> SwaggerValidator:
        """Create a validator from a YAML spec (text or text stream).

        Raises:
          SpecParseError: If the text is not a valid YAML mapping.
        """
        return cls(parse_spec_text(DocumentFormat.YAML, source), compiler=compiler)

    @classmethod
    def for_spec_text(
        cls,
        document_format: DocumentFormat | str,
        source: str | TextIO,
        *,
        compiler: SchemaCompiler | None = None,
    ) -> SwaggerValidator:
        """Create a validator from spec text in the given format."""
        return cls(parse_spec_text(document_format, source), compiler=compiler)

    @classmethod
    def for_spec_file(
        cls,
        path: Path | str,
        document_format: DocumentFormat | str | None = None,
        custom_transformations: Mapping[str, str] | None = None,
        *,
        compiler: SchemaCompiler | None = None,
    ) -> SwaggerValidator:
        """Create a validator from a spec file; the format defaults to the file suffix."""
        return cls(
            load_spec_file(path, document_format),
            custom_transformations,
            compiler=compiler,
        )

    @classmethod
    def for_spec_tree(
        cls,
        spec_tree: Any,
        custom_transformations: Mapping[str, str] | None = None,
        *,
        compiler: SchemaCompiler | None = None,
    ) -> SwaggerValidator:
        """Create a validator from an already-parsed spec.

        Custom transformations are applied before the built-in ones, which win
        when both rename the same vendor key.
        """
        return cls(spec_tree, custom_transformations, compiler=compiler)

    @property
    def document(self) -> SpecDocument:
        """The transformed spec document."""
        return self._document

    def definition_pointers(self) -> tuple[str, ...]:
        """Pointers of every definition in the Swagger spec."""
        return self._document.definition_pointers()

    def validate(
        self,
        payload: str | None,
        definition_pointer: str,
        deserializer: Deserializer = json.loads,
        *,
        deep_check: bool = False,
    ) -> ValidationReport:
        """Parse payload text and validate it against the definition at ``definition_pointer``.

        Args:
          payload: Payload text.
          definition_pointer: Pointer to the definition, for example ``/definitions/User``.
          deserializer: Turns the payload text into a tree; its errors propagate as-is.
          deep_check: Validate children even when their container is invalid.

        Raises:
          EmptyPayloadError: If the payload is None or the empty string.
          EmptyDocumentError: If the payload holds only whitespace.
          UnknownDefinitionError: If the pointer does not resolve inside the spec document.
        """
        if payload is None or payload == "":
            raise EmptyPayloadError()
        if not payload.strip():
            raise EmptyDocumentError()
        tree = deserializer(payload)
        return self.validate_tree(tree, definition_pointer, deep_check=deep_check)

    def validate_tree(
        self, payload: Any, definition_pointer: str, deep_check: bool = False
    ) -> ValidationReport:
        """Validate an already-parsed payload against the definition at ``definition_pointer``.

        Raises:
          UnknownDefinitionError: If the pointer does not resolve inside the spec document.
        """
        unit = self._compiler.get_or_compile(self._document, definition_pointer)
        report = unit.run(payload, deep_check=deep_check)
        _VALIDATOR_LOGGER.debug(
            "Validated payload against %s: success=%s findings=%d",
            definition_pointer,
            report.is_success,
            len(report),
        )
        return report
