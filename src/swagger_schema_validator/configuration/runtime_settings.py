"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from swagger_schema_validator.spec_loading import DocumentFormat


@dataclass(frozen=True)
class SpecSettings:
    """Location and format of the Swagger spec to validate against."""

    path: Path
    document_format: DocumentFormat


@dataclass(frozen=True)
class ValidationSettings:
    """Defaults applied when validating payloads."""

    deep_check: bool = False
    payload_format: DocumentFormat = DocumentFormat.JSON


@dataclass(frozen=True)
class Configuration:
    """Aggregated validator configuration."""

    path: Path
    spec: SpecSettings
    transformations: Mapping[str, str] = field(default_factory=dict)
    validation: ValidationSettings = field(default_factory=ValidationSettings)
