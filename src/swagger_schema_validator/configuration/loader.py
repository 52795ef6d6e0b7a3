"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from swagger_schema_validator.spec_loading import DocumentFormat

from .runtime_settings import Configuration, SpecSettings, ValidationSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    spec = _parse_spec_section(parsed.get("spec"), path.parent)
    transformations = _parse_transformations_section(parsed.get("transformations"))
    validation = _parse_validation_section(parsed.get("validation"))

    return Configuration(
        path=path,
        spec=spec,
        transformations=transformations,
        validation=validation,
    )


def _parse_spec_section(value: Any, base_path: Path) -> SpecSettings:
    section = _require_mapping(value, "spec")
    raw_path = _require_non_empty_string(section.get("path"), "spec.path")
    spec_path = _resolve_path(base_path, raw_path)
    if not spec_path.exists():
        raise ConfigurationError(f"Spec file not found: {spec_path}")

    raw_format = section.get("format")
    if raw_format is None:
        try:
            document_format = DocumentFormat.from_path(spec_path)
        except ValueError as exc:
            raise ConfigurationError(f"spec.format is required: {exc}") from exc
    else:
        document_format = _require_document_format(raw_format, "spec.format")
    return SpecSettings(path=spec_path, document_format=document_format)


def _parse_transformations_section(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("transformations must be a mapping of vendor to canonical keys.")
    transformations: dict[str, str] = {}
    for vendor, canonical in value.items():
        vendor_key = _require_non_empty_string(vendor, "transformations key")
        transformations[vendor_key] = _require_non_empty_string(
            canonical, f"transformations.{vendor_key}"
        )
    return transformations


def _parse_validation_section(value: Any) -> ValidationSettings:
    if value is None:
        return ValidationSettings()
    section = _require_mapping(value, "validation")
    deep_check = section.get("deep_check", False)
    if not isinstance(deep_check, bool):
        raise ConfigurationError("validation.deep_check must be a boolean.")
    payload_format = _require_document_format(
        section.get("payload_format", DocumentFormat.JSON.value), "validation.payload_format"
    )
    return ValidationSettings(deep_check=deep_check, payload_format=payload_format)


def _require_document_format(value: Any, field_name: str) -> DocumentFormat:
    normalized = _require_non_empty_string(value, field_name).lower()
    try:
        return DocumentFormat(normalized)
    except ValueError as exc:
        choices = ", ".join(item.value for item in DocumentFormat)
        raise ConfigurationError(f"{field_name} must be one of: {choices}.") from exc


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
