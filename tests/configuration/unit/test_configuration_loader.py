"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from swagger_schema_validator.configuration.loader import ConfigurationError, load_configuration
from swagger_schema_validator.spec_loading import DocumentFormat


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def _write_spec(tmp_path: Path, name: str = "swagger.yaml") -> Path:
    return _write_file(tmp_path / name, "swagger: '2.0'\ndefinitions: {}\n")


def test_loads_configuration_with_defaults(tmp_path: Path) -> None:
    spec_path = _write_spec(tmp_path)
    config_path = _write_file(
        tmp_path / "validator.yaml",
        """
spec:
  path: "swagger.yaml"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.spec.path == spec_path.resolve()
    assert configuration.spec.document_format is DocumentFormat.YAML
    assert configuration.transformations == {}
    assert configuration.validation.deep_check is False
    assert configuration.validation.payload_format is DocumentFormat.JSON


def test_loads_all_sections(tmp_path: Path) -> None:
    specs_dir = tmp_path / "specs"
    specs_dir.mkdir()
    _write_spec(specs_dir, "api.spec")
    config_path = _write_file(
        tmp_path / "validator.yaml",
        """
spec:
  path: "specs/api.spec"
  format: "YAML"
transformations:
  x-one-of: "oneOf"
  x-nullable: " nullable "
validation:
  deep_check: true
  payload_format: "yaml"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.spec.path == (specs_dir / "api.spec").resolve()
    assert configuration.spec.document_format is DocumentFormat.YAML
    assert configuration.transformations == {"x-one-of": "oneOf", "x-nullable": "nullable"}
    assert configuration.validation.deep_check is True
    assert configuration.validation.payload_format is DocumentFormat.YAML


def test_missing_configuration_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_requires_spec_section(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "validator.yaml", "validation:\n  deep_check: true\n")

    with pytest.raises(ConfigurationError, match="'spec' is required"):
        load_configuration(config_path)


def test_rejects_non_mapping_root(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "validator.yaml", "- spec\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_rejects_missing_spec_file(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "validator.yaml", "spec:\n  path: nowhere.json\n")

    with pytest.raises(ConfigurationError, match="Spec file not found"):
        load_configuration(config_path)


def test_requires_format_when_suffix_is_unknown(tmp_path: Path) -> None:
    _write_spec(tmp_path, "api.spec")
    config_path = _write_file(tmp_path / "validator.yaml", "spec:\n  path: api.spec\n")

    with pytest.raises(ConfigurationError, match="spec.format"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("validation_section", "message"),
    [
        ("  deep_check: \"yes\"\n", "validation.deep_check must be a boolean"),
        ("  payload_format: xml\n", "validation.payload_format must be one of: json, yaml"),
    ],
)
def test_rejects_invalid_validation_settings(
    tmp_path: Path, validation_section: str, message: str
) -> None:
    _write_spec(tmp_path)
    config_path = _write_file(
        tmp_path / "validator.yaml",
        f"spec:\n  path: swagger.yaml\nvalidation:\n{validation_section}",
    )

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_rejects_non_string_transformations(tmp_path: Path) -> None:
    _write_spec(tmp_path)
    config_path = _write_file(
        tmp_path / "validator.yaml",
        "spec:\n  path: swagger.yaml\ntransformations:\n  x-limit: 5\n",
    )

    with pytest.raises(ConfigurationError, match="transformations.x-limit must be a string"):
        load_configuration(config_path)
