"""Boundary tests for format_attributes dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_format_checks_do_not_import_the_engine() -> None:
    format_dir = _project_root() / "src" / "swagger_schema_validator" / "format_attributes"
    forbidden_import_fragments = (
        "jsonschema",
        "referencing",
        "swagger_schema_validator.schema_compilation",
    )

    for module_path in sorted(format_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden leaf dependency in {module_path}: {fragment}"
