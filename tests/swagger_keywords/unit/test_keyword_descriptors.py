"""Swagger keyword descriptor and meta-schema tests."""

from __future__ import annotations

from jsonschema import Draft4Validator
from swagger_schema_validator.swagger_keywords import (
    SWAGGER_KEYWORDS,
    SWAGGER_META_SCHEMA_URI,
    annotation_keyword,
    swagger_meta_schema,
)


def test_declares_swagger_metadata_keywords() -> None:
    names = {descriptor.name for descriptor in SWAGGER_KEYWORDS}

    assert names == {"discriminator", "example", "externalDocs", "readOnly", "xml"}


def test_meta_schema_entries_constrain_value_types() -> None:
    entries = {
        descriptor.name: descriptor.meta_schema_entry() for descriptor in SWAGGER_KEYWORDS
    }

    assert entries["readOnly"] == {"type": "boolean"}
    assert entries["discriminator"] == {"type": "string"}
    assert entries["xml"] == {"type": "object"}
    assert entries["externalDocs"] == {"type": "object"}
    assert entries["example"] == {}


def test_swagger_meta_schema_extends_draft4_without_mutating_it() -> None:
    meta_schema = swagger_meta_schema()

    assert meta_schema["id"] == SWAGGER_META_SCHEMA_URI
    assert "readOnly" in meta_schema["properties"]
    assert "readOnly" not in Draft4Validator.META_SCHEMA["properties"]
    assert Draft4Validator.META_SCHEMA["id"] != SWAGGER_META_SCHEMA_URI


def test_swagger_meta_schema_checks_keyword_values() -> None:
    checker = Draft4Validator(swagger_meta_schema())

    assert checker.is_valid({"type": "object", "readOnly": True, "example": [1, "two"]})
    assert checker.is_valid({"xml": {"name": "pet"}, "discriminator": "kind"})
    assert not checker.is_valid({"readOnly": "yes"})
    assert not checker.is_valid({"properties": {"id": {"xml": "pet"}}})


def test_annotation_keyword_never_yields_findings() -> None:
    assert annotation_keyword(None, {"anything": True}, [1, 2], {}) is None
