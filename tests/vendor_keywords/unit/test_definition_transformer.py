"""Definition transformer tests."""

from __future__ import annotations

from swagger_schema_validator.vendor_keywords import TransformationTable, transform_definitions


def test_moves_vendor_value_to_canonical_key_preserving_identity() -> None:
    branches = [{"type": "string"}, {"type": "integer"}]
    document = {"definitions": {"Choice": {"x-oneOf": branches}}}

    result = transform_definitions(document, TransformationTable())

    assert result is document
    assert document["definitions"]["Choice"] == {"oneOf": branches}
    assert document["definitions"]["Choice"]["oneOf"] is branches


def test_renames_nested_nodes_inside_objects_and_arrays() -> None:
    document = {
        "definitions": {
            "Outer": {
                "x-allOf": [
                    {"properties": {"name": {"x-not": {"enum": [""]}}}},
                    {"x-patternProperties": {"^meta-": {"type": "string"}}},
                ]
            }
        }
    }

    transform_definitions(document, TransformationTable())

    outer = document["definitions"]["Outer"]
    assert outer["allOf"][0]["properties"]["name"] == {"not": {"enum": [""]}}
    assert outer["allOf"][1] == {"patternProperties": {"^meta-": {"type": "string"}}}


def test_renames_vendor_keys_under_values_that_were_just_moved() -> None:
    document = {"definitions": {"A": {"x-anyOf": [{"x-oneOf": [{"type": "null"}]}]}}}

    transform_definitions(document, TransformationTable())

    assert document["definitions"]["A"] == {"anyOf": [{"oneOf": [{"type": "null"}]}]}


def test_leaves_everything_outside_definitions_untouched() -> None:
    paths = {"/pets": {"x-oneOf": [], "x-vendor": True}}
    document = {"paths": paths, "definitions": {}}

    transform_definitions(document, TransformationTable())

    assert document["paths"] == {"/pets": {"x-oneOf": [], "x-vendor": True}}


def test_document_without_definitions_is_returned_unchanged() -> None:
    document = {"swagger": "2.0"}

    assert transform_definitions(document, TransformationTable()) == {"swagger": "2.0"}


def test_vendor_value_replaces_existing_canonical_value() -> None:
    vendor_value = [{"type": "string"}]
    document = {"definitions": {"A": {"oneOf": [{"type": "null"}], "x-oneOf": vendor_value}}}

    transform_definitions(document, TransformationTable())

    assert document["definitions"]["A"] == {"oneOf": vendor_value}


def test_applies_custom_renames() -> None:
    document = {"definitions": {"A": {"x-one-of": [{"type": "string"}]}}}

    transform_definitions(document, TransformationTable.with_custom({"x-one-of": "oneOf"}))

    assert document["definitions"]["A"] == {"oneOf": [{"type": "string"}]}


def test_unknown_vendor_keys_are_kept() -> None:
    document = {"definitions": {"A": {"x-internal-id": 42, "type": "object"}}}

    transform_definitions(document, TransformationTable())

    assert document["definitions"]["A"] == {"x-internal-id": 42, "type": "object"}
