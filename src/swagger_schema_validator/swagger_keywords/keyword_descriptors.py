"""Swagger 2.0 schema keywords that carry metadata only.

The keywords declared here are valid inside Swagger schema objects but have no
effect on instance validation. Declaring them lets the meta-schema check their
value types, and gives the engine a no-op keyword function for each.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from jsonschema import Draft4Validator

SWAGGER_META_SCHEMA_URI = "https://openapis.org/specification/versions/2.0#"

_ANY_JSON_TYPE = ("array", "boolean", "integer", "null", "number", "object", "string")


@dataclass(frozen=True)
class KeywordDescriptor:
    """Declared Swagger keyword and the JSON types its value may take."""

    name: str
    value_types: tuple[str, ...]

    def meta_schema_entry(self) -> dict[str, Any]:
        """Return the meta-schema fragment constraining the keyword value."""
        if set(self.value_types) >= set(_ANY_JSON_TYPE):
            return {}
        if len(self.value_types) == 1:
            return {"type": self.value_types[0]}
        return {"type": list(self.value_types)}


SWAGGER_KEYWORDS = (
    KeywordDescriptor(name="discriminator", value_types=("string",)),
    KeywordDescriptor(name="example", value_types=_ANY_JSON_TYPE),
    KeywordDescriptor(name="externalDocs", value_types=("object",)),
    KeywordDescriptor(name="readOnly", value_types=("boolean",)),
    KeywordDescriptor(name="xml", value_types=("object",)),
)


def annotation_keyword(validator: Any, value: Any, instance: Any, schema: Any) -> None:
    """Keyword function for metadata keywords: never yields a finding."""
    del validator, value, instance, schema


def swagger_meta_schema() -> dict[str, Any]:
    """Build the Draft 4 meta-schema extended with the Swagger keywords."""
    meta_schema = copy.deepcopy(Draft4Validator.META_SCHEMA)
    meta_schema["id"] = SWAGGER_META_SCHEMA_URI
    meta_schema["description"] = "Swagger 2.0 schema object"
    properties = meta_schema.setdefault("properties", {})
    for descriptor in SWAGGER_KEYWORDS:
        properties[descriptor.name] = descriptor.meta_schema_entry()
    return meta_schema
