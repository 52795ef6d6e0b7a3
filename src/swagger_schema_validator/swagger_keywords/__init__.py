"""Swagger keyword exports."""

from .keyword_descriptors import (
    SWAGGER_KEYWORDS,
    SWAGGER_META_SCHEMA_URI,
    KeywordDescriptor,
    annotation_keyword,
    swagger_meta_schema,
)

__all__ = [
    "KeywordDescriptor",
    "SWAGGER_KEYWORDS",
    "SWAGGER_META_SCHEMA_URI",
    "annotation_keyword",
    "swagger_meta_schema",
]
