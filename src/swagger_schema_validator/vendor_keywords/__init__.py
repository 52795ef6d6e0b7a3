"""Vendor keyword transformation exports."""

from .definition_transformer import transform_definitions
from .transformation_table import (
    BUILTIN_TRANSFORMATIONS,
    TransformationTable,
    TransformationTableError,
)

__all__ = [
    "BUILTIN_TRANSFORMATIONS",
    "TransformationTable",
    "TransformationTableError",
    "transform_definitions",
]
