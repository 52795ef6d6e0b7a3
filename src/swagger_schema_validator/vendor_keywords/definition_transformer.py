"""In-place rename of vendor keywords inside spec definitions."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .transformation_table import TransformationTable


def transform_definitions(document: Any, table: TransformationTable) -> Any:
    """Rename vendor keywords in every node below the top-level ``definitions``.

    Values are moved, not copied: the node keeps the same value object under
    the canonical key. If a node already holds the canonical key, the vendor
    value replaces it. The document itself is returned.
    """
    if not isinstance(document, MutableMapping):
        return document
    definitions = document.get("definitions")
    if definitions is None:
        return document
    for definition in _children(definitions):
        _rename_recursively(definition, table)
    return document


def _rename_recursively(node: Any, table: TransformationTable) -> None:
    if isinstance(node, MutableMapping):
        for vendor_key, canonical_key in table:
            if vendor_key in node:
                node[canonical_key] = node.pop(vendor_key)
    for child in _children(node):
        _rename_recursively(child, table)


def _children(node: Any) -> list[Any]:
    if isinstance(node, MutableMapping):
        return list(node.values())
    if isinstance(node, list):
        return list(node)
    return []
