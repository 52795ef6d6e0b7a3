"""Spec parsing service for JSON and YAML documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

import yaml

from .spec_models import DocumentFormat


class SpecParseError(Exception):
    """Raised when a spec cannot be parsed into a mapping tree."""


def parse_spec_text(document_format: DocumentFormat | str, source: str | TextIO) -> Any:
    """Parse spec text (or a text stream) into a JSON-compatible tree."""
    resolved_format = DocumentFormat(document_format)
    text = source if isinstance(source, str) else source.read()
    if resolved_format is DocumentFormat.JSON:
        try:
            tree = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SpecParseError(f"Invalid JSON spec: {exc}") from exc
    else:
        try:
            tree = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SpecParseError(f"Invalid YAML spec: {exc}") from exc

    if not isinstance(tree, Mapping):
        raise SpecParseError("Spec root must be a mapping.")
    return tree


def load_spec_file(path: Path | str, document_format: DocumentFormat | str | None = None) -> Any:
    """Read and parse a spec file, inferring the format from its suffix when not given."""
    spec_path = Path(path)
    if not spec_path.exists():
        raise SpecParseError(f"Spec file not found: {spec_path}")
    if document_format is None:
        try:
            document_format = DocumentFormat.from_path(spec_path)
        except ValueError as exc:
            raise SpecParseError(str(exc)) from exc
    return parse_spec_text(document_format, spec_path.read_text(encoding="utf-8"))
