"""Spec document entities."""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

_DOCUMENT_HANDLES = itertools.count(1)


class DocumentFormat(str, Enum):
    """Text formats specs and payloads can be written in."""

    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_path(cls, path: Path | str) -> DocumentFormat:
        """Infer the format from a file suffix."""
        suffix = Path(path).suffix.lower()
        if suffix == ".json":
            return cls.JSON
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        raise ValueError(f"Cannot infer document format from file name: {path}")


@dataclass(frozen=True, eq=False)
class SpecDocument:
    """Transformed spec tree with an identity handle used for compiled-schema caching.

    Equality and hashing are by identity: two documents with identical content
    are still different documents.
    """

    root: Any
    handle: int = field(default_factory=lambda: next(_DOCUMENT_HANDLES))

    @property
    def uri(self) -> str:
        """Opaque URI the document is registered under for ``$ref`` resolution."""
        return f"urn:swagger-spec:{self.handle}"

    def definition_pointers(self) -> tuple[str, ...]:
        """Return ``/definitions/<Name>`` pointers for every definition."""
        definitions = self.root.get("definitions") if isinstance(self.root, Mapping) else None
        if not isinstance(definitions, Mapping):
            return ()
        return tuple(f"/definitions/{_escape_pointer_token(name)}" for name in definitions)


def _escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")
