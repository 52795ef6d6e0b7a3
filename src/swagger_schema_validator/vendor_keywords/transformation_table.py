"""Vendor-extension keyword renames applied to spec definitions."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

BUILTIN_TRANSFORMATIONS: tuple[tuple[str, str], ...] = (
    ("x-additionalItems", "additionalItems"),
    ("x-contains", "contains"),
    ("x-patternProperties", "patternProperties"),
    ("x-dependencies", "dependencies"),
    ("x-propertyNames", "propertyNames"),
    ("x-if", "if"),
    ("x-then", "then"),
    ("x-else", "else"),
    ("x-allOf", "allOf"),
    ("x-anyOf", "anyOf"),
    ("x-oneOf", "oneOf"),
    ("x-not", "not"),
)


class TransformationTableError(ValueError):
    """Raised when custom transformations are not string-to-string renames."""


@dataclass(frozen=True)
class TransformationTable:
    """Ordered vendor-key to canonical-key renames."""

    renames: tuple[tuple[str, str], ...] = BUILTIN_TRANSFORMATIONS

    @classmethod
    def with_custom(cls, custom: Mapping[str, str] | None = None) -> TransformationTable:
        """Merge custom renames with the built-in ones.

        Custom entries come first; built-in entries are merged last, so they
        replace a custom entry with the same vendor key while keeping its position.
        """
        if not custom:
            return cls()
        merged: dict[str, str] = {}
        for vendor_key, canonical_key in custom.items():
            if not isinstance(vendor_key, str) or not isinstance(canonical_key, str):
                raise TransformationTableError(
                    f"Transformation {vendor_key!r} -> {canonical_key!r} must map strings."
                )
            merged[vendor_key] = canonical_key
        merged.update(BUILTIN_TRANSFORMATIONS)
        return cls(renames=tuple(merged.items()))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.renames)

    def __len__(self) -> int:
        return len(self.renames)
