"""Spec loading exports."""

from .spec_models import DocumentFormat, SpecDocument
from .spec_parsing import SpecParseError, load_spec_file, parse_spec_text

__all__ = [
    "DocumentFormat",
    "SpecDocument",
    "SpecParseError",
    "load_spec_file",
    "parse_spec_text",
]
