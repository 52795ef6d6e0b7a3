"""Definition compilation and cache dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable

from referencing import Registry
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT4

from swagger_schema_validator.spec_loading.spec_models import SpecDocument

from .compilation_errors import UnknownDefinitionError
from .compiled_schema import CompiledSchemaUnit, syntax_findings_for
from .schema_cache import CacheKey, SchemaCache
from .swagger_dialect import SwaggerDialect

_COMPILER_LOGGER = logging.getLogger("swagger_schema_validator.compilation")
_COMPILER_LOGGER.addHandler(logging.NullHandler())

CompileDefinition = Callable[[SpecDocument, str], CompiledSchemaUnit]


def compile_definition(document: SpecDocument, pointer: str) -> CompiledSchemaUnit:
    """Resolve a definition pointer in the document and compile it with a fresh dialect.

    Raises:
      UnknownDefinitionError: If the pointer does not resolve inside the document.
    """
    dialect = SwaggerDialect.create()
    registry = Registry().with_resource(document.uri, DRAFT4.create_resource(document.root))
    try:
        resolved = registry.resolver(base_uri=document.uri).lookup(f"#{pointer}")
    except Unresolvable as exc:
        raise UnknownDefinitionError(pointer) from exc

    return CompiledSchemaUnit(
        document=document,
        pointer=pointer,
        dialect=dialect,
        registry=registry,
        syntax_findings=syntax_findings_for(dialect, resolved.contents, pointer),
    )


class SchemaCompiler:
    """Compiles definitions at most once per (document identity, pointer)."""

    def __init__(
        self,
        cache: SchemaCache | None = None,
        compile_unit: CompileDefinition | None = None,
    ) -> None:
        self._cache = cache if cache is not None else SchemaCache()
        self._compile_unit = compile_unit or compile_definition

    @property
    def cache(self) -> SchemaCache:
        """Cache holding the compiled units."""
        return self._cache

    def get_or_compile(self, document: SpecDocument, pointer: str) -> CompiledSchemaUnit:
        """Return the cached unit for the pair, compiling it on first use."""
        if not isinstance(pointer, str):
            raise TypeError("Definition pointer must be a string.")
        key = CacheKey(document_handle=document.handle, pointer=pointer)
        return self._cache.get_or_create(key, lambda: self._compile(document, pointer))

    def _compile(self, document: SpecDocument, pointer: str) -> CompiledSchemaUnit:
        _COMPILER_LOGGER.debug("Compiling %s from %s", pointer, document.uri)
        try:
            return self._compile_unit(document, pointer)
        except UnknownDefinitionError:
            _COMPILER_LOGGER.debug("Definition %s not found in %s", pointer, document.uri)
            raise


_PROCESS_SCHEMA_COMPILER = SchemaCompiler()


def process_schema_compiler() -> SchemaCompiler:
    """Return the compiler shared by every validator in this process."""
    return _PROCESS_SCHEMA_COMPILER
