"""Schema compilation exports."""

from .compilation_errors import UnknownDefinitionError
from .compiled_schema import CompiledSchemaUnit
from .schema_cache import CacheKey, SchemaCache
from .schema_compiler import (
    CompileDefinition,
    SchemaCompiler,
    compile_definition,
    process_schema_compiler,
)
from .swagger_dialect import SwaggerDialect

__all__ = [
    "CacheKey",
    "CompileDefinition",
    "CompiledSchemaUnit",
    "SchemaCache",
    "SchemaCompiler",
    "SwaggerDialect",
    "UnknownDefinitionError",
    "compile_definition",
    "process_schema_compiler",
]
