"""
Compiler module.

Contains the type reference resolver, the scalar table, variant expansion
and the JSON Schema compiler.
"""

from __future__ import annotations

from .scalars import SCALARS, map_scalar
from .schema_compiler import CompiledSchema, SchemaCompiler, compile_schema
from .type_resolver import ResolvedTypeRef, resolve_type_ref
from .variants import implementors_of, members_of

__all__ = [
    "SCALARS",
    "map_scalar",
    "CompiledSchema",
    "SchemaCompiler",
    "compile_schema",
    "ResolvedTypeRef",
    "resolve_type_ref",
    "implementors_of",
    "members_of",
]
