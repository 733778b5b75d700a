"""
Type graph module.

Contains the type graph nodes, the builder from graphql-core schemas and the
schema loader.
"""

from __future__ import annotations

from .builder import build_type_graph
from .loader import SchemaLoader, load_schema, load_type_graph
from .nodes import (
    EnumTypeDefinition,
    FieldDefinition,
    InterfaceTypeDefinition,
    ListTypeRef,
    NamedTypeRef,
    ObjectTypeDefinition,
    RequiredTypeRef,
    ScalarTypeDefinition,
    TypeDefinition,
    TypeGraph,
    TypeRef,
    UnionTypeDefinition,
)

__all__ = [
    "TypeGraph",
    "TypeDefinition",
    "ScalarTypeDefinition",
    "EnumTypeDefinition",
    "ObjectTypeDefinition",
    "InterfaceTypeDefinition",
    "UnionTypeDefinition",
    "FieldDefinition",
    "TypeRef",
    "NamedTypeRef",
    "ListTypeRef",
    "RequiredTypeRef",
    "SchemaLoader",
    "build_type_graph",
    "load_schema",
    "load_type_graph",
]
