"""
Type graph builder.

Converts a graphql-core `GraphQLSchema` into a `TypeGraph`. Types keep the
order in which the schema lists them (user types in declaration order);
introspection types are skipped.
"""

from __future__ import annotations

import logging
from typing import Any

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    is_introspection_type,
)

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

logger = logging.getLogger(__name__)


def build_type_graph(schema: GraphQLSchema) -> TypeGraph:
    """
    Build a TypeGraph from a graphql-core schema.

    Args:
        schema: A built (and already validated) GraphQL schema

    Returns:
        The equivalent TypeGraph
    """
    types = []
    for graphql_type in schema.type_map.values():
        if is_introspection_type(graphql_type):
            continue
        type_def = _build_type(graphql_type)
        if type_def is not None:
            types.append(type_def)

    directives = tuple(directive.name for directive in schema.directives)
    logger.debug("Built type graph with %d types", len(types))
    return TypeGraph(types=tuple(types), directives=directives)


def _build_type(graphql_type: GraphQLNamedType) -> TypeDefinition | None:
    name = graphql_type.name
    description = graphql_type.description
    directives = _type_directives(graphql_type)

    if isinstance(graphql_type, GraphQLScalarType):
        return ScalarTypeDefinition(name=name, description=description, directives=directives)

    if isinstance(graphql_type, GraphQLEnumType):
        return EnumTypeDefinition(
            name=name,
            description=description,
            directives=directives,
            values=tuple(graphql_type.values),
        )

    if isinstance(graphql_type, GraphQLObjectType):
        return ObjectTypeDefinition(
            name=name,
            description=description,
            directives=directives,
            fields=_build_fields(graphql_type.fields),
            interfaces=tuple(i.name for i in graphql_type.interfaces),
        )

    if isinstance(graphql_type, GraphQLInterfaceType):
        return InterfaceTypeDefinition(
            name=name,
            description=description,
            directives=directives,
            fields=_build_fields(graphql_type.fields),
            interfaces=tuple(i.name for i in graphql_type.interfaces),
        )

    if isinstance(graphql_type, GraphQLUnionType):
        return UnionTypeDefinition(
            name=name,
            description=description,
            directives=directives,
            members=tuple(t.name for t in graphql_type.types),
        )

    # Input object types have no place in the generated outputs
    return None


def _build_fields(fields: dict[str, GraphQLField]) -> tuple[FieldDefinition, ...]:
    return tuple(
        FieldDefinition(
            name=field_name,
            type_ref=_build_type_ref(graphql_field.type),
            description=graphql_field.description,
            directives=_directive_names(graphql_field.ast_node),
        )
        for field_name, graphql_field in fields.items()
    )


def _build_type_ref(graphql_type: Any) -> TypeRef:
    if isinstance(graphql_type, GraphQLNonNull):
        return RequiredTypeRef(of_type=_build_type_ref(graphql_type.of_type))
    if isinstance(graphql_type, GraphQLList):
        return ListTypeRef(of_type=_build_type_ref(graphql_type.of_type))
    return NamedTypeRef(name=graphql_type.name)


def _type_directives(graphql_type: GraphQLNamedType) -> frozenset[str]:
    names = set(_directive_names(graphql_type.ast_node))
    for extension_node in graphql_type.extension_ast_nodes or ():
        names.update(_directive_names(extension_node))
    return frozenset(names)


def _directive_names(ast_node: Any) -> frozenset[str]:
    if ast_node is None:
        return frozenset()
    return frozenset(d.name.value for d in getattr(ast_node, "directives", None) or ())
