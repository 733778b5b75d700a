"""
Type reference resolver.

Unwraps the list / required layers of a field's declared type.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..type_graph.nodes import ListTypeRef, NamedTypeRef, RequiredTypeRef, TypeRef


@dataclass(frozen=True)
class ResolvedTypeRef:
    """A type reference reduced to its base type name and two flags."""

    base_name: str = ""
    is_list: bool = False  # A list wrapper appears at any depth
    is_required: bool = False  # The outermost wrapper is "required"


def resolve_type_ref(type_ref: TypeRef) -> ResolvedTypeRef:
    """
    Resolve a type reference.

    Only the outermost required wrapper makes the field itself required;
    required-ness of list elements is discarded.

    Examples:
        String!    -> ("String", is_list=False, is_required=True)
        [Int!]     -> ("Int", is_list=True, is_required=False)
        [[Foo]!]!  -> ("Foo", is_list=True, is_required=True)
    """
    is_required = isinstance(type_ref, RequiredTypeRef)
    is_list = False

    current = type_ref
    while not isinstance(current, NamedTypeRef):
        if isinstance(current, ListTypeRef):
            is_list = True
        current = current.of_type

    return ResolvedTypeRef(base_name=current.name, is_list=is_list, is_required=is_required)
