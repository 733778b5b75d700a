"""
Variant expansion for interface and union types.
"""

from __future__ import annotations

from ..type_graph.nodes import TypeGraph, UnionTypeDefinition


def implementors_of(graph: TypeGraph, interface_name: str) -> list[str]:
    """Names of the object types implementing an interface, in declaration order.

    An interface without implementors yields an empty list.
    """
    return [type_def.name for type_def in graph.object_types() if interface_name in type_def.interfaces]


def members_of(graph: TypeGraph, union_name: str) -> list[str]:
    """Declared members of a union, order preserved."""
    union = graph.get_type(union_name)
    if not isinstance(union, UnionTypeDefinition):
        return []
    return list(union.members)
