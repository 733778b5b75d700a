import pytest

from graphql_to_json_schema.compiler import ResolvedTypeRef, resolve_type_ref
from graphql_to_json_schema.type_graph.nodes import ListTypeRef, NamedTypeRef, RequiredTypeRef


@pytest.mark.parametrize(
    "type_ref, expected",
    [
        (NamedTypeRef("String"), ResolvedTypeRef("String", False, False)),
        (RequiredTypeRef(NamedTypeRef("String")), ResolvedTypeRef("String", False, True)),
        (ListTypeRef(NamedTypeRef("Int")), ResolvedTypeRef("Int", True, False)),
        (ListTypeRef(RequiredTypeRef(NamedTypeRef("Int"))), ResolvedTypeRef("Int", True, False)),
        (RequiredTypeRef(ListTypeRef(NamedTypeRef("Int"))), ResolvedTypeRef("Int", True, True)),
        (
            RequiredTypeRef(ListTypeRef(RequiredTypeRef(NamedTypeRef("Foo")))),
            ResolvedTypeRef("Foo", True, True),
        ),
        (
            ListTypeRef(RequiredTypeRef(ListTypeRef(NamedTypeRef("Foo")))),
            ResolvedTypeRef("Foo", True, False),
        ),
    ],
    ids=["String", "String!", "[Int]", "[Int!]", "[Int]!", "[Foo!]!", "[[Foo]!]"],
)
def test_resolve_type_ref(type_ref, expected):
    assert resolve_type_ref(type_ref) == expected
