from graphql_to_json_schema.compiler import SCALARS, implementors_of, map_scalar, members_of
from graphql_to_json_schema.type_graph.nodes import (
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    TypeGraph,
    UnionTypeDefinition,
)


def _graph():
    return TypeGraph(
        types=(
            InterfaceTypeDefinition(name="Node"),
            InterfaceTypeDefinition(name="Named"),
            ObjectTypeDefinition(name="B", interfaces=("Node",)),
            ObjectTypeDefinition(name="A", interfaces=("Named", "Node")),
            ObjectTypeDefinition(name="C", interfaces=("Named",)),
            UnionTypeDefinition(name="U", members=("C", "A", "B")),
        )
    )


class TestVariantExpansion:
    def test_implementors_in_declaration_order(self):
        assert implementors_of(_graph(), "Node") == ["B", "A"]
        assert implementors_of(_graph(), "Named") == ["A", "C"]

    def test_interface_without_implementors(self):
        graph = TypeGraph(types=(InterfaceTypeDefinition(name="Lonely"),))
        assert implementors_of(graph, "Lonely") == []

    def test_union_members_keep_declared_order(self):
        assert members_of(_graph(), "U") == ["C", "A", "B"]


class TestScalarMapping:
    def test_builtin_scalars(self):
        assert map_scalar("String") == {"type": "string"}
        assert map_scalar("ID") == {"type": "string"}
        assert map_scalar("Boolean") == {"type": "boolean"}
        assert map_scalar("Float") == {"type": "number"}
        assert map_scalar("Int") == {"type": "integer"}

    def test_json_scalar_is_open_object(self):
        assert map_scalar("JSON") == {"type": "object", "properties": {}}

    def test_unmapped_scalar(self):
        assert map_scalar("DateTime") is None

    def test_returns_fresh_nodes(self):
        node = map_scalar("String")
        node["description"] = "changed"
        assert map_scalar("String") == {"type": "string"}
        assert SCALARS["String"] == "string"
