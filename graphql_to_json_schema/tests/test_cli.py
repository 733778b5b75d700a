#!/usr/bin/env python3

import json
import sys

import pytest
from click.testing import CliRunner

from graphql_to_json_schema.graphql_to_json_schema import graphql_to_json_schema

SDL = """
type Query {
  server: Server!
}

\"\"\"HTTP server\"\"\"
type Server @md {
  port: Int!
  hosts: [String]
}
"""


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SDL)
    return path


class TestCli:
    """Test cases for the command line"""

    def test_writes_json_schema(self, tmp_path, schema_file):
        out = tmp_path / "out" / "config.schema.json"

        result = CliRunner().invoke(graphql_to_json_schema, ["--schema", str(schema_file), "--json", str(out)])

        assert result.exit_code == 0, result.output
        document = json.loads(out.read_text())
        assert document["title"] == "Config"
        assert document["properties"] == {"server": {"$ref": "#/definitions/Server"}}
        assert document["required"] == ["server"]
        assert list(document["definitions"]) == ["Server"]

    def test_writes_markdown(self, tmp_path, schema_file):
        docs = tmp_path / "docs"

        result = CliRunner().invoke(
            graphql_to_json_schema,
            ["--schema", str(schema_file), "--json", str(tmp_path / "s.json"), "--md", str(docs)],
        )

        assert result.exit_code == 0, result.output
        assert [p.name for p in docs.iterdir()] == ["Server.generated.md"]
        assert (docs / "Server.generated.md").read_text() == (
            "HTTP server\n\n* `port` (type: `Int`, required)\n* `hosts` (type: `Array<String>`)\n"
        )

    def test_root_type_option(self, tmp_path, schema_file):
        out = tmp_path / "s.json"

        result = CliRunner().invoke(
            graphql_to_json_schema,
            ["--schema", str(schema_file), "--json", str(out), "--rootType", "Server"],
        )

        assert result.exit_code == 0, result.output
        document = json.loads(out.read_text())
        assert list(document["properties"]) == ["port", "hosts"]
        assert list(document["definitions"]) == ["Query"]

    def test_unknown_root_type_fails(self, tmp_path, schema_file):
        out = tmp_path / "s.json"

        result = CliRunner().invoke(
            graphql_to_json_schema,
            ["--schema", str(schema_file), "--json", str(out), "--rootType", "Nope"],
        )

        assert result.exit_code == 1
        assert "Root type 'Nope'" in result.output
        assert not out.exists()

    def test_invalid_schema_fails(self, tmp_path):
        result = CliRunner().invoke(
            graphql_to_json_schema,
            ["--schema", str(tmp_path / "missing.graphql"), "--json", str(tmp_path / "s.json")],
        )

        assert result.exit_code == 1
        assert "Schema file not found" in result.output

    def test_schema_is_required(self, tmp_path):
        result = CliRunner().invoke(graphql_to_json_schema, ["--json", str(tmp_path / "s.json")])

        assert result.exit_code == 2

    def test_config_file_and_typings(self, tmp_path, schema_file):
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps(
                {
                    "title": "ServerConfig",
                    "typings_command": [sys.executable, "-c", "import sys, json; print(json.load(sys.stdin)['title'])"],
                }
            )
        )
        typings = tmp_path / "types.py"

        result = CliRunner().invoke(
            graphql_to_json_schema,
            [
                "--schema",
                str(schema_file),
                "--json",
                str(tmp_path / "s.json"),
                "--typings",
                str(typings),
                "--config",
                str(config),
            ],
        )

        assert result.exit_code == 0, result.output
        assert typings.read_text().strip() == "ServerConfig"

    def test_multiple_schema_sources(self, tmp_path):
        (tmp_path / "a.graphql").write_text("type Query { user: User }")
        (tmp_path / "b.graphql").write_text("type User @withAdditionalProperties { name: String }")
        out = tmp_path / "s.json"

        result = CliRunner().invoke(
            graphql_to_json_schema,
            [
                "--schema",
                str(tmp_path / "a.graphql"),
                "--schema",
                str(tmp_path / "b.graphql"),
                "--json",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["definitions"]["User"]["additionalProperties"] is True

    def test_several_sources_after_one_schema_flag(self, tmp_path):
        (tmp_path / "a.graphql").write_text("type Query { user: User! }")
        (tmp_path / "b.graphql").write_text("type User { name: String }")
        (tmp_path / "c.graphql").write_text("type Group { users: [User] }")
        out = tmp_path / "s.json"

        result = CliRunner().invoke(
            graphql_to_json_schema,
            [
                "--schema",
                str(tmp_path / "a.graphql"),
                str(tmp_path / "b.graphql"),
                str(tmp_path / "c.graphql"),
                "--json",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        document = json.loads(out.read_text())
        assert document["required"] == ["user"]
        assert list(document["definitions"]) == ["User", "Group"]
