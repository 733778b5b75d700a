import json
import sys

import pytest

from graphql_to_json_schema.errors import OutputWriteError, TypingsCompilerError
from graphql_to_json_schema.output import AtomicWriter, TypingsCompiler


class TestAtomicWriter:
    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "docs" / "nested" / "Type.generated.md"

        AtomicWriter().write(path, "* `a` (type: `Int`)\n", "markdown")

        assert path.read_text() == "* `a` (type: `Int`)\n"

    def test_replaces_existing_file(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{}")

        AtomicWriter().write(path, '{"title": "Config"}\n', "json")

        assert json.loads(path.read_text()) == {"title": "Config"}

    def test_invalid_json_keeps_previous_file(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{}")

        with pytest.raises(OutputWriteError, match="not valid"):
            AtomicWriter().write(path, "{broken", "json")

        assert path.read_text() == "{}"
        assert list(tmp_path.iterdir()) == [path]

    def test_json_must_be_an_object(self, tmp_path):
        with pytest.raises(OutputWriteError, match="must be an object"):
            AtomicWriter().write(tmp_path / "schema.json", "[]", "json")

    def test_custom_validator(self, tmp_path):
        seen = []
        writer = AtomicWriter(validate_json=seen.append)

        writer.write(tmp_path / "schema.json", "{}", "json")

        assert seen == ["{}"]


class TestTypingsCompiler:
    def test_compiles_through_stdin(self):
        command = [sys.executable, "-c", "import sys, json; print(sorted(json.load(sys.stdin)))"]

        output = TypingsCompiler(command).compile('{"title": "Config", "type": "object"}')

        assert output.strip() == "['title', 'type']"

    def test_missing_compiler(self):
        compiler = TypingsCompiler(["surely-not-an-installed-compiler-xyz"])

        assert not compiler.is_available()
        with pytest.raises(TypingsCompilerError, match="not found"):
            compiler.compile("{}")

    def test_failing_compiler(self):
        command = [sys.executable, "-c", "import sys; sys.stderr.write('bad schema'); sys.exit(3)"]

        with pytest.raises(TypingsCompilerError, match="status 3: bad schema"):
            TypingsCompiler(command).compile("{}")

    def test_default_command(self):
        assert TypingsCompiler().command[0] == "datamodel-codegen"
