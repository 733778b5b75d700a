"""
Generator tying the phases together.

1. Acquisition: load and merge the schema sources into a TypeGraph
2. Compilation: build the JSON Schema document for the root type
3. Documentation: render Markdown fragments for `@md` types
4. Typings: optionally compile the JSON Schema with an external tool
5. Output: write every artifact atomically
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .compiler import CompiledSchema, SchemaCompiler
from .config import GeneratorConfig
from .markdown import DocFragment, MarkdownRenderer
from .output import AtomicWriter, TypingsCompiler
from .type_graph import TypeGraph, load_type_graph

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Artifacts produced by one generator run."""

    schema: CompiledSchema = field(default_factory=CompiledSchema)
    json_schema: str = ""
    fragments: list[DocFragment] = field(default_factory=list)
    typings: str | None = None


class Generator:
    """Generates the JSON Schema and documentation for a type graph."""

    def __init__(self, graph: TypeGraph, config: GeneratorConfig | None = None):
        self.graph = graph
        self.config = config or GeneratorConfig()

    @classmethod
    def from_sources(cls, sources: Iterable[str], config: GeneratorConfig | None = None) -> Generator:
        """Load schema sources and create a generator for the merged graph."""
        config = config or GeneratorConfig()
        return cls(load_type_graph(sources, timeout=config.fetch_timeout), config)

    def generate(self, with_markdown: bool = False, with_typings: bool = False) -> GenerationResult:
        """
        Run the generation phases.

        Args:
            with_markdown: Render documentation fragments
            with_typings: Compile the JSON Schema with the external typings compiler

        Returns:
            The generated artifacts
        """
        schema = SchemaCompiler(self.graph, self.config).compile()
        result = GenerationResult(schema=schema, json_schema=schema.to_json(indent=self.config.indent))

        if with_markdown:
            result.fragments = MarkdownRenderer(self.graph, self.config).render()
            logger.debug("Rendered %d documentation fragments", len(result.fragments))

        if with_typings:
            result.typings = TypingsCompiler(self.config.typings_command).compile(result.json_schema)

        return result

    def write(
        self,
        json_path: Path,
        typings_path: Path | None = None,
        markdown_dir: Path | None = None,
        writer: AtomicWriter | None = None,
    ) -> GenerationResult:
        """Generate every requested artifact and write it to disk."""
        writer = writer or AtomicWriter()
        result = self.generate(with_markdown=markdown_dir is not None, with_typings=typings_path is not None)

        writer.write(Path(json_path), result.json_schema, "json")
        if typings_path is not None and result.typings is not None:
            writer.write(Path(typings_path), result.typings)
        if markdown_dir is not None:
            for fragment in result.fragments:
                writer.write(Path(markdown_dir) / fragment.file, fragment.content, "markdown")

        return result
