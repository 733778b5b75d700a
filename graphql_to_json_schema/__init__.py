"""GraphQL to JSON Schema Generator

A Python package for deriving a JSON Schema configuration document and
Markdown documentation from GraphQL type definitions.
"""

__version__ = "1.0.0"

from .compiler import CompiledSchema, SchemaCompiler, compile_schema
from .config import GeneratorConfig
from .directives import DIRECTIVES, Directive
from .errors import (
    GraphQLToJsonSchemaError,
    OutputWriteError,
    RootTypeNotFoundError,
    SchemaLoadError,
    TypingsCompilerError,
)
from .generator import GenerationResult, Generator
from .markdown import DocFragment, MarkdownRenderer, render_markdown
from .type_graph import SchemaLoader, TypeGraph, build_type_graph, load_schema, load_type_graph

__all__ = [
    "Generator",
    "GenerationResult",
    "GeneratorConfig",
    "SchemaCompiler",
    "CompiledSchema",
    "compile_schema",
    "MarkdownRenderer",
    "DocFragment",
    "render_markdown",
    "TypeGraph",
    "SchemaLoader",
    "build_type_graph",
    "load_schema",
    "load_type_graph",
    "Directive",
    "DIRECTIVES",
    "GraphQLToJsonSchemaError",
    "SchemaLoadError",
    "RootTypeNotFoundError",
    "TypingsCompilerError",
    "OutputWriteError",
]
