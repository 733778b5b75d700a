"""
JSON Schema compiler.

Walks every object type of a TypeGraph: the root type's fields become the
top-level properties, every other object type becomes a named definition.
Object types are always referenced through `$ref` and never inlined, which
keeps self-referencing and mutually-referencing types finite.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from ..config import DRAFT_04_SCHEMA_URI, GeneratorConfig
from ..directives import Directive
from ..errors import RootTypeNotFoundError
from ..type_graph.nodes import (
    EnumTypeDefinition,
    FieldDefinition,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeGraph,
    UnionTypeDefinition,
)
from .scalars import map_scalar, unknown_object
from .type_resolver import resolve_type_ref
from .variants import implementors_of, members_of

logger = logging.getLogger(__name__)

DEFINITIONS_PREFIX = "#/definitions/"


@dataclass
class CompiledSchema:
    """The compiled top-level schema and its named definitions."""

    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    additional_properties: bool = False
    definitions: dict[str, dict[str, Any]] = field(default_factory=dict)  # type name -> schema
    title: str = "Config"
    schema_uri: str = DRAFT_04_SCHEMA_URI

    def to_json_schema(self) -> dict[str, Any]:
        """Build the JSON Schema document.

        An empty `required` list is omitted, draft-04 requires at least one entry.
        """
        document: dict[str, Any] = {
            "$schema": self.schema_uri,
            "title": self.title,
            "type": "object",
            "properties": self.properties,
        }
        if self.required:
            document["required"] = self.required
        document["additionalProperties"] = self.additional_properties
        document["definitions"] = self.definitions
        return document

    def to_json(self, indent: int = 2) -> str:
        """Serialize the document, keeping declaration order."""
        return json.dumps(self.to_json_schema(), indent=indent) + "\n"


class SchemaCompiler:
    """Compiles a TypeGraph into a JSON Schema document."""

    def __init__(self, graph: TypeGraph, config: GeneratorConfig | None = None):
        """
        Initialize the compiler.

        Args:
            graph: The merged type graph
            config: Generation options (defaults if omitted)
        """
        self.graph = graph
        self.config = config or GeneratorConfig()

    def compile(self, root_type: str | None = None) -> CompiledSchema:
        """
        Compile the graph.

        Args:
            root_type: Name of the root object type (defaults to the configured one)

        Returns:
            The compiled schema

        Raises:
            RootTypeNotFoundError: If no object type is named `root_type` and
                the configuration does not allow a missing root
        """
        root_type = root_type or self.config.root_type
        compiled = CompiledSchema(title=self.config.title, schema_uri=self.config.schema_uri)
        found_root = False

        for type_def in self.graph.object_types():
            properties, required = self._build_properties(type_def)
            if type_def.name == root_type:
                found_root = True
                compiled.properties = properties
                compiled.required = required
                compiled.additional_properties = False
                continue

            compiled.definitions[type_def.name] = self._build_definition(type_def, properties, required)

        if not found_root:
            if not self.config.allow_missing_root:
                raise RootTypeNotFoundError(root_type)
            logger.warning("Root type %s not found, top-level schema is empty", root_type)

        logger.debug("Compiled %d definitions for root type %s", len(compiled.definitions), root_type)
        return compiled

    def resolve_field(self, field_def: FieldDefinition) -> dict[str, Any]:
        """Build the schema node for a single field."""
        resolved = resolve_type_ref(field_def.type_ref)
        node = self.resolve_type(resolved.base_name)
        note = node.pop("description", None)

        if resolved.is_list:
            if note is not None:
                node = _with_description(node, note)
            node = {"type": "array", "items": node}

        description = _merge_descriptions(field_def.description, note)
        if description is not None:
            node = _with_description(node, description)
        return node

    def resolve_type(self, type_name: str) -> dict[str, Any]:
        """Build the schema node for a named type (no list wrapping)."""
        type_def = self.graph.get_type(type_name)

        if isinstance(type_def, ScalarTypeDefinition):
            return map_scalar(type_def.name) or unknown_object()

        if isinstance(type_def, EnumTypeDefinition):
            node: dict[str, Any] = {"type": "string", "enum": list(type_def.values)}
            if self.config.describe_variants:
                node = _with_description(node, f"Allowed values: {', '.join(type_def.values)}")
            return node

        if isinstance(type_def, ObjectTypeDefinition):
            return {"$ref": f"{DEFINITIONS_PREFIX}{type_def.name}"}

        if isinstance(type_def, InterfaceTypeDefinition):
            return self._any_of(implementors_of(self.graph, type_def.name))

        if isinstance(type_def, UnionTypeDefinition):
            return self._any_of(members_of(self.graph, type_def.name))

        return unknown_object()

    def _any_of(self, type_names: list[str]) -> dict[str, Any]:
        node: dict[str, Any] = {"anyOf": [self.resolve_type(name) for name in type_names]}
        if self.config.describe_variants:
            node = _with_description(node, f"Any of: {', '.join(type_names)}")
        return node

    def _build_properties(self, type_def: ObjectTypeDefinition) -> tuple[dict[str, dict[str, Any]], list[str]]:
        properties = {}
        required = []
        for field_def in type_def.fields:
            properties[field_def.name] = self.resolve_field(field_def)
            if resolve_type_ref(field_def.type_ref).is_required:
                required.append(field_def.name)
        return properties, required

    def _build_definition(
        self,
        type_def: ObjectTypeDefinition,
        properties: dict[str, dict[str, Any]],
        required: list[str],
    ) -> dict[str, Any]:
        definition: dict[str, Any] = {
            "title": type_def.name,
            "type": "object",
            "properties": properties,
        }
        if required:
            definition["required"] = required
        definition["additionalProperties"] = type_def.has_directive(Directive.ADDITIONAL_PROPERTIES)
        return definition


def _with_description(node: dict[str, Any], description: str) -> dict[str, Any]:
    return {"description": description, **{k: v for k, v in node.items() if k != "description"}}


def _merge_descriptions(own: str | None, note: str | None) -> str | None:
    """Combine a field description with the note of its type: "own (note)"."""
    if own and note:
        return f"{own} ({note})"
    return own or note


def compile_schema(graph: TypeGraph, root_type: str = "Query", config: GeneratorConfig | None = None) -> CompiledSchema:
    """Convenience function to compile a graph for a root type."""
    return SchemaCompiler(graph, config).compile(root_type)
