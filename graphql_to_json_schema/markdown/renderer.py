"""
Markdown documentation renderer.

Renders one fragment per object type flagged with `@md`. Nested object,
interface and union types are expanded inline as indented bullet lists rather
than linked, so a type that is already being expanded further up the chain is
rendered as a back reference instead of being expanded again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import jinja2

from ..compiler.type_resolver import resolve_type_ref
from ..config import GeneratorConfig
from ..directives import Directive
from ..type_graph.nodes import (
    EnumTypeDefinition,
    FieldDefinition,
    InterfaceTypeDefinition,
    ListTypeRef,
    ObjectTypeDefinition,
    RequiredTypeRef,
    TypeGraph,
    TypeRef,
    UnionTypeDefinition,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent.resolve() / "templates" / "markdown"


@dataclass
class DocFragment:
    """A rendered documentation file."""

    file: str = ""
    content: str = ""
    type_name: str = ""


class MarkdownRenderer:
    """Renders documentation fragments for a TypeGraph."""

    def __init__(self, graph: TypeGraph, config: GeneratorConfig | None = None):
        self.graph = graph
        self.config = config or GeneratorConfig()
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.fragment_template = self.jinja_env.get_template("fragment.md.jinja2")

    def render(self) -> list[DocFragment]:
        """Render every documented object type, in declaration order."""
        fragments = []
        for type_def in self.graph.object_types():
            if not type_def.has_directive(Directive.MARKDOWN):
                continue
            logger.debug("Rendering documentation for %s", type_def.name)
            fragments.append(
                DocFragment(
                    file=f"{type_def.name}{self.config.markdown_suffix}",
                    content=self.render_type(type_def),
                    type_name=type_def.name,
                )
            )
        return fragments

    def render_type(self, type_def: ObjectTypeDefinition | InterfaceTypeDefinition) -> str:
        """Render the full fragment for one type."""
        return self.fragment_template.render(
            description=(type_def.description or "").strip(),
            lines=self.render_fields(type_def, 0, (type_def.name,)),
        )

    def render_fields(
        self,
        type_def: ObjectTypeDefinition | InterfaceTypeDefinition,
        level: int,
        chain: tuple[str, ...],
    ) -> list[str]:
        """Render the field lines of a type at the given nesting level."""
        lines = []
        for field_def in type_def.fields:
            lines.extend(self._render_field(field_def, level, chain))
        return lines

    def _render_field(self, field_def: FieldDefinition, level: int, chain: tuple[str, ...]) -> list[str]:
        resolved = resolve_type_ref(field_def.type_ref)
        required = ", required" if resolved.is_required else ""
        description = _one_line(field_def.description)
        line = f"{_indent(level)}* `{field_def.name}` (type: `{self.annotate(field_def.type_ref)}`{required})"
        if description:
            line += f" - {description}"

        return self._expand(line, self.graph.get_type(resolved.base_name), level, chain)

    def _expand(self, line: str, base_def, level: int, chain: tuple[str, ...]) -> list[str]:
        """Append the nested block of an object, interface or union type under its line."""
        if not isinstance(base_def, (ObjectTypeDefinition, InterfaceTypeDefinition, UnionTypeDefinition)):
            return [line]

        if base_def.name in chain:
            logger.debug("Cycle on %s, rendering a back reference", base_def.name)
            return [f"{line}: see `{base_def.name}`"]

        nested_chain = chain + (base_def.name,)
        if isinstance(base_def, (ObjectTypeDefinition, InterfaceTypeDefinition)):
            return [f"{line}:"] + self.render_fields(base_def, level + 1, nested_chain)
        return [f"{line}:"] + self._render_members(base_def, level + 1, nested_chain)

    def _render_members(self, union: UnionTypeDefinition, level: int, chain: tuple[str, ...]) -> list[str]:
        lines = []
        for member_name in union.members:
            member_def = self.graph.get_type(member_name)
            if isinstance(member_def, (ObjectTypeDefinition, InterfaceTypeDefinition, UnionTypeDefinition)):
                line = f"{_indent(level)}* `{member_name}` (type: `{self._annotate_named(member_def)}`)"
                lines.extend(self._expand(line, member_def, level, chain))
            else:
                lines.append(f"{_indent(level)}* `{self._annotate_named(member_def)}`")
        return lines

    def annotate(self, type_ref: TypeRef) -> str:
        """Type annotation of a field: list wrappers become `Array<...>`."""
        if isinstance(type_ref, ListTypeRef):
            return f"Array<{self.annotate(type_ref.of_type)}>"
        if isinstance(type_ref, RequiredTypeRef):
            return self.annotate(type_ref.of_type)
        return self._annotate_named(self.graph.get_type(type_ref.name))

    @staticmethod
    def _annotate_named(type_def) -> str:
        if isinstance(type_def, ObjectTypeDefinition):
            return "object"
        if isinstance(type_def, UnionTypeDefinition):
            return "one of"
        if isinstance(type_def, EnumTypeDefinition):
            return f"String ({' | '.join(type_def.values)})"
        return type_def.name


def _indent(level: int) -> str:
    return "  " * level


def _one_line(text: str | None) -> str:
    """Collapse a (possibly multi-line) description into a single line."""
    return " ".join(text.split()) if text else ""


def render_markdown(graph: TypeGraph, config: GeneratorConfig | None = None) -> list[DocFragment]:
    """Convenience function to render all documentation fragments."""
    return MarkdownRenderer(graph, config).render()
