"""
Type graph node definitions.

These nodes describe an already-merged GraphQL type system in a
library-independent form. The graph is built once per invocation and is
never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..directives import Directive


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a named type (the innermost layer of a type reference)."""

    name: str = ""


@dataclass(frozen=True)
class ListTypeRef:
    """A "list of" wrapper (`[T]`)."""

    of_type: TypeRef = field(default_factory=NamedTypeRef)


@dataclass(frozen=True)
class RequiredTypeRef:
    """A "required" wrapper (`T!`)."""

    of_type: TypeRef = field(default_factory=NamedTypeRef)


TypeRef = NamedTypeRef | ListTypeRef | RequiredTypeRef


@dataclass(frozen=True)
class FieldDefinition:
    """A field declared on an object or interface type."""

    name: str = ""
    type_ref: TypeRef = field(default_factory=NamedTypeRef)
    description: str | None = None
    directives: frozenset[str] = frozenset()


@dataclass(frozen=True)
class TypeDefinition:
    """Base class for all named type definitions."""

    name: str = ""
    description: str | None = None
    directives: frozenset[str] = frozenset()

    def has_directive(self, directive: Directive) -> bool:
        """Check whether the type declares the given directive."""
        return directive.value in self.directives


@dataclass(frozen=True)
class ScalarTypeDefinition(TypeDefinition):
    """A scalar type (built-in or custom)."""


@dataclass(frozen=True)
class EnumTypeDefinition(TypeDefinition):
    """An enum type with its values in declaration order."""

    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class ObjectTypeDefinition(TypeDefinition):
    """An object type."""

    fields: tuple[FieldDefinition, ...] = ()
    interfaces: tuple[str, ...] = ()  # Names of implemented interfaces


@dataclass(frozen=True)
class InterfaceTypeDefinition(TypeDefinition):
    """An interface type."""

    fields: tuple[FieldDefinition, ...] = ()
    interfaces: tuple[str, ...] = ()


@dataclass(frozen=True)
class UnionTypeDefinition(TypeDefinition):
    """A union type with its members in declaration order."""

    members: tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeGraph:
    """The complete, merged set of type definitions."""

    types: tuple[TypeDefinition, ...] = ()
    directives: tuple[str, ...] = ()  # Declared directive names
    type_map: dict[str, TypeDefinition] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.type_map:
            object.__setattr__(self, "type_map", {t.name: t for t in self.types})

    def get_type(self, name: str) -> TypeDefinition:
        """Get a type definition by name.

        Raises:
            KeyError: If the graph has no type with that name
        """
        return self.type_map[name]

    def object_types(self) -> Iterator[ObjectTypeDefinition]:
        """Iterate over the object types in declaration order."""
        for type_def in self.types:
            if isinstance(type_def, ObjectTypeDefinition):
                yield type_def
