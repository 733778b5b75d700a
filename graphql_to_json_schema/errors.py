"""
Exceptions raised by the generator.
"""

from __future__ import annotations


class GraphQLToJsonSchemaError(Exception):
    """Base class for all generator errors."""


class SchemaLoadError(GraphQLToJsonSchemaError):
    """Raised when schema sources cannot be acquired or merged.

    This can happen when:
    - A source file is missing, unreadable or not valid SDL / JSON
    - A remote endpoint is unreachable or the introspection query fails
    - Two sources define the same type differently
    - The merged document is not a valid schema
    """


class RootTypeNotFoundError(GraphQLToJsonSchemaError):
    """Raised when the requested root type is not an object type of the graph."""

    def __init__(self, root_type: str):
        super().__init__(f"Root type '{root_type}' is not defined as an object type in the schema")
        self.root_type = root_type


class TypingsCompilerError(GraphQLToJsonSchemaError):
    """Raised when the external typings compiler is missing or fails."""


class OutputWriteError(GraphQLToJsonSchemaError):
    """Raised when an output file cannot be written or fails validation."""
