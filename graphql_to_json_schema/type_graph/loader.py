"""
Schema loader.

Acquires GraphQL schema sources (SDL files, introspection JSON files, remote
endpoints or inline SDL text), merges them into one document together with
the generator directives, and builds the resulting schema.
"""

from __future__ import annotations

import glob
import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import httpx
from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    TypeDefinitionNode,
    build_ast_schema,
    build_client_schema,
    get_introspection_query,
    parse,
    print_ast,
    print_schema,
)

from ..directives import DIRECTIVES
from ..errors import SchemaLoadError
from .builder import build_type_graph
from .nodes import TypeGraph

logger = logging.getLogger(__name__)

SDL_SUFFIXES = {".graphql", ".gql", ".graphqls"}
JSON_SUFFIXES = {".json"}
GLOB_CHARS = set("*?[")


class SchemaLoader:
    """Loads and merges schema sources into a single GraphQL schema."""

    def __init__(self, timeout: float = 30.0, headers: dict[str, str] | None = None):
        """
        Initialize the loader.

        Args:
            timeout: Timeout in seconds for remote introspection requests
            headers: Extra HTTP headers sent to remote endpoints
        """
        self.timeout = timeout
        self.headers = headers or {}

    def load(self, sources: Iterable[str]) -> GraphQLSchema:
        """
        Load every source and build the merged schema.

        Args:
            sources: Paths, glob patterns, URLs or inline SDL text, in merge order

        Returns:
            The merged schema

        Raises:
            SchemaLoadError: If a source cannot be read or parsed, or if the
                merged document is not a valid schema
        """
        documents = [self._parse(DIRECTIVES, "<directives>")]
        for source in sources:
            documents.extend(self._load_source(source))

        document = self._merge(documents)
        try:
            schema = build_ast_schema(document)
        except (GraphQLError, TypeError) as e:
            raise SchemaLoadError(f"Invalid schema: {e}") from e

        logger.info("Loaded schema with %d types", len(schema.type_map))
        return schema

    def _load_source(self, source: str) -> list[DocumentNode]:
        if source.startswith(("http://", "https://")):
            return [self._load_url(source)]

        if GLOB_CHARS & set(source) and "{" not in source:
            matches = sorted(glob.glob(source, recursive=True))
            if not matches:
                raise SchemaLoadError(f"No schema files match pattern: {source}")
            return [self._load_file(Path(match)) for match in matches]

        path = Path(source)
        if self._is_file(path):
            return [self._load_file(path)]

        if path.suffix in SDL_SUFFIXES | JSON_SUFFIXES:
            raise SchemaLoadError(f"Schema file not found: {source}")

        # A single token cannot be SDL, it is a mistyped or missing path
        if len(source.split()) <= 1 and "{" not in source:
            raise SchemaLoadError(f"Schema source is not a file or valid SDL: {source}")

        # Anything else is treated as inline SDL
        return [self._parse(source, "<inline>")]

    @staticmethod
    def _is_file(path: Path) -> bool:
        try:
            return path.is_file()
        except OSError:
            # Inline SDL can be too long to be a valid path
            return False

    def _load_file(self, path: Path) -> DocumentNode:
        logger.info("Loading schema file %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e

        if path.suffix in JSON_SUFFIXES:
            try:
                introspection = json.loads(text)
            except json.JSONDecodeError as e:
                raise SchemaLoadError(f"Invalid JSON in {path}: {e}") from e
            return self._from_introspection(introspection, str(path))

        return self._parse(text, str(path))

    def _load_url(self, url: str) -> DocumentNode:
        logger.info("Fetching schema from %s", url)
        try:
            response = httpx.post(
                url,
                json={"query": get_introspection_query(descriptions=True)},
                headers=self.headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, json.JSONDecodeError) as e:
            raise SchemaLoadError(f"Cannot fetch schema from {url}: {e}") from e

        if isinstance(payload, dict) and payload.get("errors"):
            raise SchemaLoadError(f"Introspection query failed for {url}: {payload['errors']}")
        return self._from_introspection(payload, url)

    def _from_introspection(self, introspection: dict[str, Any], origin: str) -> DocumentNode:
        if not isinstance(introspection, dict):
            kind = type(introspection).__name__
            raise SchemaLoadError(f"Invalid introspection result in {origin}: expected a JSON object, got {kind}")
        data = introspection.get("data", introspection)
        try:
            client_schema = build_client_schema(data)
        except (GraphQLError, TypeError, KeyError) as e:
            raise SchemaLoadError(f"Invalid introspection result in {origin}: {e}") from e
        return self._parse(print_schema(client_schema), origin)

    @staticmethod
    def _parse(text: str, origin: str) -> DocumentNode:
        try:
            return parse(text)
        except GraphQLError as e:
            raise SchemaLoadError(f"Cannot parse schema {origin}: {e.message}") from e

    @staticmethod
    def _merge(documents: list[DocumentNode]) -> DocumentNode:
        """Concatenate documents, collapsing duplicate definitions."""
        definitions = []
        seen_types: dict[str, str] = {}
        seen_directives: set[str] = set()

        for document in documents:
            for definition in document.definitions:
                if isinstance(definition, DirectiveDefinitionNode):
                    name = definition.name.value
                    if name in seen_directives:
                        continue
                    seen_directives.add(name)
                elif isinstance(definition, TypeDefinitionNode):
                    name = definition.name.value
                    printed = print_ast(definition)
                    if name in seen_types:
                        if seen_types[name] != printed:
                            raise SchemaLoadError(f"Conflicting definitions for type '{name}'")
                        logger.debug("Skipping duplicate definition of %s", name)
                        continue
                    seen_types[name] = printed
                definitions.append(definition)

        return DocumentNode(definitions=tuple(definitions))


def load_schema(sources: Iterable[str], timeout: float = 30.0) -> GraphQLSchema:
    """Convenience function to load and merge schema sources."""
    return SchemaLoader(timeout=timeout).load(sources)


def load_type_graph(sources: Iterable[str], timeout: float = 30.0) -> TypeGraph:
    """Load schema sources and convert them to a TypeGraph."""
    return build_type_graph(load_schema(sources, timeout=timeout))
