"""
Configuration for the generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DRAFT_04_SCHEMA_URI = "http://json-schema.org/draft-04/schema#"

DEFAULT_TYPINGS_COMMAND = [
    "datamodel-codegen",
    "--input-file-type",
    "jsonschema",
    "--class-name",
    "Config",
]


@dataclass
class GeneratorConfig:
    """Configuration options for schema and documentation generation."""

    # Object type whose fields become the top-level properties
    root_type: str = "Query"

    # Fixed header values of the JSON Schema document
    title: str = "Config"
    schema_uri: str = DRAFT_04_SCHEMA_URI

    # Add "Allowed values: ..." / "Any of: ..." notes to enum and variant nodes
    describe_variants: bool = False

    # Produce an empty top-level schema instead of failing on an unknown root type
    allow_missing_root: bool = False

    # Suffix appended to the type name for documentation files
    markdown_suffix: str = ".generated.md"

    # JSON indentation
    indent: int = 2

    # External command compiling the JSON Schema into type declarations
    typings_command: list[str] = field(default_factory=lambda: list(DEFAULT_TYPINGS_COMMAND))

    # Timeout in seconds for remote schema sources
    fetch_timeout: float = 30.0

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "root_type": self.root_type,
            "title": self.title,
            "schema_uri": self.schema_uri,
            "describe_variants": self.describe_variants,
            "allow_missing_root": self.allow_missing_root,
            "markdown_suffix": self.markdown_suffix,
            "indent": self.indent,
            "typings_command": self.typings_command,
            "fetch_timeout": self.fetch_timeout,
        }
