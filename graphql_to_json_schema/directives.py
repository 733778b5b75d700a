"""
Directives recognised by the generator.

The SDL below is merged into every acquired schema so that user schemas can
apply the directives without declaring them.
"""

from __future__ import annotations

from enum import Enum


class Directive(str, Enum):
    """Object-level directives that toggle generator behaviour."""

    MARKDOWN = "md"  # Render a documentation fragment for this type
    ADDITIONAL_PROPERTIES = "withAdditionalProperties"  # Allow extra fields in the definition


DIRECTIVES = """
directive @md on OBJECT
directive @withAdditionalProperties on OBJECT
"""
