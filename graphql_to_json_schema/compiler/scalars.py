"""
Scalar mapping from GraphQL scalar names to JSON Schema primitives.
"""

from __future__ import annotations

from typing import Any

SCALARS: dict[str, str] = {
    "String": "string",
    "ID": "string",
    "Boolean": "boolean",
    "Float": "number",
    "Int": "integer",
    "JSON": "object",
}

UNKNOWN_OBJECT_NOTE = "Unknown object"


def map_scalar(name: str) -> dict[str, Any] | None:
    """
    Map a scalar name to its JSON Schema node.

    Returns:
        A fresh schema node, or None if the scalar has no table entry
    """
    json_type = SCALARS.get(name)
    if json_type is None:
        return None
    if json_type == "object":
        return {"type": "object", "properties": {}}
    return {"type": json_type}


def unknown_object() -> dict[str, Any]:
    """Schema node for types that cannot be represented more precisely."""
    return {"description": UNKNOWN_OBJECT_NOTE, "type": "object", "properties": {}}
