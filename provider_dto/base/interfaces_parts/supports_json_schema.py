"""
Protocol for types that can describe their flat-record shape as a schema.

External dependencies: None.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .schema_descriptor import SchemaDescriptor


@runtime_checkable
class SupportsJsonSchema(Protocol):
    """Structural contract for types exposing ``get_json_schema``."""

    @classmethod
    def get_json_schema(cls) -> SchemaDescriptor:
        """Return the schema of the flat record, independent of any instance."""
        ...
