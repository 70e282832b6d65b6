"""
Typed shape of a JSON-Schema-style descriptor for a flat record.

The descriptor is plain data meant for external JSON Schema validators; this
package never validates against it.
"""

from __future__ import annotations

from typing import Any, Dict, List, TypedDict


class SchemaDescriptor(TypedDict):
    """Object schema with per-field descriptions and required keys."""

    type: str
    properties: Dict[str, Dict[str, Any]]
    required: List[str]


__all__ = ["SchemaDescriptor"]
