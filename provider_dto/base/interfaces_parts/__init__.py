"""Interfaces (Protocols) split into single-class modules.

``provider_dto.base.interfaces`` re-exports a stable API from here.
"""

from .schema_descriptor import SchemaDescriptor
from .supports_json_schema import SupportsJsonSchema
from .data_transfer_object import DataTransferObject

__all__ = [
    "SchemaDescriptor",
    "SupportsJsonSchema",
    "DataTransferObject",
]
