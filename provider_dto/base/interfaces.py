"""
Provider DTO interfaces public surface.

Re-exports the one-class-per-file Protocols under
``provider_dto.base.interfaces_parts``.
"""

from .interfaces_parts.schema_descriptor import SchemaDescriptor
from .interfaces_parts.supports_json_schema import SupportsJsonSchema
from .interfaces_parts.data_transfer_object import DataTransferObject

__all__ = [
    "SchemaDescriptor",
    "SupportsJsonSchema",
    "DataTransferObject",
]
