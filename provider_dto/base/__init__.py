"""
Provider DTO Base Package

Exports the data-transfer-object contract, its helpers, the enumerations used
as field values, and the concrete record types:

- Interfaces: structural DTO and schema Protocols
- DTO helpers: required-field validation, enum codec, JSON bridge
- Models: immutable record types implementing the contract
"""

from .interfaces import DataTransferObject, SchemaDescriptor, SupportsJsonSchema
from .dto import (
    decode_enum,
    dto_from_json,
    dto_to_json,
    encode_enum,
    require_enum,
    validate_fields_present,
)
from .enums import ProviderTypeEnum, RequestAuthenticationMethod, StringEnum
from .errors import (
    DataTransferObjectError,
    ErrorCode,
    InvalidEnumValueError,
    MissingFieldError,
)
from .models import ProviderMetadata, ProviderMetadataShape

__all__ = [
    "DataTransferObject",
    "SchemaDescriptor",
    "SupportsJsonSchema",
    "decode_enum",
    "dto_from_json",
    "dto_to_json",
    "encode_enum",
    "require_enum",
    "validate_fields_present",
    "ProviderTypeEnum",
    "RequestAuthenticationMethod",
    "StringEnum",
    "DataTransferObjectError",
    "ErrorCode",
    "InvalidEnumValueError",
    "MissingFieldError",
    "ProviderMetadata",
    "ProviderMetadataShape",
]
