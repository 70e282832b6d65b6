"""provider_dto package

Immutable data-transfer objects describing external service providers, with
lossless conversion to and from flat records and JSON Schema descriptors.

Public API (re-exported):
    - Version: ``__version__``
    - Contract: :class:`DataTransferObject`, :func:`validate_fields_present`
    - Records: :class:`ProviderMetadata`
    - Enumerations: :class:`ProviderTypeEnum`, :class:`RequestAuthenticationMethod`
    - Exceptions: :class:`MissingFieldError`, :class:`InvalidEnumValueError`,
      :class:`DataTransferObjectError`, :class:`ErrorCode`
"""

from .base import (
    DataTransferObject,
    DataTransferObjectError,
    ErrorCode,
    InvalidEnumValueError,
    MissingFieldError,
    ProviderMetadata,
    ProviderMetadataShape,
    ProviderTypeEnum,
    RequestAuthenticationMethod,
    SchemaDescriptor,
    SupportsJsonSchema,
    dto_from_json,
    dto_to_json,
    validate_fields_present,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DataTransferObject",
    "SchemaDescriptor",
    "SupportsJsonSchema",
    "validate_fields_present",
    "dto_from_json",
    "dto_to_json",
    "ProviderMetadata",
    "ProviderMetadataShape",
    "ProviderTypeEnum",
    "RequestAuthenticationMethod",
    "DataTransferObjectError",
    "ErrorCode",
    "InvalidEnumValueError",
    "MissingFieldError",
]
