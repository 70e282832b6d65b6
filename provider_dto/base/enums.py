"""
Enumerations used as DTO field values.

Re-exports the one-class-per-file implementations under
``provider_dto.base.enums_parts``.
"""

from .enums_parts.string_enum import StringEnum
from .enums_parts.provider_type import ProviderTypeEnum
from .enums_parts.request_authentication_method import RequestAuthenticationMethod

__all__ = ["StringEnum", "ProviderTypeEnum", "RequestAuthenticationMethod"]
