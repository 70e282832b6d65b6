"""Enumeration parts package; prefer `provider_dto.base.enums` for imports."""

from .string_enum import StringEnum
from .provider_type import ProviderTypeEnum
from .request_authentication_method import RequestAuthenticationMethod

__all__ = ["StringEnum", "ProviderTypeEnum", "RequestAuthenticationMethod"]
