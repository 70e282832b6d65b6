"""
Provider type enumeration.

Classifies where a provider runs: a hosted cloud API, a self-hosted server,
or a client-side runtime.
"""
from __future__ import annotations

from .string_enum import StringEnum


class ProviderTypeEnum(StringEnum):
    """Closed set of provider deployment types."""

    CLOUD = "cloud"
    SERVER = "server"
    CLIENT = "client"

    def is_cloud(self) -> bool:
        return self is ProviderTypeEnum.CLOUD

    def is_server(self) -> bool:
        return self is ProviderTypeEnum.SERVER

    def is_client(self) -> bool:
        return self is ProviderTypeEnum.CLIENT


__all__ = ["ProviderTypeEnum"]
