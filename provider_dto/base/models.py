"""
Provider DTO models public surface.

Re-exports the one-class-per-file implementations under
``provider_dto.base.models_parts``.
"""

from .models_parts.provider_metadata import ProviderMetadata, ProviderMetadataShape

__all__ = [
    "ProviderMetadata",
    "ProviderMetadataShape",
]
