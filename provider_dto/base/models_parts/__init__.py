"""Models parts package public surface.

`provider_dto.base.models` remains the primary stable import path.
"""

from .provider_metadata import ProviderMetadata, ProviderMetadataShape

__all__ = [
    "ProviderMetadata",
    "ProviderMetadataShape",
]
