"""
Provider metadata DTO.

Describes one external service provider: its identifier, display name,
deployment type, and how users obtain and present credentials. Instances are
immutable and convert losslessly to and from the flat record

```
{
    "id": str,
    "name": str,
    "description": str | None,
    "type": "cloud" | "server" | "client",
    "credentialsUrl": str | None,
    "authenticationMethod": "api_key" | None,
}
```

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for immutability, value equality and hashing.

Failure modes & side effects
----------------------------
- ``from_array`` raises :class:`MissingFieldError` or
  :class:`InvalidEnumValueError`; no instance is produced in that case.
- Direct construction trusts the caller and raises neither. Pydantic raises
  ``ValidationError`` for values of the wrong type, both on direct
  construction and from ``from_array``.
"""
from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional, Tuple, TypedDict

from pydantic import BaseModel, ConfigDict, Field

from ..dto.enum_codec import encode_enum, require_enum
from ..dto.validation import validate_fields_present
from ..enums import ProviderTypeEnum, RequestAuthenticationMethod
from ..interfaces import SchemaDescriptor


ProviderMetadataShape = TypedDict(
    "ProviderMetadataShape",
    {
        "id": str,
        "name": str,
        "description": Optional[str],
        "type": str,
        "credentialsUrl": Optional[str],
        "authenticationMethod": Optional[str],
    },
)


class ProviderMetadata(BaseModel):
    """Immutable descriptive metadata about a provider.

    Attributes:
        id: Unique provider identifier (e.g., ``"openai"``).
        name: Display name.
        description: Optional free-text description.
        type: Deployment type of the provider.
        credentials_url: Optional URL where users can obtain credentials.
        authentication_method: Optional request authentication method.

    Construction mirrors the flat record loosely: ``id``, ``name`` and
    ``type`` are positional, the rest are optional keywords.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    KEY_ID: ClassVar[str] = "id"
    KEY_NAME: ClassVar[str] = "name"
    KEY_DESCRIPTION: ClassVar[str] = "description"
    KEY_TYPE: ClassVar[str] = "type"
    KEY_CREDENTIALS_URL: ClassVar[str] = "credentialsUrl"
    KEY_AUTHENTICATION_METHOD: ClassVar[str] = "authenticationMethod"
    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = (KEY_ID, KEY_NAME, KEY_TYPE)

    id: str
    name: str
    description: Optional[str] = None
    type: ProviderTypeEnum
    credentials_url: Optional[str] = Field(default=None, alias="credentialsUrl")
    authentication_method: Optional[RequestAuthenticationMethod] = Field(
        default=None, alias="authenticationMethod"
    )

    def __init__(
        self,
        id: str,
        name: str,
        type: ProviderTypeEnum,
        credentials_url: Optional[str] = None,
        authentication_method: Optional[RequestAuthenticationMethod] = None,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(
            id=id,
            name=name,
            description=description,
            type=type,
            credentials_url=credentials_url,
            authentication_method=authentication_method,
        )

    @classmethod
    def from_array(cls, flat_record: Mapping[str, Any]) -> "ProviderMetadata":
        """Build an instance from a flat record.

        ``authenticationMethod`` may be absent or ``None``; both yield
        ``None``. Keys not listed in the schema are ignored.

        Raises:
            MissingFieldError: If ``id``, ``name`` or ``type`` is absent.
            InvalidEnumValueError: If ``type`` or a non-null
                ``authenticationMethod`` is not a recognized value.
            pydantic.ValidationError: If a present value has the wrong type
                (e.g. a non-string ``id``).
        """
        validate_fields_present(flat_record, cls.REQUIRED_KEYS, cls)
        provider_type = require_enum(
            ProviderTypeEnum, flat_record[cls.KEY_TYPE], field=cls.KEY_TYPE, owner=cls
        )
        raw_auth = flat_record.get(cls.KEY_AUTHENTICATION_METHOD)
        auth_method = (
            require_enum(
                RequestAuthenticationMethod,
                raw_auth,
                field=cls.KEY_AUTHENTICATION_METHOD,
                owner=cls,
            )
            if raw_auth is not None
            else None
        )
        return cls(
            flat_record[cls.KEY_ID],
            flat_record[cls.KEY_NAME],
            provider_type,
            credentials_url=flat_record.get(cls.KEY_CREDENTIALS_URL),
            authentication_method=auth_method,
            description=flat_record.get(cls.KEY_DESCRIPTION),
        )

    def to_array(self) -> ProviderMetadataShape:
        """Return the flat record; every key is present, enums as strings."""
        return {
            self.KEY_ID: self.id,
            self.KEY_NAME: self.name,
            self.KEY_DESCRIPTION: self.description,
            self.KEY_TYPE: self.type.value,
            self.KEY_CREDENTIALS_URL: self.credentials_url,
            self.KEY_AUTHENTICATION_METHOD: encode_enum(self.authentication_method),
        }  # type: ignore[return-value]

    @classmethod
    def get_json_schema(cls) -> SchemaDescriptor:
        """Return the JSON Schema describing the flat record."""
        return {
            "type": "object",
            "properties": {
                cls.KEY_ID: {
                    "type": "string",
                    "description": "The provider's unique identifier.",
                },
                cls.KEY_NAME: {
                    "type": "string",
                    "description": "The provider's display name.",
                },
                cls.KEY_DESCRIPTION: {
                    "type": "string",
                    "description": "The provider's description.",
                },
                cls.KEY_TYPE: {
                    "type": "string",
                    "enum": ProviderTypeEnum.values(),
                    "description": "The provider type (cloud, server, or client).",
                },
                cls.KEY_CREDENTIALS_URL: {
                    "type": "string",
                    "description": "The URL where users can get credentials.",
                },
                cls.KEY_AUTHENTICATION_METHOD: {
                    "type": ["string", "null"],
                    "enum": [*RequestAuthenticationMethod.values(), None],
                    "description": "The authentication method.",
                },
            },
            "required": list(cls.REQUIRED_KEYS),
        }


__all__ = [
    "ProviderMetadata",
    "ProviderMetadataShape",
]
