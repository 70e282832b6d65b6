"""
Data-transfer-object capability contract.

A DTO is an immutable typed value whose only behavior is converting to and
from a flat record: a string-keyed mapping of scalar, enum-string or ``None``
values. The contract is structural; record types satisfy it by providing the
three methods below, without inheriting from a shared base class.

Implementations must:

- call :func:`provider_dto.base.dto.validate_fields_present` in
  ``from_array`` before reading any required key;
- decode enum-valued keys from their string value, raising
  :class:`~provider_dto.base.errors.InvalidEnumValueError` on no match;
- emit every declared key from ``to_array`` (``None`` where unset), with enum
  members rendered as their string value, so that
  ``cls.from_array(obj.to_array()) == obj``.

External dependencies: None. Timeouts and retries are not applicable.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar, runtime_checkable

from .schema_descriptor import SchemaDescriptor

ShapeT = TypeVar("ShapeT", bound=Mapping[str, Any], covariant=True)
DtoT = TypeVar("DtoT", bound="DataTransferObject[Any]")


@runtime_checkable
class DataTransferObject(Protocol[ShapeT]):
    """Bidirectional mapping between a typed record and its flat record."""

    @classmethod
    def from_array(cls: type[DtoT], flat_record: Mapping[str, Any]) -> DtoT:
        """Build an instance from an untrusted flat record."""
        ...

    def to_array(self) -> ShapeT:
        """Return the flat record representation of this instance."""
        ...

    @classmethod
    def get_json_schema(cls) -> SchemaDescriptor:
        """Return the schema describing the flat record shape."""
        ...
