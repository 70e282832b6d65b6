"""
Enum encode/decode helpers for flat records.

Enum-valued fields travel as their canonical string. ``decode_enum`` is total
and returns ``None`` on no match; ``require_enum`` turns that into an
:class:`InvalidEnumValueError` for ``from_array`` callers.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Type, TypeVar, Union

from ..enums import StringEnum
from ..errors import InvalidEnumValueError
from ..logging import LogContext, get_logger, log_event
from .validation import owner_name

E = TypeVar("E", bound=Enum)

_logger = get_logger(__name__)


def decode_enum(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Return the member of ``enum_cls`` whose value equals ``value``.

    :class:`StringEnum` types decode through their own ``try_from``.
    Members are returned unchanged. Any other input that matches no member,
    including ``None`` and non-hashable values, yields ``None``.
    """
    if issubclass(enum_cls, StringEnum):
        return enum_cls.try_from(value)
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def require_enum(
    enum_cls: Type[E],
    value: Any,
    *,
    field: str,
    owner: Union[type, str],
) -> E:
    """Decode ``value`` or raise :class:`InvalidEnumValueError`."""
    member = decode_enum(enum_cls, value)
    if member is not None:
        return member
    name = owner_name(owner)
    log_event(
        _logger,
        "dto.validation.failed",
        LogContext(dto=name, field=field),
        level=logging.WARNING,
        reason="invalid_enum_value",
        value=repr(value),
        enum=enum_cls.__name__,
    )
    raise InvalidEnumValueError(dto=name, value=value, field=field, enum=enum_cls)


def encode_enum(member: Optional[Enum]) -> Optional[str]:
    """Return the string value of ``member``, or ``None`` when unset."""
    return None if member is None else member.value


__all__ = ["decode_enum", "require_enum", "encode_enum"]
