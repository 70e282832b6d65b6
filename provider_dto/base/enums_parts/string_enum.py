"""
Shared helpers for string-valued enumerations.

Enumerations used as DTO field values are closed sets of canonical strings.
:class:`StringEnum` gives each of them the same decode surface: a total
``try_from`` that returns ``None`` on unknown input and a strict
``from_value`` that raises ``ValueError``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

E = TypeVar("E", bound="StringEnum")


class StringEnum(str, Enum):
    """Base for closed enumerations whose members carry a canonical string."""

    @classmethod
    def values(cls) -> List[str]:
        """Return every member value in declaration order."""
        return [m.value for m in cls]

    @classmethod
    def try_from(cls: Type[E], value: Any) -> Optional[E]:
        """Decode ``value`` into a member, or ``None`` when nothing matches."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return cls._value2member_map_.get(value)  # type: ignore[return-value]

    @classmethod
    def from_value(cls: Type[E], value: Any) -> E:
        """Decode ``value`` into a member.

        Raises:
            ValueError: If ``value`` matches no member.
        """
        member = cls.try_from(value)
        if member is None:
            raise ValueError(f"{value!r} is not a valid {cls.__name__}")
        return member

    @classmethod
    def is_valid_value(cls, value: Any) -> bool:
        return cls.try_from(value) is not None

    def __str__(self) -> str:
        return self.value


__all__ = ["StringEnum"]
